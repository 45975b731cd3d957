#
# Licensed to the Apache Software Foundation (ASF) under one or more
# contributor license agreements.  See the NOTICE file distributed with
# this work for additional information regarding copyright ownership.
# The ASF licenses this file to You under the Apache License, Version 2.0
# (the "License"); you may not use this file except in compliance with
# the License.  You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#


"""GCE compute resource identifiers setup file."""

import os
import sys
import warnings

import setuptools


def get_version():
  global_names = {}
  exec(  # pylint: disable=exec-used
      open(os.path.join(
          os.path.dirname(os.path.abspath(__file__)),
          'gce_compute/version.py')
          ).read(),
      global_names
  )
  return global_names['__version__']


PACKAGE_NAME = 'gce-compute-ids'
PACKAGE_VERSION = get_version()
PACKAGE_DESCRIPTION = 'Compute Engine resource identifiers and URLs'
PACKAGE_KEYWORDS = 'gce compute resource url self-link'
PACKAGE_LONG_DESCRIPTION = '''
Parses Compute Engine resource URLs, relative resource names and resource
paths into structured identifiers, and renders identifiers back into those
forms for the GA, alpha and beta compute APIs.
'''

python_requires = '>=3.8'

if sys.version_info.major == 3 and sys.version_info.minor >= 14:
  warnings.warn(
      'This version of gce-compute-ids has not been sufficiently tested on '
      'Python %s.%s. You may encounter bugs or missing features.' %
      (sys.version_info.major, sys.version_info.minor))

if __name__ == '__main__':
  # Keep all dependencies inlined in the setup call, otherwise Dependabot won't
  # be able to parse it.
  setuptools.setup(
      name=PACKAGE_NAME,
      version=PACKAGE_VERSION,
      description=PACKAGE_DESCRIPTION,
      long_description=PACKAGE_LONG_DESCRIPTION,
      keywords=PACKAGE_KEYWORDS,
      packages=setuptools.find_packages(include=['gce_compute*']),
      install_requires=[
          'google-apitools>=0.5.31,<0.5.33',
          'regex>=2020.6.8',
      ],
      python_requires=python_requires,
      extras_require={
          'test': [
              'hypothesis>5.0.0',
              'mock>=1.0.1,<6.0.0',
              'parameterized>=0.7.1,<0.10.0',
              'pyhamcrest>=1.9,!=1.10.0,<3.0.0',
              'pytest>=7.1.2',
          ],
      },
      zip_safe=False,
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: Apache Software License',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python :: 3',
          'Topic :: Software Development :: Libraries',
      ],
      license='Apache License, Version 2.0',
  )
