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


"""Root URLs of the compute API, per API version.

Self links are rooted at ``<domain>/compute/<path>`` where ``<path>`` is
``v1``, ``alpha`` or ``beta``. The process-wide endpoints default to
:data:`DEFAULT_API_DOMAIN` and are replaced with :func:`set_api_domain`.

:func:`set_api_domain` is not synchronized. Call it once while the process
starts, before any thread renders self links. Code that needs a different
domain at runtime should build its own :class:`ApiEndpoints` and pass it to
:func:`gce_compute.cloud.utils.self_link`.
"""

# pytype: skip-file

import logging

from gce_compute.meta.version import Version

__all__ = [
    'DEFAULT_API_DOMAIN',
    'INVALID_PREFIX',
    'ApiEndpoints',
    'get_api_endpoints',
    'set_api_domain',
]

_LOGGER = logging.getLogger(__name__)

DEFAULT_API_DOMAIN = 'https://www.googleapis.com'

# Returned in place of a prefix for versions without an endpoint.
INVALID_PREFIX = 'invalid-prefix'

_VERSION_PATHS = {
    Version.GA: 'v1',
    Version.ALPHA: 'alpha',
    Version.BETA: 'beta',
}


class ApiEndpoints(object):
  """The version-specific URL prefixes derived from one API domain."""
  def __init__(self, domain=DEFAULT_API_DOMAIN):
    self._domain = domain
    self._prefixes = {
        version: '%s/compute/%s' % (domain, path)
        for version, path in _VERSION_PATHS.items()
    }

  @property
  def domain(self):
    return self._domain

  @property
  def ga_prefix(self):
    return self._prefixes[Version.GA]

  @property
  def alpha_prefix(self):
    return self._prefixes[Version.ALPHA]

  @property
  def beta_prefix(self):
    return self._prefixes[Version.BETA]

  def prefix(self, version):
    """Returns the URL prefix for ``version``.

    Args:
      version: A :class:`~gce_compute.meta.version.Version` or its string
        value.

    Returns:
      The prefix, or :data:`INVALID_PREFIX` if the version is unknown.
    """
    try:
      version = Version(version)
    except ValueError:
      return INVALID_PREFIX
    return self._prefixes[version]

  def __repr__(self):
    return 'ApiEndpoints(%r)' % self._domain

  def __eq__(self, other):
    return type(self) == type(other) and self._domain == other._domain

  def __hash__(self):
    return hash(self._domain)


_api_endpoints = ApiEndpoints()


def get_api_endpoints():
  """Returns the process-wide :class:`ApiEndpoints`."""
  return _api_endpoints


def set_api_domain(domain):
  """Sets the root of the URL for the API, e.g. 'https://www.googleapis.com'.

  All three version prefixes are replaced together.
  """
  global _api_endpoints
  _api_endpoints = ApiEndpoints(domain)
  _LOGGER.info('Compute API domain set to %s', domain)
