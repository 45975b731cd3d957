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


"""Unit tests for the compute API endpoints."""

# pytype: skip-file

import logging
import unittest

from gce_compute.cloud import endpoints
from gce_compute.meta.version import Version


class ApiEndpointsTest(unittest.TestCase):
  def test_default_prefixes(self):
    api = endpoints.ApiEndpoints()
    self.assertEqual(api.domain, 'https://www.googleapis.com')
    self.assertEqual(api.ga_prefix, 'https://www.googleapis.com/compute/v1')
    self.assertEqual(
        api.alpha_prefix, 'https://www.googleapis.com/compute/alpha')
    self.assertEqual(api.beta_prefix, 'https://www.googleapis.com/compute/beta')

  def test_prefix(self):
    api = endpoints.ApiEndpoints('https://example.com')
    self.assertEqual(api.prefix(Version.GA), 'https://example.com/compute/v1')
    self.assertEqual(api.prefix('alpha'), 'https://example.com/compute/alpha')
    self.assertEqual(api.prefix('v1'), endpoints.INVALID_PREFIX)
    self.assertEqual(api.prefix(None), endpoints.INVALID_PREFIX)

  def test_equality(self):
    self.assertEqual(
        endpoints.ApiEndpoints('https://a.com'),
        endpoints.ApiEndpoints('https://a.com'))
    self.assertNotEqual(
        endpoints.ApiEndpoints('https://a.com'),
        endpoints.ApiEndpoints('https://b.com'))


class SetApiDomainTest(unittest.TestCase):
  def test_default_domain(self):
    self.assertEqual(
        endpoints.get_api_endpoints(),
        endpoints.ApiEndpoints(endpoints.DEFAULT_API_DOMAIN))

  def test_set_api_domain(self):
    with self.assertLogs(endpoints.__name__, level='INFO') as logs:
      endpoints.set_api_domain('https://example.com')
    api = endpoints.get_api_endpoints()
    self.assertEqual(api.ga_prefix, 'https://example.com/compute/v1')
    self.assertEqual(api.alpha_prefix, 'https://example.com/compute/alpha')
    self.assertEqual(api.beta_prefix, 'https://example.com/compute/beta')
    self.assertIn('https://example.com', logs.output[0])

  def test_previous_endpoints_unchanged(self):
    before = endpoints.get_api_endpoints()
    endpoints.set_api_domain('https://example.com')
    self.assertEqual(before.ga_prefix, 'https://www.googleapis.com/compute/v1')


if __name__ == '__main__':
  logging.getLogger().setLevel(logging.INFO)
  unittest.main()
