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


"""Unit tests for scoped keys and API versions."""

# pytype: skip-file

import pickle
import unittest

from parameterized import parameterized

from gce_compute.meta import key as key_module
from gce_compute.meta.key import Key
from gce_compute.meta.key import KeyType
from gce_compute.meta.version import ALL_VERSIONS
from gce_compute.meta.version import Version


class KeyTest(unittest.TestCase):
  def test_constructors(self):
    self.assertEqual(key_module.global_key('fw'), Key('fw'))
    self.assertEqual(
        key_module.regional_key('addr', 'us-central1'),
        Key('addr', region='us-central1'))
    self.assertEqual(
        key_module.zonal_key('vm', 'us-central1-b'),
        Key('vm', zone='us-central1-b'))

  @parameterized.expand([
      (Key('fw'), KeyType.GLOBAL),
      (Key('addr', region='r1'), KeyType.REGIONAL),
      (Key('vm', zone='z1'), KeyType.ZONAL),
      # Zone wins when both are set.
      (Key('vm', zone='z1', region='r1'), KeyType.ZONAL),
  ])
  def test_type(self, key, expected):
    self.assertEqual(key.type(), expected)

  @parameterized.expand([
      (Key('fw'), True),
      (Key('addr', region='us-central1'), True),
      (Key('vm', zone='us-central1-b'), True),
      (Key('vm', zone='a'), True),
      (Key('vm', zone='z1', region='r1'), False),
      (Key('vm', zone='Us-central1'), False),
      (Key('vm', region='1region'), False),
      (Key('vm', region='us_central1'), False),
  ])
  def test_valid(self, key, expected):
    self.assertEqual(key.valid(), expected)

  @parameterized.expand([
      (Key('fw'), 'Key{"fw"}'),
      (Key('addr', region='r1'), 'Key{"addr", region: "r1"}'),
      (Key('vm', zone='z1'), 'Key{"vm", zone: "z1"}'),
  ])
  def test_str(self, key, expected):
    self.assertEqual(str(key), expected)

  def test_structural_equality(self):
    self.assertEqual(Key('vm', zone='z1'), key_module.zonal_key('vm', 'z1'))
    self.assertNotEqual(Key('vm', zone='z1'), Key('vm', region='z1'))
    self.assertEqual(hash(Key('fw')), hash(key_module.global_key('fw')))

  def test_immutable(self):
    key = Key('vm', zone='z1')
    with self.assertRaises(AttributeError):
      key.zone = 'z2'

  def test_pickle(self):
    key = Key('vm', zone='z1')
    self.assertEqual(pickle.loads(pickle.dumps(key)), key)

  def test_keys_to_map(self):
    keys = key_module.keys_to_map(
        Key('fw'), Key('vm', zone='z1'), Key('fw'))
    self.assertEqual(keys, {Key('fw'): True, Key('vm', zone='z1'): True})
    self.assertIn(key_module.zonal_key('vm', 'z1'), keys)
    self.assertNotIn(key_module.zonal_key('vm', 'z2'), keys)


class VersionTest(unittest.TestCase):
  def test_values(self):
    self.assertEqual([v.value for v in ALL_VERSIONS], ['ga', 'alpha', 'beta'])

  def test_from_string(self):
    self.assertIs(Version('beta'), Version.BETA)
    self.assertEqual(Version.ALPHA, 'alpha')
    with self.assertRaises(ValueError):
      Version('v1')


if __name__ == '__main__':
  unittest.main()
