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


"""Scoped keys for compute resources.

A compute resource is addressed either globally, within a region or within a
zone. A :class:`Key` carries the resource name plus at most one of the zone or
region; its scope is derived from which location field is populated.
"""

# pytype: skip-file

from enum import Enum
from typing import Dict
from typing import NamedTuple

import regex

__all__ = [
    'KeyType',
    'Key',
    'global_key',
    'regional_key',
    'zonal_key',
    'keys_to_map',
]

# Zone and region names, e.g. 'us-central1' or 'us-central1-b'.
_LOCATION_PATTERN = r'[a-z](?:[-a-z0-9]+)?'


class KeyType(Enum):
  """Scope of a :class:`Key`.

  Members:
    - ZONAL: The resource lives in a single zone.
    - REGIONAL: The resource lives in a single region.
    - GLOBAL: The resource is not bound to a location.
  """
  ZONAL = 'zonal'
  REGIONAL = 'regional'
  GLOBAL = 'global'


class Key(NamedTuple):
  """Identifies a compute resource by name and optional location.

  At most one of ``zone`` and ``region`` should be set. Unset location fields
  are empty strings, so keys compare and hash structurally.

  Attributes:
    name: Name of the resource.
    zone: Zone of a zonal resource, otherwise ''.
    region: Region of a regional resource, otherwise ''.
  """
  name: str
  zone: str = ''
  region: str = ''

  def type(self) -> KeyType:
    """Returns the scope of this key."""
    if self.zone:
      return KeyType.ZONAL
    if self.region:
      return KeyType.REGIONAL
    return KeyType.GLOBAL

  def valid(self) -> bool:
    """Returns True if the key has a consistent scope and location name."""
    if self.zone and self.region:
      return False
    if self.region:
      return regex.fullmatch(_LOCATION_PATTERN, self.region) is not None
    if self.zone:
      return regex.fullmatch(_LOCATION_PATTERN, self.zone) is not None
    return True

  def __str__(self):
    key_type = self.type()
    if key_type == KeyType.ZONAL:
      return 'Key{"%s", zone: "%s"}' % (self.name, self.zone)
    if key_type == KeyType.REGIONAL:
      return 'Key{"%s", region: "%s"}' % (self.name, self.region)
    return 'Key{"%s"}' % self.name


def global_key(name: str) -> Key:
  return Key(name=name)


def regional_key(name: str, region: str) -> Key:
  return Key(name=name, region=region)


def zonal_key(name: str, zone: str) -> Key:
  return Key(name=name, zone=zone)


def keys_to_map(*keys: Key) -> Dict[Key, bool]:
  """Returns a lookup dictionary with an entry for each of the given keys."""
  return {k: True for k in keys}
