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


"""Parsing and formatting of compute resource URLs.

A compute resource is identified by its project, its resource type (the
collection name, e.g. 'instances') and a scoped :class:`~gce_compute.meta.Key`.
The same identity has three string forms::

  resource path:           zones/us-central1-b/instances/vm-1
  relative resource name:  projects/my-project/zones/us-central1-b/instances/vm-1
  self link:               https://www.googleapis.com/compute/v1/projects/...

:func:`parse_resource_url` accepts any of these and returns a
:class:`ResourceID`; the formatting functions go the other way.

Some inputs have no well-formed output. The formatters return the sentinel
strings :data:`INVALID_RESOURCE`, :data:`INVALID_KEY_TYPE` and
:data:`INVALID_PREFIX` in those cases instead of raising, and callers match
on them.
"""

# pytype: skip-file

import json
import logging
import typing
from typing import NamedTuple
from typing import Optional

from apitools.base.protorpclite import messages
from apitools.base.py import encoding

from gce_compute.cloud.endpoints import INVALID_PREFIX
from gce_compute.cloud.endpoints import get_api_endpoints
from gce_compute.meta.key import Key
from gce_compute.meta.key import KeyType
from gce_compute.meta.key import global_key
from gce_compute.meta.key import regional_key
from gce_compute.meta.key import zonal_key

__all__ = [
    'INVALID_RESOURCE',
    'INVALID_KEY_TYPE',
    'INVALID_PREFIX',
    'UNKNOWN_SCOPE',
    'InvalidResourceURLError',
    'ResourceID',
    'ResourceMapKey',
    'resource_ids_equal',
    'parse_resource_url',
    'resource_path',
    'relative_resource_name',
    'self_link',
    'aggregated_list_key',
    'copy_via_json',
]

_LOGGER = logging.getLogger(__name__)

INVALID_RESOURCE = 'invalid-resource'
INVALID_KEY_TYPE = 'invalid-key-type'
UNKNOWN_SCOPE = 'unknownScope'

_PROJECTS = 'projects'
_REGIONS = 'regions'
_ZONES = 'zones'
_GLOBAL = 'global'

# A URL has at most 'projects/<proj>/<scope>/<location>/<res>/<name>'.
_MIN_URL_PARTS = 2
_MAX_URL_PARTS = 6


class InvalidResourceURLError(ValueError):
  """Raised when a string does not match any compute resource URL format."""
  def __init__(self, url):
    super().__init__('%r is not a valid resource URL' % url)
    self.url = url


class ResourceMapKey(NamedTuple):
  """A flat, hashable form of :class:`ResourceID` for use as a dict key."""
  project_id: str
  resource: str
  name: str
  zone: str
  region: str

  def to_id(self):
    """Returns the :class:`ResourceID` this map key was flattened from."""
    return ResourceID(
        project_id=self.project_id,
        resource=self.resource,
        key=Key(name=self.name, zone=self.zone, region=self.region))


class ResourceID(object):
  """Identifies a compute resource, as parsed from a resource URL.

  Attributes:
    project_id: Project owning the resource; '' for paths without a project.
    resource: Resource type, e.g. 'instances'. 'projects' for a project-only
      identifier and 'regions' or 'zones' for a bare location reference.
    key: Scoped :class:`~gce_compute.meta.Key`, or None for a project-only
      identifier.
  """
  def __init__(
      self,
      project_id: str = '',
      resource: str = '',
      key: Optional[Key] = None) -> None:
    self._project_id = project_id
    self._resource = resource
    self._key = key

  @property
  def project_id(self):
    return self._project_id

  @property
  def resource(self):
    return self._resource

  @property
  def key(self):
    return self._key

  def __repr__(self):
    return 'ResourceID(project_id=%r, resource=%r, key=%r)' % (
        self._project_id, self._resource, self._key)

  def __eq__(self, other):
    return (
        type(self) == type(other) and self._project_id == other._project_id and
        self._resource == other._resource and self._key == other._key)

  def __hash__(self):
    return hash((self._project_id, self._resource, self._key))

  def __reduce__(self):
    return ResourceID, (self._project_id, self._resource, self._key)

  def map_key(self) -> ResourceMapKey:
    """Returns a flat key that can be used for referencing in maps.

    Raises:
      ValueError: if the identifier has no key, e.g. 'projects/<proj>'.
    """
    if self._key is None:
      raise ValueError('Cannot build a map key for %r without a key.' % self)
    return ResourceMapKey(
        project_id=self._project_id,
        resource=self._resource,
        name=self._key.name,
        zone=self._key.zone,
        region=self._key.region)

  def resource_path(self) -> str:
    return resource_path(self._resource, self._key)

  def relative_resource_name(self) -> str:
    return relative_resource_name(self._project_id, self._resource, self._key)

  def self_link(self, version, endpoints=None) -> str:
    return self_link(
        version, self._project_id, self._resource, self._key, endpoints)


def resource_ids_equal(a, b):
  """Returns True if two optional resource IDs are equal.

  Two missing IDs are equal; a missing ID never equals a present one.
  """
  if a is None or b is None:
    return a is None and b is None
  return a == b


def _global_scoped(parts):
  # global/<res>/<name>
  return parts[1], global_key(parts[2])


def _bare_location(parts):
  # regions/<region> or zones/<zone>
  return parts[0], global_key(parts[1])


def _region_scoped(parts):
  # regions/<region>/<res>/<name>
  return parts[2], regional_key(parts[3], parts[1])


def _zone_scoped(parts):
  # zones/<zone>/<res>/<name>
  return parts[2], zonal_key(parts[3], parts[1])


# Keyed by (scope keyword, number of path segments from the keyword on).
_SCOPED_NAME_PARSERS = {
    (_GLOBAL, 3): _global_scoped,
    (_REGIONS, 2): _bare_location,
    (_REGIONS, 4): _region_scoped,
    (_ZONES, 2): _bare_location,
    (_ZONES, 4): _zone_scoped,
}


def parse_resource_url(url: str) -> ResourceID:
  """Parses a compute resource URL into a :class:`ResourceID`.

  The following formats are accepted::

    global/<res>/<name>
    regions/<region>
    regions/<region>/<res>/<name>
    zones/<zone>
    zones/<zone>/<res>/<name>
    projects/<proj>
    projects/<proj>/global/<res>/<name>
    projects/<proj>/regions/<region>/<res>/<name>
    projects/<proj>/zones/<zone>/<res>/<name>
    [https://www.googleapis.com/compute/<ver>]/projects/<proj>/...

  Everything before the first '/projects/' in the string is discarded, so a
  self link of any API version parses like its relative resource name. The
  API version itself is not recovered.

  Args:
    url: The URL or path to parse.

  Returns:
    The parsed :class:`ResourceID`.

  Raises:
    InvalidResourceURLError: if ``url`` matches none of the formats above.
  """
  path = url
  projects_index = url.find('/projects/')
  if projects_index >= 0:
    path = url[projects_index + 1:]

  parts = path.split('/')
  if len(parts) < _MIN_URL_PARTS or len(parts) > _MAX_URL_PARTS:
    _LOGGER.debug(
        'Resource URL %r has %d path segments, expected %d to %d',
        url,
        len(parts),
        _MIN_URL_PARTS,
        _MAX_URL_PARTS)
    raise InvalidResourceURLError(url)

  project_id = ''
  scoped_name = parts
  if parts[0] == _PROJECTS:
    project_id = parts[1]
    scoped_name = parts[2:]
    if not scoped_name:
      return ResourceID(project_id=project_id, resource=_PROJECTS)

  parse_scoped_name = _SCOPED_NAME_PARSERS.get(
      (scoped_name[0], len(scoped_name)))
  if parse_scoped_name is None:
    _LOGGER.debug(
        'Resource URL %r has no format for scope %r with %d segments',
        url,
        scoped_name[0],
        len(scoped_name))
    raise InvalidResourceURLError(url)

  resource, key = parse_scoped_name(scoped_name)
  return ResourceID(project_id=project_id, resource=resource, key=key)


def resource_path(resource: str, key: Optional[Key]) -> str:
  """Returns the path of a resource starting from its location.

  Example: regions/us-central1/subnetworks/my-subnet

  Zones and regions themselves render as 'zones/<name>' and 'regions/<name>'.
  A project has no path of its own and renders as :data:`INVALID_RESOURCE`;
  a missing key or unknown scope renders as :data:`INVALID_KEY_TYPE`.

  Raises:
    ValueError: if ``resource`` is 'zones' or 'regions' and ``key`` is None.
  """
  if resource in (_ZONES, _REGIONS):
    if key is None:
      raise ValueError('A key is required for resource %r.' % resource)
    return '%s/%s' % (resource, key.name)
  if resource == _PROJECTS:
    return INVALID_RESOURCE

  key_type = key.type() if key is not None else None
  if key_type == KeyType.ZONAL:
    return 'zones/%s/%s/%s' % (key.zone, resource, key.name)
  if key_type == KeyType.REGIONAL:
    return 'regions/%s/%s/%s' % (key.region, resource, key.name)
  if key_type == KeyType.GLOBAL:
    return 'global/%s/%s' % (resource, key.name)
  return INVALID_KEY_TYPE


def relative_resource_name(
    project: str, resource: str, key: Optional[Key]) -> str:
  """Returns the path of a resource starting from its project.

  Example: projects/my-project/regions/us-central1/subnetworks/my-subnet
  """
  if resource == _PROJECTS:
    return 'projects/%s' % project
  return 'projects/%s/%s' % (project, resource_path(resource, key))


def self_link(version, project, resource, key, endpoints=None):
  """Returns the self link URL of a resource.

  Args:
    version: A :class:`~gce_compute.meta.Version` or its string value.
    project: Project owning the resource.
    resource: Resource type, e.g. 'instances'.
    key: Scoped key of the resource.
    endpoints: :class:`~gce_compute.cloud.endpoints.ApiEndpoints` to root the
      link at. Defaults to the process-wide endpoints set by
      :func:`~gce_compute.cloud.endpoints.set_api_domain`.

  Returns:
    The URL. An unknown ``version`` yields a link starting with
    :data:`INVALID_PREFIX`.
  """
  if endpoints is None:
    endpoints = get_api_endpoints()
  prefix = endpoints.prefix(version)
  return '%s/%s' % (prefix, relative_resource_name(project, resource, key))


def aggregated_list_key(key):
  """Returns the aggregated list bucket of a key.

  The bucket is 'zones/<zone>', 'regions/<region>' or 'global', matching the
  keys of an aggregatedList response. Keys of unknown scope, and a missing
  key, map to :data:`UNKNOWN_SCOPE`.
  """
  key_type = key.type() if key is not None else None
  if key_type == KeyType.REGIONAL:
    return 'regions/%s' % key.region
  if key_type == KeyType.ZONAL:
    return 'zones/%s' % key.zone
  if key_type == KeyType.GLOBAL:
    return 'global'
  return UNKNOWN_SCOPE


_SCALAR_TYPES = (str, int, float, bool)


def _is_named_tuple(obj):
  return isinstance(obj, tuple) and hasattr(obj, '_asdict')


def _object_fields(obj):
  """Maps the public field names of ``obj`` to its attribute names.

  Public attributes are fields. A private attribute is a field only when the
  class exposes it through a property of the same name without the leading
  underscore, as ``ResourceID.key`` exposes ``_key``.
  """
  fields = {}
  for attr in vars(obj):
    if not attr.startswith('_'):
      fields[attr] = attr
    elif isinstance(getattr(type(obj), attr[1:], None), property):
      fields[attr[1:]] = attr
  return fields


def _field_types(obj):
  """Returns the constructor annotations of ``obj``, keyed by field name."""
  try:
    return typing.get_type_hints(type(obj).__init__)
  except (NameError, TypeError):
    return {}


def _to_json_value(obj):
  """Converts ``obj`` into a tree of JSON-encodable values."""
  if obj is None or isinstance(obj, _SCALAR_TYPES):
    return obj
  if isinstance(obj, messages.Message):
    return json.loads(encoding.MessageToJson(obj))
  if _is_named_tuple(obj):
    return {k: _to_json_value(v) for k, v in obj._asdict().items()}
  if isinstance(obj, dict):
    return {k: _to_json_value(v) for k, v in obj.items()}
  if isinstance(obj, (list, tuple)):
    return [_to_json_value(v) for v in obj]
  if hasattr(obj, '__dict__'):
    return {
        name: _to_json_value(getattr(obj, attr))
        for name, attr in _object_fields(obj).items()
    }
  raise TypeError(
      'Object of type %s is not JSON serializable' % type(obj).__name__)


def _require_mapping(value, target):
  if not isinstance(value, dict):
    raise TypeError(
        'Cannot copy %s into %s.' %
        (type(value).__name__, type(target).__name__))


def _new_value(field_type, value):
  """Builds a value of ``field_type`` for a field that has none yet."""
  if typing.get_origin(field_type) is typing.Union:
    args = [a for a in typing.get_args(field_type) if a is not type(None)]
    field_type = args[0] if len(args) == 1 else None
  if value is None or not isinstance(field_type, type):
    return value
  if issubclass(field_type, messages.Message):
    _require_mapping(value, field_type)
    return encoding.JsonToMessage(field_type, json.dumps(value))
  if issubclass(field_type, tuple) and hasattr(field_type, '_fields'):
    _require_mapping(value, field_type)
    return field_type(
        **{k: v
           for k, v in value.items() if k in field_type._fields})
  return value


def _merge_message(dest, value):
  _require_mapping(value, dest)
  decoded = encoding.JsonToMessage(type(dest), json.dumps(value))
  for field in decoded.all_fields():
    assigned = decoded.get_assigned_value(field.name)
    if assigned is not None:
      setattr(dest, field.name, assigned)


def _decode_into(current, value):
  """Returns ``value`` decoded into the shape of ``current``.

  Mutable containers and objects are updated in place and returned;
  named tuples and scalars are replaced.
  """
  if value is None or current is None:
    return value
  if isinstance(current, messages.Message):
    _merge_message(current, value)
    return current
  if _is_named_tuple(current):
    _require_mapping(value, current)
    fields = current._asdict()
    return current._replace(
        **{
            k: _decode_into(fields[k], v)
            for k, v in value.items() if k in fields
        })
  if isinstance(current, dict):
    _require_mapping(value, current)
    for k, v in value.items():
      current[k] = _decode_into(current[k], v) if k in current else v
    return current
  if isinstance(current, list):
    if not isinstance(value, list):
      raise TypeError('Cannot copy %s into a list.' % type(value).__name__)
    current[:] = value
    return current
  if isinstance(current, _SCALAR_TYPES):
    if isinstance(current, str) != isinstance(value, str) or isinstance(
        value, (dict, list)):
      raise TypeError(
          'Cannot copy %s into a field holding %s.' %
          (type(value).__name__, type(current).__name__))
    return value
  if hasattr(current, '__dict__'):
    _require_mapping(value, current)
    fields = _object_fields(current)
    types = _field_types(current)
    attrs = vars(current)
    for name, v in value.items():
      attr = fields.get(name, name)
      if attrs.get(attr) is not None:
        attrs[attr] = _decode_into(attrs[attr], v)
      else:
        attrs[attr] = _new_value(types.get(name), v)
    return current
  return value


def copy_via_json(dest, src):
  """Copies the fields of ``src`` into ``dest`` through a JSON round trip.

  ``src`` and ``dest`` may be apitools messages, dicts, lists or plain
  objects, holding any of those as well as named tuples. Fields present in
  the encoding of ``src`` overwrite those of ``dest``; other fields of
  ``dest`` are left as they are. Nested objects, dicts and messages of
  ``dest`` are merged into rather than replaced. A field of ``dest`` that is
  None takes the type its constructor annotates, e.g. the ``Key`` of a
  ``ResourceID``. Lists are replaced in place.

  Plain objects encode their public attributes, plus private attributes that
  back a property of the same name.

  Raises:
    TypeError: if ``src`` cannot be encoded or the decoded value does not fit
      the shape of ``dest``.
    ValueError: if the encoding of ``src`` does not decode into ``dest``.
  """
  data = json.dumps(_to_json_value(src))
  value = json.loads(data)
  if not isinstance(dest, (messages.Message, dict, list)) and (
      _is_named_tuple(dest) or not hasattr(dest, '__dict__')):
    raise TypeError('Cannot copy into %s.' % type(dest).__name__)
  _decode_into(dest, value)
