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


"""Pytest configuration and custom hooks."""

import pytest

from gce_compute.cloud import endpoints


@pytest.fixture(autouse=True)
def restore_api_domain():
  """
  Restore the process-wide compute API domain after each test, so tests that
  call set_api_domain do not leak into the rest of the suite.
  """
  yield
  endpoints.set_api_domain(endpoints.DEFAULT_API_DOMAIN)
