# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Custom exceptions for the SDC validator."""


class SdcValidatorError(Exception):
    """Base exception for validator related errors."""
    pass


class ComponentParseError(SdcValidatorError):
    """Exception raised when a component metadata file cannot be decoded."""
    pass


class SchemaResolutionError(SdcValidatorError):
    """Exception raised when the metadata schema cannot be resolved."""
    pass


class SchemaFetchError(SchemaResolutionError):
    """Exception raised when a transport fails to download the schema."""
    pass
