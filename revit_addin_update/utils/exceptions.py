#   Copyright 2026 getcarrier.io
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.

""" Errors raised before the update archive starts streaming """


class UpdateGatewayError(Exception):
    """Base error; carries the HTTP status it maps to."""
    status_code = 500

    def __init__(self, message: str = ''):
        super().__init__(message)
        self.message = message


class ConfigurationError(UpdateGatewayError):
    """Raised when a required setting is not configured."""

    def __init__(self, setting: str):
        super().__init__(f"NOT FOUND: {setting}.")
        self.setting = setting


class MissingCredentialError(UpdateGatewayError):
    """Raised when the caller sent no key at all."""
    # Absent key is reported as a server fault, wrong key as 401
    status_code = 500

    def __init__(self, header: str):
        super().__init__(f"MISSING KEY: {header}.")
        self.header = header


class InvalidCredentialError(UpdateGatewayError):
    status_code = 401


class NoMatchingFilesError(UpdateGatewayError):
    status_code = 404

    def __init__(self, message: str = 'No updates found.'):
        super().__init__(message)


class StorageError(UpdateGatewayError):
    """Raised when the bucket listing fails before the response is committed."""
    status_code = 500
