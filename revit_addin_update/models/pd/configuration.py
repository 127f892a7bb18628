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

""" Gateway configuration model """

import logging
from typing import Optional, Tuple

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...utils.exceptions import ConfigurationError


ENV_PREFIX = 'DEEPDEEPBIM_REVIT_ADDIN_UPDATE_'


class GatewayConfig(BaseSettings):
    """
    Settings for the update gateway.

    Every field is read from an environment variable named
    ``DEEPDEEPBIM_REVIT_ADDIN_UPDATE_<FIELD>``, e.g. ``..._S3_BUCKET_NAME``.
    Storage credentials are required at startup; bucket name and valid key
    are checked per request so a misconfigured deployment answers 500
    instead of refusing to start.
    """
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    s3_access_key: Optional[str] = None
    s3_secret_key: Optional[SecretStr] = None
    s3_bucket_name: Optional[str] = None
    s3_region_name: str = 'us-east-1'
    s3_storage_url: Optional[str] = None
    valid_key: Optional[SecretStr] = None

    allowed_extensions: str = '.json,.dll'
    chunk_size: int = Field(default=64 * 1024, gt=0)
    archive_filename: str = Field(default='RevitAddinUpdate.zip', min_length=1)
    log_level: str = 'INFO'

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def extensions(self) -> Tuple[str, ...]:
        """Allowed suffixes, lower-cased, each starting with a dot"""
        result = []
        for item in self.allowed_extensions.split(','):
            item = item.strip().lower()
            if not item:
                continue
            if not item.startswith('.'):
                item = f'.{item}'
            result.append(item)
        return tuple(result)

    def require_storage_credentials(self) -> None:
        if not self.s3_access_key:
            raise ConfigurationError('access_key')
        if not self.s3_secret_key or not self.s3_secret_key.get_secret_value():
            raise ConfigurationError('secret_key')

    def require_extensions(self) -> Tuple[str, ...]:
        extensions = self.extensions
        if not extensions:
            raise ConfigurationError('allowed_extensions')
        return extensions

    def require_bucket_name(self) -> str:
        if not self.s3_bucket_name:
            raise ConfigurationError('bucket_name')
        return self.s3_bucket_name

    def get_valid_key(self) -> Optional[str]:
        if self.valid_key is None:
            return None
        return self.valid_key.get_secret_value()

    def boto_kwargs(self) -> dict:
        """Keyword arguments for ``boto3.client('s3', ...)``"""
        aws_kwargs = {
            'aws_access_key_id': self.s3_access_key,
            'aws_secret_access_key': self.s3_secret_key.get_secret_value() if self.s3_secret_key else None,
            'region_name': self.s3_region_name,
        }
        if self.s3_storage_url:
            aws_kwargs['endpoint_url'] = self.s3_storage_url
        return aws_kwargs
