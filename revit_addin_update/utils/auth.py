# pylint: disable=C0116
#
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

""" Shared key authentication for the update endpoint """

import hmac
import logging
from functools import wraps
from typing import Optional

from flask import request

from .exceptions import (
    ConfigurationError,
    InvalidCredentialError,
    MissingCredentialError,
    UpdateGatewayError,
)
from .responses import error_response


log = logging.getLogger(__name__)

KEY_HEADER = 'X-DeepDeepBim-Key'


def validate_user_key(received_key: Optional[str], valid_key: Optional[str]) -> bool:
    """
    Compare the caller's key with the configured one.

    Raises:
        MissingCredentialError: caller sent no key
        ConfigurationError: no valid key is configured
    """
    if not received_key:
        raise MissingCredentialError(KEY_HEADER)
    if not valid_key:
        raise ConfigurationError('valid_key')
    # Exact, case-sensitive equality
    return hmac.compare_digest(received_key.encode('utf-8'), valid_key.encode('utf-8'))


def check_user_key(received_key: Optional[str], valid_key: Optional[str]) -> None:
    """Same as validate_user_key but raises InvalidCredentialError on mismatch"""
    if not validate_user_key(received_key, valid_key):
        raise InvalidCredentialError()


def key_required(f):
    """
    Decorator for resource methods: checks ``X-DeepDeepBim-Key``.

    The resource must expose ``self.module.config``. Errors are returned
    as plain responses before the wrapped method runs.
    """
    @wraps(f)
    def decorated_function(self, *args, **kwargs):
        try:
            check_user_key(
                request.headers.get(KEY_HEADER),
                self.module.config.get_valid_key()
            )
        except ConfigurationError as e:
            log.error("Key check impossible: %s", e.message)
            return error_response(e.message, status_code=e.status_code)
        except UpdateGatewayError as e:
            log.warning("Key check failed for %s: %s", request.remote_addr, type(e).__name__)
            return error_response(e.message, status_code=e.status_code)
        return f(self, *args, **kwargs)

    return decorated_function
