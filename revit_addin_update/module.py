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

""" Module """
import logging
from typing import Optional

import flask
from flask_restful import Api

from .api.v1 import update_revit_addin
from .models.pd.configuration import GatewayConfig
from .utils.storage import StorageClient


log = logging.getLogger(__name__)

URL_PREFIX = '/deepdeepbim/api'


class Module:
    """ Update gateway module """

    api_resources = [
        update_revit_addin.API,
    ]

    def __init__(self, config: GatewayConfig, storage: Optional[StorageClient] = None):
        self.config = config
        self.storage = storage

    def init(self, app: flask.Flask):
        """ Init module """
        log.info("Initializing module RevitAddinUpdate")
        if self.storage is None:
            self.storage = StorageClient.from_config(self.config)

        api = Api(app)
        for resource in self.api_resources:
            urls = [f"{URL_PREFIX}/{param}" for param in resource.url_params]
            api.add_resource(
                resource, *urls,
                resource_class_kwargs={'module': self},
                endpoint=resource.__module__.rsplit('.', 1)[-1],
            )
            log.info("Registered %s at %s", resource.__module__, ', '.join(urls))

        app.extensions['revit_addin_update'] = self


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    )
    # boto is chatty on DEBUG
    logging.getLogger('botocore').setLevel(max(logging.getLevelName(level), logging.INFO))


def create_app(config: Optional[GatewayConfig] = None,
               storage: Optional[StorageClient] = None) -> flask.Flask:
    """
    Build the WSGI application.

    Fails with ConfigurationError when storage credentials are missing
    and no storage client was passed in.
    """
    if config is None:
        config = GatewayConfig()
    setup_logging(config.log_level)

    app = flask.Flask(__name__)
    Module(config, storage).init(app)
    return app
