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

"""
Revit add-in update gateway

Serves the add-in files kept in an S3 bucket as one streamed zip:
- module.py: application factory and wiring
- api/v1/update_revit_addin.py: the POST endpoint
- utils/: key check, bucket listing, zip streaming

Run with any WSGI server, e.g. ``flask --app revit_addin_update:create_app run``.
"""

from .module import create_app, Module

__all__ = ['create_app', 'Module']
