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

""" S3 storage access for update files """

import logging
from typing import List

import boto3

from ..models.pd.configuration import GatewayConfig
from ..models.pd.update_file import ObjectDescriptor


log = logging.getLogger(__name__)


class StorageClient:
    """
    Read-only view of the update bucket.

    Created once by the module and shared by all requests; holds nothing
    but the boto3 client, which is safe to use from several threads.
    """

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_config(cls, config: GatewayConfig) -> 'StorageClient':
        config.require_storage_credentials()
        log.info(
            "Creating S3 client (region=%s, endpoint=%s)",
            config.s3_region_name, config.s3_storage_url or 'aws'
        )
        return cls(boto3.client('s3', **config.boto_kwargs()))

    def list_files(self, bucket_name: str) -> List[ObjectDescriptor]:
        """
        List every object in a bucket.

        Reads all ``ListObjectsV2`` pages; keys come back in the order
        storage returns them.
        """
        paginator = self.client.get_paginator('list_objects_v2')
        files = []
        for page in paginator.paginate(Bucket=bucket_name):
            for item in page.get('Contents', []):
                files.append(ObjectDescriptor.from_listing(item))
        log.debug("Listed %d objects in %s", len(files), bucket_name)
        return files

    def open_file(self, bucket_name: str, key: str):
        """Start a download; returns the botocore streaming body"""
        response = self.client.get_object(Bucket=bucket_name, Key=key)
        return response['Body']
