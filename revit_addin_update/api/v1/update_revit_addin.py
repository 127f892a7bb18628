import logging

from botocore.exceptions import BotoCoreError, ClientError
from flask_restful import Resource

from ...utils.archive_utils import stream_archive
from ...utils.auth import key_required
from ...utils.exceptions import NoMatchingFilesError, StorageError, UpdateGatewayError
from ...utils.responses import error_response, zip_stream_response
from ...utils.selection_utils import select_update_files


log = logging.getLogger(__name__)


class API(Resource):
    url_params = [
        'update-revit-addin',
    ]

    def __init__(self, module):
        self.module = module

    def _select_files(self, bucket_name: str, extensions):
        try:
            files = self.module.storage.list_files(bucket_name)
        except (ClientError, BotoCoreError) as e:
            log.exception("Listing bucket %s failed", bucket_name)
            raise StorageError(f"LIST FAILED: {bucket_name}.") from e
        selection = select_update_files(files, extensions)
        if not selection:
            raise NoMatchingFilesError()
        return selection

    @key_required
    def post(self):
        config = self.module.config
        try:
            bucket_name = config.require_bucket_name()
            extensions = config.require_extensions()
            selection = self._select_files(bucket_name, extensions)
        except UpdateGatewayError as e:
            return error_response(e.message, status_code=e.status_code)

        return zip_stream_response(
            stream_archive(self.module.storage, bucket_name, selection, config.chunk_size),
            filename=config.archive_filename,
            file_count=selection.file_count,
            total_size=selection.total_size,
        )
