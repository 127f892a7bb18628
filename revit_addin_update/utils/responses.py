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

""" Response builders for the update endpoint """

import unicodedata
from typing import Iterable
from urllib.parse import quote

from flask import Response


FILE_COUNT_HEADER = 'X-File-Count'
TOTAL_SIZE_HEADER = 'X-Total-Uncompressed-Size'


def attachment_names(filename: str) -> dict:
    """
    Content-Disposition parameters for a download name.

    Non-ASCII names get an ASCII ``filename`` fallback plus an RFC 5987
    ``filename*``, the same way ``send_file(download_name=...)`` does it.
    """
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        simple = unicodedata.normalize("NFKD", filename)
        simple = simple.encode("ascii", "ignore").decode("ascii")
        quoted = quote(filename, safe="!#$&+^`|~")
        return {"filename": simple, "filename*": f"UTF-8''{quoted}"}
    return {"filename": filename}


def error_response(message: str = '', status_code: int = 500) -> Response:
    """
    Plain text error.

    An empty message produces an empty body (used for 401).
    """
    return Response(
        message,
        status=status_code,
        mimetype='text/plain'
    )


def zip_stream_response(chunks: Iterable[bytes], filename: str,
                        file_count: int, total_size: int) -> Response:
    """
    Streamed zip download.

    Status and headers go out before the first chunk is produced.
    """
    response = Response(
        chunks,
        status=200,
        mimetype='application/zip'
    )
    response.headers.set('Content-Disposition', 'attachment', **attachment_names(filename))
    response.headers[FILE_COUNT_HEADER] = str(file_count)
    response.headers[TOTAL_SIZE_HEADER] = str(total_size)
    return response
