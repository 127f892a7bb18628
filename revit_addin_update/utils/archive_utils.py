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

""" Streaming zip assembly straight from storage """

import logging
import zipfile
from datetime import datetime
from typing import Iterator, Optional

from hurry.filesize import size

from .storage import StorageClient
from ..models.pd.update_file import ObjectDescriptor, SelectionSet


log = logging.getLogger(__name__)

FASTEST_COMPRESSION = 1
DEFAULT_CHUNK_SIZE = 64 * 1024
ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


class ArchiveBuffer:
    """
    Write-only sink for ZipFile.

    Has no tell/seek, so ZipFile writes sizes and CRCs into data
    descriptors after each entry instead of seeking back.
    """

    def __init__(self):
        self._chunks = []

    def write(self, data) -> int:
        self._chunks.append(bytes(data))
        return len(data)

    def flush(self):
        pass

    def drain(self) -> bytes:
        """Return everything written since the last drain"""
        data = b''.join(self._chunks)
        self._chunks.clear()
        return data


def entry_date_time(last_modified: Optional[datetime]) -> tuple:
    if last_modified is None or last_modified.year < ZIP_EPOCH[0]:
        return ZIP_EPOCH
    return last_modified.timetuple()[:6]


def make_entry_info(descriptor: ObjectDescriptor) -> zipfile.ZipInfo:
    zinfo = zipfile.ZipInfo(descriptor.entry_name, date_time=entry_date_time(descriptor.last_modified))
    zinfo.compress_type = zipfile.ZIP_DEFLATED
    zinfo._compresslevel = FASTEST_COMPRESSION  # pylint: disable=W0212
    # Declared size lets ZipFile pick zip64 headers up front for large objects
    zinfo.file_size = descriptor.size
    zinfo.external_attr = 0o644 << 16
    return zinfo


def stream_archive(storage: StorageClient, bucket_name: str, selection: SelectionSet,
                   chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    """
    Yield a zip archive holding every selected object, one entry per object.

    Objects are fetched one at a time, in selection order, only when their
    entry is written. A failed fetch is logged and leaves no entry; a copy
    that fails midway leaves the entry truncated. Neither stops the archive.
    """
    buffer = ArchiveBuffer()
    written = 0
    log.info(
        "Streaming %d files (%s) from %s",
        selection.file_count, size(selection.total_size), bucket_name
    )
    with zipfile.ZipFile(buffer, mode='w', compression=zipfile.ZIP_DEFLATED,
                         compresslevel=FASTEST_COMPRESSION) as archive:
        for descriptor in selection:
            if not descriptor.entry_name:
                log.debug("Skipping %s: empty file name", descriptor.key)
                continue

            try:
                body = storage.open_file(bucket_name, descriptor.key)
            except Exception:  # pylint: disable=W0703
                log.exception("Failed to download %s", descriptor.key)
                continue

            try:
                with archive.open(make_entry_info(descriptor), mode='w') as entry:
                    for chunk in body.iter_chunks(chunk_size):
                        entry.write(chunk)
                        data = buffer.drain()
                        if data:
                            yield data
                written += 1
            except Exception:  # pylint: disable=W0703
                log.exception("Failed to download %s", descriptor.key)
            finally:
                body.close()

            data = buffer.drain()
            if data:
                yield data

    yield buffer.drain()
    log.info("Archive from %s finished: %d of %d entries complete",
             bucket_name, written, selection.file_count)
