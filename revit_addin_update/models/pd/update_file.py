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

""" Pydantic models for update files listed from storage """

import posixpath
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectDescriptor(BaseModel):
    """One object from the bucket listing."""

    model_config = ConfigDict(frozen=True)

    key: str
    size: int = Field(default=0, ge=0)
    last_modified: Optional[datetime] = None

    @property
    def entry_name(self) -> str:
        """Base file name used as the zip entry name; empty for keys ending with '/'"""
        return posixpath.basename(self.key)

    @classmethod
    def from_listing(cls, item: dict) -> 'ObjectDescriptor':
        """Build from an entry of ``ListObjectsV2`` ``Contents``"""
        return cls(
            key=item['Key'],
            size=item.get('Size') or 0,
            last_modified=item.get('LastModified'),
        )


class SelectionSet(BaseModel):
    """Objects chosen for the archive, in listing order."""

    model_config = ConfigDict(frozen=True)

    objects: List[ObjectDescriptor] = []

    @property
    def file_count(self) -> int:
        return len(self.objects)

    @property
    def total_size(self) -> int:
        return sum(obj.size for obj in self.objects)

    def __iter__(self):
        return iter(self.objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __bool__(self) -> bool:
        return bool(self.objects)
