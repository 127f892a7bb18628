from __future__ import annotations

from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from revit_addin_update import create_app
from revit_addin_update.models.pd.configuration import GatewayConfig
from revit_addin_update.utils.storage import StorageClient


VALID_KEY = "s3cr3t-Key"
BUCKET = "revit-addin-updates"
MODIFIED = datetime(2025, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


class FakeBody:
    def __init__(self, content: bytes, fail_after: int | None = None) -> None:
        self._content = content
        self._fail_after = fail_after
        self.closed = False

    def iter_chunks(self, chunk_size: int = 1024):
        for sent, start in enumerate(range(0, len(self._content), chunk_size)):
            if self._fail_after is not None and sent >= self._fail_after:
                raise ConnectionResetError("connection reset by peer")
            yield self._content[start:start + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakePaginator:
    def __init__(self, client: "FakeS3Client") -> None:
        self._client = client

    def paginate(self, Bucket: str):
        self._client.list_calls.append(Bucket)
        contents = [
            {"Key": key, "Size": len(data), "LastModified": MODIFIED}
            for key, data in self._client.objects.items()
        ]
        if not contents:
            yield {"KeyCount": 0}
            return
        size = self._client.page_size
        for start in range(0, len(contents), size):
            yield {"Contents": contents[start:start + size]}


class FakeS3Client:
    def __init__(self, objects: dict[str, bytes] | None = None, page_size: int = 1000) -> None:
        self.objects = dict(objects or {})
        self.page_size = page_size
        self.missing: set[str] = set()
        self.broken: dict[str, int] = {}
        self.list_calls: list[str] = []
        self.get_calls: list[str] = []
        self.bodies: list[FakeBody] = []

    def get_paginator(self, operation_name: str) -> FakePaginator:
        assert operation_name == "list_objects_v2"
        return FakePaginator(self)

    def get_object(self, Bucket: str, Key: str) -> dict:
        self.get_calls.append(Key)
        if Key in self.missing or Key not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "Not Found"}}, "GetObject")
        body = FakeBody(self.objects[Key], fail_after=self.broken.get(Key))
        self.bodies.append(body)
        return {"Body": body, "ContentLength": len(self.objects[Key])}


def make_config(**overrides) -> GatewayConfig:
    values = dict(
        s3_access_key="AKIATEST",
        s3_secret_key="secret-access-key",
        s3_bucket_name=BUCKET,
        valid_key=VALID_KEY,
        chunk_size=4,
    )
    values.update(overrides)
    return GatewayConfig(**values)


@pytest.fixture
def s3_client() -> FakeS3Client:
    return FakeS3Client({
        "a.json": b"0123456789",
        "bin/b.dll": b"MZ" + b"\x90" * 18,
        "c.txt": b"hello",
    })


@pytest.fixture
def storage(s3_client: FakeS3Client) -> StorageClient:
    return StorageClient(s3_client)


@pytest.fixture
def config() -> GatewayConfig:
    return make_config()


@pytest.fixture
def app(config: GatewayConfig, storage: StorageClient):
    app = create_app(config, storage)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
