"""Shared fixtures: a temporary SQLite database and an in-memory object store."""

from __future__ import annotations

import importlib
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "project_request_portal_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["ADMIN_SIGNUP_ENABLED"] = "true"
os.environ.pop("AZURE_STORAGE_CONNECTION_STRING", None)

from app.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.domain.errors import StorageError  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)


class FakeBlobStore:
    """In-memory replacement for the Azure attachment container."""

    def __init__(self) -> None:
        self.objects: dict[str, bytes] = {}
        self.upload_calls: list[str] = []
        self.deleted: list[str] = []
        self.fail_uploads = False
        self.fail_deletes = False
        self.fail_deletes_after: int | None = None

    def upload_blob(self, blob_path: str, data: bytes, *, content_type=None) -> None:
        self.upload_calls.append(blob_path)
        if self.fail_uploads:
            raise StorageError(f"Upload of {blob_path} failed")
        if blob_path in self.objects:
            raise StorageError(f"{blob_path} already exists")
        self.objects[blob_path] = data

    def delete_blob(self, blob_path: str) -> None:
        if self.fail_deletes or (
            self.fail_deletes_after is not None and len(self.deleted) >= self.fail_deletes_after
        ):
            raise StorageError(f"Removal of {blob_path} failed")
        self.objects.pop(blob_path, None)
        self.deleted.append(blob_path)

    def generate_download_url(self, blob_path: str, *, expires_in=None) -> str:
        return f"https://storage.test/request-attachments/{blob_path}?se={expires_in}&sp=r"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(autouse=True)
def blob_store(monkeypatch) -> FakeBlobStore:
    store = FakeBlobStore()
    targets = {
        "app.application.use_cases.attachments.upload_attachments": (
            "upload_blob",
            "delete_blob",
        ),
        "app.application.use_cases.attachments.manage_attachments": (
            "delete_blob",
            "generate_download_url",
        ),
        "app.application.use_cases.requests.delete_request": ("delete_blob",),
    }
    for module_name, names in targets.items():
        # Package __init__ re-exports functions named like their submodules.
        module = importlib.import_module(module_name)
        for name in names:
            monkeypatch.setattr(module, name, getattr(store, name))
    return store


@pytest.fixture()
def session():
    with SessionLocal() as db:
        yield db


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
