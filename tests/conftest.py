from io import BytesIO

import mongomock
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from uninits.core.config import CONFIG
from uninits.core.database import Store, ensure_indexes, get_store
from uninits.main import app
from uninits.models.catalog_data import ECE_CATALOG
from uninits.services.catalog import load_catalog


@pytest.fixture
def store():
    s = Store.from_database(mongomock.MongoClient()["uninits_test"])
    ensure_indexes(s)
    return s


@pytest.fixture
def seeded_store(store):
    load_catalog(store, ECE_CATALOG)
    return store


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    target = tmp_path / "profile-images"
    target.mkdir()
    monkeypatch.setattr(CONFIG, "UPLOAD_DIR", str(target))
    return target


@pytest.fixture
def client(seeded_store, upload_dir):
    app.dependency_overrides[get_store] = lambda: seeded_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def png_bytes():
    buf = BytesIO()
    Image.new("RGB", (8, 8), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()
