import pytest
from pydantic import ValidationError as SchemaError

from uninits.core.errors import ValidationError
from uninits.models.catalog_data import ECE_CATALOG
from uninits.services.catalog import load_catalog


def test_load_catalog_inserts_then_updates(store):
    first = load_catalog(store, ECE_CATALOG)
    assert first == {"status": "success", "inserted": 5, "updated": 0}

    second = load_catalog(store, ECE_CATALOG)
    assert second == {"status": "success", "inserted": 0, "updated": 5}
    assert store.courses.count_documents({}) == 5


def test_reload_replaces_course_list(store):
    load_catalog(store, ECE_CATALOG)
    load_catalog(
        store,
        [{
            "branchCode": 4,
            "branchShort": "ECE",
            "semester": 8,
            "courses": [{"code": "EC-499", "name": "Project II", "credits": 8}],
        }],
    )

    entry = store.courses.find_one({"branchCode": 4, "semester": 8})
    assert entry["courses"] == [{"code": "EC-499", "name": "Project II", "credits": 8}]


def test_semester_six_has_nine_courses(store):
    load_catalog(store, ECE_CATALOG)
    entry = store.courses.find_one({"branchCode": 4, "semester": 6})
    assert len(entry["courses"]) == 9
    assert entry["branchShort"] == "ECE"


def test_entry_without_courses_is_rejected(store):
    with pytest.raises(ValidationError):
        load_catalog(store, [{"branchCode": 2, "branchShort": "CSE", "semester": 4, "courses": []}])


def test_malformed_entry_is_rejected(store):
    with pytest.raises(SchemaError):
        load_catalog(store, [{"branchCode": 2, "semester": 4}])
