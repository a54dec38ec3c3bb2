# uninits/services/catalog.py
from typing import Iterable

from uninits.core.database import Store, persistence_guard
from uninits.core.errors import ValidationError
from uninits.core.logger import get_logger
from uninits.models.schemas import CourseCatalogEntry

log = get_logger("catalog")


@persistence_guard
def load_catalog(store: Store, entries: Iterable[dict]) -> dict:
    """
    Bulk-load course catalog entries.
    Each entry is upserted on (branchCode, semester), so re-running a load
    replaces the course lists instead of duplicating them.
    """
    inserted = 0
    updated = 0

    for raw in entries:
        entry = CourseCatalogEntry.model_validate(raw)
        if not entry.courses:
            raise ValidationError(
                f"Catalog entry {entry.branchShort} semester {entry.semester} has no courses"
            )

        result = store.courses.update_one(
            {"branchCode": entry.branchCode, "semester": entry.semester},
            {"$set": {
                "branchShort": entry.branchShort,
                "courses": [c.model_dump() for c in entry.courses],
            }},
            upsert=True,
        )
        if result.upserted_id is not None:
            inserted += 1
        else:
            updated += 1

    log.info("Catalog load: %d inserted, %d updated", inserted, updated)
    return {
        "status": "success",
        "inserted": inserted,
        "updated": updated,
    }
