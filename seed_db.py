import sys

from uninits.core.database import ensure_indexes, get_store
from uninits.models.catalog_data import ECE_CATALOG
from uninits.services.catalog import load_catalog
from uninits.services.reconciler import canonicalize_scholar_ids


def main():
    store = get_store()
    ensure_indexes(store)

    print(f"Loading {len(ECE_CATALOG)} catalog entries...")
    result = load_catalog(store, ECE_CATALOG)
    print(f"Result: {result}")

    if "--canonicalize" in sys.argv:
        print("Canonicalizing scholar IDs...")
        print(canonicalize_scholar_ids(store))


if __name__ == "__main__":
    main()
