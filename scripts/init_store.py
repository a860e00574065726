"""
Create the customers, bills and payments collections for the configured store
(LOANBOOK_STORE=json|sql). Existing collections are left untouched.

    python -m scripts.init_store
"""

from loanbook import config
from loanbook.store import COLLECTIONS, build_store


def main():
    store = build_store()
    store.ensure_all()
    for name in COLLECTIONS:
        print(f"{name}: {len(store.read_all(name))} records")
    print(f"Store ready ({config.STORE_BACKEND}).")


if __name__ == "__main__":
    main()
