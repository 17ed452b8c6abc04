"""Check that the store is reachable and every collection is in place."""

import sys

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from ratingz_api.core.config import settings

REQUIRED = ("movies", "ratings", "reactions")
OPTIONAL = ("user_profiles", "admin_sessions")


def main() -> int:
    client = MongoClient(settings.mongo_dsn, serverSelectionTimeoutMS=3000)
    try:
        client.admin.command("ping")
        existing = set(client[settings.mongo_db].list_collection_names())
    except PyMongoError as e:
        print("Error during database check:", e)
        print("Check MONGO_DSN in infra/.env")
        return 1

    print("Database connection successful!")
    missing = [name for name in REQUIRED if name not in existing]
    for name in REQUIRED + OPTIONAL:
        mark = "ok" if name in existing else "missing"
        print(f"  {name}: {mark}")

    if missing:
        print("\nCollections are created on first write; run")
        print("  python -m scripts.create_indexes")
        print("to create them together with the unique indexes.")
        return 2
    print("Database is ready for the application.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
