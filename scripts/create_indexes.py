from pymongo import MongoClient
from ratingz_api.core.config import settings
from ratingz_api.db.indexes import INDEXES


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]

    print("Using DSN:", settings.mongo_dsn, "DB:", settings.mongo_db)
    # та же раскладка, что и при старте сервиса
    for collection, keys, options in INDEXES:
        name = db[collection].create_index(keys, **options)
        print(f"  {collection}: {name}")

    print("Indexes ensured.")


if __name__ == "__main__":
    main()
