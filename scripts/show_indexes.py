from pymongo import MongoClient
from ratingz_api.core.config import settings
from ratingz_api.db.indexes import INDEXES


def dump(db, col_name: str):
    idx = list(db[col_name].list_indexes())
    print(f"\nIndexes in '{col_name}':")
    for i in idx:
        print(" -", i)


if __name__ == "__main__":
    database = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    for name in dict.fromkeys(col for col, _, _ in INDEXES):
        dump(database, name)
