from pymongo import MongoClient, ASCENDING
from ratingz_api.core.config import settings

COLLECTIONS = ("ratings", "reactions")


def dedup(col) -> int:
    # ключи (identity_key, movie_id) с >1 документом
    pipeline = [
        {"$group": {"_id": {"identity_key": "$identity_key",
                            "movie_id": "$movie_id"}, "count": {"$sum": 1}}},
        {"$match": {"count": {"$gt": 1}}}
    ]
    dups = list(col.aggregate(pipeline))
    print(f"{col.name}: duplicate keys: {len(dups)}")

    removed = 0
    # оставляем самую раннюю запись: правок после первой отправки нет
    for d in dups:
        key = d["_id"]
        docs = list(col.find(key).sort("created_at", ASCENDING))
        keep_id = docs[0]["_id"]
        to_delete = [x["_id"] for x in docs[1:]]
        if to_delete:
            col.delete_many({"_id": {"$in": to_delete}})
            removed += len(to_delete)
            print(f"  kept={keep_id}, deleted={len(to_delete)} for {key}")
    return removed


def main():
    db = MongoClient(settings.mongo_dsn)[settings.mongo_db]
    for name in COLLECTIONS:
        dedup(db[name])
    print("Dedup done.")


if __name__ == "__main__":
    main()
