"""MongoDB connection and utilities."""

from pymongo import DESCENDING, MongoClient
from pymongo.database import Database

from src.config import MONGO_CONFIG, REVIEWS_COLLECTION


class MongoDBClient:
    def __init__(self):
        # tz_aware so dateAdded comes back as an aware UTC datetime
        self.client = MongoClient(MONGO_CONFIG["uri"], tz_aware=True)
        self.db: Database = self.client[MONGO_CONFIG["database"]]

    def get_collection(self, name: str = REVIEWS_COLLECTION):
        """Get a MongoDB collection."""
        return self.db[name]

    def create_indexes(self):
        """Create necessary indexes."""
        self.db.get_collection(REVIEWS_COLLECTION).create_index([("dateAdded", DESCENDING), ("_id", DESCENDING)])

    def ping(self) -> bool:
        """Round-trip to the server; raises on connection failure."""
        self.client.admin.command("ping")
        return True


# Singleton instance
mongo_client = MongoDBClient()
