"""
Infrastructure Setup Script for the Book Review Backend
This script checks the MongoDB connection and prepares the reviews collection.
"""

import logging

from pymongo.errors import PyMongoError

from src.config import MONGO_CONFIG, REVIEWS_COLLECTION
from src.db.mongodb_client import mongo_client

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def check_database_connection():
    """Check if the MongoDB connection is working."""
    logger.info(f"Checking MongoDB connection ({MONGO_CONFIG['database']})...")

    try:
        mongo_client.ping()
        logger.info("✅ MongoDB connection: OK")
    except PyMongoError as e:
        logger.error(f"❌ MongoDB connection error: {e}")
        return False

    return True


def prepare_reviews_collection():
    """Create indexes and report how many reviews are stored."""
    try:
        mongo_client.create_indexes()
        review_count = mongo_client.get_collection(REVIEWS_COLLECTION).count_documents({})
        logger.info(f"📚 Reviews in database: {review_count}")
        if review_count == 0:
            logger.warning("⚠️ No reviews found.")
            logger.info("💡 To load sample data, run:")
            logger.info("   python -m src.loaders.document_loader")
    except PyMongoError as e:
        logger.error(f"Error preparing reviews collection: {e}")
        return False

    return True


def main():
    """Main setup function."""
    logger.info("🚀 Setting up Book Review Backend...")

    if not check_database_connection():
        logger.error("❌ Database connection check failed!")
        return False

    if not prepare_reviews_collection():
        return False

    logger.info("✅ Setup complete! Ready to start the server.")
    return True


if __name__ == "__main__":
    main()
