"""Load sample review documents into MongoDB."""

import json
import logging
from pathlib import Path

from src.config import DATA_DIR
from src.db.mongodb_client import mongo_client
from src.errors import ReviewValidationError
from src.services.review_service import ReviewService

logger = logging.getLogger(__name__)


class DocumentLoader:
    def __init__(self, service: ReviewService | None = None):
        self.client = mongo_client
        self.service = service or ReviewService()
        self.data_dir = DATA_DIR

    def load_reviews(self, path: Path | None = None, replace: bool = False) -> int:
        """
        Load review documents into MongoDB through the review store.

        Every record goes through ReviewService.create, so it is validated and
        gets its own id and dateAdded. Records that fail validation are skipped.

        Args:
            path: JSON file holding a list of reviews (defaults to DATA_DIR/reviews.json)
            replace: Remove existing reviews before loading

        Returns:
            Number of reviews stored
        """
        self.client.create_indexes()
        if replace:
            self.service.collection.delete_many({})

        path = path or self.data_dir / "reviews.json"
        with open(path, encoding="utf-8") as f:
            docs = json.load(f)

        loaded = 0
        for doc in docs:
            try:
                self.service.create(doc)
                loaded += 1
            except ReviewValidationError as e:
                logger.warning(f"Skipping review for '{doc.get('bookTitle')}': {e}")

        logger.info(f"Loaded {loaded} of {len(docs)} reviews into MongoDB")
        return loaded


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    loader = DocumentLoader()
    loader.load_reviews(replace=True)
