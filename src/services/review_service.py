"""Review store backed by the MongoDB 'reviews' collection."""

import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from src.config import REVIEWS_COLLECTION
from src.db.mongodb_client import mongo_client
from src.errors import ReviewNotFound, ReviewValidationError
from src.models.reviews import MUTABLE_FIELDS, Review
from src.services.review_validation import validate_review_fields

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    # MongoDB keeps millisecond precision, truncate so the stored value matches what we return
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _object_id(review_id: str) -> ObjectId:
    if not ObjectId.is_valid(review_id):
        raise ReviewNotFound(review_id)
    return ObjectId(review_id)


class ReviewService:
    def __init__(self, collection=None):
        self._collection = collection

    @property
    def collection(self):
        if self._collection is not None:
            return self._collection
        return mongo_client.get_collection(REVIEWS_COLLECTION)

    def list_all(self) -> list[Review]:
        """Return every review, most recently added first."""
        cursor = self.collection.find().sort([("dateAdded", DESCENDING), ("_id", DESCENDING)])
        return [Review.from_document(doc) for doc in cursor]

    def create(self, fields: dict[str, Any]) -> Review:
        """
        Validate and store a new review.

        Args:
            fields: bookTitle, author, rating and reviewText

        Returns:
            The stored review, including its generated id and dateAdded

        Raises:
            ReviewValidationError: a field is missing or the rating is out of range
        """
        result = validate_review_fields(fields)
        if not result.ok:
            raise ReviewValidationError(result.errors)

        doc = {**result.values, "dateAdded": _utcnow()}
        inserted = self.collection.insert_one(doc)
        doc["_id"] = inserted.inserted_id
        logger.info(f"Review {inserted.inserted_id} created for '{doc['bookTitle']}'")
        return Review.from_document(doc)

    def get_by_id(self, review_id: str) -> Review:
        doc = self.collection.find_one({"_id": _object_id(review_id)})
        if doc is None:
            raise ReviewNotFound(review_id)
        return Review.from_document(doc)

    def update(self, review_id: str, fields: dict[str, Any]) -> Review:
        """
        Overwrite the mutable fields that carry a truthy value.

        Falsy values (None, "", 0) leave the stored value unchanged; id and
        dateAdded are never written.
        """
        object_id = _object_id(review_id)
        changes = {name: fields[name] for name in MUTABLE_FIELDS if fields.get(name)}

        result = validate_review_fields(changes, partial=True)
        if not result.ok:
            # unknown ids win over bad input
            self.get_by_id(review_id)
            raise ReviewValidationError(result.errors)

        if not result.values:
            return self.get_by_id(review_id)

        doc = self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": result.values},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise ReviewNotFound(review_id)
        logger.info(f"Review {review_id} updated: {sorted(result.values)}")
        return Review.from_document(doc)

    def delete(self, review_id: str) -> None:
        deleted = self.collection.delete_one({"_id": _object_id(review_id)})
        if deleted.deleted_count == 0:
            raise ReviewNotFound(review_id)
        logger.info(f"Review {review_id} deleted")


# Singleton instance
review_service = ReviewService()
