"""
Pydantic models for MongoDB 'reviews' collection.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

MUTABLE_FIELDS = ("bookTitle", "author", "rating", "reviewText")


class ReviewCreate(BaseModel):
    # Everything is optional here so missing fields are reported by
    # validate_review_fields as a 400 instead of FastAPI's default 422.
    # rating stays untyped so booleans and non-numbers reach the validator
    # instead of being coerced by pydantic.
    bookTitle: str | None = None
    author: str | None = None
    rating: Any = None
    reviewText: str | None = None


class ReviewUpdate(BaseModel):
    bookTitle: str | None = None
    author: str | None = None
    rating: Any = None
    reviewText: str | None = None


class Review(BaseModel):
    id: str
    bookTitle: str
    author: str
    rating: int
    reviewText: str
    dateAdded: datetime

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Review":
        """Build a Review from a raw 'reviews' document."""
        return cls(
            id=str(doc["_id"]),
            bookTitle=doc["bookTitle"],
            author=doc["author"],
            rating=doc["rating"],
            reviewText=doc["reviewText"],
            dateAdded=doc["dateAdded"],
        )
