"""Shared fixtures: a MagicMock 'reviews' collection backed by a dict."""

from unittest.mock import MagicMock

import pytest
from bson import ObjectId

from src.services.review_service import ReviewService


@pytest.fixture
def review_docs():
    return {}


@pytest.fixture
def review_collection(review_docs):
    collection = MagicMock()

    def insert_one(doc):
        object_id = ObjectId()
        review_docs[object_id] = {**doc, "_id": object_id}
        return MagicMock(inserted_id=object_id)

    def find_one(query):
        doc = review_docs.get(query["_id"])
        return dict(doc) if doc else None

    def find_one_and_update(query, update, return_document=None):
        doc = review_docs.get(query["_id"])
        if doc is None:
            return None
        doc.update(update["$set"])
        return dict(doc)

    def delete_one(query):
        removed = review_docs.pop(query["_id"], None)
        return MagicMock(deleted_count=1 if removed else 0)

    def find(query=None):
        cursor = MagicMock()
        cursor.sort.side_effect = lambda keys: sorted(
            (dict(doc) for doc in review_docs.values()),
            key=lambda doc: (doc["dateAdded"], doc["_id"]),
            reverse=True,
        )
        return cursor

    collection.insert_one.side_effect = insert_one
    collection.find_one.side_effect = find_one
    collection.find_one_and_update.side_effect = find_one_and_update
    collection.delete_one.side_effect = delete_one
    collection.find.side_effect = find
    return collection


@pytest.fixture
def review_service(review_collection):
    return ReviewService(collection=review_collection)


@pytest.fixture
def dune():
    return {
        "bookTitle": "Dune",
        "author": "Herbert",
        "rating": 5,
        "reviewText": "A masterpiece of scale.",
    }
