"""
Init file for the review models.
"""

from .reviews import MUTABLE_FIELDS, Review, ReviewCreate, ReviewUpdate

__all__ = [
    "MUTABLE_FIELDS",
    "Review",
    "ReviewCreate",
    "ReviewUpdate",
]
