"""HTTP client for the review API and the board state the review UI renders."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from src.config import API_BASE_URL
from src.models.reviews import Review
from src.services.review_validation import ValidationResult, validate_review_fields

logger = logging.getLogger(__name__)


class ReviewClientError(Exception):
    """The review API rejected a call or could not be reached."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class ReviewClient:
    def __init__(self, base_url: str = API_BASE_URL, http_client: httpx.Client | None = None):
        self.http = http_client or httpx.Client(base_url=base_url, timeout=10.0)

    def close(self):
        self.http.close()

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = self.http.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            logger.error(f"Error calling review API {method} {url}: {exc}")
            raise ReviewClientError(None, f"Could not reach review API: {exc}") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("message", response.text) if isinstance(body, dict) else response.text
            logger.error(f"Review API {method} {url} failed: {response.status_code} - {message}")
            raise ReviewClientError(response.status_code, message)

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Review API {method} {url} returned a non-JSON body: {response.text[:200]}")
            raise ReviewClientError(response.status_code, "Review API returned an invalid response") from exc

    def list_reviews(self) -> list[Review]:
        return [Review.model_validate(item) for item in self._request("GET", "/reviews")]

    def create_review(self, fields: dict[str, Any]) -> Review:
        return Review.model_validate(self._request("POST", "/reviews", json=fields))

    def update_review(self, review_id: str, fields: dict[str, Any]) -> Review:
        return Review.model_validate(self._request("PUT", f"/reviews/{review_id}", json=fields))

    def delete_review(self, review_id: str) -> str:
        return self._request("DELETE", f"/reviews/{review_id}")["message"]


class ReviewForm(BaseModel):
    bookTitle: str = ""
    author: str = ""
    rating: int = 5
    reviewText: str = ""

    def check(self) -> ValidationResult:
        return validate_review_fields(self.to_payload())

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()

    def load(self, review: Review):
        self.bookTitle = review.bookTitle
        self.author = review.author
        self.rating = review.rating
        self.reviewText = review.reviewText

    def reset(self):
        for name, field in ReviewForm.model_fields.items():
            setattr(self, name, field.default)


class ReviewBoard:
    """
    State behind the review page: the list shown to the user, the form, and
    which review (if any) is being edited or awaiting delete confirmation.

    API and validation failures never raise out of the board; they are kept
    in `error` for the page to display.
    """

    def __init__(self, client: ReviewClient):
        self.client = client
        self.reviews: list[Review] = []
        self.form = ReviewForm()
        self.editing_id: str | None = None
        self.pending_delete_id: str | None = None
        self.error: str | None = None

    def _find(self, review_id: str) -> Review | None:
        return next((review for review in self.reviews if review.id == review_id), None)

    def refresh(self):
        try:
            self.reviews = self.client.list_reviews()
            self.error = None
        except ReviewClientError as e:
            self.error = e.message

    def submit(self) -> Review | None:
        """Create a review from the form, or update the one being edited."""
        result = self.form.check()
        if not result.ok:
            self.error = "; ".join(f"{error.field} {error.message}" for error in result.errors)
            return None

        try:
            if self.editing_id:
                review = self.client.update_review(self.editing_id, result.values)
                self.reviews = [review if item.id == review.id else item for item in self.reviews]
            else:
                review = self.client.create_review(result.values)
                self.reviews.insert(0, review)
        except ReviewClientError as e:
            self.error = e.message
            return None

        self.form.reset()
        self.editing_id = None
        self.error = None
        return review

    def start_edit(self, review_id: str):
        review = self._find(review_id)
        if review is None:
            self.error = "Review not found"
            return
        self.form.load(review)
        self.editing_id = review_id
        self.error = None

    def cancel_edit(self):
        self.form.reset()
        self.editing_id = None

    def request_delete(self, review_id: str):
        self.pending_delete_id = review_id

    def cancel_delete(self):
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        review_id = self.pending_delete_id
        if review_id is None:
            return False
        self.pending_delete_id = None

        try:
            self.client.delete_review(review_id)
        except ReviewClientError as e:
            # 404: already gone server side
            if e.status_code != 404:
                self.error = e.message
                return False

        self.error = None
        self.reviews = [review for review in self.reviews if review.id != review_id]
        if self.editing_id == review_id:
            self.cancel_edit()
        return True
