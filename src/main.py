"""FastAPI application for the Book Review backend."""

import logging

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from src.config import CORS_ORIGINS, SERVER_CONFIG
from src.errors import (
    ReviewNotFound,
    ReviewRequestFailed,
    ReviewValidationError,
    register_all_errors,
)
from src.models.reviews import Review, ReviewCreate, ReviewUpdate
from src.services.review_service import review_service

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Book Review API",
    description="Create, list, update and delete book reviews",
    version="1.0.0",
)

# Add CORS middleware, the review UI is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_all_errors(app)


# Health check endpoint
@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Book Review API"}


# Review Endpoints
@app.get("/reviews", response_model=list[Review])
def list_reviews():
    """Get all reviews, newest first."""
    try:
        return review_service.list_all()
    except Exception as e:
        logger.error(f"Error listing reviews: {e}")
        raise ReviewRequestFailed(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


@app.post("/reviews", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(request: ReviewCreate):
    """Create a review."""
    try:
        return review_service.create(request.model_dump())
    except ReviewValidationError:
        raise
    except Exception as e:
        logger.error(f"Error creating review: {e}")
        raise ReviewRequestFailed(status.HTTP_400_BAD_REQUEST, str(e))


@app.put("/reviews/{review_id}", response_model=Review)
def update_review(review_id: str, request: ReviewUpdate):
    """Update the fields present in the request body."""
    try:
        return review_service.update(review_id, request.model_dump(exclude_unset=True))
    except (ReviewNotFound, ReviewValidationError):
        raise
    except Exception as e:
        logger.error(f"Error updating review {review_id}: {e}")
        raise ReviewRequestFailed(status.HTTP_400_BAD_REQUEST, str(e))


@app.delete("/reviews/{review_id}")
def delete_review(review_id: str):
    """Delete a review."""
    try:
        review_service.delete(review_id)
        return {"message": "Review deleted successfully"}
    except ReviewNotFound:
        raise
    except Exception as e:
        logger.error(f"Error deleting review {review_id}: {e}")
        raise ReviewRequestFailed(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=SERVER_CONFIG["host"], port=SERVER_CONFIG["port"])
