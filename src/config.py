"""Configuration loaded from environment variables (and an optional .env file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))

MONGO_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DATABASE", "book_reviews"),
}
REVIEWS_COLLECTION = os.getenv("REVIEWS_COLLECTION", "reviews")

SERVER_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "5000")),
}

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

API_BASE_URL = os.getenv("API_BASE_URL", f"http://localhost:{SERVER_CONFIG['port']}")
