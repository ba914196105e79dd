#!/usr/bin/env python3
"""
Book Review Backend Startup Script
This script starts the FastAPI server for the review API.
"""

import logging

import uvicorn

from src.config import SERVER_CONFIG

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    base_url = f"http://localhost:{SERVER_CONFIG['port']}"
    logger.info("Starting Book Review Backend...")
    logger.info("Available endpoints:")
    logger.info("  - Health Check: GET /health")
    logger.info("  - Reviews: GET/POST /reviews")
    logger.info("  - Review by id: PUT/DELETE /reviews/{review_id}")
    logger.info(f"  - API Docs: {base_url}/docs")
    logger.info(f"  - OpenAPI Schema: {base_url}/openapi.json")

    uvicorn.run(
        "src.main:app",
        host=SERVER_CONFIG["host"],
        port=SERVER_CONFIG["port"],
        reload=True,
        log_level="info"
    )
