"""
Configuration settings for the Users API
"""

import os
import logging

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

# Environment configuration
ENV = os.getenv("ENV", "PROD")  # PROD or QA
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/users")
MONGODB_DATABASE = os.getenv("MONGODB_DATABASE")  # Falls back to the database named in MONGODB_URI
USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users")
MONGODB_TIMEOUT_MS = int(os.getenv("MONGODB_TIMEOUT_MS", 5000))
PORT = int(os.getenv("PORT", 8080))

logger.info(f"Environment: {ENV}")

# Validate required environment variables
if not MONGODB_URI:
    raise ValueError("MONGODB_URI environment variable is required")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]
