"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s | %(levelname)-8s | %(correlation_id)s | %(name)s | %(message)s",
    )

    # Persistence
    # "memory" keeps pets in process, "prisma" uses PostgreSQL through Prisma
    PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "memory").lower()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    LIST_PAGE_SIZE = int(os.getenv("LIST_PAGE_SIZE", "50"))

    # Registration cap, 0 disables it
    MAX_PETS_PER_USER = int(os.getenv("MAX_PETS_PER_USER", "0"))

    # S3 photo storage
    AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
    S3_BUCKET_NAME = os.getenv("S3_BUCKET_NAME", "pet-photos")
    AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID", "")
    AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY", "")
    S3_ENDPOINT_URL = os.getenv("S3_ENDPOINT_URL", "")
    S3_PUBLIC_BASE_URL = os.getenv("S3_PUBLIC_BASE_URL", "")

    # CORS
    CORS_ALLOWED_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
        if origin.strip()
    ]
