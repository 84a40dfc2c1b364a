"""
Local entry point for the pet registry API.

Usage:
    python run_fastapi.py
"""

import os

import uvicorn
from dotenv import load_dotenv

load_dotenv()

if __name__ == "__main__":
    uvicorn.run(
        "pet_registry.fastapi_app:create_fastapi_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 8080)),
    )
