"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    HOST             — Bind address for the API server (default: 127.0.0.1)
    PORT             — Bind port for the API server (default: 5000)
    LOG_LEVEL        — Root log level name (default: INFO)
    LOG_DIR          — Directory for the dated log file (default: logs)
    CORS_ORIGINS     — Comma-separated front-end origins allowed by CORS
    MAX_CODE_LENGTH  — Largest accepted `code` payload in characters (default: 100000)

The analysis engine never reads these values.  They only shape the HTTP
shell around it.
"""
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", 5000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5000",
    ).split(",")
    if origin.strip()
]

# Request size guard
MAX_CODE_LENGTH = int(os.getenv("MAX_CODE_LENGTH", 100_000))
