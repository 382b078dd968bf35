# archive_api/core/config.py
import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./archive.db")

# Directory on disk holding uploaded bytes, served back under /files
FILES_DIRECTORY = os.getenv("FILES_DIRECTORY", "files")

# Prefix of the relative `src` recorded for each file
FILES_URL_PREFIX = "files"

MAX_UPLOAD_FILES = int(os.getenv("MAX_UPLOAD_FILES", "10"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PORT = int(os.getenv("PORT", "8000"))

# bcrypt cost factor for stored passwords
PASSWORD_HASH_ROUNDS = 10

MIN_PASSWORD_LENGTH = 6
