import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# "development" keeps everything in a local SQLite file, anything else talks
# to the remote store behind DATABASE_URL.
ENV = os.getenv("ENV", "development")
DEVELOPMENT = "development"

DATABASE_URL = os.getenv("DATABASE_URL")
SQLITE_PATH = os.getenv("SQLITE_PATH", "sample.db")

HOST = os.getenv("HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("PORT", 8080))

STATIC_DIR = os.getenv("STATIC_DIR", str(Path(__file__).parent / "public"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class STATSD:
    PREFIX = os.getenv("STATSD_PREFIX", "bookshelf")
