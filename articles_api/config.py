# articles_api/config.py
import os
from dotenv import load_dotenv
load_dotenv()

PORT = int(os.getenv("PORT", "3000"))
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")

DB_DSN = os.getenv("DATABASE_URL")
DB_USER = os.getenv("DATABASE_USER")
DB_HOST = os.getenv("DATABASE_HOST")
DB_NAME = os.getenv("DATABASE_NAME")
DB_PASSWORD = os.getenv("DATABASE_PASSWORD")
_db_port = os.getenv("DATABASE_PORT")
DB_PORT = int(_db_port) if _db_port else None
