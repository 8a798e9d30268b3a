"""Root conftest — shared test configuration."""

import os

# Tests never touch a real server database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENV", "test")
os.environ.setdefault("LOG_FORMAT", "text")
