"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database through Settings
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
