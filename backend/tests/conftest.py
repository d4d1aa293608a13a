"""Shared test configuration: runs before any ``sgca`` module is imported."""

import os

# The engine is built at import time from these settings.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "test")
