# tests/conftest.py

import os

# Must be set before product_api modules read their configuration
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite://")
