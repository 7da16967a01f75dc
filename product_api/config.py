# product_api/config.py

import os

# Get environment variable
ENV = os.getenv("APP_ENV", "development") # production, development, testing

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///db/products.db")

# Tracing
SERVICE_NAME = os.getenv("SERVICE_NAME", "product-search-backend")
SERVICE_VERSION = "1.0.0"
OTLP_TRACES_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT")

# Browser client target
API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")

# Pagination bounds
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

# Headers sent on every /products response, errors included
JSON_HEADERS = {
  "Content-Type": "application/json",
  "Access-Control-Allow-Origin": "*",
  "Access-Control-Allow-Methods": "GET, OPTIONS",
  "Access-Control-Allow-Headers": "Content-Type",
}
