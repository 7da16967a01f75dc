# product_api/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import json
from datetime import datetime, timezone

from opentelemetry import trace


# Custom JSON Formatter
class JsonFormatter(logging.Formatter):
  def format(self, record):
    log_record = {
      "timestamp": datetime.now(timezone.utc).isoformat(),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
      "file": record.pathname,
      "line": record.lineno,
      "function": record.funcName
    }

    # Correlate log lines with the request span
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
      log_record["trace_id"] = format(span_context.trace_id, "032x")
      log_record["span_id"] = format(span_context.span_id, "016x")

    if record.exc_info:
      log_record["exception"] = self.formatException(record.exc_info)

    return json.dumps(log_record)


json_formatter = JsonFormatter()

def configure_logging():
  ENV = os.getenv("APP_ENV", "development")

  LOG_DIR = os.getenv("LOG_DIR", "logs")
  APP_LOG_FILE = os.path.join(LOG_DIR, "app.log")
  TEST_LOG_FILE = os.path.join(LOG_DIR, "test.log")

  os.makedirs(LOG_DIR, exist_ok=True)

  # Root logger
  logger = logging.getLogger()
  if ENV == "testing" or ENV == "development":
    logger.setLevel(logging.DEBUG)
  else:
    logger.setLevel(logging.INFO)

  # Clear previous handler
  if logger.hasHandlers():
    logger.handlers.clear()

  # --- Console (stdout) logger ---
  console_handler = logging.StreamHandler(sys.stdout)
  console_handler.setFormatter(json_formatter)
  console_handler.setLevel(logging.INFO if ENV == "development" else logging.ERROR)
  logger.addHandler(console_handler)

  # File logging for testing stage test.log, others app.log
  if ENV == "testing":
    file_handler = RotatingFileHandler(TEST_LOG_FILE, maxBytes=1*1024*1024, backupCount=1, encoding="utf-8")
    file_handler.setFormatter(json_formatter)
    file_handler.setLevel(logging.DEBUG)
  else:
    file_handler = RotatingFileHandler(APP_LOG_FILE, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8")
    file_handler.setFormatter(json_formatter)
    file_handler.setLevel(logging.INFO)
  logger.addHandler(file_handler)


def get_logger(name):
  """
  Returns a logger object with specific name.
  configure_logging() should be called once at startup before using it.
  """
  return logging.getLogger(name)
