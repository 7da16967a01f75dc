# product_api/database.py

from sqlmodel import SQLModel, create_engine, Session
import os
from product_api.config import DATABASE_URL
from product_api.logger import get_logger

log = get_logger(__name__)


def build_engine(url: str = DATABASE_URL):
  """Create engine for given database url. Sqlite engines may be shared across request threads."""
  connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
  return create_engine(url, echo=False, connect_args=connect_args)


engine = build_engine()


def init_db(db_engine=None):
  """Creates products table if it does not exist"""
  from product_api.db_models import ProductRecord

  db_engine = db_engine or engine

  # Ensure the sqlite db directory exists
  database = db_engine.url.database
  if db_engine.url.get_backend_name() == "sqlite" and database and database != ":memory:":
    directory = os.path.dirname(database)
    if directory:
      os.makedirs(directory, exist_ok=True)

  SQLModel.metadata.create_all(db_engine, tables=[ProductRecord.__table__], checkfirst=True)
  log.info(f"[DB] Initialized products table on {db_engine.url.render_as_string(hide_password=True)}")


# Dependency
def get_session():
  """Yield new session for one request, closed when request ends"""
  with Session(engine) as session:
    yield session
