# tests/test_product_store.py

import logging
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine
from product_api.database import init_db, get_session
from product_api.db_models import ProductRecord
from product_api.main import app
from product_api.product_store import SQLProductStore
from product_api.seed import seed_products, generate_products
from product_api.telemetry import Observability, get_observability
import product_api.exceptions as ex


def memory_engine():
  return create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)


@pytest.fixture
def engine():
  db_engine = memory_engine()
  init_db(db_engine)
  yield db_engine
  db_engine.dispose()


def add_products(engine, ids):
  with Session(engine) as session:
    for product_id in ids:
      session.add(ProductRecord(
        id=product_id,
        name=f"Monitor {product_id}",
        category="Monitor",
        brand="LG",
        model=f"27GP-{product_id}",
        price=Decimal("349.99"),
      ))
    session.commit()


def test_count_products(engine):
  add_products(engine, [1, 2, 3])
  with Session(engine) as session:
    assert SQLProductStore(session).count_products() == 3


def test_count_empty_table(engine):
  with Session(engine) as session:
    assert SQLProductStore(session).count_products() == 0


def test_fetch_orders_by_id(engine):
  add_products(engine, [5, 2, 9, 1, 7])
  with Session(engine) as session:
    products = SQLProductStore(session).fetch_products(limit=10, offset=0)
  assert [p.id for p in products] == [1, 2, 5, 7, 9]


def test_fetch_applies_limit_and_offset(engine):
  add_products(engine, range(1, 26))
  with Session(engine) as session:
    products = SQLProductStore(session).fetch_products(limit=10, offset=20)
  assert [p.id for p in products] == [21, 22, 23, 24, 25]


def test_fetch_past_the_end(engine):
  add_products(engine, [1, 2])
  with Session(engine) as session:
    assert SQLProductStore(session).fetch_products(limit=10, offset=10) == []


def test_fetch_returns_all_fields(engine):
  add_products(engine, [1])
  with Session(engine) as session:
    product = SQLProductStore(session).fetch_products(limit=1, offset=0)[0]
  assert product.name == "Monitor 1"
  assert product.brand == "LG"
  assert product.model == "27GP-1"
  assert product.price == Decimal("349.99")
  assert product.created_at is not None


def test_count_error_is_wrapped():
  db_engine = memory_engine()  # no products table
  with Session(db_engine) as session:
    with pytest.raises(ex.CountQueryError) as exc:
      SQLProductStore(session).count_products()
  assert exc.value.query == "count"
  assert "no such table" in str(exc.value.cause)


def test_fetch_error_is_wrapped():
  db_engine = memory_engine()
  with Session(db_engine) as session:
    with pytest.raises(ex.FetchQueryError) as exc:
      SQLProductStore(session).fetch_products(limit=10, offset=0)
  assert exc.value.query == "fetch"


def test_seed_products(engine):
  assert seed_products(12, db_engine=engine) == 12
  with Session(engine) as session:
    assert SQLProductStore(session).count_products() == 12


def test_generate_products():
  products = generate_products(20)
  assert len(products) == 20
  for product in products:
    assert product.id is None
    assert product.name.startswith(product.brand)
    assert product.price > 0


def test_products_endpoint_against_sqlite(engine):
  add_products(engine, range(1, 6))

  def session_override():
    with Session(engine) as session:
      yield session

  app.dependency_overrides[get_session] = session_override
  try:
    response = TestClient(app).get("/products", params={"page": "2", "limit": "2"})
  finally:
    app.dependency_overrides.clear()

  assert response.status_code == 200
  data = response.json()
  assert [p["id"] for p in data["products"]] == [3, 4]
  assert data["total_pages"] == 3
  assert data["count"] == 5


def test_products_endpoint_missing_table():
  db_engine = memory_engine()

  def session_override():
    with Session(db_engine) as session:
      yield session

  app.dependency_overrides[get_session] = session_override
  try:
    response = TestClient(app, raise_server_exceptions=False).get("/products")
  finally:
    app.dependency_overrides.clear()

  assert response.status_code == 500
  assert response.json() == {"detail": "Internal server error"}


def test_fetch_offset_overflow_is_wrapped(engine):
  add_products(engine, [1, 2])
  with Session(engine) as session:
    with pytest.raises(ex.FetchQueryError) as exc:
      SQLProductStore(session).fetch_products(limit=10, offset=(2**63 - 2) * 10)
  assert isinstance(exc.value.cause, OverflowError)


def test_products_endpoint_huge_page(engine):
  add_products(engine, range(1, 4))
  exporter = InMemorySpanExporter()
  provider = TracerProvider()
  provider.add_span_processor(SimpleSpanProcessor(exporter))

  def session_override():
    with Session(engine) as session:
      yield session

  app.dependency_overrides[get_session] = session_override
  app.dependency_overrides[get_observability] = lambda: Observability(
    tracer=provider.get_tracer("tests"), log=logging.getLogger("product_api.handlers"))
  try:
    response = TestClient(app, raise_server_exceptions=False).get(
      "/products", params={"page": str(2**63 - 1), "limit": "10"})
  finally:
    app.dependency_overrides.clear()

  assert response.status_code == 500
  assert response.json() == {"detail": "Internal server error"}
  assert response.headers["access-control-allow-origin"] == "*"
  span = exporter.get_finished_spans()[0]
  assert "fetch query failed" in span.attributes["error"]
