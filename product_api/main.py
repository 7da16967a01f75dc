# product_api/main.py

import time
from fastapi import FastAPI, Query, Depends, Request
from fastapi.responses import JSONResponse, Response
from contextlib import asynccontextmanager
from sqlmodel import Session
from typing import List, Optional

from product_api.config import JSON_HEADERS
from product_api.database import init_db, get_session
from product_api.models import PaginatedResponse
from product_api.product_service import list_products
from product_api.product_store import ProductStore, SQLProductStore
from product_api.telemetry import Observability, configure_tracing, get_observability
import product_api.exceptions as ex

from product_api.logger import configure_logging, get_logger
configure_logging()

log = get_logger(__name__)
log.info("FastAPI application is starting...")

@asynccontextmanager
async def lifespan(app: FastAPI):
  # Application startup
  configure_tracing()
  init_db()
  yield


app = FastAPI(title="Product Search Backend",
              lifespan=lifespan,
              description="Paginated, read-only listing of the product catalog with request tracing.",
              version="1.0.0")


# Dependency
def get_product_store(session: Session = Depends(get_session)) -> ProductStore:
  return SQLProductStore(session)


def first_value(values: Optional[List[str]]) -> Optional[str]:
  return values[0] if values else None


def encode_response(response: PaginatedResponse) -> str:
  return response.model_dump_json()


@app.get("/products", response_model=PaginatedResponse)
def get_products(
  request: Request,
  page: Optional[List[str]] = Query(None, description="Page number, invalid values fall back to 1"),
  limit: Optional[List[str]] = Query(None, description="Items per page (1-100), invalid values fall back to 10"),
  store: ProductStore = Depends(get_product_store),
  obs: Observability = Depends(get_observability),
  ):
  """
  Returns one page of products ordered by id.
  page/limit are read as raw strings so malformed values degrade to defaults instead of a 422.
  When a parameter is repeated only its first value is used.
  """
  start = time.perf_counter()
  remote = f"{request.client.host}:{request.client.port}" if request.client else "unknown"
  obs.log.info(f"[API] Get products request from {remote}")

  result = list_products(store, obs, first_value(page), first_value(limit))

  try:
    body = encode_response(result)
  except (ValueError, TypeError) as e:
    # Status is already decided, the client just gets an empty body
    obs.log.error(f"[ERROR] Failed to encode products response: {e}")
    return Response(status_code=200, headers=JSON_HEADERS)

  duration_ms = round((time.perf_counter() - start) * 1000, 2)
  obs.log.info(f"[API] Get products completed in {duration_ms}ms - returned {len(result.products)} products")
  return Response(content=body, status_code=200, headers=JSON_HEADERS)


@app.get("/")
def root():
  return {"messages": "Product Search Backend - endpoints: /products?page=...&limit=..., /health"}


@app.get("/health")
def healthcheck():
  return {"status": "ok"}


@app.exception_handler(ex.ProductStoreError)
async def product_store_exception_handler(request: Request, exc: ex.ProductStoreError):
  log.error(f"[API] {request.url.path} aborted: {exc}")
  return JSONResponse(
    status_code=500,
    content={"detail": "Internal server error"},
    headers=JSON_HEADERS,
  )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
  log.error(f"Global Exception Unhandled exception: {exc}", exc_info=True)
  return JSONResponse(
    status_code=500,
    content={"detail": "Internal Server Error"},
    headers=JSON_HEADERS,
  )
