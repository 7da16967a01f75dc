# product_api/product_service.py

from typing import Optional
from opentelemetry.trace import Status, StatusCode
from product_api.models import PaginatedResponse
from product_api.pagination import normalize_page_request, compose_response
from product_api.product_store import ProductStore
from product_api.telemetry import Observability
import product_api.exceptions as ex


def list_products(
    store: ProductStore,
    obs: Observability,
    page_raw: Optional[str] = None,
    limit_raw: Optional[str] = None,
) -> PaginatedResponse:
  """
  Return one page of products ordered by id together with pagination metadata.

  Runs the total count query first, then the bounded page query. Either failure
  aborts the request: the error is logged, attached to the 'get_products' span
  and re-raised as ProductStoreError. The two reads are not wrapped in a
  transaction, so under concurrent writes 'count' may not match the page exactly.

  Args:
    store (ProductStore): Products table access
    obs (Observability): Tracer and logger for this request
    page_raw (Optional[str]): Raw 'page' query parameter
    limit_raw (Optional[str]): Raw 'limit' query parameter

  Returns:
    PaginatedResponse: products, page, limit, total_pages, count
  """
  log = obs.log

  with obs.tracer.start_as_current_span("get_products", record_exception=False) as span:
    log.info(f"[API] Request params - page: {page_raw}, limit: {limit_raw}")
    page_request = normalize_page_request(page_raw, limit_raw)
    log.info(f"[API] Processed params - page: {page_request.page}, limit: {page_request.limit}, offset: {page_request.offset}")
    span.set_attribute("page", page_request.page)
    span.set_attribute("limit", page_request.limit)

    try:
      log.info("[DB] Executing count query...")
      total_count = store.count_products()
      log.info(f"[DB] Total products count: {total_count}")

      log.info(f"[DB] Executing products query with limit: {page_request.limit}, offset: {page_request.offset}")
      products = store.fetch_products(page_request.limit, page_request.offset)
      log.info(f"[DB] Retrieved {len(products)} products")
    except ex.ProductStoreError as e:
      log.error(f"[DB ERROR] Failed to run {e.query} query: {e.cause}")
      span.set_attribute("error", str(e))
      span.record_exception(e)
      span.set_status(Status(StatusCode.ERROR, str(e)))
      raise

    response = compose_response(products, total_count, page_request)
    log.info(f"[API] Calculated total pages: {response.total_pages}")

    span.set_attribute("total_count", response.count)
    span.set_attribute("total_pages", response.total_pages)
    span.set_attribute("returned_count", len(response.products))

  return response
