# product_api/pagination.py

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence
from product_api.config import DEFAULT_PAGE, DEFAULT_LIMIT, MAX_LIMIT
from product_api.models import Product, PaginatedResponse

# Optional sign followed by digits, nothing else (no spaces, underscores or decimals)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
  page: int
  limit: int

  @property
  def offset(self) -> int:
    """Zero based row skip count"""
    return (self.page - 1) * self.limit


def parse_int(raw: Optional[str]) -> Optional[int]:
  """Parse strict signed integer string. Returns None when raw is missing, malformed or out of 64-bit range."""
  if raw is None or not _INTEGER_PATTERN.fullmatch(raw):
    return None
  value = int(raw)
  if value < _INT64_MIN or value > _INT64_MAX:
    return None
  return value


def normalize_page_request(page_raw: Optional[str], limit_raw: Optional[str]) -> PageRequest:
  """
  Turn untrusted page/limit query strings into a valid PageRequest.
  Invalid input never raises, it silently falls back to the defaults.

  Args:
    page_raw (Optional[str]): Raw 'page' value, must be >= 1
    limit_raw (Optional[str]): Raw 'limit' value, must be in [1, MAX_LIMIT]

  Returns:
    PageRequest: Normalized page and limit
  """
  page = parse_int(page_raw)
  if page is None or page < 1:
    page = DEFAULT_PAGE

  limit = parse_int(limit_raw)
  if limit is None or limit < 1 or limit > MAX_LIMIT:
    limit = DEFAULT_LIMIT

  return PageRequest(page=page, limit=limit)


def compute_total_pages(total_count: int, limit: int) -> int:
  """ceil(total_count / limit) with integer arithmetic"""
  if limit <= 0 or total_count <= 0:
    return 0
  return -(-total_count // limit)


def compose_response(products: Sequence, total_count: int, page_request: PageRequest) -> PaginatedResponse:
  """Build the paginated envelope. An empty page past the end is still a valid response."""
  items: List[Product] = [Product.model_validate(p) for p in products]
  return PaginatedResponse(
    products=items,
    page=page_request.page,
    limit=page_request.limit,
    total_pages=compute_total_pages(total_count, page_request.limit),
    count=total_count,
  )
