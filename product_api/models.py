# product_api/models.py

from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime

class Product(BaseModel):
  model_config = ConfigDict(from_attributes=True)

  id: int
  name: str
  category: str
  brand: str
  model: str
  description: Optional[str] = None
  price: float
  created_at: datetime


class PaginatedResponse(BaseModel):
  """Envelope returned by GET /products. 'count' is the total row count, not the page size."""
  products: List[Product]
  page: int
  limit: int
  total_pages: int
  count: int
