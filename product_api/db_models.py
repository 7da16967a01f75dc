# product_api/db_models.py

from sqlmodel import SQLModel, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime, timezone

class ProductRecord(SQLModel, table=True):
  """Row of the products table. Read-only from the API's point of view."""
  __tablename__ = "products"
  __table_args__ = {"extend_existing": True}

  id: Optional[int] = Field(default=None, primary_key=True)
  name: str
  category: str
  brand: str
  model: str
  description: Optional[str] = None
  price: Decimal = Field(default=Decimal("0.00"), max_digits=10, decimal_places=2)
  created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
