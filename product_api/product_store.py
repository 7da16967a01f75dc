# product_api/product_store.py

from typing import List, Protocol
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select
from product_api.db_models import ProductRecord
import product_api.exceptions as ex


class ProductStore(Protocol):
  """Read access to the products table needed by the listing endpoint"""

  def count_products(self) -> int:
    ...

  def fetch_products(self, limit: int, offset: int) -> List[ProductRecord]:
    ...


class SQLProductStore:
  """ProductStore backed by a SQLModel session. Errors surface as ProductStoreError with the underlying cause."""

  def __init__(self, session: Session):
    self.session = session

  def count_products(self) -> int:
    statement = select(func.count()).select_from(ProductRecord)
    try:
      return self.session.exec(statement).one()
    except (SQLAlchemyError, OverflowError) as e:
      raise ex.CountQueryError(e) from e

  def fetch_products(self, limit: int, offset: int) -> List[ProductRecord]:
    statement = (
      select(ProductRecord)
      .order_by(ProductRecord.id.asc())
      .offset(offset)
      .limit(limit)
    )
    try:
      return list(self.session.exec(statement).all())
    except (SQLAlchemyError, OverflowError) as e:
      raise ex.FetchQueryError(e) from e
