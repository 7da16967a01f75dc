# product_api/exceptions.py

class ProductStoreError(Exception):
  """All product store query errors"""
  def __init__(self, query: str, cause: Exception = None):
    self.query = query
    self.cause = cause
    self.message = f"{query} query failed: {cause}" if cause is not None else f"{query} query failed"
    super().__init__(self.message)

class CountQueryError(ProductStoreError):
  """Total row count query failed"""
  def __init__(self, cause: Exception = None):
    super().__init__("count", cause)

class FetchQueryError(ProductStoreError):
  """Bounded page query failed"""
  def __init__(self, cause: Exception = None):
    super().__init__("fetch", cause)
