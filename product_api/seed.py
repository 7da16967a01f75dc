# product_api/seed.py

import random
import sys
from decimal import Decimal
from typing import List
from faker import Faker
from sqlmodel import Session
from product_api.database import engine, init_db
from product_api.db_models import ProductRecord
from product_api.logger import configure_logging, get_logger

log = get_logger(__name__)
fake = Faker()

CATALOG = {
  "Headphones": ["Sony", "Bose", "Sennheiser", "JBL"],
  "Laptop": ["Lenovo", "Dell", "Apple", "Asus"],
  "Smartphone": ["Samsung", "Apple", "Google", "Xiaomi"],
  "Monitor": ["LG", "Dell", "BenQ", "Samsung"],
}


def generate_products(count: int) -> List[ProductRecord]:
  """Generates dummy product rows, ids are left to the database"""
  products = list()
  for _ in range(count):
    category = random.choice(list(CATALOG))
    brand = random.choice(CATALOG[category])
    model = f"{fake.lexify('??').upper()}-{fake.numerify('###')}"
    products.append(ProductRecord(
      name=f"{brand} {model} {category}",
      category=category,
      brand=brand,
      model=model,
      description=fake.sentence(nb_words=8),
      price=Decimal(str(round(random.uniform(9.99, 2499.99), 2))),
    ))
  return products


def seed_products(count: int = 50, db_engine=None) -> int:
  """Insert count fake products. Returns number of inserted rows."""
  db_engine = db_engine or engine
  init_db(db_engine)

  products = generate_products(count)
  with Session(db_engine) as session:
    try:
      session.add_all(products)
      session.commit()
    except Exception as e:
      log.error(f"[DB ERROR] Seeding failed: {e}")
      session.rollback()
      raise

  log.info(f"[DB] Seeded {len(products)} products")
  return len(products)


if __name__ == "__main__":
  configure_logging()
  count = int(sys.argv[1]) if len(sys.argv) > 1 else 50
  seed_products(count)
