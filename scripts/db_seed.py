"""Seed the products table with demo rows.

Creates the table when it does not exist, then inserts ``count`` products
named ``Product <i>`` priced ``(i + 1) * 10``.

Usage:
    python scripts/db_seed.py [count]

The store is configured from the same environment as the service
(APP_DB_USERNAME / APP_DB_PASSWORD / APP_DB_NAME or DATABASE_URL).
"""
import asyncio
import sys
from pathlib import Path

# Ensure project root is on sys.path so the package imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from product_api.config import get_settings
from product_api.database import Database
from product_api.store import create_product, list_products

DEFAULT_COUNT = 3


async def seed(database: Database, count: int) -> None:
    await database.create_schema()
    async with database.session() as session:
        for i in range(max(count, 1)):
            product = await create_product(session, f"Product {i}", (i + 1) * 10)
            print(f"Seeded {product!r}")
        print("Products now in the store (first 10):")
        for product in await list_products(session, 0, 10):
            print(f"  {product!r}")


async def main(count: int) -> None:
    database = Database(get_settings().database_url)
    print("DB seed starting, DATABASE_URL=", database.engine.url)
    try:
        await seed(database, count)
    finally:
        await database.dispose()
    print("DB seed complete")


if __name__ == "__main__":
    asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_COUNT))
