"""Product store accessor.

Each function takes the session it should run on and issues a single
parameterized statement against the ``products`` table. Failures are never
retried: a missing row on a single-row lookup raises ``NotFoundError``, any
other store failure is re-raised as ``StoreError`` with the driver's message.
"""
import functools
import logging
from decimal import Decimal
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import NotFoundError, StoreError
from .models import Product

logger = logging.getLogger(__name__)


def _store_errors(func):
    @functools.wraps(func)
    async def wrapper(session: AsyncSession, *args, **kwargs):
        try:
            return await func(session, *args, **kwargs)
        except (SQLAlchemyError, OSError) as exc:
            # OSError: asyncpg connection failures reach us unwrapped
            await session.rollback()
            logger.error("%s failed: %s", func.__name__, exc)
            raise StoreError(str(exc)) from exc

    return wrapper


def _as_decimal(price) -> Decimal:
    # str() first so 11.22 binds as 11.22, not its binary float expansion
    return price if isinstance(price, Decimal) else Decimal(str(price))


@_store_errors
async def fetch_product(session: AsyncSession, product_id: int) -> Product:
    product = await session.get(Product, product_id)
    if product is None:
        raise NotFoundError()
    return product


@_store_errors
async def create_product(session: AsyncSession, name: str, price: float) -> Product:
    product = Product(name=name, price=_as_decimal(price))
    session.add(product)
    await session.commit()
    # refresh so the caller sees the price the way the store keeps it
    await session.refresh(product)
    logger.debug("created product %s", product.id)
    return product


@_store_errors
async def update_product(session: AsyncSession, product_id: int, name: str, price: float) -> None:
    # No row matched is not an error: the statement simply has no effect.
    await session.execute(
        update(Product).where(Product.id == product_id).values(name=name, price=_as_decimal(price))
    )
    await session.commit()


@_store_errors
async def delete_product(session: AsyncSession, product_id: int) -> None:
    # Same policy as update_product for ids that do not exist.
    await session.execute(delete(Product).where(Product.id == product_id))
    await session.commit()


@_store_errors
async def list_products(session: AsyncSession, offset: int, limit: int) -> List[Product]:
    """Return up to ``limit`` products starting at ``offset``.

    There is no ORDER BY, so the store decides the order and it may differ
    between two calls with the same window.
    """
    res = await session.execute(select(Product).limit(limit).offset(offset))
    return list(res.scalars().all())


@_store_errors
async def list_products_under(session: AsyncSession, threshold: int) -> List[Product]:
    res = await session.execute(select(Product).where(Product.price < threshold))
    return list(res.scalars().all())


@_store_errors
async def list_products_over(session: AsyncSession, threshold: int) -> List[Product]:
    res = await session.execute(select(Product).where(Product.price > threshold))
    return list(res.scalars().all())


async def _first_by_price(session: AsyncSession, order) -> Product:
    res = await session.execute(select(Product).order_by(order).limit(1))
    product = res.scalar_one_or_none()
    if product is None:
        raise NotFoundError()
    return product


@_store_errors
async def find_cheapest(session: AsyncSession) -> Product:
    return await _first_by_price(session, Product.price.asc())


@_store_errors
async def find_most_expensive(session: AsyncSession) -> Product:
    return await _first_by_price(session, Product.price.desc())


@_store_errors
async def search_products_by_name(session: AsyncSession, fragment: str) -> List[Product]:
    """Products whose name contains ``fragment``.

    The fragment goes into ``LIKE '%' || :fragment || '%'`` as is: ``%`` and
    ``_`` inside it behave as wildcards.
    """
    res = await session.execute(select(Product).where(Product.name.contains(fragment)))
    return list(res.scalars().all())
