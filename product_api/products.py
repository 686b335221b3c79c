# product_api/products.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from . import store
from .database import get_session
from .schemas import DeleteResult, ErrorOut, ProductIn, ProductOut

router = APIRouter(tags=["products"])

MAX_COUNT = 10

_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorOut}}


@router.get("/products", response_model=List[ProductOut])
async def list_products(start: int = 0, count: int = MAX_COUNT, session: AsyncSession = Depends(get_session)):
    # out-of-range windows fall back to the defaults instead of failing
    if count > MAX_COUNT or count < 1:
        count = MAX_COUNT
    if start < 0:
        start = 0
    return await store.list_products(session, start, count)


@router.get("/product/{product_id}", response_model=ProductOut, responses=_not_found)
async def get_product(product_id: int, session: AsyncSession = Depends(get_session)):
    return await store.fetch_product(session, product_id)


@router.post("/product", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductIn, session: AsyncSession = Depends(get_session)):
    return await store.create_product(session, payload.name, payload.price)


@router.put("/product/{product_id}", response_model=ProductOut)
async def update_product(product_id: int, payload: ProductIn, session: AsyncSession = Depends(get_session)):
    # an unknown id still answers 200: the update just touches no row.
    # The body echoes the request, so the price is not yet rounded to cents.
    await store.update_product(session, product_id, payload.name, payload.price)
    return ProductOut(id=product_id, name=payload.name, price=payload.price)


@router.delete("/product/{product_id}", response_model=DeleteResult)
async def delete_product(product_id: int, session: AsyncSession = Depends(get_session)):
    await store.delete_product(session, product_id)
    return DeleteResult()


@router.get("/productsUnder/{value}", response_model=List[ProductOut])
async def products_under(value: int, session: AsyncSession = Depends(get_session)):
    return await store.list_products_under(session, value)


@router.get("/productsOver/{value}", response_model=List[ProductOut])
async def products_over(value: int, session: AsyncSession = Depends(get_session)):
    return await store.list_products_over(session, value)


@router.get("/products/min", response_model=ProductOut, responses=_not_found)
async def cheapest_product(session: AsyncSession = Depends(get_session)):
    return await store.find_cheapest(session)


@router.get("/products/max", response_model=ProductOut, responses=_not_found)
async def most_expensive_product(session: AsyncSession = Depends(get_session)):
    return await store.find_most_expensive(session)


@router.get("/products/name/{fragment}", response_model=List[ProductOut])
async def products_by_name(fragment: str, session: AsyncSession = Depends(get_session)):
    return await store.search_products_by_name(session, fragment)
