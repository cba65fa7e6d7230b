"""Supplier and product routers."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.pagination import PaginationParams
from swagsuite.core.response import DataResponse, ItemsResponse, ListResponse, paginated
from swagsuite.db.base import get_db
from swagsuite.schemas.order import OrderOut
from swagsuite.schemas.supplier import (
    ProductCreate,
    ProductOut,
    ProductUpdate,
    SupplierCreate,
    SupplierOut,
    SupplierUpdate,
)
from swagsuite.services.supplier import ProductService, SupplierService

suppliers_router = APIRouter(prefix="/api/suppliers", tags=["Suppliers"])
products_router = APIRouter(prefix="/api/products", tags=["Products"])


# ------------------------------------------------------------------
# Suppliers
# ------------------------------------------------------------------

@suppliers_router.get("", response_model=ListResponse[SupplierOut])
async def list_suppliers(
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await SupplierService(session).list_suppliers(pagination)
    return paginated([SupplierOut.model_validate(s) for s in items], total, pagination)


@suppliers_router.post("", response_model=DataResponse[SupplierOut], status_code=status.HTTP_201_CREATED)
async def create_supplier(body: SupplierCreate, session: AsyncSession = Depends(get_db)):
    supplier = await SupplierService(session).create_supplier(body)
    return {"data": SupplierOut.model_validate(supplier)}


@suppliers_router.get("/{supplier_id}", response_model=DataResponse[SupplierOut])
async def get_supplier(supplier_id: str, session: AsyncSession = Depends(get_db)):
    supplier = await SupplierService(session).get_supplier(supplier_id)
    return {"data": SupplierOut.model_validate(supplier)}


@suppliers_router.patch("/{supplier_id}", response_model=DataResponse[SupplierOut])
async def update_supplier(
    supplier_id: str,
    body: SupplierUpdate,
    session: AsyncSession = Depends(get_db),
):
    supplier = await SupplierService(session).update_supplier(supplier_id, body)
    return {"data": SupplierOut.model_validate(supplier)}


@suppliers_router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(supplier_id: str, session: AsyncSession = Depends(get_db)):
    await SupplierService(session).delete_supplier(supplier_id)


# ------------------------------------------------------------------
# Products
# ------------------------------------------------------------------

@products_router.get("", response_model=ListResponse[ProductOut])
async def list_products(
    supplier_id: Optional[str] = Query(default=None, alias="supplierId"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    items, total = await ProductService(session).list_products(pagination, supplier_id=supplier_id)
    return paginated([ProductOut.model_validate(p) for p in items], total, pagination)


@products_router.get("/search", response_model=ItemsResponse[ProductOut])
async def search_products(
    q: Optional[str] = Query(default=None, description="Matches name, SKU, description or category"),
    session: AsyncSession = Depends(get_db),
):
    products = await ProductService(session).search_products(q)
    return {"data": [ProductOut.model_validate(p) for p in products]}


@products_router.post("", response_model=DataResponse[ProductOut], status_code=status.HTTP_201_CREATED)
async def create_product(body: ProductCreate, session: AsyncSession = Depends(get_db)):
    product = await ProductService(session).create_product(body)
    return {"data": ProductOut.model_validate(product)}


@products_router.get("/{product_id}", response_model=DataResponse[ProductOut])
async def get_product(product_id: str, session: AsyncSession = Depends(get_db)):
    product = await ProductService(session).get_product(product_id)
    return {"data": ProductOut.model_validate(product)}


@products_router.get("/{product_id}/orders", response_model=ItemsResponse[OrderOut])
async def get_product_orders(product_id: str, session: AsyncSession = Depends(get_db)):
    """Orders with at least one line item for this product."""
    orders = await ProductService(session).orders_for_product(product_id)
    return {"data": [OrderOut.model_validate(o) for o in orders]}


@products_router.patch("/{product_id}", response_model=DataResponse[ProductOut])
async def update_product(
    product_id: str,
    body: ProductUpdate,
    session: AsyncSession = Depends(get_db),
):
    product = await ProductService(session).update_product(product_id, body)
    return {"data": ProductOut.model_validate(product)}


@products_router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, session: AsyncSession = Depends(get_db)):
    await ProductService(session).delete_product(product_id)
