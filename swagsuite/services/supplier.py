"""Supplier (vendor) and product catalog services."""


from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import BadRequestError, NotFoundError
from swagsuite.core.pagination import PaginationParams
from swagsuite.domain.order import Order
from swagsuite.domain.supplier import Product, Supplier
from swagsuite.repositories.supplier import ProductRepository, SupplierRepository
from swagsuite.schemas.supplier import ProductCreate, ProductUpdate, SupplierCreate, SupplierUpdate

class SupplierService:
    def __init__(self, session: AsyncSession):
        self._repo = SupplierRepository(session)

    async def list_suppliers(self, pagination: PaginationParams):
        return await self._repo.list(**pagination.as_list_kwargs())

    async def get_supplier(self, supplier_id: str) -> Supplier:
        supplier = await self._repo.get_by_id(supplier_id)
        if not supplier:
            raise NotFoundError("Supplier", supplier_id)
        return supplier

    async def create_supplier(self, data: SupplierCreate) -> Supplier:
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_supplier(self, supplier_id: str, data: SupplierUpdate) -> Supplier:
        _ = await self.get_supplier(supplier_id)
        updated = await self._repo.update(supplier_id, **data.model_dump(exclude_none=True, exclude_unset=True))
        return updated  # type: ignore[return-value]

    async def delete_supplier(self, supplier_id: str) -> None:
        if not await self._repo.delete(supplier_id):
            raise NotFoundError("Supplier", supplier_id)


class ProductService:
    def __init__(self, session: AsyncSession):
        self._repo = ProductRepository(session)
        self._suppliers = SupplierRepository(session)

    async def list_products(self, pagination: PaginationParams, supplier_id: str | None = None):
        filters = {"supplier_id": supplier_id} if supplier_id else None
        return await self._repo.list(**pagination.as_list_kwargs(), filters=filters)

    async def search_products(self, query: str | None) -> list[Product]:
        if not query or not query.strip():
            raise BadRequestError("Search query is required")
        return await self._repo.search(query.strip())

    async def get_product(self, product_id: str) -> Product:
        product = await self._repo.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product", product_id)
        return product

    async def _check_supplier(self, supplier_id: str | None) -> None:
        if supplier_id and not await self._suppliers.get_by_id(supplier_id):
            raise NotFoundError("Supplier", supplier_id)

    async def create_product(self, data: ProductCreate) -> Product:
        await self._check_supplier(data.supplier_id)
        return await self._repo.create(**data.model_dump(exclude_none=True))

    async def update_product(self, product_id: str, data: ProductUpdate) -> Product:
        _ = await self.get_product(product_id)
        await self._check_supplier(data.supplier_id)
        updated = await self._repo.update(product_id, **data.model_dump(exclude_none=True, exclude_unset=True))
        return updated  # type: ignore[return-value]

    async def delete_product(self, product_id: str) -> None:
        if not await self._repo.delete(product_id):
            raise NotFoundError("Product", product_id)

    async def orders_for_product(self, product_id: str) -> list[Order]:
        _ = await self.get_product(product_id)
        return await self._repo.orders_containing(product_id)
