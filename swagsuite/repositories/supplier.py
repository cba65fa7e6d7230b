"""Supplier and product repositories."""


from sqlalchemy import select

from swagsuite.domain.order import Order, OrderItem
from swagsuite.domain.supplier import Product, Supplier
from swagsuite.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):
    model = Supplier
    search_columns = ("name", "contact_person", "email")


class ProductRepository(BaseRepository[Product]):
    model = Product
    search_columns = ("name", "sku", "description", "category")

    async def orders_containing(self, product_id: str) -> list[Order]:
        """Orders with at least one line item for the product, newest first."""
        q = (
            select(Order)
            .where(Order.id.in_(select(OrderItem.order_id).where(OrderItem.product_id == product_id)))
            .order_by(Order.created_at.desc())
        )
        return list((await self._session.execute(q)).scalars().all())
