from typing import Optional

from sqlalchemy import select

from playarena.models.store import CartItem, Product
from playarena.repositories.base import CrudRepository


class ProductRepository(CrudRepository[Product]):
    model = Product

    def list(self, category: Optional[str] = None, search: Optional[str] = None) -> list[Product]:
        stmt = select(Product)
        if category:
            stmt = stmt.where(Product.category == category)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(Product.name.ilike(pattern) | Product.description.ilike(pattern))
        stmt = stmt.order_by(Product.rating.desc(), Product.created_at.desc())
        return list(self.db.scalars(stmt).all())


class CartRepository(CrudRepository[CartItem]):
    model = CartItem

    def items_for_user(self, user_id: str) -> list[CartItem]:
        stmt = select(CartItem).where(CartItem.user_id == user_id).order_by(CartItem.created_at)
        return list(self.db.scalars(stmt).all())

    def add(self, user_id: str, product_id: str, quantity: int = 1) -> CartItem:
        """Si el producto ya está en el carrito, suma la cantidad en vez de duplicar la línea."""
        stmt = select(CartItem).where(CartItem.user_id == user_id, CartItem.product_id == product_id)
        item = self.db.scalars(stmt).first()
        if item is None:
            return self.create({"user_id": user_id, "product_id": product_id, "quantity": quantity})

        item.quantity += quantity
        self.db.commit()
        self.db.refresh(item)
        return item

    def clear(self, user_id: str) -> int:
        items = self.items_for_user(user_id)
        for item in items:
            self.db.delete(item)
        self.db.commit()
        return len(items)
