from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from playarena.core.database import get_db
from playarena.repositories.store_repository import CartRepository, ProductRepository
from playarena.schemas.store import (
    CartItemCreate,
    CartItemResponse,
    CartItemUpdate,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
)

router = APIRouter()


# --- PRODUCTOS ---
@router.get("/products", response_model=list[ProductResponse])
def list_products(category: Optional[str] = None, search: Optional[str] = None, db: Session = Depends(get_db)):
    return ProductRepository(db).list(category=category, search=search)


@router.get("/products/{product_id}", response_model=ProductResponse)
def get_product(product_id: str, db: Session = Depends(get_db)):
    product = ProductRepository(db).get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Producto no encontrado")
    return product


@router.post("/products", response_model=ProductResponse, status_code=201)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    return ProductRepository(db).create(payload.model_dump())


@router.put("/products/{product_id}", response_model=ProductResponse)
def update_product(product_id: str, payload: ProductUpdate, db: Session = Depends(get_db)):
    product = ProductRepository(db).update(product_id, payload.model_dump(exclude_unset=True))
    if product is None:
        raise HTTPException(status_code=404, detail="Producto no encontrado")
    return product


@router.delete("/products/{product_id}", status_code=204)
def delete_product(product_id: str, db: Session = Depends(get_db)):
    if not ProductRepository(db).delete(product_id):
        raise HTTPException(status_code=404, detail="Producto no encontrado")


# --- CARRITO ---
@router.get("/users/{user_id}/cart", response_model=list[CartItemResponse])
def get_cart(user_id: str, db: Session = Depends(get_db)):
    return CartRepository(db).items_for_user(user_id)


@router.post("/users/{user_id}/cart", response_model=CartItemResponse, status_code=201)
def add_to_cart(user_id: str, payload: CartItemCreate, db: Session = Depends(get_db)):
    product = ProductRepository(db).get(payload.product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Producto no encontrado")
    if not product.in_stock:
        raise HTTPException(status_code=409, detail="Producto sin stock")
    return CartRepository(db).add(user_id, payload.product_id, payload.quantity)


@router.put("/cart/{item_id}", response_model=CartItemResponse)
def update_cart_item(item_id: str, payload: CartItemUpdate, db: Session = Depends(get_db)):
    item = CartRepository(db).update(item_id, {"quantity": payload.quantity})
    if item is None:
        raise HTTPException(status_code=404, detail="Línea de carrito no encontrada")
    return item


@router.delete("/cart/{item_id}", status_code=204)
def remove_from_cart(item_id: str, db: Session = Depends(get_db)):
    if not CartRepository(db).delete(item_id):
        raise HTTPException(status_code=404, detail="Línea de carrito no encontrada")


@router.delete("/users/{user_id}/cart", status_code=204)
def clear_cart(user_id: str, db: Session = Depends(get_db)):
    CartRepository(db).clear(user_id)
