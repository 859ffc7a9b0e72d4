from typing import Any, Generic, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from playarena.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """Operaciones básicas (alta, baja, modificación, consulta) de una entidad."""

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: str) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def list(self) -> list[ModelT]:
        return list(self.db.scalars(select(self.model)).all())

    def create(self, data: dict[str, Any]) -> ModelT:
        entity = self.model(**data)
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity_id: str, data: dict[str, Any]) -> Optional[ModelT]:
        """Actualización parcial: solo se tocan las claves presentes en data."""
        entity = self.get(entity_id)
        if entity is None:
            return None
        for field, value in data.items():
            setattr(entity, field, value)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: str) -> bool:
        entity = self.get(entity_id)
        if entity is None:
            return False
        self.db.delete(entity)
        self.db.commit()
        return True
