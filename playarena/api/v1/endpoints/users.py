from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from playarena.core.database import get_db
from playarena.repositories.user_repository import UserRepository, UserStatsRepository
from playarena.schemas.stats import UserStatsResponse, UserStatsUpdate
from playarena.schemas.user import UserCreate, UserResponse

router = APIRouter()


@router.get("/users", response_model=list[UserResponse])
def list_users(db: Session = Depends(get_db)):
    return UserRepository(db).list()


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    user = UserRepository(db).get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Usuario no encontrado")
    return user


@router.post("/users", response_model=UserResponse, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    repo = UserRepository(db)
    if repo.get_by_email(payload.email) is not None:
        raise HTTPException(status_code=409, detail="Ya existe un usuario con ese email")
    return repo.create(payload.model_dump())


@router.delete("/users/{user_id}", status_code=204)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    if not UserRepository(db).delete(user_id):
        raise HTTPException(status_code=404, detail="Usuario no encontrado")


# --- ESTADÍSTICAS POR DEPORTE ---
@router.get("/users/{user_id}/stats", response_model=list[UserStatsResponse])
def get_user_stats(user_id: str, db: Session = Depends(get_db)):
    return UserStatsRepository(db).for_user(user_id)


@router.put("/users/{user_id}/stats/{sport}", response_model=UserStatsResponse)
def update_user_stats(user_id: str, sport: str, payload: UserStatsUpdate, db: Session = Depends(get_db)):
    if UserRepository(db).get(user_id) is None:
        raise HTTPException(status_code=404, detail="Usuario no encontrado")
    return UserStatsRepository(db).upsert(user_id, sport, payload.model_dump(exclude_unset=True))
