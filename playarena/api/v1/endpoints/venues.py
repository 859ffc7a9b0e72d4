from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from playarena.core.database import get_db
from playarena.repositories.venue_repository import BookingRepository, ReviewRepository, VenueRepository
from playarena.schemas.venue import (
    BookingCreate,
    BookingResponse,
    BookingUpdate,
    ReviewCreate,
    ReviewResponse,
    ReviewUpdate,
    VenueCreate,
    VenueResponse,
    VenueUpdate,
)

router = APIRouter()


# --- INSTALACIONES ---
@router.get("/venues", response_model=list[VenueResponse])
def list_venues(
    sport: Optional[str] = None,
    city: Optional[str] = None,
    search: Optional[str] = Query(None, description="Busca en nombre y dirección"),
    db: Session = Depends(get_db),
):
    return VenueRepository(db).list(sport=sport, city=city, search=search)


@router.get("/venues/{venue_id}", response_model=VenueResponse)
def get_venue(venue_id: str, db: Session = Depends(get_db)):
    venue = VenueRepository(db).get(venue_id)
    if venue is None:
        raise HTTPException(status_code=404, detail="Instalación no encontrada")
    return venue


@router.post("/venues", response_model=VenueResponse, status_code=201)
def create_venue(payload: VenueCreate, db: Session = Depends(get_db)):
    return VenueRepository(db).create(payload.model_dump())


@router.put("/venues/{venue_id}", response_model=VenueResponse)
def update_venue(venue_id: str, payload: VenueUpdate, db: Session = Depends(get_db)):
    venue = VenueRepository(db).update(venue_id, payload.model_dump(exclude_unset=True))
    if venue is None:
        raise HTTPException(status_code=404, detail="Instalación no encontrada")
    return venue


@router.delete("/venues/{venue_id}", status_code=204)
def delete_venue(venue_id: str, db: Session = Depends(get_db)):
    if not VenueRepository(db).delete(venue_id):
        raise HTTPException(status_code=404, detail="Instalación no encontrada")


# --- RESERVAS ---
@router.get("/bookings", response_model=list[BookingResponse])
def list_bookings(user_id: Optional[str] = None, db: Session = Depends(get_db)):
    return BookingRepository(db).list(user_id=user_id)


@router.get("/bookings/{booking_id}", response_model=BookingResponse)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    booking = BookingRepository(db).get(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Reserva no encontrada")
    return booking


@router.post("/bookings", response_model=BookingResponse, status_code=201)
def create_booking(payload: BookingCreate, db: Session = Depends(get_db)):
    if VenueRepository(db).get(payload.venue_id) is None:
        raise HTTPException(status_code=404, detail="Instalación no encontrada")
    return BookingRepository(db).create(payload.model_dump())


@router.put("/bookings/{booking_id}", response_model=BookingResponse)
def update_booking(booking_id: str, payload: BookingUpdate, db: Session = Depends(get_db)):
    booking = BookingRepository(db).update(booking_id, payload.model_dump(exclude_unset=True))
    if booking is None:
        raise HTTPException(status_code=404, detail="Reserva no encontrada")
    return booking


@router.delete("/bookings/{booking_id}", status_code=204)
def delete_booking(booking_id: str, db: Session = Depends(get_db)):
    if not BookingRepository(db).delete(booking_id):
        raise HTTPException(status_code=404, detail="Reserva no encontrada")


# --- RESEÑAS ---
@router.get("/reviews", response_model=list[ReviewResponse])
def list_reviews(
    venue_id: Optional[str] = None,
    product_id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return ReviewRepository(db).list(venue_id=venue_id, product_id=product_id)


@router.post("/reviews", response_model=ReviewResponse, status_code=201)
def create_review(payload: ReviewCreate, db: Session = Depends(get_db)):
    return ReviewRepository(db).create(payload.model_dump())


@router.put("/reviews/{review_id}", response_model=ReviewResponse)
def update_review(review_id: str, payload: ReviewUpdate, db: Session = Depends(get_db)):
    review = ReviewRepository(db).update(review_id, payload.model_dump(exclude_unset=True))
    if review is None:
        raise HTTPException(status_code=404, detail="Reseña no encontrada")
    return review


@router.delete("/reviews/{review_id}", status_code=204)
def delete_review(review_id: str, db: Session = Depends(get_db)):
    if not ReviewRepository(db).delete(review_id):
        raise HTTPException(status_code=404, detail="Reseña no encontrada")
