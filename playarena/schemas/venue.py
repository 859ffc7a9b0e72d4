from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from playarena.schemas.common import APIModel


# --- INSTALACIONES ---
class VenueCreate(APIModel):
    name: str
    description: Optional[str] = None
    address: str
    city: str
    state: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    sports: list[str]
    price_per_hour: float = Field(ge=0)
    facilities: Optional[list[str]] = None
    images: Optional[list[str]] = None
    owner_id: str


class VenueUpdate(APIModel):
    name: Optional[str] = None
    description: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    sports: Optional[list[str]] = None
    price_per_hour: Optional[float] = Field(default=None, ge=0)
    facilities: Optional[list[str]] = None
    images: Optional[list[str]] = None


class VenueResponse(VenueCreate):
    id: str
    rating: float = 0.0
    total_reviews: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- RESERVAS ---
class BookingCreate(APIModel):
    venue_id: str
    user_id: str
    match_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    total_amount: float = Field(ge=0)
    status: str = "confirmed"
    payment_status: str = "pending"

    @model_validator(mode="after")
    def check_time_range(self):
        if self.end_time <= self.start_time:
            raise ValueError("endTime debe ser posterior a startTime")
        return self


class BookingUpdate(APIModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    total_amount: Optional[float] = Field(default=None, ge=0)
    status: Optional[str] = None
    payment_status: Optional[str] = None


class BookingResponse(APIModel):
    id: str
    venue_id: str
    user_id: str
    match_id: Optional[str] = None
    start_time: datetime
    end_time: datetime
    total_amount: float
    status: str
    payment_status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- RESEÑAS ---
class ReviewCreate(APIModel):
    user_id: str
    venue_id: Optional[str] = None
    product_id: Optional[str] = None
    rating: int = Field(ge=1, le=5)
    comment: Optional[str] = None
    images: Optional[list[str]] = None

    @model_validator(mode="after")
    def check_target(self):
        if not self.venue_id and not self.product_id:
            raise ValueError("La reseña necesita venueId o productId")
        return self


class ReviewUpdate(APIModel):
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None
    images: Optional[list[str]] = None


class ReviewResponse(APIModel):
    id: str
    user_id: str
    venue_id: Optional[str] = None
    product_id: Optional[str] = None
    rating: int
    comment: Optional[str] = None
    images: Optional[list[str]] = None
    is_verified: bool = False
    created_at: Optional[datetime] = None
