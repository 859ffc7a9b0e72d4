from datetime import date, datetime
from typing import Optional

from pydantic import Field

from playarena.schemas.common import APIModel


class UserCreate(APIModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    date_of_birth: Optional[date] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None


# Sin password: nunca sale de la API
class UserResponse(APIModel):
    id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    date_of_birth: Optional[date] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: Optional[datetime] = None
