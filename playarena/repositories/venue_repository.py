from typing import Any, Optional

from sqlalchemy import func, select

from playarena.models.store import Product
from playarena.models.venue import Booking, Review, Venue
from playarena.repositories.base import CrudRepository


class VenueRepository(CrudRepository[Venue]):
    model = Venue

    def list(
        self,
        sport: Optional[str] = None,
        city: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Venue]:
        stmt = select(Venue)
        if city:
            stmt = stmt.where(Venue.city == city)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(Venue.name.ilike(pattern) | Venue.address.ilike(pattern))
        stmt = stmt.order_by(Venue.rating.desc(), Venue.created_at.desc())
        venues = list(self.db.scalars(stmt).all())

        # 'sports' es una lista JSON: filtramos en Python
        if sport:
            venues = [v for v in venues if sport in (v.sports or [])]
        return venues


class BookingRepository(CrudRepository[Booking]):
    model = Booking

    def list(self, user_id: Optional[str] = None) -> list[Booking]:
        stmt = select(Booking)
        if user_id:
            stmt = stmt.where(Booking.user_id == user_id)
        return list(self.db.scalars(stmt.order_by(Booking.start_time.desc())).all())


class ReviewRepository(CrudRepository[Review]):
    """
    Reseñas de instalaciones y productos. Cada alta, cambio o baja recalcula
    la media y el número de reseñas del elemento reseñado.
    """

    model = Review

    def list(self, venue_id: Optional[str] = None, product_id: Optional[str] = None) -> list[Review]:
        stmt = select(Review)
        if venue_id:
            stmt = stmt.where(Review.venue_id == venue_id)
        if product_id:
            stmt = stmt.where(Review.product_id == product_id)
        return list(self.db.scalars(stmt.order_by(Review.created_at.desc())).all())

    def create(self, data: dict[str, Any]) -> Review:
        review = super().create(data)
        self._refresh_rating(review.venue_id, review.product_id)
        return review

    def update(self, entity_id: str, data: dict[str, Any]) -> Optional[Review]:
        review = super().update(entity_id, data)
        if review is not None:
            self._refresh_rating(review.venue_id, review.product_id)
        return review

    def delete(self, entity_id: str) -> bool:
        review = self.get(entity_id)
        if review is None:
            return False
        venue_id, product_id = review.venue_id, review.product_id
        self.db.delete(review)
        self.db.commit()
        self._refresh_rating(venue_id, product_id)
        return True

    def _refresh_rating(self, venue_id: Optional[str], product_id: Optional[str]) -> None:
        targets = []
        if venue_id:
            targets.append((Venue, Review.venue_id, venue_id))
        if product_id:
            targets.append((Product, Review.product_id, product_id))

        for model, column, target_id in targets:
            entity = self.db.get(model, target_id)
            if entity is None:
                continue
            avg, total = self.db.execute(
                select(func.avg(Review.rating), func.count(Review.id)).where(column == target_id)
            ).one()
            entity.rating = round(float(avg), 2) if avg is not None else 0.0
            entity.total_reviews = total
        self.db.commit()
