# ============================================================
# repository.py — Accès aux données Booking
# ------------------------------------------------------------
# Ce module implémente le design pattern "Repository" pour la
# table bookings. Il isole la logique d'accès et de manipulation
# des données de la couche API / service.
# ============================================================
from typing import Iterable, List, Set

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .errors import Conflict
from .models import ACTIVE_STATUSES, Booking


class BookingRepository:
    def __init__(self, session: Session):
        self.session = session

    # Créneaux occupés (pending/approved) pour une date
    def taken_start_times(self, date: str) -> Set[str]:
        rows = self.session.exec(
            select(Booking.start_time).where(
                Booking.date == date,
                Booking.status.in_(ACTIVE_STATUSES),
            )
        ).all()
        return set(rows)

    # Tous statuts confondus : une ligne rejected bloque aussi le créneau
    def conflicting_start_times(self, date: str, start_times: Iterable[str]) -> List[str]:
        return list(self.session.exec(
            select(Booking.start_time).where(
                Booking.date == date,
                Booking.start_time.in_(list(start_times)),
            )
        ).all())

    def add_all(self, bookings: List[Booking]) -> List[Booking]:
        """Insère tous les créneaux d'une demande dans une seule transaction.

        Si la contrainte uniq_slot refuse une ligne, rien n'est conservé.
        """
        try:
            self.session.add_all(bookings)
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise Conflict() from exc
        for b in bookings:
            self.session.refresh(b)
        return bookings

    def by_token(self, token: str) -> List[Booking]:
        return list(self.session.exec(
            select(Booking).where(Booking.approval_token == token).order_by(Booking.id)
        ).all())

    def set_status_by_token(self, token: str, status: str) -> int:
        rows = self.by_token(token)
        for b in rows:
            b.status = status
        if rows:
            self.session.commit()
        return len(rows)
