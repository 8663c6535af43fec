# ============================================================
# Booking API Router
# ------------------------------------------------------------
# Expose les endpoints REST JSON :
#   GET  /health        — toujours {"ok": true}
#   GET  /availability  — créneaux libres d'une date
#   POST /book          — demande de réservation (1..n créneaux)
# Les erreurs métier (errors.py) sont rendues par app.py.
# ============================================================
from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from sqlmodel import Session

from .booking_service import create_booking, get_availability
from .config import Settings
from .database import get_session
from .notifier import Notifier
from .repository import BookingRepository
from .schemas import BookingRequest

router = APIRouter()


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_slot_grid(request: Request) -> List[str]:
    return request.app.state.slot_grid


# URL de base des liens approve/reject : PUBLIC_BASE, sinon l'hôte de la requête
def public_base_url(request: Request, settings: Settings) -> str:
    if settings.public_base:
        return settings.public_base
    return "https://" + request.headers.get("host", "")


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/availability")
def availability(date: Optional[str] = None,
                 s: Session = Depends(get_session),
                 grid: List[str] = Depends(get_slot_grid)):
    return get_availability(BookingRepository(s), date, grid)


@router.post("/book")
def book(payload: BookingRequest, request: Request,
         s: Session = Depends(get_session),
         settings: Settings = Depends(get_settings),
         notifier: Notifier = Depends(get_notifier),
         grid: List[str] = Depends(get_slot_grid)):
    return create_booking(
        BookingRepository(s), notifier, payload,
        public_base_url(request, settings), grid,
    )
