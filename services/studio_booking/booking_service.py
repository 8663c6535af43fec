# ============================================================
# booking_service.py — Logique métier du Booking Service
# ------------------------------------------------------------
#  - get_availability : grille horaire moins les créneaux pris
#  - create_booking   : validation, détection de conflit,
#                       insertion atomique des créneaux sous un
#                       token partagé, puis notification admin
# Les erreurs sont levées via errors.py ; la traduction HTTP
# est faite dans app.py.
# ============================================================
import json
import logging
import re
import secrets
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .errors import Conflict, InvalidInput
from .models import ROLES, Booking
from .repository import BookingRepository
from .schemas import BookingRequest
from .slots import next_hour

logger = logging.getLogger(__name__)

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
TOKEN_BYTES = 20  # 160 bits → 40 caractères hex


def is_valid_date(value) -> bool:
    return isinstance(value, str) and DATE_RE.fullmatch(value) is not None


def as_text(value) -> Optional[str]:
    # numéros d'étudiant / téléphone envoyés en nombre → texte
    if value is None or value == "":
        return None
    return str(value)


def get_availability(repo: BookingRepository, date, grid: List[str]) -> Dict:
    if not is_valid_date(date):
        raise InvalidInput("Invalid or missing date (YYYY-MM-DD)")
    taken = repo.taken_start_times(date)
    free = [{"start": h, "end": next_hour(h)} for h in grid if h not in taken]
    return {"date": date, "slots": free}


# Validation dans l'ordre : la première règle violée donne la raison
def validate_request(req: BookingRequest, grid: List[str]):
    if req.role not in ROLES:
        raise InvalidInput("role")
    if req.role == "student" and not req.student_number:
        raise InvalidInput("studentNumber")
    if req.role == "external" and not req.company:
        raise InvalidInput("company")
    if not req.name or not req.phone or not req.email:
        raise InvalidInput("contact")
    if not is_valid_date(req.date):
        raise InvalidInput("date")
    if (not isinstance(req.start_times, list) or not req.start_times
            or any(not isinstance(t, str) or t not in grid for t in req.start_times)):
        raise InvalidInput("time")
    if not req.accepted_terms:
        raise InvalidInput("terms")


def new_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


def create_booking(repo: BookingRepository, notifier, req: BookingRequest,
                   base_url: str, grid: List[str]) -> Dict:
    validate_request(req, grid)

    if repo.conflicting_start_times(req.date, req.start_times):
        raise Conflict()

    token = new_token()
    created_at = datetime.now(timezone.utc).isoformat()
    rows = [
        Booking(
            role=req.role,
            student_number=as_text(req.student_number),
            company=as_text(req.company),
            name=as_text(req.name),
            phone=as_text(req.phone),
            email=as_text(req.email),
            field=as_text(req.field),
            date=req.date,
            start_time=start,
            end_time=next_hour(start),
            participants=req.participants,
            reason=as_text(req.reason) or "",
            status="pending",
            approval_token=token,
            invoice_json=json.dumps(req.invoice if req.invoice else {}),
            created_at=created_at,
        )
        for start in req.start_times
    ]
    repo.add_all(rows)
    logger.info("booking created date=%s slots=%s token=%s…",
                req.date, ",".join(req.start_times), token[:8])

    # best-effort : le résultat n'influence pas la réponse
    notifier.notify_new_booking(req, token, base_url)

    return {"ok": True, "id": rows[-1].id, "token": token}
