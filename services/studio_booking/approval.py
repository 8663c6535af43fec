# ============================================================
# approval.py — Liens d'approbation (FastAPI + Jinja2)
# ------------------------------------------------------------
# Pages HTML ouvertes depuis l'e-mail admin :
#   GET /approve/{token} → toutes les lignes du token : approved
#   GET /reject/{token}  → toutes les lignes du token : rejected
# Le token n'est jamais invalidé : un second appel réapplique la
# même transition, et approve après reject (ou l'inverse)
# écrase simplement le statut.
# ============================================================
import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from sqlmodel import Session

from .database import get_session
from .errors import NotFound
from .repository import BookingRepository

logger = logging.getLogger(__name__)

ACTIONS = {"approve": "approved", "reject": "rejected"}

router = APIRouter()
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def set_status(repo: BookingRepository, token: str, action: str) -> int:
    status = ACTIONS[action]
    changed = repo.set_status_by_token(token, status)
    if not changed:
        raise NotFound()
    logger.info("token %s… -> %s (%d row(s))", token[:8], status, changed)
    return changed


def render_outcome(request: Request, token: str, action: str, s: Session):
    try:
        set_status(BookingRepository(s), token, action)
    except NotFound:
        return templates.TemplateResponse(request, "status.html", {"outcome": "not_found"}, status_code=404)
    return templates.TemplateResponse(request, "status.html", {"outcome": action})


@router.get("/approve/{token}", response_class=HTMLResponse)
def approve(request: Request, token: str, s: Session = Depends(get_session)):
    return render_outcome(request, token, "approve", s)


@router.get("/reject/{token}", response_class=HTMLResponse)
def reject(request: Request, token: str, s: Session = Depends(get_session)):
    return render_outcome(request, token, "reject", s)
