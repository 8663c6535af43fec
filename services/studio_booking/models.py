# ============================================================
# models.py — Modèle de données SQLModel (Booking Service)
# ------------------------------------------------------------
# Une ligne Booking = un créneau d'une heure réservé à une date.
# Une demande sur plusieurs créneaux produit plusieurs lignes
# qui partagent le même approval_token.
# ============================================================
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

ROLES = ("student", "staff", "uni", "external")
ACTIVE_STATUSES = ("pending", "approved")


# ------------------------------------------------------------
# Booking
# ------------------------------------------------------------
#  - Cycle de vie : pending → approved | rejected (via le token)
#  - La contrainte uniq_slot ne dépend pas du statut : une ligne
#    rejected bloque toujours son créneau
#  - date / heures gardées comme chaînes littérales (pas de tz)
# ------------------------------------------------------------
class Booking(SQLModel, table=True):
    __tablename__ = "bookings"
    __table_args__ = (
        UniqueConstraint("date", "start_time", name="uniq_slot"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    role: str                               # student|staff|uni|external
    student_number: Optional[str] = None
    company: Optional[str] = None
    name: str
    phone: str
    email: str
    field: Optional[str] = None
    date: str = Field(index=True)           # YYYY-MM-DD
    start_time: str                         # HH:00
    end_time: str                           # start_time + 1h
    participants: Optional[int] = None
    reason: str = ""
    status: str = "pending"                 # pending|approved|rejected
    approval_token: str = Field(index=True)
    invoice_json: str = "{}"
    created_at: str                         # ISO-8601 UTC
