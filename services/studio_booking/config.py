# ============================================================
# config.py — Configuration du service Booking
# ------------------------------------------------------------
# Les variables d'environnement (et le fichier .env s'il existe)
# sont lues une seule fois au démarrage pour construire l'objet
# Settings, ensuite passé à chaque composant :
#   - base SQLite
#   - liste CORS
#   - transport mail (SMTP générique ou Gmail) + destinataire admin
#   - URL publique des liens approve/reject, port d'écoute
# ============================================================
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_DATABASE_URL = "sqlite:///./data/bookings.sqlite"


class Settings(BaseModel):
    database_url: str = DEFAULT_DATABASE_URL
    cors_origins: List[str] = []       # vide = toutes les origines
    smtp_host: Optional[str] = None
    smtp_port: int = 587
    smtp_secure: bool = False          # True = TLS implicite (port 465)
    smtp_user: Optional[str] = None
    smtp_pass: Optional[str] = None
    gmail_user: Optional[str] = None
    gmail_pass: Optional[str] = None
    notify_to: Optional[str] = None
    public_base: str = ""
    port: int = 10000
    mail_timeout: float = 10.0         # secondes
    open_hour: int = 9
    close_hour: int = 17

    @property
    def mail_from(self) -> str:
        return self.smtp_user or self.gmail_user or "no-reply@studio"


def split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        cors_origins=split_origins(os.getenv("CORS_ORIGIN", "")),
        smtp_host=os.getenv("SMTP_HOST") or None,
        smtp_port=int(os.getenv("SMTP_PORT") or 587),
        smtp_secure=os.getenv("SMTP_SECURE", "false").strip().lower() == "true",
        smtp_user=os.getenv("SMTP_USER") or None,
        smtp_pass=os.getenv("SMTP_PASS") or None,
        gmail_user=os.getenv("GMAIL_USER") or None,
        gmail_pass=os.getenv("GMAIL_PASS") or None,
        notify_to=os.getenv("NOTIFY_TO") or None,
        public_base=os.getenv("PUBLIC_BASE", "").rstrip("/"),
        port=int(os.getenv("PORT") or 10000),
        mail_timeout=float(os.getenv("MAIL_TIMEOUT") or 10),
        open_hour=int(os.getenv("OPEN_HOUR") or 9),
        close_hour=int(os.getenv("CLOSE_HOUR") or 17),
    )
