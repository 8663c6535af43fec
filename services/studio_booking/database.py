# ============================================================
# database.py — Moteur SQLModel et sessions
# ------------------------------------------------------------
# Un seul moteur par processus (créé par create_app), une
# Session par requête via la dépendance FastAPI get_session.
# ============================================================
from pathlib import Path

from fastapi import Request
from sqlalchemy.engine import Engine, make_url
from sqlmodel import Session, SQLModel, create_engine


def build_engine(database_url: str) -> Engine:
    connect_args = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        # les routes sync tournent dans le threadpool de FastAPI
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)


def init_db(engine: Engine):
    """Crée le dossier du fichier SQLite puis les tables manquantes."""
    from . import models  # noqa: F401  (enregistre la table bookings)

    url = engine.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)


# Dépendance FastAPI : fournit une Session DB par requête, auto-close
def get_session(request: Request):
    with Session(request.app.state.engine) as s:
        yield s
