# ============================================================
# app.py — Point d'entrée du service Booking
# ------------------------------------------------------------
# create_app construit une fois pour tout le processus :
#   - les Settings (config.py)
#   - le moteur SQLite, tables créées au démarrage
#   - le Notifier (transport mail)
#   - la grille horaire du studio
# puis monte le CORS, les handlers d'erreurs, les routes API
# et les pages d'approbation.
# ============================================================
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import router
from .approval import router as approval_router
from .config import Settings, load_settings
from .database import build_engine, init_db
from .errors import BookingError
from .notifier import Notifier
from .slots import hour_grid

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(title="Studio Booking Service")
    app.state.settings = settings
    app.state.engine = build_engine(settings.database_url)
    app.state.notifier = Notifier(settings)
    app.state.slot_grid = hour_grid(settings.open_hour, settings.close_hour)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exécuté automatiquement par FastAPI au lancement : crée les tables SQL.
    @app.on_event("startup")
    def start():
        init_db(app.state.engine)
        transport = app.state.notifier.transport
        logger.info("database ready at %s, mail transport: %s",
                    app.state.engine.url, transport.name if transport else "none")

    @app.exception_handler(BookingError)
    async def booking_error(request: Request, exc: BookingError):
        return JSONResponse({"error": exc.reason}, status_code=exc.status_code)

    # JSON mal formé ou champ du mauvais type
    @app.exception_handler(RequestValidationError)
    async def invalid_payload(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": "Invalid payload"}, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    app.include_router(approval_router)
    app.include_router(router)
    return app


app = create_app()


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s %(message)s")
    port = app.state.settings.port
    logger.info("Studio booking API on :%s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
