import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, select

from studio_booking.app import create_app
from studio_booking.config import Settings
from studio_booking.models import Booking


class RecordingNotifier:
    """Remplace le Notifier : garde les appels au lieu d'envoyer un e-mail."""

    transport = None

    def __init__(self):
        self.calls = []

    def notify_new_booking(self, req, token, base_url):
        self.calls.append({"req": req, "token": token, "base_url": base_url})
        return True


@pytest.fixture
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'data' / 'bookings.sqlite'}")


@pytest.fixture
def booking_app(settings):
    return create_app(settings)


@pytest.fixture
def notifier(booking_app):
    fake = RecordingNotifier()
    booking_app.state.notifier = fake
    return fake


@pytest.fixture
def client(booking_app, notifier):
    with TestClient(booking_app) as c:
        yield c


@pytest.fixture
def make_payload():
    def _make(**overrides):
        payload = {
            "role": "staff",
            "name": "Ada Lovelace",
            "phone": "+41 79 000 00 00",
            "email": "ada@example.com",
            "date": "2025-01-10",
            "startTimes": ["09:00"],
            "acceptedTerms": True,
        }
        payload.update(overrides)
        return payload
    return _make


@pytest.fixture
def db_rows(booking_app):
    def _rows(**filters):
        with Session(booking_app.state.engine) as s:
            stmt = select(Booking)
            for column, value in filters.items():
                stmt = stmt.where(getattr(Booking, column) == value)
            return s.exec(stmt.order_by(Booking.id)).all()
    return _rows
