import pytest
from sqlmodel import Session

from studio_booking.approval import set_status
from studio_booking.errors import NotFound
from studio_booking.repository import BookingRepository


def book(client, make_payload, **overrides):
    return client.post("/book", json=make_payload(**overrides)).json()["token"]


def test_approve_flips_every_row_of_the_token(client, make_payload, db_rows):
    token = book(client, make_payload, startTimes=["09:00", "10:00"])
    other = book(client, make_payload, startTimes=["11:00"])

    res = client.get(f"/approve/{token}")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "Approved" in res.text

    assert [r.status for r in db_rows(approval_token=token)] == ["approved", "approved"]
    assert [r.status for r in db_rows(approval_token=other)] == ["pending"]


def test_approve_is_idempotent(client, make_payload, db_rows):
    token = book(client, make_payload)
    assert client.get(f"/approve/{token}").status_code == 200
    assert client.get(f"/approve/{token}").status_code == 200
    assert [r.status for r in db_rows(approval_token=token)] == ["approved"]


def test_reject(client, make_payload, db_rows):
    token = book(client, make_payload)
    res = client.get(f"/reject/{token}")
    assert res.status_code == 200
    assert "Rejected" in res.text
    assert db_rows(approval_token=token)[0].status == "rejected"


def test_later_action_overwrites_status(client, make_payload, db_rows):
    token = book(client, make_payload)
    client.get(f"/reject/{token}")
    client.get(f"/approve/{token}")
    assert db_rows(approval_token=token)[0].status == "approved"


def test_unknown_token_is_not_found(client):
    for path in ("/approve/", "/reject/"):
        res = client.get(path + "ab" * 20)
        assert res.status_code == 404
        assert "Not found" in res.text


def test_set_status_raises_for_unknown_token(client, booking_app):
    with Session(booking_app.state.engine) as s:
        with pytest.raises(NotFound):
            set_status(BookingRepository(s), "0" * 40, "approve")
