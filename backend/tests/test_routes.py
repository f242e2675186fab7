# backend/tests/test_routes.py

from decimal import Decimal

from sqlalchemy.exc import OperationalError

from app.core.security import create_access_token
from app.deps import get_db
from app.models.deposit import Deposit
from app.models.notification import Notification


def test_root(client) -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Deposit API is running"}


def test_login_returns_token_usable_for_me(client, user) -> None:
    resp = client.post("/auth/login", json={"email": "alice@example.com", "password": "secret-password"})
    assert resp.status_code == 200
    token = resp.json()["access_token"]

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "alice@example.com"


def test_login_rejects_wrong_password(client, user) -> None:
    resp = client.post("/auth/login", json={"email": "alice@example.com", "password": "nope"})
    assert resp.status_code == 401


def test_deposit_requires_authentication(client, db) -> None:
    resp = client.post("/deposits", json={"amount": "10"})
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"
    assert db.query(Deposit).count() == 0


def test_deposit_rejects_invalid_token(client) -> None:
    resp = client.post("/deposits", json={"amount": "10"}, headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_deposit_rejects_token_for_unknown_user(client) -> None:
    token = create_access_token({"sub": "8f14e45f-ceea-467f-a8e5-1c2b5c8a0b1e"})
    resp = client.post("/deposits", json={"amount": "10"}, headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_deposit_of_100_end_to_end(client, db, user, auth_headers, sent_mail) -> None:
    resp = client.post("/deposits", json={"amount": "100"}, headers=auth_headers)

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "Your deposit was successful!"
    assert body["deposit"]["user_id"] == str(user.id)
    assert Decimal(body["deposit"]["amount"]) == Decimal("100")

    deposits = db.query(Deposit).all()
    assert len(deposits) == 1
    assert deposits[0].user_id == user.id
    assert deposits[0].amount == Decimal("100")

    # mail handed to the transport by the background task
    assert len(sent_mail) == 1
    recipient, message = sent_mail[0]
    assert recipient == "alice@example.com"
    assert "Your deposit of 100 was successful." in message.render_text()

    notifications = db.query(Notification).filter(Notification.notifiable_user_id == user.id).all()
    assert len(notifications) == 1
    assert notifications[0].data == {"data": "Your deposit of 100 was successful."}
    assert notifications[0].read_at is None


def test_deposit_payload_keeps_submitted_precision(client, db, auth_headers) -> None:
    resp = client.post("/deposits", json={"amount": "42.50"}, headers=auth_headers)
    assert resp.status_code == 201

    row = db.query(Notification).one()
    assert row.data["data"] == "Your deposit of 42.50 was successful."


def test_deposit_validation(client, db, auth_headers, sent_mail) -> None:
    for amount in ["0", "-5", "abc", "1.234", None]:
        resp = client.post("/deposits", json={"amount": amount}, headers=auth_headers)
        assert resp.status_code == 422, amount

    resp = client.post("/deposits", json={}, headers=auth_headers)
    assert resp.status_code == 422

    assert db.query(Deposit).count() == 0
    assert sent_mail == []


def test_deposit_persistence_failure_returns_503(client, db, auth_headers, sent_mail) -> None:
    from app.main import app
    from app.database import SessionLocal

    def _failing_db():
        session = SessionLocal()

        def _fail():
            raise OperationalError("INSERT INTO deposits", {}, Exception("connection lost"))

        session.commit = _fail
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _failing_db
    try:
        resp = client.post("/deposits", json={"amount": "10"}, headers=auth_headers)
    finally:
        app.dependency_overrides.pop(get_db, None)

    assert resp.status_code == 503
    assert resp.json() == {"detail": "Deposit could not be recorded. Please try again later."}
    assert db.query(Deposit).count() == 0
    assert sent_mail == []


def test_list_deposits(client, auth_headers) -> None:
    client.post("/deposits", json={"amount": "1"}, headers=auth_headers)
    client.post("/deposits", json={"amount": "1"}, headers=auth_headers)

    resp = client.get("/deposits", headers=auth_headers)
    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_mark_as_read_flow(client, db, user, auth_headers) -> None:
    for amount in ["1", "2", "3"]:
        client.post("/deposits", json={"amount": amount}, headers=auth_headers)

    unread = client.get("/notifications", params={"unread": "true"}, headers=auth_headers)
    assert len(unread.json()) == 3

    resp = client.post("/notifications/mark-as-read", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json() == {"status": "Notifications marked as read", "marked": 3}

    again = client.post("/notifications/mark-as-read", headers=auth_headers)
    assert again.json()["marked"] == 0

    all_rows = client.get("/notifications", headers=auth_headers).json()
    assert len(all_rows) == 3
    assert all(n["is_read"] and n["read_at"] is not None for n in all_rows)
    assert client.get("/notifications", params={"unread": "true"}, headers=auth_headers).json() == []


def test_mark_as_read_requires_authentication(client) -> None:
    assert client.post("/notifications/mark-as-read").status_code == 401
