from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.db.errors import data_access
from app.models.connection import STATUS_ACCEPTED, STATUS_REJECTED, STATUS_SENT, Connection
from app.services.errors import (
    ConnectionAlreadyAnsweredError,
    ConnectionNotFoundError,
    ConnectionPermissionError,
    InvalidConnectionError,
    UserNotFoundError,
)
from app.services.user_store import get_by_email, normalize_email


logger = logging.getLogger(__name__)


def send_request(db: Session, sender_email: str, receiver_email: str) -> Connection:
    """Send, or re-send, a request from ``sender_email`` to ``receiver_email``.

    One row per ordered pair: a pending or accepted request is returned as is,
    a rejected one is reopened as ``Sent``.
    """

    sender = normalize_email(sender_email)
    receiver = normalize_email(receiver_email)
    if not sender or not receiver:
        raise InvalidConnectionError("sender and receiver emails are required")
    if sender == receiver:
        raise InvalidConnectionError("cannot send a connection request to yourself")
    if get_by_email(db, receiver) is None:
        raise UserNotFoundError(receiver)

    with data_access(db, action="insert"):
        existing = (
            db.query(Connection)
            .filter(Connection.sender_email == sender)
            .filter(Connection.receiver_email == receiver)
            .order_by(Connection.id.desc())
            .first()
        )
        if existing is not None and not existing.is_rejected:
            return existing

        if existing is not None:
            connection = existing
            connection.status = STATUS_SENT
        else:
            connection = Connection(sender_email=sender, receiver_email=receiver, status=STATUS_SENT)
        db.add(connection)
        db.commit()
        db.refresh(connection)
    logger.info("connection.sent id=%s sender=%s receiver=%s", connection.id, sender, receiver)
    return connection


def list_incoming(db: Session, receiver_email: str) -> list[Connection]:
    """Requests addressed to ``receiver_email``, the newest one per sender."""

    receiver = normalize_email(receiver_email)
    if not receiver:
        return []

    with data_access():
        rows = (
            db.query(Connection)
            .filter(Connection.receiver_email == receiver)
            .order_by(Connection.id)
            .all()
        )

    # Later rows replace earlier ones but keep the sender's first position.
    latest: dict[str, Connection] = {}
    for row in rows:
        if row.sender_email == receiver:
            continue
        latest[row.sender_email] = row
    return list(latest.values())


def list_outgoing(db: Session, sender_email: str) -> list[Connection]:
    sender = normalize_email(sender_email)
    if not sender:
        return []
    with data_access():
        return (
            db.query(Connection)
            .filter(Connection.sender_email == sender)
            .order_by(Connection.id)
            .all()
        )


def respond(db: Session, connection_id: int, receiver_email: str, *, accept: bool) -> Connection:
    with data_access():
        connection = db.query(Connection).filter(Connection.id == connection_id).first()
    if connection is None:
        raise ConnectionNotFoundError(connection_id)
    if connection.receiver_email != normalize_email(receiver_email):
        raise ConnectionPermissionError("only the receiver can respond to a connection request")
    if not connection.is_pending:
        raise ConnectionAlreadyAnsweredError(f"connection request already {connection.status.lower()}")

    connection.status = STATUS_ACCEPTED if accept else STATUS_REJECTED
    with data_access(db, action="update"):
        db.add(connection)
        db.commit()
        db.refresh(connection)
    logger.info("connection.%s id=%s", connection.status.lower(), connection.id)
    return connection


def are_connected(db: Session, first_email: str, second_email: str) -> bool:
    """True when an accepted request links the two users in either direction."""

    a = normalize_email(first_email)
    b = normalize_email(second_email)
    if not a or not b:
        return False
    with data_access():
        row = (
            db.query(Connection.id)
            .filter(Connection.status == STATUS_ACCEPTED)
            .filter(
                ((Connection.sender_email == a) & (Connection.receiver_email == b))
                | ((Connection.sender_email == b) & (Connection.receiver_email == a))
            )
            .first()
        )
    return row is not None
