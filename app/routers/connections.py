from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.routers.dependencies import get_session_context
from app.schemas.connection import ConnectionCreate, ConnectionRead
from app.services import connection_service
from app.services.errors import (
    ConnectionAlreadyAnsweredError,
    ConnectionNotFoundError,
    ConnectionPermissionError,
    InvalidConnectionError,
    UserNotFoundError,
)
from app.services.session_context import SessionContext


router = APIRouter(prefix="/connections", tags=["connections"])


@router.post("", response_model=ConnectionRead, status_code=status.HTTP_201_CREATED)
def send_connection_request(
    payload: ConnectionCreate,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> ConnectionRead:
    try:
        connection = connection_service.send_request(db, ctx.email, payload.receiver_email)
    except InvalidConnectionError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found") from exc
    return ConnectionRead.model_validate(connection)


@router.get("/incoming", response_model=list[ConnectionRead])
def list_incoming_requests(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> list[ConnectionRead]:
    return [ConnectionRead.model_validate(c) for c in connection_service.list_incoming(db, ctx.email)]


@router.get("/outgoing", response_model=list[ConnectionRead])
def list_outgoing_requests(
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> list[ConnectionRead]:
    return [ConnectionRead.model_validate(c) for c in connection_service.list_outgoing(db, ctx.email)]


def _respond(db: Session, ctx: SessionContext, connection_id: int, *, accept: bool) -> ConnectionRead:
    try:
        connection = connection_service.respond(db, connection_id, ctx.email, accept=accept)
    except ConnectionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Connection request not found") from exc
    except ConnectionPermissionError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except ConnectionAlreadyAnsweredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return ConnectionRead.model_validate(connection)


@router.post("/{connection_id}/accept", response_model=ConnectionRead)
def accept_connection_request(
    connection_id: int,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> ConnectionRead:
    return _respond(db, ctx, connection_id, accept=True)


@router.post("/{connection_id}/reject", response_model=ConnectionRead)
def reject_connection_request(
    connection_id: int,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
) -> ConnectionRead:
    return _respond(db, ctx, connection_id, accept=False)
