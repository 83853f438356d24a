from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from app.database import Base


STATUS_SENT = "Sent"
STATUS_ACCEPTED = "Accepted"
STATUS_REJECTED = "Rejected"


class Connection(Base):
    __tablename__ = "connections"

    id = Column(Integer, primary_key=True, index=True)

    # Keyed by email rather than users.id: requests are addressed to an email
    # shown on a match card.
    sender_email = Column(String(255), nullable=False, index=True)
    receiver_email = Column(String(255), nullable=False, index=True)
    status = Column(String(16), nullable=False, default=STATUS_SENT)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_SENT

    @property
    def is_rejected(self) -> bool:
        return self.status == STATUS_REJECTED
