from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base


class UserTopic(Base):
    """One row per topic a user is interested in.

    Mirrors ``users.topics_interested`` so exact matching can be done with an
    indexed equality lookup instead of ``LIKE``.
    """

    __tablename__ = "user_topics"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    topic = Column(String(255), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="topic_rows")

    __table_args__ = (
        UniqueConstraint("user_id", "topic", name="uq_user_topics_user_id_topic"),
    )
