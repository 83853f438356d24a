# user.py
from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base
from app.services.topic_codec import parse_topics


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(32), nullable=True)
    occupation = Column(String(255), nullable=False, default="", server_default="")

    # ", "-joined labels, see app.services.topic_codec
    topics_interested = Column(Text, nullable=True)
    preferred_study_time = Column(Text, nullable=True)
    study_difficulty_level = Column(String(64), nullable=True)

    linkedin_url = Column(String(512), nullable=False, default="", server_default="")
    github_url = Column(String(512), nullable=False, default="", server_default="")
    personal_website_url = Column(String(512), nullable=False, default="", server_default="")

    setup_complete = Column(Boolean, nullable=False, default=False, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    topic_rows = relationship(
        "UserTopic",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserTopic.position",
    )

    @property
    def topics(self) -> list[str]:
        return parse_topics(self.topics_interested)

    @property
    def study_times(self) -> list[str]:
        return parse_topics(self.preferred_study_time)
