# __init__.py
from app.models.connection import Connection
from app.models.user import User
from app.models.user_topic import UserTopic

__all__ = [
	"Connection",
	"User",
	"UserTopic",
]
