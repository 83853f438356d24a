# __init__.py
from app.schemas.connection import ConnectionCreate, ConnectionRead
from app.schemas.matching import TopicMatchesResponse
from app.schemas.options import OnboardingOptions
from app.schemas.user import (
	DifficultyUpdate,
	PasswordChange,
	ProfileUpdate,
	SocialsUpdate,
	StudyTimeUpdate,
	Token,
	TokenData,
	TopicsUpdate,
	UserCreate,
	UserLogin,
	UserProfileView,
	UserPublic,
	UserRead,
	UserSocials,
)

__all__ = [
	"ConnectionCreate",
	"ConnectionRead",
	"TopicMatchesResponse",
	"OnboardingOptions",
	"DifficultyUpdate",
	"PasswordChange",
	"ProfileUpdate",
	"SocialsUpdate",
	"StudyTimeUpdate",
	"Token",
	"TokenData",
	"TopicsUpdate",
	"UserCreate",
	"UserLogin",
	"UserProfileView",
	"UserPublic",
	"UserRead",
	"UserSocials",
]
