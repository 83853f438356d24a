from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.validation import (
    MAX_AGE,
    MIN_AGE,
    is_valid_age,
    is_valid_email,
    is_valid_name,
    is_valid_password,
    is_valid_url,
)


def _validate_email(v: str) -> str:
    value = (v or "").strip().lower()
    if not is_valid_email(value):
        raise ValueError("email must look like name@example.com")
    return value


class UserCreate(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return _validate_email(v)

    @field_validator("password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        if not is_valid_password(v):
            raise ValueError("password needs 6+ characters with an uppercase letter, a lowercase letter and a digit")
        return v


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        return _validate_email(v)


class UserPublic(BaseModel):
    """What other users see on a match card or profile page."""

    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    occupation: Optional[str] = None
    topics: list[str] = Field(default_factory=list)
    study_times: list[str] = Field(default_factory=list)
    study_difficulty_level: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class UserSocials(BaseModel):
    linkedin_url: str = ""
    github_url: str = ""
    personal_website_url: str = ""

    model_config = ConfigDict(from_attributes=True)


class UserRead(UserPublic, UserSocials):
    id: int
    setup_complete: bool = False


class UserProfileView(UserPublic):
    socials: Optional[UserSocials] = None


class ProfileUpdate(BaseModel):
    first_name: str
    last_name: str
    age: int
    gender: Optional[str] = None
    occupation: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def _validate_name(cls, v: str) -> str:
        if not is_valid_name(v):
            raise ValueError("name must not be blank")
        return v.strip()

    @field_validator("age")
    @classmethod
    def _validate_age(cls, v: int) -> int:
        if not is_valid_age(v):
            raise ValueError(f"age must be between {MIN_AGE} and {MAX_AGE}")
        return v


class TopicsUpdate(BaseModel):
    topics: list[str] = Field(min_length=1)

    @field_validator("topics")
    @classmethod
    def _require_non_blank(cls, v: list[str]) -> list[str]:
        if not any((item or "").strip() for item in v):
            raise ValueError("select at least one topic")
        return v


class StudyTimeUpdate(BaseModel):
    slots: list[str] = Field(min_length=1)


class DifficultyUpdate(BaseModel):
    level: str = Field(min_length=1)


class SocialsUpdate(BaseModel):
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    personal_website_url: Optional[str] = None

    @field_validator("linkedin_url", "github_url", "personal_website_url")
    @classmethod
    def _validate_url(cls, v: Optional[str]) -> Optional[str]:
        if not is_valid_url(v):
            raise ValueError("not a valid URL")
        return v


class PasswordChange(BaseModel):
    current_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def _validate_password(cls, v: str) -> str:
        if not is_valid_password(v):
            raise ValueError("password needs 6+ characters with an uppercase letter, a lowercase letter and a digit")
        return v


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int
    email: Optional[str] = None
