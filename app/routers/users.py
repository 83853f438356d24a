# users.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.routers.dependencies import get_current_user
from app.schemas.user import (
    DifficultyUpdate,
    PasswordChange,
    ProfileUpdate,
    SocialsUpdate,
    StudyTimeUpdate,
    TopicsUpdate,
    UserProfileView,
    UserRead,
    UserSocials,
)
from app.services.connection_service import are_connected
from app.services.user_store import (
    get_by_email,
    mark_setup_complete,
    save_socials,
    set_difficulty,
    set_study_time,
    set_topics,
    update_password,
    upsert_profile,
)
from app.utils.password_hash import verify_password


router = APIRouter()


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(current_user)


@router.put("/me/profile", response_model=UserRead)
def update_my_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    user = upsert_profile(
        db,
        current_user,
        first_name=payload.first_name,
        last_name=payload.last_name,
        age=payload.age,
        gender=payload.gender,
        occupation=payload.occupation,
    )
    return UserRead.model_validate(user)


@router.put("/me/topics", response_model=UserRead)
def update_my_topics(
    payload: TopicsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    return UserRead.model_validate(set_topics(db, current_user, payload.topics))


@router.put("/me/study-time", response_model=UserRead)
def update_my_study_time(
    payload: StudyTimeUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    return UserRead.model_validate(set_study_time(db, current_user, payload.slots))


@router.put("/me/difficulty", response_model=UserRead)
def update_my_difficulty(
    payload: DifficultyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    return UserRead.model_validate(set_difficulty(db, current_user, payload.level))


@router.put("/me/socials", response_model=UserRead)
def update_my_socials(
    payload: SocialsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserRead:
    user = save_socials(db, current_user, payload.linkedin_url, payload.github_url, payload.personal_website_url)
    return UserRead.model_validate(user)


@router.post("/me/setup-complete", response_model=UserRead)
def complete_my_setup(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.model_validate(mark_setup_complete(db, current_user))


@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
def change_my_password(
    payload: PasswordChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    if not verify_password(payload.current_password, current_user.password):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect")
    update_password(db, current_user, payload.new_password)


@router.get("/{email}", response_model=UserProfileView)
def read_user_profile(
    email: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserProfileView:
    user = get_by_email(db, email)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    view = UserProfileView.model_validate(user)
    # Social links are only shared between accepted connections.
    if user.id == current_user.id or are_connected(db, current_user.email, user.email):
        view = view.model_copy(update={"socials": UserSocials.model_validate(user)})
    return view
