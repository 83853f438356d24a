from fastapi import APIRouter

from app.data.vocabulary import DIFFICULTY_LEVELS, GENDERS, STUDY_TIMES, TOPICS
from app.schemas.options import OnboardingOptions


router = APIRouter(prefix="/options", tags=["options"])


@router.get("", response_model=OnboardingOptions, summary="Choices offered during onboarding")
def read_onboarding_options() -> OnboardingOptions:
    return OnboardingOptions(
        topics=list(TOPICS),
        study_times=list(STUDY_TIMES),
        difficulty_levels=list(DIFFICULTY_LEVELS),
        genders=list(GENDERS),
    )
