from __future__ import annotations

from pydantic import BaseModel


class OnboardingOptions(BaseModel):
    topics: list[str]
    study_times: list[str]
    difficulty_levels: list[str]
    genders: list[str]
