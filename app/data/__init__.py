# __init__.py
from app.data.vocabulary import DIFFICULTY_LEVELS, GENDERS, STUDY_TIMES, TOPICS

__all__ = [
    "DIFFICULTY_LEVELS",
    "GENDERS",
    "STUDY_TIMES",
    "TOPICS",
]
