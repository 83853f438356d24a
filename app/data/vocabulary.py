# Options offered by the onboarding screens. Matching treats topics as an open
# set, so none of these lists are enforced on write.

TOPICS: tuple[str, ...] = (
    "Computer Science",
    "Biology",
    "Chemistry",
    "Mathematics",
    "Engineering",
    "Physics",
    "English",
    "French",
    "History",
    "Philosophy",
)

STUDY_TIMES: tuple[str, ...] = (
    "Weekday Morning",
    "Weekday Afternoon",
    "Weekday Evening",
    "Weekend Morning",
    "Weekend Afternoon",
    "Weekend Evening",
)

DIFFICULTY_LEVELS: tuple[str, ...] = (
    "Beginner",
    "Intermediate",
    "Advanced",
)

GENDERS: tuple[str, ...] = (
    "Male",
    "Female",
    "Other",
)
