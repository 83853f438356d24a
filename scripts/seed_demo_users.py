from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from app.config import build_sqlalchemy_db_url, settings  # noqa: E402
from app.data.vocabulary import DIFFICULTY_LEVELS, GENDERS, STUDY_TIMES, TOPICS  # noqa: E402
from app.database import Base, SessionLocal, engine  # noqa: E402
from app.services import user_store  # noqa: E402
from app.services.errors import EmailAlreadyRegisteredError  # noqa: E402
import app.models  # noqa: F401,E402  # ensure all models are registered


FIRST_NAMES = ["Ava", "Ben", "Chloe", "Dev", "Elif", "Finn", "Grace", "Hiro", "Isla", "Jonas"]
LAST_NAMES = ["Nguyen", "Okafor", "Silva", "Kowalski", "Haddad", "Moreau", "Tanaka", "Reyes"]


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Create demo users with random onboarding answers so /matches has data to show."
    )
    parser.add_argument("--count", type=int, default=20, help="Number of users to create")
    parser.add_argument("--password", default="DemoPass1", help="Password shared by all demo users")
    parser.add_argument("--domain", default="example.com", help="Email domain for demo users")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for repeatable data")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    _ensure_tables()

    created = 0
    skipped = 0
    with SessionLocal() as db:
        for idx in range(1, args.count + 1):
            email = f"student{idx}@{args.domain}"
            try:
                user = user_store.create_user(db, email, args.password)
            except EmailAlreadyRegisteredError:
                skipped += 1
                continue

            user_store.upsert_profile(
                db,
                user,
                first_name=rng.choice(FIRST_NAMES),
                last_name=rng.choice(LAST_NAMES),
                age=rng.randint(17, 35),
                gender=rng.choice(GENDERS),
                occupation="Student",
            )
            user_store.set_topics(db, user, rng.sample(TOPICS, k=rng.randint(1, 3)))
            user_store.set_study_time(db, user, rng.sample(STUDY_TIMES, k=rng.randint(1, 2)))
            user_store.set_difficulty(db, user, rng.choice(DIFFICULTY_LEVELS))
            user_store.mark_setup_complete(db, user)
            created += 1

    print(f"created={created} skipped={skipped}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
