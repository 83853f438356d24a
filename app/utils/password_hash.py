from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password: str, hashed: str | None) -> bool:
    if not hashed:
        return False
    return check_password_hash(hashed, password)
