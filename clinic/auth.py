import secrets

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    if password_hash is None:
        return False
    # rows written before hashing was introduced hold the plaintext itself
    if pwd_context.identify(password_hash) is None:
        return secrets.compare_digest(plain_password.encode("utf-8"), password_hash.encode("utf-8"))
    try:
        return pwd_context.verify(plain_password, password_hash)
    except ValueError:
        # recognised scheme prefix but a corrupt hash body
        return False


def dummy_verify() -> None:
    """Spend the same time as a real verification when no patient matched."""
    pwd_context.dummy_verify()
