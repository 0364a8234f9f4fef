from passlib.context import CryptContext

from course_api.core import config


_schemes = [config.PASSWORD_HASH_SCHEME] + [
    scheme for scheme in config.SUPPORTED_HASH_SCHEMES if scheme != config.PASSWORD_HASH_SCHEME
]
_pwd = CryptContext(schemes=_schemes, deprecated="auto")


def hash_password(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except ValueError:
        # Stored value is not a hash any configured scheme recognizes.
        return False
