import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./fsjstd-restapi.db")
SQL_ECHO = _get_bool(os.getenv("SQL_ECHO"), default=False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = _get_list(os.getenv("CORS_ALLOW_ORIGINS"), ["http://localhost:3000"])

PASSWORD_HASH_SCHEME = os.getenv("PASSWORD_HASH_SCHEME", "pbkdf2_sha256")
SUPPORTED_HASH_SCHEMES = ("pbkdf2_sha256", "sha512_crypt")

def validate_runtime_config() -> None:
    if PASSWORD_HASH_SCHEME not in SUPPORTED_HASH_SCHEMES:
        raise RuntimeError(f"PASSWORD_HASH_SCHEME must be one of {', '.join(SUPPORTED_HASH_SCHEMES)}.")
    if APP_ENV.lower() == "production" and DATABASE_URL.startswith("sqlite:///:memory:"):
        raise RuntimeError("DATABASE_URL must point at a persistent database in production.")
