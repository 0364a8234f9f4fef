"""Basic Authentication parsing and credential verification.

Both steps are plain functions of the request headers and a database session,
so they can be exercised without running an HTTP server.
"""

import base64
import binascii
import logging
from collections.abc import Mapping

from sqlalchemy.orm import Session

from course_api.auth.security import verify_password
from course_api.models.user import User
from course_api.repositories.users import UserRepository


logger = logging.getLogger(__name__)


class AuthenticationFailure(Exception):
    """Raised when a request cannot be tied to a known user."""


class MissingCredentials(AuthenticationFailure):
    pass


class MalformedCredentials(AuthenticationFailure):
    pass


class UserNotFound(AuthenticationFailure):
    pass


class BadCredentials(AuthenticationFailure):
    pass


def parse_basic_credentials(authorization: str | None) -> tuple[str, str]:
    if not authorization:
        raise MissingCredentials("Auth header not found")

    scheme, _, encoded = authorization.strip().partition(" ")
    if scheme.lower() != "basic" or not encoded.strip():
        raise MalformedCredentials(f"Unsupported authorization scheme: {scheme or '<empty>'}")

    try:
        decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise MalformedCredentials("Authorization header is not valid base64") from exc

    name, separator, password = decoded.partition(":")
    if not separator:
        raise MalformedCredentials("Authorization header has no name:password pair")
    return name, password


def verify_credentials(db: Session, email: str, password: str) -> User:
    user = UserRepository(db).get_by_email(email)
    if user is None:
        logger.warning("User not found for username: %s", email)
        raise UserNotFound(email)

    if not verify_password(password, user.password):
        logger.warning("Authentication failure for email: %s", user.email_address)
        raise BadCredentials(email)

    logger.info("Authentication successful for email: %s", user.email_address)
    return user


def authenticate(headers: Mapping[str, str], db: Session) -> User:
    authorization = headers.get("authorization") or headers.get("Authorization")
    name, password = parse_basic_credentials(authorization)
    return verify_credentials(db, name, password)
