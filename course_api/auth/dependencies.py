import logging

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from course_api.auth.credentials import AuthenticationFailure, authenticate
from course_api.database import get_db
from course_api.errors import AccessDenied
from course_api.models.user import User

logger = logging.getLogger(__name__)


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    try:
        return authenticate(request.headers, db)
    except AuthenticationFailure as exc:
        # Every cause gets the same response; only the log tells them apart.
        logger.warning(
            "Rejected %s %s (%s): %s", request.method, request.url.path, type(exc).__name__, exc
        )
        raise AccessDenied() from exc
