"""Field-level validation run by the session before rows are written."""

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import event
from sqlalchemy.orm import Session


class RecordValidationError(Exception):
    """One or more field rules failed for the records pending in a flush."""

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages


def check_required_text(value: str | None, missing_message: str, empty_message: str) -> list[str]:
    if value is None:
        return [missing_message]
    if not value:
        return [empty_message]
    return []


def check_email(value: str | None, missing_message: str, invalid_message: str) -> list[str]:
    if value is None:
        return [missing_message]
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return [invalid_message]
    return []


@event.listens_for(Session, "before_flush")
def validate_pending_records(session: Session, flush_context, instances) -> None:
    messages: list[str] = []
    for instance in list(session.new) + list(session.dirty):
        collect = getattr(instance, "validation_errors", None)
        if collect is not None:
            messages.extend(collect())
    if messages:
        raise RecordValidationError(messages)
