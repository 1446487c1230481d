from functools import wraps
from typing import Any, Callable, Optional, TypeVar

from sqlalchemy.orm import Session

F = TypeVar("F", bound=Callable[..., Any])


def rollback_on_exception(func: F) -> F:
    @wraps(func)
    def wrapper(*args, **kwargs):
        db: Session = kwargs.get("db") or next((a for a in args if isinstance(a, Session)), None)
        # If not found, check if first arg is self and has .db
        if not db and args:
            db = getattr(args[0], "db", None)
        if not db:
            raise ValueError("SQLAlchemy session (db: Session) is required")

        try:
            return func(*args, **kwargs)
        except Exception:
            db.rollback()
            raise

    return wrapper  # type: ignore


class BookshelfException(Exception):
    status_code = 500
    message = "some error occured"

    def __init__(self, message: Optional[str] = None, errors: Optional[list] = None):
        if message is not None:
            self.message = message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class NotFoundException(BookshelfException):
    status_code = 404
    message = "not found"


class BookNotFoundException(NotFoundException):
    pass


class ChapterNotFoundException(NotFoundException):
    message = "chapter not found"


class RequestValidationException(BookshelfException):
    status_code = 400
    message = "invalid request"


class StorageUnavailableException(BookshelfException):
    status_code = 503
    message = "storage unavailable"
