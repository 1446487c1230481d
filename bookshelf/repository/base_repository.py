from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from bookshelf.utils.exceptions import rollback_on_exception

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """Persistence shared by the book and chapter repositories.

    Every write commits on its own; a failed write rolls the session back.
    """

    def __init__(self, db: Session):
        self.db = db

    @rollback_on_exception
    def save(self, record: T) -> T:
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    @rollback_on_exception
    def update(self, record: T, **changes) -> T:
        # Unknown keys are dropped rather than set as stray attributes
        for key, value in changes.items():
            if hasattr(record, key):
                setattr(record, key, value)
        self.db.commit()
        self.db.refresh(record)
        return record

    @rollback_on_exception
    def delete(self, record: T) -> None:
        self.db.delete(record)
        self.db.commit()
