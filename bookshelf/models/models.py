import time

from sqlalchemy import BigInteger, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database import Base


def _now() -> int:
    return int(time.time())


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255))
    content = Column(Text)
    created_at = Column(BigInteger, nullable=False, default=_now)  # Unix timestamp
    updated_at = Column(BigInteger, nullable=False, default=_now, onupdate=_now)  # Unix timestamp
    # Deleting a book deletes its chapters
    chapters = relationship(
        "Chapter",
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="Chapter.id",
    )


class Chapter(Base):
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, index=True)
    book_id = Column(Integer, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255))
    content = Column(Text)
    created_at = Column(BigInteger, nullable=False, default=_now)  # Unix timestamp
    updated_at = Column(BigInteger, nullable=False, default=_now, onupdate=_now)  # Unix timestamp
    book = relationship("Book", back_populates="chapters")
