import logging
from typing import List

from sqlalchemy.orm import Session

from bookshelf.models.models import Book
from bookshelf.repository.book_repository import BookRepository
from bookshelf.schemas.schemas import BookCreate, BookUpdate
from bookshelf.utils.exceptions import BookNotFoundException

logger = logging.getLogger(__name__)

# Only these fields are ever written by an update
BOOK_UPDATE_FIELDS = ("title", "content")


class BookService:
    def __init__(self, db: Session):
        self.db = db
        self.book_repo = BookRepository(db)

    def get_books(self) -> List[Book]:
        return self.book_repo.get_all()

    def get_book(self, book_id: int, message: str = "not found") -> Book:
        book = self.book_repo.get_by_id(book_id)
        if not book:
            raise BookNotFoundException(message)
        return book

    def create_book(self, book: BookCreate) -> Book:
        db_book = self.book_repo.create(title=book.title, content=book.content)
        logger.info(f"Created book {db_book.id}")
        return db_book

    def update_book(self, book_id: int, book_update: BookUpdate) -> Book:
        book = self.get_book(book_id)
        changes = book_update.model_dump(include=set(BOOK_UPDATE_FIELDS), exclude_unset=True)
        return self.book_repo.update(book, **changes)

    def delete_book(self, book_id: int) -> None:
        book = self.get_book(book_id)
        chapter_count = len(book.chapters)
        self.book_repo.delete(book)
        logger.info(f"Deleted book {book_id} and {chapter_count} chapter(s)")
