from typing import List, Optional

from bookshelf.models.models import Book

from .base_repository import BaseRepository


class BookRepository(BaseRepository[Book]):

    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self.db.query(Book).filter(Book.id == book_id).first()

    def get_all(self) -> List[Book]:
        return self.db.query(Book).order_by(Book.id).all()

    def create(self, title: Optional[str] = None, content: Optional[str] = None) -> Book:
        return self.save(Book(title=title, content=content))
