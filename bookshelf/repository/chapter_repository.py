from typing import List, Optional

from sqlalchemy.orm import with_parent

from bookshelf.models.models import Book, Chapter

from .base_repository import BaseRepository


class ChapterRepository(BaseRepository[Chapter]):

    def get_by_book(self, book: Book) -> List[Chapter]:
        return (
            self.db.query(Chapter)
            .filter(with_parent(book, Book.chapters))
            .order_by(Chapter.id)
            .all()
        )

    def get_for_book(self, book: Book, chapter_id: int) -> Optional[Chapter]:
        # Looked up through the parent so a chapter of another book never matches
        return (
            self.db.query(Chapter)
            .filter(with_parent(book, Book.chapters), Chapter.id == chapter_id)
            .first()
        )

    def create(self, book_id: int, title: Optional[str] = None, content: Optional[str] = None) -> Chapter:
        return self.save(Chapter(book_id=book_id, title=title, content=content))
