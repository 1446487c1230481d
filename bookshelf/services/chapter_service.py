import logging
from typing import List

from sqlalchemy.orm import Session

from bookshelf.models.models import Chapter
from bookshelf.repository.chapter_repository import ChapterRepository
from bookshelf.schemas.schemas import ChapterCreate, ChapterUpdate
from bookshelf.services.book_service import BookService
from bookshelf.utils.exceptions import ChapterNotFoundException

logger = logging.getLogger(__name__)


class ChapterService:
    def __init__(self, db: Session):
        self.db = db
        self.book_service = BookService(db)
        self.chapter_repo = ChapterRepository(db)

    def get_chapters(self, book_id: int) -> List[Chapter]:
        book = self.book_service.get_book(book_id)
        return self.chapter_repo.get_by_book(book)

    def create_chapter(self, book_id: int, chapter: ChapterCreate) -> Chapter:
        book = self.book_service.get_book(book_id)
        # The owning book always comes from the path, never from the body
        db_chapter = self.chapter_repo.create(book.id, title=chapter.title, content=chapter.content)
        logger.info(f"Created chapter {db_chapter.id} in book {book.id}")
        return db_chapter

    def get_chapter(self, book_id: int, chapter_id: int) -> Chapter:
        book = self.book_service.get_book(book_id, message="book not found")
        chapter = self.chapter_repo.get_for_book(book, chapter_id)
        if not chapter:
            raise ChapterNotFoundException()
        return chapter

    def update_chapter(self, book_id: int, chapter_id: int, chapter_update: ChapterUpdate) -> Chapter:
        chapter = self.get_chapter(book_id, chapter_id)
        changes = chapter_update.model_dump(exclude_unset=True)
        if changes.get("book_id") is None:
            changes.pop("book_id", None)
        elif changes["book_id"] != book_id:
            # Moving a chapter requires the target book to exist
            self.book_service.get_book(changes["book_id"], message="book not found")
            logger.info(f"Moving chapter {chapter_id} from book {book_id} to book {changes['book_id']}")
        return self.chapter_repo.update(chapter, **changes)

    def delete_chapter(self, book_id: int, chapter_id: int) -> None:
        chapter = self.get_chapter(book_id, chapter_id)
        self.chapter_repo.delete(chapter)
