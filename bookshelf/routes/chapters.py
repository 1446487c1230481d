from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf.database import get_db
from bookshelf.metrics.router import MetricsRouter
from bookshelf.schemas.schemas import ChapterCreate, ChapterResponse, ChapterUpdate, MessageResponse
from bookshelf.services.chapter_service import ChapterService

router = MetricsRouter(tags=["chapters"])


@router.get("/books/{book_id}/chapters", response_model=list[ChapterResponse])
def get_book_chapters_route(book_id: int, db: Session = Depends(get_db)):
    return ChapterService(db).get_chapters(book_id)


@router.post("/books/{book_id}/chapters", response_model=MessageResponse)
def create_chapter_route(book_id: int, chapter: ChapterCreate, db: Session = Depends(get_db)):
    db_chapter = ChapterService(db).create_chapter(book_id, chapter)
    return MessageResponse(message="created", id=db_chapter.id)


@router.get("/books/{book_id}/chapters/{chapter_id}", response_model=ChapterResponse)
def get_chapter_route(book_id: int, chapter_id: int, db: Session = Depends(get_db)):
    return ChapterService(db).get_chapter(book_id, chapter_id)


@router.put(
    "/books/{book_id}/chapters/{chapter_id}",
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def update_chapter_route(
    book_id: int,
    chapter_id: int,
    chapter_update: ChapterUpdate,
    db: Session = Depends(get_db),
):
    ChapterService(db).update_chapter(book_id, chapter_id, chapter_update)
    return MessageResponse(message="accepted")


@router.delete(
    "/books/{book_id}/chapters/{chapter_id}",
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def delete_chapter_route(book_id: int, chapter_id: int, db: Session = Depends(get_db)):
    ChapterService(db).delete_chapter(book_id, chapter_id)
    return MessageResponse(message="accepted")
