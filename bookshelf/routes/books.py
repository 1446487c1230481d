from fastapi import Depends
from sqlalchemy.orm import Session

from bookshelf.database import get_db
from bookshelf.metrics.router import MetricsRouter
from bookshelf.schemas.schemas import (
    BookCreate,
    BookResponse,
    BookUpdate,
    BookWithChaptersResponse,
    MessageResponse,
)
from bookshelf.services.book_service import BookService

router = MetricsRouter(tags=["books"])


@router.get("/books", response_model=list[BookResponse])
def get_books_route(db: Session = Depends(get_db)):
    return BookService(db).get_books()


@router.post("/books", status_code=201, response_model=MessageResponse)
def create_book_route(book: BookCreate, db: Session = Depends(get_db)):
    db_book = BookService(db).create_book(book)
    return MessageResponse(message="book created", id=db_book.id)


@router.get("/books/{book_id}", response_model=BookWithChaptersResponse)
def get_book_route(book_id: int, db: Session = Depends(get_db)):
    return BookService(db).get_book(book_id)


@router.put(
    "/books/{book_id}",
    status_code=202,
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def update_book_route(book_id: int, book_update: BookUpdate, db: Session = Depends(get_db)):
    BookService(db).update_book(book_id, book_update)
    return MessageResponse(message="accepted")


@router.delete(
    "/books/{book_id}",
    status_code=202,
    response_model=MessageResponse,
    response_model_exclude_none=True,
)
def delete_book_route(book_id: int, db: Session = Depends(get_db)):
    BookService(db).delete_book(book_id)
    return MessageResponse(message="accepted")
