# book_api/models.py
from typing import Optional

from pydantic import BaseModel


class BookCreate(BaseModel):
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None
    isbn: Optional[str] = None
    available: bool = True


class BookUpdate(BaseModel):
    # Only the fields a client actually sent are applied; read them with
    # ``model_dump(exclude_unset=True)``.
    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None
    isbn: Optional[str] = None
    available: Optional[bool] = None


class Book(BaseModel):
    id: int
    title: str
    author: str
    year: Optional[int] = None
    genre: Optional[str] = None
    isbn: Optional[str] = None
    available: bool = True
