"""Database session management and repositories."""

from __future__ import annotations

from typing import Iterable, Iterator

from sqlalchemy import create_engine, select
from sqlalchemy.orm import Session, sessionmaker

from moodpick.core.config import get_settings
from moodpick.models import Base, Book
from moodpick.services.models import BookData


engine = create_engine(get_settings().database_url, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_models() -> None:
    """Create tables if they do not exist (handy for local dev)."""
    Base.metadata.create_all(bind=engine)


def get_session() -> Iterator[Session]:
    """FastAPI-friendly dependency that manages commits/rollbacks."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def _join(values: Iterable[str]) -> str | None:
    joined = ", ".join(value for value in values if value)
    return joined or None


class BookRepository:
    """Data access helpers for persisted book volumes."""

    def save_many(self, session: Session, books: Iterable[BookData], *, query: str | None = None) -> list[Book]:
        records = [
            Book(
                title=book.title,
                authors=_join(book.authors),
                description=book.description,
                image=book.image,
                categories=_join(book.categories),
                rating=book.rating,
                query=query,
            )
            for book in books
        ]
        session.add_all(records)
        session.flush()
        return records

    def list_recent(self, session: Session, *, limit: int = 20) -> list[Book]:
        query = select(Book).order_by(Book.created_at.desc()).limit(limit)
        return list(session.execute(query).scalars())
