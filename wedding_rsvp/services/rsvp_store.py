"""
RSVP persistence on SQLAlchemy.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wedding_rsvp.core.db import Base, make_engine, make_session_factory
from wedding_rsvp.core.errors import StorageError
from wedding_rsvp.models import RSVP
from wedding_rsvp.schemas.rsvp import RSVPStats

logger = logging.getLogger(__name__)

INSERTABLE_FIELDS = (
    "name", "email", "phone", "attending", "adults", "children", "dietary", "song", "message",
)


class RSVPStore:
    """Append-only store of RSVP records"""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self.engine = make_engine(database_url)
        self.SessionLocal = make_session_factory(self.engine)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def initialize(self) -> None:
        """Create the rsvps table if it does not exist yet"""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Error creating table: {e}")
            raise StorageError("Failed to initialize RSVP table") from e
        logger.info("RSVP table ready")

    def insert(self, record: Dict[str, Any]) -> int:
        """Store a new RSVP and return its id.

        ``id`` and ``created_at`` are assigned by the database; any such keys in
        ``record`` are ignored. Missing party sizes default to one adult and no
        children.
        """
        values = {field: record.get(field) for field in INSERTABLE_FIELDS}
        if values["adults"] is None:
            values["adults"] = 1
        if values["children"] is None:
            values["children"] = 0

        try:
            with self.session_scope() as db:
                rsvp = RSVP(**values)
                db.add(rsvp)
                db.flush()
                rsvp_id = rsvp.id
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"Database error: {e}")
            raise StorageError("Failed to save RSVP") from e

        logger.info(f"RSVP saved with ID: {rsvp_id}")
        return rsvp_id

    def list_all(self) -> List[RSVP]:
        """All RSVPs, most recent first"""
        try:
            with self.session_scope() as db:
                return (
                    db.query(RSVP)
                    .order_by(RSVP.created_at.desc(), RSVP.id.desc())
                    .all()
                )
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            raise StorageError("Failed to retrieve RSVPs") from e

    def aggregate_stats(self) -> RSVPStats:
        is_attending = RSVP.attending == "yes"
        query_columns = (
            func.count(RSVP.id).label("total"),
            func.sum(case((is_attending, 1), else_=0)).label("attending"),
            func.sum(case((RSVP.attending == "no", 1), else_=0)).label("not_attending"),
            func.sum(case((is_attending, RSVP.adults), else_=0)).label("total_adults"),
            func.sum(case((is_attending, RSVP.children), else_=0)).label("total_children"),
        )
        try:
            with self.session_scope() as db:
                row = db.query(*query_columns).one()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            raise StorageError("Failed to retrieve statistics") from e

        # SUM over an empty table is NULL
        return RSVPStats(**{key: value or 0 for key, value in row._mapping.items()})

    def count(self) -> int:
        try:
            with self.session_scope() as db:
                return db.query(func.count(RSVP.id)).scalar()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            raise StorageError("Failed to count RSVPs") from e

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database connection closed")
