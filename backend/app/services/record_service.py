"""
Records API - Record Service
==============================

What:  Executes the two statements the API offers: insert one record and
       list all records.
How:   Each method runs a single parameterized statement on the session it
       is given and translates any store failure into DatabaseError.
Who:   Called by the route handlers in routes/records.py.

Error Handling:
    Every failure is logged here with its traceback and re-raised as
    DatabaseError carrying the client-facing message. The session
    dependency rolls back; the global handler responds with 500.
"""

import logging
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.record import Record
from app.schemas.record import MessageResponse, RecordCreate, RecordResponse

logger = logging.getLogger(__name__)

INSERT_SUCCESS_MESSAGE = "Data added successfully"
INSERT_ERROR_MESSAGE = "Error inserting data"
FETCH_ERROR_MESSAGE = "Error fetching data"


class RecordService:
    """
    Stateless service for record operations.

    Responsibilities:
        - create_record(): INSERT INTO data (name, description) VALUES (?, ?)
        - list_records():  SELECT id, name, description FROM data
    """

    async def create_record(self, db: AsyncSession, payload: RecordCreate) -> MessageResponse:
        """
        Insert one record and commit it.

        The generated id is intentionally not returned to the caller.

        Args:
            db: Async database session (injected by FastAPI)
            payload: Parsed request body; missing fields are None

        Returns:
            MessageResponse with the fixed success message

        Raises:
            DatabaseError: The insert or the commit failed
        """
        try:
            await db.execute(
                insert(Record).values(
                    name=payload.name,
                    description=payload.description,
                )
            )
            await db.commit()
        except Exception as e:
            logger.error("Error inserting data: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=INSERT_ERROR_MESSAGE,
                context={"original_error": type(e).__name__},
            ) from e

        logger.debug("Inserted record name=%r", payload.name)
        return MessageResponse(message=INSERT_SUCCESS_MESSAGE)

    async def list_records(self, db: AsyncSession) -> List[RecordResponse]:
        """
        Return every stored record in store-determined order.

        Raises:
            DatabaseError: The query failed
        """
        try:
            result = await db.execute(select(Record))
            records = list(result.scalars().all())
        except Exception as e:
            logger.error("Error fetching data: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=FETCH_ERROR_MESSAGE,
                context={"original_error": type(e).__name__},
            ) from e

        return [RecordResponse.model_validate(record) for record in records]


record_service = RecordService()
