"""
Records API - Record Route Handlers
=====================================

What:  Handles POST / (insert one record) and GET / (list all records).
How:   Parses the request, delegates to RecordService, returns JSON.

Both handlers are thin. Store failures surface as DatabaseError from the
service and are turned into `{"error": ...}` with HTTP 500 by the global
exception handler in main.py.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.record import (
    ErrorResponse,
    MessageResponse,
    RecordCreate,
    RecordResponse,
)
from app.services.record_service import record_service

router = APIRouter(tags=["Records"])


@router.post(
    "/",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Record stored", "model": MessageResponse},
        500: {"description": "Store operation failed", "model": ErrorResponse},
    },
    summary="Insert a record",
)
async def create_record(
    payload: Optional[RecordCreate] = None,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """
    Store `name` and `description` as a new row of the `data` table.

    Example:
        POST / {"name": "widget", "description": "a test widget"}
        → 201 {"message": "Data added successfully"}

    A request without a body stores a row of nulls.
    """
    return await record_service.create_record(db=db, payload=payload or RecordCreate())


@router.get(
    "/",
    response_model=List[RecordResponse],
    responses={
        500: {"description": "Store operation failed", "model": ErrorResponse},
    },
    summary="List all records",
)
async def list_records(
    db: AsyncSession = Depends(get_db_session),
) -> List[RecordResponse]:
    """Return every record; an empty table yields `[]`."""
    return await record_service.list_records(db=db)
