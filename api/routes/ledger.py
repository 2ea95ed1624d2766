# api/routes/ledger.py

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_ledger, raise_http_error
from api.schemas.ledger import LedgerInit, LedgerInfo, Event, EventList
from core.exceptions import LedgerError
from core.models.book import EventKind
from core.services.book_ledger import BookLedger

router = APIRouter(prefix="/ledger", tags=["ledger"])

@router.post("", response_model=LedgerInfo, status_code=status.HTTP_201_CREATED)
def initialize_ledger(body: LedgerInit, ledger: BookLedger = Depends(get_ledger)):
    """One-time setup fixing the storekeeper identity"""
    try:
        ledger.initialize(body.storekeeper)
    except LedgerError as e:
        raise_http_error(e)
    return LedgerInfo(storekeeper=body.storekeeper)

@router.get("", response_model=LedgerInfo)
def get_ledger_info(ledger: BookLedger = Depends(get_ledger)):
    try:
        return LedgerInfo(storekeeper=ledger.get_storekeeper())
    except LedgerError as e:
        raise_http_error(e)

@router.get("/events", response_model=EventList)
def get_events(
    kind: Optional[str] = Query(None, description="Filter by event kind, e.g. BookBought"),
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Maximum number of events"),
    ledger: BookLedger = Depends(get_ledger)
):
    """
    Get the event log, oldest first.

    Args:
        kind: Optional event kind to filter on
        limit: Maximum number of events to return
        ledger: Ledger service
    """
    valid_kinds = [k.value for k in EventKind]
    if kind is not None and kind not in valid_kinds:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid event kind. Must be one of: {', '.join(valid_kinds)}"
        )

    events = ledger.get_events(kind=EventKind(kind) if kind else None, limit=limit)
    return EventList(
        items=[Event.model_validate(event) for event in events],
        total=len(events)
    )
