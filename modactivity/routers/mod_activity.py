"""Moderation activity router for the staff dashboard."""

from typing import Annotated

from anyio import to_thread
from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from modactivity.core.security import authenticate_staff
from modactivity.database.database import get_engine, get_session
from modactivity.exceptions import AggregationError
from modactivity.models.mod_activity import ModActivityReport, ModActivityRequest
from modactivity.services import mod_activity as mod_activity_service
from modactivity.services.period import resolve_period

router = APIRouter(prefix="/mod", tags=["moderation"])


@router.post("/activity", response_model=ModActivityReport)
async def get_mod_activity(
    payload: ModActivityRequest,
    session: Annotated[Session, Depends(get_session)],
    engine: Annotated[Engine, Depends(get_engine)],
) -> ModActivityReport:
    """
    Retrieve the monthly moderation activity report.

    Staff only. The caller proves staff access with its shared secret. `year`
    and `month` default to the current month; the current month is reported
    with whatever activity exists so far.

    ## Example Request

    ```json
    {"secret": "<staff secret>", "year": 2026, "month": 3}
    ```

    ## Example Response

    ```json
    {
      "moderators": [
        {"accountId": 12, "displayName": "mira", "actions": {"ban": 2, "warn": 3}, "totalActions": 5}
      ],
      "totals": {"ban": 2, "warn": 3},
      "grandTotal": 5,
      "dailyReports": [{"day": 1, "incoming": 4, "handled": 2}],
      "dailyByModerator": {"12": [0, 0, 0, 0, 5]},
      "month": 3,
      "year": 2026,
      "availableMonths": [{"year": 2026, "month": 3}, {"year": 2026, "month": 2}]
    }
    ```

    `dailyReports` and every `dailyByModerator` series hold one entry per day
    of the month (truncated above).

    Raises:
        `403 Forbidden`: If the secret is unknown or its owner is not staff.
        `422 Unprocessable Content`: If the secret is empty or year/month is out of range.
        `500 Internal Server Error`: If the secret lookup or any underlying query fails.
    """
    try:
        await to_thread.run_sync(authenticate_staff, session, payload.secret)
    except SQLAlchemyError as e:
        logger.exception("Staff secret lookup failed")
        raise AggregationError(str(e)) from e
    year, month = resolve_period(payload.year, payload.month)
    return await mod_activity_service.build_mod_activity(engine, year, month)
