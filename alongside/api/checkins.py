from typing import List

from fastapi import APIRouter, Depends, Query, status

from alongside.api.deps import get_checkin_service
from alongside.schemas.checkin import BurnoutReport, CheckinContext, CheckinRecord
from alongside.services.checkin_service import CheckinService

router = APIRouter(prefix="/checkins", tags=["Check-ins"])


@router.post("/{user_id}", response_model=CheckinRecord, status_code=status.HTTP_201_CREATED)
def record_checkin(
    user_id: int,
    context: CheckinContext,
    skipped: bool = False,
    service: CheckinService = Depends(get_checkin_service),
):
    return service.record_checkin(user_id, context, skipped=skipped)


@router.get("/{user_id}/history", response_model=List[CheckinRecord])
def checkin_history(
    user_id: int,
    days: int = Query(7, ge=1, le=30),
    service: CheckinService = Depends(get_checkin_service),
):
    return service.get_checkin_history(user_id, days)


@router.get("/{user_id}/burnout", response_model=BurnoutReport)
def burnout(user_id: int, service: CheckinService = Depends(get_checkin_service)):
    return service.get_burnout_adaptation(user_id)
