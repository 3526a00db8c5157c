from fastapi import Depends, Request
from sqlalchemy.orm import Session

from alongside.database import get_db
from alongside.services.checkin_service import CheckinService
from alongside.services.economy_manager import EconomyManager

# Clock, random source, catalog and writer lock are owned by the app instance (see main.create_app)


def get_clock(request: Request):
    return request.app.state.clock


def get_rng(request: Request):
    return request.app.state.rng


def get_catalog(request: Request):
    return request.app.state.catalog


def get_economy_lock(request: Request):
    return request.app.state.economy_lock


def get_economy_manager(
    db: Session = Depends(get_db),
    clock=Depends(get_clock),
    catalog=Depends(get_catalog),
    lock=Depends(get_economy_lock),
) -> EconomyManager:
    return EconomyManager(db, clock, catalog=catalog, lock=lock)


def get_checkin_service(db: Session = Depends(get_db), clock=Depends(get_clock)) -> CheckinService:
    return CheckinService(db, clock)
