from sqlalchemy import Column, Integer, Boolean, Date, DateTime
from datetime import datetime
from alongside.database import Base

class CheckinLog(Base):
    __tablename__ = "checkin_logs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    date = Column(Date, nullable=False)

    energy = Column(Integer, nullable=False)
    mood = Column(Integer, nullable=False)
    sleep_quality = Column(Integer, nullable=True)  # 1-5
    avg_condition_pain = Column(Integer, nullable=False, default=0)
    skipped = Column(Boolean, default=False)

    created_at = Column(DateTime, default=datetime.now)
