from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from alongside.database import Base

class EconomyState(Base):
    __tablename__ = "economy_states"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    banked_weeks = Column(Integer, nullable=False, default=0)

    # Last redeemed treat (overwritten on every spend)
    last_treat_id = Column(String(50), nullable=True)
    last_treat_name = Column(String(100), nullable=True)
    last_treat_date = Column(DateTime, nullable=True)

    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

class TreatRedemption(Base):
    __tablename__ = "treat_redemptions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    treat_id = Column(String(50), nullable=False)
    name = Column(String(100), nullable=False)
    category = Column(String(20), nullable=False)  # small / medium / large / premium
    description = Column(String(255), nullable=True)

    date = Column(DateTime, nullable=False)

class BankedWeek(Base):
    __tablename__ = "banked_weeks"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    date = Column(DateTime, nullable=False)
    week_number = Column(Integer, nullable=False)  # ISO-8601
