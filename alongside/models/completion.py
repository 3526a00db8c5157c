from sqlalchemy import Column, Integer, String, Float, DateTime
from datetime import datetime
from alongside.database import Base

class ExerciseCompletion(Base):
    """One finished exercise. Append-only: rows are never updated or deleted."""
    __tablename__ = "exercise_completions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    exercise_id = Column(String(100), nullable=False)
    exercise_name = Column(String(100), nullable=True)

    # Local wall-clock time of completion
    date = Column(DateTime, nullable=False, index=True)

    duration_minutes = Column(Float, nullable=False, default=0.0)  # actual, post-adjustment
    credits = Column(Integer, nullable=False)

    created_at = Column(DateTime, default=datetime.now)
