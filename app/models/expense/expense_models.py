from sqlalchemy import Column, Integer, String, ForeignKey, Date, DateTime, Text, Enum, Index, Numeric
from sqlalchemy.orm import relationship
from datetime import date, datetime
from app.core.database import Base
import enum


class ExpenseCategory(str, enum.Enum):
    accommodation = "accommodation"
    transportation = "transportation"
    food = "food"
    activities = "activities"
    shopping = "shopping"
    other = "other"


class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    itinerary_id = Column(Integer, ForeignKey("itineraries.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    amount = Column(Numeric(10, 2), nullable=False)
    currency = Column(String(3), default="USD", nullable=False)
    category = Column(Enum(ExpenseCategory), nullable=False, default=ExpenseCategory.other)
    expense_date = Column(Date, nullable=False, default=date.today)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    itinerary = relationship("Itinerary", back_populates="expenses")

    __table_args__ = (
        Index("ix_expenses_itinerary_id", "itinerary_id"),
        Index("ix_expenses_category", "category"),
    )
