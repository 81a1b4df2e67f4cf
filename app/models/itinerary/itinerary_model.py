from sqlalchemy import Column, Integer, String, Date, DateTime, Text, Numeric
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base

class Itinerary(Base):
    __tablename__ = "itineraries"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    destination = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    # full model response the activities were parsed from
    raw_content = Column(Text, nullable=True)

    budget = Column(Numeric(10, 2), nullable=True)
    budget_currency = Column(String(3), default="USD", nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    activities = relationship(
        "Activity",
        back_populates="itinerary",
        cascade="all,delete-orphan",
        order_by="Activity.id"
    )
    expenses = relationship(
        "Expense",
        back_populates="itinerary",
        cascade="all,delete-orphan",
        passive_deletes=True
    )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "destination": self.destination,
            "description": self.description,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "budget": float(self.budget) if self.budget is not None else None,
            "budget_currency": self.budget_currency,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "activities": [activity.to_dict() for activity in self.activities] if self.activities else []
        }
