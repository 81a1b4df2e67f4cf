# app/models/itinerary/activity.py

from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, Date, Text, Time, Enum
from sqlalchemy.orm import relationship
from datetime import datetime
from app.core.database import Base
from app.schemas.itineraries.activity import ActivityCategory

class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True)
    itinerary_id = Column(Integer, ForeignKey("itineraries.id", ondelete="CASCADE"), nullable=False)
    title = Column(String(150), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String, nullable=True)
    date = Column(Date, nullable=True)
    time = Column(Time, nullable=True)
    category = Column(Enum(ActivityCategory), nullable=False, default=ActivityCategory.ACTIVITY)
    order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationship back to itinerary
    itinerary = relationship("Itinerary", back_populates="activities")

    def to_dict(self):
        return {
            "id": self.id,
            "itinerary_id": self.itinerary_id,
            "title": self.title,
            "description": self.description,
            "location": self.location,
            "date": self.date.isoformat() if self.date else None,
            "time": self.time.strftime("%H:%M:%S") if self.time else None,
            "category": self.category.value if self.category else None,
            "order": self.order,
            "created_at": self.created_at.isoformat() if self.created_at else None
        }
