from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.orm import selectinload
from fastapi import HTTPException
from typing import List, Optional
from datetime import datetime, date
from decimal import Decimal
from app.core.logger import logger
from app.models.itinerary.itinerary_model import Itinerary
from app.models.itinerary.activity import Activity
from app.schemas.itineraries.activity import ActivityRecord


class ItineraryService:

    async def create_itinerary_with_activities(
        self,
        db: AsyncSession,
        title: str,
        destination: str,
        start_date: date,
        end_date: date,
        records: List[ActivityRecord],
        description: Optional[str] = None,
        raw_content: Optional[str] = None,
        budget: Optional[float] = None
    ) -> Itinerary:
        itinerary = Itinerary(
            title=title,
            destination=destination,
            description=description,
            start_date=start_date,
            end_date=end_date,
            raw_content=raw_content,
            budget=budget,
            created_at=datetime.utcnow()
        )

        db.add(itinerary)
        await db.flush()

        # Insert in parser order; Activity.id keeps that order on reads
        for record in records:
            db.add(Activity(
                itinerary_id=itinerary.id,
                title=record.title,
                description=record.description,
                location=record.location,
                date=record.date,
                time=record.time,
                category=record.category,
                order=record.order,
                created_at=datetime.utcnow()
            ))

        await db.commit()
        logger.info(f"Itinerary {itinerary.id} stored with {len(records)} activities")

        return await self.get_itinerary(db, itinerary.id)

    async def get_itinerary(self, db: AsyncSession, itinerary_id: int) -> Itinerary:
        result = await db.execute(
            select(Itinerary)
            .options(selectinload(Itinerary.activities))
            .where(Itinerary.id == itinerary_id)
            .execution_options(populate_existing=True)
        )
        itinerary = result.scalar_one_or_none()
        if not itinerary:
            raise HTTPException(status_code=404, detail="Itinerary not found")
        return itinerary

    async def list_itineraries(self, db: AsyncSession) -> List[Itinerary]:
        result = await db.execute(
            select(Itinerary).order_by(Itinerary.created_at.desc(), Itinerary.id.desc())
        )
        return result.scalars().all()

    async def update_budget(
        self,
        db: AsyncSession,
        itinerary_id: int,
        budget: Optional[Decimal],
        budget_currency: str = "USD"
    ) -> Itinerary:
        itinerary = await db.get(Itinerary, itinerary_id)
        if not itinerary:
            raise HTTPException(status_code=404, detail="Itinerary not found")

        itinerary.budget = budget
        itinerary.budget_currency = budget_currency.upper()
        await db.commit()
        await db.refresh(itinerary)
        logger.info(f"Itinerary {itinerary_id} budget set to {budget} {itinerary.budget_currency}")
        return itinerary
