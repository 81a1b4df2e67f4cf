from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from app.core.database import get_db
from app.core.llm_client import get_ai_completion
from app.schemas.itineraries.itinerary import (
    BudgetResponse, BudgetUpdate, GenerateItineraryRequest, ItineraryPreviewRequest,
    ItineraryPreviewResponse, ItineraryResponse, ItinerarySummary
)
from app.services.itineraries.itinerary_service import ItineraryService
from app.services.itineraries.planner_service import (
    CompletionFn,
    generate_itinerary,
    preview_itinerary_text
)
from app.utils.itinerary_parser import InvalidItineraryText


router = APIRouter(prefix="/itinerary", tags=["itinerary"])


def get_itinerary_service() -> ItineraryService:
    return ItineraryService()


def get_completion_fn() -> CompletionFn:
    return get_ai_completion


@router.post("/generate", response_model=ItineraryResponse, status_code=status.HTTP_201_CREATED)
async def generate_itinerary_route(
    request: GenerateItineraryRequest,
    db: AsyncSession = Depends(get_db),
    complete: CompletionFn = Depends(get_completion_fn),
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    try:
        return await generate_itinerary(
            db=db,
            request=request,
            complete=complete,
            itinerary_service=itinerary_service
        )
    except InvalidItineraryText as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.post("/preview", response_model=ItineraryPreviewResponse)
async def preview_itinerary_route(request: ItineraryPreviewRequest):
    try:
        preview = preview_itinerary_text(request.content, request.start_date)
    except InvalidItineraryText as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return ItineraryPreviewResponse(preview=preview)


@router.get("/", response_model=List[ItinerarySummary])
async def list_itineraries_route(
    db: AsyncSession = Depends(get_db),
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    return await itinerary_service.list_itineraries(db)


@router.get("/{itinerary_id}", response_model=ItineraryResponse)
async def get_itinerary_route(
    itinerary_id: int = Path(..., description="ID of the itinerary"),
    db: AsyncSession = Depends(get_db),
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    return await itinerary_service.get_itinerary(db, itinerary_id)


@router.put("/{itinerary_id}/budget", response_model=BudgetResponse)
async def update_itinerary_budget_route(
    budget_data: BudgetUpdate,
    itinerary_id: int = Path(..., description="ID of the itinerary"),
    db: AsyncSession = Depends(get_db),
    itinerary_service: ItineraryService = Depends(get_itinerary_service)
):
    return await itinerary_service.update_budget(
        db, itinerary_id, budget_data.budget, budget_data.budget_currency
    )
