from typing import Callable, List
from datetime import date
from fastapi import HTTPException, status
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.llm_client import get_ai_completion
from app.core.logger import logger
from app.models.itinerary.itinerary_model import Itinerary
from app.schemas.itineraries.itinerary import GenerateItineraryRequest, ItineraryDayPreview
from app.services.itineraries.itinerary_service import ItineraryService
from app.utils.ai_itinerary import build_prompt, compute_duration, extract_markdown, parse_ai_response
from app.utils.itinerary_parser import parse_itinerary_text
from app.utils.structure_ai import group_records_by_day

DESCRIPTION_PREVIEW_LENGTH = 500

CompletionFn = Callable[..., str]


async def generate_itinerary(
    db: AsyncSession,
    request: GenerateItineraryRequest,
    complete: CompletionFn = get_ai_completion,
    itinerary_service: ItineraryService = None
) -> Itinerary:
    if request.end_date < request.start_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="end_date must not be before start_date"
        )

    itinerary_service = itinerary_service or ItineraryService()

    duration = compute_duration(request)
    prompt = build_prompt(request, duration)
    content = await run_in_threadpool(complete, prompt, request.premium)

    if not content or not extract_markdown(content):
        logger.error(f"Empty itinerary returned for destination={request.destination}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate itinerary. Please try again."
        )

    records = parse_ai_response(content, request.start_date)
    logger.info(f"Generated {duration}-day itinerary for {request.destination} with {len(records)} activities")

    return await itinerary_service.create_itinerary_with_activities(
        db=db,
        title=request.title or f"Trip to {request.destination}",
        destination=request.destination,
        description=request.description or content[:DESCRIPTION_PREVIEW_LENGTH],
        start_date=request.start_date,
        end_date=request.end_date,
        records=records,
        raw_content=content,
        budget=request.budget
    )


def preview_itinerary_text(content: str, start_date: date) -> List[ItineraryDayPreview]:
    records = parse_itinerary_text(content, start_date)
    return group_records_by_day(records, start_date)
