from app.schemas.itineraries.itinerary import GenerateItineraryRequest
from app.schemas.itineraries.activity import ActivityRecord
from app.utils.itinerary_parser import parse_itinerary_text
from datetime import date
from typing import List
import re

SYSTEM_PROMPT = (
    "You are an expert travel guide and itinerary planner. Create detailed, practical, and engaging travel itineraries.\n\n"
    "Format your response as follows:\n"
    "- Use clear day-by-day sections (Day 1, Day 2, etc.)\n"
    "- For each day, list activities with:\n"
    "  * Activity name/title\n"
    "  * Brief description\n"
    "  * Recommended time (if applicable)\n"
    "  * Location (if specific)\n"
    "- Include practical tips and recommendations\n"
    "- Make it engaging and tailored to the user's interests\n\n"
    "Use markdown formatting with clear headings for each day."
)

DIFFICULTY_LABELS = {
    "easy": "easy and relaxed",
    "moderate": "moderate",
    "challenging": "challenging and adventurous",
    "extreme": "extreme and very strenuous",
}

BUDGET_RANGE_LABELS = {
    "budget": "budget-friendly (under $500 per person)",
    "moderate": "moderate ($500 - $1,500 per person)",
    "comfortable": "comfortable ($1,500 - $3,000 per person)",
    "luxury": "luxury ($3,000+ per person)",
}

FORMAT_INSTRUCTIONS = (
    "\nPlease create a detailed day-by-day itinerary with:\n"
    "- Specific activities and attractions for each day\n"
    "- Recommended times for each activity\n"
    "- Practical tips and recommendations\n"
    "- Restaurant suggestions (if applicable)\n"
    "- Transportation options\n"
    "- Any special considerations based on the group and interests\n\n"
    "Format the response in clear sections for each day. Make it practical, engaging, "
    "and tailored to the specified interests and activity level.\n"
)


def compute_duration(request: GenerateItineraryRequest) -> int:
    if request.duration:
        return request.duration
    return max((request.end_date - request.start_date).days, 1)


def build_prompt(request: GenerateItineraryRequest, duration: int) -> str:
    parts = [f"You are an expert travel guide. Plan a {duration}-day trip to {request.destination}."]

    if request.group_size:
        parts.append(f"Traveling as: {request.group_size}.")

    if request.traveling_with:
        parts.append(f"Traveling with: {', '.join(request.traveling_with)}.")

    if request.interests:
        parts.append(f"Interests and activities: {', '.join(request.interests)}.")

    if request.difficulty:
        parts.append(f"Activity level: {DIFFICULTY_LABELS.get(request.difficulty, request.difficulty)}.")

    if request.budget:
        parts.append(f"Budget: ${request.budget:,.0f} total for the trip.")
    elif request.budget_range:
        parts.append(f"Budget range: {BUDGET_RANGE_LABELS.get(request.budget_range, request.budget_range)}.")

    if request.description:
        parts.append(f"Additional preferences: {request.description}")

    parts.append(FORMAT_INSTRUCTIONS)

    return " ".join(parts)


def extract_markdown(raw_text: str) -> str:
    # Remove a code fence wrapped around the whole answer
    cleaned = raw_text.strip()
    if cleaned.startswith("```"):
        cleaned = re.sub(r"^```[a-zA-Z]*", "", cleaned)
        cleaned = re.sub(r"```$", "", cleaned.strip())
    return cleaned.strip()


def parse_ai_response(response: str, start_date: date) -> List[ActivityRecord]:
    return parse_itinerary_text(extract_markdown(response), start_date)
