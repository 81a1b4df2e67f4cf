# app/routes/__init__.py
from fastapi import APIRouter
from app.routes.itineraries import itinerary_routes
from app.routes.expense import expense


api_router = APIRouter()

# Itinerary routes
api_router.include_router(itinerary_routes.router)

# Expense tracking routes
api_router.include_router(expense.router)
