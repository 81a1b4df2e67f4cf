from .itinerary.itinerary_model import Itinerary
from .itinerary.activity import Activity
from .expense.expense_models import Expense
