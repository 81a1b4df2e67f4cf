class InvalidItineraryText(ValueError):
    """Raised when the parser is called without any text or without a start date."""
