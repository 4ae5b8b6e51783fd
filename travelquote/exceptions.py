class TravelQuoteError(Exception):
    """Base exception for travelquote errors."""


class CatalogError(TravelQuoteError):
    """Raised when a package catalog cannot be built from its source records."""
