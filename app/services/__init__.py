# Services package for CleanQuote

from .pricing_engine import compute_breakdown
from .quote_service import submit_quote

__all__ = [
    "compute_breakdown",
    "submit_quote",
]
