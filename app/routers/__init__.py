# Routers package for CleanQuote

from . import email, quotes

__all__ = [
    "email",
    "quotes",
]
