# app/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

# one shared Limiter for the whole app
limiter = Limiter(key_func=get_remote_address)
