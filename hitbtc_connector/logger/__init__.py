from decimal import Decimal
from enum import Enum

from .logger import HitbtcLogger

__all__ = [
    "HitbtcLogger",
    "log_encoder",
]


def log_encoder(obj):
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, Enum):
        return obj.name
    raise TypeError(f"Object of type '{obj.__class__.__name__}' is not JSON serializable")
