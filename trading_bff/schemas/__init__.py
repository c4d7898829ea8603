from .base import BaseSchema
from .trading import (
    TradingListingItem,
    TradingListingUpdate,
    TradingErrorDetail,
    Fee,
)

__all__ = [
    "BaseSchema",
    "TradingListingItem",
    "TradingListingUpdate",
    "TradingErrorDetail",
    "Fee",
]
