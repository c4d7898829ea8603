"""
Core module exports.
"""
from .enums import (
    Ack,
    ListingType,
    ListingStatus,
    TradingCall
)

from .exceptions import (
    BaseServiceError,
    PlatformServiceError,
    EbayServiceError,
    EbayAPIError,
    TradingAPIError,
    ValidationError
)
