"""
Shared enums and constants used across the application.
"""

from enum import Enum


class Ack(str, Enum):
    """Acknowledgement values returned on every Trading API response"""
    SUCCESS = "Success"
    WARNING = "Warning"
    FAILURE = "Failure"
    PARTIAL_FAILURE = "PartialFailure"


class ListingType(str, Enum):
    FIXED_PRICE_ITEM = "FixedPriceItem"
    CHINESE = "Chinese"
    LEAD_GENERATION = "LeadGeneration"
    PERSONAL_OFFER = "PersonalOffer"


class ListingStatus(str, Enum):
    """Listing status values reported by GetItem's SellingStatus"""
    ACTIVE = "Active"
    COMPLETED = "Completed"
    ENDED = "Ended"
    NOT_FOUND = "NotFound"
    UNKNOWN = "Unknown"


class TradingCall(str, Enum):
    ADD_FIXED_PRICE_ITEM = "AddFixedPriceItem"
    VERIFY_ADD_FIXED_PRICE_ITEM = "VerifyAddFixedPriceItem"
    REVISE_FIXED_PRICE_ITEM = "ReviseFixedPriceItem"
    RELIST_FIXED_PRICE_ITEM = "RelistFixedPriceItem"
    END_FIXED_PRICE_ITEM = "EndFixedPriceItem"
    GET_ITEM = "GetItem"
    GET_SELLER_LIST = "GetSellerList"
    GET_USER = "GetUser"
