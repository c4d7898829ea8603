from typing import Any, Dict, List, Optional


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class PlatformServiceError(BaseServiceError):
    """Base exception for platform service errors."""
    pass

class EbayServiceError(PlatformServiceError):
    """Base exception for eBay-specific errors."""
    pass

class EbayAPIError(EbayServiceError):
    """Raised when eBay API calls fail at the transport or protocol level."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

class TradingAPIError(EbayAPIError):
    """
    Raised when a Trading API response carries a Failure or PartialFailure ack.

    Keeps eBay's own error entries so callers can report codes and messages
    unchanged.
    """

    success = False

    def __init__(self, errors: List[Any], ack: str, call_name: Optional[str] = None):
        self.errors = list(errors)
        self.ack = ack
        self.call_name = call_name
        summary = "; ".join(
            f"[{getattr(e, 'code', '?')}] {getattr(e, 'short_message', e)}" for e in self.errors
        ) or "no error details returned"
        prefix = f"Trading API call {call_name}" if call_name else "Trading API call"
        super().__init__(f"{prefix} returned {ack}: {summary}")

    @property
    def error_codes(self) -> List[str]:
        return [str(getattr(e, "code", "")) for e in self.errors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "errors": [e.model_dump() if hasattr(e, "model_dump") else e for e in self.errors],
            "ack": self.ack,
        }

class ValidationError(BaseServiceError):
    """Raised when data validation fails."""
    pass
