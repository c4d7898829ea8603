from .trading import EbayTradingAPI
from .transformer import TradingItemTransformer, transform_item_to_ebay_format
from .envelope import build_xml_request, parse_response

__all__ = [
    "EbayTradingAPI",
    "TradingItemTransformer",
    "transform_item_to_ebay_format",
    "build_xml_request",
    "parse_response",
]
