# trading_bff/services/ebay/envelope.py
"""
Trading API request envelopes and response parsing.

Requests and responses go through xmltodict: attributes are "@"-prefixed keys
and element text sits under "#text", so money reads and writes as
{"@currencyID": "USD", "#text": "9.99"}.
"""
import logging
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Tuple
from xml.parsers.expat import ExpatError

import xmltodict

from trading_bff.core.enums import Ack
from trading_bff.core.exceptions import EbayAPIError, TradingAPIError
from trading_bff.schemas.trading import Fee, TradingErrorDetail

logger = logging.getLogger(__name__)

EBAY_NAMESPACE = "urn:ebay:apis:eBLBaseComponents"
CDATA_ELEMENTS = frozenset({"Description"})


def _listify(value: Any) -> List[Any]:
    # xmltodict returns a dict for one child and a list for several
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _to_text(value: Any) -> Any:
    """Stringify leaves the way eBay expects them"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, dict):
        return {key: _to_text(child) for key, child in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_text(child) for child in value]
    return value


def _cdata(text: str) -> str:
    # "]]>" cannot appear inside a CDATA section, so split it across two
    return "<![CDATA[" + text.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def _swap_cdata(value: Any, placeholders: Dict[str, str]) -> Any:
    """Replace CDATA element text with unique placeholders, collecting originals"""
    if isinstance(value, dict):
        swapped = {}
        for key, child in value.items():
            if key in CDATA_ELEMENTS and isinstance(child, str):
                token = f"cdata-{uuid.uuid4().hex}"
                placeholders[token] = child
                swapped[key] = token
            else:
                swapped[key] = _swap_cdata(child, placeholders)
        return swapped
    if isinstance(value, list):
        return [_swap_cdata(child, placeholders) for child in value]
    return value


def build_xml_request(call_name: str, body: Optional[Dict[str, Any]] = None) -> str:
    """
    Wrap a call body in the <{call_name}Request> envelope and serialise it.

    Description elements are written as CDATA so HTML descriptions go through
    unescaped.
    """
    placeholders: Dict[str, str] = {}
    payload = _swap_cdata(_to_text(body or {}), placeholders)

    document = {
        f"{call_name}Request": {
            "@xmlns": EBAY_NAMESPACE,
            "ErrorLanguage": "en_US",
            "WarningLevel": "High",
            **payload,
        }
    }
    xml = xmltodict.unparse(document, pretty=True, indent="  ")

    for token, text in placeholders.items():
        xml = xml.replace(token, _cdata(text), 1)
    return xml


def extract_errors(response: Dict[str, Any]) -> List[TradingErrorDetail]:
    """All <Errors> entries of a response body as TradingErrorDetail values"""
    errors = []
    for entry in _listify(response.get("Errors")):
        if not isinstance(entry, dict):
            continue
        errors.append(TradingErrorDetail(
            code=str(entry.get("ErrorCode") or "UNKNOWN"),
            short_message=entry.get("ShortMessage") or "Unknown error",
            long_message=entry.get("LongMessage"),
            severity=entry.get("SeverityCode"),
        ))
    return errors


def extract_warnings(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Errors entries of a successful response, dumped for the caller"""
    return [error.model_dump() for error in extract_errors(response)]


def parse_response(xml: str, call_name: str) -> Dict[str, Any]:
    """
    Parse a Trading API response and return its {call_name}Response body.

    Raises:
        EbayAPIError: body is not XML or lacks the expected root element
        TradingAPIError: Ack is Failure or PartialFailure
    """
    if not xml or not xml.strip():
        raise EbayAPIError(f"Empty response for {call_name}")

    try:
        parsed = xmltodict.parse(xml)
    except ExpatError as e:
        logger.error(f"Unparseable XML response for {call_name}: {xml[:500]}")
        raise EbayAPIError(f"Invalid XML response for {call_name}: {e}") from e

    response_key = f"{call_name}Response"
    response = parsed.get(response_key) if isinstance(parsed, dict) else None
    if not isinstance(response, dict):
        logger.error(f"Invalid response format for {call_name}: {xml[:500]}")
        raise EbayAPIError(f"Invalid XML response format: missing {response_key}")

    ack = response.get("Ack")
    if ack in (Ack.FAILURE.value, Ack.PARTIAL_FAILURE.value):
        errors = extract_errors(response)
        logger.error(f"{call_name} returned {ack}: {[e.model_dump() for e in errors]}")
        raise TradingAPIError(errors, ack=ack, call_name=call_name)

    if ack == Ack.WARNING.value:
        logger.warning(f"{call_name} succeeded with warnings: {extract_warnings(response)}")

    return response


def read_money(node: Any, default_currency: str = "USD") -> Tuple[Decimal, str]:
    """(amount, currency) from a money element, which may also be bare text"""
    if isinstance(node, dict):
        text = node.get("#text")
        currency = node.get("@currencyID") or default_currency
    else:
        text = node
        currency = default_currency
    try:
        amount = Decimal(str(text)) if text not in (None, "") else Decimal("0")
    except InvalidOperation:
        amount = Decimal("0")
    return amount, currency


def parse_fees(fees: Any) -> List[Dict[str, Any]]:
    """Flatten a <Fees> element into {name, amount, currency, promotional} dicts"""
    if not isinstance(fees, dict):
        return []

    parsed = []
    for entry in _listify(fees.get("Fee")):
        if not isinstance(entry, dict):
            continue
        amount, currency = read_money(entry.get("Fee"))
        promotional, _ = read_money(entry.get("PromotionalDiscount"), currency)
        parsed.append(Fee(
            name=entry.get("Name"),
            amount=amount,
            currency=currency,
            promotional=promotional,
        ).model_dump())
    return parsed
