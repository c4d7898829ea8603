# trading_bff/services/ebay/conditions.py
"""
Condition name <-> eBay condition ID mapping.
"""
import logging
import re
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONDITION_ID = 1000

CONDITION_IDS: Mapping[str, int] = MappingProxyType({
    "New": 1000,
    "New other": 1500,
    "New with defects": 1750,
    "Manufacturer refurbished": 2000,
    "Seller refurbished": 2500,
    "Used": 3000,
    "Very Good": 4000,
    "Good": 5000,
    "Acceptable": 6000,
    "For parts or not working": 7000,
})

# Short forms seen in feeds, keyed in normalised form
_ALIASES = {
    "for parts": 7000,
}

_LOOKUP = {**{name.lower(): cid for name, cid in CONDITION_IDS.items()}, **_ALIASES}
_DISPLAY_NAMES = {cid: name for name, cid in CONDITION_IDS.items()}


def _normalise(name: str) -> str:
    # NEW_OTHER, new-other and "New  other" all become "new other"
    return re.sub(r"[\s_\-]+", " ", name.strip()).lower()


def resolve_condition_id(condition_id: Optional[int] = None, condition: Optional[str] = None) -> int:
    """
    Resolve the ConditionID to send.

    An explicit condition_id always wins. Otherwise the condition name is
    matched case-insensitively against CONDITION_IDS; unknown names and a
    missing condition both resolve to New (1000).
    """
    if condition_id:
        return int(condition_id)

    if not condition:
        return DEFAULT_CONDITION_ID

    key = _normalise(str(condition))
    if key in _LOOKUP:
        return _LOOKUP[key]
    if key.isdigit() and int(key) in _DISPLAY_NAMES:
        return int(key)

    logger.warning(f"Unknown condition '{condition}', defaulting to ConditionID {DEFAULT_CONDITION_ID}")
    return DEFAULT_CONDITION_ID


def get_condition_display_name(condition_id: Optional[int]) -> Optional[str]:
    """Canonical condition name for an ID, or None if the ID is not in the table"""
    if condition_id is None:
        return None
    try:
        return _DISPLAY_NAMES.get(int(condition_id))
    except (TypeError, ValueError):
        return None
