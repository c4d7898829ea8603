# trading_bff/services/ebay/marketplace.py
"""
Marketplace defaults for the Trading API.

Each marketplace code maps to the currency, item country and shipping service
used when a listing does not say otherwise. The table is read-only; callers
wanting different defaults build their own mapping of MarketplaceProfile
values and hand it to the transformer.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_MARKETPLACE = "EBAY_US"


@dataclass(frozen=True)
class MarketplaceProfile:
    currency: str
    country: str
    shipping_service: str


FALLBACK_PROFILE = MarketplaceProfile(currency="USD", country="US", shipping_service="Other")

MARKETPLACES: Mapping[str, MarketplaceProfile] = MappingProxyType({
    "EBAY_US": MarketplaceProfile("USD", "US", "USPSPriority"),
    "EBAY_UK": MarketplaceProfile("GBP", "GB", "UK_RoyalMailFirstClassStandard"),
    "EBAY_DE": MarketplaceProfile("EUR", "DE", "DE_DHLPaket"),
    "EBAY_AU": MarketplaceProfile("AUD", "AU", "AU_Regular"),
    "EBAY_CA": MarketplaceProfile("CAD", "CA", "CA_RegularParcel"),
    "EBAY_FR": MarketplaceProfile("EUR", "FR", "FR_ColiPoste"),
    "EBAY_IT": MarketplaceProfile("EUR", "IT", "IT_RegularMail"),
    "EBAY_ES": MarketplaceProfile("EUR", "ES", "ES_StandardInternational"),
    "EBAY_CH": MarketplaceProfile("CHF", "CH", "CH_SwissPostPriority"),
    "EBAY_AT": MarketplaceProfile("EUR", "AT", "AT_StandardDispatch"),
    "EBAY_BE": MarketplaceProfile("EUR", "BE", "BE_StandardDelivery"),
    "EBAY_NL": MarketplaceProfile("EUR", "NL", "NL_StandardDelivery"),
})

# Trading API X-EBAY-API-SITEID values
SITE_IDS: Mapping[str, int] = MappingProxyType({
    "EBAY_US": 0,
    "EBAY_CA": 2,
    "EBAY_GB": 3,
    "EBAY_UK": 3,
    "EBAY_AU": 15,
    "EBAY_AT": 16,
    "EBAY_BE_FR": 23,
    "EBAY_BE": 23,
    "EBAY_FR": 71,
    "EBAY_DE": 77,
    "EBAY_IT": 101,
    "EBAY_BE_NL": 123,
    "EBAY_NL": 146,
    "EBAY_ES": 186,
    "EBAY_CH": 193,
    "EBAY_HK": 201,
    "EBAY_IN": 203,
    "EBAY_IE": 205,
    "EBAY_MY": 207,
    "EBAY_PH": 211,
    "EBAY_PL": 212,
    "EBAY_SG": 216,
})


# eBay's own marketplace IDs for sites the defaults table keys differently
MARKETPLACE_ALIASES: Mapping[str, str] = MappingProxyType({
    "EBAY_GB": "EBAY_UK",
})


def normalize_marketplace(marketplace: Optional[str]) -> str:
    """Marketplace code in the table's form: stripped and uppercased, "" when unset"""
    return (marketplace or "").strip().upper()


def get_marketplace_profile(
    marketplace: Optional[str],
    marketplaces: Optional[Mapping[str, MarketplaceProfile]] = None,
) -> MarketplaceProfile:
    table = MARKETPLACES if marketplaces is None else marketplaces
    code = normalize_marketplace(marketplace)
    if code not in table:
        code = MARKETPLACE_ALIASES.get(code, code)
    return table.get(code, FALLBACK_PROFILE)


def get_currency_for_marketplace(marketplace: Optional[str]) -> str:
    return get_marketplace_profile(marketplace).currency


def get_country_for_marketplace(marketplace: Optional[str]) -> str:
    return get_marketplace_profile(marketplace).country


def get_default_shipping_service(marketplace: Optional[str]) -> str:
    return get_marketplace_profile(marketplace).shipping_service


def get_site_id(marketplace: Optional[str]) -> int:
    """Trading API site ID for a marketplace code; unknown codes map to the US site (0)"""
    return SITE_IDS.get(normalize_marketplace(marketplace), 0)
