# tests/unit/services/ebay/test_lookups.py
import logging

import pytest

from trading_bff.services.ebay.conditions import (
    CONDITION_IDS,
    get_condition_display_name,
    resolve_condition_id,
)
from trading_bff.services.ebay.item_specifics import GERMAN_SPECIFIC_NAMES, translate_specific_name
from trading_bff.services.ebay.marketplace import (
    MARKETPLACES,
    get_country_for_marketplace,
    get_currency_for_marketplace,
    get_default_shipping_service,
    get_marketplace_profile,
    get_site_id,
    normalize_marketplace,
)

"""
1. Condition Mapping Tests
"""

def test_condition_table_is_fixed():
    assert dict(CONDITION_IDS) == {
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
    }


def test_resolve_condition_precedence():
    assert resolve_condition_id() == 1000
    assert resolve_condition_id(condition_id=2500, condition="New") == 2500
    assert resolve_condition_id(condition="very good") == 4000


@pytest.mark.parametrize("name,expected", [
    ("NEW_OTHER", 1500),
    ("new-with-defects", 1750),
    ("FOR_PARTS_OR_NOT_WORKING", 7000),
    ("for parts", 7000),
    ("3000", 3000),
])
def test_resolve_condition_accepts_enum_style_names(name, expected):
    assert resolve_condition_id(condition=name) == expected


def test_unknown_condition_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="trading_bff.services.ebay.conditions"):
        assert resolve_condition_id(condition="pristine") == 1000

    assert "pristine" in caplog.text


def test_condition_display_name():
    assert get_condition_display_name(3000) == "Used"
    assert get_condition_display_name("7000") == "For parts or not working"
    assert get_condition_display_name(1234) is None
    assert get_condition_display_name(None) is None


"""
2. Item Specifics Translation Tests
"""

@pytest.mark.parametrize("name,expected", [
    ("Brand", "Marke"),
    ("Colour", "Farbe"),
    ("Color", "Farbe"),
    ("Country/Region of Manufacture", "Herstellungsland und -region"),
    ("Body Type", "Body Type"),
])
def test_translate_for_germany(name, expected):
    assert translate_specific_name(name, "EBAY_DE") == expected


def test_no_translation_elsewhere():
    for name in GERMAN_SPECIFIC_NAMES:
        assert translate_specific_name(name, "EBAY_US") == name
    assert translate_specific_name("Brand", None) == "Brand"


def test_translation_accepts_lower_case_codes():
    assert translate_specific_name("Brand", "ebay_de") == "Marke"
    assert translate_specific_name("Brand", " EBAY_DE ") == "Marke"


def test_custom_translation_tables():
    tables = {"EBAY_IT": {"Brand": "Marca"}}
    assert translate_specific_name("Brand", "EBAY_IT", tables) == "Marca"
    assert translate_specific_name("Brand", "EBAY_DE", tables) == "Brand"


"""
3. Marketplace Table Tests
"""

@pytest.mark.parametrize("marketplace,currency,country,service", [
    ("EBAY_US", "USD", "US", "USPSPriority"),
    ("EBAY_UK", "GBP", "GB", "UK_RoyalMailFirstClassStandard"),
    ("EBAY_DE", "EUR", "DE", "DE_DHLPaket"),
    ("EBAY_AU", "AUD", "AU", "AU_Regular"),
    ("EBAY_CA", "CAD", "CA", "CA_RegularParcel"),
    ("EBAY_FR", "EUR", "FR", "FR_ColiPoste"),
    ("EBAY_IT", "EUR", "IT", "IT_RegularMail"),
    ("EBAY_ES", "EUR", "ES", "ES_StandardInternational"),
    ("EBAY_CH", "CHF", "CH", "CH_SwissPostPriority"),
    ("EBAY_AT", "EUR", "AT", "AT_StandardDispatch"),
    ("EBAY_BE", "EUR", "BE", "BE_StandardDelivery"),
    ("EBAY_NL", "EUR", "NL", "NL_StandardDelivery"),
    ("EBAY_MARS", "USD", "US", "Other"),
    (None, "USD", "US", "Other"),
])
def test_marketplace_defaults(marketplace, currency, country, service):
    assert get_currency_for_marketplace(marketplace) == currency
    assert get_country_for_marketplace(marketplace) == country
    assert get_default_shipping_service(marketplace) == service


def test_marketplace_table_is_read_only():
    with pytest.raises(TypeError):
        MARKETPLACES["EBAY_PL"] = MARKETPLACES["EBAY_DE"]


def test_gb_alias_uses_uk_profile():
    assert get_marketplace_profile("EBAY_GB") == MARKETPLACES["EBAY_UK"]


@pytest.mark.parametrize("code", ["ebay_de", "Ebay_De", " EBAY_DE "])
def test_lower_case_codes_resolve_consistently(code):
    assert normalize_marketplace(code) == "EBAY_DE"
    assert get_marketplace_profile(code) == MARKETPLACES["EBAY_DE"]
    assert get_site_id(code) == 77


def test_normalize_marketplace_unset():
    assert normalize_marketplace(None) == ""
    assert get_marketplace_profile("ebay_gb") == MARKETPLACES["EBAY_UK"]


@pytest.mark.parametrize("marketplace,site_id", [
    ("EBAY_US", 0),
    ("EBAY_GB", 3),
    ("EBAY_UK", 3),
    ("EBAY_DE", 77),
    ("EBAY_FR", 71),
    ("ebay_it", 101),
    ("EBAY_BE", 23),
    ("EBAY_SG", 216),
    ("EBAY_NOWHERE", 0),
    (None, 0),
])
def test_site_ids(marketplace, site_id):
    assert get_site_id(marketplace) == site_id
