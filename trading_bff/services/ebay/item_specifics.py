# trading_bff/services/ebay/item_specifics.py
"""
Localised item-specific names.

Some sites only accept the local name of a specific (EBAY_DE wants "Marke",
not "Brand"). Only the name is translated, never the value.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from trading_bff.services.ebay.marketplace import normalize_marketplace

GERMAN_SPECIFIC_NAMES: Mapping[str, str] = MappingProxyType({
    "Brand": "Marke",
    "Model": "Modell",
    "Storage Capacity": "Speicherkapazität",
    "Color": "Farbe",
    "Colour": "Farbe",
    "Compatible Brand": "Kompatible Marke",
    "Compatible Model": "Kompatibles Modell",
    "Type": "Produktart",
    "Material": "Material",
    "Size": "Größe",
    "Manufacturer": "Hersteller",
    "MPN": "Herstellernummer",
    "Condition": "Zustand",
    "Style": "Stil",
    "Theme": "Thema",
    "Features": "Besonderheiten",
    "Country/Region of Manufacture": "Herstellungsland und -region",
})

SPECIFIC_TRANSLATIONS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "EBAY_DE": GERMAN_SPECIFIC_NAMES,
})


def translate_specific_name(
    name: str,
    marketplace: Optional[str],
    translations: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> str:
    """Localised specific name for the marketplace, or the name unchanged"""
    tables = SPECIFIC_TRANSLATIONS if translations is None else translations
    table = tables.get(normalize_marketplace(marketplace))
    if not table:
        return name
    return table.get(name, name)
