# trading_bff/services/ebay/country.py
"""
Country normalisation to ISO 3166-1 alpha-2 codes.

Accepts English names, common local/alternate names, ISO-2 and ISO-3 codes,
all case-insensitively. Anything unrecognised is passed through uppercased so
eBay gets the final say on whether it is a valid code.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Country:
    name: str
    iso2: str
    iso3: str
    alternate_names: Tuple[str, ...] = ()


COUNTRIES: Tuple[Country, ...] = (
    # Europe
    Country("Germany", "DE", "DEU", ("Deutschland", "Federal Republic of Germany", "Allemagne")),
    Country("France", "FR", "FRA", ("Francia", "Frankreich", "French Republic")),
    Country("United Kingdom", "GB", "GBR", (
        "UK", "Britain", "Great Britain", "England",
        "United Kingdom of Great Britain and Northern Ireland",
    )),
    Country("Italy", "IT", "ITA", ("Italia", "Italien", "Italian Republic")),
    Country("Spain", "ES", "ESP", ("España", "Spanien", "Kingdom of Spain", "Espagne")),
    Country("Netherlands", "NL", "NLD", ("Holland", "The Netherlands", "Nederland", "Niederlande")),
    Country("Belgium", "BE", "BEL", ("België", "Belgique", "Belgien", "Kingdom of Belgium")),
    Country("Austria", "AT", "AUT", ("Österreich", "Autriche", "Republic of Austria")),
    Country("Switzerland", "CH", "CHE", ("Schweiz", "Suisse", "Svizzera", "Swiss Confederation")),
    Country("Poland", "PL", "POL", ("Polska", "Polen", "Republic of Poland")),
    Country("Czech Republic", "CZ", "CZE", ("Czechia", "Tschechien", "République tchèque")),
    Country("Ireland", "IE", "IRL", ("Éire", "Republic of Ireland", "Irland")),
    Country("Portugal", "PT", "PRT", ("Portuguese Republic",)),
    Country("Sweden", "SE", "SWE", ("Sverige", "Schweden", "Kingdom of Sweden")),
    Country("Denmark", "DK", "DNK", ("Danmark", "Dänemark", "Kingdom of Denmark")),
    Country("Norway", "NO", "NOR", ("Norge", "Norwegen", "Kingdom of Norway")),
    Country("Finland", "FI", "FIN", ("Suomi", "Finnland", "Republic of Finland")),
    Country("Greece", "GR", "GRC", ("Hellas", "Griechenland", "Hellenic Republic")),
    Country("Hungary", "HU", "HUN", ("Magyarország", "Ungarn")),
    Country("Romania", "RO", "ROU", ("România", "Rumänien")),
    Country("Bulgaria", "BG", "BGR", ("България", "Bulgarien")),
    Country("Croatia", "HR", "HRV", ("Hrvatska", "Kroatien")),
    Country("Slovakia", "SK", "SVK", ("Slovensko", "Slowakei", "Slovak Republic")),
    Country("Slovenia", "SI", "SVN", ("Slovenija", "Slowenien")),
    Country("Luxembourg", "LU", "LUX", ("Luxemburg", "Grand Duchy of Luxembourg")),
    # North America
    Country("United States", "US", "USA", (
        "United States of America", "America", "U.S.", "U.S.A.",
    )),
    Country("Canada", "CA", "CAN", ("Kanada",)),
    Country("Mexico", "MX", "MEX", ("México", "Mexiko", "United Mexican States")),
    # Asia Pacific
    Country("Australia", "AU", "AUS", ("Commonwealth of Australia", "Australien")),
    Country("China", "CN", "CHN", ("中国", "People's Republic of China", "PRC")),
    Country("Japan", "JP", "JPN", ("日本", "Nippon", "Nihon")),
    Country("India", "IN", "IND", ("Bharat", "Republic of India", "Indien")),
    Country("Singapore", "SG", "SGP", ("Republic of Singapore", "Singapur")),
    Country("Hong Kong", "HK", "HKG", ("Hong Kong SAR", "Hong Kong Special Administrative Region")),
    Country("South Korea", "KR", "KOR", ("Korea", "Republic of Korea", "ROK", "Südkorea")),
    Country("New Zealand", "NZ", "NZL", ("Neuseeland",)),
    # Middle East
    Country("United Arab Emirates", "AE", "ARE", ("UAE", "Emirates", "Vereinigte Arabische Emirate")),
    Country("Saudi Arabia", "SA", "SAU", ("Kingdom of Saudi Arabia", "Saudi-Arabien")),
    Country("Israel", "IL", "ISR", ("State of Israel",)),
    # South America
    Country("Brazil", "BR", "BRA", ("Brasil", "Brasilien", "Federative Republic of Brazil")),
    Country("Argentina", "AR", "ARG", ("Argentine Republic", "Argentinien")),
    Country("Chile", "CL", "CHL", ("Republic of Chile",)),
    # Africa
    Country("South Africa", "ZA", "ZAF", ("Republic of South Africa", "RSA", "Südafrika")),
    Country("Egypt", "EG", "EGY", ("Ägypten", "Arab Republic of Egypt")),
)


def _build_lookup(countries: Iterable[Country]) -> Dict[str, Country]:
    lookup: Dict[str, Country] = {}
    for country in countries:
        for key in (country.name, country.iso2, country.iso3, *country.alternate_names):
            lookup[key.casefold()] = country
    return lookup


_LOOKUP = _build_lookup(COUNTRIES)


def _find(value: Optional[str]) -> Optional[Country]:
    if not value or not isinstance(value, str):
        return None
    return _LOOKUP.get(value.strip().casefold())


def normalize_country(value: Optional[str]) -> str:
    """
    Normalise a country name or code to its ISO-2 code.

    normalize_country("Germany")     -> "DE"
    normalize_country("deu")         -> "DE"
    normalize_country("Unknownland") -> "UNKNOWNLAND"
    normalize_country(None)          -> ""
    """
    if not value or not isinstance(value, str):
        return ""
    cleaned = value.strip()
    if not cleaned:
        return ""
    country = _find(cleaned)
    if country is None:
        logger.debug(f"Unrecognised country '{cleaned}', passing through uppercased")
        return cleaned.upper()
    return country.iso2


def is_valid_country(value: Optional[str]) -> bool:
    return _find(value) is not None


def get_country_name(value: Optional[str]) -> str:
    country = _find(value)
    return country.name if country else ""


def get_country_iso3(value: Optional[str]) -> str:
    country = _find(value)
    return country.iso3 if country else ""


def normalize_country_fields(data: Dict[str, Any], field_names: Iterable[str] = ("country",)) -> Dict[str, Any]:
    """Return a copy of data with the named string fields normalised"""
    normalized = dict(data)
    for field_name in field_names:
        if isinstance(normalized.get(field_name), str):
            normalized[field_name] = normalize_country(normalized[field_name])
    return normalized
