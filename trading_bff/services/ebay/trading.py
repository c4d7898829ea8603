# trading_bff/services/ebay/trading.py
import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError as PydanticValidationError

from trading_bff.core.config import Settings, get_settings
from trading_bff.core.enums import ListingStatus, ListingType, TradingCall
from trading_bff.core.exceptions import EbayAPIError, EbayServiceError, TradingAPIError, ValidationError
from trading_bff.schemas.trading import TradingListingItem, TradingListingUpdate
from trading_bff.services.ebay.envelope import (
    build_xml_request,
    extract_warnings,
    parse_fees,
    parse_response,
    read_money,
)
from trading_bff.services.ebay.marketplace import get_site_id, normalize_marketplace
from trading_bff.services.ebay.transformer import TradingItemTransformer, as_list

logger = logging.getLogger(__name__)

# Fields eBay refuses to change on a live listing; relist to change them
NON_UPDATABLE_FIELDS = frozenset({
    "primary_category", "secondary_category", "listing_type", "listing_duration",
    "product_listing_details", "condition_id", "condition", "country", "currency",
    "regulatory", "buy_it_now_price", "reserve_price", "marketplace", "verify_only",
    "condition_descriptors", "item_compatibility_list", "charity", "payment_methods",
    "pay_pal_email_address", "auto_pay",
})

# GetItem error codes for an unknown or deleted item
NOT_FOUND_ERROR_CODES = frozenset({"17", "361"})

SKU_LOOKUP_MAX_PAGES = 5
SKU_LOOKUP_PAGE_SIZE = 20
SKU_LOOKUP_DAYS = 90
EXACT_MATCH_MAX_PAGES = 10
PARTIAL_MATCH_MAX_PAGES = 50
SEARCH_PAGE_SIZE = 200
SEARCH_WINDOW_DAYS = 14
ACTIVE_LISTING_HORIZON_DAYS = 120

ListingPayload = Union[TradingListingUpdate, Dict[str, Any]]
NewListingPayload = Union[TradingListingItem, Dict[str, Any]]


def _iso(value: datetime) -> str:
    """eBay timestamp format; naive datetimes are taken as UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def _parse_datetime(value: Union[str, datetime]) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def _int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _is_true(value: Any) -> bool:
    return value is True or str(value).lower() == "true"


def _is_item_id(identifier: str) -> bool:
    return bool(re.fullmatch(r"\d+", identifier or ""))


class EbayTradingAPI:
    """
    Async client for the eBay Trading (XML) API.

    One instance talks to one site: the marketplace code picks the
    X-EBAY-API-SITEID header and the transformer's currency/shipping defaults.
    Every call is a single POST; nothing is retried.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        auth_manager: Any = None,
        marketplace: Optional[str] = None,
        sandbox: Optional[bool] = None,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        transformer: Optional[TradingItemTransformer] = None,
    ):
        self.settings = settings or get_settings()
        self.access_token = access_token
        self.auth_manager = auth_manager
        self.marketplace = normalize_marketplace(marketplace or self.settings.EBAY_DEFAULT_MARKETPLACE)
        self.site_id = get_site_id(self.marketplace)
        self.sandbox = self.settings.EBAY_SANDBOX_MODE if sandbox is None else sandbox
        self.compatibility_level = self.settings.EBAY_TRADING_COMPATIBILITY_LEVEL
        self.debug_logging = self.settings.EBAY_DEBUG_LOGGING
        self.client = client
        self.transformer = transformer or TradingItemTransformer()

        if self.sandbox:
            self.endpoint = self.settings.EBAY_TRADING_SANDBOX_API_URL
        else:
            self.endpoint = self.settings.EBAY_TRADING_API_URL

    async def _get_auth_token(self) -> str:
        """IAF token from the auth manager, else the static token"""
        if self.auth_manager is not None:
            return await self.auth_manager.get_access_token()
        token = self.access_token or self.settings.EBAY_ACCESS_TOKEN
        if not token:
            raise EbayAPIError("No eBay access token configured")
        return token

    async def build_headers(self, call_name: str) -> Dict[str, str]:
        token = await self._get_auth_token()
        return {
            "X-EBAY-API-IAF-TOKEN": token,
            "X-EBAY-API-SITEID": str(self.site_id),
            "X-EBAY-API-COMPATIBILITY-LEVEL": self.compatibility_level,
            "X-EBAY-API-CALL-NAME": call_name,
            "Content-Type": "text/xml",
        }

    async def _post(self, headers: Dict[str, str], xml_request: str) -> httpx.Response:
        content = xml_request.encode("utf-8")
        if self.client is not None:
            return await self.client.post(self.endpoint, headers=headers, content=content)
        async with httpx.AsyncClient() as client:
            return await client.post(self.endpoint, headers=headers, content=content)

    async def call_api(self, call_name: str, body: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a Trading API call and return the parsed {call_name}Response body.

        Raises:
            EbayAPIError: network failure, or a non-2xx/unparseable response
            TradingAPIError: Ack is Failure or PartialFailure
        """
        headers = await self.build_headers(call_name)
        xml_request = build_xml_request(call_name, body)

        logger.info(f"Calling {call_name} on site {self.site_id} ({self.marketplace})")
        if self.debug_logging:
            logger.debug(f"{call_name} request: {xml_request[:1000]}")

        try:
            response = await self._post(headers, xml_request)
        except httpx.RequestError as e:
            logger.error(f"Network error in {call_name}: {str(e)}")
            raise EbayAPIError(f"Network error in {call_name}: {str(e)}") from e

        if self.debug_logging:
            logger.debug(f"{call_name} response ({response.status_code}): {response.text[:1000]}")

        if not 200 <= response.status_code < 300:
            try:
                return parse_response(response.text, call_name)
            except TradingAPIError:
                raise
            except EbayAPIError as e:
                logger.error(f"eBay API error in {call_name}: HTTP {response.status_code} {response.text[:500]}")
                raise EbayAPIError(
                    f"{call_name} failed with HTTP {response.status_code}: {response.text[:500]}",
                    status_code=response.status_code,
                ) from e

        return parse_response(response.text, call_name)

    # Listing helpers

    def _coerce_listing(self, payload: ListingPayload, schema=TradingListingUpdate) -> TradingListingUpdate:
        try:
            return schema.from_payload(payload)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid listing data: {e}") from e

    def _build_new_item(self, listing: TradingListingItem) -> Dict[str, Any]:
        item = self.transformer.transform(listing, self.marketplace)
        item.setdefault("ListingDuration", "GTC")
        item.setdefault("ListingType", ListingType.FIXED_PRICE_ITEM.value)
        item.setdefault("DispatchTimeMax", 3)

        logger.debug(
            f"Prepared item sku={item.get('SKU')} title={item.get('Title')!r} "
            f"price={item['StartPrice']} quantity={item.get('Quantity')}"
        )
        return item

    async def _resolve_identifier(self, identifier: str) -> Dict[str, str]:
        """ItemID for numeric identifiers, else look the SKU up and fall back to the SKU itself"""
        if _is_item_id(identifier):
            return {"ItemID": identifier}

        item_id = await self.get_item_id_by_sku(identifier)
        if item_id:
            logger.info(f"Using ItemID {item_id} found for SKU {identifier}")
            return {"ItemID": item_id}

        logger.warning(f"Could not find ItemID for SKU {identifier}, sending the SKU directly")
        return {"SKU": identifier}

    def _listing_result(self, response: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "success": True,
            "item_id": response.get("ItemID"),
            "sku": response.get("SKU"),
            "start_time": response.get("StartTime"),
            "end_time": response.get("EndTime"),
            "fees": parse_fees(response.get("Fees")),
            "warnings": extract_warnings(response),
        }

    # Listing calls

    async def add_fixed_price_item(self, item: NewListingPayload) -> Dict[str, Any]:
        """Create a fixed price listing"""
        listing = self._coerce_listing(item, TradingListingItem)
        body = {"Item": self._build_new_item(listing)}

        response = await self.call_api(TradingCall.ADD_FIXED_PRICE_ITEM.value, body)
        result = self._listing_result(response)
        result["category_id"] = response.get("CategoryID")
        result["category2_id"] = response.get("Category2ID")

        logger.info(f"Created eBay listing {result['item_id']} for SKU {listing.sku}")
        return result

    async def verify_add_fixed_price_item(self, item: NewListingPayload) -> Dict[str, Any]:
        """Validate a listing and estimate fees without creating it"""
        listing = self._coerce_listing(item, TradingListingItem)
        body = {"Item": self._build_new_item(listing)}

        response = await self.call_api(TradingCall.VERIFY_ADD_FIXED_PRICE_ITEM.value, body)
        return {
            "success": True,
            "sku": response.get("SKU"),
            "fees": parse_fees(response.get("Fees")),
            "category_id": response.get("CategoryID"),
            "warnings": extract_warnings(response),
        }

    async def submit_listing(self, item: NewListingPayload) -> Dict[str, Any]:
        """Verify when the listing asks for verify_only, otherwise create it"""
        listing = self._coerce_listing(item, TradingListingItem)
        if listing.verify_only:
            return await self.verify_add_fixed_price_item(listing)
        return await self.add_fixed_price_item(listing)

    async def revise_fixed_price_item(self, identifier: str, updates: ListingPayload) -> Dict[str, Any]:
        """
        Update a live listing.

        Fields eBay does not allow on a revise are dropped (and reported under
        ignored_fields). The identifier may be an ItemID or a SKU.
        """
        listing = self._coerce_listing(updates)
        ignored = sorted(name for name in NON_UPDATABLE_FIELDS if getattr(listing, name, None) is not None)
        if ignored:
            logger.warning(f"Ignoring non-updatable fields for {identifier}: {ignored}")

        allowed = TradingListingUpdate.model_validate(
            listing.model_dump(exclude=set(NON_UPDATABLE_FIELDS), exclude_none=True)
        )
        item = self.transformer.transform(allowed, self.marketplace, partial=True)
        item.update(await self._resolve_identifier(identifier))

        logger.info(f"Revising {item.get('ItemID') or item.get('SKU')}: {sorted(k for k in item if k not in ('ItemID', 'SKU'))}")
        response = await self.call_api(TradingCall.REVISE_FIXED_PRICE_ITEM.value, {"Item": item})

        result = self._listing_result(response)
        result["ignored_fields"] = ignored
        return result

    async def relist_fixed_price_item(self, item_id: str, updates: Optional[ListingPayload] = None) -> Dict[str, Any]:
        """Relist an ended listing; eBay assigns a new ItemID"""
        item: Dict[str, Any] = {"ItemID": item_id}
        if updates is not None:
            listing = self._coerce_listing(updates)
            changes = self.transformer.transform(listing, self.marketplace, partial=True)
            changes.pop("ItemID", None)
            item.update(changes)

        logger.info(f"Relisting {item_id} with {len(item) - 1} changed fields")
        response = await self.call_api(TradingCall.RELIST_FIXED_PRICE_ITEM.value, {"Item": item})

        result = self._listing_result(response)
        result["original_item_id"] = item_id
        logger.info(f"Relisted {item_id} as {result['item_id']}")
        return result

    async def end_fixed_price_item(self, identifier: str, reason: str = "OtherListingError") -> Dict[str, Any]:
        body: Dict[str, Any] = {"EndingReason": reason}
        body.update(await self._resolve_identifier(identifier))

        response = await self.call_api(TradingCall.END_FIXED_PRICE_ITEM.value, body)
        logger.info(f"Ended listing {body.get('ItemID') or body.get('SKU')} ({reason})")
        return {
            "success": True,
            "end_time": response.get("EndTime"),
            "item_id": response.get("ItemID") or body.get("ItemID"),
            "sku": response.get("SKU") or body.get("SKU"),
        }

    # Read calls

    async def get_item(self, identifier: str, use_sku: bool = False) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "IncludeWatchCount": True,
            "IncludeItemSpecifics": True,
            "DetailLevel": "ReturnAll",
        }
        if use_sku:
            body["SKU"] = identifier
        else:
            body["ItemID"] = identifier

        response = await self.call_api(TradingCall.GET_ITEM.value, body)
        return {"success": True, "item": response.get("Item")}

    async def get_seller_list(
        self,
        start_time_from: datetime,
        start_time_to: datetime,
        pagination: Optional[Dict[str, int]] = None,
        sku: Optional[str] = None,
        include_variations: bool = False,
    ) -> Dict[str, Any]:
        """
        Listings started in a time window.

        GetSellerList cannot filter by SKU, so sku filters the returned page.

        Args:
            pagination: {"entries_per_page": int, "page_number": int}
        """
        body: Dict[str, Any] = {
            "DetailLevel": "ReturnAll",
            "StartTimeFrom": _iso(start_time_from),
            "StartTimeTo": _iso(start_time_to),
            "IncludeVariations": include_variations,
        }
        if pagination:
            body["Pagination"] = {
                "EntriesPerPage": pagination.get("entries_per_page", 20),
                "PageNumber": pagination.get("page_number", 1),
            }

        response = await self.call_api(TradingCall.GET_SELLER_LIST.value, body)

        items = as_list((response.get("ItemArray") or {}).get("Item"))
        if sku:
            items = [item for item in items if item.get("SKU") == sku]

        page_info = response.get("PaginationResult") or {}
        return {
            "items": items,
            "pagination": {
                "total_number_of_entries": _int(page_info.get("TotalNumberOfEntries")),
                "total_number_of_pages": _int(page_info.get("TotalNumberOfPages")),
                "page_number": _int(response.get("PageNumber"), 1),
                "entries_per_page": _int(response.get("ItemsPerPage") or response.get("EntriesPerPage"), 20),
                "has_more_items": _is_true(response.get("HasMoreItems")),
            },
        }

    async def get_item_id_by_sku(self, sku: str) -> Optional[str]:
        """
        ItemID of the active listing with this SKU, or None.

        Scans up to SKU_LOOKUP_MAX_PAGES pages of listings started in the last
        SKU_LOOKUP_DAYS days. API errors are logged and reported as not found.
        """
        now = datetime.now(timezone.utc)
        pages_scanned = 0
        try:
            for page_number in range(1, SKU_LOOKUP_MAX_PAGES + 1):
                body = {
                    "DetailLevel": "ReturnAll",
                    "StartTimeFrom": _iso(now - timedelta(days=SKU_LOOKUP_DAYS)),
                    "StartTimeTo": _iso(now),
                    "IncludeVariations": False,
                    "Pagination": {"EntriesPerPage": SKU_LOOKUP_PAGE_SIZE, "PageNumber": page_number},
                }
                response = await self.call_api(TradingCall.GET_SELLER_LIST.value, body)
                pages_scanned = page_number

                for item in as_list((response.get("ItemArray") or {}).get("Item")):
                    status = (item.get("SellingStatus") or {}).get("ListingStatus")
                    if item.get("SKU") == sku and status == ListingStatus.ACTIVE.value:
                        logger.info(f"Found ItemID {item.get('ItemID')} for SKU {sku}")
                        return item.get("ItemID")

                if not _is_true(response.get("HasMoreItems")):
                    break
        except EbayServiceError as e:
            logger.error(f"Error looking up SKU {sku}: {str(e)}")
            return None

        logger.warning(f"No active item found with SKU {sku} after {pages_scanned} page(s)")
        return None

    async def get_user(self) -> Dict[str, Any]:
        """Authenticated seller's account; doubles as a token check"""
        response = await self.call_api(TradingCall.GET_USER.value, {"DetailLevel": "ReturnAll"})
        user = response.get("User") or {}
        return {
            "success": True,
            "user_id": user.get("UserID"),
            "email": user.get("Email"),
            "feedback_score": user.get("FeedbackScore"),
            "registration_date": user.get("RegistrationDate"),
            "site": user.get("Site"),
            "status": user.get("Status"),
        }

    async def get_item_status(self, item_id: str) -> Dict[str, Any]:
        """
        Status, quantity, price and timing summary of a listing.

        Unknown or deleted items come back with listing_status NotFound
        instead of raising.
        """
        body = {
            "ItemID": item_id,
            "IncludeWatchCount": False,
            "IncludeItemSpecifics": False,
            "DetailLevel": "ReturnAll",
        }
        try:
            response = await self.call_api(TradingCall.GET_ITEM.value, body)
        except TradingAPIError as e:
            if NOT_FOUND_ERROR_CODES.intersection(e.error_codes):
                logger.warning(f"Item not found or deleted: {item_id}")
                return {
                    "success": True,
                    "item_id": item_id,
                    "status": {
                        "listing_status": ListingStatus.NOT_FOUND.value,
                        "is_active": False,
                        "is_ended": True,
                        "is_deleted": True,
                    },
                    "message": "Item not found or has been deleted",
                }
            raise

        item = response.get("Item") or {}
        selling_status = item.get("SellingStatus") or {}
        listing_status = selling_status.get("ListingStatus") or ListingStatus.UNKNOWN.value
        listing_details = item.get("ListingDetails") or {}
        total = _int(item.get("Quantity"))
        sold = _int(selling_status.get("QuantitySold"))
        price, currency = read_money(selling_status.get("CurrentPrice"), item.get("Currency") or "USD")

        return {
            "success": True,
            "item_id": item.get("ItemID"),
            "sku": item.get("SKU"),
            "title": item.get("Title"),
            "status": {
                "listing_status": listing_status,
                "is_active": listing_status == ListingStatus.ACTIVE.value,
                "is_ended": listing_status in (ListingStatus.COMPLETED.value, ListingStatus.ENDED.value),
            },
            "quantity": {"total": total, "sold": sold, "available": total - sold},
            "pricing": {"current_price": price, "currency": currency},
            "timing": {
                "start_time": item.get("StartTime") or listing_details.get("StartTime"),
                "end_time": item.get("EndTime") or listing_details.get("EndTime"),
                "listing_duration": item.get("ListingDuration"),
            },
            "listing_type": item.get("ListingType"),
            "view_count": _int(item.get("HitCount")),
            "watch_count": _int(item.get("WatchCount")),
        }

    # Search

    async def search_item_by_sku_and_title(
        self,
        sku: str,
        title: str,
        category_id: Optional[str] = None,
        created_at: Optional[Union[str, datetime]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find a listing by SKU and title, returning at most one match.

        Phase 1 asks eBay for an exact SKU (SKUArray) and checks the title.
        Phase 2 pages through listings matching a partial SKU and the title.
        With created_at the search covers listings started within
        SEARCH_WINDOW_DAYS of it; without, active listings ending in the next
        ACTIVE_LISTING_HORIZON_DAYS days.
        """
        if created_at:
            created = _parse_datetime(created_at)
            window = {
                "StartTimeFrom": _iso(created - timedelta(days=SEARCH_WINDOW_DAYS)),
                "StartTimeTo": _iso(created + timedelta(days=SEARCH_WINDOW_DAYS)),
            }
        else:
            now = datetime.now(timezone.utc)
            window = {
                "EndTimeFrom": _iso(now),
                "EndTimeTo": _iso(now + timedelta(days=ACTIVE_LISTING_HORIZON_DAYS)),
            }

        match = await self._scan_seller_list(
            window, category_id, EXACT_MATCH_MAX_PAGES,
            lambda item: title.lower() in (item.get("Title") or "").lower(),
            sku_filter=sku,
        )
        if match:
            logger.info(f"Exact SKU match for {sku}: {match['item_id']}")
            return [match]

        logger.info(f"No exact SKU match for {sku}, trying partial match")
        match = await self._scan_seller_list(
            window, category_id, PARTIAL_MATCH_MAX_PAGES,
            lambda item: sku in (item.get("SKU") or "") and title.lower() in (item.get("Title") or "").lower(),
        )
        if match:
            logger.info(f"Partial SKU match for {sku}: {match['item_id']}")
            return [match]

        logger.warning(f"No listing found for SKU {sku} and title {title!r}")
        return []

    async def _scan_seller_list(
        self,
        window: Dict[str, str],
        category_id: Optional[str],
        max_pages: int,
        matches,
        sku_filter: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        for page_number in range(1, max_pages + 1):
            body: Dict[str, Any] = {
                **window,
                "DetailLevel": "ReturnAll",
                "Pagination": {"EntriesPerPage": SEARCH_PAGE_SIZE, "PageNumber": page_number},
                "GranularityLevel": "Fine",
            }
            if sku_filter:
                body["SKUArray"] = {"SKU": sku_filter}
            if category_id:
                body["CategoryID"] = category_id

            response = await self.call_api(TradingCall.GET_SELLER_LIST.value, body)
            for item in as_list((response.get("ItemArray") or {}).get("Item")):
                if matches(item):
                    return self._search_hit(item)

            if not _is_true(response.get("HasMoreItems")):
                break
        return None

    def _search_hit(self, item: Dict[str, Any]) -> Dict[str, Any]:
        selling_status = item.get("SellingStatus") or {}
        total = _int(item.get("Quantity"))
        sold = _int(selling_status.get("QuantitySold"))
        price, currency = read_money(selling_status.get("CurrentPrice"), item.get("Currency") or "USD")
        category = item.get("PrimaryCategory") or {}
        return {
            "item_id": item.get("ItemID"),
            "sku": item.get("SKU"),
            "title": item.get("Title"),
            "current_price": price,
            "currency": currency,
            "quantity": {"total": total, "sold": sold, "available": total - sold},
            "listing_status": selling_status.get("ListingStatus") or ListingStatus.UNKNOWN.value,
            "listing_type": item.get("ListingType"),
            "start_time": item.get("StartTime"),
            "end_time": item.get("EndTime"),
            "picture_urls": as_list((item.get("PictureDetails") or {}).get("PictureURL")),
            "category_id": category.get("CategoryID"),
            "category_name": category.get("CategoryName"),
            "listing_url": (item.get("ListingDetails") or {}).get("ViewItemURL"),
        }
