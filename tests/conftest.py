# tests/conftest.py
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from trading_bff.core.config import Settings
from trading_bff.schemas.trading import TradingListingItem


@pytest.fixture
def settings():
    """Provide test settings"""
    return Settings(
        EBAY_SANDBOX_MODE=True,
        EBAY_ACCESS_TOKEN="test-token",
        EBAY_DEFAULT_MARKETPLACE="EBAY_US",
        EBAY_DEBUG_LOGGING=False,
    )


@pytest.fixture
def sample_listing_data():
    """Provide a minimal JSON-shaped listing, camelCase like API callers send it"""
    return {
        "sku": "TG-123",
        "title": "Test Guitar",
        "description": "<p>A test guitar</p>",
        "primaryCategory": {"categoryId": "33034"},
        "startPrice": 999.99,
        "quantity": 1,
    }


@pytest.fixture
def sample_listing(sample_listing_data):
    return TradingListingItem.model_validate(sample_listing_data)


@pytest.fixture
def full_listing_data():
    """Listing touching most field groups"""
    return {
        "sku": "FULL-1",
        "title": "Fender Stratocaster",
        "description": "Great guitar",
        "primaryCategory": {"categoryId": "33034"},
        "secondaryCategory": {"categoryId": "181220"},
        "startPrice": Decimal("1299.00"),
        "buyItNowPrice": Decimal("1499.00"),
        "quantity": 2,
        "country": "Germany",
        "location": "Berlin",
        "postalCode": "10115",
        "listingDuration": "GTC",
        "conditionId": 3000,
        "conditionDescription": "Light wear",
        "pictureDetails": {
            "galleryType": "Gallery",
            "pictureURL": ["https://example.com/1.jpg", "https://example.com/2.jpg"],
        },
        "itemSpecifics": [
            {"name": "Brand", "value": "Fender"},
            {"name": "Model", "value": ["Stratocaster"]},
        ],
        "productListingDetails": {
            "ean": "0885978123456",
            "brandMPN": {"brand": "Fender", "mpn": "0113010700"},
            "includeStockPhotoURL": False,
        },
        "shippingPackageDetails": {"weightMajor": 4, "measurementUnit": "Metric"},
        "bestOfferDetails": {"bestOfferEnabled": True},
        "listingDetails": {"minimumBestOfferPrice": 1100},
        "vatDetails": {"vatPercent": 19, "businessSeller": True},
        "extendedProducerResponsibility": {"ecoParticipationFee": Decimal("0.50")},
        "regulatory": {
            "manufacturer": {"companyName": "Fender GmbH", "country": "Deutschland", "cityName": "Düsseldorf"},
            "responsiblePersons": [{"companyName": "EU Rep", "country": "france", "types": ["EUResponsiblePerson"]}],
            "hazmat": {"signalWord": "Warning", "pictograms": ["SGH01"], "statements": ["H200"]},
            "documents": [{"documentId": "DOC-1"}],
        },
        "customPolicies": {
            "regionalTakeBackPolicies": [{"country": "Germany", "policyId": [11]}],
        },
        "charity": {"charityId": "1234", "donationPercent": 10},
        "eBayPlus": True,
    }


@pytest.fixture
def mock_response():
    """Factory for httpx-like responses"""
    def _make(text, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response
    return _make


@pytest.fixture
def async_client_mock(mocker):
    """Patch httpx.AsyncClient so `async with httpx.AsyncClient()` yields a mock with an async post"""
    client = AsyncMock()
    mocker.patch("httpx.AsyncClient", return_value=client)
    return client
