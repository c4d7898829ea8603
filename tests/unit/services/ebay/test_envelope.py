# tests/unit/services/ebay/test_envelope.py
from decimal import Decimal

import pytest
import xmltodict

from trading_bff.core.exceptions import EbayAPIError, TradingAPIError
from trading_bff.services.ebay.envelope import (
    build_xml_request,
    extract_errors,
    parse_fees,
    parse_response,
    read_money,
)
from trading_bff.services.ebay.transformer import transform_item_to_ebay_format


def assert_xml_contains(xml_string, expected_fragments):
    """Helper to check if XML contains expected fragments"""
    if isinstance(expected_fragments, str):
        expected_fragments = [expected_fragments]

    for fragment in expected_fragments:
        assert fragment in xml_string, f"Expected '{fragment}' in XML: {xml_string}"


SUCCESS_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AddFixedPriceItemResponse xmlns="urn:ebay:apis:eBLBaseComponents">
  <Timestamp>2025-05-08T12:00:00.000Z</Timestamp>
  <Ack>Success</Ack>
  <ItemID>123</ItemID>
  <Fees>
    <Fee>
      <Name>InsertionFee</Name>
      <Fee currencyID="EUR">0.35</Fee>
      <PromotionalDiscount currencyID="EUR">0.35</PromotionalDiscount>
    </Fee>
    <Fee>
      <Name>ListingFee</Name>
      <Fee currencyID="EUR">0.0</Fee>
    </Fee>
  </Fees>
</AddFixedPriceItemResponse>"""

FAILURE_RESPONSE = """<?xml version="1.0" encoding="UTF-8"?>
<AddFixedPriceItemResponse xmlns="urn:ebay:apis:eBLBaseComponents">
  <Ack>Failure</Ack>
  <Errors>
    <ShortMessage>Invalid category.</ShortMessage>
    <LongMessage>The category selected is not a leaf category.</LongMessage>
    <ErrorCode>87</ErrorCode>
    <SeverityCode>Error</SeverityCode>
  </Errors>
</AddFixedPriceItemResponse>"""


"""
1. Request Envelope Tests
"""

def test_build_xml_request_envelope():
    xml = build_xml_request("GetItem", {"ItemID": "123"})

    assert xml.startswith('<?xml version="1.0" encoding="utf-8"?>')
    assert_xml_contains(xml, [
        '<GetItemRequest xmlns="urn:ebay:apis:eBLBaseComponents">',
        "<ErrorLanguage>en_US</ErrorLanguage>",
        "<WarningLevel>High</WarningLevel>",
        "<ItemID>123</ItemID>",
        "</GetItemRequest>",
    ])


def test_build_xml_request_serialises_values():
    xml = build_xml_request("AddFixedPriceItem", {"Item": {
        "StartPrice": {"@currencyID": "EUR", "#text": "99.99"},
        "Quantity": 3,
        "AutoPay": True,
        "PrivateListing": False,
        "WeightMajor": Decimal("1E+1"),
        "PictureDetails": {"PictureURL": ["https://a/1.jpg", "https://a/2.jpg"]},
    }})

    assert_xml_contains(xml, [
        '<StartPrice currencyID="EUR">99.99</StartPrice>',
        "<Quantity>3</Quantity>",
        "<AutoPay>true</AutoPay>",
        "<PrivateListing>false</PrivateListing>",
        "<WeightMajor>10</WeightMajor>",
        "<PictureURL>https://a/1.jpg</PictureURL>",
        "<PictureURL>https://a/2.jpg</PictureURL>",
    ])


def test_description_wrapped_in_cdata():
    html = '<p>Great & "cheap"</p>'
    xml = build_xml_request("AddFixedPriceItem", {"Item": {"Title": "A & B", "Description": html}})

    assert_xml_contains(xml, [
        f"<Description><![CDATA[{html}]]></Description>",
        "<Title>A &amp; B</Title>",
    ])


def test_cdata_terminator_is_split():
    xml = build_xml_request("AddFixedPriceItem", {"Item": {"Description": "a]]>b"}})

    assert "<Description><![CDATA[a]]]]><![CDATA[>b]]></Description>" in xml
    parsed = xmltodict.parse(xml)
    assert parsed["AddFixedPriceItemRequest"]["Item"]["Description"] == "a]]>b"


def test_nested_descriptions_also_use_cdata():
    xml = build_xml_request("AddFixedPriceItem", {"Item": {
        "Description": "<b>item</b>",
        "ReturnPolicy": {"Description": "<i>30 days</i>"},
    }})

    assert "<![CDATA[<b>item</b>]]>" in xml
    assert "<![CDATA[<i>30 days</i>]]>" in xml


def test_transformed_item_round_trips_through_xml(sample_listing_data):
    item = transform_item_to_ebay_format(sample_listing_data, "EBAY_DE")
    xml = build_xml_request("AddFixedPriceItem", {"Item": item})

    parsed = xmltodict.parse(xml)["AddFixedPriceItemRequest"]["Item"]
    assert parsed["StartPrice"] == {"@currencyID": "EUR", "#text": "999.99"}
    assert parsed["ConditionID"] == "1000"
    assert parsed["Description"] == "<p>A test guitar</p>"


"""
2. Response Parsing Tests
"""

def test_parse_success_response():
    response = parse_response(SUCCESS_RESPONSE, "AddFixedPriceItem")

    assert response["Ack"] == "Success"
    assert response["ItemID"] == "123"


def test_parse_failure_raises_trading_error():
    with pytest.raises(TradingAPIError) as exc_info:
        parse_response(FAILURE_RESPONSE, "AddFixedPriceItem")

    error = exc_info.value
    assert error.ack == "Failure"
    assert len(error.errors) == 1
    assert error.errors[0].code == "87"
    assert error.errors[0].long_message == "The category selected is not a leaf category."
    assert error.to_dict()["success"] is False
    assert "[87] Invalid category." in str(error)


def test_parse_partial_failure_raises():
    xml = FAILURE_RESPONSE.replace("<Ack>Failure</Ack>", "<Ack>PartialFailure</Ack>")
    with pytest.raises(TradingAPIError) as exc_info:
        parse_response(xml, "AddFixedPriceItem")

    assert exc_info.value.ack == "PartialFailure"


def test_parse_warning_is_success():
    xml = FAILURE_RESPONSE.replace("<Ack>Failure</Ack>", "<Ack>Warning</Ack>").replace(
        "<SeverityCode>Error</SeverityCode>", "<SeverityCode>Warning</SeverityCode>"
    )
    response = parse_response(xml, "AddFixedPriceItem")

    assert response["Ack"] == "Warning"
    assert extract_errors(response)[0].severity == "Warning"


def test_parse_wrong_root_raises():
    with pytest.raises(EbayAPIError) as exc_info:
        parse_response(SUCCESS_RESPONSE, "GetItem")

    assert not isinstance(exc_info.value, TradingAPIError)
    assert "GetItemResponse" in str(exc_info.value)


@pytest.mark.parametrize("body", ["", "   ", "<html><body>Bad gateway", "not xml at all"])
def test_parse_garbage_raises(body):
    with pytest.raises(EbayAPIError):
        parse_response(body, "GetItem")


"""
3. Error, Money and Fee Extraction Tests
"""

def test_extract_errors_handles_multiple_and_missing_fields():
    errors = extract_errors({"Errors": [
        {"ErrorCode": "1", "ShortMessage": "First", "SeverityCode": "Warning"},
        {"LongMessage": "No code here"},
    ]})

    assert [e.code for e in errors] == ["1", "UNKNOWN"]
    assert errors[1].short_message == "Unknown error"
    assert errors[1].long_message == "No code here"


def test_extract_errors_empty():
    assert extract_errors({"Ack": "Success"}) == []


def test_read_money():
    assert read_money({"@currencyID": "GBP", "#text": "12.50"}) == (Decimal("12.50"), "GBP")
    assert read_money("3") == (Decimal("3"), "USD")
    assert read_money(None, "EUR") == (Decimal("0"), "EUR")


def test_parse_fees():
    response = parse_response(SUCCESS_RESPONSE, "AddFixedPriceItem")
    fees = parse_fees(response["Fees"])

    assert fees == [
        {"name": "InsertionFee", "amount": Decimal("0.35"), "currency": "EUR", "promotional": Decimal("0.35")},
        {"name": "ListingFee", "amount": Decimal("0.0"), "currency": "EUR", "promotional": Decimal("0")},
    ]


def test_parse_fees_single_and_empty():
    single = parse_fees({"Fee": {"Name": "InsertionFee", "Fee": {"@currencyID": "USD", "#text": "1.00"}}})

    assert len(single) == 1
    assert single[0]["amount"] == Decimal("1.00")
    assert parse_fees(None) == []
