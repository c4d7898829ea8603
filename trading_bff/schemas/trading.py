"""
Listing description accepted by the Trading API layer, plus the small
response shapes (errors, fees) handed back to callers.

Field names follow eBay's AddFixedPriceItem/ReviseFixedPriceItem Item type,
in camelCase on the wire.
"""
from decimal import Decimal
from typing import List, Optional, Union

from pydantic import Field

from trading_bff.schemas.base import BaseSchema

StrOrList = Union[str, List[str]]


class CategoryRef(BaseSchema):
    category_id: str


class ConditionDescriptor(BaseSchema):
    name: str
    value: StrOrList
    additional_info: Optional[str] = None


class PictureDetails(BaseSchema):
    gallery_type: Optional[str] = None  # Gallery, Plus, Featured, Large
    picture_url: Optional[List[str]] = Field(default=None, alias="pictureURL")


class NameValue(BaseSchema):
    name: str
    value: StrOrList


class BrandMPN(BaseSchema):
    brand: str
    mpn: str


class ProductListingDetails(BaseSchema):
    upc: Optional[str] = None
    ean: Optional[str] = None
    isbn: Optional[str] = None
    brand_mpn: Optional[BrandMPN] = Field(default=None, alias="brandMPN")
    product_reference_id: Optional[str] = None
    include_stock_photo_url: Optional[bool] = Field(default=None, alias="includeStockPhotoURL")
    use_stock_photo_url_as_gallery: Optional[bool] = Field(default=None, alias="useStockPhotoURLAsGallery")
    include_ebay_product_details: Optional[bool] = Field(default=None, alias="includeeBayProductDetails")
    use_first_product: Optional[bool] = None
    return_search_result_on_duplicates: Optional[bool] = None


class ShippingServiceOption(BaseSchema):
    shipping_service_priority: int
    shipping_service: str
    shipping_service_cost: Decimal
    shipping_service_additional_cost: Optional[Decimal] = None
    free_shipping: Optional[bool] = None


class InternationalShippingServiceOption(BaseSchema):
    shipping_service_priority: int
    shipping_service: str
    shipping_service_cost: Decimal
    shipping_service_additional_cost: Optional[Decimal] = None
    ship_to_location: Optional[List[str]] = None


class RateTableDetails(BaseSchema):
    domestic_rate_table_id: Optional[str] = None
    international_rate_table_id: Optional[str] = None


class CalculatedShippingRate(BaseSchema):
    packaging_handling_costs: Optional[Decimal] = None
    international_packaging_handling_costs: Optional[Decimal] = None


class SalesTax(BaseSchema):
    sales_tax_percent: Optional[Decimal] = None
    sales_tax_state: Optional[str] = None
    shipping_included_in_tax: Optional[bool] = None


class ShippingDetails(BaseSchema):
    shipping_type: Optional[str] = None  # Flat, Calculated, Freight, Free, NotSpecified
    shipping_service_options: Optional[List[ShippingServiceOption]] = None
    international_shipping_service_option: Optional[List[InternationalShippingServiceOption]] = None
    exclude_ship_to_location: Optional[List[str]] = None
    global_shipping: Optional[bool] = None
    rate_table_details: Optional[RateTableDetails] = None
    calculated_shipping_rate: Optional[CalculatedShippingRate] = None
    sales_tax: Optional[SalesTax] = None


class ShippingPackageDetails(BaseSchema):
    measurement_unit: Optional[str] = None  # English, Metric
    package_depth: Optional[Decimal] = None
    package_length: Optional[Decimal] = None
    package_width: Optional[Decimal] = None
    weight_major: Optional[Decimal] = None
    weight_minor: Optional[Decimal] = None
    shipping_package: Optional[str] = None
    shipping_irregular: Optional[bool] = None


class ReturnPolicy(BaseSchema):
    returns_accepted_option: str  # ReturnsAccepted, ReturnsNotAccepted
    refund_option: Optional[str] = None
    returns_within_option: Optional[str] = None
    shipping_cost_paid_by_option: Optional[str] = None
    description: Optional[str] = None
    international_returns_accepted_option: Optional[str] = None
    international_refund_option: Optional[str] = None
    international_returns_within_option: Optional[str] = None
    international_shipping_cost_paid_by_option: Optional[str] = None


class SellerPaymentProfile(BaseSchema):
    payment_profile_id: Optional[int] = None
    payment_profile_name: Optional[str] = None


class SellerReturnProfile(BaseSchema):
    return_profile_id: Optional[int] = None
    return_profile_name: Optional[str] = None


class SellerShippingProfile(BaseSchema):
    shipping_profile_id: Optional[int] = None
    shipping_profile_name: Optional[str] = None


class SellerProfiles(BaseSchema):
    seller_payment_profile: Optional[SellerPaymentProfile] = None
    seller_return_profile: Optional[SellerReturnProfile] = None
    seller_shipping_profile: Optional[SellerShippingProfile] = None


class ListingDetails(BaseSchema):
    best_offer_auto_accept_price: Optional[Decimal] = None
    minimum_best_offer_price: Optional[Decimal] = None
    local_listing_distance: Optional[str] = None


class BestOfferDetails(BaseSchema):
    best_offer_enabled: Optional[bool] = None


class Storefront(BaseSchema):
    store_category_id: Optional[int] = None
    store_category2_id: Optional[int] = None
    store_category_name: Optional[str] = None
    store_category2_name: Optional[str] = None


class Charity(BaseSchema):
    charity_id: str
    donation_percent: Decimal


class DigitalGoodInfo(BaseSchema):
    digital_delivery: Optional[bool] = None


class DiscountPriceInfo(BaseSchema):
    original_retail_price: Optional[Decimal] = None
    minimum_advertised_price: Optional[Decimal] = None
    minimum_advertised_price_exposure: Optional[str] = None  # PreCheckout, DuringCheckout, None
    sold_off_ebay: Optional[bool] = Field(default=None, alias="soldOffeBay")
    sold_on_ebay: Optional[bool] = Field(default=None, alias="soldOneBay")


class VATDetails(BaseSchema):
    business_seller: Optional[bool] = None
    restricted_to_business: Optional[bool] = None
    vat_percent: Optional[Decimal] = None


class RegulatoryAddress(BaseSchema):
    company_name: Optional[str] = None
    city_name: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    postal_code: Optional[str] = None
    state_or_province: Optional[str] = None
    street1: Optional[str] = None
    street2: Optional[str] = None
    contact_url: Optional[str] = Field(default=None, alias="contactURL")


class ResponsiblePerson(RegulatoryAddress):
    types: Optional[List[str]] = None


class EnergyEfficiencyLabel(BaseSchema):
    image_url: Optional[str] = Field(default=None, alias="imageURL")
    image_description: Optional[str] = None
    product_informationsheet: Optional[str] = None


class Hazmat(BaseSchema):
    component: Optional[str] = None
    signal_word: Optional[str] = None
    pictograms: Optional[List[str]] = None
    statements: Optional[List[str]] = None


class ProductSafety(BaseSchema):
    component: Optional[str] = None
    pictograms: Optional[List[str]] = None
    statements: Optional[List[str]] = None


class RegulatoryDocument(BaseSchema):
    document_id: str


class Regulatory(BaseSchema):
    manufacturer: Optional[RegulatoryAddress] = None
    responsible_persons: Optional[List[ResponsiblePerson]] = None
    energy_efficiency_label: Optional[EnergyEfficiencyLabel] = None
    hazmat: Optional[Hazmat] = None
    product_safety: Optional[ProductSafety] = None
    documents: Optional[List[RegulatoryDocument]] = None
    repair_score: Optional[Decimal] = None


class ExtendedProducerResponsibility(BaseSchema):
    eco_participation_fee: Optional[Decimal] = None


class CountryPolicy(BaseSchema):
    country: str
    policy_id: List[int]


class CustomPolicies(BaseSchema):
    product_compliance_policy_id: Optional[List[int]] = None
    take_back_policy_id: Optional[int] = None
    regional_product_compliance_policies: Optional[List[CountryPolicy]] = None
    regional_take_back_policies: Optional[List[CountryPolicy]] = None


class Compatibility(BaseSchema):
    compatibility_notes: Optional[str] = None
    name_value_list: List[NameValue]


class ContactHoursDetails(BaseSchema):
    time_zone_id: Optional[str] = None
    hours1_days: Optional[str] = None
    hours1_any_time: Optional[bool] = None
    hours1_from: Optional[str] = None
    hours1_to: Optional[str] = None
    hours2_days: Optional[str] = None
    hours2_any_time: Optional[bool] = None
    hours2_from: Optional[str] = None
    hours2_to: Optional[str] = None


class ExtendedSellerContactDetails(BaseSchema):
    classified_ad_contact_by_email_enabled: Optional[bool] = None
    contact_hours_details: Optional[ContactHoursDetails] = None


class SellerContactDetails(BaseSchema):
    company_name: Optional[str] = None
    county: Optional[str] = None
    street: Optional[str] = None
    street2: Optional[str] = None
    phone_country_code: Optional[str] = None
    phone_area_or_city_code: Optional[str] = None
    phone_local_number: Optional[str] = None


class VideoDetails(BaseSchema):
    video_id: Optional[List[str]] = None


class PaymentDetails(BaseSchema):
    days_to_full_payment: Optional[int] = None
    deposit_amount: Optional[Decimal] = None
    deposit_type: Optional[str] = None
    hours_to_deposit: Optional[int] = None


class PickupInStoreDetails(BaseSchema):
    eligible_for_pickup_in_store: Optional[bool] = None


class QuantityRestrictionPerBuyer(BaseSchema):
    maximum_quantity: Optional[int] = None


class ShippingServiceCostOverride(BaseSchema):
    shipping_service_priority: int
    shipping_service_type: str
    shipping_service_cost: Decimal
    shipping_service_additional_cost: Optional[Decimal] = None


class TradingListingUpdate(BaseSchema):
    """
    Marketplace-agnostic listing description with every field optional.

    Revise and relist calls send partial items of this shape; creating a
    listing goes through TradingListingItem, which makes the core fields
    mandatory.
    """
    # Core
    sku: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    primary_category: Optional[CategoryRef] = None
    secondary_category: Optional[CategoryRef] = None
    start_price: Optional[Decimal] = None
    quantity: Optional[int] = None
    lot_size: Optional[int] = None

    # Location / currency
    country: Optional[str] = None
    currency: Optional[str] = None
    location: Optional[str] = None
    postal_code: Optional[str] = None

    # Listing settings
    listing_duration: Optional[str] = None  # GTC, Days_7, ...
    listing_type: Optional[str] = None
    dispatch_time_max: Optional[int] = None

    # Condition
    condition_id: Optional[int] = None
    condition: Optional[str] = None
    condition_description: Optional[str] = None
    condition_descriptors: Optional[List[ConditionDescriptor]] = None

    # Content
    picture_details: Optional[PictureDetails] = None
    item_specifics: Optional[List[NameValue]] = None
    product_listing_details: Optional[ProductListingDetails] = None

    # Shipping / returns / payment
    shipping_details: Optional[ShippingDetails] = None
    shipping_package_details: Optional[ShippingPackageDetails] = None
    return_policy: Optional[ReturnPolicy] = None
    payment_methods: Optional[List[str]] = None
    pay_pal_email_address: Optional[str] = None
    auto_pay: Optional[bool] = None
    seller_profiles: Optional[SellerProfiles] = None

    # Pricing extras
    buy_it_now_price: Optional[Decimal] = None
    reserve_price: Optional[Decimal] = None
    best_offer_details: Optional[BestOfferDetails] = None
    listing_details: Optional[ListingDetails] = None
    discount_price_info: Optional[DiscountPriceInfo] = None

    # Presentation
    listing_enhancement: Optional[List[str]] = None
    storefront: Optional[Storefront] = None
    sub_title: Optional[str] = None
    video_details: Optional[VideoDetails] = None

    # Compliance
    vat_details: Optional[VATDetails] = None
    regulatory: Optional[Regulatory] = None
    extended_producer_responsibility: Optional[ExtendedProducerResponsibility] = None
    custom_policies: Optional[CustomPolicies] = None
    item_compatibility_list: Optional[List[Compatibility]] = None

    # Contact
    extended_seller_contact_details: Optional[ExtendedSellerContactDetails] = None
    seller_contact_details: Optional[SellerContactDetails] = None

    # Misc
    charity: Optional[Charity] = None
    digital_good_info: Optional[DigitalGoodInfo] = None
    vin: Optional[str] = None
    vrm: Optional[str] = None
    private_listing: Optional[bool] = None
    schedule_time: Optional[str] = None
    uuid: Optional[str] = None
    application_data: Optional[str] = None
    buyer_responsible_for_shipping: Optional[bool] = None
    category_mapping_allowed: Optional[bool] = None
    cross_border_trade: Optional[List[str]] = None
    disable_buyer_requirements: Optional[bool] = None
    ebay_plus: Optional[bool] = Field(default=None, alias="eBayPlus")
    listing_subtype2: Optional[str] = None
    payment_details: Optional[PaymentDetails] = None
    pickup_in_store_details: Optional[PickupInStoreDetails] = None
    quantity_restriction_per_buyer: Optional[QuantityRestrictionPerBuyer] = None
    seller_provided_title: Optional[str] = None
    ship_to_locations: Optional[List[str]] = None
    shipping_service_cost_override_list: Optional[List[ShippingServiceCostOverride]] = None
    tax_category: Optional[str] = None
    use_tax_table: Optional[bool] = None

    # API-only fields, never sent to eBay
    marketplace: Optional[str] = None
    verify_only: Optional[bool] = None
    site: Optional[str] = None


class TradingListingItem(TradingListingUpdate):
    """
    Listing description for AddFixedPriceItem / VerifyAddFixedPriceItem.

    EbayTradingAPI validates new listings against this model, so a payload
    missing a title, description, primary category, start price or quantity
    is rejected before any request is sent.
    """
    title: str
    description: str
    primary_category: CategoryRef
    start_price: Decimal
    quantity: int


class TradingErrorDetail(BaseSchema):
    """One entry from a Trading API <Errors> element"""
    code: str = "UNKNOWN"
    short_message: str = "Unknown error"
    long_message: Optional[str] = None
    severity: Optional[str] = None


class Fee(BaseSchema):
    name: Optional[str] = None
    amount: Decimal = Decimal("0")
    currency: str = "USD"
    promotional: Decimal = Decimal("0")
