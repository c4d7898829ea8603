# trading_bff/services/ebay/transformer.py
"""
Listing description -> Trading API <Item> mapping.

The output is a plain nested dict laid out for xmltodict.unparse: element
names as keys, repeated elements as lists, and money as
{"@currencyID": "EUR", "#text": "99.99"}.

Each field group has its own builder returning a fragment; transform() merges
the fragments in a fixed order. Builders never mutate their input and never
raise for a valid listing. eBay's own validation rejects anything incomplete.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from trading_bff.schemas.trading import (
    InternationalShippingServiceOption,
    NameValue,
    RegulatoryAddress,
    ShippingServiceOption,
    TradingListingUpdate,
)
from trading_bff.services.ebay.conditions import resolve_condition_id
from trading_bff.services.ebay.country import normalize_country
from trading_bff.services.ebay.item_specifics import SPECIFIC_TRANSLATIONS, translate_specific_name
from trading_bff.services.ebay.marketplace import (
    DEFAULT_MARKETPLACE,
    MARKETPLACES,
    MarketplaceProfile,
    get_marketplace_profile,
    normalize_marketplace,
)

logger = logging.getLogger(__name__)

Money = Dict[str, str]
Fragment = Dict[str, Any]

DEFAULT_RETURN_POLICY: Mapping[str, str] = {
    "ReturnsAcceptedOption": "ReturnsAccepted",
    "RefundOption": "MoneyBack",
    "ReturnsWithinOption": "Days_30",
    "ShippingCostPaidByOption": "Buyer",
}


def format_amount(value: Union[Decimal, int, float, str]) -> str:
    """
    Shortest plain decimal string: 10.0 becomes "10" and 0.50 becomes "0.5".
    Never scientific notation.
    """
    if isinstance(value, float):
        value = Decimal(str(value))
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    return str(value)


def money(value: Union[Decimal, int, float, str], currency: str) -> Money:
    return {"@currencyID": currency, "#text": format_amount(value)}


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def compact(fields: Mapping[str, Any]) -> Fragment:
    """Drop unset entries; False and 0 are kept"""
    return {
        key: value for key, value in fields.items()
        if value is not None and not (isinstance(value, (str, list, dict)) and len(value) == 0)
    }


@dataclass(frozen=True)
class TransformContext:
    marketplace: str
    profile: MarketplaceProfile
    currency: str
    partial: bool = False

    def money(self, value: Optional[Union[Decimal, int, float, str]]) -> Optional[Money]:
        return None if value is None else money(value, self.currency)


class TradingItemTransformer:
    """
    Maps TradingListingItem/TradingListingUpdate values to Trading API items.

    Marketplace defaults and specific-name translations are injected so tests
    (or other sites) can swap the tables.
    """

    def __init__(
        self,
        marketplaces: Optional[Mapping[str, MarketplaceProfile]] = None,
        specific_translations: Optional[Mapping[str, Mapping[str, str]]] = None,
    ):
        self.marketplaces = MARKETPLACES if marketplaces is None else marketplaces
        self.specific_translations = (
            SPECIFIC_TRANSLATIONS if specific_translations is None else specific_translations
        )
        self._builders: List[Callable[[TradingListingUpdate, TransformContext], Fragment]] = [
            self.build_core,
            self.build_pricing,
            self.build_location,
            self.build_listing_settings,
            self.build_condition,
            self.build_pictures,
            self.build_item_specifics,
            self.build_product_details,
            self.build_package,
            self.build_seller_profiles,
            self.build_shipping,
            self.build_return_policy,
            self.build_regulatory,
            self.build_offers,
            self.build_presentation,
            self.build_compliance,
            self.build_payment,
            self.build_contact,
            self.build_misc,
        ]

    def context_for(self, item: TradingListingUpdate, marketplace: Optional[str], partial: bool = False) -> TransformContext:
        code = normalize_marketplace(marketplace or item.marketplace) or DEFAULT_MARKETPLACE
        profile = get_marketplace_profile(code, self.marketplaces)
        return TransformContext(
            marketplace=code,
            profile=profile,
            currency=item.currency or profile.currency,
            partial=partial,
        )

    def transform(
        self,
        item: Union[TradingListingUpdate, Dict[str, Any]],
        marketplace: Optional[str] = None,
        partial: bool = False,
    ) -> Fragment:
        """
        Build the <Item> body for a listing.

        Args:
            item: listing model or JSON-shaped dict
            marketplace: marketplace code; falls back to item.marketplace, then EBAY_US
            partial: revise/relist mode. Only supplied fields are emitted, so
                location, condition and shipping/return defaults are not synthesised.
        """
        listing = TradingListingUpdate.from_payload(item)
        ctx = self.context_for(listing, marketplace, partial)

        result: Fragment = {}
        for builder in self._builders:
            result.update(builder(listing, ctx))

        logger.debug(
            f"Transformed item sku={listing.sku!r} for {ctx.marketplace} "
            f"({ctx.currency}): {len(result)} top-level fields"
        )
        return result

    # Core

    def build_core(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        return compact({
            "SKU": item.sku,
            "Title": item.title,
            "SubTitle": item.sub_title,
            "Description": item.description,
            "PrimaryCategory": {"CategoryID": item.primary_category.category_id} if item.primary_category else None,
            "SecondaryCategory": {"CategoryID": item.secondary_category.category_id} if item.secondary_category else None,
        })

    def build_pricing(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        return compact({
            "StartPrice": ctx.money(item.start_price),
            "BuyItNowPrice": ctx.money(item.buy_it_now_price),
            "ReservePrice": ctx.money(item.reserve_price),
            "Quantity": item.quantity,
            "LotSize": item.lot_size or None,
        })

    def build_location(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        country = normalize_country(item.country)
        if ctx.partial:
            return compact({
                "Country": country,
                "Location": item.location,
                "PostalCode": item.postal_code,
                "Currency": item.currency,
            })

        country = country or ctx.profile.country
        return compact({
            "Country": country,
            # eBay rejects items without a Location
            "Location": item.location or country,
            "PostalCode": item.postal_code,
            "Currency": ctx.currency,
        })

    def build_listing_settings(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        return compact({
            "ListingDuration": item.listing_duration,
            "ListingType": item.listing_type,
            "ListingSubtype2": item.listing_subtype2,
            "DispatchTimeMax": item.dispatch_time_max,
            "ScheduleTime": item.schedule_time,
            "PrivateListing": item.private_listing,
        })

    def build_condition(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        fragment: Fragment = {}
        if not ctx.partial or item.condition_id or item.condition:
            fragment["ConditionID"] = resolve_condition_id(item.condition_id, item.condition)

        if item.condition_description:
            fragment["ConditionDescription"] = item.condition_description

        if item.condition_descriptors:
            fragment["ConditionDescriptors"] = {
                "ConditionDescriptor": [
                    compact({
                        "Name": descriptor.name,
                        "Value": as_list(descriptor.value),
                        "AdditionalInfo": descriptor.additional_info,
                    })
                    for descriptor in item.condition_descriptors
                ]
            }
        return fragment

    def build_pictures(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        if not item.picture_details:
            return {}
        pictures = compact({
            "GalleryType": item.picture_details.gallery_type,
            "PictureURL": as_list(item.picture_details.picture_url),
        })
        return {"PictureDetails": pictures} if pictures else {}

    def _name_value(self, pair: NameValue, ctx: Optional[TransformContext] = None) -> Fragment:
        name = pair.name
        if ctx is not None:
            name = translate_specific_name(name, ctx.marketplace, self.specific_translations)
        return {"Name": name, "Value": as_list(pair.value)}

    def build_item_specifics(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        if not item.item_specifics:
            return {}
        return {
            "ItemSpecifics": {
                "NameValueList": [self._name_value(pair, ctx) for pair in item.item_specifics]
            }
        }

    def build_product_details(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        details = item.product_listing_details
        if not details:
            return {}
        product = compact({
            "UPC": details.upc,
            "EAN": details.ean,
            "ISBN": details.isbn,
            "BrandMPN": {"Brand": details.brand_mpn.brand, "MPN": details.brand_mpn.mpn} if details.brand_mpn else None,
            "ProductReferenceID": details.product_reference_id,
            "IncludeStockPhotoURL": details.include_stock_photo_url,
            "UseStockPhotoURLAsGallery": details.use_stock_photo_url_as_gallery,
            "IncludeeBayProductDetails": details.include_ebay_product_details,
            "UseFirstProduct": details.use_first_product,
            "ReturnSearchResultOnDuplicates": details.return_search_result_on_duplicates,
        })
        return {"ProductListingDetails": product} if product else {}

    def build_package(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        package = item.shipping_package_details
        if not package:
            return {}
        details = compact({
            "MeasurementUnit": package.measurement_unit,
            "PackageDepth": package.package_depth,
            "PackageLength": package.package_length,
            "PackageWidth": package.package_width,
            "WeightMajor": package.weight_major,
            "WeightMinor": package.weight_minor,
            "ShippingPackage": package.shipping_package,
            "ShippingIrregular": package.shipping_irregular,
        })
        return {"ShippingPackageDetails": details} if details else {}

    # Shipping, returns and business policies

    def build_seller_profiles(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        profiles = item.seller_profiles
        if profiles is None:
            return {}
        result = compact({
            "SellerPaymentProfile": compact({
                "PaymentProfileID": profiles.seller_payment_profile.payment_profile_id,
                "PaymentProfileName": profiles.seller_payment_profile.payment_profile_name,
            }) if profiles.seller_payment_profile else None,
            "SellerReturnProfile": compact({
                "ReturnProfileID": profiles.seller_return_profile.return_profile_id,
                "ReturnProfileName": profiles.seller_return_profile.return_profile_name,
            }) if profiles.seller_return_profile else None,
            "SellerShippingProfile": compact({
                "ShippingProfileID": profiles.seller_shipping_profile.shipping_profile_id,
                "ShippingProfileName": profiles.seller_shipping_profile.shipping_profile_name,
            }) if profiles.seller_shipping_profile else None,
        })
        return {"SellerProfiles": result} if result else {}

    def _uses_inline_terms(self, item: TradingListingUpdate) -> bool:
        """
        Whether ShippingDetails/ReturnPolicy belong in the item at all.

        With business policies and no explicit shipping or return data, eBay
        applies the policies and both blocks are left out.
        """
        return item.seller_profiles is None or item.shipping_details is not None or item.return_policy is not None

    def _synthesise_defaults(self, item: TradingListingUpdate, ctx: TransformContext) -> bool:
        return item.seller_profiles is None and not ctx.partial

    def _shipping_option(self, option: ShippingServiceOption, ctx: TransformContext) -> Fragment:
        return compact({
            "ShippingServicePriority": option.shipping_service_priority,
            "ShippingService": option.shipping_service,
            "ShippingServiceCost": ctx.money(option.shipping_service_cost),
            "ShippingServiceAdditionalCost": ctx.money(option.shipping_service_additional_cost),
            "FreeShipping": option.free_shipping,
        })

    def _international_option(self, option: InternationalShippingServiceOption, ctx: TransformContext) -> Fragment:
        return compact({
            "ShippingServicePriority": option.shipping_service_priority,
            "ShippingService": option.shipping_service,
            "ShippingServiceCost": ctx.money(option.shipping_service_cost),
            "ShippingServiceAdditionalCost": ctx.money(option.shipping_service_additional_cost),
            "ShipToLocation": as_list(option.ship_to_location),
        })

    def default_shipping(self, ctx: TransformContext) -> Fragment:
        """Flat, free shipping with the marketplace's default service"""
        return {
            "ShippingType": "Flat",
            "ShippingServiceOptions": [{
                "ShippingServicePriority": 1,
                "ShippingService": ctx.profile.shipping_service,
                "ShippingServiceCost": money("0.00", ctx.currency),
            }],
        }

    def build_shipping(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        fragment = compact({
            "ShipToLocations": as_list(item.ship_to_locations),
            "ShippingServiceCostOverrideList": {
                "ShippingServiceCostOverride": [
                    compact({
                        "ShippingServicePriority": override.shipping_service_priority,
                        "ShippingServiceType": override.shipping_service_type,
                        "ShippingServiceCost": ctx.money(override.shipping_service_cost),
                        "ShippingServiceAdditionalCost": ctx.money(override.shipping_service_additional_cost),
                    })
                    for override in item.shipping_service_cost_override_list
                ]
            } if item.shipping_service_cost_override_list else None,
        })

        if not self._uses_inline_terms(item):
            return fragment

        details = item.shipping_details
        if details and details.shipping_service_options:
            shipping = compact({
                "ShippingType": details.shipping_type,
                "ShippingServiceOptions": [
                    self._shipping_option(option, ctx) for option in details.shipping_service_options
                ],
                "InternationalShippingServiceOption": [
                    self._international_option(option, ctx)
                    for option in details.international_shipping_service_option or []
                ],
                "ExcludeShipToLocation": as_list(details.exclude_ship_to_location),
                "GlobalShipping": details.global_shipping,
                "RateTableDetails": compact({
                    "DomesticRateTableId": details.rate_table_details.domestic_rate_table_id,
                    "InternationalRateTableId": details.rate_table_details.international_rate_table_id,
                }) if details.rate_table_details else None,
                "CalculatedShippingRate": compact({
                    "PackagingHandlingCosts": ctx.money(details.calculated_shipping_rate.packaging_handling_costs),
                    "InternationalPackagingHandlingCosts": ctx.money(
                        details.calculated_shipping_rate.international_packaging_handling_costs
                    ),
                }) if details.calculated_shipping_rate else None,
                "SalesTax": compact({
                    "SalesTaxPercent": details.sales_tax.sales_tax_percent,
                    "SalesTaxState": details.sales_tax.sales_tax_state,
                    "ShippingIncludedInTax": details.sales_tax.shipping_included_in_tax,
                }) if details.sales_tax else None,
            })
            fragment["ShippingDetails"] = shipping
        elif self._synthesise_defaults(item, ctx):
            fragment["ShippingDetails"] = self.default_shipping(ctx)
        return fragment

    def build_return_policy(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        if not self._uses_inline_terms(item):
            return {}

        policy = item.return_policy
        if policy is not None:
            return {"ReturnPolicy": compact({
                "ReturnsAcceptedOption": policy.returns_accepted_option,
                "RefundOption": policy.refund_option,
                "ReturnsWithinOption": policy.returns_within_option,
                "ShippingCostPaidByOption": policy.shipping_cost_paid_by_option,
                "Description": policy.description,
                "InternationalReturnsAcceptedOption": policy.international_returns_accepted_option,
                "InternationalRefundOption": policy.international_refund_option,
                "InternationalReturnsWithinOption": policy.international_returns_within_option,
                "InternationalShippingCostPaidByOption": policy.international_shipping_cost_paid_by_option,
            })}
        if self._synthesise_defaults(item, ctx):
            return {"ReturnPolicy": dict(DEFAULT_RETURN_POLICY)}
        return {}

    # Regulatory / compliance

    def _address(self, address: RegulatoryAddress) -> Fragment:
        return compact({
            "CompanyName": address.company_name,
            "CityName": address.city_name,
            "Country": normalize_country(address.country),
            "Email": address.email,
            "Phone": address.phone,
            "PostalCode": address.postal_code,
            "StateOrProvince": address.state_or_province,
            "Street1": address.street1,
            "Street2": address.street2,
            "ContactURL": address.contact_url,
        })

    def build_regulatory(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        regulatory = item.regulatory
        if not regulatory:
            return {}

        persons = []
        for person in regulatory.responsible_persons or []:
            entry = self._address(person)
            if person.types:
                entry["Types"] = {"Type": as_list(person.types)}
            persons.append(entry)

        label = regulatory.energy_efficiency_label
        hazmat = regulatory.hazmat
        safety = regulatory.product_safety

        result = compact({
            "Manufacturer": self._address(regulatory.manufacturer) if regulatory.manufacturer else None,
            "ResponsiblePersons": {"ResponsiblePerson": persons} if persons else None,
            "EnergyEfficiencyLabel": compact({
                "ImageURL": label.image_url,
                "ImageDescription": label.image_description,
                "ProductInformationsheet": label.product_informationsheet,
            }) if label else None,
            "Hazmat": compact({
                "Component": hazmat.component,
                "SignalWord": hazmat.signal_word,
                "Pictograms": {"Pictogram": as_list(hazmat.pictograms)} if hazmat.pictograms else None,
                "Statements": {"Statement": as_list(hazmat.statements)} if hazmat.statements else None,
            }) if hazmat else None,
            "ProductSafety": compact({
                "Component": safety.component,
                "Pictograms": {"Pictogram": as_list(safety.pictograms)} if safety.pictograms else None,
                "Statements": {"Statement": as_list(safety.statements)} if safety.statements else None,
            }) if safety else None,
            "Documents": {
                "Document": [{"DocumentID": doc.document_id} for doc in regulatory.documents]
            } if regulatory.documents else None,
            "RepairScore": regulatory.repair_score,
        })
        return {"Regulatory": result} if result else {}

    def build_compliance(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        fragment: Fragment = {}

        if item.vat_details:
            vat = compact({
                "BusinessSeller": item.vat_details.business_seller,
                "RestrictedToBusiness": item.vat_details.restricted_to_business,
                "VATPercent": item.vat_details.vat_percent,
            })
            if vat:
                fragment["VATDetails"] = vat

        if item.extended_producer_responsibility:
            epr = compact({
                "EcoParticipationFee": ctx.money(item.extended_producer_responsibility.eco_participation_fee),
            })
            if epr:
                fragment["ExtendedProducerResponsibility"] = epr

        policies = item.custom_policies
        if policies:
            custom = compact({
                "ProductCompliancePolicyID": as_list(policies.product_compliance_policy_id),
                "TakeBackPolicyID": policies.take_back_policy_id,
                "RegionalProductCompliancePolicies": {
                    "CountryPolicies": [
                        {"Country": normalize_country(policy.country), "PolicyID": as_list(policy.policy_id)}
                        for policy in policies.regional_product_compliance_policies
                    ]
                } if policies.regional_product_compliance_policies else None,
                "RegionalTakeBackPolicies": {
                    "CountryPolicies": [
                        {"Country": normalize_country(policy.country), "PolicyID": as_list(policy.policy_id)}
                        for policy in policies.regional_take_back_policies
                    ]
                } if policies.regional_take_back_policies else None,
            })
            if custom:
                fragment["CustomPolicies"] = custom

        if item.item_compatibility_list:
            # Compatibility names are catalogue keys and are never translated
            fragment["ItemCompatibilityList"] = {
                "Compatibility": [
                    compact({
                        "CompatibilityNotes": compat.compatibility_notes,
                        "NameValueList": [self._name_value(pair) for pair in compat.name_value_list],
                    })
                    for compat in item.item_compatibility_list
                ]
            }
        return fragment

    # Offers, presentation, payment, contact

    def build_offers(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        fragment: Fragment = {}

        if item.best_offer_details and item.best_offer_details.best_offer_enabled is not None:
            fragment["BestOfferDetails"] = {
                "BestOfferEnabled": item.best_offer_details.best_offer_enabled,
            }

        if item.listing_details:
            details = compact({
                "BestOfferAutoAcceptPrice": ctx.money(item.listing_details.best_offer_auto_accept_price),
                "MinimumBestOfferPrice": ctx.money(item.listing_details.minimum_best_offer_price),
                "LocalListingDistance": item.listing_details.local_listing_distance,
            })
            if details:
                fragment["ListingDetails"] = details

        discount = item.discount_price_info
        if discount:
            info = compact({
                "OriginalRetailPrice": ctx.money(discount.original_retail_price),
                "MinimumAdvertisedPrice": ctx.money(discount.minimum_advertised_price),
                "MinimumAdvertisedPriceExposure": discount.minimum_advertised_price_exposure,
                "SoldOffeBay": discount.sold_off_ebay,
                "SoldOneBay": discount.sold_on_ebay,
            })
            if info:
                fragment["DiscountPriceInfo"] = info
        return fragment

    def build_presentation(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        storefront = item.storefront
        return compact({
            "ListingEnhancement": as_list(item.listing_enhancement),
            "Storefront": compact({
                "StoreCategoryID": storefront.store_category_id,
                "StoreCategory2ID": storefront.store_category2_id,
                "StoreCategoryName": storefront.store_category_name,
                "StoreCategory2Name": storefront.store_category2_name,
            }) if storefront else None,
            "VideoDetails": {
                "VideoID": as_list(item.video_details.video_id)
            } if item.video_details and item.video_details.video_id else None,
        })

    def build_payment(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        payment = item.payment_details
        return compact({
            "PaymentMethods": as_list(item.payment_methods),
            "PayPalEmailAddress": item.pay_pal_email_address,
            "AutoPay": item.auto_pay,
            "PaymentDetails": compact({
                "DaysToFullPayment": payment.days_to_full_payment,
                "DepositAmount": ctx.money(payment.deposit_amount),
                "DepositType": payment.deposit_type,
                "HoursToDeposit": payment.hours_to_deposit,
            }) if payment else None,
        })

    def build_contact(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        extended = item.extended_seller_contact_details
        hours = extended.contact_hours_details if extended else None
        contact = item.seller_contact_details

        return compact({
            "ExtendedSellerContactDetails": compact({
                "ClassifiedAdContactByEmailEnabled": extended.classified_ad_contact_by_email_enabled,
                "ContactHoursDetails": compact({
                    "TimeZoneID": hours.time_zone_id,
                    "Hours1Days": hours.hours1_days,
                    "Hours1AnyTime": hours.hours1_any_time,
                    "Hours1From": hours.hours1_from,
                    "Hours1To": hours.hours1_to,
                    "Hours2Days": hours.hours2_days,
                    "Hours2AnyTime": hours.hours2_any_time,
                    "Hours2From": hours.hours2_from,
                    "Hours2To": hours.hours2_to,
                }) if hours else None,
            }) if extended else None,
            "SellerContactDetails": compact({
                "CompanyName": contact.company_name,
                "County": contact.county,
                "Street": contact.street,
                "Street2": contact.street2,
                "PhoneCountryCode": contact.phone_country_code,
                "PhoneAreaOrCityCode": contact.phone_area_or_city_code,
                "PhoneLocalNumber": contact.phone_local_number,
            }) if contact else None,
        })

    def build_misc(self, item: TradingListingUpdate, ctx: TransformContext) -> Fragment:
        return compact({
            "Charity": compact({
                "CharityID": item.charity.charity_id,
                "DonationPercent": item.charity.donation_percent,
            }) if item.charity else None,
            "DigitalGoodInfo": compact({
                "DigitalDelivery": item.digital_good_info.digital_delivery,
            }) if item.digital_good_info else None,
            "PickupInStoreDetails": compact({
                "EligibleForPickupInStore": item.pickup_in_store_details.eligible_for_pickup_in_store,
            }) if item.pickup_in_store_details else None,
            "QuantityRestrictionPerBuyer": compact({
                "MaximumQuantity": item.quantity_restriction_per_buyer.maximum_quantity,
            }) if item.quantity_restriction_per_buyer else None,
            "BuyerResponsibleForShipping": item.buyer_responsible_for_shipping,
            "CategoryMappingAllowed": item.category_mapping_allowed,
            "CrossBorderTrade": as_list(item.cross_border_trade),
            "DisableBuyerRequirements": item.disable_buyer_requirements,
            "eBayPlus": item.ebay_plus,
            "UUID": item.uuid,
            "ApplicationData": item.application_data,
            "SellerProvidedTitle": item.seller_provided_title,
            "TaxCategory": item.tax_category,
            "UseTaxTable": item.use_tax_table,
            "VIN": item.vin,
            "VRM": item.vrm,
        })


_default_transformer = TradingItemTransformer()


def transform_item_to_ebay_format(
    item: Union[TradingListingUpdate, Dict[str, Any]],
    marketplace: Optional[str] = None,
    partial: bool = False,
) -> Fragment:
    """Transform a listing with the default marketplace and translation tables"""
    return _default_transformer.transform(item, marketplace, partial=partial)
