"""Products API section (2011-10-01).

Pure catalog data: request defaults, operations and their parameters, the
``ItemConditions`` enum and descriptive code tables.
"""

from __future__ import annotations

from typing import Dict, List

from mws_engine.catalog.descriptors import (
    OperationDescriptor,
    RequestDefaults,
    ValueType,
    operation,
    param,
)
from mws_engine.catalog.registry import Section, register_section


REQUEST_DEFAULTS = RequestDefaults(
    name="Products",
    group="Products",
    path="/Products/2011-10-01",
    version="2011-10-01",
)

ENUMS: Dict[str, List[str]] = {
    "ItemConditions": ["New", "Used", "Collectible", "Refurbished", "Club"],
}

TYPES: Dict[str, Dict[str, str]] = {
    "CompetitivePriceId": {
        "1": "New Buy Box Price",
        "2": "Used Buy Box Price",
    },
    "ServiceStatus": {
        "GREEN": "The service is operating normally.",
        "GREEN_I": "The service is operating normally + additional info provided",
        "YELLOW": "The service is experiencing higher than normal error rates or degraded performance.",
        "RED": "The service is unavailable or experiencing extremely high error rates.",
    },
}


# ---- Reusable parameters ---------------------------------------------------

_MARKETPLACE_ID = param("MarketplaceId", required=True)
_ASIN_LIST = param("ASINList", "ASINList.ASIN", is_list=True, required=True)
_SKU_LIST = param("SellerSKUList", "SellerSKUList.SellerSKU", is_list=True, required=True)
_ITEM_CONDITION = param("ItemCondition", enum_ref="ItemConditions")
_ITEM_CONDITION_REQUIRED = param("ItemCondition", enum_ref="ItemConditions", required=True)

# GetMyFeesEstimate takes a list of request objects. Lists only flatten
# scalars (``<wire>.<i>``), so each member of the single supported entry is
# declared with a literal index 1: the operation estimates one product per
# call.
_FEES_REQUEST = "FeesEstimateRequestList.FeesEstimateRequest.1"


OPERATIONS: List[OperationDescriptor] = [
    operation(
        "GetServiceStatus",
        description="Operational status of the Products API section.",
    ),
    operation(
        "ListMatchingProducts",
        _MARKETPLACE_ID,
        param("Query", required=True),
        param("QueryContextId"),
        description="Products and their attributes, ordered by relevancy, for a search query.",
    ),
    operation(
        "GetMatchingProduct",
        _MARKETPLACE_ID,
        _ASIN_LIST,
        description="Products and their attributes for a list of ASINs.",
    ),
    operation(
        "GetMatchingProductForId",
        _MARKETPLACE_ID,
        param("IdType", required=True),
        param("IdList", "IdList.Id", is_list=True, required=True),
        description="Products and their attributes for a list of ASIN, GCID, SellerSKU, UPC, EAN, ISBN or JAN values.",
    ),
    operation(
        "GetCompetitivePricingForSKU",
        _MARKETPLACE_ID,
        _SKU_LIST,
        description="Current competitive pricing of products identified by SellerSKU.",
    ),
    operation(
        "GetCompetitivePricingForASIN",
        _MARKETPLACE_ID,
        _ASIN_LIST,
        description="Current competitive pricing of products identified by ASIN.",
    ),
    operation(
        "GetLowestOfferListingsForSKU",
        _MARKETPLACE_ID,
        _ITEM_CONDITION,
        _SKU_LIST,
        description="Lowest price offer listings by item condition, by SellerSKU.",
    ),
    operation(
        "GetLowestOfferListingsForASIN",
        _MARKETPLACE_ID,
        _ITEM_CONDITION,
        _ASIN_LIST,
        description="Lowest price offer listings by item condition, by ASIN.",
    ),
    operation(
        "GetProductCategoriesForSKU",
        _MARKETPLACE_ID,
        param("SellerSKU", required=True),
        description="Product categories of a SellerSKU, up to the marketplace root.",
    ),
    operation(
        "GetProductCategoriesForASIN",
        _MARKETPLACE_ID,
        param("ASIN", required=True),
        description="Product categories of an ASIN, up to the marketplace root.",
    ),
    operation(
        "GetMyPriceForASIN",
        _MARKETPLACE_ID,
        _ASIN_LIST,
        description="Pricing of your own offer listings, by ASIN.",
    ),
    operation(
        "GetMyPriceForSKU",
        _MARKETPLACE_ID,
        _SKU_LIST,
        description="Pricing of your own offer listings, by SellerSKU.",
    ),
    operation(
        "GetMyFeesEstimate",
        param("MarketplaceId", f"{_FEES_REQUEST}.MarketplaceId", required=True),
        param("IdType", f"{_FEES_REQUEST}.IdType", required=True),
        param("IdValue", f"{_FEES_REQUEST}.IdValue", required=True),
        param(
            "IsAmazonFulfilled",
            f"{_FEES_REQUEST}.IsAmazonFulfilled",
            required=True,
            value_type=ValueType.BOOLEAN,
        ),
        param("Identifier", f"{_FEES_REQUEST}.Identifier", required=True),
        param(
            "CurrencyCode",
            f"{_FEES_REQUEST}.PriceToEstimateFees.ListingPrice.CurrencyCode",
            required=True,
        ),
        param(
            "PriceToEstimateFees",
            f"{_FEES_REQUEST}.PriceToEstimateFees.ListingPrice.Amount",
            required=True,
            value_type=ValueType.NUMBER,
        ),
        response_data_path="FeesEstimateResultList.FeesEstimateResult.FeesEstimate",
        description="Estimated fees for one product (ASIN or SellerSKU) in one marketplace.",
    ),
    operation(
        "GetLowestPricedOffersForASIN",
        _MARKETPLACE_ID,
        param("ASIN", required=True),
        _ITEM_CONDITION_REQUIRED,
        description="The 20 lowest priced offers for an ASIN.",
    ),
    operation(
        "GetLowestPricedOffersForSKU",
        _MARKETPLACE_ID,
        param("SellerSKU", required=True),
        _ITEM_CONDITION_REQUIRED,
        description="The 20 lowest priced offers for a SellerSKU.",
    ),
]


def register() -> Section:
    return register_section(
        REQUEST_DEFAULTS.name,
        REQUEST_DEFAULTS,
        OPERATIONS,
        enums=ENUMS,
        types=TYPES,
    )
