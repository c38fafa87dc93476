"""Subscriptions API section (2013-07-01).

Destinations and subscriptions are composite parameters: their members are
emitted under the parent's wire name, e.g. ``Destination.DeliveryChannel`` or
``Subscription.Destination.AttributeList.member.1.Key``.
"""

from __future__ import annotations

from typing import Dict, List

from mws_engine.catalog.descriptors import (
    KeyValueShape,
    OperationDescriptor,
    RequestDefaults,
    ValueType,
    composite,
    operation,
    param,
)
from mws_engine.catalog.registry import Section, register_section


REQUEST_DEFAULTS = RequestDefaults(
    name="Subscriptions",
    group="Subscriptions",
    path="/Subscriptions/2013-07-01",
    version="2013-07-01",
)

ENUMS: Dict[str, List[str]] = {
    "NotificationTypes": [
        "AnyOfferChanged",
        "FeedProcessingFinished",
        "FeePromotion",
        "FulfillmentOrderStatus",
        "ReportProcessingFinished",
    ],
}

TYPES: Dict[str, Dict[str, str]] = {
    "ServiceStatus": {
        "GREEN": "The service is operating normally.",
        "GREEN_I": "The service is operating normally + additional info provided",
        "YELLOW": "The service is experiencing higher than normal error rates or degraded performance.",
        "RED": "The service is unavailable or experiencing extremely high error rates.",
    },
}


_MARKETPLACE_ID = param("MarketplaceId")
_NOTIFICATION_TYPE = param("NotificationType", enum_ref="NotificationTypes")

DESTINATION_FIELDS = (
    param("DeliveryChannel"),
    param(
        "AttributeList",
        "AttributeList.member",
        is_key_value=True,
        key_value_shape=KeyValueShape.PAIRS,
    ),
)

SUBSCRIPTION_FIELDS = (
    _NOTIFICATION_TYPE,
    composite("Destination", DESTINATION_FIELDS),
    param("IsEnabled", value_type=ValueType.BOOLEAN),
)

_DESTINATION = composite("Destination", DESTINATION_FIELDS)
_SUBSCRIPTION = composite("Subscription", SUBSCRIPTION_FIELDS)


OPERATIONS: List[OperationDescriptor] = [
    operation(
        "GetServiceStatus",
        description="Operational status of the Subscriptions API section.",
    ),
    operation("RegisterDestination", _MARKETPLACE_ID, _DESTINATION),
    operation("DeregisterDestination", _MARKETPLACE_ID, _DESTINATION),
    operation("ListRegisteredDestinations", _MARKETPLACE_ID, _DESTINATION),
    operation("SendTestNotificationToDestination", _MARKETPLACE_ID, _DESTINATION),
    operation("CreateSubscription", _MARKETPLACE_ID, _SUBSCRIPTION),
    operation("GetSubscription", _MARKETPLACE_ID, _DESTINATION, _NOTIFICATION_TYPE),
    operation("DeleteSubscription", _MARKETPLACE_ID, _DESTINATION, _NOTIFICATION_TYPE),
    operation("ListSubscriptions", _MARKETPLACE_ID),
    operation("UpdateSubscription", _MARKETPLACE_ID, _SUBSCRIPTION),
]


def register() -> Section:
    return register_section(
        REQUEST_DEFAULTS.name,
        REQUEST_DEFAULTS,
        OPERATIONS,
        enums=ENUMS,
        types=TYPES,
    )
