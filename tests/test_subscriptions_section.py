from mws_engine.catalog.registry import get_operation, get_section
from mws_engine.models.errors import SerializationErrorCode
from mws_engine.services.serializer import WireParameter, serialize


DESTINATION = {
    "DeliveryChannel": "SQS",
    "AttributeList": {"sqsQueueUrl": "https://sqs.us-east-1.amazonaws.com/51471EXAMPLE/mws_notifications"},
}


def test_register_destination_flattens_composite_and_attribute_list():
    op = get_operation("Subscriptions", "RegisterDestination")

    result = serialize(op, {"MarketplaceId": "ATVPDKIKX0DER", "Destination": DESTINATION})

    assert result.params == (
        WireParameter("MarketplaceId", "ATVPDKIKX0DER"),
        WireParameter("Destination.DeliveryChannel", "SQS"),
        WireParameter("Destination.AttributeList.member.1.Key", "sqsQueueUrl"),
        WireParameter(
            "Destination.AttributeList.member.1.Value",
            "https://sqs.us-east-1.amazonaws.com/51471EXAMPLE/mws_notifications",
        ),
        WireParameter("Action", "RegisterDestination"),
        WireParameter("Version", "2013-07-01"),
    )


def test_create_subscription_nests_destination_under_subscription():
    op = get_operation("Subscriptions", "CreateSubscription")

    result = serialize(
        op,
        {
            "MarketplaceId": "ATVPDKIKX0DER",
            "Subscription": {
                "NotificationType": "AnyOfferChanged",
                "Destination": DESTINATION,
                "IsEnabled": True,
            },
        },
    )

    params = result.as_dict()
    assert params["Subscription.NotificationType"] == "AnyOfferChanged"
    assert params["Subscription.Destination.DeliveryChannel"] == "SQS"
    assert params["Subscription.Destination.AttributeList.member.1.Key"] == "sqsQueueUrl"
    assert params["Subscription.IsEnabled"] == "true"


def test_subscription_notification_type_is_enum_checked():
    op = get_operation("Subscriptions", "UpdateSubscription")

    result = serialize(op, {"Subscription": {"NotificationType": "Nope"}})

    assert result.error.code is SerializationErrorCode.INVALID_ENUM_VALUE
    assert result.error.parameter == "Subscription.NotificationType"


def test_top_level_notification_type_is_enum_checked():
    op = get_operation("Subscriptions", "DeleteSubscription")

    assert serialize(op, {"NotificationType": "FeePromotion"}).ok
    assert serialize(op, {"NotificationType": "feepromotion"}).error.code is SerializationErrorCode.INVALID_ENUM_VALUE


def test_destination_must_be_a_mapping():
    op = get_operation("Subscriptions", "DeregisterDestination")

    result = serialize(op, {"Destination": "SQS"})

    assert result.error.code is SerializationErrorCode.MALFORMED_INPUT_SHAPE
    assert result.error.parameter == "Destination"


def test_subscriptions_section_defaults():
    section = get_section("Subscriptions")

    assert section.defaults.path == "/Subscriptions/2013-07-01"
    assert sorted(section.enums) == ["NotificationTypes"]
    assert len(section.operations) == 10
