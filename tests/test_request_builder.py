import pytest

from mws_engine.config import settings
from mws_engine.models.errors import SerializationFailed, UnknownOperationError
from mws_engine.services.request_builder import build_request, encode_query
from mws_engine.services.serializer import WireParameter
from mws_engine.utils.logger import RequestEventLog, request_event_log


@pytest.fixture
def recorded_events(monkeypatch):
    monkeypatch.setattr(settings, "MWS_RECORD_EVENTS", True)
    request_event_log.clear()
    yield request_event_log
    request_event_log.clear()


def test_build_request_attaches_section_envelope():
    request = build_request(
        "Products",
        "GetMatchingProduct",
        {"MarketplaceId": "ATVPDKIKX0DER", "ASINList": ["B000123456", "B000654321"]},
    )

    assert request.section == "Products"
    assert request.group == "Products"
    assert request.path == "/Products/2011-10-01"
    assert request.version == "2011-10-01"
    assert request.as_dict()["ASINList.ASIN.2"] == "B000654321"
    assert request.response_data_path is None


def test_build_request_raises_on_rejected_arguments():
    with pytest.raises(SerializationFailed) as excinfo:
        build_request("Products", "GetMatchingProduct", {"MarketplaceId": "ATVPDKIKX0DER"})

    assert excinfo.value.error.parameter == "ASINList"


def test_build_request_unknown_operation():
    with pytest.raises(UnknownOperationError):
        build_request("Products", "GetEverything", {})


def test_query_string_is_rfc3986_encoded_in_emission_order():
    params = [
        WireParameter("Query", "lego star wars"),
        WireParameter("Destination.AttributeList.member.1.Value", "https://q/a~b*c"),
    ]

    assert encode_query(params) == (
        "Query=lego%20star%20wars"
        "&Destination.AttributeList.member.1.Value=https%3A%2F%2Fq%2Fa~b%2Ac"
    )


def test_prepared_request_query_string():
    request = build_request("Products", "GetServiceStatus")

    assert request.query_string() == "Action=GetServiceStatus&Version=2011-10-01"


def test_events_are_recorded_when_enabled(recorded_events):
    build_request("Products", "GetServiceStatus")
    with pytest.raises(SerializationFailed):
        build_request("Products", "GetMatchingProduct", {})

    events = recorded_events.get_events()
    assert [e["status"] for e in events] == ["ok", "rejected"]
    assert events[0]["params"] == {"Action": "GetServiceStatus", "Version": "2011-10-01"}
    assert "MissingRequiredParameter(MarketplaceId)" in events[1]["error"]


def test_events_are_not_recorded_by_default():
    request_event_log.clear()

    build_request("Products", "GetServiceStatus")

    assert request_event_log.get_events() == []


def test_event_log_masks_credentials_and_is_bounded():
    log = RequestEventLog(max_events=2)

    log.record("Sellers", "ListMarketplaceParticipations", {"SellerId": "A1B2C3D4E5F6G7", "MWSAuthToken": "short"})
    log.record("Sellers", "ListMarketplaceParticipations")
    log.record("Sellers", "ListMarketplaceParticipations", status="rejected", error="boom")

    events = log.get_events()
    assert len(events) == 2
    assert events[-1]["error"] == "boom"
    assert log.get_events(limit=1) == [events[-1]]

    first = RequestEventLog().record("S", "Op", {"SellerId": "A1B2C3D4E5F6G7", "MWSAuthToken": "short"})
    assert first["params"] == {"SellerId": "A1B2...F6G7", "MWSAuthToken": "***"}


def test_recorded_events_mask_caller_credentials(recorded_events):
    build_request(
        "Products",
        "GetServiceStatus",
        {"SellerId": "A1B2C3D4E5F6G7", "MWSAuthToken": "amzn.mws.0000-1111", "AWSAccessKeyId": 12345},
    )

    (event,) = recorded_events.get_events()
    assert event["args"] == {
        "SellerId": "A1B2...F6G7",
        "MWSAuthToken": "amzn...1111",
        "AWSAccessKeyId": "***",
    }
    assert "SellerId" not in event["params"]
