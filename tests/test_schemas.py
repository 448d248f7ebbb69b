import pytest
from pydantic import ValidationError

from app.schemas.quote import AdditionalService, City, QuoteRequest, ServiceFrequency


def test_camel_case_payload(make_request):
    req = make_request(serviceFrequency="one-time", additionalServices=["carpet"])

    assert req.client_name == "Acme Offices"
    assert req.city is City.QUEENS
    assert req.service_frequency is ServiceFrequency.ONE_TIME
    assert req.additional_services == [AdditionalService.CARPET]


def test_additional_services_optional(make_request):
    assert make_request(additionalServices=None).additional_services == []


def test_additional_services_collapse_duplicates(make_request):
    req = make_request(additionalServices=["windows", "disinfection", "windows"])
    assert req.additional_services == [AdditionalService.WINDOWS, AdditionalService.DISINFECTION]


@pytest.mark.parametrize(
    "overrides",
    [
        {"propertySize": 0},
        {"propertySize": -10},
        {"propertySize": float("inf")},
        {"propertySize": float("nan")},
        {"propertySize": "5000"},
        {"propertySize": True},
        {"city": "Brooklyn"},
        {"cleaningType": "express"},
        {"serviceFrequency": "yearly"},
        {"additionalServices": ["pool"]},
        {"email": "not-an-email"},
        {"clientName": "   "},
        {"address": ""},
    ],
)
def test_invalid_input_rejected(make_request, overrides):
    with pytest.raises(ValidationError):
        make_request(**overrides)


def test_request_is_immutable(make_request):
    req = make_request()
    with pytest.raises(ValidationError):
        req.property_size = 10


def test_property_size_accepts_json_integers(make_request):
    assert make_request(propertySize=1200).property_size == 1200.0
