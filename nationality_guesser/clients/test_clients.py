import asyncio
import json

import httpx
import pytest

from nationality_guesser.clients import CountryClient, IdentityClient, PredictionClient, UpstreamError
from nationality_guesser.clients.identity import find_attribute
from nationality_guesser.models import UserAttribute


def _transport(handler, calls: list[httpx.Request] | None = None) -> httpx.MockTransport:
    def wrapped(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return handler(request)

    return httpx.MockTransport(wrapped)


def _no_network(request: httpx.Request) -> httpx.Response:
    raise AssertionError(f"Unexpected request: {request.url}")


# ── predictions ──────────────────────────────────────────────────────────


def test_fetch_predictions_keeps_service_order() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "name": "ethan",
                "country": [
                    {"country_id": "US", "probability": 0.8},
                    {"country_id": "GB", "probability": 0.15},
                ],
            },
        )

    client = PredictionClient("https://nationalize.test", transport=_transport(handler, calls))
    predictions = asyncio.run(client.fetch_predictions("Ethan"))

    assert [(p.country_id, p.probability) for p in predictions] == [("US", 0.8), ("GB", 0.15)]
    assert calls[0].method == "GET"
    assert calls[0].url.params["name"] == "Ethan"


def test_fetch_predictions_returns_empty_list_for_unknown_name() -> None:
    handler = lambda request: httpx.Response(200, json={"name": "zzqx", "country": []})
    client = PredictionClient("https://nationalize.test", transport=_transport(handler))

    assert asyncio.run(client.fetch_predictions("zzqx")) == []


def test_fetch_predictions_skips_request_for_blank_name() -> None:
    client = PredictionClient("https://nationalize.test", transport=_transport(_no_network))

    assert asyncio.run(client.fetch_predictions("   ")) == []


def test_fetch_predictions_raises_upstream_error_on_http_failure() -> None:
    handler = lambda request: httpx.Response(500, text="boom")
    client = PredictionClient("https://nationalize.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_predictions("Ethan"))


def test_fetch_predictions_raises_upstream_error_on_malformed_body() -> None:
    handler = lambda request: httpx.Response(200, text="<html>not json</html>")
    client = PredictionClient("https://nationalize.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_predictions("Ethan"))


def test_fetch_predictions_raises_upstream_error_on_unexpected_shape() -> None:
    handler = lambda request: httpx.Response(200, json={"country": [{"probability": "lots"}]})
    client = PredictionClient("https://nationalize.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_predictions("Ethan"))


def test_fetch_predictions_raises_upstream_error_when_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route to host", request=request)

    client = PredictionClient("https://nationalize.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_predictions("Ethan"))


# ── countries ────────────────────────────────────────────────────────────


def test_fetch_countries_with_no_codes_makes_no_request() -> None:
    client = CountryClient("https://countries.test", transport=_transport(_no_network))

    assert asyncio.run(client.fetch_countries([])) == []


def test_fetch_countries_joins_codes_with_semicolons() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"name": "United States of America", "alpha2Code": "US", "demonym": "American"},
                {"name": "United Kingdom", "alpha2Code": "GB", "demonym": "British"},
            ],
        )

    client = CountryClient("https://countries.test", transport=_transport(handler, calls))
    countries = asyncio.run(client.fetch_countries(["US", "GB"]))

    assert [(c.code, c.demonym) for c in countries] == [("US", "American"), ("GB", "British")]
    assert calls[0].url.params["codes"] == "US;GB"


def test_fetch_countries_drops_unmatched_codes() -> None:
    handler = lambda request: httpx.Response(
        200, json=[{"alpha2Code": "US", "demonym": "American"}, None]
    )
    client = CountryClient("https://countries.test", transport=_transport(handler))

    countries = asyncio.run(client.fetch_countries(["US", "XX"]))

    assert [c.code for c in countries] == ["US"]


def test_fetch_countries_raises_upstream_error_on_http_failure() -> None:
    handler = lambda request: httpx.Response(503)
    client = CountryClient("https://countries.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_countries(["US"]))


# ── identity ─────────────────────────────────────────────────────────────


def test_fetch_given_name_posts_access_token_with_cognito_headers() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "Username": "u-1",
                "UserAttributes": [
                    {"Name": "sub", "Value": "abc"},
                    {"Name": "given_name", "Value": "Ethan"},
                ],
            },
        )

    client = IdentityClient("https://cognito.test/", transport=_transport(handler, calls))
    name = asyncio.run(client.fetch_given_name("token-123"))

    assert name == "Ethan"
    request = calls[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {"AccessToken": "token-123"}
    assert request.headers["Content-Type"] == "application/x-amz-json-1.1"
    assert request.headers["X-Amz-Target"] == "AWSCognitoIdentityProviderService.GetUser"


def test_fetch_given_name_is_empty_when_attribute_missing() -> None:
    handler = lambda request: httpx.Response(200, json={"UserAttributes": [{"Name": "email", "Value": "a@b.c"}]})
    client = IdentityClient("https://cognito.test/", transport=_transport(handler))

    assert asyncio.run(client.fetch_given_name("token-123")) == ""


def test_fetch_given_name_without_token_makes_no_request() -> None:
    client = IdentityClient("https://cognito.test/", transport=_transport(_no_network))

    assert asyncio.run(client.fetch_given_name("")) == ""


def test_fetch_given_name_raises_upstream_error_on_rejected_token() -> None:
    handler = lambda request: httpx.Response(400, json={"__type": "NotAuthorizedException"})
    client = IdentityClient("https://cognito.test/", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_given_name("expired"))


def test_find_attribute_first_match_wins() -> None:
    attributes = [
        UserAttribute(Name="given_name", Value="Ethan"),
        UserAttribute(Name="given_name", Value="Other"),
    ]

    assert find_attribute(attributes, "given_name") == "Ethan"
    assert find_attribute(attributes, "family_name") == ""


def test_fetch_countries_treats_404_as_no_match() -> None:
    handler = lambda request: httpx.Response(404, json={"status": 404, "message": "Not Found"})
    client = CountryClient("https://countries.test", transport=_transport(handler))

    assert asyncio.run(client.fetch_countries(["XX"])) == []


def test_fetch_countries_other_client_errors_stay_fatal() -> None:
    handler = lambda request: httpx.Response(400, json={"status": 400, "message": "Bad Request"})
    client = CountryClient("https://countries.test", transport=_transport(handler))

    with pytest.raises(UpstreamError):
        asyncio.run(client.fetch_countries(["US"]))


def test_fetch_countries_accepts_single_bare_object() -> None:
    handler = lambda request: httpx.Response(200, json={"alpha2Code": "FR", "demonym": "French"})
    client = CountryClient("https://countries.test", transport=_transport(handler))

    countries = asyncio.run(client.fetch_countries(["FR"]))

    assert [(c.code, c.demonym) for c in countries] == [("FR", "French")]


def test_fetch_countries_keeps_records_with_null_demonym() -> None:
    handler = lambda request: httpx.Response(
        200,
        json=[{"alpha2Code": "US", "demonym": "American"}, {"alpha2Code": "AQ", "demonym": None}],
    )
    client = CountryClient("https://countries.test", transport=_transport(handler))

    countries = asyncio.run(client.fetch_countries(["US", "AQ"]))

    assert [(c.code, c.demonym) for c in countries] == [("US", "American"), ("AQ", None)]


def test_clients_default_to_configured_endpoints() -> None:
    from nationality_guesser.settings import get_settings

    settings = get_settings()
    calls: list[httpx.Request] = []
    handler = lambda request: httpx.Response(200, json={"country": []})

    asyncio.run(PredictionClient(transport=_transport(handler, calls)).fetch_predictions("Ethan"))

    assert calls[0].url.host == httpx.URL(settings.nationalize_url).host
    assert CountryClient()._base_url == settings.countries_url
    assert IdentityClient()._attribute == settings.given_name_attribute
