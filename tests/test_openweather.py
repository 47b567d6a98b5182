"""Tests for the OpenWeather adapter."""

import httpx
import pytest

from adapters.openweather import WeatherAPIError, fetch_current_weather
from core.domain.models import WeatherQuery


def test_fetch_returns_parsed_payload(mock_api, requests_seen, settings):
    clients = mock_api(lambda request: httpx.Response(200, json={"main": {"temp": 21.5}}))

    payload = fetch_current_weather(WeatherQuery(api_key="k", city="Pforzheim"), settings=settings)

    assert payload == {"main": {"temp": 21.5}}
    assert len(requests_seen) == 1
    request = requests_seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.test"
    assert request.url.path == "/data/2.5/weather"
    assert request.url.params["q"] == "Pforzheim"
    assert request.url.params["appid"] == "k"
    assert request.url.params["units"] == "metric"
    assert clients[0].is_closed


def test_fetch_embeds_city_verbatim(mock_api, requests_seen, settings):
    mock_api(lambda request: httpx.Response(200, json={}))

    fetch_current_weather(WeatherQuery(api_key="k", city="New York"), settings=settings)

    assert requests_seen[0].url.params["q"] == "New York"


def test_fetch_raises_with_raw_body_on_error_status(mock_api, settings):
    clients = mock_api(lambda request: httpx.Response(401, text="Invalid API key"))

    with pytest.raises(WeatherAPIError) as excinfo:
        fetch_current_weather(WeatherQuery(api_key="bad", city="Pforzheim"), settings=settings)

    assert excinfo.value.status_code == 401
    assert excinfo.value.body == "Invalid API key"
    assert "Weather API error 401: Invalid API key" in str(excinfo.value)
    assert clients[0].is_closed


def test_fetch_raises_on_invalid_json(mock_api, settings):
    mock_api(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(ValueError):
        fetch_current_weather(WeatherQuery(api_key="k", city="Pforzheim"), settings=settings)


def test_client_closed_after_network_error(mock_api, settings):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    clients = mock_api(refuse)

    with pytest.raises(httpx.ConnectError):
        fetch_current_weather(WeatherQuery(api_key="k", city="Pforzheim"), settings=settings)

    assert clients[0].is_closed


def test_redacted_url_hides_api_key():
    query = WeatherQuery(api_key="secret", city="Pforzheim")

    assert query.to_url("https://x") == "https://x?q=Pforzheim&appid=secret&units=metric"
    assert "secret" not in query.redacted_url("https://x")
