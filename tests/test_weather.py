import pytest
import requests

import weather
from conftest import FakeResponse

FORECAST_PAYLOAD = {
    'current': {
        'temperature_2m': 29.4,
        'relative_humidity_2m': 81,
        'precipitation': 0.4,
        'weather_code': 61,
        'wind_speed_10m': 9.7,
        'uv_index': 5.2,
    },
    'daily': {
        'weather_code': [63],
        'temperature_2m_max': [32.1],
        'temperature_2m_min': [24.8],
        'precipitation_sum': [12.5],
        'precipitation_probability_max': [85],
        'uv_index_max': [7.1],
    },
}


def test_describe_weather_code():
    assert weather.describe_weather_code(0) == "Clear sky"
    assert weather.describe_weather_code(99) == "Thunderstorm with heavy hail"
    assert weather.describe_weather_code(42) == "Unknown"


@pytest.mark.parametrize("code, icon", [(0, 'sun'), (1, 'sun'), (3, 'cloud'), (61, 'rain'),
                                        (82, 'rain'), (95, 'cloud'), (None, 'cloud')])
def test_weather_icon(code, icon):
    assert weather.weather_icon(code) == icon


def test_geocode_returns_first_match(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params)
        return FakeResponse({'results': [{'name': "Ludhiana", 'country': "India",
                                          'latitude': 30.9, 'longitude': 75.85}]})

    monkeypatch.setattr(requests, 'get', fake_get)

    place = weather.geocode("Ludhiana")

    assert place == {'latitude': 30.9, 'longitude': 75.85, 'label': "Ludhiana, India"}
    assert seen['url'] == weather.GEOCODING_URL
    assert seen['params'] == {'name': "Ludhiana", 'count': 1}


def test_geocode_without_results_returns_none(monkeypatch):
    monkeypatch.setattr(requests, 'get', lambda url, params=None, timeout=None: FakeResponse({}))
    assert weather.geocode("Atlantis") is None


def test_geocode_network_failure_raises_weather_error(monkeypatch):
    def fake_get(url, params=None, timeout=None):
        raise requests.exceptions.Timeout("timed out")

    monkeypatch.setattr(requests, 'get', fake_get)
    with pytest.raises(weather.WeatherError):
        weather.geocode("Ludhiana")


def test_fetch_conditions_flattens_current_and_today(monkeypatch):
    seen = {}

    def fake_get(url, params=None, timeout=None):
        seen.update(url=url, params=params)
        return FakeResponse(FORECAST_PAYLOAD)

    monkeypatch.setattr(requests, 'get', fake_get)

    current, forecast = weather.fetch_conditions(30.9, 75.85)

    assert seen['url'] == weather.FORECAST_URL
    assert seen['params']['timezone'] == 'auto'
    assert current == {
        'temperature': 29.4,
        'humidity': 81,
        'conditions': "Slight rain",
        'weatherCode': 61,
        'windSpeed': 9.7,
        'uvIndex': 5.2,
        'precipitation': 0.4,
    }
    assert forecast == {'high': 32.1, 'low': 24.8, 'precipitationChance': 85, 'precipitationSum': 12.5}


def test_fetch_conditions_http_error(monkeypatch):
    monkeypatch.setattr(requests, 'get', lambda url, params=None, timeout=None: FakeResponse({}, 500))
    with pytest.raises(weather.WeatherError) as exc:
        weather.fetch_conditions(30.9, 75.85)
    assert str(exc.value) == "Failed to fetch weather data"
