"""
Open-Meteo geocoding and forecast lookups (free, no API key).
"""
import logging

import requests

logger = logging.getLogger(__name__)

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}

CURRENT_FIELDS = "temperature_2m,relative_humidity_2m,precipitation,weather_code,wind_speed_10m,uv_index"
DAILY_FIELDS = ("weather_code,temperature_2m_max,temperature_2m_min,precipitation_sum,"
                "precipitation_probability_max,uv_index_max")


class WeatherError(Exception):
    pass


def describe_weather_code(code):
    return WEATHER_CODES.get(code, "Unknown")


def weather_icon(code):
    """Icon name for a WMO code: sun, cloud or rain."""
    if code in (0, 1):
        return 'sun'
    if code is not None and 51 <= code <= 82:
        return 'rain'
    return 'cloud'


def geocode(name, timeout=10):
    """
    Looks up a place name. Returns a dict with latitude, longitude and a
    display label, or None when nothing matches.
    """
    try:
        response = requests.get(GEOCODING_URL, params={'name': name, 'count': 1}, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error(f"Geocoding failed for {name!r}: {e}")
        raise WeatherError("Failed to find location. Please try again.") from e

    results = data.get('results') or []
    if not results:
        return None
    first = results[0]
    return {
        'latitude': first['latitude'],
        'longitude': first['longitude'],
        'label': f"{first.get('name', name)}, {first.get('country') or ''}".rstrip(", "),
    }


def fetch_conditions(latitude, longitude, timeout=10):
    """
    Current conditions plus today's forecast, flattened into the shape the
    weather advisor prompt and page use.
    """
    params = {
        'latitude': latitude,
        'longitude': longitude,
        'current': CURRENT_FIELDS,
        'daily': DAILY_FIELDS,
        'timezone': 'auto',
    }
    try:
        response = requests.get(FORECAST_URL, params=params, timeout=timeout)
        response.raise_for_status()
        data = response.json()
        current = data['current']
        daily = data['daily']
    except (requests.exceptions.RequestException, ValueError, KeyError) as e:
        logger.error(f"Weather fetch failed for {latitude},{longitude}: {e}")
        raise WeatherError("Failed to fetch weather data") from e

    logger.info(f"Weather data fetched: {current}")
    code = current.get('weather_code')
    weather = {
        'temperature': current.get('temperature_2m'),
        'humidity': current.get('relative_humidity_2m'),
        'conditions': describe_weather_code(code),
        'weatherCode': code,
        'windSpeed': current.get('wind_speed_10m'),
        'uvIndex': current.get('uv_index'),
        'precipitation': current.get('precipitation'),
    }
    forecast = {
        'high': _first(daily.get('temperature_2m_max')),
        'low': _first(daily.get('temperature_2m_min')),
        'precipitationChance': _first(daily.get('precipitation_probability_max')),
        'precipitationSum': _first(daily.get('precipitation_sum')),
    }
    return weather, forecast


def _first(values):
    return values[0] if values else None
