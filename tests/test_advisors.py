import pytest

import advisors
from advisors import MissingFieldError
from gateway import GatewayError

IMAGE = "data:image/png;base64,iVBORw0KGgo="


def test_crop_advice_requires_crop_and_location(app, fake_gateway):
    with pytest.raises(MissingFieldError) as exc:
        advisors.crop_advice(cropType="Wheat", location="")
    assert exc.value.fields == ['location']
    assert fake_gateway.calls == []


def test_crop_advice_parses_structured_reply(app, fake_gateway):
    fake_gateway.reply('Sure! {"dailyTip": "Irrigate at dawn", "upcomingTasks": ["Weed", "Scout"]}')

    result = advisors.crop_advice(cropType="Wheat", location="Punjab, India", growthStage="Flowering")

    assert result['cropType'] == "Wheat"
    assert result['location'] == "Punjab, India"
    assert result['advice']['dailyTip'] == "Irrigate at dawn"
    prompt = fake_gateway.last_user_text
    assert "**Wheat**" in prompt
    assert "Growth Stage: Flowering" in prompt
    assert "Soil Type" not in prompt


def test_crop_advice_without_json_keeps_reply_as_tip(app, fake_gateway):
    fake_gateway.reply("Water twice this week.")
    result = advisors.crop_advice(cropType="Rice (Paddy)", location="Kerala, India")
    assert result['advice'] == {"dailyTip": "Water twice this week."}


def test_crop_advice_with_broken_json_flags_error(app, fake_gateway):
    fake_gateway.reply('{"dailyTip": "Irrigate", }')
    result = advisors.crop_advice(cropType="Rice (Paddy)", location="Kerala, India")
    assert result['advice']['error'] == "Could not parse structured advice"


def test_scan_crop_health_sends_image_to_vision_model(app, fake_gateway):
    fake_gateway.reply({"overallHealthScore": 82, "cropType": "Maize (Corn)", "categories": {}})

    health = advisors.scan_crop_health(imageBase64=IMAGE, cropType="Maize (Corn)")

    assert health['overallHealthScore'] == 82
    payload = fake_gateway.last_payload
    assert payload['model'] == app.config['AI_VISION_MODEL']
    assert payload['max_tokens'] == 2000
    assert "The crop type is: Maize (Corn)" in payload['messages'][0]['content']
    assert payload['messages'][1]['content'][1]['image_url']['url'] == IMAGE


def test_scan_crop_health_falls_back_with_reply_as_summary(app, fake_gateway):
    fake_gateway.reply("The leaves look yellow.")
    health = advisors.scan_crop_health(imageBase64=IMAGE)
    assert health['overallHealthScore'] == 70
    assert health['summary'] == "The leaves look yellow."
    assert health['cropType'] == "Unknown"
    assert set(health['categories']) == {key for key, _ in advisors.HEALTH_CATEGORIES}


def test_scan_crop_health_empty_reply_is_an_error(app, fake_gateway):
    fake_gateway.reply("")
    with pytest.raises(GatewayError) as exc:
        advisors.scan_crop_health(imageBase64=IMAGE)
    assert exc.value.message == "No response from AI"


def test_scan_crop_health_requires_image(app):
    with pytest.raises(MissingFieldError):
        advisors.scan_crop_health(imageBase64=None)


@pytest.mark.parametrize("score, band", [(95, 'good'), (80, 'good'), (65, 'fair'), (40, 'poor'),
                                         (12, 'critical'), ("85", 'good'), (None, 'critical')])
def test_health_score_band(score, band):
    assert advisors.health_score_band(score) == band


def test_simulate_crop_uses_default_budget(app, fake_gateway):
    fake_gateway.reply({"expectedYield": "22 quintals/acre", "pestRisk": "Low"})

    result = advisors.simulate_crop(crop="Cotton", region="Gujarat, India", landSize=3,
                                    irrigationType="drip")

    assert result['expectedYield'] == "22 quintals/acre"
    assert "Budget: ₹50,000" in fake_gateway.last_user_text
    assert "Irrigation Type: drip" in fake_gateway.last_user_text


def test_simulate_crop_fallback_is_a_fresh_copy(app, fake_gateway):
    fake_gateway.reply("I cannot simulate that.")
    first = advisors.simulate_crop(crop="Cotton", region="Gujarat, India", landSize=3,
                                   budget=80000, irrigationType="drip")
    first['recommendations'].append("mutated")
    second = advisors.simulate_crop(crop="Cotton", region="Gujarat, India", landSize=3,
                                    budget=80000, irrigationType="drip")
    assert second == advisors.SIMULATION_FALLBACK


def test_simulate_crop_requires_land_size(app):
    with pytest.raises(MissingFieldError) as exc:
        advisors.simulate_crop(crop="Cotton", region="Gujarat, India", irrigationType="drip")
    assert exc.value.fields == ['landSize']


def test_predict_harvest_includes_optional_conditions(app, fake_gateway):
    fake_gateway.reply({"harvestYield": "18 quintals/acre", "confidenceScore": "72%"})

    result = advisors.predict_harvest(crop="Wheat", region="Haryana, India", plantingDate="2024-11-10",
                                      fieldConditions="Slight waterlogging")

    assert result['confidenceScore'] == "72%"
    assert "Current Field Conditions: Slight waterlogging" in fake_gateway.last_user_text


def test_predict_harvest_fallback(app, fake_gateway):
    fake_gateway.reply("No idea.")
    result = advisors.predict_harvest(crop="Wheat", region="Haryana, India", plantingDate="2024-11-10")
    assert result == advisors.PREDICTION_FALLBACK


def test_market_analysis_uses_warmer_temperature(app, fake_gateway):
    fake_gateway.reply({"currentPrice": 2100, "trend": "stable"})

    result = advisors.market_analysis(crop="Wheat", region="Punjab, India", season="rabi", farmSize=2.5)

    assert result == {"currentPrice": 2100, "trend": "stable"}
    assert fake_gateway.last_payload['temperature'] == 0.7
    assert "during rabi season for a 2.5 hectare farm" in fake_gateway.last_user_text


def test_market_analysis_fallback(app, fake_gateway):
    fake_gateway.reply("Markets are volatile.")
    result = advisors.market_analysis(crop="Wheat", region="Punjab, India")
    assert result['currentPrice'] == 2500
    assert result['predictedPrice'] == 2650
    assert len(result['nearbyMarkets']) == 3


def fake_conditions(latitude, longitude):
    return (
        {'temperature': 31, 'humidity': 78, 'conditions': "Partly cloudy", 'weatherCode': 2,
         'windSpeed': 12, 'uvIndex': 8, 'precipitation': 0},
        {'high': 34, 'low': 25, 'precipitationChance': 40, 'precipitationSum': 2.1},
    )


def test_weather_advice_reads_fenced_json(app, fake_gateway):
    fake_gateway.reply('Here you go:\n```json\n{"summary": "Warm and humid", "pestRisk": "High"}\n```')

    data = advisors.weather_advice(latitude=30.9, longitude=75.85, location="Ludhiana, India",
                                   fetch_conditions=fake_conditions)

    assert data['location'] == "Ludhiana, India"
    assert data['weather']['temperature'] == 31
    assert data['forecast']['precipitationChance'] == 40
    assert data['advice'] == {"summary": "Warm and humid", "pestRisk": "High"}
    assert "Humidity: 78%" in fake_gateway.last_user_text


def test_weather_advice_keeps_raw_text_when_unparseable(app, fake_gateway):
    fake_gateway.reply("Stay hydrated and delay spraying.")
    data = advisors.weather_advice(latitude=30.9, longitude=75.85, fetch_conditions=fake_conditions)
    assert data['advice'] == {"rawAdvice": "Stay hydrated and delay spraying."}
    assert data['location'] == "30.9, 75.85"


def test_weather_advice_requires_coordinates(app):
    with pytest.raises(MissingFieldError):
        advisors.weather_advice(location="Somewhere", fetch_conditions=fake_conditions)


def test_identify_pest_defaults_missing_lists(app, fake_gateway):
    fake_gateway.reply({"pestName": "Brown Planthopper", "threatLevel": "High"})

    result = advisors.identify_pest(imageBase64=IMAGE, cropType="Rice (Paddy)")

    assert result['pestName'] == "Brown Planthopper"
    assert result['treatment'] == []
    assert result['prevention'] == []
    assert fake_gateway.last_payload['model'] == app.config['AI_VISION_MODEL']


def test_identify_pest_returns_raw_response_on_parse_failure(app, fake_gateway):
    fake_gateway.reply("Looks like aphids, spray neem oil.")
    result = advisors.identify_pest(imageBase64=IMAGE)
    assert result == {"rawResponse": "Looks like aphids, spray neem oil."}


def test_identify_pest_propagates_rate_limit(app, fake_gateway):
    fake_gateway.fail(429)
    with pytest.raises(GatewayError) as exc:
        advisors.identify_pest(imageBase64=IMAGE)
    assert exc.value.status == 429
