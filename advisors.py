"""
Prompt builders for the advisory endpoints.

Every function takes the form fields of one endpoint, asks the AI gateway,
and returns a dict ready to be rendered or serialised. When the reply does
not contain usable JSON each endpoint falls back to a hand-written payload.
"""
import copy
import logging
from datetime import date

from flask import current_app

from gateway import GatewayError, NoJsonFound, chat_completion, extract_json, image_message

logger = logging.getLogger(__name__)


class MissingFieldError(ValueError):
    def __init__(self, fields):
        self.fields = fields
        super().__init__(f"Missing required field(s): {', '.join(fields)}")


def require(data, *fields):
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        raise MissingFieldError(missing)


def _today_label():
    today = date.today()
    return f"{today:%A, %B} {today.day}, {today.year}"


# --- Crop advisor ---

def crop_advice(cropType=None, location=None, growthStage=None, soilType=None):
    require(locals(), 'cropType', 'location')

    prompt = f"""You are AgriNova's crop advisor for Southern Asian farmers. Today is {_today_label()}.

A farmer is growing **{cropType}** in **{location}**.
{f'Growth Stage: {growthStage}' if growthStage else ''}
{f'Soil Type: {soilType}' if soilType else ''}

Provide comprehensive, actionable advice in the following JSON format:
{{
  "dailyTip": "A specific tip for today based on the current date and season",
  "wateringAdvice": "Detailed watering recommendations",
  "fertilizerAdvice": "Fertilizer type and schedule",
  "pestWatch": "Current pest threats to watch for",
  "weatherConsiderations": "Weather-related advice for this time of year",
  "upcomingTasks": ["Task 1", "Task 2", "Task 3"],
  "harvestEstimate": "Estimated time to harvest if applicable",
  "marketTips": "Current market insights for this crop",
  "sustainabilityTip": "An eco-friendly farming tip"
}}

Consider the monsoon patterns, local climate, and agricultural practices of the region. Be specific and practical."""

    content = chat_completion([{"role": "user", "content": prompt}])

    try:
        advice = extract_json(content)
    except NoJsonFound:
        advice = {"dailyTip": content}
    except ValueError:
        logger.warning("Crop advisor returned malformed JSON")
        advice = {"dailyTip": content, "error": "Could not parse structured advice"}

    return {"advice": advice, "cropType": cropType, "location": location}


# --- Crop health scanner ---

HEALTH_SYSTEM_PROMPT = """You are an expert agricultural crop health analyst. Analyze the image of crops and provide a detailed health assessment.

Categorize different parts of the visible crops into these health categories:
1. **Healthy** - Vibrant, well-nourished plants with optimal growth
2. **Needs Attention** - Minor issues that can be corrected with proper care
3. **At Risk** - Showing signs of disease, nutrient deficiency, or pest damage
4. **Severely Damaged** - Unlikely to recover, may need to be removed

For each category found, provide:
- Estimated percentage of the crop area
- Visual indicators observed
- Recommended actions

Also provide:
- Overall health score (0-100)
- Primary concerns
- Immediate action items
- Long-term recommendations

{crop_line}

Respond in JSON format:
{{
  "cropType": "identified or provided crop type",
  "overallHealthScore": 85,
  "categories": {{
    "healthy": {{ "percentage": 60, "indicators": ["..."], "actions": ["..."] }},
    "needsAttention": {{ "percentage": 25, "indicators": ["..."], "actions": ["..."] }},
    "atRisk": {{ "percentage": 10, "indicators": ["..."], "actions": ["..."] }},
    "severelyDamaged": {{ "percentage": 5, "indicators": ["..."], "actions": ["..."] }}
  }},
  "primaryConcerns": ["..."],
  "immediateActions": ["..."],
  "longTermRecommendations": ["..."],
  "summary": "Brief overall assessment"
}}"""

HEALTH_CATEGORIES = [
    ('healthy', 'Healthy'),
    ('needsAttention', 'Needs Attention'),
    ('atRisk', 'At Risk'),
    ('severelyDamaged', 'Severely Damaged'),
]


def health_fallback(cropType, content):
    return {
        "cropType": cropType or "Unknown",
        "overallHealthScore": 70,
        "summary": content,
        "categories": {
            "healthy": {"percentage": 50, "indicators": ["Unable to parse detailed analysis"],
                        "actions": ["Consult an agronomist"]},
            "needsAttention": {"percentage": 30, "indicators": [], "actions": []},
            "atRisk": {"percentage": 15, "indicators": [], "actions": []},
            "severelyDamaged": {"percentage": 5, "indicators": [], "actions": []},
        },
        "primaryConcerns": ["Unable to perform detailed analysis"],
        "immediateActions": ["Take clearer photos", "Consult local agricultural expert"],
        "longTermRecommendations": ["Regular monitoring recommended"],
    }


def scan_crop_health(imageBase64=None, cropType=None):
    if not imageBase64:
        raise MissingFieldError(['imageBase64'])

    crop_line = (f"The crop type is: {cropType}" if cropType
                 else "Identify the crop type if possible.")
    messages = [
        {"role": "system", "content": HEALTH_SYSTEM_PROMPT.format(crop_line=crop_line)},
        image_message("Analyze this crop image for health assessment.", imageBase64),
    ]
    content = chat_completion(messages, model=_vision_model(), max_tokens=2000)
    if not content:
        raise GatewayError("No response from AI", 500)

    try:
        return extract_json(content)
    except ValueError as e:
        logger.warning(f"Crop health parse error: {e}")
        return health_fallback(cropType, content)


def health_score_band(score):
    """Colour band used by the health gauge."""
    try:
        score = float(score)
    except (TypeError, ValueError):
        score = 0
    if score >= 80:
        return 'good'
    if score >= 60:
        return 'fair'
    if score >= 40:
        return 'poor'
    return 'critical'


# --- Crop simulator ---

SIMULATOR_SYSTEM_PROMPT = """You are an expert agricultural simulator with deep knowledge of farming in Southern Asia (India, Bangladesh, Pakistan, Sri Lanka, Nepal, Bhutan, Maldives).

You must provide realistic crop simulation results based on the parameters provided. Consider:
- Regional climate patterns and monsoon seasons
- Local market conditions and crop prices in Indian Rupees
- Common pests and diseases for the region
- Water requirements based on irrigation type
- Typical yields per acre for the region

Always respond in JSON format with these exact fields:
{
  "expectedYield": "X quintals/acre",
  "profitEstimate": "₹X,XX,XXX",
  "waterRequirement": "X,XXX liters/acre",
  "pestRisk": "Low/Medium/High",
  "bestPlantingWindow": "Month - Month",
  "recommendations": ["recommendation1", "recommendation2", "recommendation3", "recommendation4"],
  "monthlyBreakdown": [
    {"month": "Month1", "activity": "Main activity", "risk": "Low/Medium/High"},
    {"month": "Month2", "activity": "Main activity", "risk": "Low/Medium/High"},
    {"month": "Month3", "activity": "Main activity", "risk": "Low/Medium/High"},
    {"month": "Month4", "activity": "Main activity", "risk": "Low/Medium/High"}
  ]
}"""

SIMULATION_FALLBACK = {
    "expectedYield": "Not available",
    "profitEstimate": "Not available",
    "waterRequirement": "Not available",
    "pestRisk": "Medium",
    "bestPlantingWindow": "Consult your local agricultural extension office",
    "recommendations": [
        "Test your soil before the season starts",
        "Choose a certified seed variety suited to your region",
        "Plan irrigation around the expected monsoon onset",
        "Keep a record of input costs to track profitability",
    ],
    "monthlyBreakdown": [],
}

DEFAULT_BUDGET = 50000


def simulate_crop(crop=None, region=None, landSize=None, budget=None, irrigationType=None):
    require(locals(), 'crop', 'region', 'landSize', 'irrigationType')
    budget = DEFAULT_BUDGET if budget in (None, "") else budget

    user_prompt = f"""Simulate growing {crop} in {region} with the following parameters:
- Land Size: {landSize} acres
- Budget: ₹{_format_number(budget)}
- Irrigation Type: {irrigationType}

Provide a realistic simulation of what to expect for the next growing season. Consider local conditions, typical yields, market prices, and common challenges."""

    content = chat_completion([
        {"role": "system", "content": SIMULATOR_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ])
    logger.info(f"AI response: {content}")

    try:
        return extract_json(content)
    except ValueError as e:
        logger.warning(f"Simulation parse error: {e}")
        return copy.deepcopy(SIMULATION_FALLBACK)


# --- Harvest predictor ---

HARVEST_SYSTEM_PROMPT = """You are an expert agricultural analyst with access to global crop data, weather patterns, and market trends for Southern Asia (India, Bangladesh, Pakistan, Sri Lanka, Nepal, Bhutan, Maldives).

Provide harvest predictions based on:
- Historical yield data for the region
- Current weather patterns and forecasts
- Market price trends
- Common pest and disease patterns
- Regional agricultural challenges

Always respond in JSON format with these exact fields:
{
  "harvestYield": "X quintals/acre",
  "yieldTrend": "+X% or -X%",
  "marketPrice": "₹X,XXX/quintal",
  "priceTrend": "+X% expected or -X% expected",
  "weatherOutlook": "Description of expected weather conditions until harvest",
  "potentialProblems": [
    {"issue": "Problem name", "probability": "X%", "severity": "Low/Medium/High"},
    {"issue": "Problem name", "probability": "X%", "severity": "Low/Medium/High"},
    {"issue": "Problem name", "probability": "X%", "severity": "Low/Medium/High"}
  ],
  "marketAnalysis": "Analysis of market conditions and best time to sell",
  "recommendations": ["recommendation1", "recommendation2", "recommendation3", "recommendation4"],
  "confidenceScore": "X%"
}"""

PREDICTION_FALLBACK = {
    "harvestYield": "Not available",
    "yieldTrend": "0%",
    "marketPrice": "Not available",
    "priceTrend": "0% expected",
    "weatherOutlook": "Weather outlook unavailable. Check the weather advisor for today's conditions.",
    "potentialProblems": [],
    "marketAnalysis": "Monitor local mandi prices and government MSP announcements before selling.",
    "recommendations": [
        "Scout fields weekly for pests and disease",
        "Keep drainage channels clear ahead of heavy rain",
        "Plan harvest labour and storage in advance",
    ],
    "confidenceScore": "0%",
}


def predict_harvest(crop=None, region=None, plantingDate=None, fieldConditions=None):
    require(locals(), 'crop', 'region', 'plantingDate')

    conditions_line = f"- Current Field Conditions: {fieldConditions}" if fieldConditions else ""
    user_prompt = f"""Predict the harvest outcomes for:
- Crop: {crop}
- Region: {region}
- Planting Date: {plantingDate}
{conditions_line}

Based on global agricultural data and regional patterns, provide predictions for:
1. Expected yield compared to regional averages
2. Market price trends and best selling window
3. Potential problems and their likelihood
4. Weather outlook until expected harvest
5. Actionable recommendations"""

    content = chat_completion([
        {"role": "system", "content": HARVEST_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ])
    logger.info(f"AI response: {content}")

    try:
        return extract_json(content)
    except ValueError as e:
        logger.warning(f"Prediction parse error: {e}")
        return copy.deepcopy(PREDICTION_FALLBACK)


# --- Market advisor ---

MARKET_SYSTEM_PROMPT = """You are an expert agricultural market analyst for South Asia.

Your task is to provide realistic market analysis for crops based on:
- Historical price patterns and seasonal trends
- Regional market dynamics and infrastructure
- Supply-demand factors
- Weather impact on yields
- Government policies (MSP, subsidies)
- Export/import trends

Always provide prices in Indian Rupees (INR) per quintal (100 kg).
Base your estimates on realistic market data for the region."""

MARKET_FALLBACK = {
    "currentPrice": 2500,
    "predictedPrice": 2650,
    "priceChange": 6,
    "trend": "up",
    "confidence": 75,
    "bestSellingTime": "2-3 weeks after harvest",
    "marketDemand": "medium",
    "profitabilityScore": 7,
    "recommendations": [
        "Monitor local mandi prices daily",
        "Consider storage if prices are expected to rise",
        "Check government MSP rates before selling",
    ],
    "riskFactors": [
        "Weather-related yield variations",
        "Market price volatility",
    ],
    "nearbyMarkets": [
        {"name": "Local Mandi", "distance": "10 km", "price": 2480},
        {"name": "District Market", "distance": "25 km", "price": 2520},
        {"name": "Regional Hub", "distance": "50 km", "price": 2550},
    ],
    "seasonalInsight": "Prices typically stabilize after harvest season peak.",
}


def market_analysis(crop=None, region=None, season=None, farmSize=None):
    require(locals(), 'crop', 'region')
    logger.info(f"Market Advisor request: crop={crop} region={region} season={season} farmSize={farmSize}")

    season_part = f" during {season} season" if season else ""
    size_part = f" for a {farmSize} hectare farm" if farmSize else ""
    user_prompt = f"""Analyze the market for {crop} in {region}{season_part}{size_part}.

Provide a JSON response with this exact structure:
{{
  "currentPrice": <number: realistic current market price in INR per quintal>,
  "predictedPrice": <number: predicted price for next 2-3 months>,
  "priceChange": <number: percentage change expected, can be negative>,
  "trend": "<string: 'up', 'down', or 'stable'>",
  "confidence": <number: 1-100 confidence percentage>,
  "bestSellingTime": "<string: specific time recommendation, e.g., 'Mid-February to March'>",
  "marketDemand": "<string: 'high', 'medium', or 'low'>",
  "profitabilityScore": <number: 1-10 score>,
  "recommendations": [<array of 3-4 actionable recommendations as strings>],
  "riskFactors": [<array of 2-3 risk factors to consider as strings>],
  "nearbyMarkets": [
    {{"name": "<market name>", "distance": "<distance>", "price": <price number>}},
    {{"name": "<market name>", "distance": "<distance>", "price": <price number>}},
    {{"name": "<market name>", "distance": "<distance>", "price": <price number>}}
  ],
  "seasonalInsight": "<string: brief insight about seasonal pricing pattern>"
}}

Use realistic prices based on actual Indian agricultural markets. Rice typically 2000-3500 INR/q, Wheat 2000-2800 INR/q, Cotton 6000-8000 INR/q, etc."""

    content = chat_completion([
        {"role": "system", "content": MARKET_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ], temperature=0.7)

    try:
        analysis = extract_json(content)
    except ValueError as e:
        logger.error(f"JSON parse error: {e} Content: {content}")
        analysis = copy.deepcopy(MARKET_FALLBACK)

    logger.info(f"Market analysis complete: {analysis}")
    return analysis


# --- Weather advisor ---

WEATHER_SYSTEM_PROMPT = """You are AgriNova's expert farming advisor. Based on current weather conditions, provide practical, actionable farming advice. Consider:
- What activities are ideal for today's weather
- What to avoid doing
- Crop care tips specific to the conditions
- Irrigation recommendations
- Pest/disease risk based on humidity and temperature
- UV protection for workers if high

Be specific, practical, and encouraging. Format response as JSON:
{
  "summary": "Brief 1-sentence weather summary",
  "todayAdvice": ["array of 4-6 specific actions to take today"],
  "warnings": ["array of things to avoid or watch out for"],
  "irrigationTip": "specific irrigation advice",
  "pestRisk": "Low" | "Medium" | "High",
  "pestRiskReason": "why this risk level",
  "bestActivities": ["ideal farming activities for this weather"],
  "workerSafety": "any safety tips for farm workers"
}"""


def weather_advice(latitude=None, longitude=None, location=None, fetch_conditions=None):
    """
    Combines live Open-Meteo conditions with AI farming advice.
    fetch_conditions defaults to weather.fetch_conditions.
    """
    require(locals(), 'latitude', 'longitude')
    if fetch_conditions is None:
        from weather import fetch_conditions

    label = location or f"{latitude}, {longitude}"
    logger.info(f"Fetching weather for: {label}")
    current, forecast = fetch_conditions(latitude, longitude)

    user_prompt = f"""Current weather in {location or "the farm"}:
- Temperature: {current['temperature']}°C
- Humidity: {current['humidity']}%
- Conditions: {current['conditions']}
- Wind Speed: {current['windSpeed']} km/h
- UV Index: {current['uvIndex']}
- Current Precipitation: {current['precipitation']} mm

Today's forecast:
- High: {forecast['high']}°C, Low: {forecast['low']}°C
- Precipitation chance: {forecast['precipitationChance']}%
- Expected rain: {forecast['precipitationSum']} mm

What farming activities and precautions would you recommend for today?"""

    content = chat_completion([
        {"role": "system", "content": WEATHER_SYSTEM_PROMPT},
        {"role": "user", "content": user_prompt},
    ])

    try:
        advice = extract_json(content, allow_fence=True)
    except ValueError:
        advice = {"rawAdvice": content}

    logger.info("Weather advice generated successfully")
    return {"weather": current, "forecast": forecast, "advice": advice, "location": label}


# --- Pest identification ---

PEST_SYSTEM_PROMPT = """You are an expert agricultural entomologist and plant pathologist serving farmers in Southern Asia. Identify the pest or pest damage visible in the image.

{crop_line}

Respond ONLY with JSON in this exact format:
{{
  "pestName": "Common name of the pest",
  "scientificName": "Scientific name or null if unsure",
  "threatLevel": "Low" | "Medium" | "High" | "Critical",
  "description": "Short description of the pest",
  "damageDescription": "What damage it causes to the crop",
  "treatment": ["treatment 1", "treatment 2", "treatment 3"],
  "prevention": ["prevention tip 1", "prevention tip 2", "prevention tip 3"],
  "confidence": "High" | "Medium" | "Low",
  "additionalNotes": "Anything else the farmer should know, or null"
}}

Prefer integrated pest management and mention organic options where they work."""


def identify_pest(imageBase64=None, cropType=None):
    if not imageBase64:
        raise MissingFieldError(['imageBase64'])

    crop_line = (f"The affected crop is: {cropType}" if cropType
                 else "The crop type was not provided; infer it if you can.")
    messages = [
        {"role": "system", "content": PEST_SYSTEM_PROMPT.format(crop_line=crop_line)},
        image_message("Identify the pest in this image and suggest treatments.", imageBase64),
    ]
    content = chat_completion(messages, model=_vision_model(), max_tokens=1500)
    if not content:
        raise GatewayError("No response from AI", 500)

    try:
        result = extract_json(content)
    except ValueError as e:
        logger.warning(f"Pest identification parse error: {e}")
        return {"rawResponse": content}

    result.setdefault("treatment", [])
    result.setdefault("prevention", [])
    return result


def _vision_model():
    return current_app.config.get('AI_VISION_MODEL')


def _format_number(value):
    try:
        return f"{float(value):,.0f}"
    except (TypeError, ValueError):
        return str(value)
