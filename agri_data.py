"""
Reference lists shared by the advisory forms.
"""

CROPS = [
    # Cereals & Grains
    "Rice (Paddy)", "Wheat", "Maize (Corn)", "Barley", "Millet", "Sorghum", "Oats",
    # Pulses & Legumes
    "Chickpea (Chana)", "Pigeon Pea (Arhar)", "Lentil (Masoor)", "Green Gram (Moong)",
    "Black Gram (Urad)", "Kidney Bean (Rajma)", "Soybean", "Groundnut (Peanut)",
    # Cash Crops
    "Cotton", "Sugarcane", "Jute", "Tobacco", "Rubber", "Coffee", "Tea",
    # Vegetables
    "Potato", "Tomato", "Onion", "Chili (Pepper)", "Brinjal (Eggplant)", "Cauliflower",
    "Cabbage", "Okra (Ladyfinger)", "Spinach", "Carrot", "Radish", "Cucumber",
    "Bitter Gourd", "Bottle Gourd", "Pumpkin", "Garlic", "Ginger", "Turmeric",
    # Fruits
    "Mango", "Banana", "Papaya", "Guava", "Litchi", "Pomegranate", "Grapes",
    "Watermelon", "Coconut", "Jackfruit", "Pineapple", "Orange", "Lemon",
    # Oilseeds
    "Mustard", "Sunflower", "Sesame", "Safflower", "Castor",
    # Spices
    "Cardamom", "Black Pepper", "Cinnamon", "Clove", "Nutmeg", "Coriander", "Cumin",
    # Plantation
    "Arecanut (Betel Nut)", "Cashew", "Cocoa",
]

REGIONS = [
    "Punjab, India", "Haryana, India", "Uttar Pradesh, India", "Madhya Pradesh, India",
    "Maharashtra, India", "Gujarat, India", "Rajasthan, India", "Tamil Nadu, India",
    "Karnataka, India", "Kerala, India", "Andhra Pradesh, India", "Telangana, India",
    "West Bengal, India", "Bihar, India", "Odisha, India", "Assam, India",
    "Dhaka, Bangladesh", "Chittagong, Bangladesh", "Rajshahi, Bangladesh",
    "Punjab, Pakistan", "Sindh, Pakistan", "Khyber Pakhtunkhwa, Pakistan",
    "Central Province, Sri Lanka", "Western Province, Sri Lanka",
    "Kathmandu Valley, Nepal", "Terai, Nepal", "Paro, Bhutan", "Thimphu, Bhutan",
    "Malé, Maldives",
]

IRRIGATION_TYPES = [
    ("rainfed", "Rainfed (Monsoon Dependent)"),
    ("canal", "Canal Irrigation"),
    ("drip", "Drip Irrigation (Micro)"),
    ("sprinkler", "Sprinkler System"),
    ("tubewell", "Tube Well / Borewell"),
    ("pond", "Pond / Tank Irrigation"),
    ("river", "River Lift Irrigation"),
    ("flood", "Flood Irrigation"),
]

SOIL_TYPES = [
    "Alluvial Soil", "Black Cotton Soil", "Red Soil", "Laterite Soil",
    "Mountain Soil", "Desert Soil", "Saline Soil", "Peaty Soil", "Forest Soil",
    "Sandy", "Clay", "Loamy",
]

SEASONS = [
    ("kharif", "Kharif (Monsoon - June to October)"),
    ("rabi", "Rabi (Winter - October to March)"),
    ("zaid", "Zaid (Summer - March to June)"),
    ("yearround", "Year-round"),
]

GROWTH_STAGES = [
    "Seed/Germination", "Seedling", "Vegetative", "Flowering", "Fruiting",
    "Maturation", "Harvest Ready",
]

# label and css class per crop event type
EVENT_TYPES = {
    'planting': {'label': 'Planting', 'css': 'event-planting'},
    'watering': {'label': 'Watering', 'css': 'event-watering'},
    'harvest': {'label': 'Harvest', 'css': 'event-harvest'},
}


SAMPLE_PRODUCTS = [
    {
        'name': 'Soil Moisture Sensor',
        'description': 'Capacitive probe reporting volumetric water content every 15 minutes.',
        'price_rupees': 1499,
        'category': 'Sensors',
        'has_cloud_analytics': True,
        'cloud_analytics_price': 199,
    },
    {
        'name': 'NPK Soil Analyzer',
        'description': 'Handheld nitrogen, phosphorus and potassium meter with pH readout.',
        'price_rupees': 8999,
        'category': 'Sensors',
        'has_cloud_analytics': True,
        'cloud_analytics_price': 299,
    },
    {
        'name': 'Mini Weather Station',
        'description': 'Temperature, humidity, rainfall and wind speed for a single field.',
        'price_rupees': 12499,
        'category': 'Weather',
        'has_cloud_analytics': True,
        'cloud_analytics_price': 399,
    },
    {
        'name': 'Drip Irrigation Controller',
        'description': 'Four-zone valve timer with manual override.',
        'price_rupees': 4599,
        'category': 'Irrigation',
        'has_cloud_analytics': False,
        'cloud_analytics_price': None,
    },
    {
        'name': 'Insect Pheromone Trap Kit',
        'description': 'Ten reusable traps with lures for fruit fly and bollworm.',
        'price_rupees': 899,
        'category': 'Pest Control',
        'has_cloud_analytics': False,
        'cloud_analytics_price': None,
    },
]
