# lemonstand/config.py

# Base Economic Constants
INITIAL_CASH = 10.0
INITIAL_PRICE_PER_UNIT = 0.25
DEFAULT_SEED = 123456789
CASH_TOLERANCE = 1e-9

# Default Recipe
LEMONS_PER_BATCH = 6
SUGAR_PER_BATCH = 4      # Cups of sugar
ICE_PER_UNIT = 4         # Cubes per serving
UNITS_PER_BATCH = 12

# Supply Prices (Baseline, Spread)
PRICE_LEMON = (0.05, 0.25)
PRICE_SUGAR = (0.07, 0.25)
PRICE_ICE = (0.01, 0.30)
PRICE_CUP = (0.02, 0.25)
PRICE_DECIMALS = 3

# Weather: (upper bound of forecast roll, kind, min temp F, max temp F)
WEATHER_BUCKETS = [
    (0.10, 'Storm', 65, 75),
    (0.35, 'Cold', 55, 65),
    (0.75, 'Mild', 70, 84),
    (1.00, 'Hot', 85, 100),
]

DEMAND_BOOST = {
    'Hot': 1.4,
    'Mild': 1.0,
    'Cold': 0.6,
    'Storm': 0.25,
}

FORECAST_TEXT = {
    'Hot': "Sunny and hot",
    'Mild': "Warm and pleasant",
    'Cold': "Chilly",
    'Storm': "Thunderstorms likely",
}

# Demand Model
BASE_TRAFFIC = 60
TRAFFIC_NOISE_STDEV = 8
REFERENCE_PRICE = 0.25   # "Sweet spot" price
PRICE_ELASTICITY = 3.0   # Higher -> more sensitive
WEATHER_INCLINATION_BASE = 0.65
WEATHER_INCLINATION_SLOPE = 0.35

# Spoilage
ICE_SPOILAGE_FRACTION = 1.0  # All ice melts overnight
