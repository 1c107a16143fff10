# krishi_analytics/agents/common/reference.py
"""
Static agronomic reference tables, keyed by normalised crop name
"""
from types import MappingProxyType
from typing import Dict, List, Tuple

from krishi_analytics.agents.common.models import Band, PestProfile


def normalize_crop(crop: str) -> str:
    return (crop or "").strip().lower()


def normalize_soil_type(soil_type) -> str:
    if not soil_type:
        return ""
    key = soil_type.strip().lower()
    return SOIL_TYPE_ALIASES.get(key, key)


SUPPORTED_CROPS: Tuple[str, ...] = (
    "Wheat", "Rice", "Maize", "Cotton", "Sugarcane", "Soybean",
    "Groundnut", "Mustard", "Onion", "Potato", "Tomato", "Chilli",
)

# kg per hectare at maturity
DEFAULT_BASE_YIELD_KG_PER_HA = 3000
BASE_YIELD_KG_PER_HA = MappingProxyType({
    "wheat": 3000,
    "rice": 4000,
    "maize": 5000,
    "cotton": 800,
    "sugarcane": 80000,
    "soybean": 1500,
    "groundnut": 2000,
    "mustard": 1200,
    "onion": 20000,
    "potato": 25000,
    "tomato": 30000,
    "chilli": 8000,
})

# liters per irrigation event
DEFAULT_BASE_WATER_LITERS = 600
BASE_WATER_LITERS = MappingProxyType({
    "wheat": 800,
    "rice": 1200,
    "maize": 900,
    "cotton": 700,
    "sugarcane": 1500,
    "soybean": 600,
    "groundnut": 500,
    "mustard": 400,
    "onion": 300,
    "potato": 600,
    "tomato": 500,
    "chilli": 400,
})

COMMON_PESTS = MappingProxyType({
    "wheat": ("Aphids", "Bollworm", "Armyworm", "Rust"),
    "rice": ("Brown Planthopper", "Stem Borer", "Rice Blast", "Sheath Blight"),
    "maize": ("Fall Armyworm", "Corn Borer", "Aphids", "Rust"),
    "cotton": ("Bollworm", "Aphids", "Whitefly", "Thrips"),
    "sugarcane": ("Borer", "Aphids", "Whitefly", "Scale Insects"),
    "soybean": ("Pod Borer", "Aphids", "Whitefly", "Rust"),
    "groundnut": ("Aphids", "Whitefly", "Rust", "Leaf Spot"),
    "mustard": ("Aphids", "Diamondback Moth", "White Rust", "Alternaria Blight"),
    "onion": ("Thrips", "Aphids", "Purple Blotch", "Basal Rot"),
    "potato": ("Colorado Beetle", "Aphids", "Late Blight", "Early Blight"),
    "tomato": ("Aphids", "Whitefly", "Blight", "Fruit Borer"),
    "chilli": ("Aphids", "Thrips", "Anthracnose", "Fruit Rot"),
})

# Crops each pest is known to attack, by normalised crop name
PEST_SUSCEPTIBILITY = MappingProxyType({
    "Aphids": frozenset({"wheat", "rice", "tomato", "potato", "onion"}),
    "Bollworm": frozenset({"cotton", "tomato", "chilli", "maize"}),
    "Armyworm": frozenset({"maize", "wheat", "rice"}),
})


def _profile(pest: str, temperature: Tuple[float, float], humidity: Tuple[float, float],
             rainfall: Tuple[float, float]) -> PestProfile:
    return PestProfile(
        pest_name=pest,
        optimal_temperature=Band(min=temperature[0], max=temperature[1]),
        optimal_humidity=Band(min=humidity[0], max=humidity[1]),
        optimal_rainfall=Band(min=rainfall[0], max=rainfall[1]),
        crops_susceptible=PEST_SUSCEPTIBILITY.get(pest, frozenset()),
    )


PEST_PROFILES = MappingProxyType({
    "wheat": (
        _profile("Aphids", (15, 25), (60, 80), (0, 10)),
        _profile("Bollworm", (20, 30), (50, 70), (5, 20)),
        _profile("Armyworm", (18, 28), (65, 85), (10, 30)),
        _profile("Rust", (15, 25), (75, 95), (15, 40)),
    ),
    "rice": (
        _profile("Brown Planthopper", (20, 32), (70, 90), (10, 30)),
        _profile("Stem Borer", (22, 35), (60, 80), (5, 25)),
        _profile("Rice Blast", (18, 28), (80, 100), (20, 50)),
    ),
})

GENERAL_PEST_PROFILE = _profile("General Pests", (15, 35), (50, 80), (0, 30))

SOIL_TYPE_ALIASES = MappingProxyType({
    "sand": "sandy",
    "loam": "loamy",
    "clayey": "clay",
})

SOIL_TYPES: Tuple[Dict[str, str], ...] = (
    {
        "type": "clay",
        "description": "High water retention, slow absorption; furrow irrigation by default",
        "water_multiplier": "0.8",
    },
    {
        "type": "loamy",
        "description": "Balanced drainage and retention; drip irrigation by default",
        "water_multiplier": "1.0",
    },
    {
        "type": "sandy",
        "description": "Drains quickly and needs more water per event; drip irrigation by default",
        "water_multiplier": "1.4",
    },
)

YIELD_TIPS = MappingProxyType({
    "wheat": (
        "Ensure proper nitrogen application during tillering stage",
        "Monitor for rust diseases during flowering",
    ),
    "rice": (
        "Maintain proper water levels during panicle initiation",
        "Apply potassium during grain filling stage",
    ),
    "maize": (
        "Side-dress with nitrogen at knee-high stage",
        "Monitor for corn borer during tasseling",
    ),
})

PEST_TIPS = MappingProxyType({
    "wheat": (
        "Apply neem-based treatments during tillering stage",
        "Use yellow sticky traps for aphid monitoring",
    ),
    "rice": (
        "Maintain proper water levels to deter stem borers",
        "Remove weed hosts around fields",
    ),
    "maize": (
        "Destroy crop residues after harvest",
        "Use pheromone traps for armyworm monitoring",
    ),
})

IRRIGATION_TIPS = MappingProxyType({
    "wheat": (
        "Increase irrigation frequency during heading and grain filling stages",
        "Reduce irrigation just before harvest to prevent lodging",
    ),
    "rice": (
        "Maintain continuous flooding during panicle initiation",
        "Drain fields 1-2 weeks before harvest",
    ),
    "maize": (
        "Critical irrigation during tasseling and silking stages",
        "Reduce irrigation during grain filling to prevent kernel abortion",
    ),
})


def base_yield_for(crop: str) -> int:
    return BASE_YIELD_KG_PER_HA.get(normalize_crop(crop), DEFAULT_BASE_YIELD_KG_PER_HA)


def base_water_for(crop: str) -> int:
    return BASE_WATER_LITERS.get(normalize_crop(crop), DEFAULT_BASE_WATER_LITERS)


def pest_profiles_for(crop: str) -> Tuple[PestProfile, ...]:
    return PEST_PROFILES.get(normalize_crop(crop), (GENERAL_PEST_PROFILE,))


def crop_catalog() -> List[Dict[str, object]]:
    """Reference view of every supported crop"""
    catalog = []
    for name in SUPPORTED_CROPS:
        key = normalize_crop(name)
        catalog.append({
            "name": name,
            "base_yield_kg_per_hectare": BASE_YIELD_KG_PER_HA[key],
            "base_water_liters": BASE_WATER_LITERS[key],
            "common_pests": list(COMMON_PESTS.get(key, ())),
            "profiled_pests": [p.pest_name for p in PEST_PROFILES.get(key, ())],
        })
    return catalog
