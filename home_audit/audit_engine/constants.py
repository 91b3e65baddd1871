"""
Constants for the home energy audit engine.

Rule-of-thumb sizing factors are Manual-J style approximations for residential
cooling load. Efficiency ranges reflect typical US nameplate values by equipment
age, the current federal minimums, and the best ENERGY STAR listings.

Every table is a module-level dict keyed by enum and is never mutated.
"""

from __future__ import annotations

from home_audit.models import (
    AgeRange,
    ApplianceCategory,
    BasementInsulation,
    CardinalDirection,
    CeilingHeight,
    ClimateZone,
    EfficiencySpec,
    EquipmentType,
    FrameMaterial,
    InsulationQuality,
    LetterGrade,
    PaneType,
    SealingQuality,
    WindowCondition,
    WindowSize,
)

# ---------------------------------------------------------------------------
# ROOM LOAD FACTORS
# Base load = sq ft * ceiling factor * climate BTU/sq ft
# ---------------------------------------------------------------------------
CLIMATE_BTU_PER_SQFT: dict[ClimateZone, float] = {
    ClimateZone.HOT: 30.0,
    ClimateZone.MODERATE: 25.0,
    ClimateZone.COLD: 35.0,
}

CEILING_FACTOR: dict[CeilingHeight, float] = {
    CeilingHeight.EIGHT: 1.0,
    CeilingHeight.NINE: 1.12,
    CeilingHeight.TEN: 1.25,
    CeilingHeight.TWELVE: 1.5,
}

# UNKNOWN calculates as AVERAGE
INSULATION_MULTIPLIER: dict[InsulationQuality, float] = {
    InsulationQuality.UNKNOWN: 1.00,
    InsulationQuality.POOR: 1.30,
    InsulationQuality.AVERAGE: 1.00,
    InsulationQuality.GOOD: 0.85,
}

SAFETY_FACTOR = 1.10
BTU_PER_TON = 12_000.0

# ---------------------------------------------------------------------------
# WINDOW SOLAR GAIN
# heat gain = direction BTU/sq ft * window sq ft * (effective U / reference U)
# effective U = pane U * frame factor * condition (leakage) factor
# ---------------------------------------------------------------------------
WINDOW_BTU_PER_SQFT: dict[CardinalDirection, float] = {
    CardinalDirection.NORTH: 40.0,
    CardinalDirection.SOUTH: 150.0,
    CardinalDirection.EAST: 100.0,
    CardinalDirection.WEST: 120.0,
}

WINDOW_SIZE_SQFT: dict[WindowSize, float] = {
    WindowSize.SMALL: 10.0,
    WindowSize.MEDIUM: 20.0,
    WindowSize.LARGE: 35.0,
}

# Unassessed panes calculate as standard double pane
PANE_U_FACTOR: dict[PaneType, float] = {
    PaneType.NOT_ASSESSED: 0.30,
    PaneType.SINGLE: 1.10,
    PaneType.DOUBLE: 0.30,
    PaneType.TRIPLE: 0.22,
}

FRAME_FACTOR: dict[FrameMaterial, float] = {
    FrameMaterial.NOT_ASSESSED: 1.00,
    FrameMaterial.ALUMINUM: 1.30,
    FrameMaterial.WOOD: 1.00,
    FrameMaterial.VINYL: 0.95,
    FrameMaterial.FIBERGLASS: 0.92,
    FrameMaterial.COMPOSITE: 0.90,
}

CONDITION_LEAKAGE_FACTOR: dict[WindowCondition, float] = {
    WindowCondition.NOT_ASSESSED: 1.00,
    WindowCondition.GOOD: 1.00,
    WindowCondition.FAIR: 1.15,
    WindowCondition.POOR: 1.35,
}

# Double pane in a vinyl frame, in good condition
REFERENCE_U_FACTOR = 0.285

# ---------------------------------------------------------------------------
# EQUIPMENT EFFICIENCY TABLE
# (estimated by age, code minimum, best in class, typical upgrade cost $)
# Estimates listed oldest first: 20+, 15-20, 10-15, 5-10, 0-5
# ---------------------------------------------------------------------------
_AGES_OLDEST_FIRST = (
    AgeRange.YEARS_20_PLUS,
    AgeRange.YEARS_15_20,
    AgeRange.YEARS_10_15,
    AgeRange.YEARS_5_10,
    AgeRange.YEARS_0_5,
)


def _by_age(
    estimates: tuple[float, float, float, float, float],
    code_minimum: float,
    best_in_class: float,
    upgrade_cost: float,
) -> dict[AgeRange, EfficiencySpec]:
    return {
        age: EfficiencySpec(
            estimated=est,
            code_minimum=code_minimum,
            best_in_class=best_in_class,
            upgrade_cost=upgrade_cost,
        )
        for age, est in zip(_AGES_OLDEST_FIRST, estimates)
    }


EFFICIENCY_TABLE: dict[EquipmentType, dict[AgeRange, EfficiencySpec]] = {
    EquipmentType.CENTRAL_AC: _by_age((9.0, 11.0, 12.5, 13.5, 15.0), 15.2, 24.0, 6000),  # SEER
    EquipmentType.HEAT_PUMP: _by_age((9.0, 11.5, 14.0, 16.5, 18.0), 15.2, 25.0, 7500),   # SEER
    EquipmentType.FURNACE: _by_age((65, 75, 82, 88, 93), 80, 98.5, 4500),                # AFUE %
    EquipmentType.WATER_HEATER: _by_age((0.50, 0.57, 0.60, 0.65, 0.67), 0.64, 3.5, 3500),  # UEF
    EquipmentType.WATER_HEATER_TANKLESS: _by_age((0.82, 0.85, 0.87, 0.90, 0.93), 0.87, 0.97, 3000),
    EquipmentType.WINDOW_UNIT: _by_age((8.0, 9.0, 9.5, 10.0, 11.0), 10.0, 15.0, 800),   # EER
    EquipmentType.THERMOSTAT: _by_age((0.0, 0.0, 5.0, 7.5, 12.5), 5.0, 15.0, 225),      # % savings
    EquipmentType.INSULATION: _by_age((11, 19, 30, 38, 44), 38, 60, 2200),              # R-value
    EquipmentType.WINDOWS: _by_age((1.1, 0.55, 0.40, 0.30, 0.27), 0.30, 0.15, 800),     # U-factor
    EquipmentType.WASHER: _by_age((1.0, 1.4, 1.8, 2.0, 2.2), 1.84, 2.92, 1200),         # IMEF
    EquipmentType.DRYER: _by_age((2.5, 2.8, 3.1, 3.4, 3.7), 3.01, 5.2, 1000),           # CEF
}

# ---------------------------------------------------------------------------
# EQUIPMENT METADATA
# (display label, efficiency unit, icon, higher_is_better)
# Windows are rated by U-factor, where lower is better.
# ---------------------------------------------------------------------------
EQUIPMENT_META: dict[EquipmentType, tuple[str, str, str, bool]] = {
    EquipmentType.CENTRAL_AC: ("Central AC", "SEER", "snowflake", True),
    EquipmentType.HEAT_PUMP: ("Heat Pump", "SEER", "heat.waves", True),
    EquipmentType.FURNACE: ("Furnace", "AFUE %", "flame", True),
    EquipmentType.WATER_HEATER: ("Water Heater (Tank)", "UEF", "drop.fill", True),
    EquipmentType.WATER_HEATER_TANKLESS: ("Water Heater (Tankless)", "UEF", "drop.circle", True),
    EquipmentType.WINDOW_UNIT: ("Window AC Unit", "EER", "wind", True),
    EquipmentType.THERMOSTAT: ("Thermostat", "% savings", "thermometer", True),
    EquipmentType.INSULATION: ("Insulation", "R-value", "square.stack.3d.up", True),
    EquipmentType.WINDOWS: ("Windows", "U-factor", "window.casement", False),
    EquipmentType.WASHER: ("Washer", "IMEF", "washer", True),
    EquipmentType.DRYER: ("Dryer", "CEF", "dryer", True),
}

HVAC_TYPES: frozenset[EquipmentType] = frozenset({
    EquipmentType.CENTRAL_AC,
    EquipmentType.HEAT_PUMP,
    EquipmentType.FURNACE,
    EquipmentType.WINDOW_UNIT,
    EquipmentType.THERMOSTAT,
    EquipmentType.INSULATION,
    EquipmentType.WINDOWS,
})

WATER_HEATING_TYPES: frozenset[EquipmentType] = frozenset({
    EquipmentType.WATER_HEATER,
    EquipmentType.WATER_HEATER_TANKLESS,
})

# ---------------------------------------------------------------------------
# ANNUAL COST MODEL
# cooling $ = sq ft * factor / SEER * $/kWh
# furnace $ = sq ft * therm factor * $/therm / AFUE
# water heating $ = baseline / UEF
# ---------------------------------------------------------------------------
DEFAULT_ELECTRICITY_RATE = 0.16  # $/kWh
DEFAULT_GAS_RATE = 1.20          # $/therm
DEFAULT_HOME_SQFT = 1500.0

COOLING_FACTOR: dict[ClimateZone, float] = {
    ClimateZone.HOT: 54.0,
    ClimateZone.MODERATE: 27.5,
    ClimateZone.COLD: 21.0,
}

FURNACE_THERM_FACTOR: dict[ClimateZone, float] = {
    ClimateZone.HOT: 200.0,
    ClimateZone.MODERATE: 600.0,
    ClimateZone.COLD: 1000.0,
}

WATER_HEATING_BASELINE = 400.0  # $/yr at UEF 1.0

# Seasonal heating demand per sq ft, BTU/yr, used to price heat pump heating by HSPF
HEAT_PUMP_HEATING_BTU_PER_SQFT: dict[ClimateZone, float] = {
    ClimateZone.HOT: 15_000.0,
    ClimateZone.MODERATE: 35_000.0,
    ClimateZone.COLD: 60_000.0,
}

# Baseline a furnace is compared against when a heat pump replaces it
FURNACE_BASELINE_AFUE = 80.0
HEAT_PUMP_REPLACEMENT_HSPF = 13.0

# Rough HVAC spend per sq ft, $/yr, for thermostat and envelope savings
HVAC_SPEND_PER_SQFT = 2.5

# ---------------------------------------------------------------------------
# APPLIANCES
# (default watts, default hours/day, standby watts, group label)
# ---------------------------------------------------------------------------
APPLIANCE_META: dict[ApplianceCategory, tuple[float, float, float, str]] = {
    ApplianceCategory.REFRIGERATOR: (150, 24, 0, "Kitchen"),
    ApplianceCategory.FREEZER: (100, 24, 0, "Kitchen"),
    ApplianceCategory.DISHWASHER: (1800, 1, 2, "Kitchen"),
    ApplianceCategory.MICROWAVE: (1100, 0.25, 3, "Kitchen"),
    ApplianceCategory.OVEN: (2400, 1, 4, "Kitchen"),
    ApplianceCategory.COFFEE_MAKER: (900, 0.5, 1, "Kitchen"),
    ApplianceCategory.TELEVISION: (100, 5, 3, "Entertainment"),
    ApplianceCategory.GAME_CONSOLE: (150, 2, 10, "Entertainment"),
    ApplianceCategory.CABLE_BOX: (20, 24, 15, "Entertainment"),
    ApplianceCategory.SOUND_SYSTEM: (50, 2, 5, "Entertainment"),
    ApplianceCategory.COMPUTER: (200, 6, 5, "Office"),
    ApplianceCategory.MONITOR: (30, 6, 1, "Office"),
    ApplianceCategory.ROUTER: (10, 24, 0, "Office"),
    ApplianceCategory.PRINTER: (30, 0.1, 4, "Office"),
    ApplianceCategory.WASHING_MACHINE: (500, 1, 2, "Laundry"),
    ApplianceCategory.CLOTHES_DRYER: (3000, 1, 2, "Laundry"),
    ApplianceCategory.SPACE_HEATER: (1500, 4, 0, "Climate"),
    ApplianceCategory.DEHUMIDIFIER: (300, 8, 1, "Climate"),
    ApplianceCategory.CEILING_FAN: (75, 8, 0, "Climate"),
    ApplianceCategory.EV_CHARGER: (7200, 2, 2, "Climate"),
    ApplianceCategory.LED_BULB: (9, 5, 0, "Lighting"),
    ApplianceCategory.CFL_BULB: (14, 5, 0, "Lighting"),
    ApplianceCategory.INCANDESCENT_BULB: (60, 5, 0, "Lighting"),
    ApplianceCategory.OTHER: (100, 2, 0, "Other"),
}

APPLIANCE_GROUP_ICON: dict[str, str] = {
    "Kitchen": "refrigerator",
    "Entertainment": "tv",
    "Office": "desktopcomputer",
    "Laundry": "washer",
    "Climate": "fan",
    "Lighting": "lightbulb",
    "Other": "powerplug",
}

LIGHTING_CATEGORIES: frozenset[ApplianceCategory] = frozenset({
    ApplianceCategory.LED_BULB,
    ApplianceCategory.CFL_BULB,
    ApplianceCategory.INCANDESCENT_BULB,
})

HOURS_PER_YEAR = 8760

# ---------------------------------------------------------------------------
# PROFILE THRESHOLDS
# ---------------------------------------------------------------------------
TOP_CONSUMER_MIN_COST = 10.0
TOP_CONSUMER_LIMIT = 5
STANDBY_MIN_COST = 5.0

# (upper bound on |bill - estimate| / bill %, label)
BILL_ACCURACY_BANDS: list[tuple[float, str]] = [
    (10.0, "Excellent"),
    (25.0, "Good"),
    (40.0, "Fair"),
]
BILL_ACCURACY_FALLBACK = "Review Needed"

# ---------------------------------------------------------------------------
# ENVELOPE SCORING (5 factors x 20 points)
# ---------------------------------------------------------------------------
ENVELOPE_INSULATION_POINTS: dict[InsulationQuality, float] = {
    InsulationQuality.GOOD: 20.0,
    InsulationQuality.AVERAGE: 12.0,
    InsulationQuality.UNKNOWN: 12.0,
    InsulationQuality.POOR: 5.0,
}

ENVELOPE_BASEMENT_POINTS: dict[BasementInsulation, float] = {
    BasementInsulation.FULL: 20.0,
    BasementInsulation.PARTIAL: 12.0,
    BasementInsulation.UNINSULATED: 5.0,
}

ENVELOPE_SEALING_POINTS: dict[SealingQuality, float] = {
    SealingQuality.GOOD: 20.0,
    SealingQuality.FAIR: 12.0,
    SealingQuality.POOR: 5.0,
}

# ---------------------------------------------------------------------------
# LETTER GRADES
# (minimum score, grade), checked top down
# ---------------------------------------------------------------------------
GRADE_BREAKPOINTS: list[tuple[float, LetterGrade]] = [
    (85.0, LetterGrade.A),
    (70.0, LetterGrade.B),
    (55.0, LetterGrade.C),
    (40.0, LetterGrade.D),
]

GRADE_SUMMARY: dict[LetterGrade, str] = {
    LetterGrade.A: "Excellent efficiency. This home is already performing near the best available.",
    LetterGrade.B: "Good efficiency with a few targeted upgrades available.",
    LetterGrade.C: "Average efficiency. Several upgrades would noticeably cut energy costs.",
    LetterGrade.D: "Below average efficiency. Upgrades would pay back quickly.",
    LetterGrade.F: "Poor efficiency. Major savings are available from upgrading this home.",
}
NO_DATA_SUMMARY = "Not enough data to grade yet. Add equipment, rooms, or an envelope assessment."

# Equipment score anchors: code minimum maps to the bottom of D, best in class to A
EQUIPMENT_SCORE_AT_CODE_MINIMUM = 40.0
EQUIPMENT_SCORE_SPAN_TO_BEST = 45.0

# Room score: 100 at or below 85% of the reference load, falling 1 point per % above
ROOM_SCORE_REFERENCE_RATIO = 0.85

# Home grade component weights, renormalised over the parts present
HOME_GRADE_WEIGHTS: dict[str, float] = {
    "equipment": 0.5,
    "envelope": 0.3,
    "rooms": 0.2,
}

# ---------------------------------------------------------------------------
# TAX CREDITS (IRA 2023-2032)
# ---------------------------------------------------------------------------
TAX_CREDIT_25C_ANNUAL_CAP = 3200.0
TAX_CREDIT_25D_KEYWORDS: tuple[str, ...] = ("heat pump", "solar", "geothermal")

# ---------------------------------------------------------------------------
# BATTERY SYNERGY (illustrative)
# ---------------------------------------------------------------------------
BASE_LOAD_KW_PER_SQFT = 5.0 / 1500.0
BATTERY_DEFAULT_SAVINGS_RATIO = 0.15
BATTERY_SAVINGS_WEIGHT = 0.6
BATTERY_ENVELOPE_BONUS = 0.05
BATTERY_HVAC_BONUS = 0.08
BATTERY_MAX_REDUCTION = 0.5
BATTERY_EVENT_HOURS_PER_YEAR = 50
BATTERY_EXPORT_PRICE_LOW = 2.0   # $/kWh
BATTERY_EXPORT_PRICE_HIGH = 5.0  # $/kWh
