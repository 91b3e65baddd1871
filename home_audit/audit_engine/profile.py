"""
Energy profile aggregator.

Rolls a home's equipment and appliances up into an annual cost breakdown,
picks the top consumers, compares the estimate with utility bills and scores
the building envelope.
"""

from __future__ import annotations

from loguru import logger

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import (
    APPLIANCE_GROUP_ICON,
    APPLIANCE_META,
    BILL_ACCURACY_BANDS,
    BILL_ACCURACY_FALLBACK,
    DEFAULT_ELECTRICITY_RATE,
    DEFAULT_GAS_RATE,
    DEFAULT_HOME_SQFT,
    ENVELOPE_BASEMENT_POINTS,
    ENVELOPE_INSULATION_POINTS,
    ENVELOPE_SEALING_POINTS,
    HOURS_PER_YEAR,
    HVAC_TYPES,
    LIGHTING_CATEGORIES,
    STANDBY_MIN_COST,
    TOP_CONSUMER_LIMIT,
    TOP_CONSUMER_MIN_COST,
    WATER_HEATING_TYPES,
)
from home_audit.audit_engine.rating import letter_grade
from home_audit.models import (
    Appliance,
    ApplianceCategory,
    BillComparison,
    EnergyBreakdownCategory,
    EnergyProfile,
    EnvelopeScore,
    Home,
    TopConsumer,
)


# --- appliance metadata ---

def default_wattage(category: ApplianceCategory) -> float:
    return APPLIANCE_META[category][0]


def default_hours_per_day(category: ApplianceCategory) -> float:
    return APPLIANCE_META[category][1]


def phantom_watts(category: ApplianceCategory) -> float:
    """Standby draw while the appliance is switched off."""
    return APPLIANCE_META[category][2]


def is_phantom_load_relevant(category: ApplianceCategory) -> bool:
    return phantom_watts(category) > 0


def is_lighting(category: ApplianceCategory) -> bool:
    return category in LIGHTING_CATEGORIES


def appliance_group(category: ApplianceCategory) -> str:
    return APPLIANCE_META[category][3]


def appliance_icon(category: ApplianceCategory) -> str:
    return APPLIANCE_GROUP_ICON[appliance_group(category)]


def phantom_annual_kwh(appliance: Appliance) -> float:
    return phantom_watts(appliance.category) * appliance.quantity * HOURS_PER_YEAR / 1000.0


# --- home-level derived values ---

def total_phantom_load_watts(home: Home) -> float:
    return sum(phantom_watts(a.category) * a.quantity for a in home.appliances)


def total_phantom_annual_kwh(home: Home) -> float:
    return sum(phantom_annual_kwh(a) for a in home.appliances)


def actual_electricity_rate(home: Home, default: float = DEFAULT_ELECTRICITY_RATE) -> float:
    """Mean of the positive bill rates, or *default* when no bill has one."""
    rates = [b.computed_rate for b in home.energy_bills if b.computed_rate > 0]
    if not rates:
        return default
    return sum(rates) / len(rates)


# --- profile ---

def generate_profile(
    home: Home,
    default_electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    gas_rate: float = DEFAULT_GAS_RATE,
    default_sq_ft: float = DEFAULT_HOME_SQFT,
) -> EnergyProfile:
    """Build the annual energy profile for *home*.

    Bill-derived electricity rates take precedence over *default_electricity_rate*;
    *default_sq_ft* stands in when the home has no recorded floor area.
    """
    rate = actual_electricity_rate(home, default_electricity_rate)
    sq_ft = home.computed_total_sq_ft if home.computed_total_sq_ft > 0 else default_sq_ft

    hvac_cost = 0.0
    water_cost = 0.0
    candidates: list[TopConsumer] = []

    for eq in home.equipment:
        cost = efficiency.estimate_annual_cost(
            eq.equipment_type,
            efficiency.current_efficiency(eq),
            sq_ft,
            home.climate_zone,
            rate,
            gas_rate,
        )
        if cost <= 0:
            continue
        if eq.equipment_type in HVAC_TYPES:
            hvac_cost += cost
        elif eq.equipment_type in WATER_HEATING_TYPES:
            water_cost += cost
        if cost > TOP_CONSUMER_MIN_COST:
            candidates.append(TopConsumer(
                name=efficiency.label(eq.equipment_type),
                icon=efficiency.icon(eq.equipment_type),
                annual_cost=cost,
                source="equipment",
            ))

    appliance_cost = 0.0
    lighting_cost = 0.0
    for appliance in home.appliances:
        cost = appliance.annual_cost(rate)
        if is_lighting(appliance.category):
            lighting_cost += cost
        else:
            appliance_cost += cost
        if cost > TOP_CONSUMER_MIN_COST:
            candidates.append(TopConsumer(
                name=appliance.display_name,
                icon=appliance_icon(appliance.category),
                annual_cost=cost,
                source="appliance",
            ))

    phantom_cost = total_phantom_annual_kwh(home) * rate

    buckets = [
        ("HVAC", "snowflake", hvac_cost),
        ("Water Heating", "drop.fill", water_cost),
        ("Appliances", "powerplug", appliance_cost),
        ("Lighting", "lightbulb", lighting_cost),
    ]
    if phantom_cost > STANDBY_MIN_COST:
        buckets.append(("Standby", "moon.zzz", phantom_cost))
    else:
        phantom_cost = 0.0

    total = hvac_cost + water_cost + appliance_cost + lighting_cost + phantom_cost
    breakdown = [
        EnergyBreakdownCategory(
            name=name,
            icon=icon,
            annual_cost=cost,
            percentage=cost / total * 100 if total > 0 else 0.0,
        )
        for name, icon, cost in buckets
        if cost > 0
    ]

    candidates.sort(key=lambda c: c.annual_cost, reverse=True)
    logger.debug(f"Profile for '{home.name}': ${total:.2f}/yr at ${rate:.3f}/kWh")

    return EnergyProfile(
        total_estimated_annual_cost=total,
        electricity_rate=rate,
        breakdown=breakdown,
        top_consumers=candidates[:TOP_CONSUMER_LIMIT],
        bill_comparison=build_bill_comparison(home, total, rate),
        envelope_score=score_envelope(home),
    )


def build_bill_comparison(home: Home, estimated_total_cost: float, rate: float) -> BillComparison | None:
    """Compare bill-based annual kWh with the audit estimate converted to kWh."""
    bill_kwh = home.bill_based_annual_kwh
    if bill_kwh is None or bill_kwh <= 0:
        return None
    estimated_kwh = estimated_total_cost / rate if rate > 0 else 0.0
    if estimated_kwh <= 0:
        return None

    gap = abs(bill_kwh - estimated_kwh) / bill_kwh * 100
    label = next((name for limit, name in BILL_ACCURACY_BANDS if gap < limit), BILL_ACCURACY_FALLBACK)
    return BillComparison(
        bill_based_annual_kwh=bill_kwh,
        estimated_annual_kwh=estimated_kwh,
        gap_percentage=gap,
        accuracy_label=label,
    )


def score_envelope(home: Home) -> EnvelopeScore | None:
    """Score the envelope out of 100 (five factors worth 20 points each)."""
    env = home.envelope
    if env is None:
        return None

    factors = [
        ("Attic Insulation", "Attic", env.attic_insulation,
         ENVELOPE_INSULATION_POINTS[env.attic_insulation]),
        ("Wall Insulation", "Walls", env.wall_insulation,
         ENVELOPE_INSULATION_POINTS[env.wall_insulation]),
        ("Basement Insulation", "Basement", env.basement_insulation,
         ENVELOPE_BASEMENT_POINTS[env.basement_insulation]),
        ("Air Sealing", "Air Sealing", env.air_sealing,
         ENVELOPE_SEALING_POINTS[env.air_sealing]),
        ("Weatherstripping", "Weatherstripping", env.weatherstripping,
         ENVELOPE_SEALING_POINTS[env.weatherstripping]),
    ]

    total = sum(points for *_, points in factors)
    details = [f"{short}: {value.value.title()}" for _, short, value, _ in factors]

    # First lowest factor wins ties; a uniform envelope has no weakest area
    lowest = min(points for *_, points in factors)
    weakest = None
    if any(points != lowest for *_, points in factors):
        weakest = next(area for area, _, _, points in factors if points == lowest)

    return EnvelopeScore(
        score=total,
        grade=letter_grade(total),
        details=details,
        weakest_area=weakest,
    )
