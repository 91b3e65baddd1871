"""Rule-based tips for a single room and low-cost quick wins for a whole home."""

from __future__ import annotations

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import (
    APPLIANCE_META,
    DEFAULT_HOME_SQFT,
    HVAC_SPEND_PER_SQFT,
    HVAC_TYPES,
    STANDBY_MIN_COST,
    WINDOW_SIZE_SQFT,
)
from home_audit.audit_engine.load_calculator import ThermalLoadCalculator, window_heat_gain
from home_audit.audit_engine.profile import total_phantom_annual_kwh
from home_audit.models import (
    ApplianceCategory,
    BTUBreakdown,
    CardinalDirection,
    EnergyProfile,
    EquipmentType,
    Home,
    InsulationQuality,
    Recommendation,
    Room,
)

LOW_E_FILM_REDUCTION = 0.275    # midpoint of 25-30%
GLAZING_FLOOR_RATIO_LIMIT = 0.30
TALL_CEILING_FT = 10
SMART_STRIP_STANDBY_SHARE = 0.75
PROGRAMMABLE_SAVINGS_SHARE = 0.08
SMART_THERMOSTAT_LEVEL = 12.5


def room_recommendations(room: Room, breakdown: BTUBreakdown | None = None) -> list[Recommendation]:
    """Tips for one room. The duct sealing tip is always included last."""
    if breakdown is None:
        breakdown = ThermalLoadCalculator().calculate_room(room)
    tips: list[Recommendation] = []

    high_gain = [w for w in room.windows if w.direction in (CardinalDirection.SOUTH, CardinalDirection.WEST)]
    if high_gain and room.insulation != InsulationQuality.GOOD:
        gain = sum(window_heat_gain(w) for w in high_gain)
        tips.append(Recommendation(
            icon="sun.max",
            title="Low-E Window Film",
            detail=f"Your {len(high_gain)} south/west-facing window(s) contribute ~{gain:,.0f} BTU "
                   f"of solar heat gain ({breakdown.window_heat_gain_percentage:.0f}% of this room's load). "
                   "Low-emissivity film can cut this by 25-30%.",
            estimated_savings=f"Save ~{int(gain * LOW_E_FILM_REDUCTION):,} BTU/hr peak load",
        ))

    if room.insulation == InsulationQuality.POOR:
        tips.append(Recommendation(
            icon="house.and.flag",
            title="Upgrade to R-49 Attic Insulation",
            detail="Poor insulation adds a 30% penalty to the cooling load. R-49 attic insulation "
                   "can lower peak HVAC load by 1.0-1.5 kW.",
            estimated_savings="1.0-1.5 kW peak load reduction",
        ))

    window_area = sum(WINDOW_SIZE_SQFT[w.size] for w in room.windows)
    if window_area > room.square_footage * GLAZING_FLOOR_RATIO_LIMIT:
        tips.append(Recommendation(
            icon="window.casement",
            title="Reduce Thermal Glazing Exposure",
            detail=f"Window area ({window_area:.0f} sq ft) exceeds 30% of the floor area "
                   f"({room.square_footage:.0f} sq ft). Cellular shades or insulated curtains "
                   "cut heat gain and loss at the glass.",
            estimated_savings="10-20% reduction in window-related load",
        ))

    if room.ceiling_height.value > TALL_CEILING_FT:
        tips.append(Recommendation(
            icon="fan",
            title="Install Ceiling Fans for Destratification",
            detail=f"At {room.ceiling_height.value} ft, warm air collects near the ceiling. Fans "
                   "running clockwise at low speed in winter push it back down.",
            estimated_savings="5-10% heating season savings",
        ))

    tips.append(Recommendation(
        icon="arrow.triangle.branch",
        title="Aerosol Duct Sealing",
        detail="Typical ductwork leaks 20-30% of conditioned air. Aerosol sealing to under 4% "
               "leakage recovers most of it.",
        estimated_savings="15-20% conditioned air recovered",
    ))
    return tips


def home_quick_wins(
    home: Home,
    profile: EnergyProfile,
    default_sq_ft: float = DEFAULT_HOME_SQFT,
) -> list[Recommendation]:
    """Low-cost actions ranked roughly by how little effort they take.

    *default_sq_ft* stands in when the home has no recorded floor area.
    """
    wins: list[Recommendation] = []
    rate = profile.electricity_rate
    sq_ft = home.computed_total_sq_ft if home.computed_total_sq_ft > 0 else default_sq_ft

    incandescent = [a for a in home.appliances if a.category == ApplianceCategory.INCANDESCENT_BULB]
    if incandescent:
        led_watts = APPLIANCE_META[ApplianceCategory.LED_BULB][0]
        saved = sum(
            max(a.wattage - led_watts, 0) * a.hours_per_day * 365 / 1000 * a.quantity
            for a in incandescent
        ) * rate
        bulbs = sum(a.quantity for a in incandescent)
        wins.append(Recommendation(
            icon="lightbulb",
            title="Switch to LED Bulbs",
            detail=f"{bulbs} incandescent bulb(s) found. LEDs give the same light for about "
                   "a sixth of the power and last 15 times longer.",
            estimated_savings=f"Save ~${saved:,.0f}/yr",
        ))

    standby_cost = total_phantom_annual_kwh(home) * rate
    if standby_cost > STANDBY_MIN_COST:
        wins.append(Recommendation(
            icon="powerplug",
            title="Use Smart Power Strips",
            detail=f"Devices on standby cost about ${standby_cost:,.0f}/yr. Smart strips cut power "
                   "to entertainment and office gear when it is switched off.",
            estimated_savings=f"Save up to ${standby_cost * SMART_STRIP_STANDBY_SHARE:,.0f}/yr",
        ))

    thermostats = [eq for eq in home.equipment if eq.equipment_type == EquipmentType.THERMOSTAT]
    has_hvac = any(eq.equipment_type in HVAC_TYPES for eq in home.equipment)
    if thermostats:
        needs_thermostat = all(efficiency.current_efficiency(t) < SMART_THERMOSTAT_LEVEL for t in thermostats)
    else:
        needs_thermostat = has_hvac
    if needs_thermostat:
        wins.append(Recommendation(
            icon="thermometer",
            title="Set Back Your Thermostat",
            detail="A programmable or smart thermostat that sets back 7-10F for 8 hours a day "
                   "saves up to 10% on heating and cooling.",
            estimated_savings=f"Save ~${sq_ft * HVAC_SPEND_PER_SQFT * PROGRAMMABLE_SAVINGS_SHARE:,.0f}/yr",
        ))

    if any(eq.equipment_type == EquipmentType.WATER_HEATER for eq in home.equipment):
        wins.append(Recommendation(
            icon="drop.fill",
            title="Lower Water Heater to 120F",
            detail="Most tanks ship set to 140F. Dropping to 120F reduces standby loss and "
                   "scalding risk.",
            estimated_savings="4-22% of water heating cost",
        ))

    envelope = profile.envelope_score
    if envelope is not None and envelope.weakest_area is not None:
        wins.append(Recommendation(
            icon="house",
            title=f"Improve {envelope.weakest_area}",
            detail=f"{envelope.weakest_area} is the weakest part of the building envelope "
                   f"(envelope grade {envelope.grade.value}).",
        ))

    if not home.energy_bills:
        wins.append(Recommendation(
            icon="doc.text",
            title="Add Your Utility Bills",
            detail="Bills let the audit use your real electricity rate and check its estimate "
                   "against actual usage.",
        ))

    return wins
