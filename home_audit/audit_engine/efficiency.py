"""Equipment efficiency lookups and the annual running-cost model."""

from __future__ import annotations

from home_audit.audit_engine.constants import (
    COOLING_FACTOR,
    DEFAULT_ELECTRICITY_RATE,
    DEFAULT_GAS_RATE,
    EFFICIENCY_TABLE,
    EQUIPMENT_META,
    FURNACE_THERM_FACTOR,
    HEAT_PUMP_HEATING_BTU_PER_SQFT,
    WATER_HEATING_BASELINE,
    WATER_HEATING_TYPES,
)
from home_audit.models import (
    AgeRange,
    ClimateZone,
    EfficiencySpec,
    Equipment,
    EquipmentType,
)

_COOLING_TYPES = frozenset({
    EquipmentType.CENTRAL_AC,
    EquipmentType.HEAT_PUMP,
    EquipmentType.WINDOW_UNIT,
})


# --- table lookups ---

def lookup(equipment_type: EquipmentType, age: AgeRange) -> EfficiencySpec:
    """Return the efficiency table entry for *equipment_type* at *age*."""
    return EFFICIENCY_TABLE[equipment_type][age]


def label(equipment_type: EquipmentType) -> str:
    return EQUIPMENT_META[equipment_type][0]


def efficiency_unit(equipment_type: EquipmentType) -> str:
    return EQUIPMENT_META[equipment_type][1]


def icon(equipment_type: EquipmentType) -> str:
    return EQUIPMENT_META[equipment_type][2]


def higher_is_better(equipment_type: EquipmentType) -> bool:
    """False only for metrics where a lower number is more efficient (window U-factor)."""
    return EQUIPMENT_META[equipment_type][3]


def meets_target(equipment_type: EquipmentType, current: float, target: float) -> bool:
    """True when *current* is at least as efficient as *target*.

    A non-positive reading is never efficient, whichever way the metric runs.
    """
    if current <= 0:
        return False
    if higher_is_better(equipment_type):
        return current >= target
    return current <= target


def spec_for(equipment: Equipment) -> EfficiencySpec:
    """Table entry for *equipment* with any recorded values taking precedence."""
    table = lookup(equipment.equipment_type, equipment.age_range)
    return EfficiencySpec(
        estimated=current_efficiency(equipment),
        code_minimum=equipment.code_minimum if equipment.code_minimum is not None else table.code_minimum,
        best_in_class=equipment.best_in_class if equipment.best_in_class is not None else table.best_in_class,
        upgrade_cost=table.upgrade_cost,
    )


def current_efficiency(equipment: Equipment) -> float:
    """Recorded efficiency if present, else the age-bracket estimate."""
    if equipment.estimated_efficiency is not None:
        return equipment.estimated_efficiency
    return lookup(equipment.equipment_type, equipment.age_range).estimated


# --- cost model ---

def estimate_annual_cost(
    equipment_type: EquipmentType,
    efficiency: float,
    home_sq_ft: float,
    climate_zone: ClimateZone,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    gas_rate: float = DEFAULT_GAS_RATE,
) -> float:
    """Approximate annual running cost in $ for one piece of equipment.

    Cooling equipment uses full-load-hour factors per climate
    (hot 30 BTU * 1800 h, moderate 25 * 1100, cold 35 * 600, all / 1000).
    Types without a direct cost model (thermostat, insulation, windows,
    washer, dryer) return 0. A non-positive efficiency returns 0.
    """
    if efficiency <= 0:
        return 0.0
    if equipment_type in _COOLING_TYPES:
        return home_sq_ft * COOLING_FACTOR[climate_zone] / efficiency * electricity_rate
    if equipment_type == EquipmentType.FURNACE:
        return home_sq_ft * FURNACE_THERM_FACTOR[climate_zone] * gas_rate / efficiency
    if equipment_type in WATER_HEATING_TYPES:
        return WATER_HEATING_BASELINE / efficiency
    return 0.0


def estimate_annual_savings(
    equipment_type: EquipmentType,
    current_efficiency: float,
    target_efficiency: float,
    home_sq_ft: float,
    climate_zone: ClimateZone,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    gas_rate: float = DEFAULT_GAS_RATE,
) -> float:
    """Cost at *current_efficiency* minus cost at *target_efficiency*, floored at 0."""
    current = estimate_annual_cost(
        equipment_type, current_efficiency, home_sq_ft, climate_zone, electricity_rate, gas_rate
    )
    upgraded = estimate_annual_cost(
        equipment_type, target_efficiency, home_sq_ft, climate_zone, electricity_rate, gas_rate
    )
    return max(current - upgraded, 0.0)


def estimate_heat_pump_heating_cost(
    hspf: float,
    home_sq_ft: float,
    climate_zone: ClimateZone,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
) -> float:
    """Annual electric cost of heating the home with a heat pump of the given HSPF."""
    if hspf <= 0:
        return 0.0
    kwh = home_sq_ft * HEAT_PUMP_HEATING_BTU_PER_SQFT[climate_zone] / (hspf * 1000)
    return kwh * electricity_rate


def payback_years(upgrade_cost: float, annual_savings: float) -> float | None:
    """Simple payback in years, or None when there are no savings."""
    if annual_savings <= 0:
        return None
    return upgrade_cost / annual_savings
