"""
Upgrade recommendation engine.

For one piece of equipment, produce exactly three recommendations (Good,
Better, Best) with quoted cost range, annual savings, simple payback, the
federal tax credit and the payback after that credit.
"""

from __future__ import annotations

from loguru import logger

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import (
    DEFAULT_ELECTRICITY_RATE,
    DEFAULT_GAS_RATE,
    DEFAULT_HOME_SQFT,
    FURNACE_BASELINE_AFUE,
    HEAT_PUMP_REPLACEMENT_HSPF,
    HVAC_SPEND_PER_SQFT,
    TAX_CREDIT_25C_ANNUAL_CAP,
    TAX_CREDIT_25D_KEYWORDS,
    WATER_HEATING_BASELINE,
    WATER_HEATING_TYPES,
)
from home_audit.audit_engine.upgrade_catalog import (
    DRYER_BASELINE_CEF,
    DRYER_BASELINE_COST,
    INSULATION_MAX_R,
    INSULATION_SHARE_OF_HVAC,
    MIN_WINDOW_COUNT,
    SQFT_PER_WINDOW,
    UNIT_COST_SPREAD,
    UPGRADE_CATALOG,
    WASHER_BASELINE_COST,
    WASHER_BASELINE_IMEF,
    WINDOW_SHARE_OF_HVAC,
    CostBasis,
    TierSpec,
)
from home_audit.models import (
    ClimateZone,
    Equipment,
    EquipmentType,
    TaxCreditSummary,
    UpgradeRecommendation,
    UpgradeTier,
)


def scale_cost(low: float, high: float, sq_ft: float) -> tuple[float, float]:
    """Interpolate a base cost range by home size.

    Homes up to 2000 sq ft get the low end, 3000+ sq ft the high end. The low
    bound moves by at most 30% of the spread; the high bound moves from 30% to
    100% of it.
    """
    t = min(max((sq_ft - 2000) / 1000, 0.0), 1.0)
    spread = high - low
    return low + spread * t * 0.3, low + spread * (0.3 + t * 0.7)


def window_count(sq_ft: float) -> int:
    """Rough number of windows: one per 150 sq ft, at least five."""
    return max(int(sq_ft / SQFT_PER_WINDOW), MIN_WINDOW_COUNT)


def make_recommendation(spec: TierSpec, cost_low: float, cost_high: float,
                        annual_savings: float, already_meets: bool) -> UpgradeRecommendation:
    """Assemble a recommendation, deriving payback and credit figures."""
    avg = (cost_low + cost_high) / 2
    payback = efficiency.payback_years(avg, annual_savings)

    credit = 0.0
    if spec.tax_credit_eligible:
        raw = avg * spec.credit_percent
        credit = min(raw, spec.credit_cap) if spec.credit_cap > 0 else raw

    effective = payback
    if payback is not None and credit > 0:
        effective = max(avg - credit, 0.0) / annual_savings

    return UpgradeRecommendation(
        tier=spec.tier,
        title=spec.title,
        upgrade_target=spec.target_label,
        cost_low=cost_low,
        cost_high=cost_high,
        annual_savings=annual_savings,
        payback_years=payback,
        explanation=spec.explanation,
        tax_credit_eligible=spec.tax_credit_eligible,
        tax_credit_amount=credit,
        effective_payback_years=effective,
        technology_note=spec.technology_note,
        already_meets_this_tier=already_meets,
    )


class UpgradeEngine:
    """Generate tiered upgrades using the home's climate, size and utility rates."""

    def __init__(
        self,
        climate_zone: ClimateZone,
        home_sq_ft: float,
        electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
        gas_rate: float = DEFAULT_GAS_RATE,
    ):
        self.climate_zone = climate_zone
        self.sq_ft = home_sq_ft if home_sq_ft > 0 else DEFAULT_HOME_SQFT
        self.electricity_rate = electricity_rate
        self.gas_rate = gas_rate

    # --- public API ---

    def generate(self, equipment: Equipment) -> list[UpgradeRecommendation]:
        """Return the Good, Better and Best recommendations for *equipment*."""
        eq_type = equipment.equipment_type
        current = efficiency.current_efficiency(equipment)

        upgrades = []
        for spec in UPGRADE_CATALOG[eq_type]:
            low, high = self._quote(spec)
            savings = self._savings(eq_type, spec, current)
            meets = spec.target is not None and efficiency.meets_target(eq_type, current, spec.target)
            upgrades.append(make_recommendation(spec, low, high, savings, meets))

        logger.debug(
            f"{efficiency.label(eq_type)} at {current} {efficiency.efficiency_unit(eq_type)}: "
            f"best tier saves ${upgrades[-1].annual_savings:.0f}/yr"
        )
        return upgrades

    # --- cost ---

    def _quote(self, spec: TierSpec) -> tuple[float, float]:
        lo_mult, hi_mult = UNIT_COST_SPREAD
        if spec.cost_basis == CostBasis.SCALED:
            return scale_cost(spec.cost_low, spec.cost_high, self.sq_ft)
        if spec.cost_basis == CostBasis.PER_SQFT:
            base = self.sq_ft * spec.cost_low
            return base * lo_mult, base * hi_mult
        if spec.cost_basis == CostBasis.PER_WINDOW:
            base = window_count(self.sq_ft) * spec.cost_low
            return base * lo_mult, base * hi_mult
        return spec.cost_low, spec.cost_high

    # --- savings ---

    def _savings(self, eq_type: EquipmentType, spec: TierSpec, current: float) -> float:
        if eq_type == EquipmentType.CENTRAL_AC and spec.tier == UpgradeTier.BEST:
            return self._cost_model_savings(eq_type, current, spec.target) + self._heating_savings(
                EquipmentType.FURNACE, FURNACE_BASELINE_AFUE
            )
        if eq_type == EquipmentType.FURNACE and spec.tier == UpgradeTier.BEST:
            return self._heating_savings(EquipmentType.FURNACE, current)
        if eq_type in (EquipmentType.CENTRAL_AC, EquipmentType.HEAT_PUMP,
                       EquipmentType.FURNACE, EquipmentType.WINDOW_UNIT):
            return self._cost_model_savings(eq_type, current, spec.target)
        if eq_type in WATER_HEATING_TYPES:
            return _baseline_savings(WATER_HEATING_BASELINE, 1.0, current, spec.target)
        if eq_type == EquipmentType.THERMOSTAT:
            return self._hvac_spend * spec.savings_fraction
        if eq_type == EquipmentType.INSULATION:
            return self._insulation_savings(current, spec.target)
        if eq_type == EquipmentType.WINDOWS:
            return self._window_savings(current, spec.target)
        if eq_type == EquipmentType.WASHER:
            return _baseline_savings(
                WASHER_BASELINE_COST, WASHER_BASELINE_IMEF, current, spec.target
            ) + spec.savings_bonus
        if eq_type == EquipmentType.DRYER:
            return _baseline_savings(DRYER_BASELINE_COST, DRYER_BASELINE_CEF, current, spec.target)
        return 0.0

    @property
    def _hvac_spend(self) -> float:
        return self.sq_ft * HVAC_SPEND_PER_SQFT

    def _cost_model_savings(self, eq_type: EquipmentType, current: float, target: float) -> float:
        return efficiency.estimate_annual_savings(
            eq_type, current, target, self.sq_ft, self.climate_zone,
            self.electricity_rate, self.gas_rate,
        )

    def _heating_savings(self, eq_type: EquipmentType, current: float) -> float:
        """Gas heating cost at *current* efficiency minus heat pump heating cost."""
        gas_cost = efficiency.estimate_annual_cost(
            eq_type, current, self.sq_ft, self.climate_zone, self.electricity_rate, self.gas_rate
        )
        hp_cost = efficiency.estimate_heat_pump_heating_cost(
            HEAT_PUMP_REPLACEMENT_HSPF, self.sq_ft, self.climate_zone, self.electricity_rate
        )
        return max(gas_cost - hp_cost, 0.0)

    def _insulation_savings(self, current: float, target: float) -> float:
        current_ratio = min(current / INSULATION_MAX_R, 1.0)
        target_ratio = min(target / INSULATION_MAX_R, 1.0)
        return max((target_ratio - current_ratio) * self._hvac_spend * INSULATION_SHARE_OF_HVAC, 0.0)

    def _window_savings(self, current: float, target: float) -> float:
        if current <= 0:
            return 0.0
        reduction = max((current - target) / current, 0.0)
        return self._hvac_spend * WINDOW_SHARE_OF_HVAC * reduction


def _baseline_savings(baseline_cost: float, baseline_eff: float, current: float, target: float) -> float:
    """Savings when cost scales as baseline_cost * baseline_eff / efficiency."""
    current_cost = baseline_cost * baseline_eff / current if current > 0 else baseline_cost
    return max(current_cost - baseline_cost * baseline_eff / target, 0.0)


def generate_upgrades(
    equipment: Equipment,
    climate_zone: ClimateZone,
    home_sq_ft: float,
    electricity_rate: float = DEFAULT_ELECTRICITY_RATE,
    gas_rate: float = DEFAULT_GAS_RATE,
) -> list[UpgradeRecommendation]:
    """Good / Better / Best recommendations for one piece of equipment."""
    engine = UpgradeEngine(climate_zone, home_sq_ft, electricity_rate, gas_rate)
    return engine.generate(equipment)


def _is_25d(rec: UpgradeRecommendation) -> bool:
    if rec.technology_note and "25D" in rec.technology_note:
        return True
    title = rec.title.lower()
    return any(keyword in title for keyword in TAX_CREDIT_25D_KEYWORDS)


def aggregate_tax_credits(all_upgrades: list[list[UpgradeRecommendation]]) -> TaxCreditSummary:
    """Total the Best-tier credits, capping the §25C share at the annual limit."""
    sum_25c = 0.0
    sum_25d = 0.0
    for upgrades in all_upgrades:
        best = next((u for u in upgrades if u.tier == UpgradeTier.BEST), None)
        if best is None or not best.tax_credit_eligible:
            continue
        if _is_25d(best):
            sum_25d += best.tax_credit_amount
        else:
            sum_25c += best.tax_credit_amount

    capped_25c = min(sum_25c, TAX_CREDIT_25C_ANNUAL_CAP)
    return TaxCreditSummary(total_25c=capped_25c, total_25d=sum_25d, grand_total=capped_25c + sum_25d)
