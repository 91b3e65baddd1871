"""Report builder: runs every engine stage for one home.

Flow: home record -> energy profile -> grade -> room loads and tips
     -> tiered upgrades -> tax credits -> rebates -> quick wins -> battery synergy
"""

from __future__ import annotations

from loguru import logger

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.constants import (
    BASE_LOAD_KW_PER_SQFT,
    BATTERY_DEFAULT_SAVINGS_RATIO,
    BATTERY_ENVELOPE_BONUS,
    BATTERY_EVENT_HOURS_PER_YEAR,
    BATTERY_EXPORT_PRICE_HIGH,
    BATTERY_EXPORT_PRICE_LOW,
    BATTERY_HVAC_BONUS,
    BATTERY_MAX_REDUCTION,
    BATTERY_SAVINGS_WEIGHT,
)
from home_audit.audit_engine.grading import grade_home, grade_room
from home_audit.audit_engine.load_calculator import ThermalLoadCalculator
from home_audit.audit_engine.profile import actual_electricity_rate, generate_profile
from home_audit.audit_engine.rebates import match_rebates
from home_audit.audit_engine.tips import home_quick_wins, room_recommendations
from home_audit.audit_engine.upgrades import UpgradeEngine, aggregate_tax_credits
from home_audit.config import Settings, get_settings
from home_audit.models import (
    AuditReport,
    BatterySynergy,
    EquipmentType,
    EquipmentUpgrades,
    Home,
    RoomAssessment,
    TaxCreditSummary,
    UpgradeSummary,
    USState,
)

# Upgrades saving less than this per year at the Best tier are left out of the report
MIN_BEST_TIER_SAVINGS = 10.0
_MISSING_PAYBACK = 999.0

_HVAC_UPGRADE_TYPES = frozenset({
    EquipmentType.CENTRAL_AC,
    EquipmentType.HEAT_PUMP,
    EquipmentType.FURNACE,
})


class AuditReportBuilder:
    """End-to-end home audit report."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.calculator = ThermalLoadCalculator()

    def build(self, home: Home, state: USState | None = None) -> AuditReport:
        """Build the full report for *home*.

        Args:
            home: The audited home with all of its child records.
            state: Rebate state override; the home's own state is used when omitted.

        Returns:
            AuditReport with every section the home has data for.
        """
        rate = actual_electricity_rate(home, self.settings.default_electricity_rate)
        gas_rate = self.settings.default_gas_rate
        sq_ft = home.computed_total_sq_ft if home.computed_total_sq_ft > 0 else self.settings.default_home_sq_ft

        profile = generate_profile(home, rate, gas_rate, sq_ft)
        grade = grade_home(home)

        rooms = []
        for room in home.rooms:
            if room.square_footage <= 0:
                continue
            breakdown = self.calculator.calculate_room(room)
            rooms.append(RoomAssessment(
                room_name=room.name,
                breakdown=breakdown,
                grade=grade_room(room),
                recommendations=room_recommendations(room, breakdown),
            ))

        engine = UpgradeEngine(home.climate_zone, sq_ft, rate, gas_rate)
        equipment_upgrades = self._equipment_upgrades(home, engine)

        current_cost, upgraded_cost = self._equipment_costs(home, sq_ft, rate, gas_rate)
        total_savings = max(current_cost - upgraded_cost, 0.0)

        tax_credits = aggregate_tax_credits([eu.upgrades for eu in equipment_upgrades])

        state = state or home.state
        rebates = match_rebates(home, state) if state is not None else []

        battery = None
        if home.equipment:
            battery = self._battery_synergy(sq_ft, current_cost, total_savings, equipment_upgrades)

        report = AuditReport(
            home_name=home.name,
            grade=grade,
            profile=profile,
            rooms=rooms,
            equipment_upgrades=equipment_upgrades,
            total_current_cost=current_cost,
            total_upgraded_cost=upgraded_cost,
            total_savings=total_savings,
            upgrade_summary=self._upgrade_summary(equipment_upgrades, tax_credits),
            tax_credits=tax_credits,
            state=state,
            rebates=rebates,
            quick_wins=home_quick_wins(home, profile, self.settings.default_home_sq_ft),
            battery_synergy=battery,
            next_audit_step=home.audit_progress.next_incomplete_step if home.audit_progress else None,
        )
        logger.info(
            f"Report for '{home.name}': grade {grade.grade.value if grade.grade else 'n/a'}, "
            f"{len(equipment_upgrades)} upgrades, {len(rebates)} rebates"
        )
        return report

    # --- upgrades ---

    def _equipment_upgrades(self, home: Home, engine: UpgradeEngine) -> list[EquipmentUpgrades]:
        """Upgrades worth showing, cheapest Best-tier payback first."""
        kept = []
        for eq in home.equipment:
            entry = EquipmentUpgrades(equipment=eq, upgrades=engine.generate(eq))
            if entry.best is None or entry.best.annual_savings <= MIN_BEST_TIER_SAVINGS:
                logger.debug(f"Skipping {efficiency.label(eq.equipment_type)}: best tier saves too little")
                continue
            kept.append(entry)

        def best_payback(entry: EquipmentUpgrades) -> float:
            payback = entry.best.payback_years
            return payback if payback is not None else _MISSING_PAYBACK

        return sorted(kept, key=best_payback)

    def _equipment_costs(self, home: Home, sq_ft: float, rate: float, gas_rate: float) -> tuple[float, float]:
        """Annual equipment cost now and with every item at best-in-class efficiency."""
        current = 0.0
        upgraded = 0.0
        for eq in home.equipment:
            spec = efficiency.spec_for(eq)
            current += efficiency.estimate_annual_cost(
                eq.equipment_type, spec.estimated, sq_ft, home.climate_zone, rate, gas_rate
            )
            upgraded += efficiency.estimate_annual_cost(
                eq.equipment_type, spec.best_in_class, sq_ft, home.climate_zone, rate, gas_rate
            )
        return current, upgraded

    def _upgrade_summary(
        self, equipment_upgrades: list[EquipmentUpgrades], tax_credits: TaxCreditSummary
    ) -> UpgradeSummary | None:
        best = [eu.best for eu in equipment_upgrades if eu.best is not None]
        if not best:
            return None

        savings = sum(r.annual_savings for r in best)
        cost_low = sum(r.cost_low for r in best)
        cost_high = sum(r.cost_high for r in best)
        after_low = max(cost_low - tax_credits.grand_total, 0.0)
        after_high = max(cost_high - tax_credits.grand_total, 0.0)

        average_payback = None
        after_credits_payback = None
        if savings > 0:
            average_payback = (cost_low + cost_high) / 2 / savings
            after_credits_payback = (after_low + after_high) / 2 / savings

        return UpgradeSummary(
            total_annual_savings=savings,
            total_cost_low=cost_low,
            total_cost_high=cost_high,
            total_credits=tax_credits.grand_total,
            after_credits_low=after_low,
            after_credits_high=after_high,
            average_payback_years=average_payback,
            after_credits_payback_years=after_credits_payback,
        )

    # --- battery ---

    def _battery_synergy(
        self,
        sq_ft: float,
        current_cost: float,
        total_savings: float,
        equipment_upgrades: list[EquipmentUpgrades],
    ) -> BatterySynergy:
        """Heuristic estimate of the extra battery export capacity efficiency upgrades free up."""
        base_load = sq_ft * BASE_LOAD_KW_PER_SQFT
        if total_savings > 0:
            savings_ratio = total_savings / max(current_cost, 1.0)
        else:
            savings_ratio = BATTERY_DEFAULT_SAVINGS_RATIO

        upgraded_types = {eu.equipment.equipment_type for eu in equipment_upgrades}
        bonus = 0.0
        if EquipmentType.INSULATION in upgraded_types:
            bonus += BATTERY_ENVELOPE_BONUS
        if upgraded_types & _HVAC_UPGRADE_TYPES:
            bonus += BATTERY_HVAC_BONUS

        reduction = min(savings_ratio * BATTERY_SAVINGS_WEIGHT + bonus, BATTERY_MAX_REDUCTION)
        upgraded_load = base_load * (1.0 - reduction)
        export_gain = base_load - upgraded_load

        return BatterySynergy(
            current_base_load_kw=base_load,
            upgraded_base_load_kw=upgraded_load,
            export_gain_kw=export_gain,
            revenue_low=export_gain * BATTERY_EVENT_HOURS_PER_YEAR * BATTERY_EXPORT_PRICE_LOW,
            revenue_high=export_gain * BATTERY_EVENT_HOURS_PER_YEAR * BATTERY_EXPORT_PRICE_HIGH,
            illustrative=True,
        )
