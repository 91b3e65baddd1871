"""
Upgrade catalog: Good / Better / Best options for every equipment type.

Each entry carries the literal efficiency target, the base cost range and how
it scales, the federal tax credit terms, and the copy shown to the homeowner.
Savings rules live in ``upgrades.py``; this module is data only.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from home_audit.models import EquipmentType, UpgradeTier


class CostBasis(str, Enum):
    """How a tier's base cost range turns into a quote for a given home."""
    SCALED = "scaled"          # interpolated by home size, see scale_cost()
    FIXED = "fixed"            # used as-is
    PER_SQFT = "per_sqft"      # $/sq ft * home sq ft * (0.8, 1.2)
    PER_WINDOW = "per_window"  # $/window * estimated window count * (0.8, 1.2)


class TierSpec(BaseModel):
    """One catalog entry."""
    model_config = ConfigDict(frozen=True)

    tier: UpgradeTier
    title: str
    target_label: str
    target: Optional[float]  # efficiency the tier reaches; None never counts as already met
    cost_basis: CostBasis
    cost_low: float          # for PER_SQFT / PER_WINDOW this is the unit price
    cost_high: float = 0.0
    credit_percent: float = 0.0
    credit_cap: float = 0.0  # 0 = uncapped
    savings_fraction: float = 0.0  # thermostat share of HVAC spend
    savings_bonus: float = 0.0
    explanation: str = ""
    technology_note: Optional[str] = None

    @property
    def tax_credit_eligible(self) -> bool:
        return self.credit_percent > 0


_G, _BT, _BS = UpgradeTier.GOOD, UpgradeTier.BETTER, UpgradeTier.BEST

# ---------------------------------------------------------------------------
# CATALOG
# ---------------------------------------------------------------------------
UPGRADE_CATALOG: dict[EquipmentType, tuple[TierSpec, TierSpec, TierSpec]] = {
    EquipmentType.CENTRAL_AC: (
        TierSpec(
            tier=_G, title="High-Efficiency Central AC", target_label="16 SEER", target=16.0,
            cost_basis=CostBasis.SCALED, cost_low=4000, cost_high=6500,
            credit_percent=0.30, credit_cap=600,
            explanation="Replace with a code-compliant 16 SEER unit. Reliable, widely available, "
                        "and the most cost-effective upgrade.",
            technology_note="Single-stage compressor with R-410A or R-454B refrigerant. "
                            "IRS 25C eligible up to $600.",
        ),
        TierSpec(
            tier=_BT, title="Variable-Speed Central AC", target_label="20 SEER", target=20.0,
            cost_basis=CostBasis.SCALED, cost_low=6000, cost_high=9000,
            credit_percent=0.30, credit_cap=600,
            explanation="A variable-speed compressor runs at low capacity most of the time, "
                        "giving better humidity control and quieter operation.",
            technology_note="Inverter-driven compressor. IRS 25C eligible.",
        ),
        TierSpec(
            tier=_BS, title="Cold-Climate Heat Pump (replaces AC + Furnace)",
            target_label="24 SEER / 13 HSPF", target=24.0,
            cost_basis=CostBasis.SCALED, cost_low=8000, cost_high=14000,
            credit_percent=0.30, credit_cap=2000,
            explanation="One ducted heat pump handles cooling and heating, removing the gas "
                        "furnace. Savings combine higher cooling efficiency with no gas heating bill.",
            technology_note="IRS 25D: 30% federal tax credit for heat pumps. "
                            "Operates efficiently down to -15F.",
        ),
    ),
    EquipmentType.HEAT_PUMP: (
        TierSpec(
            tier=_G, title="Standard Heat Pump Upgrade", target_label="16 SEER", target=16.0,
            cost_basis=CostBasis.SCALED, cost_low=5000, cost_high=7500,
            credit_percent=0.30, credit_cap=2000,
            explanation="Replace with a current-code 16 SEER heat pump.",
            technology_note="IRS 25D: 30% federal credit for qualifying heat pumps. Single-stage.",
        ),
        TierSpec(
            tier=_BT, title="Variable-Speed Heat Pump", target_label="20 SEER", target=20.0,
            cost_basis=CostBasis.SCALED, cost_low=7000, cost_high=10000,
            credit_percent=0.30, credit_cap=2000,
            explanation="An inverter-driven compressor adjusts output continuously for better "
                        "comfort and 30-40% lower operating cost than single-stage.",
            technology_note="IRS 25D eligible.",
        ),
        TierSpec(
            tier=_BS, title="Premium Cold-Climate Heat Pump", target_label="25 SEER / 13 HSPF",
            target=25.0, cost_basis=CostBasis.SCALED, cost_low=10000, cost_high=16000,
            credit_percent=0.30, credit_cap=2000,
            explanation="Top-tier cold-climate heat pump with enhanced vapor injection. Heats "
                        "efficiently down to -15F without backup strips.",
            technology_note="IRS 25D: 30% federal credit. ENERGY STAR Cold Climate certified.",
        ),
    ),
    EquipmentType.FURNACE: (
        TierSpec(
            tier=_G, title="High-Efficiency Gas Furnace", target_label="90% AFUE", target=90.0,
            cost_basis=CostBasis.SCALED, cost_low=2500, cost_high=4500,
            explanation="A 90% AFUE condensing furnace captures exhaust heat with a secondary "
                        "heat exchanger.",
            technology_note="Condensing furnaces vent through PVC, not a masonry chimney.",
        ),
        TierSpec(
            tier=_BT, title="Ultra-High-Efficiency Furnace", target_label="96% AFUE", target=96.0,
            cost_basis=CostBasis.SCALED, cost_low=3500, cost_high=6000,
            credit_percent=0.30, credit_cap=600,
            explanation="A modulating furnace with a variable-speed blower and near-zero "
                        "exhaust loss.",
            technology_note="IRS 25C: up to $600 for 97%+ AFUE furnaces.",
        ),
        TierSpec(
            tier=_BS, title="Electrify: Heat Pump (replace gas furnace)",
            target_label="22 SEER / 13 HSPF heat pump", target=None,
            cost_basis=CostBasis.SCALED, cost_low=8000, cost_high=14000,
            credit_percent=0.30, credit_cap=2000,
            explanation="Replace the gas furnace with a ducted heat pump. Removes the gas bill "
                        "and qualifies for the largest federal credit.",
            technology_note="IRS 25D: 30% federal tax credit. Also removes gas meter charges.",
        ),
    ),
    EquipmentType.WATER_HEATER: (
        TierSpec(
            tier=_G, title="High-Efficiency Tank Water Heater", target_label="0.70 UEF", target=0.70,
            cost_basis=CostBasis.SCALED, cost_low=800, cost_high=1500,
            explanation="ENERGY STAR certified tank with better insulation and burner efficiency.",
            technology_note="Gas or electric tank, 40-50 gallons for most homes.",
        ),
        TierSpec(
            tier=_BT, title="Condensing Tankless Water Heater", target_label="0.95 UEF", target=0.95,
            cost_basis=CostBasis.SCALED, cost_low=1500, cost_high=2500,
            credit_percent=0.30, credit_cap=600,
            explanation="On-demand heating with no standby loss. Condensing design reaches "
                        "about 95% efficiency.",
            technology_note="IRS 25C: up to $600. May need a gas line upgrade.",
        ),
        TierSpec(
            tier=_BS, title="Heat Pump Water Heater", target_label="3.5 UEF", target=3.5,
            cost_basis=CostBasis.SCALED, cost_low=2500, cost_high=4500,
            credit_percent=0.30, credit_cap=2000,
            explanation="Moves heat from the surrounding air into the water. Three to four times "
                        "more efficient than a conventional tank.",
            technology_note="IRS 25D: 30% credit. Needs about 700 cu ft of air space.",
        ),
    ),
    EquipmentType.WATER_HEATER_TANKLESS: (
        TierSpec(
            tier=_G, title="Updated Tankless Water Heater", target_label="0.90 UEF", target=0.90,
            cost_basis=CostBasis.SCALED, cost_low=1200, cost_high=2000,
            explanation="A newer non-condensing tankless unit with an improved burner.",
        ),
        TierSpec(
            tier=_BT, title="Condensing Tankless Water Heater", target_label="0.95 UEF", target=0.95,
            cost_basis=CostBasis.SCALED, cost_low=2000, cost_high=3000,
            credit_percent=0.30, credit_cap=600,
            explanation="A condensing unit captures exhaust heat. Top gas efficiency available.",
            technology_note="IRS 25C: up to $600.",
        ),
        TierSpec(
            tier=_BS, title="Heat Pump Water Heater", target_label="3.5 UEF", target=3.5,
            cost_basis=CostBasis.SCALED, cost_low=2500, cost_high=4500,
            credit_percent=0.30, credit_cap=2000,
            explanation="Switch from gas tankless to a heat pump water heater and stop burning "
                        "gas for hot water.",
            technology_note="IRS 25D: 30% credit. Fully electric, pairs well with solar.",
        ),
    ),
    EquipmentType.WINDOW_UNIT: (
        TierSpec(
            tier=_G, title="ENERGY STAR Window AC", target_label="12 EER", target=12.0,
            cost_basis=CostBasis.FIXED, cost_low=300, cost_high=600,
            explanation="An ENERGY STAR certified unit with a better compressor and fan motor.",
        ),
        TierSpec(
            tier=_BT, title="Premium Inverter Window AC", target_label="15 EER", target=15.0,
            cost_basis=CostBasis.FIXED, cost_low=500, cost_high=900,
            explanation="Inverter window units are quieter and 30-40% more efficient.",
            technology_note="Variable-speed compressor for a more even temperature.",
        ),
        TierSpec(
            tier=_BS, title="Ductless Mini-Split Heat Pump", target_label="22 SEER", target=22.0,
            cost_basis=CostBasis.SCALED, cost_low=3000, cost_high=5000,
            credit_percent=0.30, credit_cap=2000,
            explanation="A ductless mini-split heats and cools with far better efficiency than "
                        "a window unit.",
            technology_note="IRS 25D: 30% credit. Wall-mounted indoor head with outdoor compressor.",
        ),
    ),
    EquipmentType.THERMOSTAT: (
        TierSpec(
            tier=_G, title="Programmable Thermostat", target_label="7-day programmable", target=7.5,
            cost_basis=CostBasis.FIXED, cost_low=30, cost_high=80, savings_fraction=0.08,
            explanation="Set schedules for home, away and sleep periods.",
            technology_note="No WiFi required.",
        ),
        TierSpec(
            tier=_BT, title="Smart Thermostat", target_label="WiFi smart thermostat", target=12.5,
            cost_basis=CostBasis.FIXED, cost_low=120, cost_high=250, savings_fraction=0.12,
            credit_percent=0.30, credit_cap=150,
            explanation="App control, geofencing and learning schedules.",
            technology_note="IRS 25C: up to $150. Requires WiFi.",
        ),
        TierSpec(
            tier=_BS, title="Smart Thermostat with Room Sensors",
            target_label="Multi-zone smart thermostat", target=15.0,
            cost_basis=CostBasis.FIXED, cost_low=200, cost_high=350, savings_fraction=0.15,
            credit_percent=0.30, credit_cap=150,
            explanation="Wireless room sensors average temperature across rooms and even out "
                        "hot and cold spots.",
            technology_note="IRS 25C: up to $150.",
        ),
    ),
    EquipmentType.INSULATION: (
        TierSpec(
            tier=_G, title="Blown-In Cellulose (R-38)", target_label="R-38 attic insulation",
            target=38.0, cost_basis=CostBasis.PER_SQFT, cost_low=1.5,
            credit_percent=0.30, credit_cap=1200,
            explanation="Bring attic insulation up to the current code minimum.",
            technology_note="IRS 25C: 30% up to $1,200. DIY-friendly with a rental blower.",
        ),
        TierSpec(
            tier=_BT, title="Deep Blown-In (R-49)", target_label="R-49 attic insulation",
            target=49.0, cost_basis=CostBasis.PER_SQFT, cost_low=2.5,
            credit_percent=0.30, credit_cap=1200,
            explanation="Exceed code with deeper blown-in insulation, as ENERGY STAR recommends "
                        "for most climates.",
            technology_note="IRS 25C: 30% up to $1,200.",
        ),
        TierSpec(
            tier=_BS, title="Spray Foam + Blown-In (R-60)", target_label="R-60 attic insulation",
            target=60.0, cost_basis=CostBasis.PER_SQFT, cost_low=4.0,
            credit_percent=0.30, credit_cap=1200,
            explanation="Closed-cell foam at the roof deck plus blown-in on the attic floor "
                        "gives a full air seal and maximum R-value.",
            technology_note="IRS 25C: 30% up to $1,200. Spray foam doubles as a vapor barrier.",
        ),
    ),
    EquipmentType.WINDOWS: (
        TierSpec(
            tier=_G, title="Double-Pane Low-E Windows", target_label="U-0.30", target=0.30,
            cost_basis=CostBasis.PER_WINDOW, cost_low=600,
            credit_percent=0.30, credit_cap=600,
            explanation="Double-pane glass with a Low-E coating and argon fill.",
            technology_note="IRS 25C: 30% up to $600 for ENERGY STAR certified windows.",
        ),
        TierSpec(
            tier=_BT, title="Triple-Pane Low-E Windows", target_label="U-0.22", target=0.22,
            cost_basis=CostBasis.PER_WINDOW, cost_low=900,
            credit_percent=0.30, credit_cap=600,
            explanation="Triple-pane glass with two Low-E coatings cuts heat transfer and "
                        "condensation.",
            technology_note="IRS 25C eligible.",
        ),
        TierSpec(
            tier=_BS, title="Vacuum-Insulated or Quad-Pane Windows", target_label="U-0.15",
            target=0.15, cost_basis=CostBasis.PER_WINDOW, cost_low=1400,
            credit_percent=0.30, credit_cap=600,
            explanation="Vacuum-insulated or quad-pane glass approaches wall-level insulation.",
            technology_note="IRS 25C eligible. Limited availability.",
        ),
    ),
    EquipmentType.WASHER: (
        TierSpec(
            tier=_G, title="ENERGY STAR Washer", target_label="2.0 IMEF", target=2.0,
            cost_basis=CostBasis.FIXED, cost_low=600, cost_high=900,
            explanation="A front-load washer using 25% less energy and 33% less water.",
        ),
        TierSpec(
            tier=_BT, title="ENERGY STAR Most Efficient Washer", target_label="2.5 IMEF", target=2.5,
            cost_basis=CostBasis.FIXED, cost_low=900, cost_high=1300,
            explanation="Better water extraction shortens drying time.",
            technology_note="Drier loads also save dryer energy.",
        ),
        TierSpec(
            tier=_BS, title="Heat Pump Washer-Dryer Combo", target_label="2.9 IMEF + heat pump dry",
            target=2.92, cost_basis=CostBasis.FIXED, cost_low=1500, cost_high=2500,
            savings_bonus=80.0,
            explanation="One heat pump washer-dryer replaces the separate dryer and halves "
                        "laundry energy.",
        ),
    ),
    EquipmentType.DRYER: (
        TierSpec(
            tier=_G, title="ENERGY STAR Electric Dryer", target_label="3.5 CEF", target=3.5,
            cost_basis=CostBasis.FIXED, cost_low=500, cost_high=800,
            explanation="Moisture sensors stop the cycle before clothes over-dry.",
        ),
        TierSpec(
            tier=_BT, title="Ventless Heat Pump Dryer", target_label="4.0 CEF", target=4.0,
            cost_basis=CostBasis.FIXED, cost_low=800, cost_high=1200,
            explanation="Uses half the energy of a conventional dryer and needs no outside vent.",
            technology_note="Recirculates air through a heat exchanger.",
        ),
        TierSpec(
            tier=_BS, title="Premium Heat Pump Dryer", target_label="5.2 CEF", target=5.2,
            cost_basis=CostBasis.FIXED, cost_low=1100, cost_high=1800,
            explanation="Top-efficiency heat pump dryer with advanced moisture sensing.",
            technology_note="Longest cycle times but the lowest running cost.",
        ),
    ),
}

# ---------------------------------------------------------------------------
# SAVINGS BASELINES for types without a direct cost model
# ---------------------------------------------------------------------------
INSULATION_MAX_R = 60.0
INSULATION_SHARE_OF_HVAC = 0.3
WINDOW_SHARE_OF_HVAC = 0.25
SQFT_PER_WINDOW = 150
MIN_WINDOW_COUNT = 5
WASHER_BASELINE_COST = 80.0   # $/yr at 2.0 IMEF
WASHER_BASELINE_IMEF = 2.0
DRYER_BASELINE_COST = 100.0   # $/yr at 3.0 CEF
DRYER_BASELINE_CEF = 3.0
UNIT_COST_SPREAD = (0.8, 1.2)
