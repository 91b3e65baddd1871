"""Shared Pydantic data models for the home energy audit engine."""

from __future__ import annotations

from datetime import date
from enum import Enum, IntEnum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


# --- Enums ---

class _LenientEnum(str, Enum):
    """String enum that decodes stored values by value or member name, ignoring case.

    Unrecognised values resolve to ``_fallback()``; a ``None`` fallback makes
    the lookup raise ``ValueError`` as a normal Enum would.
    """

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace(" ", "_")
            for member in cls:
                if key in (member.value.lower(), member.name.lower()):
                    return member
        return cls._fallback()

    @classmethod
    def _fallback(cls):
        return None


def _lenient(enum_cls):
    """BeforeValidator that routes raw input through the enum's lenient lookup."""
    return BeforeValidator(lambda v: v if isinstance(v, enum_cls) or v is None else enum_cls(v))


class ClimateZone(_LenientEnum):
    HOT = "hot"
    MODERATE = "moderate"
    COLD = "cold"

    @classmethod
    def _fallback(cls):
        return cls.MODERATE


class InsulationQuality(_LenientEnum):
    """Insulation rating. UNKNOWN means "not selected yet" and calculates as AVERAGE."""
    UNKNOWN = "unknown"
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"

    @classmethod
    def _fallback(cls):
        return cls.UNKNOWN


class CeilingHeight(IntEnum):
    """Ceiling height options in feet."""
    EIGHT = 8
    NINE = 9
    TEN = 10
    TWELVE = 12

    @classmethod
    def _missing_(cls, value):
        try:
            feet = int(str(value).strip().lower().removesuffix("ft").strip())
        except ValueError:
            return cls.EIGHT
        for member in cls:
            if member.value == feet:
                return member
        return cls.EIGHT


class CardinalDirection(_LenientEnum):
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"

    @classmethod
    def _fallback(cls):
        return cls.SOUTH


class WindowSize(_LenientEnum):
    SMALL = "small"     # ~10 sq ft
    MEDIUM = "medium"   # ~20 sq ft
    LARGE = "large"     # ~35 sq ft

    @classmethod
    def _fallback(cls):
        return cls.MEDIUM


class PaneType(_LenientEnum):
    NOT_ASSESSED = "not_assessed"
    SINGLE = "single"
    DOUBLE = "double"
    TRIPLE = "triple"

    @classmethod
    def _fallback(cls):
        return cls.NOT_ASSESSED


class FrameMaterial(_LenientEnum):
    NOT_ASSESSED = "not_assessed"
    ALUMINUM = "aluminum"
    WOOD = "wood"
    VINYL = "vinyl"
    FIBERGLASS = "fiberglass"
    COMPOSITE = "composite"

    @classmethod
    def _fallback(cls):
        return cls.NOT_ASSESSED


class WindowCondition(_LenientEnum):
    NOT_ASSESSED = "not_assessed"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def _fallback(cls):
        return cls.NOT_ASSESSED


class EquipmentType(_LenientEnum):
    """Closed set of equipment the efficiency model knows about.

    No fallback: an unrecognised type cannot be priced or upgraded.
    """
    CENTRAL_AC = "central_ac"
    HEAT_PUMP = "heat_pump"
    FURNACE = "furnace"
    WATER_HEATER = "water_heater"
    WATER_HEATER_TANKLESS = "water_heater_tankless"
    WINDOW_UNIT = "window_unit"
    THERMOSTAT = "thermostat"
    INSULATION = "insulation"
    WINDOWS = "windows"
    WASHER = "washer"
    DRYER = "dryer"


class AgeRange(_LenientEnum):
    YEARS_0_5 = "0-5"
    YEARS_5_10 = "5-10"
    YEARS_10_15 = "10-15"
    YEARS_15_20 = "15-20"
    YEARS_20_PLUS = "20+"

    @classmethod
    def _fallback(cls):
        return cls.YEARS_5_10


class ApplianceCategory(_LenientEnum):
    # Kitchen
    REFRIGERATOR = "refrigerator"
    FREEZER = "freezer"
    DISHWASHER = "dishwasher"
    MICROWAVE = "microwave"
    OVEN = "oven"
    COFFEE_MAKER = "coffee_maker"
    # Entertainment
    TELEVISION = "television"
    GAME_CONSOLE = "game_console"
    CABLE_BOX = "cable_box"
    SOUND_SYSTEM = "sound_system"
    # Office
    COMPUTER = "computer"
    MONITOR = "monitor"
    ROUTER = "router"
    PRINTER = "printer"
    # Laundry
    WASHING_MACHINE = "washing_machine"
    CLOTHES_DRYER = "clothes_dryer"
    # Climate
    SPACE_HEATER = "space_heater"
    DEHUMIDIFIER = "dehumidifier"
    CEILING_FAN = "ceiling_fan"
    EV_CHARGER = "ev_charger"
    # Lighting
    LED_BULB = "led_bulb"
    CFL_BULB = "cfl_bulb"
    INCANDESCENT_BULB = "incandescent_bulb"
    OTHER = "other"

    @classmethod
    def _fallback(cls):
        return cls.OTHER


class DetectionMethod(_LenientEnum):
    MANUAL = "manual"
    CAMERA = "camera"
    OCR = "ocr"

    @classmethod
    def _fallback(cls):
        return cls.MANUAL


class BasementInsulation(_LenientEnum):
    UNINSULATED = "uninsulated"
    PARTIAL = "partial"
    FULL = "full"

    @classmethod
    def _fallback(cls):
        return cls.UNINSULATED


class SealingQuality(_LenientEnum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def _fallback(cls):
        return cls.FAIR


class YearRange(_LenientEnum):
    PRE_1970 = "pre_1970"
    Y1970_1989 = "1970_1989"
    Y1990_2005 = "1990_2005"
    Y2006_2015 = "2006_2015"
    Y2016_PLUS = "2016_plus"

    @classmethod
    def _fallback(cls):
        return cls.Y1990_2005


class HomeType(_LenientEnum):
    HOUSE = "house"
    TOWNHOUSE = "townhouse"
    APARTMENT = "apartment"


class USState(_LenientEnum):
    """States with an embedded rebate table. Decodes full names and postal codes."""
    CALIFORNIA = "California"
    TEXAS = "Texas"
    FLORIDA = "Florida"
    NEW_YORK = "New York"
    PENNSYLVANIA = "Pennsylvania"
    ILLINOIS = "Illinois"
    OHIO = "Ohio"
    GEORGIA = "Georgia"
    NORTH_CAROLINA = "North Carolina"
    MICHIGAN = "Michigan"
    NEW_JERSEY = "New Jersey"
    VIRGINIA = "Virginia"
    WASHINGTON = "Washington"
    ARIZONA = "Arizona"
    MASSACHUSETTS = "Massachusetts"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                if key.lower() == member.value.lower() or key.upper() == _STATE_CODES[member]:
                    return member
        return super()._missing_(value)

    @property
    def code(self) -> str:
        return _STATE_CODES[self]


_STATE_CODES: dict[USState, str] = {
    USState.CALIFORNIA: "CA",
    USState.TEXAS: "TX",
    USState.FLORIDA: "FL",
    USState.NEW_YORK: "NY",
    USState.PENNSYLVANIA: "PA",
    USState.ILLINOIS: "IL",
    USState.OHIO: "OH",
    USState.GEORGIA: "GA",
    USState.NORTH_CAROLINA: "NC",
    USState.MICHIGAN: "MI",
    USState.NEW_JERSEY: "NJ",
    USState.VIRGINIA: "VA",
    USState.WASHINGTON: "WA",
    USState.ARIZONA: "AZ",
    USState.MASSACHUSETTS: "MA",
}


def _or_none(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def parse_state(value) -> Optional[USState]:
    """Decode a state name or postal code; unsupported states return None."""
    return _or_none(USState, value)


class UpgradeTier(str, Enum):
    GOOD = "good"
    BETTER = "better"
    BEST = "best"


class LetterGrade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class AuditStep(_LenientEnum):
    """Audit walkthrough steps, in the order the audit visits them."""
    HOME_BASICS = "home_basics"
    ROOM_SCANNING = "room_scanning"
    HVAC_EQUIPMENT = "hvac_equipment"
    WATER_HEATING = "water_heating"
    APPLIANCE_INVENTORY = "appliance_inventory"
    LIGHTING_AUDIT = "lighting_audit"
    WINDOW_ASSESSMENT = "window_assessment"
    ENVELOPE_ASSESSMENT = "envelope_assessment"
    BILL_UPLOAD = "bill_upload"
    REVIEW = "review"

    @classmethod
    def _fallback(cls):
        return cls.HOME_BASICS

    @property
    def step_number(self) -> int:
        return list(AuditStep).index(self) + 1


# --- Input records ---

class WindowInfo(BaseModel):
    """One window in a room. Unassessed attributes calculate as double/vinyl-neutral/good."""
    direction: Annotated[CardinalDirection, _lenient(CardinalDirection)] = CardinalDirection.SOUTH
    size: Annotated[WindowSize, _lenient(WindowSize)] = WindowSize.MEDIUM
    pane_type: Annotated[PaneType, _lenient(PaneType)] = PaneType.DOUBLE
    frame_material: Annotated[FrameMaterial, _lenient(FrameMaterial)] = FrameMaterial.VINYL
    condition: Annotated[WindowCondition, _lenient(WindowCondition)] = WindowCondition.GOOD

    @property
    def is_fully_assessed(self) -> bool:
        return (
            self.pane_type != PaneType.NOT_ASSESSED
            and self.frame_material != FrameMaterial.NOT_ASSESSED
            and self.condition != WindowCondition.NOT_ASSESSED
        )


class Room(BaseModel):
    """A scanned or manually entered room.

    ``calculated_btu`` / ``calculated_tonnage`` are a display cache only; the
    load calculator always recomputes from the other fields.
    """
    name: str = ""
    square_footage: float = Field(ge=0, default=0.0, description="Floor area in sq ft (0 = placeholder)")
    ceiling_height: Annotated[CeilingHeight, _lenient(CeilingHeight)] = CeilingHeight.EIGHT
    climate_zone: Annotated[ClimateZone, _lenient(ClimateZone)] = ClimateZone.MODERATE
    insulation: Annotated[InsulationQuality, _lenient(InsulationQuality)] = InsulationQuality.AVERAGE
    windows: list[WindowInfo] = Field(default_factory=list)
    calculated_btu: float = 0.0
    calculated_tonnage: float = 0.0
    scan_was_used: bool = False


class Equipment(BaseModel):
    """A piece of logged equipment.

    ``estimated_efficiency`` holds a nameplate/OCR/manual value when known;
    when absent the efficiency table estimate for the age bracket is used.
    """
    equipment_type: Annotated[EquipmentType, _lenient(EquipmentType)]
    age_range: Annotated[AgeRange, _lenient(AgeRange)] = AgeRange.YEARS_5_10
    estimated_efficiency: Optional[float] = None
    code_minimum: Optional[float] = None
    best_in_class: Optional[float] = None
    manufacturer: Optional[str] = None
    model_number: Optional[str] = None
    notes: Optional[str] = None


class Appliance(BaseModel):
    """A plug load or light fixture group."""
    category: Annotated[ApplianceCategory, _lenient(ApplianceCategory)] = ApplianceCategory.OTHER
    name: str = ""
    wattage: float = Field(ge=0, default=0.0)
    hours_per_day: float = Field(ge=0, le=24, default=0.0)
    quantity: int = Field(ge=1, default=1)
    detection_method: Annotated[DetectionMethod, _lenient(DetectionMethod)] = DetectionMethod.MANUAL

    @property
    def display_name(self) -> str:
        return self.name or self.category.value.replace("_", " ").title()

    @property
    def annual_kwh(self) -> float:
        return self.wattage * self.hours_per_day * 365 / 1000.0 * self.quantity

    def annual_cost(self, rate: float) -> float:
        return self.annual_kwh * rate


class EnergyBill(BaseModel):
    """A utility bill. Only electricity figures are used."""
    period_start: date
    period_end: date
    total_kwh: float = Field(ge=0, default=0.0)
    total_cost: float = Field(ge=0, default=0.0)
    rate_per_kwh: Optional[float] = None
    utility_name: Optional[str] = None

    @property
    def billing_days(self) -> int:
        return (self.period_end - self.period_start).days

    @property
    def computed_rate(self) -> float:
        """Explicit $/kWh rate, else cost divided by kWh, else 0."""
        if self.rate_per_kwh is not None and self.rate_per_kwh > 0:
            return self.rate_per_kwh
        if self.total_kwh > 0:
            return self.total_cost / self.total_kwh
        return 0.0

    @property
    def annualized_kwh(self) -> Optional[float]:
        if self.billing_days <= 0 or self.total_kwh <= 0:
            return None
        return self.total_kwh / self.billing_days * 365


class EnvelopeInfo(BaseModel):
    """Building envelope walkthrough answers."""
    attic_insulation: Annotated[InsulationQuality, _lenient(InsulationQuality)] = InsulationQuality.AVERAGE
    wall_insulation: Annotated[InsulationQuality, _lenient(InsulationQuality)] = InsulationQuality.AVERAGE
    basement_insulation: Annotated[BasementInsulation, _lenient(BasementInsulation)] = BasementInsulation.UNINSULATED
    air_sealing: Annotated[SealingQuality, _lenient(SealingQuality)] = SealingQuality.FAIR
    weatherstripping: Annotated[SealingQuality, _lenient(SealingQuality)] = SealingQuality.FAIR
    notes: Optional[str] = None


class AuditProgress(BaseModel):
    """Which audit steps are done. Stored steps that no longer exist decode to HOME_BASICS."""
    completed_steps: list[Annotated[AuditStep, _lenient(AuditStep)]] = Field(default_factory=list)
    current_step: Annotated[AuditStep, _lenient(AuditStep)] = AuditStep.HOME_BASICS

    def is_step_complete(self, step: AuditStep) -> bool:
        return step in self.completed_steps

    def mark_complete(self, step: AuditStep) -> AuditProgress:
        if step in self.completed_steps:
            return self
        return self.model_copy(update={"completed_steps": [*self.completed_steps, step]})

    @property
    def next_incomplete_step(self) -> Optional[AuditStep]:
        for step in AuditStep:
            if step not in self.completed_steps:
                return step
        return None

    @property
    def progress_percentage(self) -> float:
        done = len(set(self.completed_steps))
        return done / len(AuditStep) * 100.0

    @property
    def is_complete(self) -> bool:
        return self.next_incomplete_step is None


class Home(BaseModel):
    """A home and all of its audited child records."""
    name: str = ""
    address: Optional[str] = None
    year_built: Annotated[YearRange, _lenient(YearRange)] = YearRange.Y1990_2005
    total_sq_ft: Optional[float] = Field(default=None, description="Manual total; room sum is used when unset")
    climate_zone: Annotated[ClimateZone, _lenient(ClimateZone)] = ClimateZone.MODERATE
    home_type: Annotated[Optional[HomeType], BeforeValidator(lambda v: _or_none(HomeType, v))] = None
    bedroom_count: Optional[int] = Field(default=None, ge=0)
    state: Annotated[Optional[USState], BeforeValidator(parse_state)] = None

    rooms: list[Room] = Field(default_factory=list)
    equipment: list[Equipment] = Field(default_factory=list)
    appliances: list[Appliance] = Field(default_factory=list)
    energy_bills: list[EnergyBill] = Field(default_factory=list)
    envelope: Optional[EnvelopeInfo] = None
    audit_progress: Optional[AuditProgress] = None

    @property
    def computed_total_sq_ft(self) -> float:
        if self.total_sq_ft is not None and self.total_sq_ft > 0:
            return self.total_sq_ft
        return sum(r.square_footage for r in self.rooms)

    @property
    def total_appliance_annual_kwh(self) -> float:
        return sum(a.annual_kwh for a in self.appliances)

    @property
    def bill_based_annual_kwh(self) -> Optional[float]:
        """Mean annualized kWh across bills that can be annualized."""
        annualized = [b.annualized_kwh for b in self.energy_bills if b.annualized_kwh is not None]
        if not annualized:
            return None
        return sum(annualized) / len(annualized)


# --- Result records ---

class BTUBreakdown(BaseModel):
    """Every term of the room load calculation, in BTU/hr."""
    base_btu: float
    window_heat_gain: float
    subtotal: float
    insulation_adjustment: float   # signed; negative for good insulation
    after_insulation: float
    safety_buffer: float
    final_btu: float
    tonnage: float

    @property
    def window_heat_gain_percentage(self) -> float:
        if self.final_btu <= 0:
            return 0.0
        return self.window_heat_gain / self.final_btu * 100


class EfficiencySpec(BaseModel):
    """Efficiency table entry for one (equipment type, age range)."""
    model_config = ConfigDict(frozen=True)

    estimated: float
    code_minimum: float
    best_in_class: float
    upgrade_cost: float


class UpgradeRecommendation(BaseModel):
    tier: UpgradeTier
    title: str
    upgrade_target: str
    cost_low: float
    cost_high: float
    annual_savings: float
    payback_years: Optional[float] = None
    explanation: str = ""
    tax_credit_eligible: bool = False
    tax_credit_amount: float = 0.0
    effective_payback_years: Optional[float] = None
    technology_note: Optional[str] = None
    already_meets_this_tier: bool = False

    @property
    def average_cost(self) -> float:
        return (self.cost_low + self.cost_high) / 2


class TaxCreditSummary(BaseModel):
    total_25c: float = 0.0   # capped
    total_25d: float = 0.0
    grand_total: float = 0.0


class EnergyBreakdownCategory(BaseModel):
    name: str
    icon: str
    annual_cost: float
    percentage: float


class TopConsumer(BaseModel):
    name: str
    icon: str
    annual_cost: float
    source: str  # "equipment" or "appliance"


class BillComparison(BaseModel):
    bill_based_annual_kwh: float
    estimated_annual_kwh: float
    gap_percentage: float
    accuracy_label: str  # "Excellent" / "Good" / "Fair" / "Review Needed"


class EnvelopeScore(BaseModel):
    score: float  # 0-100
    grade: LetterGrade
    details: list[str] = Field(default_factory=list)
    weakest_area: Optional[str] = None


class EnergyProfile(BaseModel):
    total_estimated_annual_cost: float = 0.0
    electricity_rate: float
    breakdown: list[EnergyBreakdownCategory] = Field(default_factory=list)
    top_consumers: list[TopConsumer] = Field(default_factory=list)
    bill_comparison: Optional[BillComparison] = None
    envelope_score: Optional[EnvelopeScore] = None


class GradeResult(BaseModel):
    """Letter grade with summary. ``grade`` is None when there was nothing to grade."""
    grade: Optional[LetterGrade] = None
    score: Optional[float] = None
    summary: str

    @property
    def has_data(self) -> bool:
        return self.grade is not None


class Recommendation(BaseModel):
    """A rule-based tip or quick win."""
    icon: str
    title: str
    detail: str
    estimated_savings: Optional[str] = None


class Rebate(BaseModel):
    title: str
    description: str
    amount_description: str
    equipment_types: list[EquipmentType] = Field(default_factory=list)  # empty = applies to any home
    url: str
    program_name: str
    expiration_note: Optional[str] = None


class RoomAssessment(BaseModel):
    room_name: str
    breakdown: BTUBreakdown
    grade: GradeResult
    recommendations: list[Recommendation] = Field(default_factory=list)


class EquipmentUpgrades(BaseModel):
    equipment: Equipment
    upgrades: list[UpgradeRecommendation]

    @property
    def best(self) -> Optional[UpgradeRecommendation]:
        return next((u for u in self.upgrades if u.tier == UpgradeTier.BEST), None)


class UpgradeSummary(BaseModel):
    """Totals across the Best tier of every recommended upgrade."""
    total_annual_savings: float
    total_cost_low: float
    total_cost_high: float
    total_credits: float
    after_credits_low: float
    after_credits_high: float
    average_payback_years: Optional[float] = None
    after_credits_payback_years: Optional[float] = None


class BatterySynergy(BaseModel):
    """Heuristic battery export estimate. Not derived from measured grid data.

    Revenue prices the freed-up export capacity over 50 event hours a year at
    $2 (low) and $5 (high) per kWh.
    """
    current_base_load_kw: float
    upgraded_base_load_kw: float
    export_gain_kw: float
    revenue_low: float
    revenue_high: float
    illustrative: bool = True


class AuditReport(BaseModel):
    """Complete report payload for one home."""
    home_name: str
    grade: GradeResult
    profile: EnergyProfile
    rooms: list[RoomAssessment] = Field(default_factory=list)
    equipment_upgrades: list[EquipmentUpgrades] = Field(default_factory=list)
    total_current_cost: float = 0.0
    total_upgraded_cost: float = 0.0
    total_savings: float = 0.0
    upgrade_summary: Optional[UpgradeSummary] = None
    tax_credits: TaxCreditSummary = Field(default_factory=TaxCreditSummary)
    state: Optional[USState] = None
    rebates: list[Rebate] = Field(default_factory=list)
    quick_wins: list[Recommendation] = Field(default_factory=list)
    battery_synergy: Optional[BatterySynergy] = None
    next_audit_step: Optional[AuditStep] = None
