"""
Room cooling load calculator.

Rule-of-thumb sizing in the spirit of Manual J:

    base        = sq_ft * ceiling_factor * climate_btu_per_sqft
    window_gain = sum(direction_btu * window_sqft * effective_u / 0.285)
    subtotal    = base + window_gain
    after_ins   = subtotal * insulation_multiplier
    final       = after_ins * 1.10
    tonnage     = final / 12000

Every intermediate term is returned so the breakdown can be shown line by line.
"""

from __future__ import annotations

from loguru import logger

from home_audit.audit_engine.constants import (
    BTU_PER_TON,
    CEILING_FACTOR,
    CLIMATE_BTU_PER_SQFT,
    CONDITION_LEAKAGE_FACTOR,
    FRAME_FACTOR,
    INSULATION_MULTIPLIER,
    PANE_U_FACTOR,
    REFERENCE_U_FACTOR,
    SAFETY_FACTOR,
    WINDOW_BTU_PER_SQFT,
    WINDOW_SIZE_SQFT,
)
from home_audit.models import (
    BTUBreakdown,
    CeilingHeight,
    ClimateZone,
    Home,
    InsulationQuality,
    Room,
    WindowInfo,
)


def effective_u_factor(window: WindowInfo) -> float:
    """Pane U-factor adjusted for frame material and air leakage."""
    return (
        PANE_U_FACTOR[window.pane_type]
        * FRAME_FACTOR[window.frame_material]
        * CONDITION_LEAKAGE_FACTOR[window.condition]
    )


def window_heat_gain(window: WindowInfo) -> float:
    """Solar heat gain through one window in BTU/hr (never negative)."""
    gain = (
        WINDOW_BTU_PER_SQFT[window.direction]
        * WINDOW_SIZE_SQFT[window.size]
        * (effective_u_factor(window) / REFERENCE_U_FACTOR)
    )
    return max(gain, 0.0)


class ThermalLoadCalculator:
    """Calculate the cooling load of a room and roll it up per home."""

    # --- public API ---

    def calculate(
        self,
        square_footage: float,
        ceiling_height: CeilingHeight,
        climate_zone: ClimateZone,
        insulation: InsulationQuality,
        windows: list[WindowInfo] | None = None,
    ) -> BTUBreakdown:
        """Run the full load calculation from raw room inputs."""
        base = square_footage * CEILING_FACTOR[ceiling_height] * CLIMATE_BTU_PER_SQFT[climate_zone]
        gain = sum(window_heat_gain(w) for w in windows or [])
        subtotal = base + gain

        after_insulation = subtotal * INSULATION_MULTIPLIER[insulation]
        final = after_insulation * SAFETY_FACTOR

        return BTUBreakdown(
            base_btu=base,
            window_heat_gain=gain,
            subtotal=subtotal,
            insulation_adjustment=after_insulation - subtotal,
            after_insulation=after_insulation,
            safety_buffer=final - after_insulation,
            final_btu=final,
            tonnage=final / BTU_PER_TON,
        )

    def calculate_room(self, room: Room) -> BTUBreakdown:
        """Calculate from a room record, ignoring its cached results."""
        return self.calculate(
            room.square_footage,
            room.ceiling_height,
            room.climate_zone,
            room.insulation,
            room.windows,
        )

    def refresh_room(self, room: Room) -> Room:
        """Return a copy of *room* with the cached BTU and tonnage recomputed."""
        breakdown = self.calculate_room(room)
        return room.model_copy(update={
            "calculated_btu": breakdown.final_btu,
            "calculated_tonnage": breakdown.tonnage,
        })

    def total_btu(self, home: Home) -> float:
        """Total cooling load across the home's sized rooms."""
        total = 0.0
        for room in home.rooms:
            if room.square_footage <= 0:
                logger.debug(f"Skipping placeholder room '{room.name}' (0 sq ft)")
                continue
            total += self.calculate_room(room).final_btu
        return total
