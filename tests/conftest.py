"""Shared fixtures for tests."""

from __future__ import annotations

from datetime import date

import pytest

from home_audit.models import (
    AgeRange,
    Appliance,
    ApplianceCategory,
    BasementInsulation,
    CardinalDirection,
    CeilingHeight,
    ClimateZone,
    EnergyBill,
    EnvelopeInfo,
    Equipment,
    EquipmentType,
    FrameMaterial,
    Home,
    InsulationQuality,
    PaneType,
    Room,
    SealingQuality,
    WindowCondition,
    WindowInfo,
    WindowSize,
)


@pytest.fixture
def demo_windows() -> list[WindowInfo]:
    """Two leaky south picture windows plus three ordinary ones."""
    bad_south = WindowInfo(
        direction=CardinalDirection.SOUTH,
        size=WindowSize.LARGE,
        pane_type=PaneType.SINGLE,
        frame_material=FrameMaterial.ALUMINUM,
        condition=WindowCondition.POOR,
    )
    return [
        bad_south,
        bad_south.model_copy(),
        WindowInfo(
            direction=CardinalDirection.WEST,
            size=WindowSize.MEDIUM,
            pane_type=PaneType.DOUBLE,
            frame_material=FrameMaterial.VINYL,
            condition=WindowCondition.FAIR,
        ),
        WindowInfo(
            direction=CardinalDirection.NORTH,
            size=WindowSize.MEDIUM,
            pane_type=PaneType.DOUBLE,
            frame_material=FrameMaterial.VINYL,
            condition=WindowCondition.GOOD,
        ),
        WindowInfo(
            direction=CardinalDirection.EAST,
            size=WindowSize.SMALL,
            pane_type=PaneType.DOUBLE,
            frame_material=FrameMaterial.WOOD,
            condition=WindowCondition.GOOD,
        ),
    ]


@pytest.fixture
def demo_room(demo_windows) -> Room:
    """2000 sq ft, 9 ft ceilings, hot climate, poor insulation."""
    return Room(
        name="Great Room",
        square_footage=2000,
        ceiling_height=CeilingHeight.NINE,
        climate_zone=ClimateZone.HOT,
        insulation=InsulationQuality.POOR,
        windows=demo_windows,
    )


@pytest.fixture
def old_central_ac() -> Equipment:
    """A 20+ year old central AC (table estimate 9.0 SEER)."""
    return Equipment(equipment_type=EquipmentType.CENTRAL_AC, age_range=AgeRange.YEARS_20_PLUS)


@pytest.fixture
def empty_home() -> Home:
    return Home(name="Empty")


@pytest.fixture
def all_good_envelope() -> EnvelopeInfo:
    return EnvelopeInfo(
        attic_insulation=InsulationQuality.GOOD,
        wall_insulation=InsulationQuality.GOOD,
        basement_insulation=BasementInsulation.FULL,
        air_sealing=SealingQuality.GOOD,
        weatherstripping=SealingQuality.GOOD,
    )


@pytest.fixture
def audited_home() -> Home:
    """A moderately inefficient 1800 sq ft home with a bit of everything."""
    return Home(
        name="Maple St",
        total_sq_ft=1800,
        climate_zone=ClimateZone.MODERATE,
        state="CA",
        rooms=[
            Room(name="Living", square_footage=400, insulation=InsulationQuality.AVERAGE,
                 windows=[WindowInfo(direction=CardinalDirection.SOUTH, size=WindowSize.LARGE)]),
            Room(name="Bedroom", square_footage=200, insulation=InsulationQuality.POOR),
        ],
        equipment=[
            Equipment(equipment_type=EquipmentType.CENTRAL_AC, age_range=AgeRange.YEARS_15_20),
            Equipment(equipment_type=EquipmentType.FURNACE, age_range=AgeRange.YEARS_20_PLUS),
            Equipment(equipment_type=EquipmentType.WATER_HEATER, age_range=AgeRange.YEARS_10_15),
            Equipment(equipment_type=EquipmentType.INSULATION, age_range=AgeRange.YEARS_20_PLUS),
            Equipment(equipment_type=EquipmentType.THERMOSTAT, age_range=AgeRange.YEARS_20_PLUS),
        ],
        appliances=[
            Appliance(category=ApplianceCategory.REFRIGERATOR, name="Kitchen fridge",
                      wattage=150, hours_per_day=24),
            Appliance(category=ApplianceCategory.TELEVISION, name="Living room TV",
                      wattage=100, hours_per_day=5),
            Appliance(category=ApplianceCategory.CABLE_BOX, name="Cable box",
                      wattage=20, hours_per_day=24, quantity=2),
            Appliance(category=ApplianceCategory.INCANDESCENT_BULB, name="Hall lights",
                      wattage=60, hours_per_day=5, quantity=6),
        ],
        energy_bills=[
            EnergyBill(period_start=date(2024, 6, 1), period_end=date(2024, 7, 1),
                       total_kwh=900, total_cost=180),
        ],
        envelope=EnvelopeInfo(
            attic_insulation=InsulationQuality.POOR,
            wall_insulation=InsulationQuality.AVERAGE,
            basement_insulation=BasementInsulation.PARTIAL,
            air_sealing=SealingQuality.FAIR,
            weatherstripping=SealingQuality.POOR,
        ),
    )
