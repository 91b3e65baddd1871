"""
State rebate programs.

Point-in-time program data for the 15 supported states. Amounts and URLs
change as programs are refunded or closed, so the table carries a version that
reports can cite.
"""

from __future__ import annotations

from loguru import logger

from home_audit.models import EquipmentType as ET
from home_audit.models import Home, Rebate, USState

REBATE_TABLE_VERSION = "2025.1"

# ---------------------------------------------------------------------------
# STATE REBATES
# An empty equipment_types list marks a program open to any home.
# ---------------------------------------------------------------------------
STATE_REBATES: dict[USState, list[Rebate]] = {
    USState.CALIFORNIA: [
        Rebate(
            title="TECH Clean California Heat Pump Rebate",
            description="Rebate for replacing gas furnace with qualifying heat pump system.",
            amount_description="$3,000-$6,000",
            equipment_types=[ET.HEAT_PUMP],
            url="https://www.techcleanca.com",
            program_name="TECH Clean California",
        ),
        Rebate(
            title="Self-Generation Incentive Program (SGIP)",
            description="Incentive for home battery storage systems, with equity adders for low-income households.",
            amount_description="$150-$1,000/kWh",
            equipment_types=[],
            url="https://www.selfgenca.com",
            program_name="SGIP",
        ),
        Rebate(
            title="PG&E Heat Pump Water Heater Rebate",
            description="Rebate for installing a qualifying heat pump water heater.",
            amount_description="$1,000-$2,500",
            equipment_types=[ET.WATER_HEATER, ET.WATER_HEATER_TANKLESS],
            url="https://www.pge.com/en/save-energy-and-money/rebates-and-incentives.html",
            program_name="PG&E",
        ),
        Rebate(
            title="SCE Home Energy Efficiency Rebates",
            description="Rebates for HVAC upgrades, insulation, and weatherization from Southern California Edison.",
            amount_description="$200-$2,000",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.FURNACE, ET.INSULATION],
            url="https://www.sce.com/residential/rebates-savings",
            program_name="SCE",
        ),
        Rebate(
            title="BayREN Home+ Program",
            description="Whole-home rebates for Bay Area residents completing energy efficiency upgrades.",
            amount_description="$1,000-$5,000",
            equipment_types=[ET.HEAT_PUMP, ET.INSULATION, ET.WINDOWS, ET.WATER_HEATER],
            url="https://www.bayrenresidential.org",
            program_name="BayREN",
        ),
    ],

    USState.TEXAS: [
        Rebate(
            title="Oncor Residential AC Rebate",
            description="Rebate for high-efficiency central air conditioners and heat pumps (16+ SEER).",
            amount_description="$200-$495",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.oncoreenergysavings.com",
            program_name="Oncor Take A Load Off Texas",
        ),
        Rebate(
            title="CenterPoint Energy Weatherization",
            description="Rebates for insulation and air sealing improvements.",
            amount_description="$200-$600",
            equipment_types=[ET.INSULATION],
            url="https://www.centerpointenergy.com/en-us/residential/save-energy-money",
            program_name="CenterPoint Energy",
        ),
        Rebate(
            title="Austin Energy Power Saver Program",
            description="Rebates for HVAC, water heaters, and weatherization for Austin Energy customers.",
            amount_description="$300-$1,400",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER, ET.INSULATION],
            url="https://savings.austinenergy.com",
            program_name="Austin Energy",
        ),
        Rebate(
            title="CPS Energy HVAC Rebate",
            description="San Antonio utility rebate for qualifying high-efficiency HVAC systems.",
            amount_description="$200-$600",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.cpsenergy.com/en/save-energy-money/rebates.html",
            program_name="CPS Energy",
        ),
    ],

    USState.FLORIDA: [
        Rebate(
            title="FPL Residential AC Rebate",
            description="Rebate for installing a qualifying high-efficiency AC system.",
            amount_description="$150-$365",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.fpl.com/save/rebates.html",
            program_name="FPL",
        ),
        Rebate(
            title="Duke Energy Florida HVAC Rebate",
            description="Rebate for high-efficiency central AC or heat pump installations.",
            amount_description="$150-$400",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.duke-energy.com/home/products/smart-saver",
            program_name="Duke Energy Florida",
        ),
        Rebate(
            title="FPL Ceiling Insulation Rebate",
            description="Rebate for adding or upgrading attic insulation.",
            amount_description="$0.15/sq ft",
            equipment_types=[ET.INSULATION],
            url="https://www.fpl.com/save/rebates.html",
            program_name="FPL",
        ),
        Rebate(
            title="JEA Heat Pump Water Heater Rebate",
            description="Jacksonville utility rebate for heat pump water heaters.",
            amount_description="$300-$500",
            equipment_types=[ET.WATER_HEATER],
            url="https://www.jea.com/save-money-and-energy/rebates",
            program_name="JEA",
        ),
    ],

    USState.NEW_YORK: [
        Rebate(
            title="EmPower+ Heat Pump Rebate",
            description="NYSERDA incentive for whole-home heat pump installations.",
            amount_description="$1,000-$14,000",
            equipment_types=[ET.HEAT_PUMP],
            url="https://www.nyserda.ny.gov/All-Programs/EmPower-New-York",
            program_name="NYSERDA EmPower+",
        ),
        Rebate(
            title="Con Edison Residential Rebates",
            description="Rebates for heat pumps, smart thermostats, and weatherization.",
            amount_description="$50-$1,000",
            equipment_types=[ET.HEAT_PUMP, ET.THERMOSTAT, ET.INSULATION],
            url="https://www.coned.com/en/save-money/rebates-incentives-tax-credits",
            program_name="Con Edison",
        ),
        Rebate(
            title="NYS Clean Heat Program",
            description="Statewide incentive for switching from fossil fuel to heat pump heating.",
            amount_description="$500-$2,500/ton",
            equipment_types=[ET.HEAT_PUMP, ET.WATER_HEATER, ET.WATER_HEATER_TANKLESS],
            url="https://cleanheat.ny.gov",
            program_name="NYS Clean Heat",
        ),
        Rebate(
            title="NYSERDA Home Performance with ENERGY STAR",
            description="Whole-home energy assessment with rebates for insulation and air sealing.",
            amount_description="Up to $4,000",
            equipment_types=[ET.INSULATION, ET.WINDOWS],
            url="https://www.nyserda.ny.gov/All-Programs/Residential",
            program_name="NYSERDA HPwES",
        ),
    ],

    USState.PENNSYLVANIA: [
        Rebate(
            title="PECO Smart Equipment Rewards",
            description="Rebates for energy-efficient HVAC equipment.",
            amount_description="$200-$500",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.FURNACE],
            url="https://www.peco.com/ways-to-save/for-your-home/rebates-and-offers",
            program_name="PECO",
        ),
        Rebate(
            title="PPL Electric Home Comfort Program",
            description="Rebates on heat pumps and heat pump water heaters.",
            amount_description="$300-$750",
            equipment_types=[ET.HEAT_PUMP, ET.WATER_HEATER],
            url="https://www.pplelectric.com/save-energy-and-money",
            program_name="PPL Electric",
        ),
        Rebate(
            title="Duquesne Light Watt Choices Rebates",
            description="Rebates for insulation, HVAC, and water heating upgrades.",
            amount_description="$100-$500",
            equipment_types=[ET.INSULATION, ET.CENTRAL_AC, ET.WATER_HEATER],
            url="https://www.duquesnelight.com/energy-money-savings/residential-rebates",
            program_name="Duquesne Light",
        ),
    ],

    USState.ILLINOIS: [
        Rebate(
            title="ComEd Energy Efficiency Rebates",
            description="Rebates for HVAC, water heating, and insulation upgrades.",
            amount_description="$200-$1,200",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER, ET.INSULATION],
            url="https://www.comed.com/ways-to-save/for-your-home/rebates-and-offers",
            program_name="ComEd",
        ),
        Rebate(
            title="Ameren Illinois Residential Rebates",
            description="Rebates for high-efficiency furnaces, heat pumps, and insulation.",
            amount_description="$200-$800",
            equipment_types=[ET.FURNACE, ET.HEAT_PUMP, ET.INSULATION],
            url="https://www.amerenillinoissavings.com",
            program_name="Ameren Illinois",
        ),
        Rebate(
            title="Nicor Gas Residential Rebates",
            description="Rebates for high-efficiency furnaces and water heaters.",
            amount_description="$100-$500",
            equipment_types=[ET.FURNACE, ET.WATER_HEATER],
            url="https://www.nicorgasrebates.com",
            program_name="Nicor Gas",
        ),
    ],

    USState.OHIO: [
        Rebate(
            title="Ohio FirstEnergy Products Program",
            description="Rebates for HVAC and water heating equipment.",
            amount_description="$50-$400",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER],
            url="https://www.energysaveohio.com",
            program_name="FirstEnergy",
        ),
        Rebate(
            title="AEP Ohio Energy Efficiency Rebates",
            description="Rebates for heat pumps, central AC, and insulation.",
            amount_description="$100-$500",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.INSULATION],
            url="https://www.aepohio.com/save",
            program_name="AEP Ohio",
        ),
        Rebate(
            title="Columbia Gas Weatherization Rebate",
            description="Rebates for insulation, air sealing, and furnace upgrades.",
            amount_description="$100-$600",
            equipment_types=[ET.FURNACE, ET.INSULATION],
            url="https://www.columbiagasohio.com/save-energy-money",
            program_name="Columbia Gas",
        ),
    ],

    USState.GEORGIA: [
        Rebate(
            title="Georgia Power Residential Rebates",
            description="Rebates for high-efficiency heat pumps, AC, and water heaters.",
            amount_description="$200-$700",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER],
            url="https://www.georgiapower.com/residential/save-money-and-energy/rebates-and-offers.html",
            program_name="Georgia Power",
        ),
        Rebate(
            title="Georgia Power Weatherization Rebates",
            description="Rebates for insulation and duct sealing.",
            amount_description="$100-$400",
            equipment_types=[ET.INSULATION],
            url="https://www.georgiapower.com/residential/save-money-and-energy/rebates-and-offers.html",
            program_name="Georgia Power",
        ),
        Rebate(
            title="Atlanta Gas Light Efficient Equipment",
            description="Rebates for gas furnaces and water heaters meeting efficiency criteria.",
            amount_description="$100-$300",
            equipment_types=[ET.FURNACE, ET.WATER_HEATER],
            url="https://atlantagaslight.com/residential/save-energy-money",
            program_name="Atlanta Gas Light",
        ),
    ],

    USState.NORTH_CAROLINA: [
        Rebate(
            title="Duke Energy NC Smart Saver",
            description="Rebates for high-efficiency HVAC and heat pump water heaters.",
            amount_description="$200-$600",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER],
            url="https://www.duke-energy.com/home/products/smart-saver",
            program_name="Duke Energy Carolinas",
        ),
        Rebate(
            title="Piedmont Natural Gas Rebates",
            description="Rebates for high-efficiency gas furnaces and water heaters.",
            amount_description="$100-$400",
            equipment_types=[ET.FURNACE, ET.WATER_HEATER],
            url="https://www.piedmontng.com/save-energy-money",
            program_name="Piedmont Natural Gas",
        ),
        Rebate(
            title="NC Weatherization Assistance",
            description="State-funded weatherization for eligible homeowners including insulation and air sealing.",
            amount_description="Up to $8,009 average",
            equipment_types=[ET.INSULATION, ET.WINDOWS],
            url="https://www.ncdhhs.gov/weatherization-assistance-program",
            program_name="NC DHHS",
        ),
    ],

    USState.MICHIGAN: [
        Rebate(
            title="DTE Energy Rebates",
            description="Rebates for high-efficiency furnaces, heat pumps, and insulation.",
            amount_description="$100-$500",
            equipment_types=[ET.FURNACE, ET.HEAT_PUMP, ET.INSULATION],
            url="https://www.dteenergy.com/us/en/residential/save-money-energy/rebates.html",
            program_name="DTE Energy",
        ),
        Rebate(
            title="Consumers Energy Rebates",
            description="Rebates for HVAC, water heaters, and weatherization.",
            amount_description="$200-$800",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER, ET.INSULATION],
            url="https://www.consumersenergy.com/residential/save-money-and-energy/rebates",
            program_name="Consumers Energy",
        ),
        Rebate(
            title="Michigan Saves Home Energy Loan",
            description="Low-interest financing for whole-home energy improvements.",
            amount_description="2.5%-5.5% APR financing",
            equipment_types=[ET.HEAT_PUMP, ET.INSULATION, ET.WINDOWS, ET.FURNACE],
            url="https://michigansaves.org/residential",
            program_name="Michigan Saves",
        ),
    ],

    USState.NEW_JERSEY: [
        Rebate(
            title="NJ Clean Energy HVAC Rebates",
            description="Rebates for high-efficiency heating and cooling equipment.",
            amount_description="$300-$1,000",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.FURNACE],
            url="https://njcleanenergy.com/residential/programs/home-programs",
            program_name="NJ Clean Energy",
        ),
        Rebate(
            title="NJ HPwES Whole-Home",
            description="Home Performance with ENERGY STAR - rebates for comprehensive upgrades.",
            amount_description="Up to $4,000",
            equipment_types=[ET.INSULATION, ET.WINDOWS, ET.HEAT_PUMP],
            url="https://njcleanenergy.com/residential/programs/home-performance-energy-star",
            program_name="NJ Clean Energy HPwES",
        ),
        Rebate(
            title="PSE&G Residential Rebates",
            description="Rebates for water heaters and HVAC from PSE&G.",
            amount_description="$100-$500",
            equipment_types=[ET.WATER_HEATER, ET.CENTRAL_AC],
            url="https://www.pseg.com/saveenergy/home",
            program_name="PSE&G",
        ),
    ],

    USState.VIRGINIA: [
        Rebate(
            title="Dominion Energy Residential Rebates",
            description="Rebates for heat pumps, AC, and weatherization improvements.",
            amount_description="$100-$500",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.INSULATION],
            url="https://www.dominionenergy.com/virginia/save-energy/rebates-and-incentives",
            program_name="Dominion Energy",
        ),
        Rebate(
            title="Appalachian Power Take Charge Rebates",
            description="Rebates for HVAC, water heaters, and insulation.",
            amount_description="$100-$500",
            equipment_types=[ET.HEAT_PUMP, ET.WATER_HEATER, ET.INSULATION],
            url="https://www.appalachianpower.com/save-money-energy",
            program_name="Appalachian Power",
        ),
        Rebate(
            title="Virginia Natural Gas Rebates",
            description="Rebates for high-efficiency gas furnaces and water heaters.",
            amount_description="$100-$300",
            equipment_types=[ET.FURNACE, ET.WATER_HEATER],
            url="https://www.virginianaturalgas.com/save-energy",
            program_name="Virginia Natural Gas",
        ),
    ],

    USState.WASHINGTON: [
        Rebate(
            title="PSE Residential Rebates",
            description="Puget Sound Energy rebates for heat pumps, water heaters, and insulation.",
            amount_description="$200-$1,500",
            equipment_types=[ET.HEAT_PUMP, ET.WATER_HEATER, ET.INSULATION],
            url="https://www.pse.com/rebates",
            program_name="Puget Sound Energy",
        ),
        Rebate(
            title="Seattle City Light Rebates",
            description="Rebates for heat pumps, ductless mini-splits, and insulation.",
            amount_description="$200-$2,000",
            equipment_types=[ET.HEAT_PUMP, ET.INSULATION],
            url="https://www.seattle.gov/city-light/residential-services/rebates-and-programs",
            program_name="Seattle City Light",
        ),
        Rebate(
            title="Snohomish PUD Heat Pump Rebate",
            description="Rebate for qualifying air-source and ductless heat pumps.",
            amount_description="$400-$1,200",
            equipment_types=[ET.HEAT_PUMP],
            url="https://www.snopud.com/rebates",
            program_name="Snohomish PUD",
        ),
        Rebate(
            title="WA Weatherization Assistance",
            description="State weatherization program for qualifying homeowners.",
            amount_description="Varies by income",
            equipment_types=[ET.INSULATION, ET.WINDOWS],
            url="https://www.commerce.wa.gov/growing-the-economy/energy/weatherization",
            program_name="WA Dept. of Commerce",
        ),
    ],

    USState.ARIZONA: [
        Rebate(
            title="APS Cool Rewards AC Rebate",
            description="Rebate for high-efficiency central air conditioner or heat pump.",
            amount_description="$200-$500",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.aps.com/en/residential/save-money-and-energy/rebates-and-offers",
            program_name="APS",
        ),
        Rebate(
            title="SRP Residential Rebates",
            description="Salt River Project rebates for HVAC and water heater upgrades.",
            amount_description="$150-$600",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP, ET.WATER_HEATER],
            url="https://www.srpnet.com/save-energy/rebates.aspx",
            program_name="SRP",
        ),
        Rebate(
            title="APS Shade Screen Rebate",
            description="Rebate for installing qualifying window shade screens.",
            amount_description="$1.25/sq ft",
            equipment_types=[ET.WINDOWS],
            url="https://www.aps.com/en/residential/save-money-and-energy/rebates-and-offers",
            program_name="APS",
        ),
        Rebate(
            title="TEP HVAC Rebate",
            description="Tucson Electric Power rebates for high-efficiency AC and heat pumps.",
            amount_description="$200-$450",
            equipment_types=[ET.CENTRAL_AC, ET.HEAT_PUMP],
            url="https://www.tep.com/rebates",
            program_name="TEP",
        ),
    ],

    USState.MASSACHUSETTS: [
        Rebate(
            title="Mass Save Heat Pump Rebate",
            description="Whole-home heat pump incentives through Mass Save program.",
            amount_description="$1,250-$10,000",
            equipment_types=[ET.HEAT_PUMP],
            url="https://www.masssave.com/residential/rebates-and-incentives/heat-pumps",
            program_name="Mass Save",
        ),
        Rebate(
            title="Mass Save Insulation Rebate",
            description="75-100% off insulation costs through home energy assessment.",
            amount_description="75%-100% of cost",
            equipment_types=[ET.INSULATION],
            url="https://www.masssave.com/residential/rebates-and-incentives/insulation",
            program_name="Mass Save",
        ),
        Rebate(
            title="Mass Save Water Heater Rebate",
            description="Rebate for heat pump water heaters.",
            amount_description="$600-$1,250",
            equipment_types=[ET.WATER_HEATER, ET.WATER_HEATER_TANKLESS],
            url="https://www.masssave.com/residential/rebates-and-incentives/water-heating",
            program_name="Mass Save",
        ),
        Rebate(
            title="Mass Save Weatherization",
            description="Free home energy assessment with air sealing included.",
            amount_description="Free assessment + air sealing",
            equipment_types=[ET.INSULATION, ET.WINDOWS],
            url="https://www.masssave.com/residential/programs-and-services/home-energy-assessments",
            program_name="Mass Save",
        ),
    ],
}


def rebates_for_state(state: USState) -> list[Rebate]:
    """Every program listed for *state*."""
    return list(STATE_REBATES.get(state, []))


def rebates_for_equipment(state: USState, equipment_types: list[ET]) -> list[Rebate]:
    """Programs in *state* that cover at least one of *equipment_types*."""
    wanted = set(equipment_types)
    return [r for r in rebates_for_state(state) if wanted.intersection(r.equipment_types)]


def match_rebates(home: Home, state: USState) -> list[Rebate]:
    """Programs covering the home's equipment, plus programs open to any home."""
    home_types = {eq.equipment_type for eq in home.equipment}
    matched = [
        r for r in rebates_for_state(state)
        if not r.equipment_types or home_types.intersection(r.equipment_types)
    ]
    logger.debug(f"{len(matched)} rebate programs matched in {state.value}")
    return matched
