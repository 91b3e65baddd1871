"""CLI entry point for the home energy audit engine."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from home_audit.audit_engine import efficiency
from home_audit.audit_engine.grading import grade_equipment, grade_room
from home_audit.audit_engine.load_calculator import ThermalLoadCalculator
from home_audit.audit_engine.tips import room_recommendations
from home_audit.audit_engine.upgrades import generate_upgrades
from home_audit.config import get_settings
from home_audit.models import (
    AgeRange,
    AuditReport,
    BTUBreakdown,
    CeilingHeight,
    ClimateZone,
    Equipment,
    EquipmentType,
    Home,
    InsulationQuality,
    Room,
    UpgradeRecommendation,
    WindowInfo,
    parse_state,
)
from home_audit.report import AuditReportBuilder


def setup_logging(level: str = "WARNING"):
    """Configure loguru to write to stderr at *level*."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level=level,
    )


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Home energy audit: room loads, equipment efficiency and upgrade reports"
    )
    parser.add_argument("--log-level", default=None, help="Override HOME_AUDIT_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command")

    # --- room command ---
    room_p = sub.add_parser("room", help="Calculate the cooling load of one room")
    room_p.add_argument("--sqft", type=float, required=True, help="Floor area (sq ft)")
    room_p.add_argument(
        "--ceiling",
        type=int,
        choices=[c.value for c in CeilingHeight],
        default=8,
        help="Ceiling height (ft)",
    )
    room_p.add_argument(
        "--climate",
        choices=[c.value for c in ClimateZone],
        default="moderate",
    )
    room_p.add_argument(
        "--insulation",
        choices=[i.value for i in InsulationQuality],
        default="average",
    )
    room_p.add_argument(
        "--window",
        action="append",
        default=[],
        metavar="DIR:SIZE[:PANE[:FRAME[:CONDITION]]]",
        help="Window spec, e.g. S:large:single:aluminum:poor (repeatable)",
    )

    # --- equipment command ---
    eq_p = sub.add_parser("equipment", help="Grade one piece of equipment and list upgrades")
    eq_p.add_argument("--type", required=True, choices=[t.value for t in EquipmentType])
    eq_p.add_argument("--age", required=True, choices=[a.value for a in AgeRange])
    eq_p.add_argument("--efficiency", type=float, default=None, help="Nameplate efficiency if known")
    eq_p.add_argument("--sqft", type=float, default=0.0, help="Home floor area (sq ft)")
    eq_p.add_argument(
        "--climate",
        choices=[c.value for c in ClimateZone],
        default="moderate",
    )

    # --- report command ---
    rep_p = sub.add_parser("report", help="Build the full audit report from a home JSON file")
    rep_p.add_argument("home_json", help="Path to a home record in JSON")
    rep_p.add_argument("--state", default=None, help="US state name or code for rebate matching")
    rep_p.add_argument("--json", action="store_true", help="Print the report as JSON")

    args = parser.parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    try:
        if args.command == "room":
            _run_room(args)
        elif args.command == "equipment":
            _run_equipment(args)
        elif args.command == "report":
            _run_report(args)
        else:
            parser.print_help()
            sys.exit(1)
    except ValidationError as e:
        print(f"Invalid input:\n{e}", file=sys.stderr)
        sys.exit(1)


def _parse_window(spec: str) -> WindowInfo:
    """Parse DIR:SIZE[:PANE[:FRAME[:CONDITION]]] into a WindowInfo."""
    keys = ["direction", "size", "pane_type", "frame_material", "condition"]
    parts = [p for p in spec.split(":") if p]
    return WindowInfo(**dict(zip(keys, parts)))


def _run_room(args):
    room = Room(
        name="CLI room",
        square_footage=args.sqft,
        ceiling_height=args.ceiling,
        climate_zone=args.climate,
        insulation=args.insulation,
        windows=[_parse_window(w) for w in args.window],
    )
    breakdown = ThermalLoadCalculator().calculate_room(room)
    _print_breakdown(breakdown)

    grade = grade_room(room)
    if grade.has_data:
        print(f"  Room grade:        {grade.grade.value} ({grade.score:.0f}/100)")
    print("\nRecommendations:")
    for tip in room_recommendations(room, breakdown):
        savings = f" [{tip.estimated_savings}]" if tip.estimated_savings else ""
        print(f"  - {tip.title}{savings}")


def _run_equipment(args):
    settings = get_settings()
    equipment = Equipment(
        equipment_type=args.type,
        age_range=args.age,
        estimated_efficiency=args.efficiency,
    )
    sq_ft = args.sqft if args.sqft > 0 else settings.default_home_sq_ft
    climate = ClimateZone(args.climate)
    spec = efficiency.spec_for(equipment)
    unit = efficiency.efficiency_unit(equipment.equipment_type)
    cost = efficiency.estimate_annual_cost(
        equipment.equipment_type,
        spec.estimated,
        sq_ft,
        climate,
        settings.default_electricity_rate,
        settings.default_gas_rate,
    )
    grade = grade_equipment(equipment)

    print(f"\n{'='*50}")
    print(f"  {efficiency.label(equipment.equipment_type)}  (grade {grade.grade.value})")
    print(f"{'='*50}")
    print(f"  Current efficiency: {spec.estimated:g} {unit}")
    print(f"  Code minimum:       {spec.code_minimum:g} {unit}")
    print(f"  Best in class:      {spec.best_in_class:g} {unit}")
    print(f"  Annual cost:        ${cost:,.2f}")
    print(f"  {grade.summary}")
    print(f"{'='*50}")

    upgrades = generate_upgrades(
        equipment, climate, sq_ft, settings.default_electricity_rate, settings.default_gas_rate
    )
    for rec in upgrades:
        _print_upgrade(rec)
    print()


def _run_report(args):
    path = Path(args.home_json)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Could not read {path}: {e}", file=sys.stderr)
        sys.exit(1)

    home = Home.model_validate_json(raw)
    state = parse_state(args.state) if args.state else None
    if args.state and state is None:
        logger.warning(f"No rebate data for state '{args.state}'")

    report = AuditReportBuilder().build(home, state=state)
    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        _print_report(report)


def _print_breakdown(b: BTUBreakdown):
    print(f"\n{'='*50}")
    print(f"  Cooling load: {b.final_btu:,.0f} BTU/hr  ({b.tonnage:.2f} tons)")
    print(f"{'='*50}")
    print(f"  Base load:         {b.base_btu:,.0f}")
    print(f"  Window gain:       {b.window_heat_gain:,.0f} ({b.window_heat_gain_percentage:.0f}%)")
    print(f"  Subtotal:          {b.subtotal:,.0f}")
    print(f"  Insulation adj.:   {b.insulation_adjustment:+,.0f}")
    print(f"  Safety buffer:     {b.safety_buffer:,.0f}")
    print(f"{'='*50}")


def _print_upgrade(rec: UpgradeRecommendation):
    payback = f"{rec.payback_years:.1f} yr" if rec.payback_years is not None else "n/a"
    flag = "  (already met)" if rec.already_meets_this_tier else ""
    print(f"\n  [{rec.tier.value.upper()}] {rec.title} -> {rec.upgrade_target}{flag}")
    print(f"    Cost: ${rec.cost_low:,.0f} - ${rec.cost_high:,.0f}")
    print(f"    Saves ${rec.annual_savings:,.0f}/yr, payback {payback}")
    if rec.tax_credit_amount > 0:
        eff = rec.effective_payback_years
        eff_text = f"{eff:.1f} yr" if eff is not None else "n/a"
        print(f"    Tax credit: ${rec.tax_credit_amount:,.0f} (payback after credit {eff_text})")


def _print_report(report: AuditReport):
    g = report.grade
    p = report.profile
    print(f"\n{'='*50}")
    print(f"  {report.home_name or 'Home'}: grade {g.grade.value if g.grade else '-'}")
    print(f"  {g.summary}")
    print(f"{'='*50}")
    print(f"  Estimated annual cost: ${p.total_estimated_annual_cost:,.0f} at ${p.electricity_rate:.3f}/kWh")
    for cat in p.breakdown:
        print(f"    {cat.name:<15} ${cat.annual_cost:>9,.0f}  {cat.percentage:5.1f}%")
    if p.bill_comparison:
        bc = p.bill_comparison
        print(f"  Bills vs estimate: {bc.gap_percentage:.1f}% gap ({bc.accuracy_label})")
    if p.envelope_score:
        env = p.envelope_score
        print(f"  Envelope: {env.score:.0f}/100 ({env.grade.value})")

    if report.equipment_upgrades:
        print(f"\n  Equipment now ${report.total_current_cost:,.0f}/yr, "
              f"best in class ${report.total_upgraded_cost:,.0f}/yr")
        for eu in report.equipment_upgrades:
            best = eu.best
            print(f"  - {efficiency.label(eu.equipment.equipment_type)}: {best.title}, "
                  f"saves ${best.annual_savings:,.0f}/yr")
    if report.upgrade_summary:
        s = report.upgrade_summary
        print(f"  Investment: ${s.total_cost_low:,.0f} - ${s.total_cost_high:,.0f}, "
              f"${s.after_credits_low:,.0f} - ${s.after_credits_high:,.0f} after credits")
    if report.tax_credits.grand_total > 0:
        t = report.tax_credits
        print(f"  Tax credits: 25C ${t.total_25c:,.0f} + 25D ${t.total_25d:,.0f}")
    if report.rebates:
        print(f"\n  Rebates in {report.state.value}:")
        for r in report.rebates:
            print(f"  - {r.title} ({r.amount_description})")
    if report.quick_wins:
        print("\n  Quick wins:")
        for w in report.quick_wins:
            print(f"  - {w.title}")
    if report.battery_synergy:
        b = report.battery_synergy
        print(f"\n  Battery export gain ~{b.export_gain_kw:.1f} kW, "
              f"${b.revenue_low:,.0f} - ${b.revenue_high:,.0f}/yr (illustrative)")
    print(f"{'='*50}\n")


if __name__ == "__main__":
    main()
