"""Display helpers for ROI scenarios: formatted values, summary table, outreach variables."""

from __future__ import annotations

from typing import Any

from roi_service.services.roi import RoiOutput, RoiScenario

PROCEED_ROI_PCT = 20
MEDIUM_RISK_ROI_PCT = 10

SCENARIO_LABELS = (
    ("low", "Conservative"),
    ("most_likely", "Most Likely"),
    ("high", "Optimistic"),
)


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a whole-unit amount as ``$80,000`` / ``-$10,000``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.0f}"


def format_payback(scenario: RoiScenario) -> str:
    months = scenario.payback_months
    if months is None:
        return "Never"
    return f"{months:.1f} months"


def format_roi_scenario(scenario: RoiScenario, symbol: str = "$") -> dict[str, Any]:
    """Return the serialized scenario plus human-readable strings."""
    return {
        **scenario.to_dict(),
        "totalBenefitFormatted": format_currency(scenario.total_benefit, symbol),
        "year1NetFormatted": format_currency(scenario.year1_net, symbol),
        "roiPctFormatted": f"{scenario.roi_pct}%",
        "paybackMonthsFormatted": format_payback(scenario),
    }


def format_roi_output(output: RoiOutput, symbol: str = "$") -> dict[str, Any]:
    return {
        "low": format_roi_scenario(output.low, symbol),
        "mostLikely": format_roi_scenario(output.most_likely, symbol),
        "high": format_roi_scenario(output.high, symbol),
    }


def recommendation(output: RoiOutput) -> str:
    if output.most_likely.roi_pct > PROCEED_ROI_PCT:
        return "PROCEED"
    return "EVALUATE"


def risk_level(output: RoiOutput) -> str:
    """Grade downside risk from the conservative scenario."""
    if output.low.roi_pct < 0:
        return "HIGH"
    if output.low.roi_pct < MEDIUM_RISK_ROI_PCT:
        return "MEDIUM"
    return "LOW"


def summary_markdown(output: RoiOutput, symbol: str = "$") -> str:
    """Build the ROI summary table used in research briefs."""
    lines = [
        "## ROI Analysis Summary",
        "",
        "| Scenario | Total Benefit | Year 1 Net | ROI % | Payback |",
        "|----------|---------------|------------|-------|---------|",
    ]
    for attr, label in SCENARIO_LABELS:
        scenario: RoiScenario = getattr(output, attr)
        lines.append(
            f"| {label} "
            f"| {format_currency(scenario.total_benefit, symbol)} "
            f"| {format_currency(scenario.year1_net, symbol)} "
            f"| {scenario.roi_pct:.1f}% "
            f"| {format_payback(scenario)} |"
        )
    lines.append("")
    lines.append(
        f"*Recommendation:* {recommendation(output)} "
        f"(risk level: {risk_level(output)})"
    )
    return "\n".join(lines) + "\n"


def outreach_variables(output: RoiOutput | None, symbol: str = "$") -> dict[str, str]:
    """Template variables for outreach drafts; ``TBD`` until ROI exists."""
    if output is None:
        return {
            "roiPct": "TBD",
            "lowRoiPct": "TBD",
            "paybackMonths": "TBD",
            "year1Net": format_currency(0, symbol),
        }
    months = output.most_likely.payback_months
    return {
        "roiPct": f"{output.most_likely.roi_pct:.1f}",
        "lowRoiPct": f"{output.low.roi_pct:.1f}",
        "paybackMonths": "TBD" if months is None else f"{months:.1f}",
        "year1Net": format_currency(output.most_likely.year1_net, symbol),
    }
