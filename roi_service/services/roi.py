"""ROI scenario engine.

Maps one set of business-value inputs to three projections (conservative,
most likely, optimistic) over a fixed +/-25% sensitivity band. Only the
benefit-driving assumptions are scaled; license and implementation costs are
committed and stay fixed across scenarios.

Every function here is pure: no I/O, no module-level mutable state. Results
are rounded once, when the scenario is built, never on partial sums.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVITY_BAND = 0.25
LOW_SCALE_FACTOR = 1.0 - SENSITIVITY_BAND
MOST_LIKELY_SCALE_FACTOR = 1.0
HIGH_SCALE_FACTOR = 1.0 + SENSITIVITY_BAND

# Reduction percentages cannot exceed 100% after scaling
MAX_REDUCTION_PCT = 1.0

MONTHS_PER_YEAR = 12

WARN_HOURS_SAVED_PER_MONTH = 160
WARN_COST_PER_HOUR = 200
WARN_ERROR_REDUCTION_PCT = 0.9
WARN_CLOUD_REDUCTION_PCT = 0.5
WARN_RISK_REDUCTION_PCT = 0.8


class InvalidInput(ValueError):
    """Raised when inputs cannot produce a scenario at all."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


@dataclass(frozen=True)
class RoiInputs:
    n_people: int
    cost_per_hour: float
    hours_saved_per_person_per_month: float
    error_cost_annual: float
    error_reduction_pct: float
    cloud_spend_annual: float
    cloud_reduction_pct: float
    risk_cost_annual: float
    risk_reduction_pct: float
    license_cost_annual: float
    implementation_one_time: float


@dataclass(frozen=True)
class Months:
    """Finite payback period, in months."""

    value: float


@dataclass(frozen=True)
class Unbounded:
    """Payback never happens: the scenario yields no monthly benefit."""


UNBOUNDED = Unbounded()

Payback = Months | Unbounded


@dataclass(frozen=True)
class RoiScenario:
    total_benefit: int
    year1_net: int
    roi_pct: float
    payback: Payback

    @property
    def payback_months(self) -> float | None:
        """Numeric payback, ``None`` when unbounded."""
        if isinstance(self.payback, Months):
            return self.payback.value
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalBenefit": self.total_benefit,
            "year1Net": self.year1_net,
            "roiPct": self.roi_pct,
            "paybackMonths": self.payback_months,
        }


@dataclass(frozen=True)
class RoiOutput:
    low: RoiScenario
    most_likely: RoiScenario
    high: RoiScenario

    def to_dict(self) -> dict[str, Any]:
        return {
            "low": self.low.to_dict(),
            "mostLikely": self.most_likely.to_dict(),
            "high": self.high.to_dict(),
        }


def compute_scenario(inputs: RoiInputs) -> RoiScenario:
    """Compute a single scenario from fully-populated inputs."""

    total_benefit = _total_benefit(inputs)
    total_costs = inputs.license_cost_annual + inputs.implementation_one_time

    year1_net = total_benefit - total_costs
    # Zero cost yields 0% ROI rather than an undefined ratio
    roi_pct = (total_benefit - total_costs) / total_costs * 100 if total_costs > 0 else 0.0

    monthly_benefit = total_benefit / MONTHS_PER_YEAR
    payback: Payback
    if monthly_benefit > 0:
        payback_months = total_costs / monthly_benefit
        _require_finite("paybackMonths", payback_months * 10)
        payback = Months(_round_half_up(payback_months, 1))
    else:
        payback = UNBOUNDED

    _require_finite("totalBenefit", total_benefit)
    _require_finite("year1Net", year1_net)
    _require_finite("roiPct", roi_pct * 10)

    scenario = RoiScenario(
        total_benefit=int(_round_half_up(total_benefit)),
        year1_net=int(_round_half_up(year1_net)),
        roi_pct=_round_half_up(roi_pct, 1),
        payback=payback,
    )
    logger.debug(
        "ROI scenario computed: benefit=%s roi=%.1f%% payback=%s",
        scenario.total_benefit,
        scenario.roi_pct,
        scenario.payback_months,
    )
    return scenario


def scale_inputs(inputs: RoiInputs, factor: float) -> RoiInputs:
    """Return a copy with benefit-driving assumptions scaled by ``factor``.

    Hours saved have no ceiling; reduction percentages are clamped to 1.0.
    Cost fields are left untouched.
    """

    return replace(
        inputs,
        hours_saved_per_person_per_month=inputs.hours_saved_per_person_per_month * factor,
        error_reduction_pct=min(MAX_REDUCTION_PCT, inputs.error_reduction_pct * factor),
        cloud_reduction_pct=min(MAX_REDUCTION_PCT, inputs.cloud_reduction_pct * factor),
        risk_reduction_pct=min(MAX_REDUCTION_PCT, inputs.risk_reduction_pct * factor),
    )


def calculate_roi_scenarios(inputs: RoiInputs) -> RoiOutput:
    """Validate inputs and compute the low / most likely / high scenarios.

    Raises
    ------
    InvalidInput
        If ``n_people`` is below 1, ``cost_per_hour`` is negative, or an
        input or derived amount is not a finite number. No scenario is
        returned in that case.
    """

    for item in fields(inputs):
        _require_finite(_camel(item.name), getattr(inputs, item.name))
    if inputs.n_people < 1:
        raise InvalidInput("nPeople", "Number of people must be greater than 0")
    if inputs.cost_per_hour < 0:
        raise InvalidInput("costPerHour", "Cost per hour cannot be negative")

    output = RoiOutput(
        low=compute_scenario(scale_inputs(inputs, LOW_SCALE_FACTOR)),
        most_likely=compute_scenario(inputs),
        high=compute_scenario(scale_inputs(inputs, HIGH_SCALE_FACTOR)),
    )
    logger.debug(
        "ROI scenarios computed: most_likely roi=%.1f%%", output.most_likely.roi_pct
    )
    return output


def validate_roi_inputs(inputs: RoiInputs) -> list[str]:
    """Return advisory reasonableness warnings, in check order."""

    warnings: list[str] = []

    if inputs.hours_saved_per_person_per_month > WARN_HOURS_SAVED_PER_MONTH:
        warnings.append("hours saved per month seems high")

    if inputs.cost_per_hour > WARN_COST_PER_HOUR:
        warnings.append("cost per hour seems high")

    if inputs.error_reduction_pct > WARN_ERROR_REDUCTION_PCT:
        warnings.append("error reduction >90% may be optimistic")

    if inputs.cloud_reduction_pct > WARN_CLOUD_REDUCTION_PCT:
        warnings.append("cloud cost reduction >50% may be optimistic")

    if inputs.risk_reduction_pct > WARN_RISK_REDUCTION_PCT:
        warnings.append("risk reduction >80% may be optimistic")

    if _total_benefit(inputs) < inputs.license_cost_annual:
        warnings.append("total benefits may not justify license costs")

    return warnings


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #
def _total_benefit(inputs: RoiInputs) -> float:
    labor_savings = (
        inputs.n_people
        * inputs.hours_saved_per_person_per_month
        * MONTHS_PER_YEAR
        * inputs.cost_per_hour
    )
    quality_savings = inputs.error_cost_annual * inputs.error_reduction_pct
    cloud_savings = inputs.cloud_spend_annual * inputs.cloud_reduction_pct
    risk_avoidance = inputs.risk_cost_annual * inputs.risk_reduction_pct
    return labor_savings + quality_savings + cloud_savings + risk_avoidance


def _require_finite(field: str, value: float) -> None:
    try:
        finite = math.isfinite(value)
    except OverflowError:  # int beyond float range
        finite = False
    if not finite:
        raise InvalidInput(field, f"{field} is out of range")


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _round_half_up(value: float, digits: int = 0) -> float:
    # ties go toward +inf, so -2.5 rounds to -2
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


__all__ = [
    "HIGH_SCALE_FACTOR",
    "InvalidInput",
    "LOW_SCALE_FACTOR",
    "MOST_LIKELY_SCALE_FACTOR",
    "Months",
    "Payback",
    "RoiInputs",
    "RoiOutput",
    "RoiScenario",
    "SENSITIVITY_BAND",
    "UNBOUNDED",
    "Unbounded",
    "calculate_roi_scenarios",
    "compute_scenario",
    "scale_inputs",
    "validate_roi_inputs",
]
