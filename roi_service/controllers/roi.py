from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from roi_service.config import Settings
from roi_service.dependencies import error, get_settings
from roi_service.metrics import roi_calc_seconds, roi_calc_total, roi_warning_total
from roi_service.services import roi_report
from roi_service.services.roi import (
    InvalidInput,
    RoiInputs,
    RoiOutput,
    calculate_roi_scenarios,
    validate_roi_inputs,
)

router = APIRouter(prefix="/roi", tags=["roi"])

logger = logging.getLogger(__name__)


class RoiInputsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", allow_inf_nan=False)

    n_people: int = Field(..., alias="nPeople", ge=1)
    cost_per_hour: float = Field(..., alias="costPerHour", ge=0)
    hours_saved_per_person_per_month: float = Field(
        ..., alias="hoursSavedPerPersonPerMonth", ge=0
    )
    error_cost_annual: float = Field(..., alias="errorCostAnnual", ge=0)
    error_reduction_pct: float = Field(..., alias="errorReductionPct", ge=0, le=1)
    cloud_spend_annual: float = Field(..., alias="cloudSpendAnnual", ge=0)
    cloud_reduction_pct: float = Field(..., alias="cloudReductionPct", ge=0, le=1)
    risk_cost_annual: float = Field(..., alias="riskCostAnnual", ge=0)
    risk_reduction_pct: float = Field(..., alias="riskReductionPct", ge=0, le=1)
    license_cost_annual: float = Field(..., alias="licenseCostAnnual", ge=0)
    implementation_one_time: float = Field(..., alias="implementationOneTime", ge=0)

    def to_inputs(self) -> RoiInputs:
        return RoiInputs(**self.model_dump())


class RoiScenarioResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_benefit: int = Field(alias="totalBenefit")
    year1_net: int = Field(alias="year1Net")
    roi_pct: float = Field(alias="roiPct")
    payback_months: float | None = Field(alias="paybackMonths")


class RoiOutputResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    low: RoiScenarioResponse
    most_likely: RoiScenarioResponse = Field(alias="mostLikely")
    high: RoiScenarioResponse


class RoiScenariosResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scenarios: RoiOutputResponse
    warnings: list[str]
    recommendation: str
    risk_level: str = Field(alias="riskLevel")


class RoiWarningsResponse(BaseModel):
    warnings: list[str]


class RoiSummaryResponse(BaseModel):
    markdown: str
    scenarios: dict[str, dict[str, Any]]


def _calculate(inputs: RoiInputs) -> RoiOutput:
    try:
        with roi_calc_seconds.time():
            output = calculate_roi_scenarios(inputs)
    except InvalidInput as exc:
        # bounds are enforced by RoiInputsRequest; this catches amounts that overflow
        roi_calc_total.labels(status="invalid").inc()
        raise error(400, "INVALID_INPUT", f"{exc.field}: {exc}") from exc
    roi_calc_total.labels(status="ok").inc()
    return output


def _warnings(inputs: RoiInputs) -> list[str]:
    warnings = validate_roi_inputs(inputs)
    if warnings:
        roi_warning_total.inc(len(warnings))
        logger.info("ROI input warnings: %s", "; ".join(warnings))
    return warnings


@router.post("/scenarios", response_model=RoiScenariosResponse)
async def calculate_scenarios(body: RoiInputsRequest) -> RoiScenariosResponse:
    inputs = body.to_inputs()
    warnings = _warnings(inputs)
    output = _calculate(inputs)
    logger.info(
        "ROI calculated: most_likely roi=%.1f%% payback=%s",
        output.most_likely.roi_pct,
        output.most_likely.payback_months,
    )
    return RoiScenariosResponse(
        scenarios=RoiOutputResponse.model_validate(output.to_dict()),
        warnings=warnings,
        recommendation=roi_report.recommendation(output),
        risk_level=roi_report.risk_level(output),
    )


@router.post("/warnings", response_model=RoiWarningsResponse)
async def check_warnings(body: RoiInputsRequest) -> RoiWarningsResponse:
    return RoiWarningsResponse(warnings=_warnings(body.to_inputs()))


@router.post("/summary", response_model=RoiSummaryResponse)
async def summarize(
    body: RoiInputsRequest, settings: Settings = Depends(get_settings)
) -> RoiSummaryResponse:
    output = _calculate(body.to_inputs())
    symbol = settings.currency_symbol
    return RoiSummaryResponse(
        markdown=roi_report.summary_markdown(output, symbol),
        scenarios=roi_report.format_roi_output(output, symbol),
    )
