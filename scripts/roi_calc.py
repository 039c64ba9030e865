"""Compute ROI scenarios from a JSON file of inputs.

Usage:
  python scripts/roi_calc.py --input inputs.json
  python scripts/roi_calc.py --input inputs.json --format markdown
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from roi_service.config import Settings
from roi_service.controllers.roi import RoiInputsRequest
from roi_service.logger import setup_logging
from roi_service.services import roi_report
from roi_service.services.roi import InvalidInput, calculate_roi_scenarios, validate_roi_inputs

logger = logging.getLogger(__name__)


def load_inputs(path: Path) -> RoiInputsRequest:
    with path.open(encoding="utf-8") as fh:
        payload = json.load(fh)
    return RoiInputsRequest.model_validate(payload)


def render(request: RoiInputsRequest, fmt: str, symbol: str = "$") -> str:
    inputs = request.to_inputs()
    output = calculate_roi_scenarios(inputs)
    if fmt == "markdown":
        return roi_report.summary_markdown(output, symbol)
    body = {
        "scenarios": output.to_dict(),
        "warnings": validate_roi_inputs(inputs),
        "recommendation": roi_report.recommendation(output),
        "riskLevel": roi_report.risk_level(output),
    }
    return json.dumps(body, indent=2)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    settings = Settings()
    setup_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Calculate low/most likely/high ROI scenarios")
    parser.add_argument(
        "--input", dest="path", type=Path, required=True, help="Path to JSON file with camelCase ROI inputs"
    )
    parser.add_argument("--format", choices=("json", "markdown"), default="json")
    args = parser.parse_args(argv)

    try:
        request = load_inputs(args.path)
        print(render(request, args.format, settings.currency_symbol))
    except (ValidationError, InvalidInput) as exc:
        logger.error("Cannot calculate ROI for %s: %s", args.path, exc)
        raise SystemExit(f"Invalid ROI inputs: {exc}") from exc


if __name__ == "__main__":
    main()
