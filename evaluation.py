"""Calculator Evaluation Module

This module provides:
1. Reference cases with hand-checked outputs for every calculator
2. An evaluator that runs them and compares field by field
3. A pass-rate summary, printable from the command line
"""
import sys
import json
import logging
from typing import Dict, Any, List, Callable
from dataclasses import dataclass, field

from toolbank.core.errors import InvalidInput
from toolbank.tools.health_metrics import (
    calculate_bmi,
    calculate_calories,
    calculate_water_intake,
)

logger = logging.getLogger(__name__)

CALCULATORS: Dict[str, Callable] = {
    "bmi": calculate_bmi,
    "calories": calculate_calories,
    "water": calculate_water_intake,
}


@dataclass
class ReferenceCase:
    """A single calculator call with its expected output."""
    name: str
    calculator: str
    inputs: Dict[str, Any]
    expected: Dict[str, Any]  # Subset of result.to_dict(); nested dicts allowed


REFERENCE_CASES = [
    ReferenceCase(
        name="bmi_metric_normal",
        calculator="bmi",
        inputs={"weight": 70, "height": 175, "unit_system": "metric"},
        expected={
            "bmi": 22.9,
            "category": "Normal weight",
            "healthy_weight_range": {"min": 57, "max": 76},
        },
    ),
    ReferenceCase(
        name="bmi_imperial_normal",
        calculator="bmi",
        inputs={"weight": 154, "height": 69, "unit_system": "imperial"},
        expected={
            "bmi": 22.7,
            "category": "Normal weight",
            "healthy_weight_range": {"min": 125, "max": 169},
        },
    ),
    ReferenceCase(
        name="calories_male_sedentary",
        calculator="calories",
        # 10*70 + 6.25*175 - 5*30 + 5 = 1648.75
        inputs={"weight": 70, "height": 175, "age": 30, "sex": "male",
                "activity_level": "sedentary", "unit_system": "metric"},
        expected={"bmr": 1649, "tdee": 1979},
    ),
    ReferenceCase(
        name="calories_female_light",
        calculator="calories",
        inputs={"weight": 60, "height": 165, "age": 25, "sex": "female",
                "activity_level": "light", "unit_system": "metric"},
        expected={
            "bmr": 1345,
            "tdee": 1850,
            "weight_loss": {"mild": 1600, "moderate": 1350, "aggressive": 1100},
            "weight_gain": {"mild": 2100, "moderate": 2350},
        },
    ),
    ReferenceCase(
        name="water_moderate_normal",
        calculator="water",
        inputs={"weight": 70, "activity_level": "moderate", "climate": "normal",
                "unit_system": "metric"},
        expected={"liters": 2.9, "cups": 12.3, "ounces": 99.4},
    ),
    ReferenceCase(
        name="water_high_hot",
        calculator="water",
        inputs={"weight": 80, "activity_level": "high", "climate": "hot",
                "unit_system": "metric"},
        expected={"liters": 5.0, "cups": 21.0, "ounces": 170.4},
    ),
]


@dataclass
class EvaluationResult:
    """Result of evaluating a single reference case."""
    case_name: str
    passed: bool
    mismatches: Dict[str, Any] = field(default_factory=dict)  # path -> (expected, actual)
    error: str = ""


def _diff(expected: Dict[str, Any], actual: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    mismatches = {}
    for key, want in expected.items():
        path = f"{prefix}{key}"
        got = actual.get(key)
        if isinstance(want, dict) and isinstance(got, dict):
            mismatches.update(_diff(want, got, prefix=f"{path}."))
        elif got != want:
            mismatches[path] = (want, got)
    return mismatches


class ReferenceEvaluator:
    """Runs reference cases against the calculators."""

    def __init__(self, cases: List[ReferenceCase] = None):
        self.cases = cases if cases is not None else REFERENCE_CASES

    def evaluate_case(self, case: ReferenceCase) -> EvaluationResult:
        """Evaluate a single reference case."""
        logger.info(f"Evaluating: {case.name}")
        calculator = CALCULATORS[case.calculator]

        try:
            actual = calculator(**case.inputs).to_dict()
        except InvalidInput as e:
            return EvaluationResult(case_name=case.name, passed=False, error=str(e))

        mismatches = _diff(case.expected, actual)
        return EvaluationResult(
            case_name=case.name,
            passed=not mismatches,
            mismatches=mismatches,
        )

    def run_all(self) -> List[EvaluationResult]:
        return [self.evaluate_case(case) for case in self.cases]

    def summary(self, results: List[EvaluationResult]) -> Dict[str, Any]:
        passed = sum(1 for r in results if r.passed)
        total = len(results)
        return {
            "total_cases": total,
            "passed": passed,
            "pass_rate": passed / total if total else 0.0,
            "failed_cases": {
                r.case_name: r.error or {k: list(v) for k, v in r.mismatches.items()}
                for r in results if not r.passed
            },
        }


def main() -> int:
    evaluator = ReferenceEvaluator()
    results = evaluator.run_all()

    for result in results:
        status = "PASSED" if result.passed else "FAILED"
        print(f"  {status} - {result.case_name}")

    report = evaluator.summary(results)
    print(json.dumps(report, indent=2))
    return 0 if report["pass_rate"] == 1.0 else 1


if __name__ == "__main__":
    sys.exit(main())
