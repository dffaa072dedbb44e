"""Tests for the reference-case evaluator."""
from evaluation import (
    REFERENCE_CASES,
    ReferenceCase,
    ReferenceEvaluator,
)


class TestReferenceEvaluator:

    def test_all_reference_cases_pass(self):
        evaluator = ReferenceEvaluator()
        results = evaluator.run_all()
        summary = evaluator.summary(results)

        assert summary["total_cases"] == len(REFERENCE_CASES)
        assert summary["failed_cases"] == {}
        assert summary["pass_rate"] == 1.0

    def test_mismatch_reported_by_path(self):
        case = ReferenceCase(
            name="wrong_range",
            calculator="bmi",
            inputs={"weight": 70, "height": 175},
            expected={"bmi": 22.9, "healthy_weight_range": {"min": 50}},
        )
        result = ReferenceEvaluator([case]).evaluate_case(case)

        assert not result.passed
        assert result.mismatches == {"healthy_weight_range.min": (50, 57)}

    def test_invalid_input_is_a_failure(self):
        case = ReferenceCase(
            name="bad_sex",
            calculator="calories",
            inputs={"weight": 70, "height": 175, "age": 30, "sex": "x",
                    "activity_level": "light"},
            expected={"bmr": 0},
        )
        evaluator = ReferenceEvaluator([case])
        summary = evaluator.summary(evaluator.run_all())

        assert summary["pass_rate"] == 0.0
        assert "sex" in summary["failed_cases"]["bad_sex"]
