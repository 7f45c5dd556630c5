# tests\core\test_use_cases.py
from concurrent.futures import ThreadPoolExecutor

import pytest

from summation.core.domain.exceptions import ValidationError
from summation.core.domain.models import SumRequest, SumResponse
from summation.core.use_cases.compute_sum import INVALID_REQUEST_MESSAGE, ComputeSum

class TestComputeSum:

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1, 2, 3),
            (-1, -2, -3),
            (0, 0, 0),
        ],
    )
    def test_execute_success(self, use_case, a, b, expected):
        """
        Scenario: Two valid operands are provided.
        Expected: The use case returns a SumResponse with answer == a + b.
        """
        result = use_case.execute({"a": a, "b": b})

        assert isinstance(result, SumResponse)
        assert result.answer == expected

    def test_execute_accepts_a_validated_request(self, use_case):
        result = use_case.execute(SumRequest(a=40, b=2))
        assert result.answer == 42

    def test_execute_mixed_int_and_float(self, use_case):
        result = use_case.execute({"a": 1, "b": 0.5})
        assert result.answer == 1.5
        assert isinstance(result.answer, float)

    def test_execute_keeps_integer_results_integral(self, use_case):
        result = use_case.execute({"a": 10**30, "b": 1})
        assert result.answer == 10**30 + 1
        assert isinstance(result.answer, int)

    def test_execute_uses_host_float_arithmetic(self, use_case):
        result = use_case.execute({"a": 0.1, "b": 0.2})
        assert result.answer == 0.1 + 0.2

    def test_execute_ignores_extra_fields(self, use_case):
        result = use_case.execute({"a": 1, "b": 2, "comment": "ignored"})
        assert result.answer == 3

    def test_missing_operand_is_not_treated_as_zero(self, use_case):
        """
        Scenario: 'a' is missing.
        Expected: Raises ValidationError immediately (Fail Fast), no answer.
        """
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute({"b": 2})

        assert excinfo.value.message == INVALID_REQUEST_MESSAGE
        assert excinfo.value.details == {"a": "field required"}

    def test_both_operands_missing(self, use_case):
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute({})

        assert excinfo.value.details == {"a": "field required", "b": "field required"}

    @pytest.mark.parametrize("bad", ["x", "2", None, True, [1, 2], {"n": 1}])
    def test_non_numeric_operand(self, use_case, bad):
        """
        Scenario: 'a' is not a number (including numeric strings and booleans).
        Expected: Raises ValidationError naming the field.
        """
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute({"a": bad, "b": 2})

        assert excinfo.value.details == {"a": "must be a number"}

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_operand(self, use_case, bad):
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute({"a": 1, "b": bad})

        assert excinfo.value.details == {"b": "must be a finite number"}

    def test_errors_reported_for_each_operand(self, use_case):
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute({"a": "x"})

        assert excinfo.value.details == {
            "a": "must be a number",
            "b": "field required",
        }

    @pytest.mark.parametrize("payload", [[1, 2], "1+2", 3, None])
    def test_payload_must_be_a_mapping(self, use_case, payload):
        with pytest.raises(ValidationError) as excinfo:
            use_case.execute(payload)

        assert list(excinfo.value.details) == ["body"]

    def test_validation_error_chains_the_pydantic_error(self, use_case):
        with pytest.raises(ValidationError) as excinfo:
            use_case.validate({"a": "x", "b": 1})

        assert excinfo.value.__cause__ is not None

    def test_execute_is_idempotent(self, use_case):
        payload = {"a": 7, "b": -3}

        first = use_case.execute(payload)
        second = use_case.execute(payload)

        assert first == second
        assert payload == {"a": 7, "b": -3}

    def test_concurrent_invocations_agree(self):
        """
        Scenario: Many threads share one use case instance.
        Expected: Every call returns its own correct answer (no shared state).
        """
        use_case = ComputeSum()
        pairs = [(i, -2 * i) for i in range(200)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda p: use_case.execute({"a": p[0], "b": p[1]}), pairs))

        assert [r.answer for r in results] == [a + b for a, b in pairs]

    def test_container_builds_fresh_instances(self, container):
        assert container.compute_sum_use_case() is not container.compute_sum_use_case()
