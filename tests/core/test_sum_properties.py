"""Hypothesis property tests for the Sum use case.

- **Correctness**: ``answer == a + b`` for every pair of accepted operands.
- **Commutativity**: swapping the operands does not change the answer.
- **Identity**: adding zero returns the other operand.
- **Determinism**: the same input always yields the same output.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from summation.core.use_cases.compute_sum import ComputeSum

pytestmark = [pytest.mark.property]

# Integers (kept below the float range so mixed sums stay representable) plus finite floats.
numbers = st.one_of(
    st.integers(min_value=-(2**1000), max_value=2**1000),
    st.floats(allow_nan=False, allow_infinity=False),
)

use_case = ComputeSum()


@given(a=numbers, b=numbers)
def test_answer_is_the_sum(a, b):
    assert use_case.execute({"a": a, "b": b}).answer == a + b


@given(a=numbers, b=numbers)
def test_sum_is_commutative(a, b):
    assert use_case.execute({"a": a, "b": b}).answer == use_case.execute({"a": b, "b": a}).answer


@given(a=numbers)
def test_zero_is_the_identity(a):
    assert use_case.execute({"a": a, "b": 0}).answer == a


@given(a=numbers, b=numbers)
def test_repeated_calls_are_identical(a, b):
    payload = {"a": a, "b": b}
    assert use_case.execute(payload) == use_case.execute(payload)
