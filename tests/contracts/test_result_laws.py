"""Algebraic laws the combinators must satisfy for arbitrary payloads."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from popcorn import (
    PLAIN_ERROR,
    PLAIN_OK,
    Failure,
    InvalidShapeError,
    Success,
    and_then_keep,
    chain,
    ensure_is_result,
    error,
    maybe,
    ok,
    or_else_keep,
    tuple_wrap,
)

pytestmark = pytest.mark.contract

payloads = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=5),
)
reasons = st.one_of(st.text(max_size=20), st.sampled_from(["invalid", "timeout"]))
successes = payloads.map(Success)
failures = reasons.map(Failure)
results = st.one_of(successes, failures, st.just(PLAIN_OK), st.just(PLAIN_ERROR))
payload_results = st.one_of(successes, failures)

# Steps returning a Result of every shape for a given input.
steps = st.sampled_from(
    [
        ok,
        lambda v: error(repr(v)),
        lambda v: ok((v, v)),
        lambda _: PLAIN_OK,
        lambda _: PLAIN_ERROR,
    ]
)
non_results = st.one_of(
    st.integers(),
    st.text(max_size=10),
    st.tuples(st.just("ok"), payloads),
    st.tuples(st.integers(), st.integers(), st.integers()),
)


@given(value=payloads, step=steps)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_chain_on_success_equals_guarded_step(value, step) -> None:
    """Property: chain(ok(v), f) == ensure_is_result(f(v))."""
    assert chain(ok(value), step) == ensure_is_result(step(value))


@given(reason=reasons)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_chain_on_failure_never_calls_step(reason) -> None:
    """Property: chain(Failure(r), f) == Failure(r) and f is never invoked."""
    calls: list[object] = []

    def step(value):
        calls.append(value)
        return ok(value)

    assert chain(Failure(reason), step) == Failure(reason)
    assert calls == []


@given(value=payloads.filter(lambda v: v is not None))
@settings(max_examples=50, deadline=None, derandomize=True)
def test_maybe_applies_step_to_present_values(value) -> None:
    """Property: maybe(v, f) == f(v) for any present v."""
    assert maybe(value, repr) == repr(value)


@given(value=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_ensure_is_result_is_identity_on_results(value) -> None:
    assert ensure_is_result(value) is value


@given(value=non_results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_ensure_is_result_rejects_everything_else(value) -> None:
    with pytest.raises(InvalidShapeError):
        ensure_is_result(value)


@given(first=payload_results, second=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_and_then_keep_keeps_first_failure(first, second) -> None:
    expected = second if isinstance(first, Success) else first
    assert and_then_keep(first, second) == expected


@given(first=payload_results, second=results)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_or_else_keep_keeps_first_success(first, second) -> None:
    expected = first if isinstance(first, Success) else second
    assert or_else_keep(first, second) == expected


@given(value=payloads)
@settings(max_examples=50, deadline=None, derandomize=True)
def test_tuple_wrap_of_returning_thunk_is_ok(value) -> None:
    assert tuple_wrap(lambda: value) == ok(value)


@given(message=st.text(min_size=1, max_size=20))
@settings(max_examples=50, deadline=None, derandomize=True)
def test_tuple_wrap_of_raising_thunk_is_error(message) -> None:
    def thunk():
        raise RuntimeError(message)

    assert tuple_wrap(thunk) == error(message)
