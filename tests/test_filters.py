import math

import pytest

from stepcount import EmptyInputError, FilterDesignError, InvalidOrderError
from stepcount.filters import (
    BANDPASS_A,
    BANDPASS_B,
    BANDPASS_INITIAL_STATE,
    RecursiveFilter,
    bandpass,
    make_bandpass_filter,
)


def direct_form_reference(b, a, xs):
    """Plain difference equation, zero initial conditions."""
    ys = []
    for n in range(len(xs)):
        acc = 0.0
        for k in range(len(b)):
            if n - k >= 0:
                acc += b[k] * xs[n - k]
        for k in range(1, len(a)):
            if n - k >= 0:
                acc -= a[k] * ys[n - k]
        ys.append(acc)
    return ys


def test_order_zero_is_pure_gain():
    f = RecursiveFilter([2.5], [1.0])
    assert f.order == 0
    assert f.step(4.0) == 10.0
    assert f.step(-1.0) == -2.5
    assert f.get_state() == ()


def test_first_order_recursion():
    f = RecursiveFilter([1.0, 0.5], [1.0, -0.5])
    assert f.apply([1.0, 0.0, 0.0]) == [1.0, 1.0, 0.5]


def test_fir_impulse_response_matches_taps():
    f = RecursiveFilter([1.0, 2.0, 3.0], [1.0, 0.0, 0.0])
    assert f.apply([1.0, 0.0, 0.0, 0.0]) == [1.0, 2.0, 3.0, 0.0]


def test_bandpass_matches_difference_equation():
    xs = [math.sin(0.7 * i) + 0.3 * math.cos(2.1 * i) + 1.0 for i in range(200)]
    f = RecursiveFilter(BANDPASS_B, BANDPASS_A)
    expected = direct_form_reference(BANDPASS_B, BANDPASS_A, xs)
    assert f.apply(xs) == pytest.approx(expected, rel=1e-6, abs=1e-9)


def test_a0_is_normalized():
    f = RecursiveFilter([2.0, 1.0], [2.0, -1.0])
    assert f.b == (1.0, 0.5)
    assert f.a == (1.0, -0.5)


def test_bandpass_preset_state():
    f = make_bandpass_filter()
    assert f.order == 8
    assert f.get_state() == BANDPASS_INITIAL_STATE


def test_preset_is_steady_state_for_unit_input():
    ys = bandpass([1.0] * 200)
    assert len(ys) == 200
    assert max(abs(y) for y in ys) < 1e-9


def test_passband_and_stopband():
    fs = 20.0

    def tail_amplitude(freq):
        xs = [1.0 + math.sin(2 * math.pi * freq * i / fs) for i in range(600)]
        return max(abs(y) for y in bandpass(xs)[300:])

    assert 0.8 < tail_amplitude(2.0) < 1.2
    assert tail_amplitude(0.1) < 0.05
    assert tail_amplitude(8.0) < 0.05


def test_runs_are_independent():
    xs = [math.sin(0.9 * i) for i in range(100)]
    assert bandpass(xs) == bandpass(xs)

    f = make_bandpass_filter()
    first = f.apply(xs)
    f.reset()
    assert f.get_state() == BANDPASS_INITIAL_STATE
    assert f.apply(xs) == first


def test_empty_input_raises():
    with pytest.raises(EmptyInputError):
        make_bandpass_filter().apply([])


def test_negative_order_raises():
    with pytest.raises(InvalidOrderError):
        RecursiveFilter([], [])


def test_mismatched_tables_raise():
    with pytest.raises(FilterDesignError):
        RecursiveFilter([1.0, 2.0], [1.0])
    with pytest.raises(FilterDesignError):
        RecursiveFilter([1.0, 2.0], [1.0, 0.5], initial_state=[0.0, 0.0])
    with pytest.raises(FilterDesignError):
        RecursiveFilter([1.0], [0.0])
