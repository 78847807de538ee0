"""
Тесты для Floating Point — сравнение, clamp, normalize

Проверяет:
1. equals_within: толерантность, Inf/NaN, None, single/double
2. clamp_to_bounds: диапазон и приоритет максимума при перевёрнутом диапазоне
3. normalize: формула, round-trip, вырожденный диапазон (IEEE)
"""

import math

import numpy as np
import pytest

from numext.core.domain.bounds import Bounds
from numext.core.math.floating import (
    EPSILON,
    EPSILON_SINGLE,
    clamp_to_bounds,
    clamp_to_range,
    equals_within,
    equals_within_single,
    is_single,
    normalize,
    normalize_range,
    normalize_range_single,
    normalize_single,
    to_single,
)

INF = float("inf")
NAN = float("nan")


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestEqualsWithin:
    """Тесты для equals_within"""

    def test_default_epsilon(self) -> None:
        assert EPSILON == 1e-9
        assert equals_within(1.0, 1.0 + 1e-10)
        assert not equals_within(1.0, 1.0 + 1e-8)

    def test_strict_upper_bound(self) -> None:
        """Разница, равная within, НЕ считается равенством"""
        assert not equals_within(0.0, 0.5, within=0.5)
        assert equals_within(0.0, 0.25, within=0.5)

    @pytest.mark.parametrize(
        "x, y, tol",
        [
            (1.0, 1.1, 0.2),
            (1.0, 1.1, 0.05),
            (-3.0, 3.0, 6.5),
            (-3.0, 3.0, 5.5),
            (100.0, 100.0, 1e-12),
            (0.0, -0.0, 1e-12),
        ],
    )
    def test_finite_matches_abs_difference(self, x: float, y: float, tol: float) -> None:
        assert equals_within(x, y, tol) == (abs(x - y) < tol)

    def test_infinities_equal_regardless_of_sign(self) -> None:
        assert equals_within(INF, INF)
        assert equals_within(-INF, -INF)
        assert equals_within(INF, -INF)

    def test_nan_equals_nan(self) -> None:
        assert equals_within(NAN, NAN)

    def test_inf_and_nan_not_equal(self) -> None:
        assert not equals_within(INF, NAN)
        assert not equals_within(NAN, INF)

    def test_finite_vs_nan_or_inf(self) -> None:
        assert not equals_within(1.0, NAN)
        assert not equals_within(1.0, INF)

    def test_optional_values(self) -> None:
        assert equals_within(None, None)
        assert not equals_within(None, 1.0)
        assert not equals_within(1.0, None)
        assert not equals_within(None, NAN)

    def test_integers_promoted(self) -> None:
        assert equals_within(3, 3)
        assert not equals_within(3, 4)


class TestSinglePrecision:
    """Тесты single precision (float32) сравнений"""

    def test_epsilon_single_same_literal(self) -> None:
        assert EPSILON_SINGLE == pytest.approx(1e-9, rel=1e-6)
        assert EPSILON_SINGLE == float(np.float32(1e-9))

    def test_to_single_rounds(self) -> None:
        value = to_single(0.1)
        assert is_single(value)
        assert not is_single(0.1)
        assert float(value) != 0.1

    def test_single_vs_single(self) -> None:
        a = np.float32(1.5)
        b = np.float32(1.5)
        assert equals_within(a, b)
        assert equals_within_single(a, b)
        assert not equals_within(np.float32(1.5), np.float32(1.75), within=0.25)

    def test_mixed_precision_promotes_to_double(self) -> None:
        """float32(0.1) и double 0.1 различаются на ~1.5e-9 в double"""
        single = np.float32(0.1)
        assert not equals_within(single, 0.1)
        assert not equals_within_single(0.1, 0.1)
        assert equals_within(single, 0.1, within=1e-8)
        assert equals_within_single(0.1, np.float32(0.1))

    def test_single_infinities_and_nan(self) -> None:
        assert equals_within_single(INF, -INF)
        assert equals_within_single(NAN, np.float32(NAN))
        assert not equals_within_single(INF, NAN)

    def test_single_overflow_difference(self) -> None:
        """Разность max - (-max) переполняет float32 → не равны"""
        big = np.float32(3.0e38)
        assert not equals_within(big, -big)

    def test_single_optional(self) -> None:
        assert equals_within_single(None, None)
        assert not equals_within_single(None, 1.0)
        assert not equals_within_single(1.0, None)


# =============================================================================
# ТЕСТЫ CLAMP
# =============================================================================


class TestClampToBounds:
    """Тесты для clamp_to_bounds / clamp_to_range"""

    def test_inside_unchanged(self) -> None:
        assert clamp_to_bounds(5.0, 0.0, 10.0) == 5.0
        assert clamp_to_bounds(0.0, 0.0, 10.0) == 0.0
        assert clamp_to_bounds(10.0, 0.0, 10.0) == 10.0

    def test_saturates(self) -> None:
        assert clamp_to_bounds(-1.0, 0.0, 10.0) == 0.0
        assert clamp_to_bounds(15.0, 0.0, 10.0) == 10.0

    def test_integers_keep_type(self) -> None:
        result = clamp_to_bounds(300, 0, 255)
        assert result == 255
        assert isinstance(result, int)

    @pytest.mark.parametrize("value", [-100, -1, 0, 3, 7, 10, 11, 1000])
    def test_result_within_range(self, value: int) -> None:
        result = clamp_to_bounds(value, 0, 10)
        assert 0 <= result <= 10
        if 0 <= value <= 10:
            assert result == value

    def test_inverted_range_checks_max_first(self) -> None:
        """Регрессия: min=10 > max=0, 5 > 0 → возвращается max"""
        assert clamp_to_bounds(5, 10, 0) == 0
        assert clamp_to_bounds(-5, 10, 0) == 10

    def test_single_precision(self) -> None:
        result = clamp_to_bounds(np.float32(2.5), np.float32(0.0), np.float32(1.0))
        assert result == np.float32(1.0)
        assert is_single(result)

    def test_pair_forms(self) -> None:
        assert clamp_to_range(15.0, (0.0, 10.0)) == 10.0
        assert clamp_to_range(-3, Bounds.of(0, 10)) == 0
        assert clamp_to_range(5, (10, 0)) == 0

    def test_pair_form_keeps_single_precision(self) -> None:
        """Bounds из float32 дают тот же float32, что и скалярная форма"""
        value = np.float32(2.5)
        low, high = np.float32(0.0), np.float32(1.0)

        scalar = clamp_to_bounds(value, low, high)
        pair = clamp_to_range(value, Bounds.of(low, high))

        assert type(pair) is type(scalar) is np.float32
        assert pair == scalar


# =============================================================================
# ТЕСТЫ NORMALIZE
# =============================================================================


class TestNormalize:
    """Тесты для normalize / normalize_range"""

    def test_example(self) -> None:
        assert normalize(5.0, 0.0, 10.0, 0.0, 100.0) == 50.0

    def test_shifted_target(self) -> None:
        assert normalize(2.5, 0.0, 10.0, -1.0, 1.0) == pytest.approx(-0.5)

    def test_identity(self) -> None:
        assert normalize(3.0, 1.0, 5.0, 1.0, 5.0) == 3.0
        assert normalize(0.37, -2.0, 2.0, -2.0, 2.0) == pytest.approx(0.37)

    @pytest.mark.parametrize(
        "x, a, b, c, d",
        [
            (0.3, 0.0, 1.0, -5.0, 5.0),
            (17.25, 10.0, 20.0, 0.0, 1.0),
            (-4.0, -10.0, 0.0, 100.0, 200.0),
            (2.0, 0.0, 4.0, 8.0, -8.0),
        ],
    )
    def test_round_trip(self, x: float, a: float, b: float, c: float, d: float) -> None:
        there = normalize(x, a, b, c, d)
        assert normalize(there, c, d, a, b) == pytest.approx(x)

    def test_inverted_source_range_flips_sign(self) -> None:
        assert normalize(2.0, 10.0, 0.0, 0.0, 100.0) == pytest.approx(80.0)

    def test_extrapolates_outside_range(self) -> None:
        assert normalize(20.0, 0.0, 10.0, 0.0, 1.0) == pytest.approx(2.0)

    def test_degenerate_range_is_ieee(self) -> None:
        """range_min == range_max: Inf/NaN, без исключения"""
        assert normalize(3.0, 2.0, 2.0, 0.0, 1.0) == INF
        assert normalize(1.0, 2.0, 2.0, 0.0, 1.0) == -INF
        assert math.isnan(normalize(2.0, 2.0, 2.0, 0.0, 1.0))

    def test_returns_python_float(self) -> None:
        assert type(normalize(5, 0, 10, 0, 100)) is float

    def test_pair_forms(self) -> None:
        assert normalize_range(5.0, (0.0, 10.0), (0.0, 100.0)) == 50.0
        assert normalize_range(5.0, Bounds.of(0.0, 10.0), Bounds.of(0.0, 100.0)) == 50.0

    def test_pair_must_have_two_items(self) -> None:
        with pytest.raises(ValueError, match="range must be a"):
            normalize_range(5.0, (0.0, 5.0, 10.0), (0.0, 1.0))


class TestNormalizeSingle:
    """Тесты для normalize_single / normalize_range_single"""

    def test_example(self) -> None:
        result = normalize_single(5.0, 0.0, 10.0, 0.0, 100.0)
        assert is_single(result)
        assert result == np.float32(50.0)

    def test_degenerate_range_is_ieee(self) -> None:
        assert math.isinf(normalize_single(3.0, 2.0, 2.0, 0.0, 1.0))
        assert math.isnan(normalize_single(2.0, 2.0, 2.0, 0.0, 1.0))

    def test_single_rounding(self) -> None:
        result = normalize_single(1.0, 0.0, 3.0, 0.0, 1.0)
        assert result == np.float32(1.0) / np.float32(3.0)

    def test_pair_form(self) -> None:
        result = normalize_range_single(0.5, (0.0, 1.0), (10.0, 20.0))
        assert is_single(result)
        assert result == np.float32(15.0)

    def test_pair_form_with_single_bounds(self) -> None:
        result = normalize_range_single(
            np.float32(0.5),
            Bounds.of(np.float32(0.0), np.float32(1.0)),
            Bounds.of(np.float32(10.0), np.float32(20.0)),
        )
        assert is_single(result)
        assert result == np.float32(15.0)
