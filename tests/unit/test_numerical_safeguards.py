"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-сравнения скаляров (включая complex)
2. Ограничение диапазоном (clamp)
3. sin по cos с защитой от отрицательного подкоренного выражения
4. Валидацию аргументов
"""

import math

import pytest

from numvec.core.math.numerical_safeguards import (
    EPS_ANGLE_CLAMP,
    EPS_VECTOR_COMPARE,
    clamp,
    sine_from_cosine,
    validate_finite,
    validate_non_negative_int,
    within_tolerance,
)


# =============================================================================
# ТЕСТЫ EPSILON-ПАРАМЕТРОВ
# =============================================================================


class TestEpsilonConstants:
    """Тесты для epsilon-параметров"""

    def test_vector_compare_eps(self) -> None:
        """Толерантность сравнения векторов фиксирована на 1e-6"""
        assert EPS_VECTOR_COMPARE == 1e-6

    def test_angle_clamp_eps_is_small(self) -> None:
        """Порог логирования clamp меньше толерантности сравнения"""
        assert 0 < EPS_ANGLE_CLAMP < EPS_VECTOR_COMPARE


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestWithinTolerance:
    """Тесты для within_tolerance"""

    def test_exact_match(self) -> None:
        """Точное совпадение"""
        assert within_tolerance(1.0, 1.0)
        assert within_tolerance(0, 0)

    def test_close_values_within_default_eps(self) -> None:
        """Разница меньше 1e-6 считается совпадением"""
        assert within_tolerance(1.0, 1.0 + 1e-7)
        assert within_tolerance(1.0, 1.0 - 1e-7)

    def test_far_values_not_close(self) -> None:
        """Разница больше 1e-6 не считается совпадением"""
        assert not within_tolerance(1.0, 1.0 + 2e-6)
        assert not within_tolerance(1.0, 1.1)

    def test_complex_uses_modulus(self) -> None:
        """Для complex сравнивается модуль разности"""
        assert within_tolerance(1 + 1j, 1 + 1.0000001j)
        assert not within_tolerance(1 + 1j, 1 + 1.1j)
        # |(1e-6 + 1e-6j)| ~ 1.41e-6 > 1e-6
        assert not within_tolerance(0j, 1e-6 + 1e-6j)

    def test_custom_eps(self) -> None:
        """Пользовательская толерантность работает"""
        assert within_tolerance(1.0, 1.05, eps=0.1)
        assert not within_tolerance(1.0, 1.05, eps=0.01)

    def test_equal_infinities(self) -> None:
        """Одинаковые бесконечности совпадают, разные нет"""
        inf = float("inf")
        assert within_tolerance(inf, inf)
        assert within_tolerance(-inf, -inf)
        assert not within_tolerance(inf, -inf)
        assert not within_tolerance(inf, 1e308)

    def test_nan_never_within_tolerance(self) -> None:
        """NaN не совпадает ни с чем, включая себя"""
        nan = float("nan")
        assert not within_tolerance(nan, nan)


# =============================================================================
# ТЕСТЫ CLAMP И SIN
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_value_in_range_unchanged(self) -> None:
        """Значение в диапазоне не изменяется"""
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_value_below_min_clamped(self) -> None:
        """Значение ниже минимума ограничено"""
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_value_above_max_clamped(self) -> None:
        """Значение выше максимума ограничено"""
        assert clamp(15.0, 0.0, 10.0) == 10.0

    def test_only_one_bound(self) -> None:
        """Работает с одной границей"""
        assert clamp(-5.0, min_value=0.0) == 0.0
        assert clamp(15.0, max_value=10.0) == 10.0
        assert clamp(5.0) == 5.0

    def test_rounding_overshoot_clamped(self) -> None:
        """Превышение 1 на ulp ограничивается"""
        assert clamp(1.0000000000000002, -1.0, 1.0) == 1.0
        assert clamp(-1.0000000000000002, -1.0, 1.0) == -1.0

    def test_nan_passes_through(self) -> None:
        """NaN не ограничивается"""
        assert math.isnan(clamp(float("nan"), -1.0, 1.0))


class TestSineFromCosine:
    """Тесты для sine_from_cosine"""

    def test_right_angle(self) -> None:
        """cos = 0 → sin = 1"""
        assert sine_from_cosine(0.0) == 1.0

    def test_parallel_and_antiparallel(self) -> None:
        """cos = ±1 → sin = 0"""
        assert sine_from_cosine(1.0) == 0.0
        assert sine_from_cosine(-1.0) == 0.0

    def test_overshoot_gives_zero_not_nan(self) -> None:
        """|cos| чуть больше 1 из-за округления → sin = 0, не NaN"""
        assert sine_from_cosine(1.0000000000000002) == 0.0
        assert sine_from_cosine(-1.0000000000000002) == 0.0

    def test_pythagorean_identity(self) -> None:
        """sin^2 + cos^2 = 1"""
        assert sine_from_cosine(0.6) == pytest.approx(0.8)
        assert sine_from_cosine(-0.6) == pytest.approx(0.8)

    def test_nan_propagates(self) -> None:
        """NaN на входе → NaN на выходе"""
        assert math.isnan(sine_from_cosine(float("nan")))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты для функций валидации"""

    def test_validate_non_negative_int_success(self) -> None:
        """Неотрицательные целые проходят"""
        validate_non_negative_int(0, "size")
        validate_non_negative_int(5, "size")

    def test_validate_non_negative_int_negative(self) -> None:
        """Отрицательное значение вызывает ошибку"""
        with pytest.raises(ValueError, match="size must be non-negative"):
            validate_non_negative_int(-1, "size")

    def test_validate_non_negative_int_rejects_float(self) -> None:
        """float вызывает ошибку даже если он целый"""
        with pytest.raises(ValueError, match="size must be a non-negative integer"):
            validate_non_negative_int(2.0, "size")  # type: ignore[arg-type]

    def test_validate_non_negative_int_rejects_bool(self) -> None:
        """bool не считается целым"""
        with pytest.raises(ValueError, match="non-negative integer"):
            validate_non_negative_int(True, "size")

    def test_validate_finite_success(self) -> None:
        """Конечные значения проходят"""
        validate_finite(0.0, "low")
        validate_finite(-1e10, "low")

    def test_validate_finite_nan_and_inf(self) -> None:
        """NaN/Inf вызывают ошибку"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_finite(float("nan"), "low")

        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_finite(float("inf"), "high")
