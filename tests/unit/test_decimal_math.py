"""
Тесты для Decimal Math

Проверяет:
1. sqrt и pi с округлением по контексту
2. atan / atan2 во всех квадрантах и на осях
3. sin / cos в опорных точках
4. Глобальные контексты decimal и mpmath не изменяются
"""

import decimal
from decimal import Decimal

import mpmath
import pytest

from exactnum.core import decimal_math
from exactnum.core.context import ArithmeticContext

CONTEXT = ArithmeticContext(precision=40)
TOLERANCE = Decimal("1e-25")


class TestRootsAndConstants:
    """sqrt и pi."""

    def test_sqrt(self) -> None:
        assert decimal_math.sqrt(Decimal(2), ArithmeticContext(precision=10)) == Decimal(
            "1.414213562"
        )

    def test_sqrt_perfect_square(self) -> None:
        assert decimal_math.sqrt(Decimal(25), CONTEXT) == Decimal(5)

    def test_sqrt_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="sqrt of negative"):
            decimal_math.sqrt(Decimal(-1), CONTEXT)

    def test_pi(self) -> None:
        assert decimal_math.pi(ArithmeticContext(precision=20)) == Decimal(
            "3.1415926535897932385"
        )

    def test_pi_respects_rounding_mode(self) -> None:
        """ROUND_DOWN отбрасывает ...846 → ...84."""
        context = ArithmeticContext(precision=20, rounding="ROUND_DOWN")
        assert decimal_math.pi(context) == Decimal("3.1415926535897932384")


class TestArctangent:
    """atan и atan2."""

    def test_atan_one_is_quarter_pi(self) -> None:
        quarter_pi = decimal_math.pi(CONTEXT) / 4
        assert abs(decimal_math.atan(Decimal(1), CONTEXT) - quarter_pi) < TOLERANCE

    def test_atan_odd(self) -> None:
        x = Decimal("0.7")
        assert abs(decimal_math.atan(-x, CONTEXT) + decimal_math.atan(x, CONTEXT)) < TOLERANCE

    def test_atan_large_argument(self) -> None:
        """atan(x) + atan(1/x) = pi/2 для x > 0."""
        x = Decimal(1000)
        total = decimal_math.atan(x, CONTEXT) + decimal_math.atan(1 / x, CONTEXT)
        assert abs(total - decimal_math.pi(CONTEXT) / 2) < TOLERANCE

    def test_atan_small_argument(self) -> None:
        x = Decimal("1e-12")
        assert abs(decimal_math.atan(x, CONTEXT) - x) < TOLERANCE

    @pytest.mark.parametrize(
        "y,x,quarter_turns",
        [
            (1, 1, 1),
            (1, -1, 3),
            (-1, -1, -3),
            (-1, 1, -1),
            (0, 1, 0),
            (1, 0, 2),
            (0, -1, 4),
            (-1, 0, -2),
        ],
    )
    def test_atan2_range(self, y: int, x: int, quarter_turns: int) -> None:
        """Результат в (-pi, pi]."""
        expected = decimal_math.pi(CONTEXT) * quarter_turns / 4
        result = decimal_math.atan2(Decimal(y), Decimal(x), CONTEXT)
        assert abs(result - expected) < TOLERANCE

    def test_atan2_origin_raises(self) -> None:
        with pytest.raises(ValueError, match="origin"):
            decimal_math.atan2(Decimal(0), Decimal(0), CONTEXT)


class TestSineCosine:
    """sin и cos."""

    def test_at_zero(self) -> None:
        assert decimal_math.sin(Decimal(0), CONTEXT) == 0
        assert decimal_math.cos(Decimal(0), CONTEXT) == 1

    def test_at_sixth_of_pi(self) -> None:
        angle = decimal_math.pi(CONTEXT) / 6
        assert abs(decimal_math.sin(angle, CONTEXT) - Decimal("0.5")) < TOLERANCE

    def test_at_pi(self) -> None:
        pi = decimal_math.pi(CONTEXT)
        assert abs(decimal_math.cos(pi, CONTEXT) + 1) < TOLERANCE
        assert abs(decimal_math.sin(pi, CONTEXT)) < TOLERANCE

    def test_large_angle_is_reduced(self) -> None:
        """Периодичность: cos(x + 20*pi) = cos(x)."""
        pi = decimal_math.pi(CONTEXT)
        x = Decimal("0.3")
        assert abs(decimal_math.cos(x + 20 * pi, CONTEXT) - decimal_math.cos(x, CONTEXT)) < TOLERANCE

    def test_pythagorean_identity(self) -> None:
        x = Decimal("1.234")
        sin, cos = decimal_math.sin(x, CONTEXT), decimal_math.cos(x, CONTEXT)
        assert abs(sin * sin + cos * cos - 1) < TOLERANCE


class TestGlobalContextUntouched:
    """Функции не изменяют decimal.getcontext() и mpmath.mp."""

    def test_precision_preserved(self) -> None:
        before = decimal.getcontext().prec
        decimal_math.pi(ArithmeticContext(precision=60))
        decimal_math.atan2(Decimal(1), Decimal(2), ArithmeticContext(precision=60))
        assert decimal.getcontext().prec == before

    def test_mpmath_precision_preserved(self) -> None:
        before = mpmath.mp.dps
        decimal_math.sin(Decimal(1), ArithmeticContext(precision=80))
        decimal_math.atan(Decimal(3), ArithmeticContext(precision=80))
        assert mpmath.mp.dps == before

    def test_result_rounded_to_context(self) -> None:
        """Один раз округляется до precision значащих цифр."""
        result = decimal_math.cos(Decimal(1), ArithmeticContext(precision=12))
        assert result == Decimal("0.540302305868")
        assert len(result.as_tuple().digits) == 12
