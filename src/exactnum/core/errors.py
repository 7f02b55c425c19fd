"""
Errors — таксономия ошибок точной арифметики

Три вида ошибок, все синхронные и локальные для вызывающего кода:
1. Нарушение инварианта при конструировании (например, denominator == 0)
   → pydantic.ValidationError (подкласс ValueError), генерируется моделью
2. Операция недопустима для аргумента или состояния
   → InvalidArgumentError / InvalidStateError
3. Неточная конверсия (exact-вариант для нецелого значения)
   → InexactConversionError

Ошибки не логируются и не перехватываются внутри пакета.
"""


class InvalidArgumentError(ValueError):
    """
    Аргумент операции недопустим.

    Примеры:
    - деление на необратимую дробь (numerator == 0)
    - деление на complex, не являющийся unit
    - expand с нулевым множителем
    """

    pass


class InvalidStateError(ArithmeticError):
    """
    Операция не определена для текущего значения receiver.

    Receiver остаётся валидным и пригодным для других операций.

    Примеры:
    - invert() для необратимой дроби
    - argument() / to_polar_form() для нулевого complex
    """

    pass


class InexactConversionError(ArithmeticError):
    """Exact-конверсия невозможна без потери точности."""

    pass
