"""
Polynomials with real coefficients, evaluated with Horner's scheme.
"""

from __future__ import annotations

from starfield.api.core.utils import NoValueEquality, check_argument


__all__ = ["Polynomial"]


class Polynomial(NoValueEquality):
    """
    A polynomial c_n x^n + ... + c_1 x + c_0.

    Coefficients are given from the highest degree down to the constant,
    and the leading coefficient must not be zero.

    Example:
        >>> Polynomial.of(1.0, -2.0, 1.0).at(3.0)
        4.0
    """

    __slots__ = ("_coefficients",)

    def __init__(self, coefficients: tuple[float, ...]) -> None:
        check_argument(len(coefficients) > 0, "A polynomial needs at least one coefficient")
        check_argument(coefficients[0] != 0, "Leading coefficient must not be zero")
        self._coefficients = tuple(coefficients)

    @classmethod
    def of(cls, leading: float, *coefficients: float) -> Polynomial:
        return cls((leading, *coefficients))

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def at(self, x: float) -> float:
        value = 0.0
        for coefficient in self._coefficients:
            value = value * x + coefficient
        return value

    def __call__(self, x: float) -> float:
        return self.at(x)

    def __str__(self) -> str:
        parts: list[str] = []
        for i, coefficient in enumerate(self._coefficients):
            power = self.degree - i
            if coefficient == 0:
                continue
            if power == 0:
                term = f"{coefficient}"
            elif coefficient == 1:
                term = "x"
            elif coefficient == -1:
                term = "-x"
            else:
                term = f"{coefficient}x"
            if power > 1:
                term += f"^{power}"
            if parts and not term.startswith("-"):
                term = "+" + term
            parts.append(term)
        return "".join(parts) if parts else "0"

    def __repr__(self) -> str:
        return f"Polynomial({self})"
