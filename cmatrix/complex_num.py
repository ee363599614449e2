"""Complex numbers with tolerant equality, text formatting and parsing."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from numbers import Real

_ALLOWED_CHARS = frozenset(".+-0123456789i")
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)")
_TOLERANCE = sys.float_info.epsilon * 10000


def _leading_float(text: str) -> float:
    """Read the longest numeric prefix of ``text`` as a float."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    value = float(match.group())
    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def _find_sign(text: str) -> int | None:
    """Position of the first '+' or '-' after the first character."""
    for pos, char in enumerate(text[1:], start=1):
        if char in "+-":
            return pos
    return None


def _format_double(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True, eq=False)
class Complex:
    """A complex number ``re + im*i``."""

    re: float = 0.0
    im: float = 0.0

    @staticmethod
    def _coerce(other: object) -> Complex | None:
        if isinstance(other, Complex):
            return other
        if isinstance(other, Real):
            return Complex(float(other), 0.0)
        if isinstance(other, complex):
            return Complex(other.real, other.imag)
        return None

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re + rhs.re, self.im + rhs.im)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self.re - rhs.re, self.im - rhs.im)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self.re * rhs.re - self.im * rhs.im,
            self.re * rhs.im + self.im * rhs.re,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.re == 0 and rhs.im == 0:
            raise ZeroDivisionError("Division by zero")
        denom = rhs.re * rhs.re + rhs.im * rhs.im
        return Complex(
            (self.re * rhs.re + self.im * rhs.im) / denom,
            (self.im * rhs.re - self.re * rhs.im) / denom,
        )

    def __rtruediv__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (
            abs(self.re - rhs.re) <= _TOLERANCE
            and abs(self.im - rhs.im) <= _TOLERANCE
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __abs__(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        if self.im == 0:
            return _format_double(self.re)
        if self.re == 0:
            if self.im == 1:
                return "i"
            if self.im == -1:
                return "-i"
            return f"{_format_double(self.im)}i"
        real = _format_double(self.re)
        if self.im > 0:
            return f"{real}+{_format_double(self.im)}i"
        return f"{real}{_format_double(self.im)}i"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Parse the first whitespace-separated token of ``text``.

        Accepted forms are ``a``, ``bi``, ``a+bi`` and ``a-bi``, where a
        lone ``i`` stands for ``1i``. Raises ValueError on anything else.
        """
        tokens = text.split()
        if not tokens:
            raise ValueError("empty complex number")
        token = tokens[0]
        if not set(token) <= _ALLOWED_CHARS:
            raise ValueError(f"invalid complex number: {token!r}")

        i_pos = token.find("i")
        if i_pos < 0:
            if _find_sign(token) is not None:
                raise ValueError(f"invalid complex number: {token!r}")
            return cls(_leading_float(token), 0.0)

        if i_pos != len(token) - 1:
            raise ValueError(f"invalid complex number: {token!r}")
        body = token[:-1]
        if body in ("", "+", "-"):
            return cls(0.0, _leading_float(body + "1"))

        sign_pos = _find_sign(body)
        if sign_pos is None:
            return cls(0.0, _leading_float(body))

        real = _leading_float(body[:sign_pos])
        imag_text = body[sign_pos:]
        if _find_sign(imag_text) is not None:
            raise ValueError(f"invalid complex number: {token!r}")
        if imag_text in ("+", "-"):
            imag = _leading_float(imag_text + "1")
        elif imag_text == "-0":
            imag = 0.0
        else:
            imag = _leading_float(imag_text)
        return cls(real, imag)