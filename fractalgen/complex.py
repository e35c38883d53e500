from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Complex:
    """Immutable complex value used for plane coordinates and Julia constants."""

    re: float = 0.0
    im: float = 0.0

    def abs(self) -> float:
        return math.sqrt(self.abs2())

    def abs2(self) -> float:
        return self.re * self.re + self.im * self.im

    def polar(self) -> Tuple[float, float]:
        # angle in radians
        return self.abs(), math.atan2(self.im, self.re)

    def add(self, other: Complex) -> Complex:
        return Complex(self.re + other.re, self.im + other.im)

    def sqr(self) -> Complex:
        return Complex(self.re * self.re - self.im * self.im, 2 * self.re * self.im)

    def pow(self, n: int) -> Complex:
        if n == 0:
            return Complex(1.0, 0.0)
        if n == 1:
            return self
        if n == 2:
            return self.sqr()
        r, theta = self.polar()
        return cart(powi(r, n), n * theta)

    def conjugate(self) -> Complex:
        return Complex(self.re, -self.im)

    def quad(self, n: int, c: Complex) -> Complex:
        """z**n + c"""
        return self.pow(n).add(c)

    def rotate(self, angle: float) -> Complex:
        r, theta = self.polar()
        theta += angle
        return Complex(r * math.cos(theta), r * math.sin(theta))

    def to_string(self, sig: int = 9) -> str:
        return f"{self.re:.{sig}e} + {self.im:.{sig}e}i"

    def __str__(self) -> str:
        return self.to_string()


def cart(r: float, theta: float) -> Complex:
    return Complex(r * math.cos(theta), r * math.sin(theta))


def powi(base: float, n: int) -> float:
    """Integer power by halving and squaring."""
    res = 1.0
    while n:
        if n & 1:
            res *= base
        n >>= 1
        base *= base
    return res
