"""Small value classes: complex numbers and student records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Complex:
    """Complex number with integer parts, updated in place."""

    real: int
    imaginary: int

    def add(self, other: Complex) -> None:
        """Add ``other`` to this number in place."""
        self.real += other.real
        self.imaginary += other.imaginary

    def multiply(self, other: Complex) -> None:
        """Multiply this number by ``other`` in place."""
        self.real, self.imaginary = (
            self.real * other.real - self.imaginary * other.imaginary,
            self.imaginary * other.real + self.real * other.imaginary,
        )

    def __str__(self) -> str:
        return f"{self.real} + {self.imaginary}i"


@dataclass
class Student:
    """Student record; fields not given stay unset."""

    age: Optional[int] = None
    roll_no: Optional[int] = None