from dataclasses import dataclass

def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of |a| and |b| (Euclid, iterative).
    gcd(a, 0) == |a|, gcd(0, b) == |b| and gcd(0, 0) == 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a

@dataclass(frozen=True)
class ExactFraction:
    """
    A rational number kept in lowest terms with a positive denominator.

    Always build through ExactFraction.new so that two fractions describing
    the same ratio compare (and hash) equal, e.g. 1/-2 == -1/2 == 2/-4.
    """
    numerator: int
    denominator: int

    @classmethod
    def new(cls, numerator: int, denominator: int) -> "ExactFraction":
        if denominator == 0:
            raise ZeroDivisionError(f"Fraction {numerator}/0 has no value")

        divisor = gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor

        if denominator < 0:
            numerator = -numerator
            denominator = -denominator

        return cls(numerator=numerator, denominator=denominator)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
