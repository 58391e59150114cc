"""
Goodness-of-fit score.

Score is an immutable bundle of the four statistics computed by
FittableModel.score(). Each statistic has a typed accessor that takes an
optional rounding precision:

    >>> score = model.score(x, y)
    >>> score.r2()      # full precision
    >>> score.r2(6)     # rounded to 6 decimals
    >>> score.get('chi2', 3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pycurvefit.core.exceptions import InvalidPropertyError


STATISTICS = ('r', 'r2', 'chi2', 'rmsd')


def _round(value: float, precision: int | None) -> float:
    return value if precision is None else round(value, int(precision))


@dataclass(frozen=True)
class Score:
    """
    Fit-quality statistics for a model against an observation set.

    Attributes are stored privately and exposed through precision-aware
    accessor methods; the instance is frozen after construction.
    """
    _r: float
    _r2: float
    _chi2: float
    _rmsd: float

    def r(self, precision: int | None = None) -> float:
        """Pearson correlation between predicted and actual values."""
        return _round(self._r, precision)

    def r2(self, precision: int | None = None) -> float:
        """Coefficient of determination, r squared."""
        return _round(self._r2, precision)

    def chi2(self, precision: int | None = None) -> float:
        """Chi-square: sum of squared residual over actual, zero actuals skipped."""
        return _round(self._chi2, precision)

    def rmsd(self, precision: int | None = None) -> float:
        """Deviation statistic built from the last observation's residual."""
        return _round(self._rmsd, precision)

    def get(self, name: str, precision: int | None = None) -> float:
        """
        Look up a statistic by name.

        Args:
            name: One of 'r', 'r2', 'chi2', 'rmsd'
            precision: Decimal places to round to, or None for full precision

        Raises:
            InvalidPropertyError: If name is not a statistic on Score
        """
        if name not in STATISTICS:
            owner = f"{type(self).__module__}.{type(self).__qualname__}"
            raise InvalidPropertyError(
                f"Property ${name} is not a property on {owner}.",
                name=name,
                owner=owner,
            )
        return getattr(self, name)(precision)

    def to_dict(self, precision: int | None = None) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {name: self.get(name, precision) for name in STATISTICS}

    def summary(self, precision: int = 6) -> str:
        """Generate summary output."""
        lines = [
            "Goodness of Fit",
            "=" * 40,
        ]
        for name in STATISTICS:
            lines.append(f"  {name:<6} {self.get(name):>{precision + 14}.{precision}f}")
        lines.append("=" * 40)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Score(r={self._r:.6f}, r2={self._r2:.6f}, "
            f"chi2={self._chi2:.6g}, rmsd={self._rmsd:.6g})"
        )
