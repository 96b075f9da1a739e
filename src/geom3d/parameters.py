"""Type-safe numeric tolerances shared by all primitives.

A single epsilon governs equality, degeneracy, near-zero and boundary
checks across points, lines and cubes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tolerances:
    """Floating-point tolerances used by the geometry primitives.

    Default values reproduce the reference behaviour (epsilon = 1e-10).
    """

    epsilon: float = 1e-10
    """Coordinates closer than this are equal. Also the near-zero threshold for normalization."""

    hash_decimals: int = 10
    """Decimal places coordinates are rounded to before hashing.

    Equal-but-differently-rounded values may still hash apart; see ``Point3D``.
    """

    @classmethod
    def default(cls) -> "Tolerances":
        """Tolerances used throughout the package."""
        return cls()


DEFAULT_TOLERANCES = Tolerances.default()

EPSILON = DEFAULT_TOLERANCES.epsilon
"""Package-wide comparison tolerance."""
