"""Energy-momentum four-vectors of particles.

A `FourMomentum` knows the rest mass of the particle that owns it. Its
`~FourMomentum.validate` method is a query: it only reports (through the
logger) whether the vector is consistent with that rest mass. Its component
setters on the other hand enforce consistency and raise a
`.FourMomentumError` if a new value would break it.
"""

import logging
import operator
from functools import reduce
from typing import Iterable, Iterator, Optional, SupportsFloat

import numpy as np

from smparticles.exceptions import FourMomentumError
from smparticles.settings import MOMENTUM_TOLERANCE

_LOGGER = logging.getLogger(__name__)

_COMPONENTS = ("energy", "px", "py", "pz")


def _to_float(value: SupportsFloat) -> float:
    float_value = float(value)
    if float_value == -0.0:
        float_value = 0.0
    return float_value


class FourMomentum:
    r"""Mutable container for an energy-momentum vector :math:`(E, \vec{p})`.

    Args:
        energy: Energy :math:`E`.
        px: Momentum component along :math:`x`.
        py: Momentum component along :math:`y`.
        pz: Momentum component along :math:`z`.
        rest_mass: Rest mass of the owning particle. If `None`, `validate`
            only checks for finite components and :math:`E \geq 0`.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        energy: SupportsFloat = 0.0,
        px: SupportsFloat = 0.0,
        py: SupportsFloat = 0.0,
        pz: SupportsFloat = 0.0,
        rest_mass: Optional[SupportsFloat] = None,
    ) -> None:
        self.__vector = np.array(
            [_to_float(energy), _to_float(px), _to_float(py), _to_float(pz)],
            dtype=float,
        )
        self.__rest_mass: Optional[float] = None
        if rest_mass is not None:
            self.rest_mass = rest_mass  # type: ignore

    @property
    def energy(self) -> float:
        return float(self.__vector[0])

    @energy.setter
    def energy(self, value: SupportsFloat) -> None:
        self.update(energy=value)

    @property
    def px(self) -> float:  # pylint: disable=invalid-name
        return float(self.__vector[1])

    @px.setter
    def px(self, value: SupportsFloat) -> None:  # pylint: disable=invalid-name
        self.update(px=value)

    @property
    def py(self) -> float:  # pylint: disable=invalid-name
        return float(self.__vector[2])

    @py.setter
    def py(self, value: SupportsFloat) -> None:  # pylint: disable=invalid-name
        self.update(py=value)

    @property
    def pz(self) -> float:  # pylint: disable=invalid-name
        return float(self.__vector[3])

    @pz.setter
    def pz(self, value: SupportsFloat) -> None:  # pylint: disable=invalid-name
        self.update(pz=value)

    @property
    def rest_mass(self) -> Optional[float]:
        return self.__rest_mass

    @rest_mass.setter
    def rest_mass(self, value: SupportsFloat) -> None:
        rest_mass = _to_float(value)
        if not np.isfinite(rest_mass) or rest_mass < 0.0:
            raise FourMomentumError(
                f"Rest mass has to be finite and non-negative, not {rest_mass}"
            )
        self.__rest_mass = rest_mass

    def update(self, **components: SupportsFloat) -> None:
        """Set several components at once and validate the result.

        Accepts the keywords :code:`energy`, :code:`px`, :code:`py` and
        :code:`pz`. If the new vector does not pass `validate`, all components
        are restored and a `.FourMomentumError` is raised.

        >>> momentum = FourMomentum(0.511, rest_mass=0.511)
        >>> momentum.update(energy=5, pz=(5**2 - 0.511**2) ** 0.5)
        >>> round(momentum.invariant_mass(), 3)
        0.511
        """
        unknown = set(components) - set(_COMPONENTS)
        if unknown:
            raise TypeError(
                f"{self.__class__.__name__} has no components"
                f" {sorted(unknown)}"
            )
        previous = self.__vector.copy()
        for name, value in components.items():
            self.__vector[_COMPONENTS.index(name)] = _to_float(value)
        if not self.validate():
            self.__vector = previous
            raise FourMomentumError(
                "Invalid four-momentum: components must be finite, energy"
                " non-negative and the invariant mass must equal the rest mass"
                f" ({self.__rest_mass}) of the particle."
            )

    def invariant_mass(self) -> float:
        r"""Compute :math:`\sqrt{E^2 - |\vec{p}|^2}`.

        A negative radicand caused by floating point noise (or by a space-like
        vector) is clamped to zero.
        """
        return float(np.sqrt(max(0.0, self.dot(self))))

    def validate(self, tolerance: float = MOMENTUM_TOLERANCE) -> bool:
        """Check whether this four-momentum is physically consistent.

        All components have to be finite, energy has to be non-negative and,
        if a rest mass has been set, the invariant mass has to equal it within
        the tolerance. Failures are logged and reported through the return
        value; nothing is raised.
        """
        if not np.all(np.isfinite(self.__vector)):
            _LOGGER.warning(
                f"Physical inconsistency in {self!r}: components have to be"
                " finite"
            )
            return False
        if self.energy < 0.0:
            _LOGGER.warning(
                f"Physical inconsistency in {self!r}: energy cannot be"
                " negative"
            )
            return False
        if self.__rest_mass is not None:
            invariant_mass = self.invariant_mass()
            if abs(invariant_mass - self.__rest_mass) > tolerance:
                _LOGGER.warning(
                    f"Physical inconsistency in {self!r}: invariant mass"
                    f" {invariant_mass} differs from rest mass"
                    f" {self.__rest_mass}"
                )
                return False
        return True

    def dot(self, other: "FourMomentum") -> float:
        """Minkowski product with metric :math:`(+, -, -, -)`."""
        return float(
            self.__vector[0] * other.energy
            - np.dot(self.__vector[1:], other.three_momentum)
        )

    @property
    def three_momentum(self) -> np.ndarray:
        return self.__vector[1:].copy()

    def copy(self) -> "FourMomentum":
        return FourMomentum(*self, rest_mass=self.__rest_mass)

    def __add__(self, other: "FourMomentum") -> "FourMomentum":
        if not isinstance(other, FourMomentum):
            return NotImplemented
        return FourMomentum(*(self.__vector + np.array(list(other))))

    def __sub__(self, other: "FourMomentum") -> "FourMomentum":
        if not isinstance(other, FourMomentum):
            return NotImplemented
        return FourMomentum(*(self.__vector - np.array(list(other))))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FourMomentum):
            return bool(np.array_equal(self.__vector, np.array(list(other))))
        return NotImplemented

    def __iter__(self) -> Iterator[float]:
        return iter(self.__vector.tolist())

    def __repr__(self) -> str:
        components = ", ".join(
            f"{name}={value}" for name, value in zip(_COMPONENTS, self)
        )
        if self.__rest_mass is not None:
            components += f", rest_mass={self.__rest_mass}"
        return f"{self.__class__.__name__}({components})"


def sum_four_momenta(momenta: Iterable[FourMomentum]) -> FourMomentum:
    """Add up four-momenta, for instance those of a set of particles."""
    return reduce(operator.add, momenta, FourMomentum())
