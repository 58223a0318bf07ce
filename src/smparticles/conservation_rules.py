r"""Conservation rules for particle decays.

A rule is a callable that takes a parent particle and its proposed decay
products and returns a `bool`. Rules never raise: a violation is logged as a
warning and reported as `False`, so that the caller can decide what to do
with it (see `.DecayFailurePolicy`).

Rules for additive quantum numbers

.. math:: q_{parent} = \sum q_{products}

can be generated with the `additive_quantum_number_rule` class decorator.
"""

import logging
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Callable, Optional, Protocol, Sequence

from smparticles.quantum_numbers import ParticleCategory
from smparticles.settings import BARYON_NUMBER_TOLERANCE, CHARGE_TOLERANCE

if TYPE_CHECKING:
    from smparticles.particle import Particle

_LOGGER = logging.getLogger(__name__)


class ConservationRule(Protocol):
    def __call__(
        self, __parent: "Particle", __products: Sequence["Particle"]
    ) -> bool:
        ...


def additive_quantum_number_rule(
    quantum_number: str,
    tolerance: float = 0.0,
    category: Optional[ParticleCategory] = None,
) -> Callable[[Any], ConservationRule]:
    """Class decorator for creating an additive conservation rule.

    Args:
        quantum_number: Name of the particle attribute that is summed, for
            instance :code:`"charge"`.
        tolerance: Allowed absolute difference between the quantum number of
            the parent and the sum over the products. A tolerance of zero
            requires exact equality.
        category: If given, only decay products of this
            `.ParticleCategory` contribute to the sum.
    """

    def decorator(rule_class: Any) -> ConservationRule:
        def new_call(  # type: ignore
            self,  # pylint: disable=unused-argument
            parent: "Particle",
            products: Sequence["Particle"],
        ) -> bool:
            total = sum(
                (
                    Fraction(getattr(product, quantum_number))
                    for product in products
                    if category is None or product.category is category
                ),
                Fraction(0),
            )
            expected = Fraction(getattr(parent, quantum_number))
            difference = abs(float(total - expected))
            if tolerance:
                is_conserved = difference < tolerance
            else:
                is_conserved = difference == 0
            if not is_conserved:
                label = quantum_number.replace("_", " ")
                _LOGGER.warning(
                    f"{label.capitalize()} conservation violated for decay of"
                    f" {parent.name} into"
                    f" {[product.name for product in products]}:"
                    f" {expected} != {total}"
                )
            return is_conserved

        rule_class.__call__ = new_call
        rule_class.__doc__ = (
            f"""Decorated via `{additive_quantum_number_rule.__name__}`.\n\n"""
            f"""Check for conservation of :code:`{quantum_number}`."""
        )
        return rule_class

    return decorator


@additive_quantum_number_rule("charge", tolerance=CHARGE_TOLERANCE)
class ChargeConservation(ConservationRule):
    pass


@additive_quantum_number_rule(
    "lepton_number", category=ParticleCategory.LEPTON
)
class LeptonNumberConservation(ConservationRule):
    pass


@additive_quantum_number_rule(
    "baryon_number",
    tolerance=BARYON_NUMBER_TOLERANCE,
    category=ParticleCategory.QUARK,
)
class BaryonNumberConservation(ConservationRule):
    pass


def check_charge_conservation(
    parent: "Particle", products: Sequence["Particle"]
) -> bool:
    """Check whether the product charges add up to the parent's charge."""
    return ChargeConservation()(parent, products)
