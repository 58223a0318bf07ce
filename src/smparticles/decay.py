"""Validation rules for the decay products of each particle variant.

Only the variants listed in `DECAY_RULES` can be assigned decay products.
"""

import logging
from typing import TYPE_CHECKING, Dict, FrozenSet, Sequence, Tuple

import attr

from smparticles.conservation_rules import (
    BaryonNumberConservation,
    ChargeConservation,
    ConservationRule,
    LeptonNumberConservation,
)
from smparticles.quantum_numbers import BosonType, LeptonType, Variant

if TYPE_CHECKING:
    from smparticles.particle import Particle

_LOGGER = logging.getLogger(__name__)


def _to_frozenset(arities: Sequence[int]) -> FrozenSet[int]:
    return frozenset(int(arity) for arity in arities)


def _to_tuple(
    rules: Sequence[ConservationRule],
) -> Tuple[ConservationRule, ...]:
    return tuple(rules)


@attr.s(frozen=True)
class DecayRule:
    """Allowed number of decay products and the laws they have to conserve."""

    arities: FrozenSet[int] = attr.ib(converter=_to_frozenset)
    conservation_rules: Tuple[ConservationRule, ...] = attr.ib(
        converter=_to_tuple
    )

    def check(
        self, parent: "Particle", products: Sequence["Particle"]
    ) -> bool:
        """Check the products, logging the first violated condition."""
        if len(products) not in self.arities:
            _LOGGER.warning(
                f"{parent.name} cannot decay into {len(products)} particles,"
                f" allowed numbers of decay products: {sorted(self.arities)}"
            )
            return False
        return all(rule(parent, products) for rule in self.conservation_rules)


DECAY_RULES: Dict[Variant, DecayRule] = {
    BosonType.W: DecayRule([2], [ChargeConservation()]),
    BosonType.Z: DecayRule([2], [ChargeConservation()]),
    BosonType.HIGGS: DecayRule([2, 4], [ChargeConservation()]),
    LeptonType.TAU: DecayRule(
        [3],
        [
            ChargeConservation(),
            LeptonNumberConservation(),
            BaryonNumberConservation(),
        ],
    ),
}
