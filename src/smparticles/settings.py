"""Default configuration for `smparticles`.

The tolerances below are illustrative. They are loose enough to absorb the
third-integer charges of quarks and floating point noise, not to reproduce
measured precision.
"""

from enum import Enum, auto
from os.path import dirname, join, realpath
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from smparticles.quantum_numbers import BosonType, LeptonType, Variant

__PACKAGE_PATH = dirname(realpath(__file__))
STATIC_PROPERTIES_PATH = join(__PACKAGE_PATH, "static_properties.yml")
STATIC_PROPERTIES_SCHEMA_PATH = join(
    __PACKAGE_PATH, "schemas", "static-properties.json"
)

MOMENTUM_TOLERANCE = 1e-5
"""Allowed difference between invariant mass and rest mass."""
CHARGE_TOLERANCE = 0.1
BARYON_NUMBER_TOLERANCE = 0.1


class DecayFailurePolicy(Enum):
    """What to do when decay products violate the rules of their parent."""

    RAISE = auto()
    """Raise a `.DecayError`."""
    LOG = auto()
    """Log a warning and keep the previously assigned decay products."""


DEFAULT_DECAY_FAILURE_POLICIES: Mapping[
    Variant, DecayFailurePolicy
] = MappingProxyType(
    {
        BosonType.W: DecayFailurePolicy.RAISE,
        BosonType.Z: DecayFailurePolicy.RAISE,
        BosonType.HIGGS: DecayFailurePolicy.RAISE,
        LeptonType.TAU: DecayFailurePolicy.LOG,
    }
)

__POLICY_OVERRIDES: Dict[Variant, DecayFailurePolicy] = dict()


def get_decay_failure_policy(variant: Variant) -> DecayFailurePolicy:
    """Get the policy that applies to decays of a particle variant.

    A policy set through `set_decay_failure_policy` takes precedence over
    `DEFAULT_DECAY_FAILURE_POLICIES`. Variants without any entry raise.
    """
    if variant in __POLICY_OVERRIDES:
        return __POLICY_OVERRIDES[variant]
    return DEFAULT_DECAY_FAILURE_POLICIES.get(
        variant, DecayFailurePolicy.RAISE
    )


def set_decay_failure_policy(
    variant: Variant, policy: Optional[DecayFailurePolicy]
) -> None:
    """Override the decay failure policy of a variant.

    Use `None` to restore the default from `DEFAULT_DECAY_FAILURE_POLICIES`.
    """
    if policy is None:
        __POLICY_OVERRIDES.pop(variant, None)
        return
    if not isinstance(policy, DecayFailurePolicy):
        raise TypeError(
            f"Decay failure policy has to be a {DecayFailurePolicy.__name__},"
            f" not {policy.__class__.__name__}"
        )
    __POLICY_OVERRIDES[variant] = policy
