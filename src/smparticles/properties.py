"""Immutable base properties of particle variants.

The static property table maps each ``(category, variant)`` pair to its
`BaseProperties`. It is read once from :download:`static_properties.yml
</../src/smparticles/static_properties.yml>` when this module is imported and
shared read-only by every particle instance of that variant.
"""

import json
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

import attr
import yaml
from attr.validators import instance_of
from jsonschema import validate

from smparticles.quantum_numbers import (
    BosonType,
    LeptonType,
    ParticleCategory,
    QuarkType,
    Variant,
    get_category,
    parse_charge,
)
from smparticles.settings import (
    STATIC_PROPERTIES_PATH,
    STATIC_PROPERTIES_SCHEMA_PATH,
)

ANTI_PREFIX = "Anti-"


@attr.s(frozen=True)
class BaseProperties:
    """Name, mass, charge and spin that define a particle variant."""

    name: str = attr.ib(validator=instance_of(str))
    mass: float = attr.ib(converter=float)
    charge: Fraction = attr.ib(converter=parse_charge)
    spin: float = attr.ib(converter=float)

    @mass.validator
    def __check_mass(  # type: ignore  # pylint: disable=unused-argument
        self, _: attr.Attribute, value: float
    ) -> None:
        if value < 0.0:
            raise ValueError(f"Mass of {self.name} cannot be negative")

    @spin.validator
    def __check_spin(  # type: ignore  # pylint: disable=unused-argument
        self, _: attr.Attribute, value: float
    ) -> None:
        if value < 0.0 or value % 0.5 != 0.0:
            raise ValueError(
                f"Spin {value} of {self.name} has to be a non-negative"
                " multitude of 0.5"
            )

    def conjugate(self) -> "BaseProperties":
        """Properties of the antiparticle: flipped charge, prefixed name."""
        return attr.evolve(
            self, name=ANTI_PREFIX + self.name, charge=-self.charge
        )


StaticPropertyTable = Mapping[Tuple[ParticleCategory, Variant], BaseProperties]

_VARIANT_TYPES = {
    ParticleCategory.LEPTON: LeptonType,
    ParticleCategory.QUARK: QuarkType,
    ParticleCategory.BOSON: BosonType,
}


def load_static_properties(
    filename: str = STATIC_PROPERTIES_PATH,
) -> StaticPropertyTable:
    """Build an immutable static property table from a YAML file.

    The file is validated against :file:`schemas/static-properties.json` and
    has to define every variant of every category.
    """
    with open(filename) as stream:
        definition = yaml.load(stream, Loader=yaml.SafeLoader)
    with open(STATIC_PROPERTIES_SCHEMA_PATH) as json_file:
        schema = json.load(json_file)
    validate(instance=definition, schema=schema)
    table: Dict[Tuple[ParticleCategory, Variant], BaseProperties] = dict()
    for category_label, variants in definition["StaticProperties"].items():
        category = ParticleCategory(category_label)
        variant_type = _VARIANT_TYPES[category]
        for variant_label, properties_def in variants.items():
            variant = variant_type(variant_label)
            table[(category, variant)] = _build_properties(properties_def)
    missing = {
        variant.name
        for category, variant_type in _VARIANT_TYPES.items()
        for variant in variant_type
        if (category, variant) not in table
    }
    if missing:
        raise ValueError(
            f"File {filename} does not define the variants {sorted(missing)}"
        )
    return MappingProxyType(table)


def _build_properties(definition: dict) -> BaseProperties:
    return BaseProperties(
        name=definition["Name"],
        mass=definition["Mass"],
        charge=str(definition["Charge"]),
        spin=definition["Spin"],
    )


STATIC_PROPERTIES: StaticPropertyTable = load_static_properties()


def get_static_properties(variant: Variant) -> BaseProperties:
    return STATIC_PROPERTIES[(get_category(variant), variant)]
