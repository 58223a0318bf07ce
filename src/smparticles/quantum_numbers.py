"""Enumerations and quantum number helpers shared by all particle variants.

A particle variant is a member of one of the enumerations `LeptonType`,
`QuarkType` or `BosonType`. The enumeration type of a variant determines its
`ParticleCategory`, so the category is never stored separately.
"""

from enum import Enum, auto
from fractions import Fraction
from typing import Dict, Type, Union


class ParticleCategory(Enum):
    """Category of a particle, with its display label as value."""

    LEPTON = "Lepton"
    QUARK = "Quark"
    BOSON = "Boson"


class LeptonType(Enum):
    ELECTRON = "Electron"
    MUON = "Muon"
    TAU = "Tau"
    NEUTRINO = "Neutrino"


class QuarkType(Enum):
    UP = "UpQuark"
    DOWN = "DownQuark"
    STRANGE = "StrangeQuark"
    CHARM = "CharmQuark"
    TOP = "TopQuark"
    BOTTOM = "BottomQuark"


class BosonType(Enum):
    PHOTON = "Photon"
    W = "W"
    Z = "Z"
    GLUON = "Gluon"
    HIGGS = "Higgs"


class NeutrinoFlavour(Enum):
    ELECTRON = "Electron"
    MUON = "Muon"
    TAU = "Tau"


class TauDecayMode(Enum):
    """Decay channels that a new `~.LeptonType.TAU` can be created with."""

    LEPTONIC = auto()
    HADRONIC = auto()


class ColourCharge(Enum):
    """SU(3) colour labels carried by quarks and gluons."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    ANTI_RED = "AntiRed"
    ANTI_GREEN = "AntiGreen"
    ANTI_BLUE = "AntiBlue"

    def conjugate(self) -> "ColourCharge":
        return _COLOUR_CONJUGATES[self]


_COLOUR_CONJUGATES: Dict[ColourCharge, ColourCharge] = {
    ColourCharge.RED: ColourCharge.ANTI_RED,
    ColourCharge.GREEN: ColourCharge.ANTI_GREEN,
    ColourCharge.BLUE: ColourCharge.ANTI_BLUE,
    ColourCharge.ANTI_RED: ColourCharge.RED,
    ColourCharge.ANTI_GREEN: ColourCharge.GREEN,
    ColourCharge.ANTI_BLUE: ColourCharge.BLUE,
}


Variant = Union[LeptonType, QuarkType, BosonType]
"""Any member of the three particle variant enumerations."""

_CATEGORIES: Dict[Type[Enum], ParticleCategory] = {
    LeptonType: ParticleCategory.LEPTON,
    QuarkType: ParticleCategory.QUARK,
    BosonType: ParticleCategory.BOSON,
}


def get_category(variant: Variant) -> ParticleCategory:
    category = _CATEGORIES.get(type(variant))
    if category is None:
        raise NotImplementedError(
            f"Cannot determine particle category of {variant!r}"
        )
    return category


def parse_charge(value: Union[Fraction, int, str]) -> Fraction:
    """Convert a charge definition to an exact `~fractions.Fraction`.

    Accepts integers and strings like :code:`"-1"`, :code:`"+2/3"` or
    :code:`"-1/3"`.

    >>> parse_charge("+2/3")
    Fraction(2, 3)
    >>> parse_charge(-1)
    Fraction(-1, 1)
    """
    if isinstance(value, float):
        raise TypeError(
            f"Charge has to be defined exactly, not as float {value}"
        )
    try:
        return Fraction(value)
    except (TypeError, ValueError) as exception:
        raise ValueError(
            f"Cannot interpret {value!r} as charge"
        ) from exception


def _to_fraction(
    value: Union[Fraction, float, int], render_plus: bool = False
) -> str:
    label = str(Fraction(value))
    if render_plus and value > 0:
        return f"+{label}"
    return label
