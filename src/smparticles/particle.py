"""Particles of the standard model.

Every particle is a `Particle` instance, tagged with its
`~Particle.variant`: a member of `.LeptonType`, `.QuarkType` or `.BosonType`.
The variant selects the shared `.BaseProperties`, the type of the
variant-specific payload (for instance a `QuarkPayload` holding the colour
charge), the antiparticle rule and the `.DecayRule`.

Particles should be constructed with the ``create_*`` functions of this module,
like `create_electron` or `create_gluon`. A particle owns its
`.FourMomentum`: the constructors and `Particle.create_antiparticle` copy the
four-momentum they are given and set its rest mass to the particle mass.
"""

import logging
from fractions import Fraction
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Tuple,
    Type,
    Union,
)

import attr
import numpy as np
from attr.validators import instance_of

from smparticles._render import (
    render_charge,
    render_info,
    render_list,
    render_number,
)
from smparticles.decay import DECAY_RULES
from smparticles.exceptions import ColourChargeError, DecayError
from smparticles.momentum import FourMomentum
from smparticles.properties import ANTI_PREFIX, get_static_properties
from smparticles.quantum_numbers import (
    BosonType,
    ColourCharge,
    LeptonType,
    NeutrinoFlavour,
    ParticleCategory,
    QuarkType,
    TauDecayMode,
    Variant,
    get_category,
)
from smparticles.settings import DecayFailurePolicy, get_decay_failure_policy

_LOGGER = logging.getLogger(__name__)

CALORIMETER_LAYERS = 4


def _to_colour(value: Union[ColourCharge, str]) -> ColourCharge:
    if isinstance(value, ColourCharge):
        return value
    try:
        return ColourCharge(value)
    except ValueError as exception:
        raise ColourChargeError(
            f"{value!r} is not a valid colour charge. Valid colour charges"
            f" are {[colour.value for colour in ColourCharge]}"
        ) from exception


def _to_layer_energies(values: Iterable[float]) -> Tuple[float, ...]:
    energies = tuple(float(value) for value in values)
    if len(energies) != CALORIMETER_LAYERS:
        raise ValueError(
            f"Expecting energies for {CALORIMETER_LAYERS} calorimeter layers,"
            f" but got {len(energies)}"
        )
    return energies


@attr.s(frozen=True)
class ElectronPayload:
    layer_energies: Tuple[float, ...] = attr.ib(converter=_to_layer_energies)

    def info_items(self) -> List[Tuple[str, str]]:
        return [("Calorimeter Energies", render_list(self.layer_energies))]


@attr.s(frozen=True)
class MuonPayload:
    is_isolated: bool = attr.ib(default=False, converter=bool)

    def info_items(self) -> List[Tuple[str, str]]:
        return [("Isolation", "Yes" if self.is_isolated else "No")]


@attr.s
class NeutrinoPayload:
    """Neutrino flavour and whether it interacted with the detector.

    This is the only payload that can be modified after construction.
    """

    flavour: NeutrinoFlavour = attr.ib(validator=instance_of(NeutrinoFlavour))
    interacts_with_detector: bool = attr.ib(default=False, converter=bool)

    def info_items(  # pylint: disable=no-self-use
        self,
    ) -> List[Tuple[str, str]]:
        return []


@attr.s(frozen=True)
class QuarkPayload:
    colour: ColourCharge = attr.ib(converter=_to_colour)

    def info_items(self) -> List[Tuple[str, str]]:
        return [("Colour Charge", self.colour.value)]


@attr.s(frozen=True)
class GluonPayload:
    """Colour and anti-colour of a gluon.

    Any combination of the six `.ColourCharge` values is accepted.
    """

    colour: ColourCharge = attr.ib(converter=_to_colour)
    anti_colour: ColourCharge = attr.ib(converter=_to_colour)

    def info_items(self) -> List[Tuple[str, str]]:
        return [
            ("Colour Charge", self.colour.value),
            ("Anti-Colour Charge", self.anti_colour.value),
        ]


Payload = Union[
    ElectronPayload, MuonPayload, NeutrinoPayload, QuarkPayload, GluonPayload
]

_PAYLOAD_TYPES: Dict[Variant, Type] = {
    LeptonType.ELECTRON: ElectronPayload,
    LeptonType.MUON: MuonPayload,
    LeptonType.NEUTRINO: NeutrinoPayload,
    BosonType.GLUON: GluonPayload,
    **{quark_type: QuarkPayload for quark_type in QuarkType},
}

SELF_CONJUGATE_VARIANTS = frozenset({BosonType.Z, BosonType.HIGGS})
"""Variants that are their own antiparticle and never carry the flag."""


class Particle:
    """A standard-model particle with its four-momentum and decay products.

    Args:
        variant: Tag that determines the kind of particle.
        four_momentum: Four-momentum of the particle. It is copied, so the
            particle never shares it with another object. If `None`, the
            particle is created at rest.
        is_antiparticle: Create the antiparticle of the variant. Its charge
            has opposite sign and its name is prefixed with
            :code:`"Anti-"`. Ignored for the `SELF_CONJUGATE_VARIANTS`.
        payload: Variant-specific data. Required for the variants with a
            payload type (electrons, muons, neutrinos, quarks and gluons) and
            forbidden for all others. It is copied like the four-momentum.
    """

    def __init__(
        self,
        variant: Variant,
        four_momentum: Optional[FourMomentum] = None,
        is_antiparticle: bool = False,
        payload: Optional[Payload] = None,
    ) -> None:
        category = get_category(variant)
        payload_type = _PAYLOAD_TYPES.get(variant)
        if payload_type is None and payload is not None:
            raise TypeError(f"Variant {variant.name} does not take a payload")
        if payload_type is not None and not isinstance(payload, payload_type):
            raise TypeError(
                f"Variant {variant.name} requires a {payload_type.__name__},"
                f" not {payload.__class__.__name__}"
            )
        if variant in SELF_CONJUGATE_VARIANTS:
            is_antiparticle = False
        if payload is not None:
            payload = attr.evolve(payload)
        properties = get_static_properties(variant)
        if is_antiparticle:
            properties = properties.conjugate()
        if four_momentum is None:
            four_momentum = FourMomentum(properties.mass)
        else:
            four_momentum = four_momentum.copy()
        four_momentum.rest_mass = properties.mass

        self.__variant = variant
        self.__category = category
        self.__is_antiparticle = bool(is_antiparticle)
        self.__properties = properties
        self.__four_momentum = four_momentum
        self.__payload = payload
        self.__decay_products: Tuple[Particle, ...] = tuple()

    @property
    def variant(self) -> Variant:
        return self.__variant

    @property
    def category(self) -> ParticleCategory:
        return self.__category

    @property
    def is_antiparticle(self) -> bool:
        return self.__is_antiparticle

    @property
    def payload(self) -> Optional[Payload]:
        return self.__payload

    @property
    def name(self) -> str:
        if isinstance(self.__payload, NeutrinoPayload):
            prefix = ANTI_PREFIX if self.__is_antiparticle else ""
            return f"{prefix}{self.__payload.flavour.value}-Neutrino"
        return self.__properties.name

    @property
    def mass(self) -> float:
        return self.__properties.mass

    @property
    def charge(self) -> Fraction:
        return self.__properties.charge

    @property
    def spin(self) -> float:
        return self.__properties.spin

    @property
    def mass_label(self) -> str:
        return render_number(self.mass)

    @property
    def charge_label(self) -> str:
        return render_charge(self.charge)

    @property
    def spin_label(self) -> str:
        return render_number(self.spin)

    @property
    def four_momentum(self) -> FourMomentum:
        return self.__four_momentum

    @property
    def lepton_number(self) -> int:
        if self.__category is not ParticleCategory.LEPTON:
            return 0
        return -1 if self.__is_antiparticle else +1

    @property
    def baryon_number(self) -> Fraction:
        if self.__category is not ParticleCategory.QUARK:
            return Fraction(0)
        return Fraction(-1 if self.__is_antiparticle else +1, 3)

    @property
    def decay_products(self) -> Tuple["Particle", ...]:
        return self.__decay_products

    @property
    def has_decay_products(self) -> bool:
        return len(self.__decay_products) > 0

    @property
    def can_decay(self) -> bool:
        return self.__variant in DECAY_RULES

    def set_decay_products(
        self,
        products: Iterable["Particle"],
        policy: Optional[DecayFailurePolicy] = None,
    ) -> bool:
        """Assign decay products after checking the rules of the variant.

        Valid products replace any previously assigned ones. What happens with
        invalid products is determined by the ``policy``: if `None`, the
        policy of the variant is taken from `.get_decay_failure_policy`.

        Returns:
            `True` if the products were assigned, `False` if they were
            rejected under `.DecayFailurePolicy.LOG`.

        Raises:
            DecayError: If the variant cannot decay at all, or if the products
                are rejected under `.DecayFailurePolicy.RAISE`.
        """
        decay_rule = DECAY_RULES.get(self.__variant)
        if decay_rule is None:
            raise DecayError(f"Decay products of {self.name} are not modelled")
        products = tuple(products)
        for product in products:
            if not isinstance(product, Particle):
                raise TypeError(
                    f"Decay products have to be {Particle.__name__} instances,"
                    f" not {product.__class__.__name__}"
                )
        if decay_rule.check(self, products):
            self.__decay_products = products
            return True
        if policy is None:
            policy = get_decay_failure_policy(self.__variant)
        message = (
            f"Decay of {self.name} into"
            f" {[product.name for product in products]} does not conserve"
            " the required properties"
        )
        if policy is DecayFailurePolicy.RAISE:
            raise DecayError(message)
        _LOGGER.warning(f"{message}, keeping previous decay products")
        return False

    def info_items(self) -> List[Tuple[str, str]]:
        """Category-specific :code:`(key, value)` pairs for `info`."""
        items: List[Tuple[str, str]] = list()
        if self.__category is ParticleCategory.LEPTON:
            items.append(("Lepton Number", str(self.lepton_number)))
        if self.__payload is not None:
            items.extend(self.__payload.info_items())
        return items

    @property
    def info(self) -> str:
        return render_info(self)

    def create_antiparticle(self) -> "Particle":
        return _ANTIPARTICLE_RULES[self.__variant](self)

    def __neg__(self) -> "Particle":
        return self.create_antiparticle()

    def __str__(self) -> str:
        return self.info

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.__variant},"
            f" four_momentum={self.__four_momentum!r},"
            f" is_antiparticle={self.__is_antiparticle},"
            f" payload={self.__payload!r})"
        )

    def _copy(
        self,
        is_antiparticle: bool,
        payload: Optional[Payload] = None,
    ) -> "Particle":
        if payload is None:
            payload = self.__payload
        return Particle(
            self.__variant, self.__four_momentum, is_antiparticle, payload
        )


def _conjugate_flag(particle: Particle) -> Particle:
    return particle._copy(  # pylint: disable=protected-access
        is_antiparticle=not particle.is_antiparticle
    )


def _conjugate_tau(particle: Particle) -> Particle:
    antiparticle = _conjugate_flag(particle)
    if particle.has_decay_products:
        antiparticle.set_decay_products(
            [-product for product in particle.decay_products],
            policy=DecayFailurePolicy.RAISE,
        )
    return antiparticle


def _self_conjugate(particle: Particle) -> Particle:
    return particle._copy(  # pylint: disable=protected-access
        is_antiparticle=False
    )


def _conjugate_quark(particle: Particle) -> Particle:
    payload = particle.payload
    assert isinstance(payload, QuarkPayload)
    return particle._copy(  # pylint: disable=protected-access
        is_antiparticle=not particle.is_antiparticle,
        payload=QuarkPayload(payload.colour.conjugate()),
    )


def _swap_colours(particle: Particle) -> Particle:
    payload = particle.payload
    assert isinstance(payload, GluonPayload)
    return particle._copy(  # pylint: disable=protected-access
        is_antiparticle=particle.is_antiparticle,
        payload=GluonPayload(payload.anti_colour, payload.colour),
    )


_ANTIPARTICLE_RULES: Dict[Variant, Callable[[Particle], Particle]] = {
    LeptonType.ELECTRON: _conjugate_flag,
    LeptonType.MUON: _conjugate_flag,
    LeptonType.TAU: _conjugate_tau,
    LeptonType.NEUTRINO: _conjugate_flag,
    BosonType.PHOTON: _conjugate_flag,
    BosonType.W: _conjugate_flag,
    BosonType.Z: _self_conjugate,
    BosonType.HIGGS: _self_conjugate,
    BosonType.GLUON: _swap_colours,
    **{quark_type: _conjugate_quark for quark_type in QuarkType},
}


def split_calorimeter_energy(
    total_energy: float, rng: Optional[np.random.Generator] = None
) -> Tuple[float, ...]:
    """Distribute an energy randomly over the layers of a calorimeter.

    The first layers get a random fraction of the energy, the last layer gets
    the remainder, so that the layer energies always add up to
    ``total_energy``.
    """
    if rng is None:
        rng = np.random.default_rng()
    fractions = rng.uniform(0.0, 1.0, size=CALORIMETER_LAYERS - 1)
    fraction_sum = float(fractions.sum())
    if fraction_sum == 0.0:
        fractions = np.ones(CALORIMETER_LAYERS - 1)
        fraction_sum = float(CALORIMETER_LAYERS - 1)
    layer_energies = [
        float(fraction / fraction_sum * total_energy) for fraction in fractions
    ]
    layer_energies.append(total_energy - sum(layer_energies))
    return tuple(layer_energies)


def create_electron(
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
    rng: Optional[np.random.Generator] = None,
) -> Particle:
    """Create an electron and split its energy over the calorimeter layers.

    The split is random; pass a seeded `numpy.random.Generator` as ``rng`` to
    make it reproducible.
    """
    if four_momentum is None:
        energy = get_static_properties(LeptonType.ELECTRON).mass
    else:
        energy = four_momentum.energy
    payload = ElectronPayload(split_calorimeter_energy(energy, rng))
    return Particle(
        LeptonType.ELECTRON, four_momentum, is_antiparticle, payload
    )


def create_muon(
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
    is_isolated: bool = False,
) -> Particle:
    return Particle(
        LeptonType.MUON,
        four_momentum,
        is_antiparticle,
        MuonPayload(is_isolated),
    )


def create_tau(
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
    decay_mode: Optional[TauDecayMode] = None,
    rng: Optional[np.random.Generator] = None,
) -> Particle:
    """Create a tau that already decayed leptonically or hadronically.

    If no ``decay_mode`` is given, it is drawn with equal probability from
    ``rng``.
    """
    tau = Particle(LeptonType.TAU, four_momentum, is_antiparticle)
    if decay_mode is None:
        if rng is None:
            rng = np.random.default_rng()
        decay_mode = list(TauDecayMode)[int(rng.integers(len(TauDecayMode)))]
    _LOGGER.debug(f"Selected {decay_mode.name.lower()} decay for {tau.name}")
    tau.set_decay_products(
        _create_tau_decay_products(decay_mode, is_antiparticle),
        policy=DecayFailurePolicy.RAISE,
    )
    return tau


def _create_tau_decay_products(
    decay_mode: TauDecayMode, is_antiparticle: bool
) -> List[Particle]:
    tau_neutrino = create_neutrino(
        NeutrinoFlavour.TAU, is_antiparticle=is_antiparticle
    )
    if decay_mode is TauDecayMode.LEPTONIC:
        return [
            create_muon(is_antiparticle=is_antiparticle),
            create_neutrino(
                NeutrinoFlavour.MUON, is_antiparticle=not is_antiparticle
            ),
            tau_neutrino,
        ]
    if decay_mode is TauDecayMode.HADRONIC:
        colour = ColourCharge.RED
        return [
            create_quark(
                QuarkType.UP,
                colour if is_antiparticle else colour.conjugate(),
                is_antiparticle=not is_antiparticle,
            ),
            create_quark(
                QuarkType.DOWN,
                colour.conjugate() if is_antiparticle else colour,
                is_antiparticle=is_antiparticle,
            ),
            tau_neutrino,
        ]
    raise NotImplementedError(f"No tau decay products for {decay_mode}")


def create_neutrino(
    flavour: NeutrinoFlavour,
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
    interacts_with_detector: bool = False,
) -> Particle:
    return Particle(
        LeptonType.NEUTRINO,
        four_momentum,
        is_antiparticle,
        NeutrinoPayload(flavour, interacts_with_detector),
    )


def create_quark(
    quark_type: QuarkType,
    colour: Union[ColourCharge, str],
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
) -> Particle:
    if not isinstance(quark_type, QuarkType):
        raise TypeError(
            f"Quark type has to be a {QuarkType.__name__}, not {quark_type!r}"
        )
    return Particle(
        quark_type, four_momentum, is_antiparticle, QuarkPayload(colour)
    )


def create_photon(
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
) -> Particle:
    return Particle(BosonType.PHOTON, four_momentum, is_antiparticle)


def create_w_boson(
    four_momentum: Optional[FourMomentum] = None,
    is_antiparticle: bool = False,
) -> Particle:
    return Particle(BosonType.W, four_momentum, is_antiparticle)


def create_z_boson(four_momentum: Optional[FourMomentum] = None) -> Particle:
    """Create a Z boson, which is its own antiparticle."""
    return Particle(BosonType.Z, four_momentum)


def create_gluon(
    colour: Union[ColourCharge, str],
    anti_colour: Union[ColourCharge, str],
    four_momentum: Optional[FourMomentum] = None,
) -> Particle:
    """Create a gluon carrying a colour and an anti-colour charge.

    Raises:
        ColourChargeError: If one of the charges is not a `.ColourCharge`.
    """
    return Particle(
        BosonType.GLUON,
        four_momentum,
        payload=GluonPayload(colour, anti_colour),
    )


def create_higgs_boson(
    four_momentum: Optional[FourMomentum] = None,
) -> Particle:
    """Create a Higgs boson, which is its own antiparticle."""
    return Particle(BosonType.HIGGS, four_momentum)
