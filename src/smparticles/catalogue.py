"""Searchable catalogue of particles.

The `ParticleCatalogue` maps lower-case lookup keys to `.Particle` instances.
`create_standard_model_catalogue` fills one with every particle of the
standard model.
"""

import logging
from collections import abc
from difflib import get_close_matches
from typing import (
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
)

import numpy as np

from smparticles.momentum import FourMomentum, sum_four_momenta
from smparticles.particle import (
    Particle,
    create_electron,
    create_gluon,
    create_higgs_boson,
    create_muon,
    create_neutrino,
    create_photon,
    create_quark,
    create_tau,
    create_w_boson,
    create_z_boson,
)
from smparticles.quantum_numbers import (
    ColourCharge,
    NeutrinoFlavour,
    ParticleCategory,
    QuarkType,
)

_LOGGER = logging.getLogger(__name__)


def _to_key(name: str) -> str:
    return name.strip().lower()


class ParticleCatalogue(abc.MutableMapping):
    """Mapping of case-insensitive lookup keys to `.Particle` instances."""

    def __init__(
        self, particles: Optional[Iterable[Tuple[str, Particle]]] = None
    ) -> None:
        self.__particles: Dict[str, Particle] = dict()
        if particles is not None:
            self.update(particles)

    def __getitem__(self, name: str) -> Particle:
        key = _to_key(name)
        if key in self.__particles:
            return self.__particles[key]
        error_message = f'No particle with name "{name}" in the catalogue'
        candidates = get_close_matches(key, self.__particles, n=5, cutoff=0.6)
        if candidates:
            raise KeyError(
                error_message, "Did you mean one of these?", candidates
            )
        raise KeyError(error_message)

    def __setitem__(self, name: str, particle: Particle) -> None:
        if not isinstance(particle, Particle):
            raise TypeError(
                f"Cannot add a {particle.__class__.__name__} to a"
                f" {self.__class__.__name__}"
            )
        key = _to_key(name)
        if key in self.__particles:
            _LOGGER.warning(f'Overwriting particle with name "{key}"')
        self.__particles[key] = particle

    def __delitem__(self, name: str) -> None:
        del self.__particles[_to_key(name)]

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            return _to_key(name) in self.__particles
        if isinstance(name, Particle):
            return any(name is p for p in self.__particles.values())
        return False

    def __iter__(self) -> Iterator[str]:
        return iter(self.__particles)

    def __len__(self) -> int:
        return len(self.__particles)

    def __repr__(self) -> str:
        names = ", ".join(repr(key) for key in self.__particles)
        return f"{self.__class__.__name__}({{{names}}})"

    @property
    def names(self) -> Set[str]:
        return set(self.__particles)

    def filter(  # noqa: A003
        self, function: Callable[[Particle], bool]
    ) -> "ParticleCatalogue":
        """Search by `.Particle` properties using a :code:`lambda` function.

        >>> catalogue = create_standard_model_catalogue()
        >>> subset = catalogue.filter(lambda p: p.mass > 90_000)
        >>> sorted(subset)
        ['anti-topquark', 'higgs boson', 'topquark', 'zboson']
        """
        return ParticleCatalogue(
            (key, particle)
            for key, particle in self.items()
            if function(particle)
        )

    def select(self, category: ParticleCategory) -> List[Particle]:
        return [p for p in self.values() if p.category is category]

    def count(self, category: ParticleCategory) -> int:
        return sum(1 for p in self.values() if p.category is category)

    def total_four_momentum(self) -> FourMomentum:
        return sum_four_momenta(p.four_momentum for p in self.values())


def create_standard_model_catalogue(
    rng: Optional[np.random.Generator] = None,
) -> ParticleCatalogue:
    """Create a catalogue of all standard-model particles, at rest.

    Contains the leptons, quarks and their antiparticles, and the bosons with
    the anti-W boson and an anti-gluon. The Z boson, Higgs boson and photon are
    their own antiparticles and have no separate entry. The random electron
    calorimeter splits and tau decay modes are drawn from ``rng``.
    """
    if rng is None:
        rng = np.random.default_rng()
    catalogue = ParticleCatalogue()
    for is_antiparticle in (False, True):
        prefix = "anti-" if is_antiparticle else ""
        catalogue[f"{prefix}electron"] = create_electron(
            is_antiparticle=is_antiparticle, rng=rng
        )
        catalogue[f"{prefix}muon"] = create_muon(
            is_antiparticle=is_antiparticle
        )
        catalogue[f"{prefix}tau"] = create_tau(
            is_antiparticle=is_antiparticle, rng=rng
        )
        for flavour in NeutrinoFlavour:
            catalogue[
                f"{prefix}{flavour.value} neutrino"
            ] = create_neutrino(flavour, is_antiparticle=is_antiparticle)
    for is_antiparticle in (False, True):
        prefix = "anti-" if is_antiparticle else ""
        for quark_type, colour in _QUARK_COLOURS.items():
            if is_antiparticle:
                colour = colour.conjugate()
            catalogue[f"{prefix}{quark_type.value}"] = create_quark(
                quark_type, colour, is_antiparticle=is_antiparticle
            )
    catalogue["photon"] = create_photon()
    catalogue["wboson"] = create_w_boson()
    catalogue["zboson"] = create_z_boson()
    catalogue["gluon"] = create_gluon(ColourCharge.RED, ColourCharge.ANTI_RED)
    catalogue["higgs boson"] = create_higgs_boson()
    catalogue["anti-wboson"] = create_w_boson(is_antiparticle=True)
    catalogue["anti-gluon"] = create_gluon(
        ColourCharge.ANTI_RED, ColourCharge.RED
    )
    return catalogue


_QUARK_COLOURS = {
    QuarkType.UP: ColourCharge.RED,
    QuarkType.DOWN: ColourCharge.BLUE,
    QuarkType.STRANGE: ColourCharge.GREEN,
    QuarkType.CHARM: ColourCharge.RED,
    QuarkType.TOP: ColourCharge.BLUE,
    QuarkType.BOTTOM: ColourCharge.GREEN,
}
