"""Particles of the standard model and the laws that govern their decays.

The `smparticles` package consists of three layers:

  `smparticles.particle`
    ― the core: a `.Particle` for each variant of `.LeptonType`,
    `.QuarkType` and `.BosonType`, with its `.FourMomentum` and decay
    products. Decay products are checked with the rules of the
    :mod:`.conservation_rules` module.

  `smparticles.catalogue`
    ― a searchable `.ParticleCatalogue` with all particles of the standard
    model.

  `smparticles.cli`
    ― a command-line browser for the catalogue.

Default tolerances and the behaviour on invalid decays can be configured
through the `.settings` module.
"""


__all__ = [
    # Main modules
    "catalogue",
    "particle",
    "settings",
    # Facade classes and functions
    "FourMomentum",
    "Particle",
    "ParticleCatalogue",
    "create_standard_model_catalogue",
]


from . import catalogue, particle, settings
from .catalogue import ParticleCatalogue, create_standard_model_catalogue
from .momentum import FourMomentum
from .particle import Particle
