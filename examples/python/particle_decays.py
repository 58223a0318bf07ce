r"""Sample script for the testing purposes.

Lets a moving :math:`Z` boson decay into a muon pair, then assigns the common
decays of taus, :math:`W`, :math:`Z` and Higgs bosons and shows what happens
with decays and four-momenta that violate the conservation laws.
"""

import logging

import numpy as np

from smparticles.exceptions import DecayError
from smparticles.momentum import FourMomentum, sum_four_momenta
from smparticles.particle import (
    create_electron,
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
    QuarkType,
    TauDecayMode,
)
from smparticles.settings import DecayFailurePolicy

logging.basicConfig(level=logging.INFO)

rng = np.random.default_rng(seed=1)


def show_decay(description, parent, products, policy=None):
    try:
        parent.set_decay_products(products, policy)
    except DecayError as error:
        print(f"\n{description} is rejected: {error}")
        return
    print(f"\n{description}:")
    print(parent.info)


# Z boson with 30 GeV momentum along the beam axis
z_mass = 91190.0
z_momentum = FourMomentum(np.hypot(z_mass, 30000.0), pz=30000.0)
z_boson = create_z_boson(z_momentum)
print(z_boson.info)

# back-to-back muons in the Z rest frame, boosted along z
muon_mass = 105.66
gamma = z_momentum.energy / z_mass
beta = z_momentum.pz / z_momentum.energy
energy = z_mass / 2
momentum = np.sqrt(energy ** 2 - muon_mass ** 2)
muons = []
for sign in (+1, -1):
    muon_momentum = FourMomentum(
        gamma * (energy + beta * sign * momentum),
        pz=gamma * (sign * momentum + beta * energy),
    )
    muons.append(create_muon(muon_momentum, is_antiparticle=sign < 0))

show_decay("Moving Z boson decaying into a muon pair", z_boson, muons)
print("Sum of muon momenta:", sum_four_momenta(p.four_momentum for p in muons))

show_decay(
    "Z boson decaying into two muons",
    z_boson,
    [create_muon(), create_muon()],
)
accepted = z_boson.set_decay_products(
    [create_muon(), create_muon()], policy=DecayFailurePolicy.LOG
)
print("Accepted under the LOG policy:", accepted)

for _ in range(3):
    print(create_tau(rng=rng).info)

show_decay(
    "Tau decaying into an electron, an electron anti-neutrino and a tau"
    " neutrino",
    create_tau(decay_mode=TauDecayMode.HADRONIC),
    [
        create_electron(rng=rng),
        create_neutrino(NeutrinoFlavour.ELECTRON, is_antiparticle=True),
        create_neutrino(NeutrinoFlavour.TAU),
    ],
)
show_decay(
    "Tau decaying into two quarks and a tau neutrino",
    create_tau(decay_mode=TauDecayMode.LEPTONIC),
    [
        create_quark(
            QuarkType.UP, ColourCharge.ANTI_RED, is_antiparticle=True
        ),
        create_quark(QuarkType.DOWN, ColourCharge.BLUE),
        create_neutrino(NeutrinoFlavour.TAU),
    ],
)
show_decay(
    "W boson decaying into a quark and an anti-quark",
    create_w_boson(),
    [
        create_quark(QuarkType.UP, ColourCharge.RED),
        create_quark(
            QuarkType.DOWN, ColourCharge.BLUE, is_antiparticle=True
        ),
    ],
)
show_decay(
    "W boson decaying into a lepton and a neutrino",
    create_w_boson(),
    [
        create_electron(is_antiparticle=True, rng=rng),
        create_neutrino(NeutrinoFlavour.ELECTRON),
    ],
)
show_decay(
    "Z boson decaying into a quark and an anti-quark",
    create_z_boson(),
    [
        create_quark(QuarkType.UP, ColourCharge.RED),
        create_quark(
            QuarkType.UP, ColourCharge.ANTI_RED, is_antiparticle=True
        ),
    ],
)
show_decay(
    "Z boson decaying into a lepton and an anti-lepton",
    create_z_boson(),
    [
        create_electron(rng=rng),
        create_electron(is_antiparticle=True, rng=rng),
    ],
)
show_decay(
    "Higgs boson decaying into two Z bosons",
    create_higgs_boson(),
    [create_z_boson(), create_z_boson()],
)
show_decay(
    "Higgs boson decaying into two W bosons of opposite charge",
    create_higgs_boson(),
    [create_w_boson(), create_w_boson(is_antiparticle=True)],
)
show_decay(
    "Higgs boson decaying into two photons",
    create_higgs_boson(),
    [create_photon(), create_photon()],
)
show_decay(
    "Higgs boson decaying into a b quark and a b anti-quark",
    create_higgs_boson(),
    [
        create_quark(QuarkType.BOTTOM, ColourCharge.GREEN),
        create_quark(
            QuarkType.BOTTOM, ColourCharge.ANTI_GREEN, is_antiparticle=True
        ),
    ],
)

# a tau cannot decay into a single particle
show_decay(
    "Tau decaying into a single muon anti-neutrino",
    create_tau(rng=rng),
    [
        create_neutrino(
            NeutrinoFlavour.MUON,
            is_antiparticle=True,
            interacts_with_detector=True,
        )
    ],
    policy=DecayFailurePolicy.RAISE,
)

# an electron at rest cannot have 50 MeV energy
electron = create_electron(FourMomentum(50.0), rng=rng)
if electron.four_momentum.validate():
    print("\nFour-momentum is valid.")
else:
    print("\nFour-momentum is invalid.")

print((-electron).info)
