# pylint: disable=no-self-use
import logging

import pytest

from smparticles.conservation_rules import (
    BaryonNumberConservation,
    ChargeConservation,
    LeptonNumberConservation,
    check_charge_conservation,
)
from smparticles.particle import (
    create_electron,
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


def _up_quark(is_antiparticle: bool = False):
    return create_quark(
        QuarkType.UP, ColourCharge.RED, is_antiparticle=is_antiparticle
    )


def _down_quark(is_antiparticle: bool = False):
    return create_quark(
        QuarkType.DOWN, ColourCharge.BLUE, is_antiparticle=is_antiparticle
    )


class TestChargeConservation:
    @staticmethod
    def test_fractional_charges():
        w_boson = create_w_boson()
        assert check_charge_conservation(
            w_boson, [_up_quark(), _down_quark(is_antiparticle=True)]
        )

    @staticmethod
    def test_violation_is_logged(caplog):
        z_boson = create_z_boson()
        products = [create_electron(), create_electron()]
        with caplog.at_level(logging.WARNING):
            assert not check_charge_conservation(z_boson, products)
        assert "Charge conservation violated" in caplog.text

    @staticmethod
    def test_empty_products():
        assert ChargeConservation()(create_photon(), [])
        assert not ChargeConservation()(create_electron(), [])

    @staticmethod
    def test_docstring():
        assert ChargeConservation.__doc__ is not None
        assert ":code:`charge`" in ChargeConservation.__doc__


class TestLeptonNumberConservation:
    @staticmethod
    def test_leptonic_tau_decay():
        tau = create_tau(decay_mode=TauDecayMode.LEPTONIC)
        products = [
            create_muon(),
            create_neutrino(NeutrinoFlavour.MUON, is_antiparticle=True),
            create_neutrino(NeutrinoFlavour.TAU),
        ]
        assert LeptonNumberConservation()(tau, products)

    @staticmethod
    def test_violation():
        tau = create_tau(decay_mode=TauDecayMode.LEPTONIC)
        products = [
            create_electron(),
            create_neutrino(NeutrinoFlavour.ELECTRON),
            create_neutrino(NeutrinoFlavour.TAU),
        ]
        assert not LeptonNumberConservation()(tau, products)

    @staticmethod
    def test_quarks_do_not_contribute():
        tau = create_tau(decay_mode=TauDecayMode.HADRONIC)
        products = [
            _up_quark(is_antiparticle=True),
            _down_quark(),
            create_neutrino(NeutrinoFlavour.TAU),
        ]
        assert LeptonNumberConservation()(tau, products)


class TestBaryonNumberConservation:
    @staticmethod
    def test_quark_antiquark_pair():
        tau = create_tau(decay_mode=TauDecayMode.HADRONIC)
        products = [
            _up_quark(is_antiparticle=True),
            _down_quark(),
            create_neutrino(NeutrinoFlavour.TAU),
        ]
        assert BaryonNumberConservation()(tau, products)

    @staticmethod
    def test_violation(caplog):
        tau = create_tau(decay_mode=TauDecayMode.HADRONIC)
        products = [
            _up_quark(),
            _up_quark(),
            create_neutrino(NeutrinoFlavour.TAU),
        ]
        with caplog.at_level(logging.WARNING):
            assert not BaryonNumberConservation()(tau, products)
        assert "Baryon number conservation violated" in caplog.text


@pytest.mark.parametrize(
    "rule",
    [
        ChargeConservation(),
        LeptonNumberConservation(),
        BaryonNumberConservation(),
    ],
)
def test_rules_never_raise(rule):
    assert isinstance(rule(create_photon(), [create_muon()]), bool)
