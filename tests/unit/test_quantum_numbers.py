# pylint: disable=no-self-use
from fractions import Fraction

import pytest

from smparticles.quantum_numbers import (
    BosonType,
    ColourCharge,
    LeptonType,
    NeutrinoFlavour,
    ParticleCategory,
    QuarkType,
    _to_fraction,
    get_category,
    parse_charge,
)


@pytest.mark.parametrize(
    "variant, category",
    [
        (LeptonType.ELECTRON, ParticleCategory.LEPTON),
        (LeptonType.NEUTRINO, ParticleCategory.LEPTON),
        (QuarkType.TOP, ParticleCategory.QUARK),
        (BosonType.GLUON, ParticleCategory.BOSON),
    ],
)
def test_get_category(variant, category):
    assert get_category(variant) is category


def test_get_category_unknown_variant():
    with pytest.raises(NotImplementedError):
        get_category(NeutrinoFlavour.TAU)  # type: ignore


@pytest.mark.parametrize(
    "value, expected",
    [
        ("-1", Fraction(-1)),
        ("+2/3", Fraction(2, 3)),
        ("-1/3", Fraction(-1, 3)),
        ("0", Fraction(0)),
        (1, Fraction(1)),
        (Fraction(1, 3), Fraction(1, 3)),
    ],
)
def test_parse_charge(value, expected):
    assert parse_charge(value) == expected


def test_parse_charge_errors():
    with pytest.raises(TypeError):
        parse_charge(0.5)  # type: ignore
    with pytest.raises(ValueError):
        parse_charge("two thirds")


@pytest.mark.parametrize(
    "value, render_plus, expected",
    [
        (Fraction(2, 3), True, "+2/3"),
        (Fraction(2, 3), False, "2/3"),
        (Fraction(-1), True, "-1"),
        (Fraction(0), True, "0"),
        (-0.5, True, "-1/2"),
    ],
)
def test_to_fraction(value, render_plus, expected):
    assert _to_fraction(value, render_plus) == expected


class TestColourCharge:
    @staticmethod
    def test_conjugate():
        assert ColourCharge.RED.conjugate() is ColourCharge.ANTI_RED
        assert ColourCharge.ANTI_GREEN.conjugate() is ColourCharge.GREEN
        assert ColourCharge.BLUE.conjugate() is ColourCharge.ANTI_BLUE

    @pytest.mark.parametrize("colour", list(ColourCharge))
    def test_conjugate_is_involution(self, colour: ColourCharge):
        assert colour.conjugate() is not colour
        assert colour.conjugate().conjugate() is colour
