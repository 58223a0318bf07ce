# pylint: disable=no-self-use
import logging

import numpy as np
import pytest

from smparticles.exceptions import FourMomentumError, ValidationError
from smparticles.momentum import FourMomentum, sum_four_momenta


class TestFourMomentum:
    @staticmethod
    def test_defaults():
        momentum = FourMomentum()
        assert list(momentum) == [0.0, 0.0, 0.0, 0.0]
        assert momentum.rest_mass is None
        assert momentum.invariant_mass() == 0.0
        assert momentum.validate()

    @pytest.mark.parametrize("seed", range(10))
    def test_invariant_mass(self, seed: int):
        rng = np.random.default_rng(seed)
        three_momentum = rng.uniform(-100, 100, size=3)
        mass = rng.uniform(0, 100)
        energy = np.sqrt(mass ** 2 + three_momentum @ three_momentum)
        momentum = FourMomentum(energy, *three_momentum)
        expected = np.sqrt(energy ** 2 - three_momentum @ three_momentum)
        assert momentum.invariant_mass() == pytest.approx(expected, abs=1e-9)

    @staticmethod
    def test_space_like_vector_is_clamped():
        momentum = FourMomentum(1.0, 2.0, 0.0, 0.0)
        assert momentum.invariant_mass() == 0.0

    @staticmethod
    def test_validate_is_advisory(caplog):
        momentum = FourMomentum(-1.0)
        with caplog.at_level(logging.WARNING):
            assert not momentum.validate()
        assert "energy cannot be negative" in caplog.text

        momentum = FourMomentum(10.0, rest_mass=5.0)
        caplog.clear()
        with caplog.at_level(logging.WARNING):
            assert not momentum.validate()
        assert "differs from rest mass" in caplog.text
        assert momentum.validate(tolerance=10.0)

    @staticmethod
    def test_negative_rest_mass():
        with pytest.raises(FourMomentumError):
            FourMomentum(rest_mass=-1.0)

    @pytest.mark.parametrize("component", ["energy", "px", "py", "pz"])
    def test_setter_rolls_back(self, component: str):
        momentum = FourMomentum(0.511, rest_mass=0.511)
        with pytest.raises(FourMomentumError):
            setattr(momentum, component, -30.0)
        assert momentum == FourMomentum(0.511)
        assert momentum.rest_mass == 0.511

    @staticmethod
    def test_update():
        momentum = FourMomentum(5.0, rest_mass=5.0)
        momentum.update(energy=5.0, px=0.0)
        momentum.update(energy=13.0, pz=12.0)
        assert list(momentum) == [13.0, 0.0, 0.0, 12.0]
        with pytest.raises(ValidationError):
            momentum.update(pz=3.0)
        assert list(momentum) == [13.0, 0.0, 0.0, 12.0]
        with pytest.raises(TypeError):
            momentum.update(mass=3.0)

    @staticmethod
    def test_setter_without_rest_mass():
        momentum = FourMomentum(1.0)
        momentum.px = 30.0
        assert momentum.px == 30.0
        with pytest.raises(FourMomentumError):
            momentum.energy = -1.0
        assert momentum.energy == 1.0

    @staticmethod
    def test_arithmetic():
        first = FourMomentum(10.0, 1.0, 2.0, 3.0, rest_mass=1.0)
        second = FourMomentum(5.0, -1.0, 0.0, 1.0)
        total = first + second
        assert list(total) == [15.0, 0.0, 2.0, 4.0]
        assert total.rest_mass is None
        assert list(first - second) == [5.0, 2.0, 2.0, 2.0]
        assert first.dot(second) == 10.0 * 5.0 - (-1.0 + 0.0 + 3.0)

    @staticmethod
    def test_sum_four_momenta():
        assert sum_four_momenta([]) == FourMomentum()
        momenta = [FourMomentum(1.0, 1.0), FourMomentum(2.0, pz=-1.0)]
        assert sum_four_momenta(momenta) == FourMomentum(3.0, 1.0, 0.0, -1.0)

    @staticmethod
    def test_copy():
        momentum = FourMomentum(2.0, 1.0, rest_mass=3.0 ** 0.5)
        copy = momentum.copy()
        assert copy == momentum
        assert copy is not momentum
        assert copy.rest_mass == momentum.rest_mass
        copy.update(energy=3.25 ** 0.5, px=0.5)
        assert momentum.px == 1.0

    @staticmethod
    def test_negative_zero_is_normalised():
        momentum = FourMomentum(1.0, -0.0)
        assert str(momentum.px) == "0.0"
        assert repr(momentum) == (
            "FourMomentum(energy=1.0, px=0.0, py=0.0, pz=0.0)"
        )


class TestNonFiniteComponents:
    @pytest.mark.parametrize(
        "components",
        [
            {"energy": float("nan")},
            {"px": float("nan")},
            {"energy": float("inf"), "pz": float("inf")},
            {"energy": float("inf")},
        ],
        ids=repr,
    )
    def test_update_rejects(self, components):
        momentum = FourMomentum(10.0, pz=10.0, rest_mass=0.0)
        with pytest.raises(FourMomentumError):
            momentum.update(**components)
        assert list(momentum) == [10.0, 0.0, 0.0, 10.0]

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_setter_rejects(self, value: float):
        momentum = FourMomentum(10.0, pz=10.0, rest_mass=0.0)
        with pytest.raises(FourMomentumError):
            momentum.energy = value
        assert momentum.energy == 10.0
        free_momentum = FourMomentum(1.0)
        with pytest.raises(FourMomentumError):
            free_momentum.px = value
        assert free_momentum.px == 0.0

    @staticmethod
    def test_validate(caplog):
        with caplog.at_level(logging.WARNING):
            assert not FourMomentum(float("nan"), rest_mass=0.0).validate()
        assert "components have to be finite" in caplog.text
        assert not FourMomentum(float("inf"), float("inf")).validate()

    @pytest.mark.parametrize("rest_mass", [float("nan"), float("inf")])
    def test_rest_mass(self, rest_mass: float):
        with pytest.raises(FourMomentumError):
            FourMomentum(rest_mass=rest_mass)
