# pylint: disable=redefined-outer-name
import logging

import numpy as np
import pytest

from smparticles.catalogue import (
    ParticleCatalogue,
    create_standard_model_catalogue,
)
from smparticles.quantum_numbers import BosonType, LeptonType
from smparticles.settings import set_decay_failure_policy

logging.getLogger().setLevel(level=logging.ERROR)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(seed=0)


@pytest.fixture(scope="session")
def catalogue() -> ParticleCatalogue:
    return create_standard_model_catalogue(rng=np.random.default_rng(seed=0))


@pytest.fixture(autouse=True)
def _reset_decay_failure_policies():
    yield
    for variant in (BosonType.W, BosonType.Z, BosonType.HIGGS):
        set_decay_failure_policy(variant, None)
    set_decay_failure_policy(LeptonType.TAU, None)
