"""Conversion of particle data to display strings.

Numbers are rendered with up to six significant digits, charges as signed
fractions (:code:`"+2/3"`, :code:`"-1"`, :code:`"0"`).
"""

from fractions import Fraction
from typing import TYPE_CHECKING, Iterable, List, Tuple

from smparticles.quantum_numbers import _to_fraction

if TYPE_CHECKING:
    from smparticles.momentum import FourMomentum
    from smparticles.particle import Particle


def render_number(value: float) -> str:
    if value == 0:
        value = 0.0
    return f"{value:g}"


def render_charge(charge: Fraction) -> str:
    return _to_fraction(charge, render_plus=True)


def render_four_momentum(momentum: "FourMomentum") -> str:
    return (
        f"(E={render_number(momentum.energy)},"
        f" Px={render_number(momentum.px)},"
        f" Py={render_number(momentum.py)},"
        f" Pz={render_number(momentum.pz)})"
    )


def render_list(values: Iterable[float]) -> str:
    return "[" + ", ".join(render_number(value) for value in values) + "]"


def render_info(particle: "Particle") -> str:
    """Render a particle as comma-separated :code:`Key=Value` pairs."""
    items: List[Tuple[str, str]] = [
        ("Name", particle.name),
        ("Type", particle.category.value),
        ("Mass", particle.mass_label),
        ("Charge", particle.charge_label),
        ("Spin", particle.spin_label),
        ("FourMomentum", render_four_momentum(particle.four_momentum)),
    ]
    items.extend(particle.info_items())
    if particle.has_decay_products:
        names = ", ".join(p.name for p in particle.decay_products)
        items.append(("Decay Particles", names))
    return ", ".join(f"{key}={value}" for key, value in items)
