"""Command-line interface for browsing the standard-model catalogue."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import numpy as np

from smparticles._render import render_four_momentum
from smparticles.catalogue import (
    ParticleCatalogue,
    create_standard_model_catalogue,
)
from smparticles.quantum_numbers import ParticleCategory

_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

QUIT_COMMAND = "quit"


def _colourise(text: str, colour: str, stream: TextIO) -> str:
    is_terminal = getattr(stream, "isatty", lambda: False)()
    if not is_terminal:
        return text
    return f"{colour}{text}{_RESET}"


def print_summary(catalogue: ParticleCatalogue, stream: TextIO) -> None:
    lines = [
        "Particle Information Catalogue",
        "",
        f"Contains: {len(catalogue)} particles.",
        "Number of each particle type:",
    ]
    for category in ParticleCategory:
        lines.append(f"{category.value}s: {catalogue.count(category)}")
    total = render_four_momentum(catalogue.total_four_momentum())
    lines.append(f"Total four-momentum of all particles: {total}")
    print(_colourise("\n".join(lines), _GREEN, stream), file=stream)


def print_particle(
    catalogue: ParticleCatalogue, name: str, stream: TextIO
) -> bool:
    """Print the info line of a particle, or a message if it is unknown."""
    try:
        particle = catalogue[name]
    except KeyError as exception:
        message = "Particle not found."
        if len(exception.args) > 2:
            message += f" Did you mean: {', '.join(exception.args[2])}?"
        print(_colourise(message, _GREEN, stream), file=stream)
        return False
    print(_colourise(particle.info, _GREEN, stream), file=stream)
    return True


def run_loop(
    catalogue: ParticleCatalogue,
    input_stream: TextIO = sys.stdin,
    output_stream: TextIO = sys.stdout,
) -> None:
    """Look up particles by name until the user enters :code:`quit`."""
    prompt = (
        "Enter a particle name to get its information"
        f" or '{QUIT_COMMAND}' to exit: "
    )
    while True:
        print(
            _colourise(prompt, _YELLOW, output_stream),
            end="",
            file=output_stream,
        )
        output_stream.flush()
        line = input_stream.readline()
        if not line:
            break
        name = line.strip()
        if name.lower() == QUIT_COMMAND:
            break
        if not name:
            continue
        print_particle(catalogue, name, output_stream)
    message = _colourise("Exiting Particle Catalogue.", _GREEN, output_stream)
    print(message, file=output_stream)


def main(args: Optional[List[str]] = None) -> int:
    """Run the particle catalogue browser.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code: 0 for success, 1 if a requested particle was not found.
    """
    parser = argparse.ArgumentParser(
        prog="smparticles",
        description="Browse the particles of the standard model",
    )
    parser.add_argument(
        "names",
        nargs="*",
        metavar="NAME",
        help="Particles to look up. Starts an interactive loop if omitted.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for calorimeter splits and tau decay modes",
    )
    parser.add_argument(
        "--no-list",
        action="store_true",
        help="Do not print the summary and all particles first",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING
    )
    catalogue = create_standard_model_catalogue(
        rng=np.random.default_rng(parsed.seed)
    )
    stream = sys.stdout
    if not parsed.no_list:
        print_summary(catalogue, stream)
        print("\nAll particle information:\n", file=stream)
        for particle in catalogue.values():
            print(particle.info, file=stream)
        print(file=stream)

    if not parsed.names:
        run_loop(catalogue, sys.stdin, stream)
        return 0
    found = [print_particle(catalogue, n, stream) for n in parsed.names]
    return 0 if all(found) else 1


if __name__ == "__main__":
    sys.exit(main())
