"""
A setuptools based setup module.

See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
"""

import setuptools

PACKAGE_DATA = {
    "smparticles": ["static_properties.yml", "schemas/*.json"],
}

INSTALL_REQUIRES = [
    "attrs",
    "jsonschema",
    "numpy",
    "PyYAML",
]

EXTRAS_REQUIRE = {
    "test": ["pytest"],
}


def long_description():
    """Parse long description from readme."""
    with open("README.md", "r") as readme_file:
        return readme_file.read()


setuptools.setup(
    name="smparticles",
    version="0.1.0",
    author="The smparticles team",
    description="Standard-model particles, antiparticles and decay rules",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    license="GPLv3 or later",
    python_requires=">=3.8",
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    package_data=PACKAGE_DATA,
    include_package_data=True,
    entry_points={
        "console_scripts": ["smparticles=smparticles.cli:main"],
    },
)
