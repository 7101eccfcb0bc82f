from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = [
    line.strip()
    for line in (BASE_DIR / "requirements_lib.txt").read_text().splitlines()
    if line.strip() and not line.startswith("#")
]

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": ["pytest"],
}

# ----------------------------------------------------------------------
setup(
    name="traduora-lib",
    version=version,
    description="Traduora client – typed REST bindings, blocking and asyncio",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="RadLab.dev Team",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=["traduora_lib*"],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
)
