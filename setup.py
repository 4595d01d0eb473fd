from __future__ import annotations

import os

from setuptools import find_packages, setup


def read_version() -> str:
    """Read the version, preferring the environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"


setup(
    name="bitfields",
    version=read_version(),
    description="Fixed-width bit fields stored as arrays of 32-bit words.",
    long_description="Fixed-width bit fields stored as arrays of 32-bit words.",
    long_description_content_type="text/plain",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
)
