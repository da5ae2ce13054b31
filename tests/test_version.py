"""Tests for dbug._version — PEP 440 compliance and version parsing."""

import re

import dbug
from dbug._version import (
    BASE_VERSION,
    MAJOR, MINOR, PATCH, PHASE,
    PIP_VERSION,
    get_base_version,
    get_pip_version,
)


def test_base_version_format():
    """Base version should be MAJOR.MINOR.PATCH[-PHASE]."""
    assert re.match(r"^\d+\.\d+\.\d+(-\w+)?$", get_base_version())


def test_base_version_matches_components():
    """Base version should start with the MAJOR.MINOR.PATCH constants."""
    assert get_base_version().startswith(f"{MAJOR}.{MINOR}.{PATCH}")


def test_pip_version_pep440():
    """PIP version must be PEP 440 compliant (no hyphens)."""
    pip_ver = get_pip_version()
    assert "-" not in pip_ver
    assert re.match(r"^\d+\.\d+\.\d+", pip_ver)


def test_pip_version_no_phase():
    """When PHASE is None, PIP version is plain N.N.N."""
    if PHASE is None:
        assert re.match(r"^\d+\.\d+\.\d+$", get_pip_version())


def test_package_exports_version():
    """dbug.__version__ matches the base version."""
    assert dbug.__version__ == BASE_VERSION
    assert PIP_VERSION
