"""Shared fixtures."""

import pytest
import structlog

from pwcheck.config import get_settings
from pwcheck.validators import PolicyEvaluator

# Reference vectors from the original acceptance test set
REFERENCE_VECTORS = {
    "a": True,
    "tv": False,
    "ptoui": False,
    "bontres": False,
    "zoggax": False,
    "wiinq": False,
    "eep": True,
    "houctuh": True,
    "ei": True,
    "cd": False,
    "bcdfghjklmnpqrstvwxy": False,
    "ee": True,
    "oo": True,
    "jj": False,
    "aei": False,
    "vwx": False,
    "to": True,
    "in": True,
    "try": False,
    "ask": True,
    "bot": True,
    "abcodefgohijkolmonop": True,
    "jkloxoxoxoxoxoxoxoxo": False,
    "mamamamajklamamamama": False,
    "egegegegegegegegejkl": False,
    "aeiququququququququq": False,
    "orororaeirororororor": False,
    "zezezezezezezezezoua": False,
    "eeprop": True,
    "peerop": True,
    "propee": True,
    "ooplant": True,
    "poolant": True,
    "plantoo": True,
    "ssuper": False,
    "supper": False,
    "superr": False,
    "aarmada": False,
    "armaada": False,
    "armadaa": False,
    "banana": True,
    "rhythm": False,
    "breakneck": True,
}


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def evaluator():
    return PolicyEvaluator()
