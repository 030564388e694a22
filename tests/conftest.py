"""Shared pytest fixtures for the emitkit test suite."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from emitkit import Emitter


@pytest.fixture
def failures():
    """Collect (event name, error) pairs handed to the failure reporter."""
    return []


@pytest.fixture
def emitter(failures):
    """Emitter whose failure reports are captured in ``failures``."""
    return Emitter(reporter=lambda name, error: failures.append((name, error)))
