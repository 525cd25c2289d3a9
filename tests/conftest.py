"""
Pytest configuration and shared fixtures for msgdigest tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used digest fixtures
3. Configures pytest markers and isolates the default config
"""

import random
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from msgdigest.config.runtime import set_default_config  # noqa: E402


_CONFIG_ENV_VARS = (
    "MSGDIGEST_HASH_ALGORITHM",
    "MSGDIGEST_LOG_LEVEL",
    "MSGDIGEST_LOG_FILE",
)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Start every test from a clean environment and default config."""
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


@pytest.fixture
def zero_digest() -> bytes:
    """32 zero bytes."""
    return bytes(32)


@pytest.fixture
def counting_digest() -> bytes:
    """Bytes 0x01 through 0x20."""
    return bytes(range(1, 33))


@pytest.fixture
def random_digests() -> list[bytes]:
    """A seeded sample of 32-byte values, with duplicates and shared prefixes."""
    rng = random.Random(1337)
    samples = [bytes(rng.getrandbits(8) for _ in range(32)) for _ in range(40)]
    samples.append(samples[0])
    samples.append(samples[1][:31] + bytes([(samples[1][31] + 1) % 256]))
    samples.append(bytes(32))
    samples.append(b"\xff" * 32)
    return samples


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
