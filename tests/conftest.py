"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_gm1.controllers import InMemoryChannelState
from chuk_mcp_gm1.models import AudioQuality, QualityMetrics


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in report library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_gm1" / "reports" / "library"


@pytest.fixture
def channel_state() -> InMemoryChannelState:
    """Fresh in-memory channel state."""
    return InMemoryChannelState()


@pytest.fixture
def good_metrics() -> QualityMetrics:
    """Metrics for a program that meets every GM1 standard."""
    return QualityMetrics(
        program=1,
        recognition_score=0.9,
        controller_response=True,
        velocity_sensitive=True,
        frequency_accuracy=2.0,
    )


@pytest.fixture
def recommended_quality() -> AudioQuality:
    """Audio specification at the recommended tier."""
    return AudioQuality(
        sample_rate_hz=44100,
        bit_depth=16,
        frequency_response_min_hz=20.0,
        frequency_response_max_hz=20000.0,
        dynamic_range_db=96.0,
        polyphony_voices=64,
    )


@pytest.fixture
def minimum_quality() -> AudioQuality:
    """Audio specification exactly at the minimum tier."""
    return AudioQuality(
        sample_rate_hz=22050,
        bit_depth=8,
        frequency_response_min_hz=20.0,
        frequency_response_max_hz=11000.0,
        dynamic_range_db=48.0,
        polyphony_voices=24,
    )
