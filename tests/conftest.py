# tests/conftest.py

import pytest

from calconv.config import load_settings


def requires_feature(name):
    """Skip a test when CALCONV_FEATURES disables ``name``."""
    enabled = load_settings().has_feature(name)
    return pytest.mark.skipif(not enabled, reason=f"feature '{name}' disabled")
