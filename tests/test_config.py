# tests/test_config.py

import pytest

from calconv.config import DEFAULT_FORMAT, DEFAULT_LANG, OPTIONAL_FEATURES, Settings, load_settings
from calconv.core.errors import ConfigError


def test_defaults():
    s = load_settings({})
    assert s == Settings()
    assert s.lang == DEFAULT_LANG
    assert s.default_format == DEFAULT_FORMAT
    assert s.features == OPTIONAL_FEATURES


def test_values_are_read():
    s = load_settings({"CALCONV_LANG": "fr", "CALCONV_FORMAT": "long", "CALCONV_FEATURES": " display , "})
    assert s.lang == "fr"
    assert s.default_format == "long"
    assert s.has_feature("display")
    assert not s.has_feature("extra-calendars")


def test_empty_features_is_the_reduced_configuration():
    s = load_settings({"CALCONV_FEATURES": ""})
    assert s.features == frozenset()


def test_empty_strings_keep_defaults():
    s = load_settings({"CALCONV_LANG": "", "CALCONV_FORMAT": ""})
    assert s.lang == DEFAULT_LANG
    assert s.default_format == DEFAULT_FORMAT


@pytest.mark.parametrize(
    "env",
    [{"CALCONV_LANG": "de"}, {"CALCONV_FEATURES": "display,colour"}],
)
def test_bad_values(env):
    with pytest.raises(ConfigError):
        load_settings(env)
