"""Configuration utilities for calconv.

Settings come from environment variables and are read into an immutable
``Settings`` value; nothing is cached, so tests can patch ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import FrozenSet, Mapping, Optional

from .core.errors import ConfigError

LANG_ENV = "CALCONV_LANG"
FORMAT_ENV = "CALCONV_FORMAT"
FEATURES_ENV = "CALCONV_FEATURES"

LANGUAGES = ("en", "fr")
OPTIONAL_FEATURES = frozenset({"display", "extra-calendars"})

DEFAULT_LANG = "en"
DEFAULT_FORMAT = "iso"


@dataclass(frozen=True)
class Settings:
    lang: str = DEFAULT_LANG
    default_format: str = DEFAULT_FORMAT
    features: FrozenSet[str] = OPTIONAL_FEATURES

    def has_feature(self, name: str) -> bool:
        return name in self.features


def _parse_features(raw: str) -> FrozenSet[str]:
    names = frozenset(x.strip() for x in raw.split(",") if x.strip())
    unknown = names - OPTIONAL_FEATURES
    if unknown:
        raise ConfigError(
            f"{FEATURES_ENV} has unknown feature(s) {sorted(unknown)}. Available: {sorted(OPTIONAL_FEATURES)}"
        )
    return names


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment.

    Args:
        environ: Mapping to read instead of ``os.environ``.

    Returns:
        Settings: the parsed configuration. Unset variables keep their defaults;
        ``CALCONV_FEATURES`` set to an empty string disables every optional feature.

    Raises:
        ConfigError: If a variable holds an unsupported value.
    """
    env = os.environ if environ is None else environ

    lang = env.get(LANG_ENV) or DEFAULT_LANG
    if lang not in LANGUAGES:
        raise ConfigError(f"{LANG_ENV}={lang!r} is not supported. Available: {list(LANGUAGES)}")

    default_format = env.get(FORMAT_ENV) or DEFAULT_FORMAT

    raw_features = env.get(FEATURES_ENV)
    features = OPTIONAL_FEATURES if raw_features is None else _parse_features(raw_features)

    return Settings(lang=lang, default_format=default_format, features=features)
