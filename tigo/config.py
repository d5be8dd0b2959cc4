"""
Stemmer configuration.

Settings come from (lowest to highest priority) the defaults below, the
environment (TIGO_* variables) and command-line flags.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .rules import RuleVariant, get_rule_set
from .stemmer import DEFAULT_MIN_STEM_LENGTH, Stemmer

ENV_VARIANT = "TIGO_RULE_VARIANT"
ENV_MIN_STEM_LENGTH = "TIGO_MIN_STEM_LENGTH"
ENV_INCLUDE_HYPHENS = "TIGO_INCLUDE_HYPHENS"
ENV_WORKERS = "TIGO_WORKERS"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false), got '{value}'")


def _parse_int(name: str, value: str, minimum: int) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")
    if number < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {number}")
    return number


@dataclass(frozen=True)
class StemmerConfig:
    """How words are tokenized and stemmed."""

    variant: RuleVariant = RuleVariant.FULL
    min_stem_length: int = DEFAULT_MIN_STEM_LENGTH
    include_hyphens: bool = True
    workers: int = 1

    def __post_init__(self):
        if self.min_stem_length < 1:
            raise ValueError(f"min_stem_length must be at least 1, got {self.min_stem_length}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StemmerConfig":
        """Build a config from TIGO_* environment variables."""
        environ = os.environ if environ is None else environ
        config = cls()

        if environ.get(ENV_VARIANT):
            config = replace(config, variant=RuleVariant.from_name(environ[ENV_VARIANT]))
        if environ.get(ENV_MIN_STEM_LENGTH):
            config = replace(config, min_stem_length=_parse_int(
                ENV_MIN_STEM_LENGTH, environ[ENV_MIN_STEM_LENGTH], 1))
        if environ.get(ENV_INCLUDE_HYPHENS):
            config = replace(config, include_hyphens=_parse_bool(
                ENV_INCLUDE_HYPHENS, environ[ENV_INCLUDE_HYPHENS]))
        if environ.get(ENV_WORKERS):
            config = replace(config, workers=_parse_int(ENV_WORKERS, environ[ENV_WORKERS], 1))

        return config

    def override(self, **changes) -> "StemmerConfig":
        """Return a copy with every non-None value in ``changes`` applied."""
        changes = {key: value for key, value in changes.items() if value is not None}
        if isinstance(changes.get("variant"), str):
            changes["variant"] = RuleVariant.from_name(changes["variant"])
        return replace(self, **changes)

    def build_stemmer(self) -> Stemmer:
        return Stemmer(get_rule_set(self.variant), min_stem_length=self.min_stem_length)
