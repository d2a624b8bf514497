"""Configuration model and loaders for naconorm.

Responsibilities:
- Define normalizer configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `NormalizerConfig`: resolved settings for one normalizer.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string
from .text.normalizer import DEFAULT_CASE, CaseMode, NacoNormalizer, resolve_case_mode


CASE_ENV_KEY = "NACONORM_CASE"


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Settings for building a `NacoNormalizer`.

    Attributes:
        case: Output case mode; anything other than `lower` resolves to `upper`.
    """

    case: CaseMode = DEFAULT_CASE

    def build_normalizer(self) -> NacoNormalizer:
        """Return a normalizer configured with these settings."""

        return NacoNormalizer(case=self.case)


class ConfigLoader:
    """Factory methods for creating `NormalizerConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"case"})

    @staticmethod
    def from_yaml(path: Path) -> NormalizerConfig:
        """Create a config from a YAML file."""

        return NormalizerConfig(case=resolve_case_mode(ConfigLoader.case_from_yaml(path)))

    @staticmethod
    def case_from_yaml(path: Path) -> str | None:
        """Return the trimmed `case` value of a YAML file, or `None` when unset."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        ConfigLoader._validate_yaml_keys(payload, source_label=f"YAML `{path}`")
        return normalize_optional_string(payload.get("case"))

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizerConfig:
        """Create a config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        case = normalize_optional_string(env_map.get(CASE_ENV_KEY))
        return NormalizerConfig(case=resolve_case_mode(case))

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys other than the supported `case` setting."""

        unknown_keys = sorted(
            str(key) for key in payload if key not in ConfigLoader._SUPPORTED_YAML_KEYS
        )
        if unknown_keys:
            raise ValueError(
                f"{source_label} contains unsupported key(s): {', '.join(unknown_keys)}."
            )


def resolve_config(
    case: str | None = None,
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> NormalizerConfig:
    """Resolve effective config: explicit case, then YAML file, then environment.

    A YAML file without a `case` value defers to the environment.
    """

    if case is not None:
        return NormalizerConfig(case=resolve_case_mode(case))
    if config_path is not None:
        file_case = ConfigLoader.case_from_yaml(config_path)
        if file_case is not None:
            return NormalizerConfig(case=resolve_case_mode(file_case))
    return ConfigLoader.from_env(env)
