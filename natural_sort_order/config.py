"""Configuration model and loaders for natural sort normalization.

Responsibilities:
- Define normalization limits as a typed dataclass instead of module literals.
- Apply the width clamp used by every normalization call.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `NormalizerConfig`: validated limits for one normalizer instance.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_permissive_boolean,
    parse_positive_int,
)


DEFAULT_WIDTH = 75
MAX_WIDTH = 150
OUTPUT_CAPACITY = 10000


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Tunable limits for one normalizer.

    Attributes:
        default_width: Width used when a requested width is out of range.
        max_width: Largest accepted requested width.
        output_capacity: Maximum normalized output length in bytes.
        strict: Raise instead of truncating when output exceeds capacity.
    """

    default_width: int = DEFAULT_WIDTH
    max_width: int = MAX_WIDTH
    output_capacity: int = OUTPUT_CAPACITY
    strict: bool = False

    def validate(self) -> None:
        """Validate limits before they are used by a normalizer."""

        self._require_positive(self.default_width, "default_width")
        self._require_positive(self.max_width, "max_width")
        self._require_positive(self.output_capacity, "output_capacity")
        if self.default_width > self.max_width:
            raise ValueError("`default_width` must not be greater than `max_width`.")

    def resolve_width(self, requested: int | None) -> int:
        """Return `requested` when it lies in `1..max_width`, else `default_width`."""

        if (
            requested is None
            or isinstance(requested, bool)
            or not isinstance(requested, int)
            or requested <= 0
            or requested > self.max_width
        ):
            return self.default_width
        return requested

    def as_display_rows(self) -> list[tuple[str, str]]:
        """Return deterministic key/value rows for CLI display."""

        return [
            ("default_width", str(self.default_width)),
            ("max_width", str(self.max_width)),
            ("output_capacity", str(self.output_capacity)),
            ("strict", "true" if self.strict else "false"),
        ]

    @staticmethod
    def _require_positive(value: int, field_name: str) -> None:
        """Validate that a limit is a positive integer."""

        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"`{field_name}` must be a positive integer.")


class ConfigLoader:
    """Factory methods for creating `NormalizerConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"default_width", "max_width", "output_capacity", "strict"}
    )
    _ENV_KEYS = {
        "default_width": "NATURAL_SORT_DEFAULT_WIDTH",
        "max_width": "NATURAL_SORT_MAX_WIDTH",
        "output_capacity": "NATURAL_SORT_OUTPUT_CAPACITY",
        "strict": "NATURAL_SORT_STRICT",
    }

    @staticmethod
    def from_yaml(path: Path, base: NormalizerConfig | None = None) -> NormalizerConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep the values of `base` (defaults when omitted).
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", base=base
        )

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None, base: NormalizerConfig | None = None
    ) -> NormalizerConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        resolved = base if base is not None else NormalizerConfig()

        default_width = ConfigLoader._optional_env_positive_int(
            env_map, ConfigLoader._ENV_KEYS["default_width"]
        )
        max_width = ConfigLoader._optional_env_positive_int(
            env_map, ConfigLoader._ENV_KEYS["max_width"]
        )
        output_capacity = ConfigLoader._optional_env_positive_int(
            env_map, ConfigLoader._ENV_KEYS["output_capacity"]
        )
        strict = ConfigLoader._optional_env_boolean(env_map, ConfigLoader._ENV_KEYS["strict"])

        config = NormalizerConfig(
            default_width=default_width or resolved.default_width,
            max_width=max_width or resolved.max_width,
            output_capacity=output_capacity or resolved.output_capacity,
            strict=resolved.strict if strict is None else strict,
        )
        config.validate()
        return config

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
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: NormalizerConfig | None = None,
    ) -> NormalizerConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)
        resolved = base if base is not None else NormalizerConfig()

        config = NormalizerConfig(
            default_width=ConfigLoader._optional_positive_int(
                payload, "default_width", source_label, default=resolved.default_width
            ),
            max_width=ConfigLoader._optional_positive_int(
                payload, "max_width", source_label, default=resolved.max_width
            ),
            output_capacity=ConfigLoader._optional_positive_int(
                payload, "output_capacity", source_label, default=resolved.output_capacity
            ),
            strict=ConfigLoader._optional_boolean(
                payload, "strict", source_label, default=resolved.strict
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the loader does not understand."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if normalize_optional_string(raw_value) is None:
            return default
        parsed = parse_positive_int(raw_value)
        if parsed is None:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = normalize_optional_string(env.get(key))
        if raw_value is None:
            return None
        parsed = parse_positive_int(raw_value)
        if parsed is None:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if normalize_optional_string(env.get(key)) is None:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
