"""Configuration model and loaders for bookpager.

Responsibilities:
- Define pagination settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `PaginatorConfig`: normalized settings for one pagination run.
- `ConfigLoader`: static construction helpers for `PaginatorConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string
from .text.pagination import DEFAULT_WIDOW_GUARD_CHARS, DEFAULT_WORDS_PER_PAGE
from .text.paragraphs import DEFAULT_HEADING_MAX_CHARS

_DEFAULT_OUTPUT_DIR = Path("library")


@dataclass(slots=True)
class PaginatorConfig:
    """Settings for one pagination run.

    Attributes:
        source_path: Path to the UTF-8 source text.
        output_dir: Directory that receives one sub-directory per book id.
        book_id: Optional book id; defaults to the source file stem.
        words_per_page: Target word count per page.
        widow_guard_chars: Minimum characters since the last paragraph break
            before a page cut may commit.
        heading_max_chars: Single-line paragraphs shorter than this are kept verbatim.
    """

    source_path: Path
    output_dir: Path = _DEFAULT_OUTPUT_DIR
    book_id: str | None = None
    words_per_page: int = DEFAULT_WORDS_PER_PAGE
    widow_guard_chars: int = DEFAULT_WIDOW_GUARD_CHARS
    heading_max_chars: int = DEFAULT_HEADING_MAX_CHARS

    def validate(self) -> None:
        """Validate configuration values before pagination."""

        if self.words_per_page <= 0:
            raise ValueError("`words_per_page` must be a positive integer.")
        if self.heading_max_chars <= 0:
            raise ValueError("`heading_max_chars` must be a positive integer.")
        if self.widow_guard_chars < 0:
            raise ValueError("`widow_guard_chars` must be a non-negative integer.")
        if self.book_id is not None and not self.book_id.strip():
            raise ValueError("`book_id` must be a non-empty string when provided.")

    def resolved_book_id(self) -> str:
        """Return the explicit book id or the source file stem."""

        if self.book_id is not None:
            return self.book_id
        return self.source_path.stem


class ConfigLoader:
    """Factory methods for creating `PaginatorConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"source_path"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "source_path",
            "output_dir",
            "book_id",
            "words_per_page",
            "widow_guard_chars",
            "heading_max_chars",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> PaginatorConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PaginatorConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        source_path = ConfigLoader._optional_env_string(env_map, "BOOKPAGER_SOURCE_PATH")
        if source_path is None:
            raise ValueError("Environment variable `BOOKPAGER_SOURCE_PATH` is required.")
        output_dir = ConfigLoader._optional_env_string(env_map, "BOOKPAGER_OUTPUT_DIR")
        book_id = ConfigLoader._optional_env_string(env_map, "BOOKPAGER_BOOK_ID")
        words_per_page = ConfigLoader._optional_env_int(
            env_map, "BOOKPAGER_WORDS_PER_PAGE", minimum=1
        )
        widow_guard_chars = ConfigLoader._optional_env_int(
            env_map, "BOOKPAGER_WIDOW_GUARD_CHARS", minimum=0
        )
        heading_max_chars = ConfigLoader._optional_env_int(
            env_map, "BOOKPAGER_HEADING_MAX_CHARS", minimum=1
        )

        config = PaginatorConfig(
            source_path=Path(source_path),
            output_dir=Path(output_dir) if output_dir is not None else _DEFAULT_OUTPUT_DIR,
            book_id=book_id,
            words_per_page=words_per_page or DEFAULT_WORDS_PER_PAGE,
            widow_guard_chars=(
                widow_guard_chars if widow_guard_chars is not None else DEFAULT_WIDOW_GUARD_CHARS
            ),
            heading_max_chars=heading_max_chars or DEFAULT_HEADING_MAX_CHARS,
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
        payload: Mapping[str, Any], source_label: str
    ) -> PaginatorConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        source_path = normalize_optional_string(payload.get("source_path"))
        if source_path is None:
            raise ValueError(f"{source_label} requires non-empty `source_path`.")
        output_dir = normalize_optional_string(payload.get("output_dir"))
        book_id = normalize_optional_string(payload.get("book_id"))

        config = PaginatorConfig(
            source_path=Path(source_path),
            output_dir=Path(output_dir) if output_dir is not None else _DEFAULT_OUTPUT_DIR,
            book_id=book_id,
            words_per_page=ConfigLoader._optional_int(
                payload, "words_per_page", source_label, DEFAULT_WORDS_PER_PAGE, minimum=1
            ),
            widow_guard_chars=ConfigLoader._optional_int(
                payload, "widow_guard_chars", source_label, DEFAULT_WIDOW_GUARD_CHARS, minimum=0
            ),
            heading_max_chars=ConfigLoader._optional_int(
                payload, "heading_max_chars", source_label, DEFAULT_HEADING_MAX_CHARS, minimum=1
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _optional_int(
        payload: Mapping[str, Any],
        key: str,
        source_label: str,
        default: int,
        minimum: int,
    ) -> int:
        """Read an optional integer field bounded below by `minimum`."""

        if key not in payload:
            return default

        raw_value = payload[key]
        message = f"{source_label} field `{key}` must be an integer >= {minimum}."
        if isinstance(raw_value, bool):
            raise ValueError(message)
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(message) from exc

        if parsed < minimum:
            raise ValueError(message)
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_int(env: Mapping[str, str], key: str, minimum: int) -> int | None:
        """Read an optional integer bounded below by `minimum` from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        message = f"Environment variable `{key}` must be an integer >= {minimum}."
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(message) from exc
        if parsed < minimum:
            raise ValueError(message)
        return parsed
