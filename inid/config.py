"""Parser options and their loaders.

Responsibilities:
- Define ambient parser behavior as a typed dataclass.
- Provide an environment-based loader with actionable validation messages.

Key types:
- `ParserOptions`: options shared by the text and file entry points.
- `OptionsLoader`: static construction helpers for `ParserOptions`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from typing import Mapping

from .parsing import normalize_optional_string, parse_required_boolean


_DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Ambient options for one parser.

    Attributes:
        encoding: Text encoding used when reading or writing config files.
        allow_duplicate_keys: Let the last occurrence of a repeated key win
            instead of raising `DuplicateFieldError`.
    """

    encoding: str = _DEFAULT_ENCODING
    allow_duplicate_keys: bool = False

    def validate(self) -> None:
        """Validate option values before they are used by a parser."""

        if normalize_optional_string(self.encoding) is None:
            raise ValueError("`encoding` must be a non-empty string.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown `encoding` value `{self.encoding}`.") from exc


class OptionsLoader:
    """Factory methods for creating `ParserOptions` from external sources."""

    ENCODING_ENV_KEY = "INID_ENCODING"
    DUPLICATE_KEYS_ENV_KEY = "INID_ALLOW_DUPLICATE_KEYS"

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ParserOptions:
        """Create validated options from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        encoding = (
            OptionsLoader._optional_env_string(env_map, OptionsLoader.ENCODING_ENV_KEY)
            or _DEFAULT_ENCODING
        )
        allow_duplicate_keys = (
            OptionsLoader._optional_env_boolean(env_map, OptionsLoader.DUPLICATE_KEYS_ENV_KEY)
            or False
        )

        options = ParserOptions(encoding=encoding, allow_duplicate_keys=allow_duplicate_keys)
        options.validate()
        return options

    @staticmethod
    def with_overrides(
        base: ParserOptions,
        *,
        encoding: str | None = None,
        allow_duplicate_keys: bool | None = None,
    ) -> ParserOptions:
        """Return `base` with explicitly provided values replacing its own."""

        options = ParserOptions(
            encoding=normalize_optional_string(encoding) or base.encoding,
            allow_duplicate_keys=(
                allow_duplicate_keys
                if allow_duplicate_keys is not None
                else base.allow_duplicate_keys
            ),
        )
        options.validate()
        return options

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        try:
            return parse_required_boolean(env[key], key)
        except ValueError as exc:
            raise ValueError(f"Environment variable {exc}") from exc
