"""ContextVar-based lexer configuration for patlex.

A LexerBuilder created without an explicit config reads the context's
config when build() runs. Setting a config in one thread (or asyncio task)
never affects builds happening in another.

Usage:
    # Explicit config
    builder = LexerBuilder(LexerConfig(flags=re.IGNORECASE))

    # Context default
    with lexer_config_context(LexerConfig(collect_errors=True)):
        lexer = builder.build()

"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable build configuration.

    Attributes:
        flags: ``re`` flags OR-ed into every rule's pattern
        collect_errors: Compile every rule before failing, and raise
            PatternErrors listing all invalid patterns instead of stopping
            at the first one
        reject_empty_matches: Reject patterns that match the empty string
            at build time. The stream's runtime zero-width guard applies
            whether or not this is set.

    """

    flags: int = 0
    collect_errors: bool = False
    reject_empty_matches: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from a dictionary.

        Unknown keys are ignored. ``flags`` may be given as an int, a single
        ``re`` flag name, or a list of flag names (e.g.
        ``["IGNORECASE", "MULTILINE"]``), which suits configs loaded from
        TOML or JSON.

        Args:
            config_dict: Dictionary with config values

        Returns:
            New LexerConfig instance

        Raises:
            ValueError: If a flag name is not an ``re`` flag

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "flags": ["IGNORECASE"],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.flags == re.IGNORECASE
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        flags = filtered.get("flags")
        if isinstance(flags, str):
            flags = [flags]
        if isinstance(flags, (list, tuple)):
            combined = 0
            for name in flags:
                try:
                    combined |= re.RegexFlag[name]
                except KeyError:
                    msg = f"Unknown regex flag {name!r}"
                    raise ValueError(msg) from None
            filtered["flags"] = combined

        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get the current lexer configuration for this context."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set the lexer configuration for the current context.

    Args:
        config: LexerConfig to use for subsequent builds in this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset the current context to the default configuration."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with lexer_config_context(LexerConfig(reject_empty_matches=True)):
        ...     lexer = builder.build()

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
