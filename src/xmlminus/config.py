"""ContextVar-based configuration for xmlminus.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Recognizer call and read by the lexer and parser
when they are constructed.

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Recognizer sets config internally via ContextVar
    recognizer = Recognizer(strict_lexing=True)
    derivation = recognizer("<a/>")

    # Direct usage
    from xmlminus.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(max_nesting_depth=16)):
        tokens = tokenize(text)
        derivation = parse(tokens)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable recognition configuration.

    Attributes:
        strict_lexing: Raise lexical errors for repeated ``=`` runs and for
            text no rule recognizes, instead of deferring to the parser
        max_nesting_depth: Maximum element nesting depth accepted by the
            parser, or None for no limit

    """

    strict_lexing: bool = False
    max_nesting_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_nesting_depth is not None and self.max_nesting_depth < 1:
            raise ValueError(
                f"max_nesting_depth must be positive, got {self.max_nesting_depth}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "strict_lexing": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_lexing
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "xmlminus_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict_lexing=True)):
        ...     tokens = tokenize("<a/>")
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
