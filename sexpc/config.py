"""Lexer configuration for sexpc.

A frozen dataclass is built once and handed to each `Lexer`; the lexer
never mutates it.

Usage:
    from sexpc.config import LexerConfig
    from sexpc.lexer import Lexer

    config = LexerConfig(single_pass_trivia=True)
    lexer = Lexer(source, config=config)
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        single_pass_trivia: Skip whitespace once and then one run of
            adjacent comment lines per token, instead of looping until no
            trivia remains. With this set, whitespace that follows a comment
            line is not skipped and lexes as an invalid character.
        filename: Default filename reported in source locations.
    """

    single_pass_trivia: bool = False
    filename: str = "<unknown>"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LexerConfig":
        """Build a config from a plain mapping.

        Raises:
            ValueError: If the mapping contains keys that are not config fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown lexer config keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def with_filename(self, filename: str) -> "LexerConfig":
        return replace(self, filename=filename)


DEFAULT_CONFIG = LexerConfig()
