from __future__ import annotations
import logging
import os

logger = logging.getLogger(__name__)

GRAMMARS = ("pattern", "tokens")

# Defaults
_DEFAULT_GRAMMAR = "pattern"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_grammar() -> str:
    grammar = value_from_env('SLISP_GRAMMAR', _DEFAULT_GRAMMAR).lower()
    if grammar not in GRAMMARS:
        logger.warning("Unknown SLISP_GRAMMAR %r, using %r", grammar, _DEFAULT_GRAMMAR)
        return _DEFAULT_GRAMMAR
    return grammar


def get_log_level() -> int:
    name = value_from_env('SLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level %s" string for unknown names
    if not isinstance(level, int):
        logger.warning("Unknown SLISP_LOG_LEVEL %r, using %s", name, _DEFAULT_LOG_LEVEL)
        return logging.getLevelName(_DEFAULT_LOG_LEVEL)
    return level
