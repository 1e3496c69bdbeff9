"""Compiled grammar patterns, built once at import time.

Every pattern is meant to be applied with `fullmatch`: a fragment either
conforms as a whole or not at all.
"""

import re

_NAME = r"[A-Za-z_][0-9A-Za-z_]*"

INT_RE = re.compile(r"[0-9]+")
FLOAT_RE = re.compile(r"[0-9]+\.[0-9]+")
STR_RE = re.compile(r'".*"')
LIST_RE = re.compile(r"'\(.+\)")

SYMBOL_RE = re.compile(_NAME)
CALL_RE = re.compile(r"\(\s*(?P<funcname>" + _NAME + r")\s*(?P<args>.*)\)")
