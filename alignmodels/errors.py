"""
errors.py — Exceptions raised while building scoring models

Both errors derive from ValueError so callers catching the builtin keep
working.  Promotion failures use the builtin TypeError directly.
"""


class ConfigurationError(ValueError):
    """A resolved gap or indel scalar violates its sign constraint."""


class MissingArgumentError(ValueError):
    """A required named argument (and all of its aliases) was not passed."""
