"""Errors raised while reading specifications and generating sources."""


class SpecError(ValueError):
    """A peripheral specification is malformed or cannot be generated."""