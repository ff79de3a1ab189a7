from __future__ import annotations


class BlockDropError(Exception):
    """Base class for engine errors."""


class ConfigurationError(BlockDropError):
    """Board or timing configuration that can never produce a playable game.

    Raised once, while the engine is being constructed.
    """


class IllegalCommitError(BlockDropError):
    """A commit was requested for a move or rotation that does not fit."""
