"""Exceptions related to assetmix."""

__all__ = [
    "MixError",
]


class MixError(RuntimeError):
    """Generic base exception for a failed build pass.

    Every subclass is fatal: the pass stops and no partial configuration
    is handed to the bundler.
    """
