"""Exceptions raised by the pallet optimizer."""

from __future__ import annotations


class PalletOptimizerError(Exception):
    """Base class for all pallet optimizer errors."""


class InvalidInputError(PalletOptimizerError, ValueError):
    """Input violates the optimizer contract (duplicate ids, unknown preset, unreadable file)."""
