"""
Workshop Exception Hierarchy.

WorkshopError (base, Exception)
└── WorkshopConfigError(WorkshopError, ValueError)   ← recipe, override and registry errors

WorkshopConfigError multi-inherits from ValueError so callers can keep
catching ``ValueError`` around store lookups.

An unrecognized material tag is not an error anywhere in this hierarchy:
ordering it is a silent no-op.
"""


class WorkshopError(Exception):
    """Base exception for all Workshop errors."""


class WorkshopConfigError(WorkshopError, ValueError):
    """Configuration or store registry error (backward-compatible with ValueError)."""
