"""Exceptions for case matching operations."""


class CaseStreamError(Exception):
    """Base exception for case stream errors."""


class CaseDescriptorError(CaseStreamError, TypeError):
    """Descriptor is neither a variant instance nor a variant class."""


class NotAVariantError(CaseDescriptorError):
    """Descriptor names a whole union instead of a single variant."""
