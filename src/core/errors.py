"""sigrecon exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Data-quality problems in source rows are linted, not raised; these
errors cover configuration, input files, and converter failures.
"""

from __future__ import annotations


class SigReconError(Exception):
    """Base exception for all sigrecon failures."""


class SigReconConfigError(SigReconError):
    """Raised for invalid runtime configuration."""


class SigReconIngestError(SigReconError):
    """Raised for source file parsing and ingest failures."""


class SigReconTransformError(SigReconError):
    """Raised for transform pipeline failures."""


class SignatureConversionError(SigReconTransformError):
    """Raised when a signature pattern cannot be normalized."""
