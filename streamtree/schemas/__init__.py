"""
Module 00 - Schemas
File: __init__.py

Purpose: Export error types and proof export models.
"""

from .versioning import (
    SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
    UnsupportedSchemaVersionError,
    assert_supported_schema_version,
)

from .errors import (
    ConfigurationException,
    EmptyTreeException,
    ErrorCodes,
    InvalidLeafException,
    InvalidNodeException,
    NodeNotFoundException,
    ParentAlreadyAssignedException,
    StreamTreeError,
    StreamTreeException,
    UnsupportedHashAlgorithmException,
)

from .proof import (
    FrontierSummary,
    InclusionProof,
)

__all__ = [
    # Versioning
    "SCHEMA_VERSION",
    "SUPPORTED_SCHEMA_VERSIONS",
    "UnsupportedSchemaVersionError",
    "assert_supported_schema_version",
    # Errors
    "ConfigurationException",
    "EmptyTreeException",
    "ErrorCodes",
    "InvalidLeafException",
    "InvalidNodeException",
    "NodeNotFoundException",
    "ParentAlreadyAssignedException",
    "StreamTreeError",
    "StreamTreeException",
    "UnsupportedHashAlgorithmException",
    # Proof views
    "FrontierSummary",
    "InclusionProof",
]
