"""
Module 00 - Schemas
File: errors.py

Purpose: Standard error taxonomy for the streaming Merkle tree.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the package."""

    # Tree & Node Errors
    NODE_NOT_FOUND = "NODE_NOT_FOUND"
    EMPTY_TREE = "EMPTY_TREE"
    INVALID_LEAF = "INVALID_LEAF"
    INVALID_NODE = "INVALID_NODE"
    PARENT_ALREADY_ASSIGNED = "PARENT_ALREADY_ASSIGNED"

    # Hashing Errors
    UNSUPPORTED_HASH_ALGORITHM = "UNSUPPORTED_HASH_ALGORITHM"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class StreamTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to be reported as data (CLI JSON output)
    rather than raised.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NODE_NOT_FOUND],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "StreamTreeException":
        """Convert this error model to a raisable exception."""
        return StreamTreeException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class StreamTreeException(Exception):
    """
    Base exception for all streamtree errors.

    Carries structured error information and can be converted
    to/from StreamTreeError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "STREAMTREE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> StreamTreeError:
        """Convert this exception to a StreamTreeError model."""
        return StreamTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NodeNotFoundException(StreamTreeException):
    """Raised when a node is not connected to the current root."""

    def __init__(
        self,
        message: str = "Node not found: not connected to the current root",
        digest: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if digest:
            full_details["digest"] = digest
        super().__init__(
            message=message,
            code=ErrorCodes.NODE_NOT_FOUND,
            details=full_details,
        )


class EmptyTreeException(NodeNotFoundException):
    """Raised when a proof is requested from a tree with no leaves."""

    def __init__(
        self,
        message: str = "Tree is empty: no root to prove against",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, details=details)
        self.code = ErrorCodes.EMPTY_TREE


class InvalidLeafException(StreamTreeException):
    """Raised when a leaf value or leaf node cannot be appended."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_LEAF,
            details=details,
        )


class InvalidNodeException(StreamTreeException):
    """Raised on malformed node construction or leaf-only access on an internal node."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_NODE,
            details=details,
        )


class ParentAlreadyAssignedException(StreamTreeException):
    """Raised when a node's one-time parent link is assigned twice."""

    def __init__(
        self,
        message: str = "Node already has a parent",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.PARENT_ALREADY_ASSIGNED,
            details=details,
        )


class UnsupportedHashAlgorithmException(StreamTreeException, ValueError):
    """Raised when a hash algorithm name cannot be resolved."""

    def __init__(self, algorithm: str) -> None:
        super().__init__(
            message=f"Unsupported hash algorithm: {algorithm!r}",
            code=ErrorCodes.UNSUPPORTED_HASH_ALGORITHM,
            details={"algorithm": algorithm},
        )


class ConfigurationException(StreamTreeException):
    """Raised when configuration cannot be loaded."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=details,
        )
