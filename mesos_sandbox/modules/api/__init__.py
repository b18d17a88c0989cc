"""
API Module - Black Box Interface

Purpose: HTTP response shapes
Interface: Pydantic response models
Hidden: Conversion from state module value objects

The API module only orchestrates - it contains no business logic.
"""

from .models import (
    ExecutorResponse,
    HostnameResponse,
    SandboxResponse,
    TaskSandboxResponse,
)

__all__ = [
    "ExecutorResponse",
    "HostnameResponse",
    "SandboxResponse",
    "TaskSandboxResponse",
]
