"""
Mesos Sandbox API response models.

These models define the JSON returned by the REST layer. The state module
returns plain dataclasses; conversion happens here.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..state import ExecutorStateInfo, SandboxInfo


class SandboxResponse(BaseModel):
    """One executor sandbox."""

    hostname: str = Field(..., description="Hostname of the agent holding the sandbox")
    path: str = Field(..., description="Sandbox path relative to the agent work_dir")

    @classmethod
    def from_info(cls, info: SandboxInfo) -> "SandboxResponse":
        return cls(hostname=info.hostname, path=info.path)


class TaskSandboxResponse(BaseModel):
    """Browse link of one executor sandbox."""

    sandbox: str = Field(
        ..., description="Master UI browse link, empty if the sandbox is not available"
    )


class HostnameResponse(BaseModel):
    """Hostname of an agent."""

    node_id: str = Field(..., description="Agent (slave) ID")
    hostname: Optional[str] = Field(None, description="Agent hostname, null if unknown")


class ExecutorResponse(BaseModel):
    """An executor registered with the master."""

    id: str = Field(..., description="Executor ID")
    slave_id: str = Field(..., description="ID of the agent running the executor")

    @classmethod
    def from_info(cls, info: ExecutorStateInfo) -> "ExecutorResponse":
        return cls(id=info.id, slave_id=info.slave_id)

