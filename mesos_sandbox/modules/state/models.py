"""Value objects returned by the state module."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutorStateInfo:
    """An executor registered with the master, and the agent hosting it."""

    id: str
    slave_id: str


@dataclass(frozen=True)
class SandboxInfo:
    """Location of one executor sandbox: agent hostname plus path below work_dir."""

    hostname: str
    path: str
