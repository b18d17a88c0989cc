"""
State Module - Black Box Interface

Purpose: Locate executor sandboxes from live Mesos cluster state
Interface: sandbox(), task_sandbox(), hostname_for_node(), executors()
Hidden: Master/agent traversal, executor ID parsing, work_dir normalization

Receives its fetcher and framework ID provider by injection; holds no state.
"""

from .models import ExecutorStateInfo, SandboxInfo
from .resolver import ExecutorResolver
from .service import MesosStateService

__all__ = ["MesosStateService", "ExecutorResolver", "ExecutorStateInfo", "SandboxInfo"]
