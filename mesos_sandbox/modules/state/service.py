"""
Mesos state service.

Answers sandbox questions by walking live cluster state in two tiers:
master /state (frameworks, executors, agents) and then the owning agent's
/state (executor directories). Nothing is cached; every call re-fetches.
"""

import logging
from typing import Any, Dict, List, Optional, Set

from ...exceptions import MalformedStateError, PreconditionError
from ..framework import FrameworkIDProvider
from .models import ExecutorStateInfo, SandboxInfo
from .parsing import (
    address_from_pid,
    describe_executor,
    executor_id_of,
    require_field,
    require_list,
    require_str,
    strip_work_dir,
)
from .resolver import ExecutorResolver

logger = logging.getLogger(__name__)


class MesosStateService:
    """
    Locates executor sandboxes and agent hostnames.

    Transient unavailability (master or agent unreachable) degrades to empty
    results. Malformed state raises MalformedStateError and aborts the call;
    no partial results are returned.
    """

    def __init__(self, fetcher, framework_id_provider: FrameworkIDProvider):
        """
        Initialize state service.

        Args:
            fetcher: ClusterStateFetcher (or any object with state() and agent_state())
            framework_id_provider: Source of the registered framework ID
        """
        self.fetcher = fetcher
        self.resolver = ExecutorResolver(framework_id_provider)

    async def sandbox(self, app_name: str) -> List[SandboxInfo]:
        """
        Get the sandboxes of every executor of an application.

        Args:
            app_name: Application name encoded in executor IDs

        Returns:
            Sandbox locations with paths relative to the agent work_dir

        Logic:
        1. Fetch master state (absent -> empty list)
        2. Resolve our executors for app_name
        3. For each, locate its agent and fetch the agent's state
        4. Resolve executors again on the agent and strip work_dir from directories
        """
        if app_name is None:
            raise PreconditionError("app_name is required")

        master_state = await self.fetcher.state()
        if master_state is None:
            logger.warning("Master state unavailable, no sandboxes returned")
            return []

        result = []
        executors = await self.resolver.find_executors(
            require_list(master_state, "frameworks", "Master state"), app_name
        )
        for executor in executors:
            slave_id = require_str(executor, "slave_id", describe_executor(executor))
            address = self._agent_address(master_state, slave_id)

            agent_state = await self.fetcher.agent_state(address)
            if agent_state is None:
                # never return a partial list
                logger.warning(f"Agent {slave_id} at {address} unavailable, no sandboxes returned")
                return []

            flags = require_field(agent_state, "flags", f"Agent {slave_id} state")
            work_dir = require_str(flags, "work_dir", f"Agent {slave_id} flags")
            hostname = require_str(agent_state, "hostname", f"Agent {slave_id} state")

            agent_executors = await self.resolver.find_executors(
                require_list(agent_state, "frameworks", f"Agent {slave_id} state"), app_name
            )
            for agent_executor in agent_executors:
                directory = require_str(
                    agent_executor, "directory", describe_executor(agent_executor)
                )
                result.append(SandboxInfo(hostname=hostname, path=strip_work_dir(directory, work_dir)))

        logger.debug(f"Found {len(result)} sandboxes for {app_name}")
        return result

    async def task_sandbox(self, app_name: str, executor_id: str) -> str:
        """
        Get the master UI browse link of one executor's sandbox.

        Args:
            app_name: Application name encoded in executor IDs
            executor_id: Full executor ID to look for

        Returns:
            `<master host:port>/#/agents/<slave_id>/browse?path=<directory>`, or ""
            if the sandbox is not available (yet)
        """
        if app_name is None:
            raise PreconditionError("app_name is required")
        if executor_id is None:
            raise PreconditionError("executor_id is required")

        master_state = await self.fetcher.state()
        if master_state is None:
            logger.warning("Master state unavailable, no task sandbox returned")
            return ""

        master_address = address_from_pid(require_str(master_state, "pid", "Master state"))
        executors = await self.resolver.find_executors(
            require_list(master_state, "frameworks", "Master state"), app_name
        )
        for executor in executors:
            slave_id = require_str(executor, "slave_id", describe_executor(executor))
            address = self._agent_address(master_state, slave_id)

            agent_state = await self.fetcher.agent_state(address)
            if agent_state is None:
                logger.warning(f"Agent {slave_id} at {address} unavailable, skipping")
                continue

            agent_executors = await self.resolver.find_executors(
                require_list(agent_state, "frameworks", f"Agent {slave_id} state"), app_name
            )
            for agent_executor in agent_executors:
                if executor_id_of(agent_executor) != executor_id:
                    continue
                directory = agent_executor.get("directory")
                if directory:
                    return f"{master_address}/#/agents/{slave_id}/browse?path={directory}"

        logger.debug(f"No sandbox found for executor {executor_id}")
        return ""

    async def hostname_for_node(self, node_id: str) -> Optional[str]:
        """
        Get the hostname of an agent.

        Args:
            node_id: Agent (slave) ID

        Returns:
            Hostname, or None if no agent has this ID or the master is unavailable

        Raises:
            MalformedStateError: If several agents share the ID
        """
        if node_id is None:
            raise PreconditionError("node_id is required")

        master_state = await self.fetcher.state()
        if master_state is None:
            logger.warning("Master state unavailable, hostname unknown")
            return None

        nodes = self._nodes_with_id(master_state, node_id)
        if not nodes:
            return None
        if len(nodes) > 1:
            raise MalformedStateError(f"{len(nodes)} agents share the ID {node_id}")
        return require_str(nodes[0], "hostname", f"Agent {node_id}")

    async def executors(self, app_name: Optional[str] = None) -> Set[ExecutorStateInfo]:
        """
        Get our executors as registered with the master.

        Args:
            app_name: Optional application filter; None lists every executor

        Returns:
            Set of (executor ID, agent ID) pairs
        """
        master_state = await self.fetcher.state()
        if master_state is None:
            logger.warning("Master state unavailable, no executors returned")
            return set()

        executors = await self.resolver.find_executors(
            require_list(master_state, "frameworks", "Master state"), app_name
        )
        result = set()
        for executor in executors:
            executor_id = executor_id_of(executor)
            result.add(
                ExecutorStateInfo(
                    id=executor_id,
                    slave_id=require_str(executor, "slave_id", f"Executor {executor_id}"),
                )
            )
        return result

    def _agent_address(self, master_state: Dict[str, Any], slave_id: str) -> str:
        """Find the agent hosting an executor and return its `host:port`."""
        nodes = self._nodes_with_id(master_state, slave_id)
        if not nodes:
            raise MalformedStateError(f"Executor refers to unknown agent {slave_id}")
        if len(nodes) > 1:
            raise MalformedStateError(f"{len(nodes)} agents share the ID {slave_id}")
        return address_from_pid(require_str(nodes[0], "pid", f"Agent {slave_id}"))

    def _nodes_with_id(self, master_state: Dict[str, Any], node_id: str) -> List[Dict[str, Any]]:
        return [
            node
            for node in require_list(master_state, "slaves", "Master state")
            if require_str(node, "id", "Agent entry") == node_id
        ]
