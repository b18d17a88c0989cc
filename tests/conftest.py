"""
Shared pytest fixtures for Mesos Sandbox tests.

This module provides common fixtures including:
- StateFetcherMocker: Serve canned /state documents by URL and record fetches
- Framework ID provider and Redis mocks
- A cluster fixture matching a single framework, agent and executor
"""

import copy
import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mesos_sandbox.modules.endpoint import ClusterStateFetcher
from mesos_sandbox.modules.state import MesosStateService

MASTER_URL = "http://master.mesos:5050"
FRAMEWORK_ID = "fw-1"


# =============================================================================
# State Fetching Mocking Infrastructure
# =============================================================================


class StateFetcherMocker(ClusterStateFetcher):
    """
    ClusterStateFetcher that serves registered documents instead of using HTTP.

    URL building (master base URL, http://<host:port>/state for agents) is
    inherited, so tests also verify which endpoints the service asks for.

    Usage:
        def test_lookup(state_fetcher):
            state_fetcher.register_agent("10.0.0.5:5051", {...})
            ...
            assert state_fetcher.agent_calls == ["http://10.0.0.5:5051/state"]
    """

    def __init__(self, master_url: str = MASTER_URL):
        super().__init__(master_url)
        self._documents: Dict[str, Optional[Dict[str, Any]]] = {}
        self.calls: List[str] = []

    def register(self, url: str, document: Optional[Dict[str, Any]]) -> "StateFetcherMocker":
        """Serve `document` for `url`; None simulates an unreachable node."""
        self._documents[url] = document
        return self

    def register_master(self, document: Optional[Dict[str, Any]]) -> "StateFetcherMocker":
        return self.register(f"{self.master_url}/state", document)

    def register_agent(
        self, address: str, document: Optional[Dict[str, Any]]
    ) -> "StateFetcherMocker":
        return self.register(f"http://{address}/state", document)

    async def fetch(self, url: str) -> Optional[Dict[str, Any]]:
        self.calls.append(url)
        return copy.deepcopy(self._documents.get(url))

    @property
    def agent_calls(self) -> List[str]:
        """Fetches made to anything other than the master."""
        return [url for url in self.calls if url != f"{self.master_url}/state"]


def make_framework_ids(framework_id: Optional[str] = FRAMEWORK_ID) -> AsyncMock:
    """Framework ID provider mock returning a fixed ID (or None)."""
    provider = AsyncMock()
    provider.fetch = AsyncMock(return_value=framework_id)
    return provider


# =============================================================================
# Cluster State Fixtures
# =============================================================================


@pytest.fixture
def master_state() -> Dict[str, Any]:
    """Master /state with one framework, one executor and one agent."""
    return {
        "pid": "master@10.0.0.1:5050",
        "hostname": "master1",
        "frameworks": [
            {
                "id": FRAMEWORK_ID,
                "executors": [{"id": "app1@-@e1", "slave_id": "s1"}],
            }
        ],
        "slaves": [
            {"id": "s1", "pid": "slave(1)@10.0.0.5:5051", "hostname": "node5"},
        ],
    }


@pytest.fixture
def agent_state() -> Dict[str, Any]:
    """Agent /state of node5 holding the executor directory."""
    return {
        "flags": {"work_dir": "/var/lib/mesos"},
        "hostname": "node5",
        "frameworks": [
            {
                "id": FRAMEWORK_ID,
                "executors": [
                    {
                        "id": "app1@-@e1",
                        "directory": "/var/lib/mesos/slaves/s1/frameworks/fw-1/executors/e1",
                    }
                ],
            }
        ],
    }


@pytest.fixture
def state_fetcher(master_state, agent_state) -> StateFetcherMocker:
    fetcher = StateFetcherMocker()
    fetcher.register_master(master_state)
    fetcher.register_agent("10.0.0.5:5051", agent_state)
    return fetcher


@pytest.fixture
def framework_ids() -> AsyncMock:
    return make_framework_ids()


@pytest.fixture
def state_service(state_fetcher, framework_ids) -> MesosStateService:
    return MesosStateService(state_fetcher, framework_ids)


# =============================================================================
# Redis Mocking Infrastructure
# =============================================================================


@pytest.fixture
def mock_redis():
    """Create a mock Redis client for async operations."""
    redis = AsyncMock()
    redis.get = AsyncMock(return_value=None)
    redis.set = AsyncMock(return_value=True)
    redis.delete = AsyncMock(return_value=1)
    redis.ping = AsyncMock(return_value=True)
    return redis
