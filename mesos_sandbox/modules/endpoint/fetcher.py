"""
Cluster state fetcher.

Wraps the HTTP GET of a Mesos node's /state endpoint. An unreachable node,
an error status or an unparsable body all yield None: a master that is not
ready yet is a normal condition for a read-only query.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ...exceptions import MalformedStateError

logger = logging.getLogger(__name__)


class ClusterStateFetcher:
    """
    Fetches /state documents from Mesos nodes.

    Each call opens its own client; nothing is cached between calls.
    """

    def __init__(
        self,
        master_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize fetcher with injected master location.

        Args:
            master_url: Base URL of the Mesos master (e.g. http://master:5050)
            timeout: Timeout in seconds for a single fetch
            transport: Optional httpx transport (used by tests)
        """
        self.master_url = master_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> Optional[Dict[str, Any]]:
        """
        GET a URL and parse its JSON body.

        Args:
            url: Absolute URL

        Returns:
            Parsed JSON object, or None if the node could not be read

        Raises:
            MalformedStateError: If the URL is invalid or the body is valid JSON
                but not an object
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                document = response.json()
        except httpx.InvalidURL as e:
            raise MalformedStateError(f"Invalid state URL {url}: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Failed to fetch {url}: {e}")
            return None
        except ValueError as e:
            logger.warning(f"Invalid JSON returned by {url}: {e}")
            return None

        if not isinstance(document, dict):
            raise MalformedStateError(
                f"Expected a JSON object from {url}, got {type(document).__name__}"
            )
        return document

    async def state(self, base_url: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Fetch the /state document of a node.

        Args:
            base_url: Node base URL (e.g. http://10.0.0.5:5051); the master when omitted

        Returns:
            Parsed /state document, or None if the node could not be read
        """
        base = (base_url or self.master_url).rstrip("/")
        return await self.fetch(f"{base}/state")

    async def agent_state(self, address: str) -> Optional[Dict[str, Any]]:
        """Fetch the /state document of the agent at `host:port`."""
        return await self.state(f"http://{address}")
