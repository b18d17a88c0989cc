import logging
from typing import Any, Dict, List, Optional

from ..framework import FrameworkIDProvider
from .parsing import app_name_of, executor_id_of, require_list, require_str

logger = logging.getLogger(__name__)


class ExecutorResolver:
    def __init__(self, framework_id_provider: FrameworkIDProvider):
        """
        Initialize executor resolver.

        Args:
            framework_id_provider: Source of the currently registered framework ID
        """
        self.framework_id_provider = framework_id_provider

    async def find_executors(
        self, frameworks: List[Dict[str, Any]], app_name: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Find the executors that belong to our framework.

        Args:
            frameworks: The `frameworks` array of a master or agent /state document
            app_name: Optional application filter; None or "" keeps every executor

        Returns:
            Executor entries in document order (empty if no framework is registered
            or the registered framework is not in the document)

        Logic:
        1. Look up the registered framework ID
        2. Find the framework entry with that ID
        3. Keep executors whose `@-@` prefix equals app_name
        """
        framework_id = await self.framework_id_provider.fetch()
        if not framework_id:
            logger.debug("No framework registered yet, nothing to resolve")
            return []

        result = []
        for framework in frameworks:
            if require_str(framework, "id", "Framework entry") != framework_id:
                continue
            for executor in require_list(framework, "executors", f"Framework {framework_id}"):
                if not app_name or app_name_of(executor_id_of(executor)) == app_name:
                    result.append(executor)
        return result
