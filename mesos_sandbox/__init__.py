"""
Mesos Sandbox - Executor Sandbox Locator

Finds where a running executor's sandbox lives inside a Mesos cluster and
maps agent identifiers back to hostnames.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- endpoint: Cluster /state fetching over HTTP
- framework: Registered framework identity (registry-backed)
- state: Executor resolution and sandbox lookup
- storage: Redis connection management
- api: REST response models
"""

__version__ = "1.0.0"
