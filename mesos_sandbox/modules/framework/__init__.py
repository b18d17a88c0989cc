"""
Framework Module - Black Box Interface

Purpose: Provide the framework ID the scheduler registered with the master
Interface: fetch()
Hidden: Registry storage (Redis key layout)

Can be replaced with any registry (ZooKeeper, etcd) implementing FrameworkIDProvider.
"""

from .framework_id import FrameworkIDProvider, RedisFrameworkIDStore

__all__ = ["FrameworkIDProvider", "RedisFrameworkIDStore"]
