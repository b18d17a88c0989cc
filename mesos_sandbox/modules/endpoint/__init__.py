"""
Endpoint Module - Black Box Interface

Purpose: Fetch /state documents from Mesos masters and agents
Interface: fetch(), state()
Hidden: HTTP client, timeouts, JSON decoding

Returns None for unreachable nodes so callers can degrade gracefully.
"""

from .fetcher import ClusterStateFetcher

__all__ = ["ClusterStateFetcher"]
