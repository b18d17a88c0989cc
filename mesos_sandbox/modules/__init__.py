"""
Mesos Sandbox Modules - Black Box Architecture

Each module is a self-contained black box with:
- Clear interface (public API)
- Hidden implementation details
- Single responsibility

Modules communicate only through well-defined interfaces. The state module
never talks HTTP or Redis directly; it receives a fetcher and a framework ID
provider through its constructor.
"""
