"""Errors raised by Mesos Sandbox modules."""


class StateError(Exception):
    """Base class for sandbox lookup failures."""


class MalformedStateError(StateError):
    """
    Raised when a /state document does not have the expected shape.

    Covers missing fields, a `pid` without `@`, executors with neither `id`
    nor `executor_id`, and executors whose `slave_id` matches no node (or
    more than one). The cluster and this service disagree about the shape of
    the cluster, so the whole call is aborted.
    """


class PreconditionError(StateError, ValueError):
    """Raised when a required argument is missing."""
