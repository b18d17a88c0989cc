"""
Parsing helpers for Mesos /state documents.

Every helper fails with MalformedStateError instead of leaking KeyError,
IndexError or TypeError to the caller.
"""

from typing import Any, Dict, List, Optional

from ...exceptions import MalformedStateError

APP_NAME_SEPARATOR = "@-@"
PID_SEPARATOR = "@"


def require_field(entry: Dict[str, Any], key: str, context: str) -> Any:
    """
    Read a mandatory field from a state entry.

    Args:
        entry: JSON object taken from a /state document
        key: Field name
        context: Human readable description of the entry, used in errors

    Returns:
        The field value

    Raises:
        MalformedStateError: If the entry is not an object or lacks the field
    """
    if not isinstance(entry, dict):
        raise MalformedStateError(f"{context} is not a JSON object: {entry!r}")
    if key not in entry or entry[key] is None:
        raise MalformedStateError(f"{context} has no '{key}' field")
    return entry[key]


def require_list(entry: Dict[str, Any], key: str, context: str) -> List[Any]:
    """Read a mandatory array field from a state entry."""
    value = require_field(entry, key, context)
    if not isinstance(value, list):
        raise MalformedStateError(f"'{key}' of {context} is not an array")
    return value


def require_str(entry: Dict[str, Any], key: str, context: str) -> str:
    """Read a mandatory string field from a state entry."""
    value = require_field(entry, key, context)
    if not isinstance(value, str):
        raise MalformedStateError(f"'{key}' of {context} is not a string")
    return value


def executor_id_of(executor: Dict[str, Any]) -> str:
    """
    Extract an executor's identifier.

    Master state reports it under `id`, some agent versions under
    `executor_id`. `id` wins when both are present.

    Raises:
        MalformedStateError: If neither key is present
    """
    if not isinstance(executor, dict):
        raise MalformedStateError(f"Executor entry is not a JSON object: {executor!r}")
    key = "id" if "id" in executor else "executor_id"
    return require_str(executor, key, "Executor entry")


def describe_executor(executor: Dict[str, Any]) -> str:
    """Label an executor entry for error messages without requiring an ID."""
    if isinstance(executor, dict):
        name = executor.get("id") or executor.get("executor_id")
        if name:
            return f"Executor {name}"
    return "Executor entry"


def app_name_of(executor_id: str) -> Optional[str]:
    """
    Return the application name encoded in an executor identifier.

    Executor identifiers are built as `<app_name>@-@<suffix>`.

    Returns:
        The segment before the first `@-@`, or None if the separator is absent
    """
    if APP_NAME_SEPARATOR not in executor_id:
        return None
    return executor_id.split(APP_NAME_SEPARATOR, 1)[0]


def address_from_pid(pid: str) -> str:
    """
    Extract `host:port` from a libprocess pid such as `slave(1)@10.0.0.5:5051`.

    Raises:
        MalformedStateError: If the pid has no `@`, or the part after it is
            not a non-empty host followed by a numeric port
    """
    if PID_SEPARATOR not in pid:
        raise MalformedStateError(f"Malformed pid '{pid}': missing '{PID_SEPARATOR}'")
    address = pid.split(PID_SEPARATOR, 1)[1]
    if not address:
        raise MalformedStateError(f"Malformed pid '{pid}': empty address")
    host, separator, port = address.rpartition(":")
    if not separator:
        raise MalformedStateError(f"Malformed pid '{pid}': missing port")
    if not host:
        raise MalformedStateError(f"Malformed pid '{pid}': missing host")
    if not port.isdigit():
        raise MalformedStateError(f"Malformed pid '{pid}': invalid port '{port}'")
    return address


def strip_work_dir(directory: str, work_dir: str) -> str:
    """
    Remove the agent work_dir from an executor directory.

    This is a literal substring removal, not a path operation: separators
    next to the prefix are left as they are. Only the first occurrence is
    removed, so `work_dir + result` gives back the original directory
    whenever the directory starts with work_dir.
    """
    if not work_dir:
        return directory
    return directory.replace(work_dir, "", 1)
