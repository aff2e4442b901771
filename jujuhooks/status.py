"""Reading and setting the workload status of a unit and its application."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Protocol, TypeVar, Union

T = TypeVar("T")

_STATUS_GET_COMMAND = "status-get"
_STATUS_SET_COMMAND = "status-set"


class StatusName(str, Enum):
    """Workload status names understood by the hook tools."""

    ACTIVE = "active"
    BLOCKED = "blocked"
    WAITING = "waiting"
    MAINTENANCE = "maintenance"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class CommandRunner(Protocol):
    """Something that runs a hook tool and returns what it printed."""

    def run(self, name: str, *args: str) -> bytes | None:
        """Run hook tool *name* with *args* and return its standard output."""


class HookCommandError(Exception):
    """A hook tool failed or its output could not be understood."""


def _run(runner: CommandRunner, failure: str, name: str, *args: str) -> bytes:
    try:
        output = runner.run(name, *args)
    except Exception as exc:
        raise HookCommandError(f"{failure}: {exc}") from exc
    return output or b""


def _decode(output: bytes, failure: str, convert: Callable[[Any], T]) -> T:
    try:
        return convert(json.loads(output))
    except (TypeError, ValueError) as exc:
        raise HookCommandError(f"{failure}: {exc}") from exc


def _object(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _string(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected a JSON string, got {type(value).__name__}")
    return value


def _status_name(value: Any) -> Union[StatusName, str]:
    text = _string(value)
    try:
        return StatusName(text)
    except ValueError:
        return text


@dataclass
class UnitStatus:
    """Status of a single unit."""

    name: Union[StatusName, str] = ""
    message: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "UnitStatus":
        obj = _object(data)
        return cls(name=_status_name(obj.get("status")), message=_string(obj.get("message")))


@dataclass
class AppStatus:
    """Status of the application together with the status of each of its units."""

    name: Union[StatusName, str] = ""
    message: str = ""
    units: Dict[str, UnitStatus] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any) -> "AppStatus":
        obj = _object(data)
        units = {
            unit_name: UnitStatus.from_json(unit)
            for unit_name, unit in _object(obj.get("units")).items()
        }
        return cls(
            name=_status_name(obj.get("status")),
            message=_string(obj.get("message")),
            units=units,
        )


def _join_message(parts: tuple[str, ...]) -> str:
    message = ""
    for part in parts:
        if message:
            message += " "
        message += part
    return message


def set_unit_status(runner: CommandRunner, status: Union[StatusName, str], *args: str) -> None:
    """Set the unit status; message parts are joined with single spaces."""
    command_args = [str(status)]
    if args:
        command_args.append(_join_message(args))
    _run(runner, "failed to set status", _STATUS_SET_COMMAND, *command_args)


def set_app_status(runner: CommandRunner, status: Union[StatusName, str], *args: str) -> None:
    """Set the application status. Only the leader unit may do this."""
    _run(
        runner,
        "failed to set status",
        _STATUS_SET_COMMAND,
        "--application",
        str(status),
        *args,
    )


def get_unit_status(runner: CommandRunner) -> UnitStatus:
    """Return the status of this unit."""
    output = _run(
        runner, "failed to get status", _STATUS_GET_COMMAND, "--include-data", "--format=json"
    )
    return _decode(output, "failed to parse status", UnitStatus.from_json)


def get_app_status(runner: CommandRunner) -> AppStatus:
    """Return the application status. Only the leader unit may do this."""
    output = _run(
        runner,
        "failed to get application status",
        _STATUS_GET_COMMAND,
        "--application",
        "--include-data",
        "--format=json",
    )
    return _decode(
        output,
        "failed to parse application status",
        lambda data: AppStatus.from_json(_object(data).get("application-status")),
    )