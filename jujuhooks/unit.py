"""Reading the network addresses of the unit."""

from __future__ import annotations

from jujuhooks.status import CommandRunner, _decode, _run, _string

_UNIT_GET_COMMAND = "unit-get"


def _get_unit(runner: CommandRunner, key: str) -> str:
    output = _run(runner, "failed to get unit", _UNIT_GET_COMMAND, key, "--format=json")
    return _decode(output, "failed to parse unit get output", _string)


def get_unit_public_address(runner: CommandRunner) -> str:
    """Return the public address of the unit."""
    return _get_unit(runner, "public-address")


def get_unit_private_address(runner: CommandRunner) -> str:
    """Return the private address of the unit."""
    return _get_unit(runner, "private-address")