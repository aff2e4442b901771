"""Adding, inspecting and listing storage instances of a unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

from jujuhooks.status import CommandRunner, _decode, _object, _run, _string

_STORAGE_ADD_COMMAND = "storage-add"
_STORAGE_GET_COMMAND = "storage-get"
_STORAGE_LIST_COMMAND = "storage-list"


@dataclass
class StorageInfo:
    """Kind and mount location of a storage instance."""

    kind: str = ""
    location: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "StorageInfo":
        obj = _object(data)
        return cls(kind=_string(obj.get("kind")), location=_string(obj.get("location")))


def _string_list(data: Any) -> List[str]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return [_string(item) for item in data]


def add_storage(runner: CommandRunner, name: str, count: int) -> None:
    """Ask for *count* more instances of the storage called *name*."""
    _run(runner, "failed to add storage", _STORAGE_ADD_COMMAND, f"{name}={int(count)}")


def get_storage_by_id(runner: CommandRunner, storage_id: str) -> StorageInfo:
    """Return information about the storage instance *storage_id*."""
    output = _run(
        runner, "failed to get storage", _STORAGE_GET_COMMAND, "-s", storage_id, "--format=json"
    )
    return _decode(output, "failed to parse storage", StorageInfo.from_json)


def list_storage(runner: CommandRunner, name: str) -> List[str]:
    """Return the IDs of all storage instances called *name*."""
    output = _run(runner, "failed to list storage", _STORAGE_LIST_COMMAND, name, "--format=json")
    return _decode(output, "failed to parse storages", _string_list)