# jujuhooks

Helpers for the Juju hook tools a charm calls while it runs. They cover
setting and reading unit and application status, adding and inspecting
storage, and looking up the unit's addresses.

Every function takes a *runner* as its first argument. A runner is any object
with a `run(name, *args)` method. That method executes the named hook tool
with the given string arguments and returns its standard output as bytes, or
`None` when there is no output. `jujuhooks.status.CommandRunner` is a
`typing.Protocol` that describes this interface.

## What this package does not do

The package contains no runner. It never starts a process itself. To run the
real hook tools, supply an object that does so, for example one built on
`subprocess.run`. In tests, a fake runner that records the command and returns
canned output is enough.

## Status

```python
from jujuhooks.status import (
    StatusName,
    set_unit_status,
    set_app_status,
    get_unit_status,
    get_app_status,
)

set_unit_status(runner, StatusName.ACTIVE)
# runs: status-set active

set_unit_status(runner, StatusName.ACTIVE, "my", "name", "is", "example")
# runs: status-set active "my name is example"

set_app_status(runner, StatusName.BLOCKED, "waiting for database")
# runs: status-set --application blocked "waiting for database"

unit = get_unit_status(runner)
# runs: status-get --include-data --format=json
print(unit.name, unit.message)

app = get_app_status(runner)
# runs: status-get --application --include-data --format=json
for unit_name, unit_status in app.units.items():
    print(unit_name, unit_status.name)
```

The functions behave as follows:

- `set_unit_status` joins all of its message parts with single spaces and
  passes them as one argument.
- `set_app_status` passes each message part as a separate argument after the
  status.
- `get_unit_status` returns a `UnitStatus`, which has `name` and `message`.
- `get_app_status` reads the `application-status` object from the tool's
  output. It returns an `AppStatus`, which has `name`, `message` and `units`.
  `units` is a dict that maps each unit name to a `UnitStatus`.

Juju allows only the leader unit to set or read the application status.

`StatusName` is a string enum with the members `ACTIVE`, `BLOCKED`, `WAITING`,
`MAINTENANCE` and `UNKNOWN`. A status value from the tool that is not one of
these is kept as a plain string. Fields that are missing from the tool's
output become empty strings.

## Storage

```python
from jujuhooks.storage import add_storage, get_storage_by_id, list_storage

add_storage(runner, "database-storage", 2)
# runs: storage-add database-storage=2

for storage_id in list_storage(runner, "database-storage"):
    # runs: storage-list database-storage --format=json
    info = get_storage_by_id(runner, storage_id)
    # runs: storage-get -s <storage_id> --format=json
    print(info.kind, info.location)
```

`get_storage_by_id` returns a `StorageInfo`, which has `kind` and `location`.
`list_storage` returns a list of storage IDs, for example
`["database-storage/0", "database-storage/1"]`.

## Unit addresses

```python
from jujuhooks.unit import get_unit_public_address, get_unit_private_address

print(get_unit_public_address(runner))   # unit-get public-address --format=json
print(get_unit_private_address(runner))  # unit-get private-address --format=json
```

## Errors

Each helper raises `jujuhooks.status.HookCommandError` in two cases:

- the runner raises an exception;
- the tool's output is not the JSON the helper expects.

The message names what was being attempted and then gives the original
error. For example, `failed to set status: ...` or
`failed to parse storage: ...`. The original exception is chained as the
cause.

## Running the tests

```
pip install -e ".[test]"
pytest
```