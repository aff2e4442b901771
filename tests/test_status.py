import pytest

from jujuhooks.status import (
    AppStatus,
    HookCommandError,
    StatusName,
    UnitStatus,
    get_app_status,
    get_unit_status,
    set_app_status,
    set_unit_status,
)


class FakeRunner:
    def __init__(self, output=None, err=None):
        self.output = output
        self.err = err
        self.command = None
        self.args = None

    def run(self, name, *args):
        self.command = name
        self.args = list(args)
        if self.err is not None:
            raise self.err
        return self.output


def test_set_unit_status():
    runner = FakeRunner()
    set_unit_status(runner, StatusName.ACTIVE)
    assert runner.command == "status-set"
    assert runner.args == ["active"]
    assert runner.output is None


def test_set_unit_status_with_message():
    runner = FakeRunner()
    set_unit_status(runner, StatusName.ACTIVE, "my", "name", "is", "example")
    assert runner.command == "status-set"
    assert runner.args == ["active", "my name is example"]


def test_set_unit_status_leading_empty_part_adds_no_space():
    runner = FakeRunner()
    set_unit_status(runner, StatusName.BLOCKED, "", "waiting")
    assert runner.args == ["blocked", "waiting"]


def test_set_app_status():
    runner = FakeRunner()
    set_app_status(runner, StatusName.ACTIVE)
    assert runner.command == "status-set"
    assert runner.args == ["--application", "active"]


def test_set_app_status_passes_message_parts_separately():
    runner = FakeRunner()
    set_app_status(runner, StatusName.MAINTENANCE, "Performing", "maintenance")
    assert runner.args == ["--application", "maintenance", "Performing", "maintenance"]


def test_set_unit_status_wraps_runner_error():
    runner = FakeRunner(err=RuntimeError("boom"))
    with pytest.raises(HookCommandError, match="^failed to set status: boom$"):
        set_unit_status(runner, StatusName.ACTIVE)


def test_set_app_status_wraps_runner_error():
    runner = FakeRunner(err=RuntimeError("boom"))
    with pytest.raises(HookCommandError, match="^failed to set status: boom$"):
        set_app_status(runner, StatusName.ACTIVE)


def test_get_unit_status():
    runner = FakeRunner(output=b'{"status": "active", "message": "Unit is active"}')
    status = get_unit_status(runner)
    assert status.name == StatusName.ACTIVE
    assert status.message == "Unit is active"
    assert runner.command == "status-get"
    assert runner.args == ["--include-data", "--format=json"]


def test_get_unit_status_keeps_unlisted_name():
    runner = FakeRunner(output=b'{"status": "error", "message": "hook failed"}')
    assert get_unit_status(runner) == UnitStatus(name="error", message="hook failed")


def test_get_unit_status_invalid_json():
    runner = FakeRunner(output=b"not json")
    with pytest.raises(HookCommandError, match="^failed to parse status: "):
        get_unit_status(runner)


def test_get_unit_status_empty_output():
    runner = FakeRunner(output=None)
    with pytest.raises(HookCommandError, match="^failed to parse status: "):
        get_unit_status(runner)


def test_get_unit_status_wrong_type():
    runner = FakeRunner(output=b'{"status": 3}')
    with pytest.raises(HookCommandError, match="^failed to parse status: "):
        get_unit_status(runner)


def test_get_unit_status_wraps_runner_error():
    runner = FakeRunner(err=RuntimeError("boom"))
    with pytest.raises(HookCommandError, match="^failed to get status: boom$"):
        get_unit_status(runner)


def test_get_app_status():
    runner = FakeRunner(
        output=(
            b'{"application-status":{"message":"Application is active","status":"active",'
            b'"status-data":{},"units":{"example/0":{"message":"","status":"unknown",'
            b'"status-data":{}},"example/1":{"message":"Application is active",'
            b'"status":"active","status-data":{}}}}}'
        )
    )
    status = get_app_status(runner)
    assert status.name == StatusName.ACTIVE
    assert status.message == "Application is active"
    assert status.units["example/0"].name == StatusName.UNKNOWN
    assert status.units["example/1"].name == StatusName.ACTIVE
    assert runner.command == "status-get"
    assert runner.args == ["--application", "--include-data", "--format=json"]


def test_get_app_status_without_units():
    runner = FakeRunner(output=b'{"application-status":{"status":"blocked","message":"m"}}')
    assert get_app_status(runner) == AppStatus(name=StatusName.BLOCKED, message="m", units={})


def test_get_app_status_invalid_json():
    runner = FakeRunner(output=b"{")
    with pytest.raises(HookCommandError, match="^failed to parse application status: "):
        get_app_status(runner)


def test_get_app_status_wraps_runner_error():
    runner = FakeRunner(err=RuntimeError("not the leader"))
    with pytest.raises(
        HookCommandError, match="^failed to get application status: not the leader$"
    ):
        get_app_status(runner)


def test_set_unit_status_passes_waiting_as_plain_string():
    runner = FakeRunner()
    set_unit_status(runner, StatusName.WAITING, "Waiting for something")
    assert runner.args == ["waiting", "Waiting for something"]