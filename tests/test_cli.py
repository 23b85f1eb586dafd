"""Tests for the command line entry point."""

import pytest

import ip411.app
from ip411 import cli
from ip411.errors import LookupFailedError
from ip411.location import LocationRecord


@pytest.fixture()
def no_config(tmp_path):
    return ["--config", str(tmp_path / "absent.json")]


class TestArguments:
    def test_too_many_addresses(self, no_config, capsys) -> None:
        assert cli.main(no_config + ["1.1.1.1", "8.8.8.8"]) == 1
        err = capsys.readouterr().err
        assert "Invalid number of arguments" in err
        assert "usage:" in err

    def test_invalid_address(self, no_config, capsys) -> None:
        assert cli.main(no_config + ["not-an-ip"]) == 1
        assert "not-an-ip" in capsys.readouterr().err

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])
        assert exc.value.code == 0
        assert "ip411" in capsys.readouterr().out


class TestRun:
    def test_lookup_failure_exits_1(self, no_config, monkeypatch, capsys) -> None:
        def fail(address, config):
            raise LookupFailedError("Lookup of http://ipinfo.io/json failed: boom")

        monkeypatch.setattr(cli, "fetch_location", fail)
        assert cli.main(no_config) == 1
        assert "boom" in capsys.readouterr().err

    def test_runs_app_with_record(self, no_config, monkeypatch) -> None:
        record = LocationRecord({"loc": "1,2"})
        seen = {}

        def fake_fetch(address, config):
            seen["address"] = address
            return record

        def fake_run(record=None, address=None, config=None):
            seen["record"] = record
            return 0

        monkeypatch.setattr(cli, "fetch_location", fake_fetch)
        monkeypatch.setattr(ip411.app, "run", fake_run)
        assert cli.main(no_config + ["8.8.8.8"]) == 0
        assert str(seen["address"]) == "8.8.8.8"
        assert seen["record"] is record

    def test_no_argument_looks_up_own_address(self, no_config, monkeypatch) -> None:
        seen = {}

        def fake_fetch(address, config):
            seen["address"] = address
            return LocationRecord({"loc": "1,2"})

        monkeypatch.setattr(cli, "fetch_location", fake_fetch)
        monkeypatch.setattr(ip411.app, "run", lambda **kwargs: 0)
        assert cli.main(no_config) == 0
        assert seen["address"] is None
