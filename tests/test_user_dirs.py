from pathlib import Path

import pytest

from alvr_filesystem.errors import ConfigLookupError
from alvr_filesystem.user_dirs import config_home, home_dir


def test_home_from_environ():
    assert home_dir({"HOME": "/home/tester"}) == Path("/home/tester")


def test_home_falls_back_to_password_database(monkeypatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("/var/lib/tester")))
    assert home_dir({}) == Path("/var/lib/tester")


def test_home_lookup_failure_is_fatal(monkeypatch):
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(no_home))
    with pytest.raises(ConfigLookupError):
        home_dir({})


def test_config_home_prefers_xdg():
    environ = {"HOME": "/home/tester", "XDG_CONFIG_HOME": "/srv/config"}
    assert config_home(environ) == Path("/srv/config")


def test_config_home_ignores_relative_xdg():
    environ = {"HOME": "/home/tester", "XDG_CONFIG_HOME": "config"}
    assert config_home(environ) == Path("/home/tester/.config")


def test_config_home_defaults_to_dot_config():
    assert config_home({"HOME": "/home/tester"}) == Path("/home/tester/.config")
