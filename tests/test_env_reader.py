import pytest

from appmeta.core.exceptions import MissingEnvError
from appmeta.lib.env_reader import read_app_id, read_required_env


def test_read_required_env(identity_env) -> None:
    meta = read_required_env(identity_env)
    assert meta == {"host": "node1", "job": "j1", "task": "t1", "plugin": "p1"}
    assert list(meta) == ["host", "job", "task", "plugin"]


@pytest.mark.parametrize("variable", ["HOST", "JOB", "TASK", "PLUGIN"])
def test_read_required_env_unset(identity_env, variable) -> None:
    del identity_env[variable]
    with pytest.raises(MissingEnvError) as excinfo:
        read_required_env(identity_env)
    assert excinfo.value.variable == variable
    assert variable in str(excinfo.value)


@pytest.mark.parametrize("variable", ["HOST", "JOB", "TASK", "PLUGIN"])
def test_read_required_env_empty(identity_env, variable) -> None:
    identity_env[variable] = ""
    with pytest.raises(MissingEnvError):
        read_required_env(identity_env)


def test_read_required_env_reports_first_missing() -> None:
    with pytest.raises(MissingEnvError) as excinfo:
        read_required_env({"PLUGIN": "p1"})
    assert excinfo.value.variable == "HOST"


def test_read_required_env_defaults_to_os_environ(monkeypatch) -> None:
    for var, value in {"HOST": "h", "JOB": "j", "TASK": "t", "PLUGIN": "p"}.items():
        monkeypatch.setenv(var, value)
    assert read_required_env()["host"] == "h"


def test_read_app_id(identity_env) -> None:
    assert read_app_id(required=True, environ=identity_env) == "app42"


def test_read_app_id_required_missing() -> None:
    with pytest.raises(MissingEnvError) as excinfo:
        read_app_id(required=True, environ={"WAGGLE_APP_ID": ""})
    assert excinfo.value.variable == "WAGGLE_APP_ID"


def test_read_app_id_optional_missing() -> None:
    assert read_app_id(required=False, environ={}) is None
