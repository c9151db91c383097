"""Tests for logmeta.core.env."""

from logmeta.core.env import EnvironmentReader, default_reader


def test_get_from_mapping():
    env = EnvironmentReader.from_dict({"FUNCTION_NAME": "myFn"})
    assert env.get("FUNCTION_NAME") == "myFn"
    assert env.get("MISSING") is None
    assert env.get("MISSING", "x") == "x"


def test_from_dict_copies():
    values = {"GAE_VERSION": "v1"}
    env = EnvironmentReader.from_dict(values)
    values["GAE_VERSION"] = "v2"
    assert env.get("GAE_VERSION") == "v1"


def test_first_skips_empty_values():
    env = EnvironmentReader.from_dict({"GAE_SERVICE": "", "GAE_MODULE_NAME": "legacy"})
    assert env.first("GAE_SERVICE", "GAE_MODULE_NAME") == "legacy"
    assert env.first("NOPE", "ALSO_NOPE") is None


def test_is_set():
    env = EnvironmentReader.from_dict({"A": "1", "B": ""})
    assert env.is_set("A") is True
    assert env.is_set("B") is False
    assert env.is_set("C") is False


def test_default_reader_sees_process_env(monkeypatch):
    reader = default_reader()
    monkeypatch.setenv("SUPERVISOR_REGION", "europe-west1")
    assert reader.get("SUPERVISOR_REGION") == "europe-west1"
