import argparse
import json

import pytest
import responses

import restspec

from tests.conftest import API_ROOT


@pytest.fixture
def config_path(tmp_path, spec_dir):
    # Kept out of spec_dir so it is not loaded as a spec
    (tmp_path / "cfg").mkdir()
    path = tmp_path / "cfg" / "config.json"
    path.write_text(json.dumps({
        "spec": "fb",
        "spec_dir": str(spec_dir),
        "auth": {"user": "alice", "pass": "s3cret"},
    }))
    return str(path)


def test_parse_param():
    assert restspec.parse_param("q=coffee=beans") == ("q", "coffee=beans")
    with pytest.raises(argparse.ArgumentTypeError):
        restspec.parse_param("novalue")


def test_parse_args():
    args = restspec.parse_args(["-c", "c.json", "get", "users/:id", "-p", "id=42", "-p", "x=1"])

    assert (args.config, args.verb, args.resource) == ("c.json", "get", "users/:id")
    assert dict(args.params) == {"id": "42", "x": "1"}


@responses.activate
def test_main_prints_response(config_path, capsys):
    responses.add(responses.GET, f"{API_ROOT}/search", json={"data": [1]})

    restspec.main(["-c", config_path, "get", "search", "-p", "q=coffee"])

    assert json.loads(capsys.readouterr().out) == {"data": [1]}
    request = responses.calls[0].request
    assert request.url == f"{API_ROOT}/search?q=coffee"
    assert request.headers["Authorization"].startswith("Basic ")


def test_main_requires_spec_key(tmp_path, spec_dir):
    (tmp_path / "cfg").mkdir()
    path = tmp_path / "cfg" / "config.json"
    path.write_text(json.dumps({"spec_dir": str(spec_dir)}))

    with pytest.raises(Exception, match="spec"):
        restspec.main(["-c", str(path), "get", "search"])


def test_main_raises_dispatch_errors(config_path):
    with pytest.raises(restspec.MissingRequiredParam):
        restspec.main(["-c", config_path, "get", "search"])


def test_parse_args_lowercases_verb():
    assert restspec.parse_args(["-c", "c.json", "GET", "search"]).verb == "get"
