import subprocess

import pytest

from minio_tests.client import CommandError, MCClient, alias_path

def test_alias_path():
    assert alias_path("local", "testbucket") == "local/testbucket"
    assert alias_path("local/", "testbucket") == "local/testbucket"

def test_run_prepends_json_and_merges_output(monkeypatch):
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0, stdout=b'{"status":"success"}\n')

    monkeypatch.setattr(subprocess, "run", fake_run)
    result = MCClient("mc").run("mb", "local/testbucket")
    assert seen["cmd"] == ["mc", "--json", "mb", "local/testbucket"]
    assert seen["kwargs"]["stderr"] == subprocess.STDOUT
    assert result.returncode == 0
    assert result.output == '{"status":"success"}\n'

def test_run_non_zero_exit(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: subprocess.CompletedProcess(
        cmd, 1, stdout=b"mc: <ERROR> Unable to set access\n"))
    with pytest.raises(CommandError) as exc:
        MCClient().run("access", "set", "readonly", "local/testbucket")
    err = exc.value
    assert err.code == "ERR_COMMAND_ACCESS"
    assert err.operation == "access"
    assert err.returncode == 1
    assert err.args_list == ["--json", "access", "set", "readonly", "local/testbucket"]
    assert "Unable to set access" in err.output

def test_run_spawn_failure(monkeypatch):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(CommandError) as exc:
        MCClient("/nonexistent/mc").run("ls", "local")
    assert exc.value.returncode is None
    assert exc.value.code == "ERR_COMMAND_LS"

@pytest.fixture
def recorded(monkeypatch):
    calls = []

    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0, stdout=b'{"status":"success"}\n')

    monkeypatch.setattr(subprocess, "run", fake_run)
    return calls

def test_sub_command_methods(recorded):
    client = MCClient("mc")
    client.list("local")
    client.make_bucket("local", "testbucket")
    client.set_access("local", "testbucket")
    client.copy("/data/corpus/", "local", "testbucket")
    client.remove("local", "testbucket")
    assert recorded == [
        ["mc", "--json", "ls", "local"],
        ["mc", "--json", "mb", "local/testbucket"],
        ["mc", "--json", "access", "set", "readonly", "local/testbucket"],
        ["mc", "--json", "cp", "/data/corpus/...", "local/testbucket"],
        ["mc", "--json", "rm", "--force", "local/testbucket..."],
    ]

def test_non_recursive_variants(recorded):
    client = MCClient("mc")
    client.copy("file.txt", "local", "testbucket", recursive=False)
    client.remove("local", "testbucket", recursive=False, force=False)
    client.set_access("local", "testbucket", policy="public")
    assert recorded == [
        ["mc", "--json", "cp", "file.txt", "local/testbucket"],
        ["mc", "--json", "rm", "local/testbucket"],
        ["mc", "--json", "access", "set", "public", "local/testbucket"],
    ]

def test_sub_command_method_failure_code(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: subprocess.CompletedProcess(
        cmd, 1, stdout=b"mc: <ERROR> Unable to make bucket\n"))
    with pytest.raises(CommandError) as exc:
        MCClient().make_bucket("local", "testbucket")
    assert exc.value.code == "ERR_COMMAND_MB"
