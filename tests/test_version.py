import pytest

from minio_tests.client import Version, VersionError
from minio_tests.harness.config import HarnessConfig
from minio_tests.harness.verify import (
    check_golang_runtime_version,
    normalize_go_version,
    parse_version,
)

def test_normalize_strips_prefix_and_prerelease():
    assert normalize_go_version("go1.6beta1") == "1.6"
    assert normalize_go_version("go1.7rc2") == "1.7"
    assert normalize_go_version("go1.5.1") == "1.5.1"

def test_normalize_is_idempotent():
    for raw in ["go1.6beta1", "go1.5.1", "go1.21.5", "go1.7rc2"]:
        once = normalize_go_version(raw)
        assert normalize_go_version(once) == once

def test_parse_pads_missing_patch():
    version = Version.parse("1.6")
    assert version == Version("1", "6", "0")
    assert str(version) == "160"
    assert int(version) == 160

def test_parse_ignores_patch_when_too_many_parts():
    assert Version.parse("1.5.1.2") == Version("1", "5", "0")

def test_parse_rejects_single_component():
    assert Version.parse("1") is None
    with pytest.raises(VersionError):
        parse_version("go1")

def test_parse_rejects_non_numeric():
    with pytest.raises(VersionError):
        parse_version("devel.abc")

def test_equal_versions_are_not_less_than():
    assert not Version("1", "5", "1").less_than(Version("1", "5", "1"))

def test_older_version_is_less_than():
    assert Version("1", "4", "9").less_than(Version("1", "5", "1"))
    assert not Version("1", "5", "1").less_than(Version("1", "4", "9"))

def test_runtime_check_accepts_prerelease_of_newer_version():
    check_golang_runtime_version(HarnessConfig(environ={}), runtime_version="go1.6beta1")

def test_runtime_check_rejects_old_version():
    with pytest.raises(VersionError) as exc:
        check_golang_runtime_version(HarnessConfig(environ={}), runtime_version="go1.4.9")
    assert exc.value.code == "ERR_VERSION"
    assert "149" in exc.value.message

def test_runtime_check_uses_configured_minimum():
    config = HarnessConfig(min_go_version="1.7", environ={})
    with pytest.raises(VersionError):
        check_golang_runtime_version(config, runtime_version="go1.6.3")
