# Minio Tests (C) 2015 Minio, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Environment verification for the minio-tests harness.

Three checks gate a test run, always in this order:

1. the Go toolchain is at least the configured minimum version,
2. the required workspace variable (``GOPATH``) is set and part of ``PATH``,
3. the server at the configured endpoint answers ``GET /`` with HTTP 200.

Each check raises on failure instead of exiting; :mod:`minio_tests.harness.cli`
turns the error into an exit status. Nothing here retries.
"""
import os
import re
import shutil
import time

import boto3
from botocore import UNSIGNED
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..client.exceptions import ConnectivityError, EnvironmentConfigError, VersionError
from ..client.types import Version
from .config import HarnessConfig
from .utils import logger, time_function

# Current Go release naming; revisit if upstream changes its pre-release style.
PRERELEASE_RE = re.compile(r"(beta|rc)[0-9].*$")

INSTALL_DOC = "https://github.com/minio/mc/blob/master/INSTALLGO.md"

def normalize_go_version(version: str) -> str:
    """Strip the ``go`` prefix and any beta/rc suffix: ``go1.6beta1`` -> ``1.6``."""
    if version.startswith("go"):
        version = version[len("go"):]
    return PRERELEASE_RE.sub("", version)

def parse_version(value: str) -> Version:
    version = Version.parse(normalize_go_version(value))
    if version is None:
        raise VersionError(f"cannot parse version '{value}'")
    try:
        int(version)
    except ValueError:
        raise VersionError(f"cannot parse version '{value}'")
    return version

def find_goroot(config: HarnessConfig) -> str:
    """Return ``GOROOT``, or derive it from the go binary found on ``PATH``."""
    env = config.environ
    goroot = env.get("GOROOT", "").strip()
    if goroot:
        return goroot
    go = shutil.which(config.go_binary, path=env.get("PATH"))
    if go is None:
        raise VersionError(f"{config.go_binary} not found on PATH and GOROOT not set.")
    # <goroot>/bin/go
    return os.path.dirname(os.path.dirname(os.path.realpath(go)))

def golang_runtime_version(config: HarnessConfig) -> str:
    """Return the raw toolchain version (e.g. ``go1.6beta1``) from ``$GOROOT/VERSION``."""
    path = os.path.join(find_goroot(config), "VERSION")
    try:
        with open(path, encoding="utf-8") as f:
            version = f.readline().strip()
    except OSError as e:
        raise VersionError(f"cannot read Go version from {path}: {e}") from e
    if not version:
        raise VersionError(f"{path} is empty")
    return version

def check_golang_runtime_version(config: HarnessConfig, runtime_version: str = None):
    logger.info("Checking golang runtime version.")
    if runtime_version is None:
        runtime_version = golang_runtime_version(config)
    current = parse_version(runtime_version)
    minimum = parse_version(config.min_go_version)
    if current.less_than(minimum):
        raise VersionError(
            f"Old Golang runtime version '{current}' detected, 'automated-tests' requires "
            f"minimum go{config.min_go_version} or later."
        )
    logger.info("Success.")

def check_golang_environment(config: HarnessConfig):
    logger.info(f"Checking golang {config.required_env}.")
    env = config.environ
    value = env.get(config.required_env, "")
    if value.strip() == "":
        raise EnvironmentConfigError(
            f"{config.required_env} not set, cannot continue please follow {INSTALL_DOC}."
        )
    if value not in env.get("PATH", ""):
        raise EnvironmentConfigError(
            f"{config.required_env} not part of PATH, cannot continue please follow {INSTALL_DOC}."
        )
    logger.info("Success.")

def get_client(endpoint: str):
    """Create an unsigned boto3 S3 client for the health check."""
    return boto3.client(
        's3',
        endpoint_url=endpoint,
        region_name='us-east-1',
        config=Config(
            signature_version=UNSIGNED,
            s3={'addressing_style': 'path'},
            retries={'max_attempts': 1, 'mode': 'standard'},
        ),
    )

def check_if_server_running(config: HarnessConfig, client=None):
    """GET the endpoint root (S3 ListBuckets) and require HTTP 200."""
    logger.info("Checking if server is running.")
    start_time = time.time()
    if client is None:
        try:
            client = get_client(config.endpoint)
        except ValueError as e:
            raise ConnectivityError(f"Invalid endpoint {config.endpoint!r}: {e}") from e
    try:
        response = client.list_buckets()
    except ClientError as e:
        status = e.response.get('ResponseMetadata', {}).get('HTTPStatusCode')
        raise ConnectivityError(f"Server replied back with {status}.", status=status) from e
    except BotoCoreError as e:
        raise ConnectivityError(f"Server at {config.endpoint} unreachable: {e}") from e
    finally:
        time_function("check_if_server_running", start_time)
    status = response.get('ResponseMetadata', {}).get('HTTPStatusCode')
    if status != 200:
        raise ConnectivityError(f"Server replied back with {status}.", status=status)
    logger.info("Success.")

def verify_runtime(config: HarnessConfig = None, client=None, runtime_version: str = None):
    """
    Run every environment check, stopping at the first failure.

    Args:
        config (HarnessConfig, optional): Settings to check against. Defaults to
            the environment.
        client (optional): S3 client used for the health check.
        runtime_version (str, optional): Toolchain version to check instead of
            reading ``$GOROOT/VERSION``.

    Raises:
        VersionError: Toolchain older than the minimum.
        EnvironmentConfigError: Workspace variable missing or not on PATH.
        ConnectivityError: Server did not answer with HTTP 200.
    """
    config = config or HarnessConfig.from_env()
    check_golang_runtime_version(config, runtime_version)
    check_golang_environment(config)
    check_if_server_running(config, client)
