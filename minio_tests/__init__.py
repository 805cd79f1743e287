"""
minio-tests: an integration test harness for MinIO.

The harness installs and launches a MinIO server, checks that the local
toolchain and server are usable, then drives a fixed sequence of ``mc``
commands against a server alias.
"""
from .client import (
    MCClient,
    CommandResult,
    TestStep,
    Version,
    HarnessError,
    VersionError,
    EnvironmentConfigError,
    ConnectivityError,
    CommandError,
)
from .harness.config import HarnessConfig
from .harness.verify import verify_runtime
from .harness.launcher import run_minio
from .harness.runner import run_tests

__version__ = "0.1.0"
