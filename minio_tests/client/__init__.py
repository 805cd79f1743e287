from .client import MCClient, alias_path, RECURSIVE
from .exceptions import (
    HarnessError,
    VersionError,
    EnvironmentConfigError,
    ConnectivityError,
    CommandError,
)
from .types import CommandResult, TestStep, Version
