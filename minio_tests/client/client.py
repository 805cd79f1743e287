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
MinIO client wrapper.

This module wraps the ``mc`` command line client. Every call runs ``mc``
with ``--json`` placed before the sub-command arguments, captures stdout
and stderr together, and raises :class:`CommandError` when the process
cannot be started or exits non-zero.

Classes:
    MCClient: One method per mc sub-command used by the test sequence.
"""
import posixpath
import subprocess
import time
from typing import List, Optional

from .exceptions import CommandError
from .types import CommandResult
from ..harness.utils import time_function, trace_cmd

# mc treats a trailing "..." on a path as a recursive request
RECURSIVE = "..."

def alias_path(alias: str, *parts: str) -> str:
    """Join an alias and bucket/object names the way mc expects them."""
    return posixpath.join(alias, *parts)

class MCClient:
    """
    Thin client around the ``mc`` executable.

    Attributes:
        binary (str): Name or path of the mc executable
    """

    def __init__(self, binary: str = "mc"):
        self.binary = binary

    def run(self, *args: str, operation: Optional[str] = None) -> CommandResult:
        """
        Run mc with ``--json`` and the given arguments.

        Args:
            *args (str): Sub-command and its arguments.
            operation (str, optional): Name used in the error code. Defaults to
                the sub-command.

        Returns:
            CommandResult: Arguments, exit status and combined output.

        Raises:
            CommandError: If mc cannot be spawned or exits non-zero.
        """
        operation = operation or (args[0] if args else None)
        cmd_args: List[str] = ["--json"] + list(args)
        trace_cmd(self.binary, cmd_args)
        start_time = time.time()
        try:
            proc = subprocess.run(
                [self.binary] + cmd_args,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        except OSError as e:
            raise CommandError(f"failed to run {self.binary}: {e}", operation=operation,
                               args=cmd_args) from e
        finally:
            time_function(f"mc {operation}", start_time)

        output = proc.stdout.decode("utf-8", errors="replace") if proc.stdout else ""
        if proc.returncode != 0:
            raise CommandError(f"{self.binary} {operation} exited with status {proc.returncode}",
                               operation=operation, args=cmd_args,
                               returncode=proc.returncode, output=output)
        return CommandResult(args=cmd_args, returncode=proc.returncode, output=output)


    def list(self, target: str) -> CommandResult:
        return self.run("ls", target)

    def make_bucket(self, alias: str, bucket: str) -> CommandResult:
        return self.run("mb", alias_path(alias, bucket))

    def set_access(self, alias: str, bucket: str, policy: str = "readonly") -> CommandResult:
        return self.run("access", "set", policy, alias_path(alias, bucket))

    def copy(self, source: str, alias: str, bucket: str, recursive: bool = True) -> CommandResult:
        """Copy ``source`` into the bucket; ``recursive`` appends the ``...`` suffix."""
        if recursive:
            source = source + RECURSIVE
        return self.run("cp", source, alias_path(alias, bucket))

    def remove(self, alias: str, bucket: str, recursive: bool = True,
               force: bool = True) -> CommandResult:
        target = alias_path(alias, bucket)
        if recursive:
            target = target + RECURSIVE
        if force:
            return self.run("rm", "--force", target)
        return self.run("rm", target)
