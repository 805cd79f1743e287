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

from typing import Optional, Sequence

class HarnessError(Exception):
    """Base exception for harness errors."""
    def __init__(self, message: str, code: str = "ERR_UNKNOWN"):
        self.code = code
        self.message = message
        super().__init__(f"{code}: {message}")

class VersionError(HarnessError):
    """Runtime version is too old or cannot be parsed."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_VERSION")

class EnvironmentConfigError(HarnessError):
    """Required environment variable missing or misconfigured."""
    def __init__(self, message: str):
        super().__init__(message, code="ERR_ENV")

class ConnectivityError(HarnessError):
    """Server health check failed."""
    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        super().__init__(message, code="ERR_CONNECT")

class CommandError(HarnessError):
    """External command could not be spawned or exited non-zero."""
    def __init__(self, message: str, operation: str = None, args: Sequence[str] = (),
                 returncode: Optional[int] = None, output: str = ""):
        code = "ERR_COMMAND"
        if operation:
            code = f"ERR_COMMAND_{operation.upper()}"
        self.operation = operation
        self.args_list = list(args)
        self.returncode = returncode
        self.output = output
        super().__init__(message, code=code)
