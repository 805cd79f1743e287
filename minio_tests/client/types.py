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

from dataclasses import dataclass
from typing import Callable, List, Optional

@dataclass
class CommandResult:
    """Outcome of a single mc invocation."""
    args: List[str]
    returncode: int
    output: str

@dataclass
class TestStep:
    """One step of the fixed test sequence: the mc sub-command and the call that runs it."""
    name: str
    action: Callable[[], CommandResult]

    __test__ = False

@dataclass
class Version:
    """Runtime version split into its components."""
    major: str
    minor: str
    patch: str = "0"

    def __str__(self) -> str:
        return f"{self.major}{self.minor}{self.patch}"

    def __int__(self) -> int:
        return int(str(self))

    def less_than(self, other: "Version") -> bool:
        return int(self) < int(other)

    @classmethod
    def parse(cls, value: str) -> Optional["Version"]:
        """Split ``major.minor[.patch]``; returns None when there are too few parts."""
        parts = value.split(".")
        if len(parts) < 2:
            return None
        if len(parts) == 3:
            return cls(parts[0], parts[1], parts[2])
        return cls(parts[0], parts[1])
