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
Harness configuration.

Settings are read from ``MINIO_TESTS_*`` environment variables; anything not
set falls back to the values the harness has always used against a local
MinIO server.
"""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_MIN_GO_VERSION = "1.5.1"
DEFAULT_REQUIRED_ENV = "GOPATH"
DEFAULT_ENDPOINT = "http://localhost:9000"
DEFAULT_BUCKET = "testbucket"

MINIO_IMPORT_PATH = "github.com/minio/minio"
MC_IMPORT_PATH = "github.com/minio/mc"

@dataclass
class HarnessConfig:
    """Resolved configuration for a harness run."""
    min_go_version: str = DEFAULT_MIN_GO_VERSION
    required_env: str = DEFAULT_REQUIRED_ENV
    endpoint: str = DEFAULT_ENDPOINT
    mc_binary: str = "mc"
    minio_binary: str = "minio"
    go_binary: str = "go"
    bucket: str = DEFAULT_BUCKET
    workdir: str = "."
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ, repr=False)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HarnessConfig":
        env = os.environ if environ is None else environ
        return cls(
            min_go_version=env.get("MINIO_TESTS_MIN_GO_VERSION", DEFAULT_MIN_GO_VERSION),
            required_env=env.get("MINIO_TESTS_REQUIRED_ENV", DEFAULT_REQUIRED_ENV),
            endpoint=env.get("MINIO_TESTS_ENDPOINT", DEFAULT_ENDPOINT),
            mc_binary=env.get("MINIO_TESTS_MC", "mc"),
            minio_binary=env.get("MINIO_TESTS_MINIO", "minio"),
            go_binary=env.get("MINIO_TESTS_GO", "go"),
            bucket=env.get("MINIO_TESTS_BUCKET", DEFAULT_BUCKET),
            workdir=env.get("MINIO_TESTS_WORKDIR", "."),
            environ=env,
        )
