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
Fixed mc test sequence.

The sequence is list, make bucket, set read-only access, recursive copy and
recursive forced remove. It stops at the first failing step and re-raises
that step's error unchanged.
"""
import time
from functools import partial
from typing import List

from ..client.client import MCClient
from ..client.exceptions import CommandError
from ..client.types import TestStep
from .config import DEFAULT_BUCKET
from .utils import logger, time_function

def build_test_steps(client: MCClient, server_alias: str, directory: str,
                     bucket: str = DEFAULT_BUCKET) -> List[TestStep]:
    """Return the ordered steps for one run, bound to ``client``."""
    return [
        TestStep("ls", partial(client.list, server_alias)),
        TestStep("mb", partial(client.make_bucket, server_alias, bucket)),
        TestStep("access", partial(client.set_access, server_alias, bucket, "readonly")),
        TestStep("cp", partial(client.copy, directory, server_alias, bucket)),
        TestStep("rm", partial(client.remove, server_alias, bucket)),
    ]

def mc_cmd(step: TestStep):
    logger.info(f"Running test {step.name}")
    try:
        result = step.action()
    except CommandError as e:
        logger.error(f"Failed, {e.output or e.message}.")
        raise
    logger.info("Success.")
    return result

def run_tests(server_alias: str, directory: str, client: MCClient = None,
              bucket: str = DEFAULT_BUCKET):
    """
    Run the test sequence against ``server_alias`` using files from ``directory``.

    Raises:
        CommandError: From the first step that fails; later steps are not run.
    """
    client = client or MCClient()
    start_time = time.time()
    for step in build_test_steps(client, server_alias, directory, bucket):
        mc_cmd(step)
    time_function("run_tests", start_time)
