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
Install and launch utilities for the MinIO server under test.

This module fetches the server (and optionally the mc client) with
``go get -u`` and starts ``minio --anonymous server`` against a fresh
``automated-tests*`` directory created in the working directory.

The directory is kept after the server exits so its contents can be
inspected; pass ``cleanup=True`` to remove it instead.
"""

import shutil
import signal
import subprocess
import tempfile
import time

from ..client.exceptions import CommandError
from ..client.retry import retry
from .config import HarnessConfig, MC_IMPORT_PATH, MINIO_IMPORT_PATH
from .utils import logger, time_function, trace_cmd
from .verify import check_if_server_running

TEST_DIR_PREFIX = "automated-tests"

def create_test_dir(workdir="."):
    """Create a uniquely named ``automated-tests*`` directory under ``workdir``."""
    path = tempfile.mkdtemp(prefix=TEST_DIR_PREFIX, dir=workdir)
    logger.info(f"Created test directory {path}")
    return path

def remove_test_dir(path):
    logger.info(f"Removing test directory {path}")
    shutil.rmtree(path, ignore_errors=True)

def install_package(config, import_path, label):
    """
    Fetch and build a Go package with ``go get -u``.

    Args:
        config (HarnessConfig): Harness settings (for the go binary)
        import_path (str): Go import path to fetch
        label (str): Human readable name used in log lines

    Raises:
        CommandError: If go cannot be run or exits non-zero
    """
    logger.info(f"Installing {label}.")
    start_time = time.time()
    cmd = [config.go_binary, "get", "-u", import_path]
    trace_cmd(cmd[0], cmd[1:])
    try:
        proc = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, check=False)
    except OSError as e:
        raise CommandError(f"failed to run {config.go_binary}: {e}", operation="install", args=cmd) from e
    finally:
        time_function(f"install {label}", start_time)
    if proc.returncode != 0:
        output = proc.stdout.decode("utf-8", errors="replace") if proc.stdout else ""
        raise CommandError(f"installing {import_path} failed with status {proc.returncode}",
                           operation="install", args=cmd, returncode=proc.returncode, output=output)
    logger.info("Success.")

def install_server(config):
    install_package(config, MINIO_IMPORT_PATH, "minio server")

def install_client(config):
    install_package(config, MC_IMPORT_PATH, "minio client")

def start_server(config, directory):
    """Start ``minio --anonymous server <directory>`` and return the process."""
    cmd = [config.minio_binary, "--anonymous", "server", directory]
    logger.info(f"Starting minio server on {directory}")
    trace_cmd(cmd[0], cmd[1:])
    try:
        # Own session: terminal Ctrl-C reaches the server only through signal_handler
        return subprocess.Popen(cmd, start_new_session=True)
    except OSError as e:
        raise CommandError(f"failed to run {config.minio_binary}: {e}", operation="serve", args=cmd) from e

def wait_for_server(config, max_attempts=10, initial_backoff=0.5, max_backoff=5.0, sleep=time.sleep):
    """Poll the health endpoint until it answers 200 or attempts run out."""
    poll = retry(
        max_attempts=max_attempts,
        initial_backoff=initial_backoff,
        max_backoff=max_backoff,
        sleep=sleep,
    )(check_if_server_running)
    poll(config)
    logger.info(f"Server ready at {config.endpoint}")

def setup_signal_handlers(process):
    """
    Forward SIGINT and SIGTERM to the server process.

    Returns:
        dict: ``{"signal": None}``, updated with the forwarded signal number
    """
    state = {"signal": None, "previous": {}}

    def signal_handler(sig, frame):
        logger.info(f"Signal {sig} received, stopping server...")
        state["signal"] = sig
        if process.poll() is None:
            process.send_signal(sig)

    for sig in (signal.SIGINT, signal.SIGTERM):
        state["previous"][sig] = signal.signal(sig, signal_handler)
    return state

def restore_signal_handlers(state):
    for sig, handler in state["previous"].items():
        signal.signal(sig, handler)

def run_minio(config: HarnessConfig = None, with_client=False, wait=False, cleanup=False,
              wait_attempts=10, sleep=time.sleep):
    """
    Install the server and run it until it exits.

    Args:
        config (HarnessConfig, optional): Harness settings. Defaults to the environment.
        with_client (bool): Also install the mc client first.
        wait (bool): Poll the health endpoint after starting the server.
        cleanup (bool): Remove the test directory once the server exits.
        wait_attempts (int): Health polls before giving up.
        sleep (callable): Wait function used between health polls.

    Returns:
        str: Path of the test directory.

    Raises:
        CommandError: Install failed, or the server could not start or exited non-zero.
        ConnectivityError: ``wait`` was requested and the server never became ready.
    """
    config = config or HarnessConfig.from_env()
    start_time = time.time()
    directory = create_test_dir(config.workdir)
    try:
        if with_client:
            install_client(config)
        install_server(config)

        process = start_server(config, directory)
        state = setup_signal_handlers(process)
        try:
            if wait:
                wait_for_server(config, max_attempts=wait_attempts, sleep=sleep)
        except Exception:
            process.terminate()
            process.wait()
            restore_signal_handlers(state)
            raise
        returncode = process.wait()
        restore_signal_handlers(state)
        if returncode != 0 and state["signal"] is None:
            raise CommandError(f"minio server exited with status {returncode}", operation="serve",
                               args=process.args, returncode=returncode)
        logger.info("Success.")
    finally:
        if cleanup:
            remove_test_dir(directory)
        else:
            logger.info(f"Keeping test directory {directory} for inspection")
        time_function("run_minio", start_time)
    return directory
