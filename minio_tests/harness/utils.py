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
Utility functions for the minio-tests harness.

This module provides logging configuration and small helpers shared by
the verifier, the launcher and the test runner.
"""

import logging
import time
import os

# Enable a debug trace of every external command if requested
TRACE_COMMANDS = os.environ.get('MINIO_TESTS_TRACE_COMMANDS', '').lower() in ('true', '1', 'yes')

LOG_LEVEL = os.environ.get('MINIO_TESTS_LOG_LEVEL', 'INFO').upper()

# Configure logging
logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s'
)
logger = logging.getLogger('MinioTests')
logger.setLevel(LOG_LEVEL)

def time_function(func_name, start_time):
    """
    Helper function for timing operations.

    Calculates and logs the elapsed time for a function call.

    Args:
        func_name (str): Name of the function being timed
        start_time (float): Start time from time.time()

    Returns:
        float: Elapsed time in seconds
    """
    elapsed = time.time() - start_time
    logger.debug(f"{func_name} completed in {elapsed:.4f} seconds")
    return elapsed

def trace_cmd(program, args):
    """
    Trace an external command for debugging purposes.

    Logs the full argument vector when the MINIO_TESTS_TRACE_COMMANDS
    environment variable is set.

    Args:
        program (str): Executable being invoked
        args (list): Arguments passed to the executable
    """
    if TRACE_COMMANDS:
        logger.debug(f"TRACE: {program} {' '.join(args)}")
