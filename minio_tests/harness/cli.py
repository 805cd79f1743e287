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
Command line entry points.

``minio-tests <alias> <corpus-datadir>`` verifies the environment and runs the
mc test sequence. ``run-minio`` installs and starts the server. Both are also
available as ``python -m minio_tests.harness test|serve``.

This is the only place where harness errors become exit statuses.
"""
import argparse
import sys
import time

from ..client.client import MCClient
from ..client.exceptions import (
    CommandError,
    ConnectivityError,
    EnvironmentConfigError,
    HarnessError,
    VersionError,
)
from .config import HarnessConfig
from .launcher import run_minio
from .runner import run_tests
from .utils import logger, time_function
from .verify import verify_runtime

EXIT_OK = 0
EXIT_FAILURE = 1

# Most specific first
EXIT_STATUS = (
    (VersionError, 3),
    (EnvironmentConfigError, 4),
    (ConnectivityError, 5),
    (CommandError, 6),
)

def exit_status_for(error: HarnessError) -> int:
    for error_type, status in EXIT_STATUS:
        if isinstance(error, error_type):
            return status
    return EXIT_FAILURE

def _run(func, *args, **kwargs) -> int:
    try:
        func(*args, **kwargs)
    except HarnessError as e:
        logger.critical(str(e))
        if isinstance(e, CommandError) and e.output:
            logger.critical(f"Output of {' '.join(e.args_list)}:\n{e.output}")
        return exit_status_for(e)
    return EXIT_OK

def _add_test_arguments(parser):
    parser.add_argument('alias', help='mc alias of the server under test')
    parser.add_argument('directory', help='Local corpus directory copied into the test bucket')
    parser.add_argument('--skip-verify', action='store_true',
                        help='Do not check the toolchain, GOPATH and server before testing')

def _add_serve_arguments(parser):
    parser.add_argument('--with-client', action='store_true',
                        help='Also install the mc client before the server')
    parser.add_argument('--wait', action='store_true',
                        help='Poll the server until it answers before blocking on it')
    parser.add_argument('--cleanup', action='store_true',
                        help='Remove the automated-tests directory when the server exits')

def run_test_command(args, config: HarnessConfig = None) -> int:
    config = config or HarnessConfig.from_env()

    def _tests():
        if not args.skip_verify:
            verify_runtime(config)
        run_tests(args.alias, args.directory, MCClient(config.mc_binary), bucket=config.bucket)

    return _run(_tests)

def run_serve_command(args, config: HarnessConfig = None) -> int:
    config = config or HarnessConfig.from_env()
    return _run(run_minio, config, with_client=args.with_client, wait=args.wait, cleanup=args.cleanup)

def tests_main(argv=None) -> int:
    """Entry point for ``minio-tests``."""
    parser = argparse.ArgumentParser(prog='minio-tests',
                                     description='Run the mc test sequence against a MinIO server')
    _add_test_arguments(parser)
    args = parser.parse_args(argv)
    start_time = time.time()
    status = run_test_command(args)
    time_function("minio-tests", start_time)
    return status

def server_main(argv=None) -> int:
    """Entry point for ``run-minio``."""
    parser = argparse.ArgumentParser(prog='run-minio',
                                     description='Install and start a MinIO server for automated tests')
    _add_serve_arguments(parser)
    args = parser.parse_args(argv)
    return run_serve_command(args)

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='python -m minio_tests.harness',
                                     description='MinIO integration test harness')
    subparsers = parser.add_subparsers(dest='command', required=True)
    _add_test_arguments(subparsers.add_parser('test', help='Verify the environment and run the tests'))
    _add_serve_arguments(subparsers.add_parser('serve', help='Install and run the server'))
    args = parser.parse_args(argv)
    if args.command == 'test':
        return run_test_command(args)
    return run_serve_command(args)

def run_tests_cli():
    sys.exit(tests_main())

def run_server_cli():
    sys.exit(server_main())
