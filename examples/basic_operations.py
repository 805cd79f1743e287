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
from minio_tests import HarnessConfig, HarnessError, MCClient, run_tests, verify_runtime
import sys

def main():
    if len(sys.argv) != 3:
        print("usage: basic_operations.py <alias> <corpus-datadir>")
        return 2

    alias, corpus = sys.argv[1], sys.argv[2]
    config = HarnessConfig.from_env()

    try:
        # Check go, GOPATH and the server at config.endpoint
        verify_runtime(config)
        print("Environment verified")

        # ls, mb, access set readonly, cp ..., rm --force ...
        run_tests(alias, corpus, client=MCClient(config.mc_binary), bucket=config.bucket)
        print(f"Test sequence passed against {alias}/{config.bucket}")
    except HarnessError as e:
        print(f"Harness failed: {e}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
