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
Retry Module.

This module provides a retry decorator with exponential backoff. The launcher
uses it to poll a freshly started server until its health endpoint answers.
The environment verifier never retries.

Functions:
    retry: Decorator for retrying functions with exponential backoff.
"""
import time
from functools import wraps
from typing import Type, Callable, Any, Tuple
from .exceptions import HarnessError, ConnectivityError
from ..harness.utils import logger

def retry(
    max_attempts: int = 5,
    initial_backoff: float = 0.1,
    max_backoff: float = 5.0,
    backoff_multiplier: float = 2.0,
    retryable_exceptions: Tuple[Type[Exception], ...] = (ConnectivityError,),
    sleep: Callable[[float], None] = time.sleep,
) -> Callable:
    """
    Decorator for retrying a function with exponential backoff.

    Args:
        max_attempts (int): Maximum number of attempts. Defaults to 5.
        initial_backoff (float): Initial backoff time in seconds. Defaults to 0.1.
        max_backoff (float): Maximum backoff time in seconds. Defaults to 5.0.
        backoff_multiplier (float): Multiplier for exponential backoff. Defaults to 2.0.
        retryable_exceptions (Tuple[Type[Exception], ...]): Exceptions that trigger a retry.
            Defaults to (ConnectivityError,).
        sleep (Callable[[float], None]): Function used to wait between attempts.

    Returns:
        Callable: A decorator that wraps the function.
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            """
            Executes the function with retry logic and exponential backoff.

            Raises:
                HarnessError: The last retryable error once all attempts fail.
            """
            last_exception = None
            backoff = initial_backoff

            for attempt in range(max_attempts):
                try:
                    return func(*args, **kwargs)
                except retryable_exceptions as e:
                    last_exception = e
                    if attempt < max_attempts - 1:
                        logger.info(f"{func.__name__} failed ({e}). Attempt {attempt + 1}/{max_attempts}. "
                                    f"Retrying after {backoff:.2f}s...")
                        sleep(backoff)
                        backoff = min(backoff * backoff_multiplier, max_backoff)

            logger.error(f"{func.__name__} failed after {max_attempts} attempts")
            if isinstance(last_exception, HarnessError):
                raise last_exception
            raise HarnessError(
                f"Operation failed after {max_attempts} attempts: {str(last_exception)}"
            ) from last_exception

        return wrapper
    return decorator
