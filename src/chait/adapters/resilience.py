"""Bounded retry for flaky store operations."""

from __future__ import annotations

import time
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING, TypeVar

from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_incrementing,
)

from chait.config import RetryPolicy

if TYPE_CHECKING:
    from tenacity import RetryCallState

log = getLogger(__name__)

Sleeper = Callable[[float], None]

T = TypeVar("T")


class RetryExhaustedError(RuntimeError):
    """Raised when every attempt of a retried operation failed.

    Attributes:
        operation: Human-readable name of the operation, e.g. ``"upsert"``.
        attempts: Total number of attempts made.
        last_error: The exception raised by the final attempt.
    """

    def __init__(self, operation: str, attempts: int, last_error: BaseException) -> None:
        self.operation = operation
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(
            f"{operation.capitalize()} operation failed after {attempts} retries: {last_error}"
        )


def build_retrying(
    operation: str,
    policy: RetryPolicy,
    *,
    retry_on: tuple[type[BaseException], ...],
    sleep: Sleeper,
) -> Retrying:
    """Translate ``policy`` into a tenacity controller (waits of 1x, 2x, ... backoff)."""

    def log_failed_attempt(retry_state: RetryCallState) -> None:
        error = retry_state.outcome.exception() if retry_state.outcome else None
        log.warning(
            "%s attempt %d/%d failed: %s",
            operation.capitalize(),
            retry_state.attempt_number,
            policy.max_attempts,
            error,
        )

    return Retrying(
        stop=stop_after_attempt(policy.max_attempts),
        wait=wait_incrementing(start=policy.backoff_seconds, increment=policy.backoff_seconds),
        retry=retry_if_exception_type(retry_on),
        sleep=sleep,
        before_sleep=log_failed_attempt,
    )


def retry_call(
    operation: str,
    func: Callable[[], T],
    *,
    policy: RetryPolicy | None = None,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    sleep: Sleeper = time.sleep,
) -> T:
    """Call ``func`` until it succeeds or ``policy.max_attempts`` is reached.

    Exceptions outside ``retry_on`` propagate immediately. No pause follows the
    final attempt.
    """

    effective = policy or RetryPolicy()
    retrying = build_retrying(operation, effective, retry_on=retry_on, sleep=sleep)
    try:
        return retrying(func)
    except RetryError as exc:
        last_error = exc.last_attempt.exception()
        if last_error is None:
            raise
        log.warning("%s gave up after %d attempts", operation.capitalize(), effective.max_attempts)
        raise RetryExhaustedError(operation, effective.max_attempts, last_error) from last_error
