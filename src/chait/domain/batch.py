"""Run a collection of provider records through the mapping and persistence stages."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from chait.domain.model import BatchError, BatchResult, Mapped, Skipped

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chait.domain.ports import RecordMapper, ThesaurusGateway

DEFAULT_PROGRESS_EVERY = 10

log = getLogger(__name__)


def run_batch(
    records: Sequence[object],
    *,
    mapper: RecordMapper,
    gateway: ThesaurusGateway,
    progress_every: int = DEFAULT_PROGRESS_EVERY,
) -> BatchResult:
    """Map and persist ``records`` one at a time, in order.

    A failing record is tallied and described in ``errors``; it never stops the
    remaining records from being processed.
    """

    result = BatchResult(total=len(records))

    for index, source in enumerate(records):
        try:
            _process_record(index, source, mapper=mapper, gateway=gateway, result=result)
        except Exception as exc:  # noqa: BLE001
            log.exception("Unexpected error while processing record %s", index)
            result.failed += 1
            result.errors.append(BatchError(index=index, error=str(exc)))

        processed = index + 1
        if progress_every > 0 and processed % progress_every == 0:
            log.info("Processed %s/%s records...", processed, result.total)

    return result


def _process_record(
    index: int,
    source: object,
    *,
    mapper: RecordMapper,
    gateway: ThesaurusGateway,
    result: BatchResult,
) -> None:
    outcome = mapper(source)

    if isinstance(outcome, Skipped):
        log.debug("Skipping record %s: %s", index, outcome.reason)
        result.skipped += 1
        result.errors.append(BatchError(index=index, id=outcome.record_id, reason=outcome.reason))
        return

    if not isinstance(outcome, Mapped):
        raise TypeError(f"Unexpected mapping outcome: {outcome!r}")

    persisted = gateway.upsert(outcome.record)
    if persisted.success:
        result.successful += 1
        return

    result.failed += 1
    result.errors.append(
        BatchError(index=index, puri=outcome.record.puri, error=persisted.error)
    )
