"""Application orchestration entry points."""

from __future__ import annotations

import json
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from chait.adapters.momu import map_concept
from chait.config import validate_organization
from chait.domain.batch import run_batch
from chait.domain.model import Organization

if TYPE_CHECKING:
    from chait.domain.model import BatchResult
    from chait.domain.ports import RecordMapper, ThesaurusGateway

log = getLogger(__name__)

MAPPERS: dict[Organization, RecordMapper] = {
    Organization.MOMU: map_concept,
}


class InputFileError(RuntimeError):
    """Raised when the export file is missing or is not a JSON array."""


def load_source_records(path: str | Path) -> list[object]:
    """Read the export at ``path`` and return its top-level JSON array."""

    source = Path(path)
    if not source.is_file():
        raise InputFileError(f"File not found: {source}")

    try:
        with source.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InputFileError(f"Could not read {source}: {exc}") from exc

    if not isinstance(data, list):
        raise InputFileError(f"Expected a JSON array of records in {source}")
    return data


def resolve_mapper(organization: str | Organization) -> RecordMapper:
    resolved = Organization(validate_organization(str(organization)))
    return MAPPERS[resolved]


def ingest_file(
    path: str | Path,
    organization: str | Organization,
    *,
    gateway: ThesaurusGateway,
) -> BatchResult:
    """Map every record of an export file and upsert it through ``gateway``."""

    mapper = resolve_mapper(organization)
    records = load_source_records(path)
    log.info("Starting %s ingest of %s records from %s", organization, len(records), path)

    result = run_batch(records, mapper=mapper, gateway=gateway)

    log.info(
        "Finished %s ingest: successful=%s, failed=%s, skipped=%s",
        organization,
        result.successful,
        result.failed,
        result.skipped,
    )
    return result
