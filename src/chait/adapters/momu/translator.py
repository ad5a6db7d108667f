"""Translate MoMU JSON-LD concepts into thesaurus record drafts."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, Final

from chait.domain.model import (
    Language,
    Mapped,
    MappedOutcome,
    Organization,
    Skipped,
    ThesaurusRecordDraft,
)
from chait.domain.sanitization import strip_markup

from .schema import ConceptPayload, ConceptPayloadInput

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import LiteralValue, NodeReference

THESAURUS_NAMESPACE: Final[str] = "http://thesaurus.europeanafashion.eu"
CONCEPT_MARKER: Final[str] = "idc"
AAT_MARKER: Final[str] = "aat"
WIKIDATA_MARKER: Final[str] = "wikidata"

MISSING_ID_REASON: Final[str] = "Missing @id field"
INVALID_URI_REASON: Final[str] = "Invalid URI format"

log = getLogger(__name__)


def _ensure_concept_payload(source: ConceptPayloadInput) -> ConceptPayload:
    if isinstance(source, ConceptPayload):
        return source
    return ConceptPayload.model_validate(source)


def is_concept_uri(uri: str) -> bool:
    """Return whether ``uri`` names a concept of the Europeana Fashion thesaurus."""

    return uri.startswith(THESAURUS_NAMESPACE) and CONCEPT_MARKER in uri


def map_concept(
    source: ConceptPayloadInput,
    *,
    organization: Organization = Organization.MOMU,
) -> MappedOutcome:
    """Map one exported concept to a draft, or explain why it was skipped.

    An array element that is not an object has no ``@id`` and is skipped.
    Raises ``pydantic.ValidationError`` when an object is not shaped like a
    JSON-LD node; callers treat that as a failed record.
    """

    if not isinstance(source, (ConceptPayload, Mapping)):
        return Skipped(reason=MISSING_ID_REASON)
    payload = _ensure_concept_payload(source)

    puri = payload.id
    if not puri:
        return Skipped(reason=MISSING_ID_REASON)
    if not is_concept_uri(puri):
        return Skipped(reason=INVALID_URI_REASON, record_id=puri)

    draft = ThesaurusRecordDraft(
        provenance=organization.provenance,
        puri=puri,
        identifier=payload.identifier,
        modified_at=payload.modified_at,
    )
    _fill_language_slots(draft.labels, payload.pref_labels, puri=puri)
    _fill_language_slots(draft.scopes, payload.scope_notes, puri=puri)
    _apply_exact_matches(draft, payload.exact_matches)
    return Mapped(record=draft)


def _fill_language_slots(
    slots: dict[Language, str],
    values: Iterable[LiteralValue],
    *,
    puri: str,
) -> None:
    for item in values:
        if not item.value:
            continue
        language = Language.parse(item.language)
        if language is None:
            log.debug("Ignoring value with unsupported language %r on %s", item.language, puri)
            continue
        slots[language] = strip_markup(item.value)


def _apply_exact_matches(draft: ThesaurusRecordDraft, references: Iterable[NodeReference]) -> None:
    # Later links of the same kind replace earlier ones.
    for reference in references:
        target = reference.id
        if not target:
            continue
        if AAT_MARKER in target:
            if draft.aat is not None and draft.aat != target:
                log.debug("Replacing AAT link %s with %s on %s", draft.aat, target, draft.puri)
            draft.aat = target
        if WIKIDATA_MARKER in target:
            if draft.wikidata is not None and draft.wikidata != target:
                log.debug(
                    "Replacing Wikidata link %s with %s on %s", draft.wikidata, target, draft.puri
                )
            draft.wikidata = target
