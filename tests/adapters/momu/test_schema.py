from __future__ import annotations

import pytest
from pydantic import ValidationError

from chait.adapters.momu import ConceptPayload
from tests.helpers.concepts import make_concept


def test_concept_payload_exposes_named_predicates() -> None:
    payload = ConceptPayload.model_validate(
        make_concept(
            "123",
            labels={"en": "Coat"},
            scopes={"nl": "Lange jas"},
            matches=["http://vocab.getty.edu/aat/300046143"],
            modified="2020-05-01T12:00:00",
        )
    )

    assert payload.id == "http://thesaurus.europeanafashion.eu/idc/123"
    assert payload.identifier == "123"
    assert payload.modified_at == "2020-05-01T12:00:00"
    assert [(item.language, item.value) for item in payload.pref_labels] == [("en", "Coat")]
    assert [(item.language, item.value) for item in payload.scope_notes] == [("nl", "Lange jas")]
    assert [item.id for item in payload.exact_matches] == ["http://vocab.getty.edu/aat/300046143"]


def test_concept_payload_defaults_when_predicates_absent() -> None:
    payload = ConceptPayload.model_validate({"@id": "http://thesaurus.europeanafashion.eu/idc/1"})

    assert payload.identifier is None
    assert payload.modified_at is None
    assert payload.pref_labels == []
    assert payload.exact_matches == []


def test_concept_payload_ignores_non_list_predicates() -> None:
    payload = ConceptPayload.model_validate(
        {
            "@id": "http://thesaurus.europeanafashion.eu/idc/1",
            "http://www.w3.org/2004/02/skos/core#prefLabel": {"@value": "Coat"},
            "http://purl.org/dc/terms/identifier": "1",
        }
    )

    assert payload.pref_labels == []
    assert payload.identifier is None


def test_concept_payload_stringifies_numeric_literals() -> None:
    payload = ConceptPayload.model_validate(
        {
            "@id": "http://thesaurus.europeanafashion.eu/idc/42",
            "http://purl.org/dc/terms/identifier": [{"@value": 42}],
        }
    )

    assert payload.identifier == "42"


def test_concept_payload_rejects_non_mapping_input() -> None:
    with pytest.raises(ValidationError):
        ConceptPayload.model_validate(["not", "a", "node"])
