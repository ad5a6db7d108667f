from __future__ import annotations

import pytest

from chait.adapters.momu import (
    INVALID_URI_REASON,
    MISSING_ID_REASON,
    ConceptPayload,
    is_concept_uri,
    map_concept,
)
from chait.domain.model import UNAVAILABLE, Language, Mapped, Skipped, normalize_record
from tests.helpers.concepts import make_concept


def _mapped(source: object) -> Mapped:
    outcome = map_concept(source)  # type: ignore[arg-type]
    assert isinstance(outcome, Mapped)
    return outcome


def test_map_concept_example_record() -> None:
    source = {
        "@id": "http://thesaurus.europeanafashion.eu/idc/123",
        "http://purl.org/dc/terms/identifier": [{"@value": "123"}],
        "http://www.w3.org/2004/02/skos/core#prefLabel": [{"@language": "en", "@value": "Coat"}],
    }

    row = normalize_record(_mapped(source).record)

    assert row["puri"] == "http://thesaurus.europeanafashion.eu/idc/123"
    assert row["provenance"] == "MoMU"
    assert row["identifier"] == "123"
    assert row["label_EN"] == "Coat"
    assert row["label_NL"] == UNAVAILABLE
    assert row["label_FR"] == UNAVAILABLE


def test_map_concept_skips_missing_id() -> None:
    outcome = map_concept({"http://purl.org/dc/terms/identifier": [{"@value": "1"}]})

    assert outcome == Skipped(reason=MISSING_ID_REASON)


def test_map_concept_skips_empty_id() -> None:
    assert map_concept({"@id": ""}) == Skipped(reason=MISSING_ID_REASON)


@pytest.mark.parametrize("source", [42, "text", None, ["@id"]])
def test_map_concept_skips_non_object_elements(source: object) -> None:
    assert map_concept(source) == Skipped(reason=MISSING_ID_REASON)  # type: ignore[arg-type]


def test_map_concept_skips_foreign_namespace() -> None:
    source = make_concept("5")
    source["@id"] = "http://vocab.getty.edu/idc/5"

    outcome = map_concept(source)

    assert outcome == Skipped(reason=INVALID_URI_REASON, record_id="http://vocab.getty.edu/idc/5")


def test_map_concept_skips_non_concept_resources() -> None:
    source = make_concept("5")
    source["@id"] = "http://thesaurus.europeanafashion.eu/scheme/5"

    outcome = map_concept(source)

    assert isinstance(outcome, Skipped)
    assert outcome.reason == INVALID_URI_REASON
    assert outcome.record_id == "http://thesaurus.europeanafashion.eu/scheme/5"


def test_is_concept_uri() -> None:
    assert is_concept_uri("http://thesaurus.europeanafashion.eu/idc/1")
    assert not is_concept_uri("https://example.org/http://thesaurus.europeanafashion.eu/idc/1")


def test_map_concept_fans_out_languages() -> None:
    draft = _mapped(
        make_concept(
            labels={"nl": "Jas", "fr": "Manteau", "en": "Coat"},
            scopes={"FR": "Vêtement long"},
        )
    ).record

    assert draft.labels == {Language.NL: "Jas", Language.FR: "Manteau", Language.EN: "Coat"}
    assert draft.scopes[Language.FR] == "Vêtement long"
    assert draft.scopes[Language.NL] == UNAVAILABLE
    assert draft.scopes[Language.EN] == UNAVAILABLE


def test_map_concept_sanitizes_free_text() -> None:
    draft = _mapped(
        make_concept(labels={"en": "<b>Bag</b>"}, scopes={"nl": "<script>x()</script>Een tas"})
    ).record

    assert draft.labels[Language.EN] == "Bag"
    assert draft.scopes[Language.NL] == "Een tas"


def test_map_concept_ignores_unusable_language_entries() -> None:
    source = make_concept()
    source["http://www.w3.org/2004/02/skos/core#prefLabel"] = [
        {"@value": "No language"},
        {"@language": "en"},
        {"@language": "en", "@value": ""},
        {"@language": "de", "@value": "Mantel"},
    ]

    draft = _mapped(source).record

    assert set(draft.labels.values()) == {UNAVAILABLE}


def test_map_concept_extracts_cross_references() -> None:
    draft = _mapped(
        make_concept(
            matches=[
                "http://vocab.getty.edu/aat/300046143",
                "http://www.wikidata.org/entity/Q11460",
                "http://example.org/other/1",
            ]
        )
    ).record

    assert draft.aat == "http://vocab.getty.edu/aat/300046143"
    assert draft.wikidata == "http://www.wikidata.org/entity/Q11460"


def test_map_concept_keeps_last_cross_reference_of_a_kind() -> None:
    draft = _mapped(
        make_concept(
            matches=["http://vocab.getty.edu/aat/1", "http://vocab.getty.edu/aat/2"],
        )
    ).record

    assert draft.aat == "http://vocab.getty.edu/aat/2"
    assert draft.wikidata is None


def test_map_concept_copies_identifier_and_modified() -> None:
    draft = _mapped(make_concept("77", modified="2019-11-02T08:15:00Z")).record

    assert draft.identifier == "77"
    assert draft.modified_at == "2019-11-02T08:15:00Z"


def test_map_concept_accepts_validated_payload() -> None:
    payload = ConceptPayload.model_validate(make_concept("9", labels={"en": "Hat"}))

    draft = _mapped(payload).record

    assert draft.labels[Language.EN] == "Hat"


def test_map_concept_leaves_identifier_absent_when_missing() -> None:
    source = make_concept("8")
    del source["http://purl.org/dc/terms/identifier"]

    draft = _mapped(source).record

    assert draft.identifier is None
    assert draft.missing_required_fields() == ["identifier"]
