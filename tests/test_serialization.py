import json

from consultations_service.schemas.program import Certification, ProgramDay
from consultations_service.serialization import (
    dump_certifications,
    dump_program,
    dump_social_links,
    dump_tags,
    load_certifications,
    load_program,
    load_social_links,
    load_tags,
)

from conftest import sample_program


def test_program_round_trip_keeps_order_and_omits_absent_fields():
    program = [ProgramDay.model_validate(day) for day in sample_program()]

    raw = dump_program(program)
    stored = json.loads(raw)

    assert [d["day"] for d in stored] == ["Day 1", 2]
    assert [e["name"] for e in stored[0]["exercises"]] == ["Squat", "Plank"]
    # optional fields that were never given are not written as null
    assert stored[0]["exercises"][1] == {"name": "Plank", "duration": "60s"}

    assert load_program(raw) == program


def test_empty_columns_load_as_empty_values():
    assert load_tags(None) == []
    assert load_program("") == []
    assert load_certifications(None) == []
    assert load_social_links(None) == {}
    assert dump_tags(None) is None


def test_corrupt_column_falls_back_to_default():
    assert load_program("{not json") == []
    assert load_tags('{"a": 1}') == []


def test_tags_and_profile_fields_round_trip():
    assert load_tags(dump_tags(["b", "a", "c"])) == ["b", "a", "c"]

    certs = [Certification(name="CPT", issuer="NASM", year="2020"), Certification(name="CSCS", issuer="NSCA", year="2022")]
    assert load_certifications(dump_certifications(certs)) == certs

    links = {"instagram": "https://instagram.com/coach", "youtube": "https://youtube.com/@coach"}
    assert load_social_links(dump_social_links(links)) == links
