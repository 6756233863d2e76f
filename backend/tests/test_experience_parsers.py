import pytest

from app.utils.errors import ValidationFailed
from app.utils.experience_parsers import (
    coerce_string_array,
    parse_career_progression,
    parse_previous_role,
    split_multiline,
)


def test_coerce_string_array_variants():
    assert coerce_string_array(["Python", " Python ", "", 3, "SQL"]) == ["Python", "SQL"]
    assert coerce_string_array('["Go", "Rust"]') == ["Go", "Rust"]
    assert coerce_string_array("- Python\n• SQL; Docker") == ["Python", "SQL", "Docker"]
    assert coerce_string_array(None) == []


def test_split_multiline():
    assert split_multiline("one\n\n two \n") == ["one", "two"]
    assert split_multiline(["a", " ", "b"]) == ["a", "b"]
    assert split_multiline("") == []


def test_parse_career_progression_from_json_text():
    value = '[{"title": "Engineer", "period": "2020-2021", "skills": "Python\\nSQL"}]'
    assert parse_career_progression(value) == [
        {
            "title": "Engineer",
            "period": "2020-2021",
            "type": "standard",
            "description": "",
            "responsibilities": [],
            "skills": ["Python", "SQL"],
        }
    ]
    assert parse_career_progression("   ") is None
    assert parse_career_progression([]) is None


@pytest.mark.parametrize(
    "value,message",
    [
        ('{"title": "x"}', "Career progression must be a JSON array"),
        ("[1]", "Career progression entries must be objects"),
        ('[{"title": "Engineer"}]', "Career progression entries require a title and period"),
    ],
)
def test_parse_career_progression_errors(value, message):
    with pytest.raises(ValidationFailed) as exc:
        parse_career_progression(value)
    assert exc.value.message == message


def test_parse_career_progression_invalid_json():
    with pytest.raises(ValidationFailed) as exc:
        parse_career_progression("[{")
    assert exc.value.message.startswith("Invalid JSON for career progression")


def test_parse_previous_role():
    assert parse_previous_role({"title": " Dev ", "period": "2019"}) == {"title": "Dev", "period": "2019"}
    assert parse_previous_role('{"title": "Dev", "period": "2019", "note": "Promoted"}')["note"] == "Promoted"
    assert parse_previous_role(None) is None
    with pytest.raises(ValidationFailed) as exc:
        parse_previous_role("[]")
    assert exc.value.message == "Previous role must be a JSON object"
    with pytest.raises(ValidationFailed) as exc:
        parse_previous_role({"title": "Dev"})
    assert exc.value.message == "Previous role requires a title and period"
