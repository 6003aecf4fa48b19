import pytest

from zena.responses import AIResponse, parse_responses


def test_parse_full_entry():
    data = [
        {
            "text": "rm -rf build",
            "type": "Command",
            "color": "red",
            "revertCommand": "git checkout build",
        }
    ]
    assert parse_responses(data) == [
        AIResponse(
            text="rm -rf build",
            type="Command",
            color="red",
            revert_command="git checkout build",
        )
    ]


def test_missing_and_null_fields_become_empty():
    [response] = parse_responses([{"text": "hello", "color": None}])
    assert response.type == ""
    assert response.color == ""
    assert response.revert_command == ""


def test_to_dict_omits_empty_optional_fields():
    response = AIResponse(text="hello", type="Note")
    assert response.to_dict() == {"text": "hello", "type": "Note"}


def test_round_trip_through_dict():
    originals = [
        AIResponse(text="a", type="Note"),
        AIResponse(text="b", type="Command", color="green", revert_command="undo"),
    ]
    assert parse_responses([r.to_dict() for r in originals]) == originals


def test_unknown_keys_ignored():
    [response] = parse_responses([{"text": "t", "type": "Warning", "extra": 3}])
    assert response == AIResponse(text="t", type="Warning")


def test_null_array_gives_no_responses():
    assert parse_responses(None) == []


@pytest.mark.parametrize(
    "data",
    [
        {"text": "not an array"},
        ["plain string"],
        [{"text": 42, "type": "Note"}],
        [{"text": "x", "type": ["Note"]}],
    ],
)
def test_invalid_data_raises(data):
    with pytest.raises(ValueError):
        parse_responses(data)