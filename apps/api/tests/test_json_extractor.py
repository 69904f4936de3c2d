import pytest

from simplifier.services.json_extractor import extract_json_object


def test_parses_bare_json():
    assert extract_json_object('{"tldr": "ok", "confidence": 80}') == {
        "tldr": "ok",
        "confidence": 80,
    }


def test_parses_json_with_surrounding_whitespace():
    assert extract_json_object('\n\n  {"tldr": "ok"}  \n') == {"tldr": "ok"}


def test_parses_fenced_block_case_insensitive():
    raw = 'Here you go:\n```JSON\n{"tldr": "fenced"}\n```\nHope that helps!'
    assert extract_json_object(raw) == {"tldr": "fenced"}


def test_fenced_block_is_preferred_over_brace_slice():
    # A brace slice would span both objects and fail; the fence parses cleanly.
    raw = 'Ignore {this}.\n```json\n{"tldr": "inner"}\n```\nand {that}'
    assert extract_json_object(raw) == {"tldr": "inner"}


def test_recovers_object_wrapped_in_prose():
    raw = 'Sure! The summary is {"tldr": "prose", "riskFlags": ["a"]} -- enjoy.'
    assert extract_json_object(raw) == {"tldr": "prose", "riskFlags": ["a"]}


def test_recovers_nested_object_between_first_and_last_brace():
    raw = 'Result: {"obligations": {"you": ["pay"], "them": []}} done'
    assert extract_json_object(raw) == {"obligations": {"you": ["pay"], "them": []}}


def test_unlabelled_fence_falls_through_to_brace_slice():
    raw = '```\n{"tldr": "plain fence"}\n```'
    assert extract_json_object(raw) == {"tldr": "plain fence"}


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "Sorry, I can't help with that.",
        "{not json at all}",
        "} backwards {",
        "```json\nstill not json\n```",
        '{"tldr": "truncated',
    ],
)
def test_malformed_input_returns_empty_object(raw):
    assert extract_json_object(raw) == {}


@pytest.mark.parametrize("raw", ["[1, 2, 3]", '"just a string"', "42", "null"])
def test_non_object_json_returns_empty_object(raw):
    assert extract_json_object(raw) == {}


@pytest.mark.parametrize("raw", [None, 42, ["tldr"], b'{"tldr": "bytes"}'])
def test_non_string_input_returns_empty_object(raw):
    assert extract_json_object(raw) == {}


def test_dict_input_is_returned_unchanged():
    payload = {"tldr": "already parsed"}
    assert extract_json_object(payload) is payload
