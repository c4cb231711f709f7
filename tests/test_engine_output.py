import json
import logging

import pytest

from transcript_annotator.core import parse_engine_output


def test_timed_result_document():
    raw = json.dumps(
        {
            "result": [
                {"word": "hello", "start": 0.0, "end": 0.5, "conf": 1.0},
                {"word": "world", "start": 0.6, "end": 1.0},
            ],
            "text": "hello world",
        }
    )

    output = parse_engine_output(raw)

    assert output.text == "hello world"
    assert output.words == ("hello", "world")
    assert output.has_word_timing
    assert output.timings[1].start == 0.6
    assert output.timings[1].index == 1
    assert not output.malformed


def test_words_key_is_accepted_and_result_wins():
    output = parse_engine_output({"words": [{"word": "alias", "start": 0, "end": 1}]})
    assert output.words == ("alias",)
    assert output.text == "alias"

    both = parse_engine_output(
        {
            "result": [{"word": "primary", "start": 0, "end": 1}],
            "words": [{"word": "ignored", "start": 0, "end": 1}],
        }
    )
    assert both.words == ("primary",)


def test_text_only_document_carries_duration():
    output = parse_engine_output({"text": " just text "}, total_duration=4.0)

    assert output.text == "just text"
    assert output.words == ("just", "text")
    assert not output.has_word_timing
    assert output.total_duration == 4.0


def test_plain_text_and_bytes():
    assert parse_engine_output("not json at all").words == ("not", "json", "at", "all")
    assert parse_engine_output(b'{"text": "from bytes"}').text == "from bytes"
    assert parse_engine_output('"quoted text"').words == ("quoted", "text")



@pytest.mark.parametrize("raw", ["42", "1.5", "null", "true", " false "])
def test_json_scalars_are_plain_text(raw):
    output = parse_engine_output(raw, total_duration=1.0)

    assert not output.malformed
    assert output.text == raw.strip()
    assert output.words == (raw.strip(),)
    assert output.total_duration == 1.0

def test_untimed_entries_have_no_timing():
    output = parse_engine_output({"result": [{"word": "a"}, {"word": "b"}]})

    assert output.words == ("a", "b")
    assert output.timings == ()


def test_empty_inputs():
    for raw in (None, "", "   ", {}, {"result": []}):
        output = parse_engine_output(raw)
        assert output.is_empty
        assert not output.malformed


def test_malformed_documents_are_flagged(caplog):
    bad_documents = [
        {"result": "nope"},
        {"result": [{"start": 0.0, "end": 1.0}]},
        {"result": [{"word": "x", "start": "0", "end": 1.0}]},
        {"result": [{"word": "x", "start": 0.0, "end": 1.0}, {"word": "y"}]},
        {"result": ["x"]},
        {"text": 42},
        "[1, 2, 3]",
    ]

    with caplog.at_level(logging.WARNING):
        for raw in bad_documents:
            output = parse_engine_output(raw)
            assert output.malformed
            assert output.is_empty

    assert "Discarding malformed engine output" in caplog.text
