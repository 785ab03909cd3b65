import time

import pytest

from services.ai.exceptions import PayloadDecodeError, PayloadNotFoundError
from services.ai.extraction import (
    EmbeddedJsonExtractor,
    PlainTextExtractor,
    StrictJsonExtractor,
    StrictThenLenientExtractor,
    find_balanced_object,
)


def test_find_balanced_object_in_prose() -> None:
    text = 'Sure! Here is your plan: {"days": [{"day": 1}]} Have fun.'
    assert find_balanced_object(text) == '{"days": [{"day": 1}]}'


def test_braces_inside_strings_do_not_count() -> None:
    text = 'Plan: {"tip": "use {curly} braces \\" carefully }", "n": 1} done'
    assert find_balanced_object(text) == (
        '{"tip": "use {curly} braces \\" carefully }", "n": 1}'
    )


def test_unclosed_first_brace_is_skipped() -> None:
    text = 'Note {this is prose {"ok": true}'
    assert find_balanced_object(text) == '{"ok": true}'


def test_many_unclosed_braces_scan_in_one_pass() -> None:
    started = time.perf_counter()

    assert find_balanced_object("{" * 200_000) is None
    assert find_balanced_object("{" * 50_000 + '{"ok": 1}') == '{"ok": 1}'

    assert time.perf_counter() - started < 2.0


def test_deeply_nested_payload_raises_decode_error() -> None:
    depth = 100_000
    text = 'Here: {"days": ' + "[" * depth + "]" * depth + "}"

    with pytest.raises(PayloadDecodeError):
        StrictThenLenientExtractor().extract(text)


def test_no_object_returns_none() -> None:
    assert find_balanced_object("no structured data here") is None
    assert find_balanced_object("{ never closed") is None


def test_trailing_prose_braces_are_not_swallowed() -> None:
    # A greedy first-to-last brace match would include "{see notes}"
    text = '{"a": 1} and later {see notes}'
    assert EmbeddedJsonExtractor().extract(text) == {"a": 1}


def test_strict_accepts_whitespace_wrapped_object() -> None:
    assert StrictJsonExtractor().extract('\n  {"a": 1}\n') == {"a": 1}


def test_strict_rejects_prose() -> None:
    with pytest.raises(PayloadNotFoundError):
        StrictJsonExtractor().extract('Here: {"a": 1}')


def test_strict_then_lenient_handles_markdown_fence() -> None:
    text = 'Here you go:\n```json\n{"response": "hi"}\n```'
    assert StrictThenLenientExtractor().extract(text) == {"response": "hi"}


def test_malformed_embedded_object_raises_decode_error() -> None:
    with pytest.raises(PayloadDecodeError):
        StrictThenLenientExtractor().extract("Result: {days: [1, 2,]}")


def test_non_object_json_is_rejected() -> None:
    with pytest.raises(PayloadNotFoundError):
        StrictThenLenientExtractor().extract("[1, 2, 3]")


def test_plain_text_extractor_wraps_reply() -> None:
    assert PlainTextExtractor().extract("  Visit Porto in May.  ") == {
        "response": "Visit Porto in May."
    }


def test_plain_text_extractor_rejects_empty_reply() -> None:
    with pytest.raises(PayloadNotFoundError):
        PlainTextExtractor().extract("   ")
