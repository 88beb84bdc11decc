import pytest

from nebula4x.strings import csv_escape, to_lower


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("hello", "hello"),
        ("a,b", '"a,b"'),
        ('a"b', '"a""b"'),
        ("a\nb", '"a\nb"'),
    ],
)
def test_csv_escape_cases(raw, expected):
    assert csv_escape(raw) == expected


def test_csv_escape_carriage_return_is_quoted():
    assert csv_escape("a\rb") == '"a\rb"'


def test_csv_escape_empty_string_unchanged():
    assert csv_escape("") == ""


def test_csv_escape_quoted_value_starts_and_ends_with_quote():
    out = csv_escape('He said "ok", then left')
    assert out.startswith('"') and out.endswith('"')
    assert out[1:-1].replace('""', '"') == 'He said "ok", then left'


def test_to_lower_ascii():
    assert to_lower("HeLLo World 42") == "hello world 42"


def test_to_lower_leaves_non_ascii_alone():
    assert to_lower("ÄB") == "Äb"


def test_to_lower_is_idempotent():
    once = to_lower("Automated MINE")
    assert to_lower(once) == once