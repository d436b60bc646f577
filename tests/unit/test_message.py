from __future__ import annotations

import dataclasses

import pytest
from release_meta.message import Message
from release_meta.policy import ExtractionPolicy


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", Message()),
        ("Foo", Message(lines=("Foo",))),
        ("Foo BY Bar", Message(lines=("Foo BY Bar",), authors=("Bar",))),
        (
            "Foo BY Bar (1996)",
            Message(lines=("Foo BY Bar (1996)",), authors=("Bar",), release_year="1996"),
        ),
        ("(1996)", Message(lines=("(1996)",), release_year="1996")),
        (
            "Foo by Bar, dmm4 edition",
            Message(lines=("Foo by Bar, dmm4 edition",), authors=("Bar",)),
        ),
        ("Foo (abc) - by Bar", Message(lines=("Foo (abc) - by Bar",), authors=("Bar",))),
    ],
)
def test_from_text(raw: str, expected: Message) -> None:
    assert Message.from_text(raw) == expected


def test_from_text_multiline_release_note() -> None:
    raw = (
        "Great Album by Some Band (2001)\n"
        "\n"
        "  Remastered   by Engineer\x07\n"
        "Original 1998 release\n"
    )

    message = Message.from_text(raw)

    assert message.lines == (
        "Great Album by Some Band (2001)",
        "Remastered by Engineer",
        "Original 1998 release",
    )
    assert message.authors == ("Some Band", "Engineer")
    assert message.release_year == "2001"


def test_from_text_with_policy() -> None:
    policy = ExtractionPolicy(year_max=2029, stop_chars="([,")

    message = Message.from_text("Single by Artist - Live (2028)", policy=policy)

    assert message.authors == ("Artist - Live",)
    assert message.release_year == "2028"


def test_from_lines_matches_from_text() -> None:
    raw = "A by B\nC 2003"
    assert Message.from_lines(["A by B", "C 2003"]) == Message.from_text(raw)


def test_from_lines_cleans_and_drops_empty_lines() -> None:
    message = Message.from_lines(["", "  by x  "])

    assert message.lines == ("by x",)
    assert message.authors == ("x",)


@pytest.mark.parametrize(
    "lines, expected",
    [
        (["   ", "\t", "\x00"], ()),
        (["a\x01\x02b", "c   d"], ("a b", "c d")),
        (["clean line"], ("clean line",)),
    ],
)
def test_from_lines_keeps_line_invariant(lines: list[str], expected: tuple[str, ...]) -> None:
    assert Message.from_lines(lines).lines == expected


def test_from_lines_takes_first_year() -> None:
    message = Message.from_lines(["", "Live 2004", "Studio 1999"])
    assert message.release_year == "2004"


def test_message_is_immutable_value() -> None:
    first = Message.from_text("Foo by Bar 1997")
    second = Message.from_text("Foo by Bar 1997")

    assert first == second
    assert len({first, second}) == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        first.release_year = "2000"  # type: ignore[misc]


def test_asdict_is_json_ready() -> None:
    message = Message.from_text("Foo BY Bar (1996)\nsecond line")
    assert message.asdict() == {
        "lines": ["Foo BY Bar (1996)", "second line"],
        "authors": ["Bar"],
        "release_year": "1996",
    }


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "\n\n\n",
        "by by by by",
        "Foo by Bar\nBaz by Qux\n(1996) by",
        "\x00\x01 by \x02\x03\n 2024 2001 \n",
        "a\nb by c\n\n d by e, f (2010) [1999]\n",
    ],
)
def test_message_invariants(raw: str) -> None:
    message = Message.from_text(raw)

    assert all(line and not line.isspace() for line in message.lines)
    assert all(line == line.strip() for line in message.lines)
    assert len(message.authors) <= len(message.lines)
    if message.release_year is not None:
        assert len(message.release_year) == 4
        assert message.release_year.isascii() and message.release_year.isdigit()
        assert 1996 <= int(message.release_year) <= 2025
