from __future__ import annotations

from functools import reduce

import pytest

from plainpad.domain.buffer import (
    Backspace,
    Delete,
    Insert,
    Motion,
    Move,
    MoveTo,
    Replace,
    TextBuffer,
)


def test_empty_buffer_defaults():
    b = TextBuffer()
    assert b.text == ""
    assert b.cursor == 0
    assert b.cursor_position == (0, 0)
    assert b.line_count == 1


def test_with_text_puts_cursor_at_start():
    b = TextBuffer.with_text("one\ntwo")
    assert b.cursor_position == (0, 0)
    assert b.line_count == 2


def test_with_text_shares_the_loaded_string():
    content = "x" * 10_000
    assert TextBuffer.with_text(content).text is content


def test_cursor_position_tracks_lines_and_columns():
    b = TextBuffer(text="ab\ncde\n", cursor=5)
    assert b.cursor_position == (1, 2)
    assert TextBuffer(text="ab\ncde\n", cursor=7).cursor_position == (2, 0)


def test_insert_typing_and_newlines():
    b = TextBuffer()
    for action in (Insert("h"), Insert("i"), Insert("\n"), Insert("yo")):
        b = b.apply(action)
    assert b.text == "hi\nyo"
    assert b.cursor_position == (1, 2)


def test_apply_never_mutates_input():
    b = TextBuffer.with_text("abc")
    after = b.apply(Insert("z"))
    assert b.text == "abc"
    assert after.text == "zabc"


def test_backspace_and_delete():
    b = TextBuffer(text="abc", cursor=2)
    assert b.apply(Backspace()) == TextBuffer(text="ac", cursor=1)
    assert b.apply(Delete()) == TextBuffer(text="ab", cursor=2)


def test_backspace_at_start_and_delete_at_end_are_noops():
    b = TextBuffer(text="abc", cursor=0)
    assert b.apply(Backspace()) is b
    end = TextBuffer(text="abc", cursor=3)
    assert end.apply(Delete()) is end


def test_backspace_joins_lines():
    b = TextBuffer(text="ab\ncd", cursor=3)
    after = b.apply(Backspace())
    assert after.text == "abcd"
    assert after.cursor_position == (0, 2)


@pytest.mark.parametrize(
    "motion,start,expected",
    [
        (Motion.LEFT, 0, 0),
        (Motion.LEFT, 4, 3),
        (Motion.RIGHT, 4, 5),
        (Motion.RIGHT, 11, 12),
        (Motion.LINE_START, 6, 4),
        (Motion.LINE_END, 4, 9),
        (Motion.DOCUMENT_START, 7, 0),
        (Motion.DOCUMENT_END, 1, 12),
        (Motion.UP, 6, 2),
        (Motion.UP, 1, 0),
        (Motion.DOWN, 2, 6),
        (Motion.DOWN, 10, 12),
    ],
)
def test_move_motions(motion: Motion, start: int, expected: int):
    # lines: "abc" (0-2), "hello" (4-8), "xy" (10-11), end 12
    b = TextBuffer(text="abc\nhello\nxy", cursor=start)
    assert b.apply(Move(motion)).cursor == expected


def test_move_down_clamps_column_to_shorter_line():
    b = TextBuffer(text="hello\nxy", cursor=4)
    assert b.apply(Move(Motion.DOWN)).cursor_position == (1, 2)


def test_move_to_clamps_out_of_range():
    b = TextBuffer.with_text("ab\ncd")
    assert b.apply(MoveTo(5, 9)).cursor_position == (1, 2)
    assert b.apply(MoveTo(-1, -1)).cursor == 0
    assert b.apply(MoveTo(1, 1)).cursor == 4


def test_replace_clamps_range():
    b = TextBuffer.with_text("abc")
    assert b.apply(Replace(1, 99, "Z")).text == "aZ"
    assert b.apply(Replace(-5, 1, "")).text == "bc"


@pytest.mark.parametrize(
    "old,new",
    [
        ("", ""),
        ("", "abc"),
        ("abc", ""),
        ("hello world", "hello brave world"),
        ("aaaa", "aaa"),
        ("line1\nline2\n", "line1\nline 2\n"),
        ("abc", "xyz"),
    ],
)
def test_replace_between_reproduces_target(old: str, new: str):
    action = Replace.between(old, new)
    assert TextBuffer.with_text(old).apply(action).text == new


def test_replace_between_is_minimal():
    assert Replace.between("hello world", "hello, world") == Replace(5, 5, ",")


def test_replay_of_actions_is_deterministic():
    actions = [
        Insert("fn main() {"),
        Insert("\n"),
        Insert("    42"),
        Move(Motion.UP),
        Move(Motion.LINE_END),
        Backspace(),
        Insert("}"),
        Move(Motion.DOCUMENT_END),
        Insert("\n}"),
        MoveTo(0, 3),
        Delete(),
    ]
    first = reduce(TextBuffer.apply, actions, TextBuffer())
    second = reduce(TextBuffer.apply, actions, TextBuffer())
    assert first == second
    assert first.text == "fn ain() }\n    42\n}"
