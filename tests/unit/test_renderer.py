import io
import os
import termios
from typing import Any, List

import numpy as np
import pytest

from grid_maze import renderer
from grid_maze.errors import (
    StartupError,
    TerminalModeError,
    TerminalSizeError,
    TerminalTooSmallError,
)
from grid_maze.levels.text import parse_level
from grid_maze.renderer import terminal
from grid_maze.renderer.terminal import (
    GLYPHS,
    QUIT_MESSAGE,
    TerminalSize,
    TerminalSurface,
    check_fits,
    frame_lines,
)
from grid_maze.types import Cell
from grid_maze.utils.ansi import CURSOR_HOME, RESTORE_CURSOR, SAVE_CURSOR
from tests.test_utils import CORRIDOR_MAP, SMALL_MAP, make_state


def test_glyph_table_is_total_and_distinct() -> None:
    assert set(GLYPHS) == set(Cell)
    assert len(set(GLYPHS.values())) == len(Cell)
    assert GLYPHS[Cell.EMPTY] == " "


@pytest.mark.parametrize("text", [SMALL_MAP, CORRIDOR_MAP, "01234"])
def test_loaded_map_renders_one_glyph_per_digit(text: str) -> None:
    lines = frame_lines(make_state(text).grid.snapshot())
    expected = [
        " ".join(GLYPHS[Cell(int(ch))] for ch in row) for row in text.splitlines()
    ]
    assert lines == expected


def test_frame_lines_small_map() -> None:
    assert frame_lines(make_state(SMALL_MAP).grid.snapshot()) == [
        "H    ",
        "  O  ",
        "    X",
    ]


@pytest.mark.parametrize(
    "size, fits",
    [
        (TerminalSize(6, 3), True),
        (TerminalSize(80, 24), True),
        (TerminalSize(5, 3), False),
        (TerminalSize(6, 2), False),
    ],
)
def test_check_fits(size: TerminalSize, fits: bool) -> None:
    if fits:
        check_fits(3, 3, size)
    else:
        with pytest.raises(TerminalTooSmallError) as excinfo:
            check_fits(3, 3, size)
        assert excinfo.value.required == (6, 3)
        assert excinfo.value.actual == tuple(size)


def test_render_writes_frame_between_cursor_save_and_restore() -> None:
    out = io.StringIO()
    surface = TerminalSurface(out=out, input_fd=0)
    surface.render(make_state(SMALL_MAP).grid.snapshot())
    assert out.getvalue() == (
        CURSOR_HOME + SAVE_CURSOR + "H    \n  O  \n    X" + RESTORE_CURSOR
    )


def test_clear_fills_whole_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    out = io.StringIO()
    surface = TerminalSurface(out=out, input_fd=0)
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda fd: (7, 4))
    monkeypatch.setattr(out, "fileno", lambda: 1, raising=False)
    assert surface.size() == TerminalSize(7, 4)
    surface.clear()
    assert out.getvalue() == CURSOR_HOME + SAVE_CURSOR + " " * 28 + RESTORE_CURSOR


def test_show_message_clears_homes_and_prints(monkeypatch: pytest.MonkeyPatch) -> None:
    out = io.StringIO()
    surface = TerminalSurface(out=out, input_fd=0)
    monkeypatch.setattr(terminal.os, "get_terminal_size", lambda fd: (2, 2))
    monkeypatch.setattr(out, "fileno", lambda: 1, raising=False)
    surface.show_message(QUIT_MESSAGE)
    assert out.getvalue().endswith(RESTORE_CURSOR + CURSOR_HOME + QUIT_MESSAGE + "\n")
    assert " " * 4 in out.getvalue()


def test_size_without_terminal_raises() -> None:
    surface = TerminalSurface(out=io.StringIO(), input_fd=0)
    with pytest.raises(TerminalSizeError):
        surface.size()


def test_size_query_failure_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    out = io.StringIO()
    monkeypatch.setattr(out, "fileno", lambda: 1, raising=False)

    def fail(fd: int) -> Any:
        raise OSError(25, "Inappropriate ioctl for device")

    monkeypatch.setattr(terminal.os, "get_terminal_size", fail)
    with pytest.raises(TerminalSizeError):
        TerminalSurface(out=out, input_fd=0).size()


class FakeTermios:
    """Records tcsetattr calls; attributes are termios' 7-item list."""

    ECHO = terminal.termios.ECHO
    ICANON = terminal.termios.ICANON
    TCSAFLUSH = terminal.termios.TCSAFLUSH
    error = terminal.termios.error

    def __init__(self, fail_restore: bool = False) -> None:
        self.lflag = self.ECHO | self.ICANON | 0x1
        self.calls: List[int] = []
        self.fail_restore = fail_restore

    def tcgetattr(self, fd: int) -> List[Any]:
        return [0, 0, 0, self.lflag, 0, 0, []]

    def tcsetattr(self, fd: int, when: int, attrs: List[Any]) -> None:
        if self.calls and self.fail_restore:
            raise self.error(5, "I/O error")
        self.calls.append(attrs[3])


def test_raw_mode_disables_echo_and_canonical_then_restores(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    fake = FakeTermios()
    monkeypatch.setattr(terminal, "termios", fake)
    surface = TerminalSurface(out=io.StringIO(), input_fd=3)
    with surface.raw_mode():
        assert fake.calls == [0x1]
    assert fake.calls == [0x1, fake.lflag]


def test_raw_mode_restores_on_error(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = FakeTermios()
    monkeypatch.setattr(terminal, "termios", fake)
    surface = TerminalSurface(out=io.StringIO(), input_fd=3)
    with pytest.raises(RuntimeError):
        with surface.raw_mode():
            raise RuntimeError("boom")
    assert fake.calls[-1] == fake.lflag


def test_raw_mode_restore_failure_is_logged_not_raised(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    fake = FakeTermios(fail_restore=True)
    monkeypatch.setattr(terminal, "termios", fake)
    surface = TerminalSurface(out=io.StringIO(), input_fd=3)
    with surface.raw_mode():
        pass
    assert "Failed to restore terminal mode" in caplog.text


def test_frame_lines_matches_level_rows() -> None:
    level = parse_level(CORRIDOR_MAP)
    cells = np.array([[int(c) for c in row] for row in level.rows], dtype=np.uint8)
    assert frame_lines(cells)[1] == "H O     X"


def test_raw_mode_on_a_pipe_raises_startup_error() -> None:
    read_fd, write_fd = os.pipe()
    try:
        surface = TerminalSurface(out=io.StringIO(), input_fd=read_fd)
        with pytest.raises(TerminalModeError) as excinfo:
            with surface.raw_mode():
                pytest.fail("body must not run without a terminal")
        assert isinstance(excinfo.value, StartupError)
        assert isinstance(excinfo.value.__cause__, termios.error)
        assert f"fd {read_fd}" in str(excinfo.value)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_package_exports_terminal_objects() -> None:
    for name in renderer.__all__:
        assert getattr(renderer, name) is getattr(terminal, name)
