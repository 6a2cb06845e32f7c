"""Tests for launching the picker window."""
from pathlib import Path

from thumbswap.launcher import (
    build_pane_command, capture_command, launch_picker, picker_path, read_thumbs_options,
)
from thumbswap.models.pane import PaneDescriptor

LIVE_PANE = PaneDescriptor(id="%97", active=True)
SCROLLED_PANE = PaneDescriptor(id="%98", in_copy_mode=True, height=24, scroll_position=3, active=True)


def test_capture_command_live_pane():
    assert capture_command(LIVE_PANE) == "tmux capture-pane -t %97 -p"


def test_capture_command_scrolled_pane():
    assert capture_command(SCROLLED_PANE) == "tmux capture-pane -t %98 -p -S -3 -E 20"


def test_picker_path():
    assert picker_path("/opt/thumbs", "target/release/thumbs") == Path("/opt/thumbs/target/release/thumbs")
    assert picker_path("/opt/thumbs", "/usr/bin/thumbs") == Path("/usr/bin/thumbs")


def test_build_pane_command():
    command = build_pane_command(
        SCROLLED_PANE,
        Path("/opt/thumbs/target/release/thumbs"),
        Path("/tmp/thumbs-last"),
        ["--reverse", "--fg-color", "'red'"],
        "thumbs-finished-1-2",
    )

    assert command == (
        "tmux capture-pane -t %98 -p -S -3 -E 20"
        " | /opt/thumbs/target/release/thumbs -f %U:%H -t /tmp/thumbs-last --reverse --fg-color 'red'"
        "; tmux swap-pane -t %98"
        "; tmux wait-for -S thumbs-finished-1-2"
    )


def test_build_pane_command_quotes_paths_with_spaces():
    command = build_pane_command(
        LIVE_PANE,
        Path("/home/me/my plugins/thumbs"),
        Path("/tmp/thumbs-last"),
        [],
        "sig",
    )

    assert "'/home/me/my plugins/thumbs' -f %U:%H -t /tmp/thumbs-last;" in command


def test_read_thumbs_options(fake_executor):
    executor = fake_executor(["mouse on\n@thumbs-reverse enabled\n@thumbs-bg-color blue"])

    options = read_thumbs_options(executor)

    assert [(o.name, o.value) for o in options] == [("reverse", "enabled"), ("bg-color", "blue")]
    assert executor.last_executed == ["tmux", "show", "-g"]


def test_launch_picker(fake_executor):
    executor = fake_executor(["@thumbs-unique enabled", "%100"])

    picker_pane_id = launch_picker(
        executor, LIVE_PANE, "/opt/thumbs", "target/release/thumbs",
        Path("/tmp/thumbs-last"), "thumbs-finished-1-2",
    )

    assert picker_pane_id == "%100"
    new_window = executor.last_executed
    assert new_window[:8] == ["tmux", "new-window", "-P", "-F", "#{pane_id}", "-d", "-n", "[thumbs]"]
    assert new_window[8] == (
        "tmux capture-pane -t %97 -p"
        " | /opt/thumbs/target/release/thumbs -f %U:%H -t /tmp/thumbs-last --unique"
        "; tmux swap-pane -t %97"
        "; tmux wait-for -S thumbs-finished-1-2"
    )


def test_launch_picker_custom_window_name(fake_executor):
    executor = fake_executor(["", "%5"])

    launch_picker(executor, LIVE_PANE, "/opt", "thumbs", Path("/tmp/r"), "sig", window_name="picker")

    assert executor.last_executed[7] == "picker"
