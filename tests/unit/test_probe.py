"""Tests for active pane discovery."""
import pytest

from thumbswap.errors import MalformedPaneRow, NoActivePane
from thumbswap.probe import PANE_FORMAT, capture_active_pane, parse_pane_row


def test_capture_active_pane_first_row(fake_executor):
    executor = fake_executor(["%97:0:24:0:active\n%106:0:24:0:nope\n"])

    pane = capture_active_pane(executor)

    assert pane.id == "%97"
    assert pane.in_copy_mode is False
    assert pane.height is None
    assert pane.scroll_position is None
    assert pane.capture_range is None
    assert executor.last_executed == ["tmux", "list-panes", "-F", PANE_FORMAT]


def test_capture_active_pane_any_order(fake_executor):
    """The active row is found wherever it appears."""
    executor = fake_executor(["%106:100:24:1:nope\n%98:100:24:1:active\n%107:100:24:1:nope\n"])

    assert capture_active_pane(executor).id == "%98"


def test_capture_active_pane_copy_mode(fake_executor):
    executor = fake_executor(["%98:1:24:3:active\n"])

    pane = capture_active_pane(executor)

    assert pane.id == "%98"
    assert pane.in_copy_mode is True
    assert pane.height == 24
    assert pane.scroll_position == 3
    assert pane.capture_range == (-3, 20)


def test_capture_active_pane_none_active(fake_executor):
    executor = fake_executor(["%1:0:24:0:nope\n%2:0:24:0:nope"])

    with pytest.raises(NoActivePane):
        capture_active_pane(executor)


def test_capture_active_pane_empty_listing(fake_executor):
    with pytest.raises(NoActivePane):
        capture_active_pane(fake_executor([""]))


def test_parse_pane_row_wrong_field_count():
    with pytest.raises(MalformedPaneRow):
        parse_pane_row("%1:0:24:active")


def test_parse_pane_row_bad_height_in_copy_mode():
    with pytest.raises(MalformedPaneRow) as excinfo:
        parse_pane_row("%1:1:tall:0:active")

    assert "height" in str(excinfo.value)


def test_parse_pane_row_bad_scroll_in_copy_mode():
    with pytest.raises(MalformedPaneRow):
        parse_pane_row("%1:1:24::active")


def test_parse_pane_row_ignores_numbers_outside_copy_mode():
    """Height and scroll are not parsed when the pane is live."""
    pane = parse_pane_row("%1:0:tall::active")

    assert pane.active is True
    assert pane.height is None
    assert pane.scroll_position is None
