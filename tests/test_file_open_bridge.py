"""Tests for the Qt FileOpen bridge."""

from unittest.mock import Mock

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import QEvent

from deeplink.state import AppState
from ui.file_open_bridge import FileOpenBridge, target_from_file_open_event


def _event(*, url_text=None, local=False, file_path=""):
    event = Mock()
    event.type.return_value = QEvent.Type.FileOpen
    url = Mock()
    url.isValid.return_value = url_text is not None
    url.isLocalFile.return_value = local
    url.toString.return_value = url_text or ""
    event.url.return_value = url
    event.file.return_value = file_path
    return event


class TestFileOpenBridge:
    """Test suite for FileOpenBridge."""

    def test_custom_scheme_url_keeps_url_form(self):
        event = _event(url_text="pear://openSettings?name=gener")
        assert target_from_file_open_event(event) == "pear://openSettings?name=gener"

    def test_local_file_uses_path(self):
        event = _event(url_text="file:///Applications/Foo.app", local=True, file_path="/Applications/Foo.app")
        assert target_from_file_open_event(event) == "/Applications/Foo.app"

    def test_file_open_event_is_routed(self):
        router = Mock()
        state = AppState()
        bridge = FileOpenBridge(router, state)

        handled = bridge.eventFilter(None, _event(url_text="pear://checkUpdates"))

        assert handled is True
        router.route.assert_called_once_with("pear://checkUpdates", state, None)

    def test_other_events_pass_through(self):
        router = Mock()
        bridge = FileOpenBridge(router, AppState())
        event = Mock()
        event.type.return_value = QEvent.Type.MouseButtonPress

        assert bridge.eventFilter(None, event) is False
        router.route.assert_not_called()
