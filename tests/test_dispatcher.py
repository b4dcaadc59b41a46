"""Tests for ActionDispatcher per-action behaviour."""

import threading
from unittest.mock import Mock

import pytest

from deeplink.dispatcher import SELECTED_TAB_KEY, ActionDispatcher, find_settings_tab
from deeplink.incoming import QueryItem
from deeplink.services import BaseAppServices
from deeplink.state import AppState, Page, SettingsTab
from utils.settings_store import SettingsStore


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "app_settings.json")


@pytest.fixture
def services():
    return Mock(spec=BaseAppServices)


@pytest.fixture
def dispatcher(services, store):
    return ActionDispatcher(services, settings=store)


class TestActionDispatcher:
    """Test suite for ActionDispatcher.dispatch."""

    def test_open_app_is_a_noop(self, dispatcher, services):
        state = AppState()

        assert dispatcher.dispatch("openPearcleaner", [], state) is None

        assert services.mock_calls == []
        assert state == AppState()

    def test_open_settings_selects_matching_tab(self, dispatcher, services, store):
        state = AppState(selected_tab=SettingsTab.ABOUT)

        dispatcher.dispatch("openSettings", [QueryItem("name", "GENER")], state)

        services.open_settings.assert_called_once_with()
        assert state.selected_tab is SettingsTab.GENERAL
        assert store.get(SELECTED_TAB_KEY) == "general"

    def test_open_settings_without_match_keeps_tab(self, dispatcher, services, store):
        state = AppState(selected_tab=SettingsTab.FOLDERS)

        dispatcher.dispatch("openSettings", [QueryItem("name", "nothing")], state)

        services.open_settings.assert_called_once_with()
        assert state.selected_tab is SettingsTab.FOLDERS
        assert store.get(SELECTED_TAB_KEY) is None

    def test_open_permissions_opens_fixed_size_modal(self, dispatcher, services):
        dispatcher.dispatch("openPermissions", [], AppState())

        services.open_modal.assert_called_once_with("permissions", width=300, height=250)

    def test_check_orphaned_files_sets_page(self, dispatcher):
        state = AppState()

        dispatcher.dispatch("checkOrphanedFiles", [], state)

        assert state.current_page is Page.ORPHANS

    def test_check_dev_env_selects_environment(self, dispatcher):
        state = AppState()

        dispatcher.dispatch("checkDevEnv", [QueryItem("name", "node")], state)

        assert state.current_page is Page.DEVELOPMENT
        assert state.selected_environment.name == "Node.js / npm"

    def test_check_dev_env_without_match_still_switches_page(self, dispatcher):
        state = AppState()

        dispatcher.dispatch("checkDevEnv", [QueryItem("name", "cobol")], state)

        assert state.current_page is Page.DEVELOPMENT
        assert state.selected_environment is None

    def test_check_updates_requests_sheet(self, dispatcher, services):
        dispatcher.dispatch("checkUpdates", [], AppState())

        services.check_for_updates.assert_called_once_with(sheet=True)

    def test_refresh_apps_list_reloads(self, dispatcher, services):
        state = AppState()

        dispatcher.dispatch("refreshAppsList", [], state)

        services.reload_apps.assert_called_once_with(state)

    def test_reset_settings_runs_in_background(self, dispatcher, store):
        store.set("settings.general.mini", True)
        store.set(SELECTED_TAB_KEY, "update")

        worker = dispatcher.dispatch("resetSettings", [], AppState())

        assert isinstance(worker, threading.Thread)
        assert worker is not threading.current_thread()
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert store.get_all() == {}
        assert store.refresh() == {}

    def test_unknown_and_path_routed_actions_are_noops(self, dispatcher, services):
        state = AppState()

        assert dispatcher.dispatch("addFolder", [], state) is None
        assert dispatcher.dispatch("uninstallApp", [QueryItem("path", "/x.app")], state) is None

        assert services.mock_calls == []
        assert state.external_paths == []

    def test_collaborator_failure_is_logged_not_raised(self, dispatcher, services):
        services.check_for_updates.side_effect = RuntimeError("offline")

        assert dispatcher.dispatch("checkUpdates", [], AppState()) is None


def test_find_settings_tab_substring():
    assert find_settings_tab("old") is SettingsTab.FOLDERS
    assert find_settings_tab("zzz") is None


def test_open_settings_leaves_current_page():
    """Settings open in their own window; the page enum has no settings view."""
    state = AppState(current_page=Page.ORPHANS)

    ActionDispatcher(Mock(spec=BaseAppServices), settings=Mock()).dispatch("openSettings", [], state)

    assert state.current_page is Page.ORPHANS
    assert {page.value for page in Page} == {"applications", "orphans", "development"}
