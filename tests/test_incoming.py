"""Tests for the action vocabulary and IncomingURL parsing."""

from pathlib import Path

from deeplink import actions
from deeplink.incoming import IncomingURL, QueryItem, parse_query_items


class TestActionRegistry:
    """Test suite for the known-action set."""

    def test_all_documented_actions_are_known(self):
        for name in (
            "openPearcleaner",
            "openSettings",
            "openPermissions",
            "uninstallApp",
            "checkOrphanedFiles",
            "checkDevEnv",
            "checkUpdates",
            "refreshAppsList",
            "resetSettings",
        ):
            assert actions.is_known_action(name)

    def test_unknown_and_missing_hosts(self):
        assert not actions.is_known_action("openApp")
        assert not actions.is_known_action("opensettings")  # case-sensitive
        assert not actions.is_known_action(None)

    def test_uninstall_is_path_routed(self):
        assert actions.UNINSTALL_APP in actions.PATH_ROUTED_ACTIONS


class TestIncomingURL:
    """Test suite for IncomingURL.parse and derived properties."""

    def test_reserved_scheme_keeps_host_case(self):
        url = IncomingURL.parse("pear://openSettings?name=gener")
        assert url.scheme == "pear"
        assert url.host == "openSettings"
        assert url.query_items == (QueryItem("name", "gener"),)

    def test_first_query_item_wins(self):
        url = IncomingURL.parse("pear://openApp?name=foo&name=bar&matchType=contains")
        assert url.query_value("name") == "foo"
        assert url.query_value("matchType") == "contains"
        assert url.query_value("path") is None

    def test_query_values_are_percent_decoded(self):
        url = IncomingURL.parse("pear://openApp?path=/Applications/My%20App.app")
        assert url.query_value("path") == "/Applications/My App.app"

    def test_item_without_equals_has_no_value(self):
        assert parse_query_items("path&name=x&&") == (QueryItem("path", None), QueryItem("name", "x"))

    def test_raw_path_has_no_scheme(self):
        url = IncomingURL.parse("/Applications/Foo.app")
        assert url.scheme is None
        assert url.host is None
        assert url.file_path == "/Applications/Foo.app"
        assert url.path_extension == "app"

    def test_path_like_input(self):
        url = IncomingURL.parse(Path("/Applications/Foo.app"))
        assert url.file_path == "/Applications/Foo.app"

    def test_windows_drive_is_not_a_scheme(self):
        url = IncomingURL.parse("C:\\Apps\\tool.exe")
        assert url.scheme is None

    def test_file_url_trailing_slash_extension(self):
        url = IncomingURL.parse("file:///Applications/My%20App.app/")
        assert url.scheme == "file"
        assert url.file_path == "/Applications/My App.app/"
        assert url.path_extension == "app"

    def test_query_path_does_not_leak_into_extension(self):
        url = IncomingURL.parse("pear://uninstallApp?path=/Applications/Foo.app")
        assert url.path_extension == ""

    def test_malformed_url_is_treated_as_raw_path(self):
        url = IncomingURL.parse("http://[::1/broken?name=x")
        assert url.scheme is None
        assert url.query_items == ()
        assert url.raw == "http://[::1/broken?name=x"

    def test_parse_is_idempotent_for_parsed_values(self):
        url = IncomingURL.parse("pear://checkUpdates")
        assert IncomingURL.parse(url) is url

    def test_parsed_urls_are_hashable(self):
        first = IncomingURL.parse("pear://openApp?name=foo")
        second = IncomingURL.parse("pear://openApp?name=foo")

        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_host_drops_port(self):
        assert IncomingURL.parse("pear://openSettings:1?name=gener").host == "openSettings"
        assert IncomingURL.parse("pear://user@checkUpdates:8080").host == "checkUpdates"
        assert IncomingURL.parse("http://[::1]:8000/x").host == "[::1]"

    def test_foreign_scheme_file_path_is_the_url(self):
        url = IncomingURL.parse("https://example.com/Foo.app")

        assert not url.is_local
        assert url.file_path == "https://example.com/Foo.app"
        assert url.path_extension == "app"

    def test_local_inputs(self):
        assert IncomingURL.parse("/Applications/Foo.app").is_local
        assert IncomingURL.parse("file:///Applications/Foo.app").is_local
        assert not IncomingURL.parse("pear://openApp?path=/x").is_local
