"""Tests for the bundled dataset access layer."""

import subprocess
import threading
from unittest.mock import MagicMock, patch

import pytest

from data import caniuse, store
from data.caniuse import (
    android_to_desktop,
    count_android_filter,
    get_browser_stat,
    get_browsers,
    get_usage,
    get_version_aliases,
    normalize_name,
    opera_mobile_to_desktop,
    should_filter_android,
)
from data.electron import find_chromium, get_electron_versions, is_known_electron
from data import node as node_data
from data.node import get_node_schedule, get_node_versions, release_line
from versioning.errors import CurrentNodeUnavailable
from versioning.models import Opts
from versioning.service import resolve


class TestBrowserLookup:
    """Name normalization and mobile-to-desktop substitution."""

    @pytest.mark.parametrize(
        "typed,expected",
        [
            ("Chrome", "chrome"),
            ("FF", "firefox"),
            ("fx", "firefox"),
            ("ios", "ios_saf"),
            ("Explorer", "ie"),
            ("ChromeAndroid", "and_chr"),
            ("OperaMini", "op_mini"),
        ],
    )
    def test_aliases(self, typed, expected):
        assert normalize_name(typed) == expected
        name, stat = get_browser_stat(typed, False)
        assert name == expected
        assert stat.name == expected

    def test_unknown_browser(self):
        assert get_browser_stat("yuru", False) is None
        assert get_browser_stat("yuru", True) is None

    def test_mobile_to_desktop_uses_desktop_history(self):
        name, stat = get_browser_stat("and_chr", True)
        assert name == "and_chr"
        assert stat is get_browsers()["chrome"]

    def test_mobile_without_desktop_counterpart_is_unchanged(self):
        name, stat = get_browser_stat("ios_saf", True)
        assert name == "ios_saf"
        assert stat is get_browsers()["ios_saf"]

    def test_android_to_desktop(self):
        stat = android_to_desktop()
        assert stat.released[0] == "2.1"
        assert "4.4.3-4.4.4" in stat.released
        assert "36" not in stat.released
        assert "37" in stat.released
        assert stat.released.count("142") == 1
        assert stat.released[-1] == get_browsers()["chrome"].released[-1]
        assert stat.release_date["37"] == get_browsers()["chrome"].release_date["37"]
        assert get_browser_stat("android", True) == ("android", stat)

    def test_opera_mobile_to_desktop(self):
        stat = opera_mobile_to_desktop()
        assert "10" in stat.versions
        assert "10.0-10.1" not in stat.versions
        assert "10" in stat.release_date
        assert get_browser_stat("op_mob", True)[1] is stat


class TestAndroidCount:
    """``last N`` adjustment for the bucketed Android history."""

    def test_filter_only_without_mobile_to_desktop(self):
        assert should_filter_android("android", False)
        assert not should_filter_android("android", True)
        assert not should_filter_android("chrome", False)

    def test_small_count_collapses_to_one(self):
        assert count_android_filter(1, False) == 1
        assert count_android_filter(2, False) == 1

    def test_large_count_reaches_past_evergreen(self):
        # newest android is 142: 142 - 37 - 110 = -5
        assert count_android_filter(110, False) == 6


class TestUsageAndAliases:
    """Derived usage and alias tables."""

    def test_usage_sorted_descending(self):
        usage = get_usage()
        assert all(a.usage >= b.usage for a, b in zip(usage, usage[1:]))
        assert (usage[0].name, usage[0].version) == ("and_chr", "142")

    def test_usage_shares_add_up_to_whole(self):
        total = sum(entry.usage for entry in get_usage())
        assert 99.5 <= total <= 100.5

    def test_range_endpoints_alias_the_range(self):
        aliases = get_version_aliases()
        assert aliases["opera"]["10.0"] == "10.0-10.1"
        assert aliases["opera"]["10.1"] == "10.0-10.1"
        assert aliases["android"]["4.2"] == "4.2-4.3"
        assert "11" not in aliases["ie"]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            get_browsers()["chrome"] = None  # type: ignore[index]


class TestElectron:
    """Electron to Chromium map."""

    def test_find_chromium(self):
        assert find_chromium("1.1") == "50"
        assert find_chromium("2") == "61"
        assert find_chromium("0.1") is None

    def test_is_known(self):
        assert is_known_electron("39.1")
        assert not is_known_electron("99")

    def test_oldest_first(self):
        versions = get_electron_versions()
        assert versions[0] == ("0.20", "39")
        assert versions[-1][0] == "39.1"


class TestNodeData:
    """Node.js releases, schedule and local detection."""

    def setup_method(self):
        node_data._current_node = None

    def teardown_method(self):
        node_data._current_node = None

    def test_release_line(self):
        assert release_line("0.10.48") == "0.10"
        assert release_line("18.2.0") == "18"

    def test_releases_are_oldest_first(self):
        versions = get_node_versions()
        assert versions[0] == "0.10.0"
        assert versions[-1] == "25.1.0"

    def test_schedule_windows(self):
        schedule = {line.major: line for line in get_node_schedule()}
        assert schedule["20"].start < schedule["20"].end
        assert "0.12" in schedule

    @patch("data.node.subprocess.run")
    @patch("data.node.shutil.which", return_value="/usr/bin/node")
    def test_current_node_is_probed_once(self, mock_which, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout="v20.11.1\n")
        assert node_data.current_node_version() == "20.11.1"
        assert node_data.current_node_version() == "20.11.1"
        assert mock_run.call_count == 1

    @patch("data.node.shutil.which", return_value=None)
    def test_current_node_missing(self, mock_which):
        with pytest.raises(CurrentNodeUnavailable):
            node_data.current_node_version()

    @patch("data.node.subprocess.run", side_effect=subprocess.TimeoutExpired("node", 5))
    @patch("data.node.shutil.which", return_value="/usr/bin/node")
    def test_current_node_timeout(self, mock_which, mock_run):
        with pytest.raises(CurrentNodeUnavailable):
            node_data.current_node_version()

    @patch("data.node.subprocess.run")
    @patch("data.node.shutil.which", return_value="/usr/bin/node")
    def test_current_node_failure_exit(self, mock_which, mock_run):
        mock_run.return_value = MagicMock(returncode=1, stdout="")
        with pytest.raises(CurrentNodeUnavailable):
            node_data.current_node_version()


class TestStore:
    """Compute-once table cache."""

    def test_builder_runs_once(self):
        builder = MagicMock(return_value=("built",))
        with patch.dict(store._table_cache, clear=False):
            assert store.cached("test.table", builder) == ("built",)
            assert store.cached("test.table", builder) == ("built",)
        assert builder.call_count == 1

    def test_concurrent_first_access_builds_once(self):
        results, errors = [], []

        def worker():
            try:
                results.append(resolve("defaults", Opts(mobile_to_desktop=True)))
            except Exception as exc:  # pylint: disable=broad-exception-caught
                errors.append(exc)

        with patch.dict(store._table_cache, clear=True), patch(
            "data.caniuse._build_browsers", side_effect=caniuse._build_browsers
        ) as builder:
            threads = [threading.Thread(target=worker) for _ in range(16)]
            for thread in threads:
                thread.start()
            for thread in threads:
                thread.join(timeout=30)
            assert not any(thread.is_alive() for thread in threads)

        assert not errors
        assert len(results) == 16
        assert results[0]
        assert all(result == results[0] for result in results)
        assert builder.call_count == 1

    def test_parse_day(self):
        assert store.parse_day("1970-01-02") == 86400
