"""Tests for the browserslist command line."""

import json
from unittest.mock import patch

import pytest

import browserslist
from args import parse_args
from constants import ExitCodes


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from installing handlers on the root logger during tests."""
    for name in (
        "BROWSERSLIST",
        "BROWSERSLIST_CONFIG",
        "BROWSERSLIST_ENV",
        "BROWSERSLIST_MOBILE_TO_DESKTOP",
        "BROWSERSLIST_IGNORE_UNKNOWN_VERSIONS",
    ):
        monkeypatch.delenv(name, raising=False)
    with patch("browserslist.configure_logging"):
        yield


def run_main(argv):
    with pytest.raises(SystemExit) as exc_info:
        browserslist.main(argv)
    return exc_info.value.code


class TestArgs:
    """Argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.queries == []
        assert not args.MOBILE_TO_DESKTOP
        assert args.LOG_LEVEL == "INFO"
        assert args.OUTPUT_FORMAT is None

    def test_flags(self):
        args = parse_args(["last 2 versions", "--mobile-to-desktop", "-f", "JSON", "--env", "staging"])
        assert args.queries == ["last 2 versions"]
        assert args.MOBILE_TO_DESKTOP
        assert args.OUTPUT_FORMAT == "json"
        assert args.ENV == "staging"

    def test_env_switches(self, monkeypatch):
        monkeypatch.setenv("BROWSERSLIST_MOBILE_TO_DESKTOP", "1")
        monkeypatch.setenv("BROWSERSLIST_IGNORE_UNKNOWN_VERSIONS", "false")
        opts = browserslist.build_opts(parse_args([]))
        assert opts.mobile_to_desktop
        assert not opts.ignore_unknown_versions

    def test_format_from_output_extension(self):
        assert browserslist.output_format(parse_args(["-o", "out.csv"])) == "csv"
        assert browserslist.output_format(parse_args(["-o", "out.txt"])) == "text"
        assert browserslist.output_format(parse_args(["-o", "out.csv", "-f", "json"])) == "json"


class TestMain:
    """End to end runs of ``main``."""

    def test_text_output(self, capsys):
        assert run_main(["ie <= 6"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == "ie 6\nie 5.5\n"

    def test_json_output(self, capsys):
        assert run_main(["-f", "json", "ie 11"]) == ExitCodes.SUCCESS.value
        assert json.loads(capsys.readouterr().out) == [{"name": "ie", "version": "11"}]

    def test_csv_output(self, capsys):
        assert run_main(["-f", "csv", "ie 10 - 11"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == "name,version\nie,11\nie,10\n"

    def test_several_queries(self, capsys):
        assert run_main(["ie 11", "not ie 11"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == ""

    def test_output_file_quiet(self, capsys, tmp_path):
        target = tmp_path / "targets.json"
        assert run_main(["-q", "-o", str(target), "ie 11"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == ""
        assert json.loads(target.read_text(encoding="utf-8")) == [{"name": "ie", "version": "11"}]

    def test_output_file_unwritable(self, tmp_path):
        target = tmp_path / "missing" / "out.txt"
        assert run_main(["-o", str(target), "ie 11"]) == ExitCodes.FILE_ERROR.value

    def test_query_error(self, capsys):
        assert run_main(["yuru 1.0"]) == ExitCodes.QUERY_ERROR.value
        assert capsys.readouterr().out == ""

    def test_ignore_unknown_versions(self, capsys):
        assert run_main(["--ignore-unknown-versions", "chrome 82"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == ""

    def test_queries_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("BROWSERSLIST", "ie 11")
        assert run_main([]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == "ie 11\n"

    def test_queries_from_config(self, capsys, tmp_path):
        (tmp_path / ".browserslistrc").write_text("[staging]\nie 10\n", encoding="utf-8")
        assert run_main(["--path", str(tmp_path), "--env", "staging"]) == ExitCodes.SUCCESS.value
        assert capsys.readouterr().out == "ie 10\n"

    def test_missing_config(self, tmp_path):
        assert run_main(["-c", str(tmp_path / "missing")]) == ExitCodes.FILE_ERROR.value
