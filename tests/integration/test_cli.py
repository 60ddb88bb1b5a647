# ============================================================================
# SOURCEFILE: test_cli.py
# RELPATH: search_path_helpers/tests/integration/test_cli.py
# PROJECT: Search Path Helpers
# VERSION: 1.0.0
# LIFECYCLE: Proposed
# DESCRIPTION: Integration tests for CLI commands
# ============================================================================

"""
CLI Integration Test Suite.

Runs the commands through ``main`` with captured output, plus one real
subprocess invocation of ``python -m pathhelpers``.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent.parent.parent / "src"
sys.path.insert(0, str(SRC_DIR))

from pathhelpers.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir, monkeypatch):
    """Keep stray config files from the working directory out of the tests."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


def run_cli(argv):
    """Run the CLI and return its exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCLICommands:
    """Tests for each command's output."""

    def test_split(self, capsys):
        assert run_cli(["split", "C:\\dir\\file.txt"]) == 0

        out = capsys.readouterr().out
        assert "directory: C:\\dir" in out
        assert "leaf: file.txt" in out

    def test_split_root_reports_none(self, capsys):
        assert run_cli(["split", "C:\\"]) == 0

        assert "leaf: <none>" in capsys.readouterr().out

    def test_split_with_root_length(self, capsys):
        assert run_cli(["split", "C:\\dir", "--root-length", "0"]) == 0

        out = capsys.readouterr().out
        assert "directory: C:\n" in out
        assert "leaf: dir" in out

    def test_dirname(self, capsys):
        assert run_cli(["dirname", "C:\\dir\\sub\\"]) == 0
        assert capsys.readouterr().out.strip() == "C:\\dir"

    def test_dirname_of_root(self, capsys):
        assert run_cli(["dirname", "C:\\"]) == 0
        assert capsys.readouterr().out.strip() == "<none>"

    def test_root(self, capsys):
        assert run_cli(["root", "\\\\server\\share\\dir"]) == 0
        assert capsys.readouterr().out.strip() == "14"

    def test_check_valid(self, capsys):
        assert run_cli(["check", "abc..d"]) == 0
        assert capsys.readouterr().out.strip() == "OK"

    def test_normalize(self, capsys):
        assert run_cli(["normalize", "."]) == 0
        assert capsys.readouterr().out.strip() == "*"

    def test_search_string(self, capsys):
        assert run_cli(["search-string", "C:\\", "*.txt"]) == 0
        assert capsys.readouterr().out.strip() == "C:\\*.txt"

    def test_prepare(self, capsys):
        assert run_cli(["prepare", "C:\\dir", "sub\\*.log  "]) == 0

        out = capsys.readouterr().out
        assert "search string: C:\\dir\\sub\\*.log" in out
        assert "search directory: C:\\dir\\sub" in out
        assert "search criteria: *.log" in out

    def test_prepare_at_drive_root(self, capsys):
        assert run_cli(["prepare", "C:\\", "."]) == 0

        out = capsys.readouterr().out
        assert "search string: C:\\*" in out
        assert "search directory: C:\\\n" in out
        assert "search criteria: *\n" in out

    def test_trim(self, capsys):
        assert run_cli(["trim", "C:\\dir\\"]) == 0
        assert capsys.readouterr().out.strip() == "C:\\dir"

    def test_drive_relative(self, capsys):
        assert run_cli(["drive-relative", "C:"]) == 0
        assert capsys.readouterr().out.strip() == "true"

    def test_posix_flavor(self, capsys):
        assert run_cli(["--flavor", "posix", "split", "/usr/lib/"]) == 0

        out = capsys.readouterr().out
        assert "directory: /usr" in out
        assert "leaf: lib" in out


class TestCLIErrors:
    """Tests for error reporting and exit codes."""

    def test_invalid_pattern_exits_1(self, capsys):
        assert run_cli(["check", "..\\x"]) == 1

        err = capsys.readouterr().err
        assert "ERROR:" in err
        assert "search_pattern" in err

    def test_empty_pattern_exits_1(self, capsys):
        assert run_cli(["search-string", "C:\\dir\\", ""]) == 1
        assert "empty" in capsys.readouterr().err

    def test_negative_root_length_rejected(self, capsys):
        assert run_cli(["split", "C:\\dir", "--root-length", "-1"]) == 2
        assert "must not be negative" in capsys.readouterr().err

    def test_non_integer_root_length_rejected(self, capsys):
        assert run_cli(["split", "C:\\dir", "--root-length", "two"]) == 2

    def test_root_length_past_end_rejected(self, capsys):
        assert run_cli(["split", "ab", "--root-length", "5"]) == 2
        assert "exceeds the length" in capsys.readouterr().err

    def test_root_length_equal_to_path_length(self, capsys):
        assert run_cli(["split", "C:\\dir", "--root-length", "6"]) == 0
        assert "directory: C:\\dir" in capsys.readouterr().out

    def test_unknown_flavor_rejected_by_parser(self, capsys):
        assert run_cli(["--flavor", "vms", "trim", "x"]) == 2

    def test_missing_command(self, capsys):
        assert run_cli([]) == 2

    def test_invalid_config_exits_1(self, temp_dir, capsys):
        config_file = temp_dir / "bad.json"
        config_file.write_text(json.dumps({"paths": {"flavor": "vms"}}), encoding="utf-8")

        assert run_cli(["--config", str(config_file), "trim", "x"]) == 1
        assert "paths.flavor" in capsys.readouterr().err


class TestCLIConfigAndLogging:
    """Tests for config-driven flavor and session logging."""

    def test_flavor_from_config(self, temp_dir, capsys):
        config_file = temp_dir / "cfg.json"
        config_file.write_text(json.dumps({"paths": {"flavor": "posix"}}), encoding="utf-8")

        assert run_cli(["--config", str(config_file), "trim", "dir\\"]) == 0
        assert capsys.readouterr().out.strip() == "dir\\"

    def test_flavor_flag_overrides_config(self, temp_dir, capsys):
        config_file = temp_dir / "cfg.json"
        config_file.write_text(json.dumps({"paths": {"flavor": "posix"}}), encoding="utf-8")

        assert run_cli(["--config", str(config_file), "--flavor", "windows", "trim", "dir\\"]) == 0
        assert capsys.readouterr().out.strip() == "dir"

    def test_log_dir_writes_session_log(self, temp_dir, capsys):
        log_dir = temp_dir / "logs"

        assert run_cli(["--log-dir", str(log_dir), "normalize", "*.txt  "]) == 0

        log_files = list(log_dir.glob("path_helpers_session_*.json"))
        assert len(log_files) == 1
        records = [json.loads(line) for line in log_files[0].read_text(encoding="utf-8").splitlines()]
        assert [r["event"] for r in records] == ["operation_start", "operation_complete", "session_end"]
        assert records[0]["details"]["arguments"] == {"pattern": "*.txt  "}
        assert records[1]["details"]["result"] == "*.txt"

    def test_rejected_pattern_is_logged(self, temp_dir, capsys):
        log_dir = temp_dir / "logs"

        assert run_cli(["--log-dir", str(log_dir), "normalize", "ab.."]) == 1

        log_file = next(log_dir.glob("path_helpers_session_*.json"))
        events = [json.loads(line)["event"] for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert events == ["operation_start", "pattern_rejected", "error", "session_end"]

    def test_missing_config_logged_as_warning(self, temp_dir, capsys):
        log_dir = temp_dir / "logs"

        assert run_cli(["--config", str(temp_dir / "absent.json"), "--log-dir", str(log_dir), "trim", "x\\"]) == 0

        log_file = next(log_dir.glob("path_helpers_session_*.json"))
        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert [r["event"] for r in records] == ["operation_start", "warning", "operation_complete", "session_end"]
        assert records[1]["details"]["context"] == {"configFile": str(temp_dir / "absent.json")}
        assert not (temp_dir / "absent.json").exists()

    def test_session_end_counts_events(self, temp_dir, capsys):
        log_dir = temp_dir / "logs"

        assert run_cli(["--log-dir", str(log_dir), "check", "..\\x"]) == 1

        log_file = next(log_dir.glob("path_helpers_session_*.json"))
        last = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert last["event"] == "session_end"
        assert last["details"]["eventCounts"] == {"operation_start": 1, "pattern_rejected": 1, "error": 1}

    def test_logging_enabled_in_config(self, temp_dir, capsys):
        log_dir = temp_dir / "cfg_logs"
        config_file = temp_dir / "cfg.json"
        config_file.write_text(
            json.dumps({"logging": {"enabled": True, "log_dir": str(log_dir)}}),
            encoding="utf-8"
        )

        assert run_cli(["--config", str(config_file), "trim", "x\\"]) == 0
        assert list(log_dir.glob("path_helpers_session_*.json"))

    def test_no_log_without_request(self, temp_dir, capsys):
        assert run_cli(["trim", "x\\"]) == 0
        assert not (temp_dir / "logs").exists()


class TestCLIParser:
    """Tests for argument parsing."""

    def test_all_commands_registered(self):
        parser = build_parser()
        for argv in (["root", "x"], ["split", "x"], ["dirname", "x"], ["check", "x"],
                     ["normalize", "x"], ["search-string", "d", "p"], ["prepare", "d", "p"],
                     ["trim", "x"], ["drive-relative", "x"]):
            assert parser.parse_args(argv).command == argv[0]


class TestCLISubprocess:
    """Runs the real module entry point."""

    def test_python_m_pathhelpers(self, temp_dir):
        env = dict(os.environ)
        env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

        result = subprocess.run(
            [sys.executable, "-m", "pathhelpers", "search-string", "C:\\dir", "*.txt"],
            capture_output=True, text=True, cwd=str(temp_dir), env=env
        )

        assert result.returncode == 0
        assert result.stdout.strip() == "C:\\dir\\*.txt"
