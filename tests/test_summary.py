"""Tests for chat_stats_summary.py::main()."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from chat_stats_summary import collect_paths, main


MODULE = "chat_stats_summary"


class TestCollectPaths:
    def test_directory_expanded_in_page_order(self, export_dir):
        paths = collect_paths([str(export_dir)])
        assert [p.name for p in paths] == ["messages.html", "messages2.html"]

    def test_files_kept_in_argument_order(self, tmp_path):
        paths = collect_paths([str(tmp_path / "b.html"), str(tmp_path / "a.html")])
        assert [p.name for p in paths] == ["b.html", "a.html"]


class TestMainErrorHandling:
    """Verify main() exits with code 1 when nothing can be read."""

    def test_missing_file_exits_1(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "nonexistent.html"), "--no-save"])
        assert exc_info.value.code == 1

    def test_empty_directory_exits_1(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path), "--no-save"])
        assert exc_info.value.code == 1


class TestMainSuccessfulRun:
    def test_writes_files_and_prints_report(self, export_dir, tmp_path, capsys):
        out = tmp_path / "analytics"
        main([str(export_dir), "--output-dir", str(out), "--workers", "2"])

        assert (out / "metrics.json").exists()
        assert (out / "daily_stats.csv").exists()
        stdout = capsys.readouterr().out
        assert "Total Messages: 8" in stdout
        assert "chat_stats_viz.py" in stdout

    def test_no_save_skips_files(self, export_dir):
        with patch(f"{MODULE}.save_analytics_files") as mock_save:
            main([str(export_dir), "--no-save"])
        mock_save.assert_not_called()

    def test_unreadable_file_skipped(self, export_dir, tmp_path, capsys):
        main([str(export_dir / "messages.html"), str(tmp_path / "missing.html"), "--no-save"])
        captured = capsys.readouterr()
        assert "could not read" in captured.err
        assert "Total Messages: 7" in captured.out
