"""Integration tests for the analyze_frames command line."""

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from analyze_frames import main


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Remove the handler the CLI attaches to the package logger."""
    logger = logging.getLogger("frame_analyzer")
    handlers, level = logger.handlers[:], logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


class TestAnalyzeFramesCli:
    """Tests for analyze_frames.main."""

    def test_prints_summary(self, temp_csv_file, profiler_payload, capsys):
        """The readout is printed for every built-in stat."""
        path = temp_csv_file(profiler_payload)

        assert main([path]) == 0

        out = capsys.readouterr().out
        assert "Frame Time - (2% : 9.00ms, Avg : 11.00ms, Med : 11.00ms" in out
        assert "had no values" in out
        assert "Found frames with negative aggregate values" in out

    def test_writes_json(self, temp_csv_file, simple_payload, tmp_path):
        """The -o option writes the full results."""
        path = temp_csv_file(simple_payload)
        output = tmp_path / "results.json"

        assert main([path, "-o", str(output)]) == 0

        results = json.loads(output.read_text(encoding="utf-8"))
        assert results['summary']['frame_count'] == 2

    def test_missing_file(self, tmp_path, capsys):
        """A missing input file exits with status 1."""
        assert main([str(tmp_path / "absent.csv")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_bad_stats_file(self, temp_csv_file, simple_payload, tmp_path, capsys):
        """Duplicate stat names are reported as an error."""
        stats = tmp_path / "stats.json"
        stats.write_text(json.dumps({"stats": [
            {"displayName": "X", "addLabels": ["A"]},
            {"displayName": "X", "addLabels": ["B"]},
        ]}), encoding="utf-8")

        assert main([temp_csv_file(simple_payload), "--stats", str(stats)]) == 1
        assert "Duplicate" in capsys.readouterr().out
