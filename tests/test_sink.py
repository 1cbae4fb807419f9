"""Tests for the status-partitioned output files."""

from domain_liveness.models import Verdict
from domain_liveness.sink import ResultSink


class TestResultSink:
    def test_paths(self, tmp_path):
        sink = ResultSink(tmp_path / "out")
        assert sink.path_for(Verdict.ACTIVE) == tmp_path / "out_ACTIVE.txt"
        assert sink.path_for(Verdict.INACTIVE) == tmp_path / "out_INACTIVE.txt"

    def test_record_appends_input_line(self, tmp_path):
        sink = ResultSink(tmp_path / "out")
        assert sink.record("example.com", Verdict.ACTIVE)
        assert sink.record("https://example.org/x", Verdict.ACTIVE)
        assert sink.record("gone.com", Verdict.INACTIVE)
        assert (tmp_path / "out_ACTIVE.txt").read_text(encoding="utf-8") == "example.com\nhttps://example.org/x\n"
        assert (tmp_path / "out_INACTIVE.txt").read_text(encoding="utf-8") == "gone.com\n"

    def test_excluded_verdict_is_not_written(self, tmp_path):
        sink = ResultSink(tmp_path / "out")
        assert not sink.record("gone.com", Verdict.INACTIVE, exclude=Verdict.INACTIVE)
        assert sink.record("example.com", Verdict.ACTIVE, exclude=Verdict.INACTIVE)
        assert not (tmp_path / "out_INACTIVE.txt").exists()

    def test_reset_removes_previous_files(self, tmp_path):
        sink = ResultSink(tmp_path / "out")
        sink.record("example.com", Verdict.ACTIVE)
        sink.reset()
        assert not sink.path_for(Verdict.ACTIVE).exists()
        sink.reset()
