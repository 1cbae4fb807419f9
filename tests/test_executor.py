"""Tests for bounded concurrent execution."""

import asyncio

import pytest

from domain_liveness import executor
from domain_liveness.models import Verdict
from domain_liveness.sink import ResultSink


class ScriptedClassifier:
    """Returns verdicts from a map, raising for targets mapped to an exception."""

    def __init__(self, verdicts, delay=0.01):
        self.verdicts = verdicts
        self.delay = delay
        self.in_flight = 0
        self.max_in_flight = 0

    async def classify(self, target):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            result = self.verdicts[target]
            if isinstance(result, Exception):
                raise result
            return result
        finally:
            self.in_flight -= 1


def read_lines(path):
    if not path.exists():
        return []
    return path.read_text(encoding="utf-8").splitlines()


def run_batch(targets, classifier, sink, **kwargs):
    return asyncio.run(executor.run(targets, classifier, sink, **kwargs))


@pytest.fixture
def sink(tmp_path):
    return ResultSink(tmp_path / "result")


@pytest.fixture
def mixed_verdicts():
    verdicts = {}
    for i in range(30):
        verdicts[f"site{i}.com"] = Verdict.ACTIVE if i % 3 else Verdict.INACTIVE
    return verdicts


class TestConcurrencyLimit:
    @pytest.mark.parametrize("concurrency", [1, 3, 10])
    def test_never_exceeds_slots(self, sink, mixed_verdicts, concurrency):
        classifier = ScriptedClassifier(mixed_verdicts)
        run_batch(list(mixed_verdicts), classifier, sink, concurrency=concurrency)
        assert classifier.max_in_flight == concurrency

    def test_fewer_targets_than_slots(self, sink):
        classifier = ScriptedClassifier({"a.com": Verdict.ACTIVE, "b.com": Verdict.ACTIVE})
        run_batch(["a.com", "b.com"], classifier, sink, concurrency=10)
        assert classifier.max_in_flight == 2

    @pytest.mark.parametrize("concurrency", [0, -1])
    def test_rejects_non_positive_concurrency(self, sink, concurrency):
        with pytest.raises(ValueError):
            run_batch(["a.com"], ScriptedClassifier({}), sink, concurrency=concurrency)

    def test_empty_target_list(self, sink):
        stats = run_batch([], ScriptedClassifier({}), sink)
        assert stats["total"] == 0
        assert not sink.path_for(Verdict.ACTIVE).exists()


class TestOutcomes:
    def test_each_target_lands_in_exactly_one_file(self, sink, mixed_verdicts):
        stats = run_batch(list(mixed_verdicts), ScriptedClassifier(mixed_verdicts), sink, concurrency=4)
        active = read_lines(sink.path_for(Verdict.ACTIVE))
        inactive = read_lines(sink.path_for(Verdict.INACTIVE))
        assert sorted(active + inactive) == sorted(mixed_verdicts)
        assert set(active) == {t for t, v in mixed_verdicts.items() if v is Verdict.ACTIVE}
        assert stats == {"total": 30, "active": 20, "inactive": 10, "excluded": 0, "errors": 0}

    def test_exclude_inactive(self, sink, mixed_verdicts):
        stats = run_batch(
            list(mixed_verdicts), ScriptedClassifier(mixed_verdicts), sink, exclude=Verdict.INACTIVE
        )
        assert len(read_lines(sink.path_for(Verdict.ACTIVE))) == 20
        assert not sink.path_for(Verdict.INACTIVE).exists()
        assert stats["excluded"] == 10

    def test_error_is_isolated_and_not_counted_as_inactive(self, sink):
        verdicts = {
            "up.com": Verdict.ACTIVE,
            "boom.com": RuntimeError("prober exploded"),
            "down.com": Verdict.INACTIVE,
        }
        stats = run_batch(list(verdicts), ScriptedClassifier(verdicts), sink, concurrency=2)
        assert read_lines(sink.path_for(Verdict.ACTIVE)) == ["up.com"]
        assert read_lines(sink.path_for(Verdict.INACTIVE)) == ["down.com"]
        assert stats["errors"] == 1
        assert stats["inactive"] == 1

    def test_errors_do_not_leak_slots(self, sink):
        verdicts = {f"bad{i}.com": ValueError("bad") for i in range(5)}
        verdicts["good.com"] = Verdict.ACTIVE
        classifier = ScriptedClassifier(verdicts, delay=0)

        async def go():
            return await asyncio.wait_for(executor.run(list(verdicts), classifier, sink, concurrency=1), timeout=5)

        stats = asyncio.run(go())
        assert stats["errors"] == 5
        assert read_lines(sink.path_for(Verdict.ACTIVE)) == ["good.com"]

    def test_check_target_result(self, sink):
        async def go():
            semaphore = asyncio.Semaphore(1)
            classifier = ScriptedClassifier({"a.com": Verdict.ACTIVE, "b.com": KeyError("b")})
            ok = await executor.check_target("a.com", classifier, sink, semaphore, Verdict.ACTIVE)
            failed = await executor.check_target("b.com", classifier, sink, semaphore)
            assert not semaphore.locked()
            return ok, failed

        ok, failed = asyncio.run(go())
        assert ok.verdict is Verdict.ACTIVE and not ok.written
        assert failed.verdict is None and failed.error.startswith("KeyError")

    def test_progress_bar_run(self, sink, mixed_verdicts):
        stats = run_batch(list(mixed_verdicts), ScriptedClassifier(mixed_verdicts), sink, progress=True)
        assert stats["total"] == 30
        assert stats["active"] == 20


class TestSummary:
    def test_format_progress_description(self):
        stats = executor.new_stats()
        stats.update(active=1200, inactive=3, errors=1)
        assert executor.format_progress_description(stats) == (
            "Checking targets (ACTIVE: 1,200) (INACTIVE: 3) (Errors: 1)"
        )
