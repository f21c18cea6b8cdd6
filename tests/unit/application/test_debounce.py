"""Unit tests for DebouncedInput."""

from __future__ import annotations

import asyncio

from structlog.testing import capture_logs

from expert_directory.application.search import DebouncedInput


class _Recorder:
    def __init__(self) -> None:
        self.values: list[str] = []

    async def __call__(self, value: str) -> None:
        self.values.append(value)


class TestDebouncedInput:
    def test_only_last_value_committed(self) -> None:
        commits = _Recorder()

        async def run() -> None:
            field = DebouncedInput(0.02, commits)
            for text in ("c", "ca", "car"):
                field.push(text)
                await asyncio.sleep(0.005)
            assert field.pending
            assert field.value == "car"
            await field.wait()
            assert not field.pending
            assert field.value is None

        asyncio.run(run())
        assert commits.values == ["car"]

    def test_flush_commits_immediately(self) -> None:
        commits = _Recorder()

        async def run() -> None:
            field = DebouncedInput(10.0, commits)
            field.push("oncology")
            await field.flush()
            assert not field.pending

        asyncio.run(run())
        assert commits.values == ["oncology"]

    def test_flush_without_pending_value_is_noop(self) -> None:
        commits = _Recorder()
        asyncio.run(DebouncedInput(0.01, commits).flush())
        assert commits.values == []

    def test_cancel_drops_value(self) -> None:
        commits = _Recorder()

        async def run() -> None:
            field = DebouncedInput(0.01, commits)
            field.push("x")
            field.cancel()
            await asyncio.sleep(0.03)
            assert field.value is None

        asyncio.run(run())
        assert commits.values == []

    def test_fields_are_independent(self) -> None:
        fast, slow = _Recorder(), _Recorder()

        async def run() -> None:
            a = DebouncedInput(0.01, fast)
            b = DebouncedInput(0.2, slow)
            b.push("country")
            a.push("discipline")
            await a.wait()
            assert fast.values == ["discipline"]
            assert slow.values == []
            b.cancel()

        asyncio.run(run())

    def test_push_during_commit_does_not_cancel_it(self) -> None:

        class SlowCommit:
            def __init__(self) -> None:
                self.done: list[str] = []

            async def __call__(self, value: str) -> None:
                await asyncio.sleep(0.03)
                self.done.append(value)

        commit = SlowCommit()

        async def run() -> None:
            field = DebouncedInput(0.005, commit)
            field.push("first")
            await asyncio.sleep(0.015)
            field.push("second")
            await field.wait()

        asyncio.run(run())
        assert commit.done == ["first", "second"]

    def test_failed_commit_is_logged(self) -> None:
        async def failing(value: str) -> None:
            raise RuntimeError(f"cannot apply {value}")

        async def run() -> None:
            field = DebouncedInput(0.005, failing)
            field.push("oncology")
            await field.wait()
            assert not field.pending

        with capture_logs() as logs:
            asyncio.run(run())
        failures = [entry for entry in logs if entry["event"] == "debounced_commit_failed"]
        assert len(failures) == 1
        assert failures[0]["log_level"] == "warning"
        assert "cannot apply oncology" in failures[0]["error"]

    def test_cancelled_timer_is_not_logged(self) -> None:
        async def run() -> None:
            field = DebouncedInput(0.05, _Recorder())
            field.push("x")
            field.cancel()
            await field.wait()

        with capture_logs() as logs:
            asyncio.run(run())
        assert logs == []
