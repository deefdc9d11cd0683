import asyncio
import time

from countdown.core.ticks import TickSequence, tick_values


def test_tick_values_counts_down_to_zero() -> None:
    assert list(tick_values(3)) == [2, 1, 0]
    assert list(tick_values(1)) == [0]
    assert list(tick_values(0)) == []


def test_tick_values_is_fresh_per_call() -> None:
    first = tick_values(2)
    assert next(first) == 1
    assert list(tick_values(2)) == [1, 0]


def test_first_value_arrives_after_one_interval(scheduler) -> None:
    seen: list[int] = []
    sequence = TickSequence(3, scheduler, seen.append)
    sequence.start()

    assert seen == []
    scheduler.advance(0.99)
    assert seen == []
    scheduler.advance(0.01)
    assert seen == [2]


def test_sequence_exhausts_after_zero(scheduler) -> None:
    seen: list[int] = []
    sequence = TickSequence(3, scheduler, seen.append)
    sequence.start()

    scheduler.advance(10)

    assert seen == [2, 1, 0]
    assert sequence.exhausted
    assert not sequence.active
    assert scheduler.pending == []


def test_cancel_between_emissions_stops_delivery(scheduler) -> None:
    seen: list[int] = []
    sequence = TickSequence(5, scheduler, seen.append)
    sequence.start()
    scheduler.advance(1)

    sequence.cancel()
    scheduler.advance(10)

    assert seen == [4]
    assert sequence.cancelled
    assert scheduler.pending == []


def test_queued_callback_is_ignored_after_cancel(scheduler) -> None:
    seen: list[int] = []
    sequence = TickSequence(3, scheduler, seen.append)
    sequence.start()
    queued = scheduler.pending[0]

    sequence.cancel()
    queued.callback()

    assert seen == []


def test_start_after_cancel_schedules_nothing(scheduler) -> None:
    sequence = TickSequence(3, scheduler, lambda _value: None)
    sequence.cancel()
    sequence.start()

    assert scheduler.pending == []


def test_runs_on_asyncio_loop() -> None:
    async def collect() -> tuple[list[int], float]:
        loop = asyncio.get_running_loop()
        done = loop.create_future()
        seen: list[int] = []

        def on_tick(value: int) -> None:
            seen.append(value)
            if value == 0:
                done.set_result(None)

        started = time.monotonic()
        TickSequence(3, loop, on_tick, interval=0.02).start()
        await asyncio.wait_for(done, timeout=2)
        return seen, time.monotonic() - started

    seen, elapsed = asyncio.run(collect())

    assert seen == [2, 1, 0]
    assert elapsed >= 0.05
