from __future__ import annotations

from time import sleep

from synthload.utils.profiler import ProfileStats, profile_block

SLEEP_SECONDS = 0.05
ROWS = 10


def test_profile_block_measures_time_and_rows() -> None:
    with profile_block("sleep") as stats:
        sleep(SLEEP_SECONDS)
        stats.rows += ROWS
    assert stats.duration_seconds >= SLEEP_SECONDS
    assert stats.throughput_rows_per_sec > 0
    assert stats.peak_rss_bytes is None or stats.peak_rss_bytes > 0
    if stats.cpu_percent is not None:
        assert isinstance(stats.cpu_percent, float)


def test_profile_block_with_tracemalloc() -> None:
    with profile_block("alloc", enable_tracemalloc=True) as stats:
        _ = [str(i) for i in range(10_000)]
    assert stats.peak_traced_bytes is not None and stats.peak_traced_bytes > 0


def test_throughput_is_zero_without_duration() -> None:
    stats = ProfileStats(label="empty", rows=ROWS)
    assert stats.throughput_rows_per_sec == 0.0
    assert stats.as_dict()["rows"] == ROWS
