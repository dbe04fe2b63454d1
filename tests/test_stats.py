from __future__ import annotations

import pytest

from stats import StatsError, StatsStore


def test_top_stats_ordered_by_time_then_id(store) -> None:
    store.save_stat("b", "easy", 50)
    store.save_stat("a", "hard", 20)
    store.save_stat("c", "medium", 50)

    stats = store.get_top_stats()
    assert [(s["playerName"], s["timeTakenSeconds"]) for s in stats] == [
        ("a", 20),
        ("b", 50),
        ("c", 50),
    ]
    assert stats[1]["id"] < stats[2]["id"]


def test_limit(store) -> None:
    for seconds in range(1, 6):
        store.save_stat("p", "easy", seconds)
    assert len(store.get_top_stats(limit=3)) == 3


def test_migrate_is_repeatable(store) -> None:
    store.save_stat("p", "", 10)
    store.migrate()
    assert store.get_top_stats()[0]["difficulty"] == ""


def test_query_without_schema_raises(tmp_path) -> None:
    store = StatsStore(f"sqlite:///{tmp_path / 'empty.db'}")
    with pytest.raises(StatsError):
        store.get_top_stats()
    store.close()
