"""Tests for the lookup cache."""

from typing import Mapping

import pytest

from lastcommon import Counting, LookupCache, MalformedResponse, Memory, NotFound
from lastcommon.source.base import CommitGraphSource


class Forgetful(CommitGraphSource):
    """Answers about some other commit than the one asked for."""

    def resolve_branch(self, name: str) -> str:
        return "A"

    def fetch_parents(self, commit: str) -> Mapping[str, tuple[str, ...]]:
        return {"elsewhere": ()}


@pytest.fixture
def counted(linear):
    source = Counting(Memory(linear, {"main": "D", "old": "A"}))
    return source, LookupCache(source)


class TestBranchLookups:
    def test_resolves_once(self, counted):
        source, cache = counted
        assert cache.branch("main") == "D"
        assert cache.branch("main") == "D"
        assert source.branch_calls == {"main": 1}

    def test_branches_snapshot(self, counted):
        _, cache = counted
        cache.branch("main")
        cache.branch("old")
        assert cache.branches == {"main": "D", "old": "A"}

    def test_failure_keeps_earlier_entries(self, counted):
        _, cache = counted
        cache.branch("main")
        with pytest.raises(NotFound):
            cache.branch("nope")
        assert cache.branches == {"main": "D"}


class TestParentLookups:
    def test_fetches_once(self, counted):
        source, cache = counted
        assert cache.parents("C") == ("B",)
        assert cache.parents("C") == ("B",)
        assert source.parent_calls == {"C": 1}

    def test_cached_parents_never_calls_out(self, counted):
        source, cache = counted
        assert cache.cached_parents("C") is None
        assert source.total_calls == 0
        cache.parents("C")
        assert cache.cached_parents("C") == ("B",)

    def test_batch_answers_are_kept(self, linear):
        source = Counting(Memory(linear, batch_size=100))
        cache = LookupCache(source)
        cache.parents("D")
        assert set(cache.commits()) == {"A", "B", "C", "D"}
        assert cache.parents("B") == ("A",)
        assert source.parent_calls == {"D": 1}

    def test_contains_and_len(self, counted):
        _, cache = counted
        cache.parents("B")
        assert "B" in cache
        assert "A" not in cache
        assert len(cache) == 1

    def test_missing_answer_is_malformed(self):
        cache = LookupCache(Forgetful())
        with pytest.raises(MalformedResponse):
            cache.parents("A")

    def test_not_found_propagates(self, counted):
        _, cache = counted
        with pytest.raises(NotFound):
            cache.parents("nope")
        assert len(cache) == 0

    def test_clear(self, counted):
        source, cache = counted
        cache.branch("main")
        cache.parents("D")
        cache.clear()
        assert len(cache) == 0
        assert cache.branches == {}
        cache.parents("D")
        assert source.parent_calls == {"D": 2}
