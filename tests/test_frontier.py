"""Tests for the search frontier."""

from lastcommon import Frontier, FrontierEntry, Origin


class TestFrontierBasic:
    def test_fifo_order(self):
        f = Frontier()
        f.extend(["a", "b"], Origin.A)
        f.push(FrontierEntry("c", Origin.B))
        assert [f.pop().commit for _ in range(3)] == ["a", "b", "c"]
        assert not f

    def test_len_and_contains(self):
        f = Frontier()
        f.push(FrontierEntry("a", Origin.A))
        f.push(FrontierEntry("a", Origin.B))
        assert len(f) == 2
        assert "a" in f
        assert "b" not in f

    def test_pop_updates_index(self):
        f = Frontier()
        f.push(FrontierEntry("a", Origin.A))
        f.push(FrontierEntry("a", Origin.B))
        f.pop()
        assert "a" in f
        f.pop()
        assert "a" not in f

    def test_entries_keep_origin(self):
        f = Frontier()
        f.extend(["x"], Origin.B)
        assert f.pop() == FrontierEntry("x", Origin.B)


class TestFrontierDiscard:
    def test_discard_removes_every_origin(self):
        f = Frontier()
        f.extend(["a", "b", "a"], Origin.A)
        f.extend(["a"], Origin.B)
        assert f.discard("a") == 3
        assert "a" not in f
        assert [e.commit for e in f] == ["b"]

    def test_discard_missing(self):
        f = Frontier()
        f.extend(["a"], Origin.A)
        assert f.discard("nope") == 0
        assert len(f) == 1

    def test_discard_preserves_order(self):
        f = Frontier()
        f.extend(["a", "x", "b", "x", "c"], Origin.A)
        f.discard("x")
        assert [f.pop().commit for _ in range(3)] == ["a", "b", "c"]
