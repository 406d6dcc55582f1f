"""Commit graphs shared by the tests.

Edges point from a commit to its parents.
"""

import pytest


@pytest.fixture
def diamond():
    # A - B - C
    #      \
    #       D
    return {
        "A": (),
        "B": ("A",),
        "C": ("B",),
        "D": ("B",),
    }


@pytest.fixture
def linear():
    # A - B - C - D
    return {
        "A": (),
        "B": ("A",),
        "C": ("B",),
        "D": ("C",),
    }


@pytest.fixture
def criss_cross():
    #       C - D - G
    #      /  \ /
    # A - B    X
    #      \  / \
    #       E - F - H
    return {
        "A": (),
        "B": ("A",),
        "C": ("B",),
        "E": ("B",),
        "D": ("C", "E"),
        "F": ("E", "C"),
        "G": ("D", "F"),
        "H": ("D", "F"),
    }


@pytest.fixture
def long_tail(criss_cross):
    """``criss_cross`` with 500 more commits below ``A``."""
    graph = dict(criss_cross)
    graph["A"] = ("T1",)
    for i in range(1, 500):
        graph[f"T{i}"] = (f"T{i + 1}",)
    graph["T500"] = ()
    return graph


@pytest.fixture
def unrelated():
    # Two histories with no shared commit.
    return {
        "A1": (),
        "A2": ("A1",),
        "B1": (),
        "B2": ("B1",),
    }


@pytest.fixture
def shortcut():
    # Z is reachable from both tips in one step, but it is also an
    # ancestor of C (through U), which both tips reach later.
    #
    #   X: Z, P1     P1 - P2 - C
    #   Y: Z, Q1     Q1 - Q2 - C
    #   C - U - Z - R
    return {
        "R": (),
        "Z": ("R",),
        "U": ("Z",),
        "C": ("U",),
        "P2": ("C",),
        "P1": ("P2",),
        "Q2": ("C",),
        "Q1": ("Q2",),
        "X": ("Z", "P1"),
        "Y": ("Z", "Q1"),
    }


@pytest.fixture(params=["diamond", "linear", "criss_cross", "shortcut"])
def graph(request):
    return request.getfixturevalue(request.param)
