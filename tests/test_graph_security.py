import logging

import pytest

from helpers import expect_raises


@pytest.mark.parametrize("bad", [1, None, ("A",), b"A"])
def test_non_string_label_rejected(empty_instance, bad):
    g = empty_instance()
    with pytest.raises(TypeError):
        g.add(bad)
    with pytest.raises(TypeError):
        g.set("A", bad, 1)
    assert g.vertices() == set()


@pytest.mark.parametrize("bad", [1.5, "3", None, True])
def test_non_int_weight_rejected(empty_instance, bad):
    g = empty_instance()
    expect_raises(TypeError, g.set, "A", "B", bad)
    # rejected before endpoints are inserted
    assert g.vertices() == set()


def test_queries_tolerate_foreign_labels(empty_instance):
    g = empty_instance()
    g.set("A", "B", 1)
    assert g.remove(["not", "hashable"]) is False
    assert g.targets(["x"]) == {}
    assert g.sources(["x"]) == {}
    assert 42 not in g


def test_custom_validator(empty_instance):
    g = empty_instance(vertex_validator=lambda v: len(v) <= 5)
    assert g.add("short")
    with pytest.raises(ValueError):
        g.add("toolong")
    with pytest.raises(ValueError):
        g.set("short", "toolong", 1)
    assert g.vertices() == {"short"}


def test_vertex_cap(empty_instance):
    g = empty_instance(max_vertices=3)
    g.add("A"); g.add("B"); g.add("C")
    assert len(g) == 3
    assert g.add("A") is False  # existing vertex, no growth
    with pytest.raises(OverflowError):
        g.add("D")


def test_vertex_cap_set_is_all_or_nothing(empty_instance):
    g = empty_instance(max_vertices=2)
    g.add("A")
    # would need two new endpoints; only one slot left
    with pytest.raises(OverflowError):
        g.set("X", "Y", 1)
    assert g.vertices() == {"A"}
    g.set("A", "B", 1)
    g.set("B", "A", 2)
    assert g.vertices() == {"A", "B"}


def test_str_strips_ansi_control_and_truncates(empty_instance):
    red = "\x1b[31mRED\x1b[0m"
    weird = "Weird\tName\x00"
    long_label = "L" * 300

    g = empty_instance()
    g.set(red, weird, 1)
    g.add(long_label)
    s = str(g)

    assert "\x1b[" not in s
    assert "\t" not in s and "\x00" not in s
    assert "RED -> [WeirdName (1)]" in s
    assert "…" in s


def test_mutations_logged_at_debug(empty_instance, caplog):
    g = empty_instance()
    with caplog.at_level(logging.DEBUG):
        g.set("A", "B", 1)
        g.set("A", "B", 2)
        g.remove("B")
    text = caplog.text
    assert "Added vertex A" in text
    assert "Created edge A -> [B (1)]" in text
    assert "Updated edge A -> [B (2)]: 1 -> 2" in text
    assert "Removed vertex B and 1 incident edge(s)" in text


def test_rejection_logged_at_warning(empty_instance, caplog):
    g = empty_instance()
    with caplog.at_level(logging.WARNING):
        with pytest.raises(TypeError):
            g.set("A", "B", 1.0)
    assert any(r.levelno == logging.WARNING for r in caplog.records)
