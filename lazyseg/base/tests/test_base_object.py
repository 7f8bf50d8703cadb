import logging

from .. import BaseObject, DEBUG_ENV_VAR, parse_debug_level
from ...algebras import SumAddAlgebra
from ...segment_trees import LazySegmentTree


class Probe(BaseObject):
    pass


def test_default_level_is_error():
    assert parse_debug_level("0", "Probe") == logging.ERROR
    assert parse_debug_level("", "Probe") == logging.ERROR


def test_global_and_per_class_levels():
    assert parse_debug_level("2", "Probe") == logging.INFO
    assert parse_debug_level("Probe:3", "Probe") == logging.DEBUG
    assert parse_debug_level("Other:3", "Probe") == logging.ERROR
    assert parse_debug_level("1,Probe:3", "Probe") == logging.DEBUG
    assert parse_debug_level("Probe:3,1", "Probe") == logging.WARNING
    assert parse_debug_level("9", "Probe") == logging.DEBUG


def test_malformed_entries_are_skipped():
    assert parse_debug_level("a:b:c,2", "Probe") == logging.INFO
    assert parse_debug_level("Probe:x", "Probe") == logging.ERROR


def test_objects_read_level_from_environment(monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, "Probe:2")
    assert Probe().log.level == logging.INFO
    assert Probe().log.name == "Probe"

    monkeypatch.setenv(DEBUG_ENV_VAR, "LazySegmentTree:3")
    tree = LazySegmentTree.filled(3, 0, SumAddAlgebra())
    assert tree.log.level == logging.DEBUG


def test_tree_logs_operations(monkeypatch, caplog):
    monkeypatch.setenv(DEBUG_ENV_VAR, "3")
    with caplog.at_level(logging.DEBUG, logger="LazySegmentTree"):
        tree = LazySegmentTree.filled(4, 0, SumAddAlgebra())
        tree.update(0, 3, 1)
        tree.query(1, 2)
    messages = [r.getMessage() for r in caplog.records]
    assert "built LazySegmentTree of size 4 over SumAddAlgebra()" in messages
    assert "update [0, 3] with 1" in messages
    assert "query [1, 2]" in messages
