import logging

import pytest

from geomgraph import build_square_graph
from geomgraph.logging_utils import configure_logging, get_logger


@pytest.fixture
def captured(caplog):
    logger = logging.getLogger("geomgraph")
    old_level = logger.level
    old_handlers = list(logger.handlers)
    for handler in old_handlers:
        logger.removeHandler(handler)
    logger.addHandler(caplog.handler)
    logger.setLevel(logging.DEBUG)
    yield caplog
    logger.removeHandler(caplog.handler)
    for handler in old_handlers:
        logger.addHandler(handler)
    logger.setLevel(old_level)


def test_get_logger_namespaces():
    assert get_logger("graph").name == "geomgraph.graph"
    assert get_logger("geomgraph.arena").name == "geomgraph.arena"


def test_mutations_log_at_debug(captured):
    graph, ids = build_square_graph()
    graph.remove_edge(next(graph.iter_edges()).id)
    messages = [r.getMessage() for r in captured.records]
    assert any(m.startswith("add_edge") for m in messages)
    assert any(m.startswith("remove_edge") for m in messages)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
