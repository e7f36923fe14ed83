"""
Shared fixtures for the sunburst chart tests.
"""
import os

# Qt must not look for a display when widgets are created in tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from sunburstchart.model.tree import Node


@pytest.fixture
def three_issues():
    """Two severity buckets: High=1, Medium=2."""
    return Node(
        name="3 Issues",
        children=(
            Node(name="High", value=1, color="#e11d48"),
            Node(name="Medium", value=2, color="#f59e0b"),
        ),
    )


@pytest.fixture
def nested_tree():
    """root -> (A: a1=1, a2=3), (B: b1=4), (C: 0 leaf)."""
    return Node(
        name="root",
        children=(
            Node(name="A", children=(
                Node(name="a1", value=1),
                Node(name="a2", value=3),
            )),
            Node(name="B", children=(
                Node(name="b1", value=4),
            )),
            Node(name="C", value=0),
        ),
    )


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
