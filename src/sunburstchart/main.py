"""
GUI Entry Point
===============
Builds the window around a tree or an issue list and starts the Qt event loop.

It acts as the "Dependency Injection" root:
1. Creates the Qt Application.
2. Instantiates the Main Window with the data to show.
3. Runs the event loop.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from sunburstchart.application import create_app
from sunburstchart.model.issues import GroupBy, Issue
from sunburstchart.model.tree import Node
from sunburstchart.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def main(
    tree: Optional[Node] = None,
    issues: Optional[Sequence[Issue]] = None,
    group_by: GroupBy = GroupBy.SEVERITY,
) -> int:
    app = create_app()

    window = MainWindow(tree=tree, issues=issues, group_by=group_by)
    window.show()
    logger.info("Starting Qt event loop.")

    return app.exec()
