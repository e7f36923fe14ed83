"""
Main Application Window
=======================
Hosts the sunburst widget, a grouping selector for issue lists and a status
bar reporting hovered and clicked segments.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtWidgets import (
    QComboBox, QHBoxLayout, QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget
)

from sunburstchart.model.interaction import format_value
from sunburstchart.model.issues import GroupBy, Issue, build_issue_tree
from sunburstchart.model.tree import Node
from sunburstchart.view.sunburst_widget import SunburstWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Issue Sunburst"

GROUP_BY_LABELS = {
    GroupBy.SEVERITY: "Severity",
    GroupBy.TABLE: "Table",
    GroupBy.TYPE: "Issue type",
}


class MainWindow(QMainWindow):
    def __init__(
        self,
        tree: Optional[Node] = None,
        issues: Optional[Sequence[Issue]] = None,
        group_by: GroupBy = GroupBy.SEVERITY,
    ) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(640, 640)

        self.issues: list[Issue] = list(issues) if issues is not None else []
        self.last_clicked: Optional[Node] = None

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- GROUPING SELECTOR (only meaningful for issue lists) ---
        selector_row = QHBoxLayout()
        selector_row.addWidget(QLabel("Group by:"))
        self.group_combo = QComboBox()
        for key, text in GROUP_BY_LABELS.items():
            self.group_combo.addItem(text, key)
        self.group_combo.setCurrentIndex(list(GROUP_BY_LABELS).index(GroupBy(group_by)))
        self.group_combo.setEnabled(issues is not None)
        self.group_combo.currentIndexChanged.connect(self._on_group_changed)
        selector_row.addWidget(self.group_combo)
        selector_row.addStretch(1)
        main_layout.addLayout(selector_row)

        # --- CHART ---
        self.chart_widget = SunburstWidget()
        self.chart_widget.segment_clicked.connect(self._on_segment_clicked)
        self.chart_widget.hover_label_changed.connect(self._on_hover_label_changed)
        main_layout.addWidget(self.chart_widget, 1)

        self.setStatusBar(QStatusBar())

        if issues is not None:
            self.chart_widget.set_data(build_issue_tree(self.issues, group_by))
        else:
            self.chart_widget.set_data(tree)

    def current_group_by(self) -> GroupBy:
        return self.group_combo.currentData()

    def _on_group_changed(self, _index: int) -> None:
        group_by = self.current_group_by()
        logger.info(f"Regrouping {len(self.issues)} issues by {group_by}.")
        self.chart_widget.set_data(build_issue_tree(self.issues, group_by))

    def _on_segment_clicked(self, node: Optional[Node]) -> None:
        self.last_clicked = node
        if node is None:
            return
        logger.info(f"Segment clicked: {node.name}")
        self.statusBar().showMessage(f"Selected: {node.name} ({format_value(node.value)})")

    def _on_hover_label_changed(self, label: str) -> None:
        self.statusBar().showMessage(label, 2000)
