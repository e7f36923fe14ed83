"""
Tests for the Qt sunburst widget (offscreen platform).
"""
import pytest
from PySide6.QtCore import QEvent, QPointF, QSize, Qt
from PySide6.QtGui import QImage, QMouseEvent, QResizeEvent

from sunburstchart.model.geometry_utils import polar_to_cartesian
from sunburstchart.model.issues import GroupBy, Issue, Severity
from sunburstchart.model.paths import build_arc_path
from sunburstchart.view.main_window import MainWindow
from sunburstchart.view.sunburst_widget import SunburstWidget, to_painter_path


def mouse_press(x, y, button=Qt.LeftButton):
    pos = QPointF(x, y)
    return QMouseEvent(QEvent.MouseButtonPress, pos, pos, button, button, Qt.NoModifier)


def mouse_move(x, y):
    pos = QPointF(x, y)
    return QMouseEvent(QEvent.MouseMove, pos, pos, Qt.NoButton, Qt.NoButton, Qt.NoModifier)


@pytest.fixture
def widget(qapp, three_issues):
    w = SunburstWidget()
    w.resize(200, 200)
    w.set_data(three_issues)
    yield w
    w.deleteLater()


def ring_point(angle):
    # 200x200 box, one ring: hole radius 50, ring [50, 100)
    return polar_to_cartesian(100.0, 100.0, 75.0, angle)


class TestSunburstWidget:
    def test_chart_follows_size(self, widget):
        chart = widget.chart()

        assert chart is not None
        assert chart.radius == 100.0
        assert [s.arc.name for s in chart.visible_segments] == ["High", "Medium"]

        # Hidden widgets defer resize events, deliver it by hand
        widget.resize(180, 300)
        widget.resizeEvent(QResizeEvent(QSize(180, 300), QSize(200, 200)))
        assert widget.chart().radius == 90.0

    def test_click_emits_source_node(self, widget, three_issues):
        clicked = []
        widget.segment_clicked.connect(clicked.append)

        widget.mousePressEvent(mouse_press(*ring_point(300)))

        assert len(clicked) == 1
        assert clicked[0] is three_issues.children[1]

    def test_right_click_ignored(self, widget):
        clicked = []
        widget.segment_clicked.connect(clicked.append)

        widget.mousePressEvent(mouse_press(*ring_point(300), button=Qt.RightButton))

        assert clicked == []

    def test_hover_changes_center_label(self, widget):
        labels = []
        widget.hover_label_changed.connect(labels.append)

        widget.mouseMoveEvent(mouse_move(*ring_point(60)))
        assert widget.center_label() == "High: 1"

        widget.leaveEvent(QEvent(QEvent.Leave))
        assert widget.center_label() == "3 Issues"
        assert labels == ["High: 1", "3 Issues"]

    def test_clear(self, widget):
        widget.set_data(None)

        assert widget.chart() is None
        assert widget.center_label() == ""

    def test_renders(self, widget):
        image = QImage(200, 200, QImage.Format_ARGB32)
        image.fill(Qt.transparent)
        widget.render(image)

        x, y = ring_point(60)
        assert image.pixelColor(int(x), int(y)).name() == "#e11d48"


def test_painter_path_matches_outline():
    qpath = to_painter_path(build_arc_path((100.0, 100.0), 50.0, 25.0, 0.0, 90.0))

    assert qpath.contains(QPointF(*polar_to_cartesian(100.0, 100.0, 40.0, 45.0)))
    assert not qpath.contains(QPointF(*polar_to_cartesian(100.0, 100.0, 40.0, 180.0)))
    assert not qpath.contains(QPointF(100.0, 100.0))


def test_empty_painter_path():
    assert to_painter_path(build_arc_path((0.0, 0.0), 10.0, 5.0, 30.0, 30.0)).isEmpty()


class TestMainWindow:
    def test_regroup(self, qapp):
        issues = [
            Issue(table_name="orders", type="Nulls", severity=Severity.HIGH),
            Issue(table_name="customers", type="Nulls", severity=Severity.LOW),
        ]
        window = MainWindow(issues=issues)
        window.chart_widget.resize(200, 200)

        assert window.chart_widget.chart().max_levels == 1

        window.group_combo.setCurrentIndex(list(GroupBy).index(GroupBy.TABLE))
        assert window.current_group_by() == GroupBy.TABLE
        assert window.chart_widget.chart().max_levels == 2
        window.deleteLater()

    def test_tree_mode_disables_grouping(self, qapp, three_issues):
        window = MainWindow(tree=three_issues)

        assert not window.group_combo.isEnabled()
        assert window.chart_widget.center_label() == "3 Issues"
        window.deleteLater()
