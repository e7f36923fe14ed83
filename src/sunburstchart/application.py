"""
Application Initialization
==========================
Creates and configures the QApplication instance.
"""
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "sunburstchart"
APP_ID = "issue-sunburst"

VISIBLE_APP_NAME = "Issue Sunburst"


def create_app() -> QApplication:
    """Create the QApplication, or return the one already running."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
