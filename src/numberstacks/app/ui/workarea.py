from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QSplitter, QVBoxLayout

from numberstacks.app.ui.preview import StacksPreview


class WorkArea(QWidget):
    """Input panel on the left, stacks preview filling the rest of the splitter."""
    def __init__(self, panel: QWidget, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        v = QVBoxLayout(self)
        self.splitter = QSplitter(Qt.Orientation.Horizontal, self)
        self.splitter.setChildrenCollapsible(False)
        v.addWidget(self.splitter, 1)

        self.panel = panel
        self.preview = StacksPreview(self.splitter)

        self.splitter.addWidget(self.panel)
        self.splitter.addWidget(self.preview)
        # only the preview grows with the window
        self.splitter.setStretchFactor(0, 0)
        self.splitter.setStretchFactor(1, 1)
