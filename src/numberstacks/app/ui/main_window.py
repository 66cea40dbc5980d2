"""
Main window: number input on the left, stacks preview on the right.
"""
from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar

from numberstacks.app.application import VISIBLE_APP_NAME
from numberstacks.app.state import Store
from numberstacks.app.ui.panels.number_input import NumberInputPanel
from numberstacks.app.ui.workarea import WorkArea
from numberstacks.model.layout import Layout


STATUS_TIMEOUT_MS = 5000


class MainWindow(QMainWindow):
    def __init__(self, store: Store | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 800)

        # Global store
        self.store = store if store is not None else Store()

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.input_panel = NumberInputPanel(self.store)
        self.work_area = WorkArea(self.input_panel, central)
        v.addWidget(self.work_area, 1)
        self.setCentralWidget(central)

        self.setStatusBar(QStatusBar(self))

        self.store.layout_changed.connect(self._on_layout_changed)
        self.store.input_rejected.connect(self._on_input_rejected)

        self._on_layout_changed(self.store.layout)

    @Slot(object)
    def _on_layout_changed(self, layout: Layout) -> None:
        self.work_area.preview.set_layout(layout)
        self.statusBar().clearMessage()

    @Slot(str)
    def _on_input_rejected(self, message: str) -> None:
        self.statusBar().showMessage(message, STATUS_TIMEOUT_MS)
