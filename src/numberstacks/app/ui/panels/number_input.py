from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSpinBox, QSizePolicy,
)

from numberstacks.app.state import Store
from numberstacks.app.ui.panels.base import BasePanel
from numberstacks.config import INPUT_MAX, INPUT_MIN
from numberstacks.model.analyzer import smallest_prime_factor
from numberstacks.model.layout import Layout, LayoutMode


def describe_layout(layout: Layout) -> str:
    """One-line summary shown under the input."""
    if layout.mode == LayoutMode.PRIME:
        return f"{layout.number} is prime"
    count = len(layout.blocks)
    noun = "factor pair" if count == 1 else "factor pairs"
    spf = smallest_prime_factor(layout.number)
    return f"{layout.number} has {count} {noun}, smallest prime factor {spf}"


class NumberInputPanel(BasePanel):
    """
    Panel with the number input.

    The spin box forwards every change to the store; the store pushes the
    accepted number back so both stay in sync when the number is set elsewhere.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)

        root = QVBoxLayout(self)

        self.group = QGroupBox(self.tr("Number"), self)
        root.addWidget(self.group, 0)
        grid = QGridLayout(self.group)
        grid.setVerticalSpacing(8)

        self.label_number = QLabel(self.tr("Number:"), self.group)
        grid.addWidget(self.label_number, 0, 0)

        self.spin = QSpinBox(self.group)
        self.spin.setRange(INPUT_MIN, INPUT_MAX)
        self.spin.setSingleStep(1)
        self.spin.setValue(store.number)
        self.spin.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        grid.addWidget(self.spin, 0, 1)

        self.summary = QLabel(describe_layout(store.layout), self.group)
        grid.addWidget(self.summary, 1, 0, 1, 2)

        root.addStretch()

        # wiring
        self.spin.valueChanged.connect(self._on_value_changed)
        self.store.number_changed.connect(self._on_number_changed)
        self.store.layout_changed.connect(self._on_layout_changed)

    @Slot(int)
    def _on_value_changed(self, value: int) -> None:
        self.store.set_number(value)

    @Slot(int)
    def _on_number_changed(self, number: int) -> None:
        if self.spin.value() == number:
            return
        # numbers outside the spin box range are still shown in the preview
        self.spin.blockSignals(True)
        self.spin.setValue(number)
        self.spin.blockSignals(False)

    @Slot(object)
    def _on_layout_changed(self, layout: Layout) -> None:
        self.summary.setText(describe_layout(layout))
