from __future__ import annotations

from PySide6.QtCore import Qt, QRectF, QSize
from PySide6.QtGui import QColor, QPainter, QPen
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QFrame, QSizePolicy,
)

from numberstacks.config import CELL_BORDER_COLOUR
from numberstacks.model.layout import (
    FactorLabel, GridDescriptor, Layout, LabelSide, PrimeMarker, StackBlock,
)

# -------------------------------------------------------------------------------
# Building blocks
# -------------------------------------------------------------------------------

class SquaresGrid(QWidget):
    """Paints one GridDescriptor as filled unit squares with a thin light border."""
    def __init__(self, grid: GridDescriptor, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.grid = grid
        self._rects = grid.cell_rects()
        self.setFixedSize(self.sizeHint())

    def sizeHint(self) -> QSize:
        return QSize(int(round(self.grid.width)), int(round(self.grid.height)))

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setPen(QPen(QColor(CELL_BORDER_COLOUR), 1))
        painter.setBrush(QColor(self.grid.fill_colour))
        for x, y, w, h in self._rects:
            painter.drawRect(QRectF(x, y, w - 1, h - 1))
        painter.end()


class PrimeChip(QLabel):
    """A bare prime in its colour with a rounded outline of the same colour."""
    def __init__(self, value: int, colour: str, parent: QWidget | None = None) -> None:
        super().__init__(str(value), parent)
        self.value = value
        self.colour = colour
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(
            f"QLabel {{ border: 4px solid {colour}; border-radius: 12px;"
            f" color: {colour}; font-weight: bold; padding: 1px 10px; }}"
        )

    @classmethod
    def from_marker(cls, marker: PrimeMarker, parent: QWidget | None = None) -> PrimeChip:
        return cls(marker.value, marker.colour, parent)


class FactorLabelWidget(QWidget):
    """Renders "a × b"; prime operands are shown as chips."""
    def __init__(self, label: FactorLabel, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.label = label

        h = QHBoxLayout(self)
        h.setContentsMargins(0, 0, 0, 6)
        h.setSpacing(4)
        h.addStretch(1)
        h.addWidget(self._side_widget(label.left))
        h.addWidget(QLabel("×", self))
        h.addWidget(self._side_widget(label.right))
        h.addStretch(1)

    def _side_widget(self, side: LabelSide) -> QLabel:
        if side.is_prime:
            return PrimeChip(side.value, side.colour, self)
        return QLabel(str(side.value), self)


class StackBlockWidget(QWidget):
    """One caption (label or chip) above its grid."""
    def __init__(self, block: StackBlock, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.block = block

        v = QVBoxLayout(self)
        v.setContentsMargins(0, 0, 0, 0)

        if block.marker is not None:
            self.caption: QWidget = PrimeChip.from_marker(block.marker, self)
        else:
            self.caption = FactorLabelWidget(block.label, self)
        v.addWidget(self.caption, 0, Qt.AlignmentFlag.AlignHCenter)

        self.squares = SquaresGrid(block.grid)
        if block.grid.scrollable:
            # wide grids scroll on their own instead of stretching the whole preview
            self.scroll: QScrollArea | None = QScrollArea(self)
            self.scroll.setFrameShape(QFrame.Shape.NoFrame)
            self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAsNeeded)
            self.scroll.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
            self.scroll.setAlignment(Qt.AlignmentFlag.AlignHCenter)
            self.scroll.setWidget(self.squares)
            self.scroll.setFixedHeight(self.squares.height() + self.scroll.horizontalScrollBar().sizeHint().height())
            v.addWidget(self.scroll)
        else:
            self.scroll = None
            v.addWidget(self.squares, 0, Qt.AlignmentFlag.AlignHCenter)

# -------------------------------------------------------------------------------
# Preview widget
# -------------------------------------------------------------------------------

class StacksPreview(QScrollArea):
    """
    Vertical, scrollable list of stack blocks for the current layout.

    Every call to `set_layout` rebuilds the blocks from scratch.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWidgetResizable(True)

        self._content = QWidget(self)
        self._column = QVBoxLayout(self._content)
        self._column.setSpacing(36)
        self._column.addStretch(1)
        self.setWidget(self._content)

        self._blocks: list[StackBlockWidget] = []
        self._layout: Layout | None = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def blocks(self) -> list[StackBlockWidget]:
        return list(self._blocks)

    @property
    def current_layout(self) -> Layout | None:
        return self._layout

    def set_layout(self, layout: Layout) -> None:
        """Replace the rendered blocks with the blocks of `layout`."""
        self._clear_blocks()
        self._layout = layout

        for block in layout.blocks:
            widget = StackBlockWidget(block, self._content)
            # keep the trailing stretch last
            self._column.insertWidget(self._column.count() - 1, widget)
            self._blocks.append(widget)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _clear_blocks(self) -> None:
        for widget in self._blocks:
            self._column.removeWidget(widget)
            widget.setParent(None)
            widget.deleteLater()
        self._blocks.clear()
