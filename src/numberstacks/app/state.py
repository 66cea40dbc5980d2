from __future__ import annotations

import logging
import math
from numbers import Integral, Real

from PySide6.QtCore import QObject, Signal

from numberstacks.config import DEFAULT_NUMBER, INPUT_MIN
from numberstacks.model.layout import Layout, render

logger = logging.getLogger(__name__)


class NumberInputError(ValueError):
    """Raised when an input value cannot be used as the current number."""


def coerce_number(value: object) -> int:
    """
    Convert raw input (spin box value, typed text) to a number that can be rendered.

    Raises:
        NumberInputError: For empty or non-numeric text, fractional or
            non-finite values, booleans and numbers below `INPUT_MIN`.
    """
    if isinstance(value, bool):
        raise NumberInputError(f"Expected a number, got {value!r}.")

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise NumberInputError("Please enter a number.")
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                raise NumberInputError(f"'{text}' is not a number.") from None
    else:
        number = value

    if isinstance(number, Integral):
        number = int(number)
    elif isinstance(number, Real):
        if not math.isfinite(number):
            raise NumberInputError(f"'{value}' is not a finite number.")
        if not float(number).is_integer():
            raise NumberInputError(f"'{value}' is not a whole number.")
        number = int(number)
    else:
        raise NumberInputError(f"Expected a number, got {value!r}.")

    if number < INPUT_MIN:
        raise NumberInputError(f"Number must be at least {INPUT_MIN}, got {number}.")
    return number


class Store(QObject):
    """Holds the current number and recomputes the layout on every accepted change."""
    number_changed = Signal(int)
    layout_changed = Signal(object)
    input_rejected = Signal(str)

    def __init__(self, number: int = DEFAULT_NUMBER) -> None:
        super().__init__()
        self._number = coerce_number(number)
        self._layout = render(self._number)

    @property
    def number(self) -> int:
        return self._number

    @property
    def layout(self) -> Layout:
        return self._layout

    def set_number(self, value: object) -> bool:
        """
        Replace the current number and rebuild the layout.

        Invalid input is rejected: the previous number and layout are kept and
        `input_rejected` is emitted with a readable message.

        Returns:
            True if the value was accepted.
        """
        try:
            number = coerce_number(value)
        except NumberInputError as e:
            logger.warning(f"Rejected input {value!r}: {e}")
            self.input_rejected.emit(str(e))
            return False

        self._number = number
        self._layout = render(number)
        logger.debug(f"Number set to {number} ({self._layout.mode}, {len(self._layout.blocks)} blocks)")

        self.number_changed.emit(number)
        self.layout_changed.emit(self._layout)
        return True
