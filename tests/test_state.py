import logging

import pytest

from numberstacks.app.state import NumberInputError, Store, coerce_number
from numberstacks.config import DEFAULT_NUMBER
from numberstacks.model.layout import LayoutMode


@pytest.mark.parametrize(
    "raw,expected",
    [(12, 12), ("12", 12), ("  36 ", 36), (24.0, 24), ("24.0", 24), (250, 250)],
)
def test_coerce_accepts_whole_numbers(raw, expected):
    assert coerce_number(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "   ", "abc", "1.5", 2.5, float("nan"), float("inf"), "1e400", None, True, 1, 0, -4, "1"],
)
def test_coerce_rejects_bad_input(raw):
    with pytest.raises(NumberInputError):
        coerce_number(raw)


def test_input_error_is_a_value_error():
    assert issubclass(NumberInputError, ValueError)


@pytest.fixture
def store(qapp):
    return Store()


def test_store_starts_with_default_layout(store):
    assert store.number == DEFAULT_NUMBER
    assert store.layout.number == DEFAULT_NUMBER


def test_set_number_recomputes_and_emits(store):
    numbers, layouts = [], []
    store.number_changed.connect(numbers.append)
    store.layout_changed.connect(layouts.append)

    assert store.set_number(17) is True

    assert store.number == 17
    assert store.layout.mode == LayoutMode.PRIME
    assert numbers == [17]
    assert layouts == [store.layout]


def test_same_value_recomputes_again(store):
    layouts = []
    store.layout_changed.connect(layouts.append)
    store.set_number(12)
    store.set_number(12)
    assert len(layouts) == 2


@pytest.mark.parametrize("raw", ["", "abc", 1, 0, "7.5"])
def test_rejected_input_keeps_previous_state(store, raw, caplog):
    store.set_number(12)
    previous = store.layout
    messages, layouts = [], []
    store.input_rejected.connect(messages.append)
    store.layout_changed.connect(layouts.append)

    with caplog.at_level(logging.WARNING, logger="numberstacks"):
        assert store.set_number(raw) is False

    assert store.number == 12
    assert store.layout is previous
    assert layouts == []
    assert len(messages) == 1 and messages[0]
    assert "Rejected input" in caplog.text


def test_numbers_above_widget_range_are_computed(store):
    assert store.set_number(1001)
    assert store.layout.pairs[0] == (7, 143)


def test_invalid_initial_number_raises(qapp):
    with pytest.raises(NumberInputError):
        Store(1)
