import pytest

from aiko.callback import Callback, function_callback, method_callback


class Receiver:
    def __init__(self):
        self.method_callback_count = 0

    def method(self):
        self.method_callback_count += 1


def test_function_callback():
    calls = []

    def function():
        calls.append(1)

    callback = function_callback(function)
    result = callback()
    assert result is None
    assert calls == [1]


def test_method_callback():
    receiver = Receiver()
    callback = method_callback(receiver, Receiver.method)
    callback()
    assert receiver.method_callback_count == 1


def test_method_callback_by_name():
    receiver = Receiver()
    callback = method_callback(receiver, "method")
    callback()
    callback()
    assert receiver.method_callback_count == 2


def test_method_callback_targets_only_its_object():
    first, second = Receiver(), Receiver()
    method_callback(first, Receiver.method)()
    assert (first.method_callback_count, second.method_callback_count) == (1, 0)


def test_callback_can_fire_repeatedly():
    calls = []
    callback = Callback(lambda: calls.append("x"))
    for _ in range(3):
        callback()
    assert calls == ["x", "x", "x"]


def test_callback_returns_none():
    callback = Callback(lambda: 42)
    assert callback() is None


def test_non_callable_is_rejected():
    with pytest.raises(TypeError):
        Callback(5)


def test_method_callback_rejects_non_callable():
    with pytest.raises(TypeError):
        method_callback(Receiver(), 3)


def test_method_callback_unknown_name():
    with pytest.raises(AttributeError):
        method_callback(Receiver(), "missing")