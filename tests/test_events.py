import pytest

from kglab.events import Event, KeyEventArg, MouseEventArg, MouseWheelEventArg


def test_handlers_run_in_order_with_sender_and_arg():
    event = Event()
    calls = []
    event.reaction(lambda s, a: calls.append(("first", s, a)))
    event.reaction(lambda s, a: calls.append(("second", s, a)))
    arg = KeyEventArg(71)
    event.emit("sender", arg)
    assert calls == [("first", "sender", arg), ("second", "sender", arg)]


def test_reaction_returns_handler_and_len_counts():
    event = Event()

    def handler(sender, arg):
        pass

    assert event.reaction(handler) is handler
    event.reaction(handler)
    assert len(event) == 2


def test_remove_reaction_removes_all_equal_entries():
    event = Event()
    calls = []

    def handler(sender, arg):
        calls.append(arg)

    def other(sender, arg):
        calls.append(-arg)

    event.reaction(handler)
    event.reaction(other)
    event.reaction(handler)
    event.remove_reaction(handler)
    assert len(event) == 1
    event.emit(None, 3)
    assert calls == [-3]


def test_remove_bound_method():
    class Listener:
        def __init__(self):
            self.seen = []

        def on(self, sender, arg):
            self.seen.append(arg)

    listener = Listener()
    event = Event()
    event.reaction(listener.on)
    event.remove_reaction(listener.on)
    event.emit(None, MouseEventArg(1, 2))
    assert listener.seen == []
    assert len(event) == 0


def test_remove_all_reactions():
    event = Event()
    calls = []
    event.reaction(lambda s, a: calls.append(a))
    event.reaction(lambda s, a: calls.append(a))
    event.remove_all_reactions()
    event.emit(None, MouseWheelEventArg(1.0))
    assert calls == []
    assert len(event) == 0


def test_handler_exception_propagates():
    event = Event()

    def bad(sender, arg):
        raise ValueError("boom")

    event.reaction(bad)
    with pytest.raises(ValueError):
        event.emit(None, None)


def test_handler_may_register_during_emit():
    event = Event()
    calls = []

    def first(sender, arg):
        calls.append("first")
        event.reaction(lambda s, a: calls.append("late"))

    event.reaction(first)
    event.emit(None, None)
    assert calls == ["first"]
    assert len(event) == 2


def test_event_args_hold_values():
    assert MouseEventArg(5, 7).x == 5
    assert MouseEventArg(5, 7) == MouseEventArg(5, 7)
    assert KeyEventArg(70) != KeyEventArg(71)