from rpgutils.event import Event


class Recorder:
    def __init__(self):
        self.calls = []

    def on_resize(self, width, height):
        self.calls.append((width, height))


def test_call_passes_arguments_in_order():
    event = Event()
    log = []

    def first(a, b):
        log.append(("first", a, b))

    def second(a, b):
        log.append(("second", a, b))

    event += first
    event += second
    assert len(event) == 2
    assert first in event
    assert second in event
    event(3, 4)
    assert log == [("first", 3, 4), ("second", 3, 4)]


def test_same_function_subscribed_once():
    event = Event()
    log = []

    def handler(x):
        log.append(x)

    event.subscribe(handler)
    event.subscribe(handler)
    assert len(event) == 1
    event(7)
    assert log == [7]


def test_bound_method_equality():
    event = Event()
    recorder = Recorder()
    event += recorder.on_resize
    event += recorder.on_resize
    assert len(event) == 1
    assert recorder.on_resize in event
    event(800, 600)
    assert recorder.calls == [(800, 600)]


def test_methods_of_different_objects_are_distinct():
    event = Event()
    first, second = Recorder(), Recorder()
    event += first.on_resize
    event += second.on_resize
    assert len(event) == 2
    event(1, 2)
    assert first.calls == [(1, 2)]
    assert second.calls == [(1, 2)]


def test_unsubscribe_removes_handler():
    event = Event()
    recorder = Recorder()
    event += recorder.on_resize
    event -= recorder.on_resize
    assert len(event) == 0
    assert recorder.on_resize not in event
    event(5, 5)
    assert recorder.calls == []


def test_unsubscribe_unknown_handler_keeps_others():
    event = Event()
    recorder = Recorder()
    event.subscribe(recorder.on_resize)
    event.unsubscribe(print)
    assert len(event) == 1


def test_operators_return_the_event():
    event = Event()
    original = event
    event += print
    assert event is original
    assert len(event) == 1
    assert print in event
    event -= print
    assert event is original
    assert len(event) == 0
    assert print not in event