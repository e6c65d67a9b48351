from floorgraph.core.events import EventHook


def test_fire_calls_handlers_in_order_with_arguments():
    hook = EventHook()
    calls = []
    hook.add(lambda x, y: calls.append(("first", x, y)))
    hook.add(lambda x, y: calls.append(("second", x, y)))

    hook.fire(1, 2)

    assert calls == [("first", 1, 2), ("second", 1, 2)]


def test_remove_unknown_handler_is_ignored():
    hook = EventHook()
    hook.remove(print)
    assert len(hook) == 0


def test_handler_added_during_fire_waits_for_next_fire():
    hook = EventHook()
    calls = []

    def late():
        calls.append("late")

    def adder():
        calls.append("adder")
        hook.add(late)

    hook.add(adder)
    hook.fire()
    assert calls == ["adder"]

    hook.remove(adder)
    hook.fire()
    assert calls == ["adder", "late"]


def test_handler_removed_during_fire_is_skipped():
    hook = EventHook()
    calls = []

    def second():
        calls.append("second")

    def first():
        calls.append("first")
        hook.remove(second)

    hook.add(first)
    hook.add(second)
    hook.fire()

    assert calls == ["first"]
    assert not hook.has(second)


def test_handler_may_unsubscribe_itself():
    hook = EventHook()
    calls = []

    def once():
        calls.append("once")
        hook.remove(once)

    hook.add(once)
    hook.fire()
    hook.fire()

    assert calls == ["once"]


def test_clear_drops_all_handlers():
    hook = EventHook()
    hook.add(lambda: None)
    hook.add(lambda: None)
    hook.clear()
    assert len(hook) == 0
