import threading

from reactorkit.singletons import (
    ThreadLocal,
    instance,
    thread_local_instance,
    thread_local_pointer,
)


class _Shared:
    def __init__(self):
        self.items = []


class _PerThread:
    def __init__(self):
        self.items = []


class _NeverMade:
    pass


def _in_thread(fn):
    out = []
    t = threading.Thread(target=lambda: out.append(fn()))
    t.start()
    t.join()
    return out[0]


def test_instance_is_shared_across_threads():
    first = instance(_Shared)
    assert instance(_Shared) is first
    assert _in_thread(lambda: instance(_Shared)) is first


def test_instance_concurrent_creation_yields_one_object():
    results = []
    lock = threading.Lock()

    class _Racy:
        pass

    def grab():
        obj = instance(_Racy)
        with lock:
            results.append(obj)

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(results) == 8
    assert len({id(r) for r in results}) == 1
    assert instance(_Racy) is results[0]


def test_thread_local_instance_per_thread():
    mine = thread_local_instance(_PerThread)
    assert thread_local_instance(_PerThread) is mine
    other = _in_thread(lambda: thread_local_instance(_PerThread))
    assert other is not mine
    assert isinstance(other, _PerThread)


def test_thread_local_pointer_none_before_creation():
    assert thread_local_pointer(_NeverMade) is None
    made = thread_local_instance(_NeverMade)
    assert thread_local_pointer(_NeverMade) is made
    assert _in_thread(lambda: thread_local_pointer(_NeverMade)) is None


def test_thread_local_value_per_thread():
    local = ThreadLocal(list)
    local.value().append("main")
    assert local.value() == ["main"]
    assert _in_thread(lambda: list(local.value())) == []
    assert local.value() == ["main"]


def test_thread_local_factory_called_once_per_thread():
    calls = []

    def factory():
        calls.append(1)
        return object()

    local = ThreadLocal(factory)
    a = local.value()
    b = local.value()
    assert a is b
    assert len(calls) == 1
    _in_thread(local.value)
    assert len(calls) == 2