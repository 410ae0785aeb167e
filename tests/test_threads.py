import threading

import pytest

from reactorkit import current_thread
from reactorkit.threads import Thread


def test_thread_runs_function_and_records_tid():
    seen = {}

    def work():
        seen["tid"] = threading.get_native_id()
        seen["name"] = current_thread.name()

    t = Thread(work, "worker")
    assert t.tid() == 0
    assert not t.started()
    t.start()
    assert t.started()
    assert t.tid() > 0
    t.join()
    assert t.joined()
    assert seen["tid"] == t.tid()
    assert seen["name"] == "worker"


def test_default_name_uses_creation_count():
    t = Thread(lambda: None)
    assert t.name() == f"Thread{Thread.num_created()}"


def test_num_created_increases():
    before = Thread.num_created()
    Thread(lambda: None)
    Thread(lambda: None)
    assert Thread.num_created() == before + 2


def test_given_name_is_kept():
    t = Thread(lambda: None, "custom")
    assert t.name() == "custom"


def test_start_twice_raises():
    t = Thread(lambda: None)
    t.start()
    with pytest.raises(RuntimeError):
        t.start()
    t.join()
    assert t.joined()


def test_join_without_start_raises():
    t = Thread(lambda: None)
    with pytest.raises(RuntimeError):
        t.join()


def test_join_twice_raises():
    t = Thread(lambda: None)
    t.start()
    t.join()
    with pytest.raises(RuntimeError):
        t.join()


def test_thread_tid_differs_from_caller():
    t = Thread(lambda: None)
    t.start()
    t.join()
    assert t.tid() != current_thread.tid()