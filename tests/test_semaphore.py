import threading

from hfkit.semaphore import Semaphore


def _start_acquirer(sem):
    acquired = threading.Event()

    def run():
        sem.acquire()
        acquired.set()

    threading.Thread(target=run, daemon=True).start()
    return acquired


def test_blocks_at_capacity_until_release():
    sem = Semaphore(1)
    sem.acquire()
    acquired = _start_acquirer(sem)
    assert not acquired.wait(0.1)
    sem.release()
    assert acquired.wait(2)


def test_release_wakes_one_waiter_at_a_time():
    sem = Semaphore(1)
    sem.acquire()
    first = _start_acquirer(sem)
    second = _start_acquirer(sem)
    assert not first.wait(0.1)
    sem.release()
    assert threading.Event().wait(0.2) is False
    woken = [first.is_set(), second.is_set()]
    assert woken.count(True) == 1
    sem.release()
    assert first.wait(2) and second.wait(2)


def test_resize_larger_unblocks_waiter():
    sem = Semaphore(1)
    sem.acquire()
    acquired = _start_acquirer(sem)
    assert not acquired.wait(0.1)
    sem.resize(2)
    assert acquired.wait(2)


def test_resize_smaller_limits_new_acquisitions():
    sem = Semaphore(3)
    sem.resize(1)
    sem.acquire()
    acquired = _start_acquirer(sem)
    assert not acquired.wait(0.1)
    sem.release()
    assert acquired.wait(2)


def test_unlimited_capacity_never_blocks():
    for capacity in (0, -1):
        sem = Semaphore(capacity)
        thread = threading.Thread(
            target=lambda: [sem.acquire() for _ in range(50)], daemon=True
        )
        thread.start()
        thread.join(2)
        assert not thread.is_alive()


def test_context_manager_holds_and_releases():
    sem = Semaphore(1)
    with sem as held:
        assert held is sem
        acquired = _start_acquirer(sem)
        assert not acquired.wait(0.1)
    assert acquired.wait(2)