import threading

from gpgmm.refcount import RefCounted, ScopedRef


def test_initial_count():
    r = RefCounted(1)
    assert r.ref_count() == 1
    assert r.has_one_ref()


def test_ref_and_unref():
    r = RefCounted(0)
    r.ref()
    r.ref()
    assert r.ref_count() == 2
    assert r.unref() is False
    assert r.has_one_ref()
    assert r.unref() is True
    assert r.ref_count() == 0


def test_concurrent_refs():
    r = RefCounted(0)

    def work():
        for _ in range(1000):
            r.ref()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert r.ref_count() == 4000


def test_scoped_ref_adds_reference():
    r = RefCounted(0)
    s = ScopedRef(r)
    assert s.get() is r
    assert r.ref_count() == 1


def test_scoped_ref_empty():
    s = ScopedRef()
    assert s.get() is None
    assert s.release() is False


def test_release_reaches_zero():
    r = RefCounted(0)
    s = ScopedRef(r)
    assert s.release() is True
    assert s.get() is None
    assert r.ref_count() == 0


def test_context_manager_releases():
    r = RefCounted(1)
    with ScopedRef(r) as s:
        assert s.get() is r
        assert r.ref_count() == 2
    assert r.ref_count() == 1


def test_acquire_does_not_add_reference():
    r = RefCounted(1)
    s = ScopedRef.acquire(r)
    assert r.ref_count() == 1
    assert s.get() is r


def test_detach_keeps_reference():
    r = RefCounted(0)
    s = ScopedRef(r)
    assert s.detach() is r
    assert s.get() is None
    assert r.ref_count() == 1


def test_copy_adds_reference_and_compares_equal():
    r = RefCounted(0)
    s = ScopedRef(r)
    c = s.copy()
    assert r.ref_count() == 2
    assert c == s
    assert hash(c) == hash(s)


def test_assign_moves_reference():
    a = RefCounted(0)
    b = RefCounted(0)
    sa = ScopedRef(a)
    sb = ScopedRef(b)
    sa.assign(sb)
    assert sa.get() is b
    assert a.ref_count() == 0
    assert b.ref_count() == 2
    assert sa == sb


def test_inequality_for_different_objects():
    first = RefCounted(0)
    second = RefCounted(0)
    sa = ScopedRef(first)
    sb = ScopedRef(second)
    assert (sa == sb) is False
    assert (sa != sb) is True
    assert sa.get() is first
    assert sb.get() is second