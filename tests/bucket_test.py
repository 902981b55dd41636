from bucketmap.datastructures.bucket import Bucket, Entry


def make_bucket(*keys):
    b = Bucket()
    for i, k in enumerate(keys):
        b.push(Entry(k, i))
    return b


def test_find_hits_and_misses():
    b = make_bucket("a", "b")
    assert b.find("b").value == 1
    assert b.find("z") is None
    assert Bucket().find("a") is None


def test_swap_remove_moves_last_entry_into_slot():
    b = make_bucket("a", "b", "c")
    removed = b.swap_remove("a")
    assert (removed.key, removed.value) == ("a", 0)
    assert list(b.items()) == [("c", 2), ("b", 1)]


def test_swap_remove_last_and_missing():
    b = make_bucket("a", "b")
    assert b.swap_remove("b").key == "b"
    assert b.swap_remove("b") is None
    assert list(b.items()) == [("a", 0)]
    assert b.swap_remove("a").key == "a"
    assert len(b) == 0


def test_indexing_returns_entries_in_order():
    b = make_bucket("a", "b")
    assert len(b) == 2
    assert b[0].key == "a"
    assert b[1].key == "b"
