import pytest

from beamparse.utility import BoundedCache, BoundedHeap


def test_bounded_heap_keeps_best():
    heap = BoundedHeap(3, key=lambda item: -item[0])
    for item in [(1, 'a'), (5, 'b'), (3, 'c'), (5, 'd'), (2, 'e')]:
        heap.add(item)
    assert len(heap) == 3
    assert list(heap) == [(5, 'b'), (5, 'd'), (3, 'c')]
    assert heap.first() == (5, 'b')
    assert heap.last() == (3, 'c')
    assert heap.extract() == (5, 'b')
    assert len(heap) == 2


def test_unbounded_heap():
    heap = BoundedHeap(None, key=lambda item: item, values=[3, 1, 2])
    assert list(heap) == [1, 2, 3]
    heap.clear()
    assert not heap


def test_invalid_capacity():
    with pytest.raises(ValueError):
        BoundedHeap(0, key=lambda item: item)
    with pytest.raises(ValueError):
        BoundedCache(0)


def test_bounded_cache_evicts_least_recently_used():
    cache = BoundedCache(2)
    cache.put('a', 1)
    cache.put('b', 2)
    assert cache.get('a') == 1
    cache.put('c', 3)
    assert 'b' not in cache
    assert cache.get('b') is None
    assert cache.get('a') == 1
    assert cache.get('c') == 3
    assert len(cache) == 2
    cache.clear()
    assert len(cache) == 0
