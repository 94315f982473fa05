import itertools

import pytest

from tinykit.mem_pool import (
    MEMPOOL_DEFAULT,
    MEMPOOL_TESTCASE,
    MemoryPool,
    MemoryPools,
)


def test_fresh_pool_is_clean():
    pool = MemoryPool(1024)
    assert pool.is_clean()
    assert pool.available == 1024


def test_alloc_then_free_restores_clean_state():
    pool = MemoryPool(1024)
    address = pool.alloc(10)
    assert not pool.is_clean()
    assert pool.available < 1024
    pool.free(address)
    assert pool.is_clean()


@pytest.mark.parametrize("order", list(itertools.permutations(range(3))))
def test_free_in_any_order(order):
    pool = MemoryPool(1024)
    addresses = [pool.alloc(n) for n in (8, 20, 33)]
    for index in order:
        pool.free(addresses[index])
    assert pool.is_clean()


def test_addresses_are_distinct_and_aligned():
    pool = MemoryPool(2048)
    addresses = [pool.alloc(n) for n in (1, 3, 5, 7, 9, 100)]
    assert len(set(addresses)) == len(addresses)
    assert all(address % 4 == 0 for address in addresses)
    assert addresses == sorted(addresses)


def test_freed_block_is_reused():
    pool = MemoryPool(1024)
    first = pool.alloc(32)
    pool.free(first)
    assert pool.alloc(32) == first


def test_available_shrinks_with_each_allocation():
    pool = MemoryPool(1024)
    seen = [pool.available]
    for _ in range(4):
        pool.alloc(16)
        seen.append(pool.available)
    assert seen == sorted(seen, reverse=True)
    assert len(set(seen)) == len(seen)


def test_exhaustion_raises_and_recovers():
    pool = MemoryPool(512)
    addresses = []
    with pytest.raises(MemoryError):
        while True:
            addresses.append(pool.alloc(16))
    assert len(addresses) > 1
    for address in addresses:
        pool.free(address)
    assert pool.is_clean()


def test_too_large_and_zero_sizes():
    pool = MemoryPool(256)
    with pytest.raises(MemoryError):
        pool.alloc(256)
    with pytest.raises(ValueError):
        pool.alloc(0)
    assert pool.is_clean()


def test_double_and_unknown_free_are_ignored():
    pool = MemoryPool(1024)
    address = pool.alloc(24)
    pool.free(address)
    pool.free(address)
    pool.free(12345)
    assert pool.available == 1024


def test_invalid_pool_size():
    with pytest.raises(ValueError):
        MemoryPool(0)


def test_pools_are_independent():
    pools = MemoryPools()
    address = pools.alloc(40, MEMPOOL_TESTCASE)
    assert pools.is_clean(MEMPOOL_DEFAULT)
    assert not pools.is_clean(MEMPOOL_TESTCASE)
    assert not pools.is_clean_all()
    pools.free(MEMPOOL_TESTCASE, address)
    assert pools.is_clean_all()


def test_unknown_pool_number():
    pools = MemoryPools([128])
    with pytest.raises(ValueError):
        pools.alloc(4, 1)
    with pytest.raises(ValueError):
        pools.is_clean(5)