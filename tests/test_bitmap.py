import random

import pytest

from tinykit.bitmap import Bitmap

TEST_DATA_SIZE = 32


@pytest.fixture
def sample():
    rng = random.Random(1234)
    return [rng.randrange(128) for _ in range(TEST_DATA_SIZE)]


def test_save_check_drop(sample):
    bitmap = Bitmap(128)
    for value in sample:
        bitmap.add(value)
    assert all(value in bitmap for value in sample)

    for value in sample:
        bitmap.discard(value)
    assert not any(value in bitmap for value in sample)


def test_clear(sample):
    bitmap = Bitmap(128)
    for value in sample:
        bitmap.add(value)
    assert all(value in bitmap for value in sample)

    bitmap.clear()
    assert not any(value in bitmap for value in sample)


def test_values_not_added_are_absent(sample):
    bitmap = Bitmap(128)
    for value in sample:
        bitmap.add(value)
    missing = set(range(128)) - set(sample)
    assert not any(value in bitmap for value in missing)


def test_find_first_free():
    bitmap = Bitmap(128)
    assert bitmap.find_first_free() == 0
    for value in range(3):
        bitmap.add(value)
    assert bitmap.find_first_free() == 3
    bitmap.discard(1)
    assert bitmap.find_first_free() == 1


def test_find_first_free_in_later_word():
    bitmap = Bitmap(128)
    for value in range(40):
        bitmap.add(value)
    assert bitmap.find_first_free() == 40


def test_full_bitmap_has_no_free_value():
    bitmap = Bitmap(64)
    for value in range(64):
        bitmap.add(value)
    assert bitmap.find_first_free() is None


def test_out_of_range_values_ignored():
    bitmap = Bitmap(128)
    bitmap.add(128)
    assert 128 not in bitmap
    assert bitmap.find_first_free() == 0
    assert -1 not in bitmap


def test_invalid_arguments():
    with pytest.raises(ValueError):
        Bitmap(0)
    with pytest.raises(ValueError):
        Bitmap(128).add(-3)