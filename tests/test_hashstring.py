import pytest

from ycsbkit.hashstring import HashString, sdbm_hash


def test_empty_key_hashes_to_zero():
    assert sdbm_hash(b"") == 0
    assert sdbm_hash("") == 0


def test_single_character_hash_is_its_code():
    assert sdbm_hash(b"a") == 97


def test_high_bytes_count_as_signed():
    assert sdbm_hash(b"\x80") == 2**64 - 128


def test_text_and_bytes_hash_alike():
    assert sdbm_hash("user1234") == sdbm_hash(b"user1234")
    assert sdbm_hash("héllo") == sdbm_hash("héllo".encode("utf-8"))


def test_hash_stays_within_64_bits():
    value = sdbm_hash(b"\xff" * 500 + b"z" * 500)
    assert 0 <= value < 2**64


def test_different_keys_usually_differ():
    hashes = {sdbm_hash(f"user{i}") for i in range(1000)}
    assert len(hashes) == 1000


def test_hashstring_equality_and_hash():
    a = HashString("field1")
    b = HashString("field1")
    c = HashString("field2")
    assert a == b
    assert hash(a) == hash(b)
    assert a.sdbm == sdbm_hash("field1")
    assert a != c


def test_hashstring_text_equals_bytes_form():
    assert HashString("key") == HashString(b"key")
    assert HashString(b"key").value == b"key"
    assert HashString("key").value == "key"


def test_hashstring_length_is_byte_length():
    assert len(HashString("abc")) == 3
    assert len(HashString("é")) == 2
    assert len(HashString("")) == 0


def test_hashstring_usable_as_dict_key():
    table = {HashString("k1"): 1}
    assert table[HashString(b"k1")] == 1


def test_hashstring_rejects_zero_byte():
    with pytest.raises(ValueError):
        HashString(b"a\0b")


def test_hashstring_rejects_non_string():
    with pytest.raises(TypeError):
        HashString(None)
    with pytest.raises(TypeError):
        HashString(42)


def test_hashstring_not_equal_to_plain_string():
    assert (HashString("x") == "x") is False