# tests/test_ids.py
import re
import pytest

from receipt_points.ids import new_receipt_id, IdentifierGenerationError

UUID4_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")

def test_id_shape():
    assert UUID4_RE.match(new_receipt_id())

def test_version_and_variant_bits_are_forced():
    assert new_receipt_id(lambda n: bytes(range(n))) == "00010203-0405-4607-8809-0a0b0c0d0e0f"
    assert new_receipt_id(lambda n: b"\xff" * n) == "ffffffff-ffff-4fff-bfff-ffffffffffff"
    assert new_receipt_id(lambda n: b"\x00" * n) == "00000000-0000-4000-8000-000000000000"

def test_ids_do_not_repeat():
    n = 100_000
    assert len({new_receipt_id() for _ in range(n)}) == n

def test_short_read_raises():
    with pytest.raises(IdentifierGenerationError):
        new_receipt_id(lambda n: b"\x01" * (n - 1))

def test_random_source_failure_raises():
    def broken(n):
        raise OSError("no entropy")
    with pytest.raises(IdentifierGenerationError):
        new_receipt_id(broken)
