"""
Tests for the presence bitmap encoder
"""

import random
import pytest
from fomopay.lib.core.Bitmap import Bitmap

SALE_FIELDS = {3, 7, 11, 12, 13, 18, 25, 41, 42, 49, 88, 104}


def bit_is_set(bitmap: str, field: int) -> bool:
    length = len(bitmap) * 4
    return bool(int(bitmap, 16) >> (length - field) & 1)


class TestCalculate:
    """Bitmap calculation"""

    def test_empty_set(self):
        assert Bitmap.calculate([]) == "0000000000000000"

    def test_single_primary_fields(self):
        assert Bitmap.calculate([2]) == "4000000000000000"
        assert Bitmap.calculate([64]) == "0000000000000001"

    def test_known_primary_bitmap(self):
        assert Bitmap.calculate([3, 7, 11, 41, 42]) == "2220000000c00000"

    def test_secondary_bitmap_flag(self):
        bitmap = Bitmap.calculate([65])

        assert bitmap == "8000000000000000" + "8000000000000000"

    def test_field_128(self):
        assert Bitmap.calculate([128]) == "8000000000000000" + "0000000000000001"

    def test_out_of_range_fields_are_ignored(self):
        assert Bitmap.calculate([-5, 0, 1, 129, 500]) == "0000000000000000"
        assert Bitmap.calculate([1, 3]) == Bitmap.calculate([3])

    def test_output_is_lowercase(self):
        bitmap = Bitmap.calculate(SALE_FIELDS)

        assert bitmap == bitmap.lower()

    def test_duplicates_and_order_do_not_matter(self):
        assert Bitmap.calculate([42, 3, 42, 3]) == Bitmap.calculate([3, 42])

    def test_sale_fields(self):
        bitmap = Bitmap.calculate(SALE_FIELDS)

        assert len(bitmap) == 32
        assert bit_is_set(bitmap, 1)

        for field in range(2, 129):
            assert bit_is_set(bitmap, field) is (field in SALE_FIELDS)

    def test_random_primary_sets(self):
        generator = random.Random(8583)

        for _ in range(200):
            fields = set(generator.sample(range(2, 65), generator.randint(1, 20)))
            bitmap = Bitmap.calculate(fields)

            assert len(bitmap) == 16
            assert not bit_is_set(bitmap, 1)

            for field in range(2, 65):
                assert bit_is_set(bitmap, field) is (field in fields)

    def test_random_secondary_sets(self):
        generator = random.Random(128)

        for _ in range(200):
            fields = set(generator.sample(range(2, 129), generator.randint(1, 30)))
            fields.add(generator.randint(65, 128))
            bitmap = Bitmap.calculate(fields)

            assert len(bitmap) == 32
            assert bit_is_set(bitmap, 1)

            for field in range(2, 129):
                assert bit_is_set(bitmap, field) is (field in fields)


class TestDecode:
    """Bitmap decoding"""

    def test_decode_primary(self):
        assert Bitmap.decode("2220000000c00000") == {3, 7, 11, 41, 42}

    def test_decode_secondary(self):
        assert Bitmap.decode(Bitmap.calculate(SALE_FIELDS)) == SALE_FIELDS

    def test_decode_empty(self):
        assert Bitmap.decode("0000000000000000") == set()

    def test_decode_uppercase(self):
        assert Bitmap.decode("2220000000C00000") == {3, 7, 11, 41, 42}

    @pytest.mark.parametrize("bitmap", ["", "00", "0" * 17, "0" * 31, "z" * 16, "0x00000000000000", " " * 16])
    def test_decode_malformed(self, bitmap):
        with pytest.raises(ValueError):
            Bitmap.decode(bitmap)

    @pytest.mark.parametrize("bitmap", [
        "0" * 32,
        "2220000000c00000" + "0" * 16,
        "8" + "0" * 15,
        "a220000000c00000",
    ])
    def test_decode_indicator_mismatch(self, bitmap):
        with pytest.raises(ValueError, match="secondary bitmap indicator"):
            Bitmap.decode(bitmap)

    def test_decode_secondary_with_no_secondary_fields(self):
        assert Bitmap.decode("a220000000c00000" + "0" * 16) == {3, 7, 11, 41, 42}

    def test_has_secondary_bitmap(self):
        assert Bitmap.has_secondary_bitmap(Bitmap.calculate(SALE_FIELDS))
        assert not Bitmap.has_secondary_bitmap(Bitmap.calculate([3, 7, 11]))
