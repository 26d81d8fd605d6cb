"""Tests for ByteStringList."""

import unittest
from unittest import mock

import bytestring_list
from bytestring import AllocationError, ByteString, InvalidInputError
from bytestring_list import ByteStringList


class TestByteStringList(unittest.TestCase):
    def setUp(self):
        self.rary = ByteStringList.from_iterable([b"apple", b"pie", b"good"])

    def test_new_is_empty(self):
        rary = ByteStringList()
        self.assertEqual(rary.count, 0)
        self.assertEqual(list(rary), [])

    def test_push_and_get(self):
        rary = ByteStringList()
        item = ByteString.new(b"apple")
        rary.push(item)
        rary.push_bytes(b"pie")
        self.assertEqual(len(rary), 2)
        self.assertIs(rary.get(0), item)
        self.assertEqual(rary.get(1), b"pie")

    def test_get_out_of_range(self):
        self.assertIsNone(self.rary.get(3))
        self.assertIsNone(self.rary.get(-1))

    def test_iteration_order(self):
        self.assertEqual([e.to_bytes() for e in self.rary], [b"apple", b"pie", b"good"])

    def test_push_invalid(self):
        with self.assertRaises(InvalidInputError):
            self.rary.push(None)
        with self.assertRaises(InvalidInputError):
            self.rary.push(b"raw")
        freed = ByteString.new(b"x")
        freed.free()
        with self.assertRaises(InvalidInputError):
            self.rary.push(freed)
        self.assertEqual(self.rary.count, 3)

    def test_many_pushes(self):
        rary = ByteStringList()
        for i in range(1000):
            rary.push_bytes(str(i))
        self.assertEqual(rary.count, 1000)
        self.assertEqual(rary.get(999), b"999")

    def test_join(self):
        self.assertEqual(self.rary.join(ByteString.new(b"/")), b"apple/pie/good")
        self.assertEqual(self.rary.join(ByteString.new(b", ")), b"apple, pie, good")
        self.assertEqual(self.rary.join(ByteString.new(b"")), b"applepiegood")

    def test_join_empty(self):
        self.assertEqual(ByteStringList().join(ByteString.new(b"/")), b"")

    def test_join_single(self):
        rary = ByteStringList.from_iterable([b"apple"])
        joined = rary.join(ByteString.new(b"/"))
        self.assertEqual(joined, b"apple")
        self.assertIsNot(joined, rary.get(0))

    def test_join_over_max_length(self):
        with mock.patch.object(bytestring_list, "MAX_LENGTH", 12):
            self.assertEqual(self.rary.join(ByteString.new(b"")), b"applepiegood")
            with self.assertRaises(AllocationError):
                self.rary.join(ByteString.new(b"/"))

    def test_join_bad_separator(self):
        with self.assertRaises(InvalidInputError):
            self.rary.join(None)

    def test_eql(self):
        same = ByteStringList.from_iterable([b"apple", b"pie", b"good"])
        shorter = ByteStringList.from_iterable([b"apple", b"pie"])
        different = ByteStringList.from_iterable([b"apple", b"pie", b"bad"])
        self.assertTrue(self.rary.eql(same))
        self.assertFalse(self.rary.eql(shorter))
        self.assertFalse(self.rary.eql(different))
        self.assertEqual(self.rary, same)

    def test_free(self):
        first = self.rary.get(0)
        self.rary.free()
        self.assertTrue(self.rary.is_bad())
        self.assertTrue(first.is_bad())
        with self.assertRaises(InvalidInputError):
            self.rary.get(0)
        with self.assertRaises(InvalidInputError):
            self.rary.push_bytes(b"x")

    def test_from_iterable_none(self):
        with self.assertRaises(InvalidInputError):
            ByteStringList.from_iterable(None)


if __name__ == "__main__":
    unittest.main()
