"""Tests for the byte-offset entry index.

Covers boundary recording, the trailing sentinel, and capacity doubling.
Also checks offset invariants over assorted inputs.
"""

from __future__ import annotations

import io
import unittest

from tmenu.source import EntryIndex, build_index


class EntryIndexBuildTests(unittest.TestCase):
    def test_terminated_lines_record_boundary_after_each_newline(self) -> None:
        index = build_index(io.BytesIO(b"a\nbb\n"))

        self.assertEqual(len(index), 2)
        self.assertEqual(index.offsets, (0, 2, 5))
        self.assertEqual([index.length(i) for i in range(len(index))], [2, 3])

    def test_trailing_partial_line_is_still_an_entry(self) -> None:
        index = build_index(io.BytesIO(b"x\ny"))

        self.assertEqual(len(index), 2)
        self.assertEqual(index.length(1), 1)
        self.assertEqual(index.total_bytes, 3)

    def test_empty_input_has_only_the_sentinel(self) -> None:
        index = build_index(io.BytesIO(b""))

        self.assertEqual(len(index), 0)
        self.assertEqual(index.offsets, (0,))

    def test_blank_lines_are_entries(self) -> None:
        index = build_index(io.BytesIO(b"\n\nz\n"))

        self.assertEqual(len(index), 3)
        self.assertEqual([index.length(i) for i in range(3)], [1, 1, 2])

    def test_lines_longer_than_read_chunk_are_single_entries(self) -> None:
        long_line = b"q" * 5000 + b"\n"
        index = build_index(io.BytesIO(long_line + b"short\n"))

        self.assertEqual(len(index), 2)
        self.assertEqual(index.length(0), len(long_line))

    def test_offsets_strictly_increase_and_lengths_sum_to_total(self) -> None:
        samples = [b"a\nbb\n", b"x\ny", b"\n", b"one", b"1\n22\n333\n4444", b"\n\n\n"]
        for data in samples:
            with self.subTest(data=data):
                index = build_index(io.BytesIO(data))
                offsets = index.offsets
                self.assertTrue(all(a < b for a, b in zip(offsets, offsets[1:])))
                lengths = [index.length(i) for i in range(len(index))]
                self.assertTrue(all(length >= 0 for length in lengths))
                self.assertEqual(sum(lengths), len(data))
                self.assertEqual(index.total_bytes, len(data))

    def test_sink_receives_every_streamed_byte(self) -> None:
        data = b"alpha\nbeta\ngamma"
        sink = io.BytesIO()

        build_index(io.BytesIO(data), sink=sink)

        self.assertEqual(sink.getvalue(), data)


class EntryIndexTableTests(unittest.TestCase):
    def test_capacity_doubles_when_full(self) -> None:
        index = EntryIndex(capacity=2)
        for offset in range(5):
            index.append(offset)

        self.assertEqual(index.capacity, 8)
        self.assertEqual(index.offsets, (0, 1, 2, 3, 4))

    def test_build_grows_past_initial_capacity(self) -> None:
        data = b"".join(b"line %d\n" % i for i in range(250))
        index = build_index(io.BytesIO(data), capacity=4)

        self.assertEqual(len(index), 250)
        self.assertGreaterEqual(index.capacity, 251)

    def test_length_out_of_range_raises(self) -> None:
        index = build_index(io.BytesIO(b"a\nb\n"))

        with self.assertRaises(IndexError):
            index.length(2)
        with self.assertRaises(IndexError):
            index.length(-1)

    def test_index_is_read_only_after_build(self) -> None:
        index = build_index(io.BytesIO(b"a\n"))

        with self.assertRaises(RuntimeError):
            index.append(10)

    def test_non_increasing_offset_is_rejected(self) -> None:
        index = EntryIndex()
        index.append(3)

        with self.assertRaises(ValueError):
            index.append(3)


if __name__ == "__main__":
    unittest.main()
