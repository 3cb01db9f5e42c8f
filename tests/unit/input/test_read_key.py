"""Regression tests for raw-key decoding.

Covers plain byte pass-through, CSI/SS3 navigation sequences, unknown
sequences, lone ESC timing, and end of stream.
"""

from __future__ import annotations

import os
import time
import unittest

from tmenu.input import keys, read_key


def _decode(data: bytes, count: int = 1, close_writer: bool = False) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, data)
        if close_writer:
            os.close(write_fd)
            write_fd = -1
        return [read_key(read_fd) for _ in range(count)]
    finally:
        os.close(read_fd)
        if write_fd != -1:
            os.close(write_fd)


class ReadKeyTests(unittest.TestCase):
    def test_plain_bytes_pass_through(self) -> None:
        self.assertEqual(_decode(b"aZ\x03\t", count=4), ["a", "Z", "\x03", "\t"])

    def test_arrow_sequences(self) -> None:
        self.assertEqual(
            _decode(b"\x1b[A\x1b[B\x1b[C\x1b[D", count=4),
            [keys.UP, keys.DOWN, keys.RIGHT, keys.LEFT],
        )

    def test_page_keys(self) -> None:
        self.assertEqual(_decode(b"\x1b[5~\x1b[6~", count=2), [keys.PAGE_UP, keys.PAGE_DOWN])

    def test_home_and_end_variants(self) -> None:
        data = b"\x1b[H\x1b[F\x1b[1~\x1b[4~\x1bOH\x1bOF"
        self.assertEqual(_decode(data, count=6), [keys.HOME, keys.END, keys.HOME, keys.END, keys.HOME, keys.END])

    def test_application_cursor_arrows(self) -> None:
        self.assertEqual(_decode(b"\x1bOA\x1bOB", count=2), [keys.UP, keys.DOWN])

    def test_unknown_sequence_is_neutral_and_fully_consumed(self) -> None:
        self.assertEqual(_decode(b"\x1b[1;5Cx", count=2), [keys.NONE, "x"])
        self.assertEqual(_decode(b"\x1b[9~y", count=2), [keys.NONE, "y"])

    def test_escape_followed_by_other_byte_is_neutral(self) -> None:
        self.assertEqual(_decode(b"\x1bab", count=2), [keys.NONE, "b"])

    def test_lone_escape_returns_without_second_keypress(self) -> None:
        started = time.monotonic()
        key = _decode(b"\x1b")[0]
        elapsed = time.monotonic() - started

        self.assertEqual(key, keys.ESC)
        self.assertLess(elapsed, 0.5)

    def test_end_of_stream_is_terminating_token(self) -> None:
        self.assertEqual(_decode(b"q", count=2, close_writer=True), ["q", keys.EOF])


class KeyHelperTests(unittest.TestCase):
    def test_ctrl_maps_letters_to_control_bytes(self) -> None:
        self.assertEqual(keys.ctrl("c"), "\x03")
        self.assertEqual(keys.ctrl("S"), "\x13")
        self.assertEqual(keys.ctrl("i"), keys.TAB)

    def test_printable_byte_range(self) -> None:
        self.assertTrue(keys.is_printable_byte(" "))
        self.assertTrue(keys.is_printable_byte("~"))
        self.assertFalse(keys.is_printable_byte("\x7f"))
        self.assertFalse(keys.is_printable_byte(keys.UP))


if __name__ == "__main__":
    unittest.main()
