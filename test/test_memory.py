#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from chipcore.constants import FONT_SPRITES
from chipcore.memory import Memory, MemoryFault


class TestMemory(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()

    def test_memory_init(self):
        self.assertEqual(0x1000, len(self.memory.mem))
        self.assertEqual(FONT_SPRITES, self.memory.read_block(0x000, 80))
        self.assertEqual(bytes(0x1000 - 80), self.memory.read_block(80, 0x1000 - 80))

    def test_memory_write(self):
        self.memory.write(0x200, 0xFF)
        self.assertEqual(0xFF, self.memory.read(0x200))
        self.memory.write(0xFFF, 0xFF)
        self.assertEqual(0xFF, self.memory.read(0xFFF))

    def test_memory_word(self):
        self.memory.write_word(0x400, 0xF1F3)
        self.assertEqual(0xF1F3, self.memory.read_word(0x400))
        self.assertEqual(0xF1, self.memory.read(0x400))
        self.assertEqual(0xF3, self.memory.read(0x401))
        self.memory.write_word(0xFFE, 0x1234)
        self.assertEqual(0x1234, self.memory.read_word(0xFFE))

    def test_memory_block(self):
        self.memory.write_block(0x0, bytearray(b"\xF1\x1E\x5A\x1F"))
        self.assertEqual(b"\xF1\x1E\x5A\x1F", self.memory.read_block(0x0, 4))
        self.memory.write_block(0xFFC, b"\x01\x02\x03\x04")
        self.assertEqual(b"\x01\x02\x03\x04", self.memory.read_block(0xFFC, 4))

    def test_memory_block_round_trip_edges(self):
        for location, size in (0, 1), (0x200, 0xE00), (0xFFF, 1), (0x123, 0), (0x800, 0x800):
            block = bytes((location + offset) & 0xFF for offset in range(size))
            self.memory.write_block(location, block)
            self.assertEqual(block, self.memory.read_block(location, size))

    def test_memory_copy_into(self):
        self.memory.write_block(0x300, b"\x0A\x0B\x0C")
        dest = bytearray(5)
        self.memory.copy_into(dest, 0x300, 3)
        self.assertEqual("0a0b0c0000", dest.hex())

    def test_memory_byte_overflow(self):
        self.assertRaises(MemoryFault, self.memory.read, 0x1000)
        self.assertRaises(MemoryFault, self.memory.write, 0x1000, 0xFF)
        self.assertRaises(MemoryFault, self.memory.read, -1)

    def test_memory_word_overflow(self):
        self.assertRaises(MemoryFault, self.memory.read_word, 0xFFF)
        self.assertRaises(MemoryFault, self.memory.write_word, 0xFFF, 0x12)
        self.assertRaises(MemoryFault, self.memory.write_word, 0x1000, 0x12)

    def test_memory_block_overflow(self):
        self.assertRaises(MemoryFault, self.memory.write_block, 0xFFF, b"\xFE\xFF")
        self.assertRaises(MemoryFault, self.memory.read_block, 0xFFE, 3)
        self.assertRaises(MemoryFault, self.memory.copy_into, bytearray(4), 0xFFE, 4)
        self.assertRaises(MemoryFault, self.memory.read_block, 0x2000, 0)

    def test_memory_fault_details(self):
        with self.assertRaises(MemoryFault) as context:
            self.memory.read_block(0xFFE, 4)

        self.assertEqual(0xFFE, context.exception.location)
        self.assertEqual(4, context.exception.size)
        self.assertIn("0xffe", str(context.exception))

    def test_memory_failed_write_leaves_memory_untouched(self):
        self.assertRaises(MemoryFault, self.memory.write_block, 0xFFE, b"\x01\x02\x03")
        self.assertEqual(b"\x00\x00", self.memory.read_block(0xFFE, 2))

    def test_memory_load_program(self):
        self.memory.load_program(b"\x60\x05\x70\x03")
        self.assertEqual(0x6005, self.memory.read_word(0x200))
        self.assertEqual(0x7003, self.memory.read_word(0x202))

    def test_memory_load_largest_program(self):
        self.memory.load_program(b"\xAA" * 0xE00)
        self.assertEqual(0xAA, self.memory.read(0xFFF))

    def test_memory_load_program_too_large(self):
        self.assertRaises(MemoryFault, self.memory.load_program, b"\xAA" * 0xE01)
        self.assertEqual(0x00, self.memory.read(0x200))
