#!/usr/bin/env python3

"""
Memory Emulator

A flat 4K store of bytes.  Supports reading and writing of single bytes, big-
endian words and whole blocks of memory.

The built-in hexadecimal glyphs are written into the reserved area when the
memory is created, and programs are always loaded at 0x200.

Every access is checked against the size of the store, including the final
byte of a block.  Running off the end of memory means the guest program has
gone badly wrong, so the fault is never caught inside the emulator.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, FONT_LOCATION, FONT_SPRITES, PROGRAM_START, MAX_PROGRAM_SIZE


class MemoryFault(Exception):
    report = None  # Machine state, attached by the CPU when a running program faults

    def __init__(self, location, size):
        self.location = location
        self.size = size
        super().__init__(
            "Illegal memory access at address 0x{:03x} for {} byte(s)".format(location, size)
        )


class Memory:
    def __init__(self):
        self.mem = memoryview(bytearray(MEM_SIZE))
        self.mem_size = MEM_SIZE
        self.write_block(FONT_LOCATION, FONT_SPRITES)

    def check_access(self, location, size=1):
        if location < 0 or size < 0 or location + size > self.mem_size:
            raise MemoryFault(location, size)

    def read(self, location):
        self.check_access(location)
        return self.mem[location]

    def write(self, location, byte):
        self.check_access(location)
        self.mem[location] = byte

    def read_word(self, location):
        self.check_access(location, 2)
        return (self.mem[location] << 8) | self.mem[location + 1]

    def write_word(self, location, word):
        self.check_access(location, 2)
        self.mem[location] = (word >> 8) & 0xFF
        self.mem[location + 1] = word & 0xFF

    def read_block(self, location, size=1):
        self.check_access(location, size)
        return self.mem[location:location + size].tobytes()

    def write_block(self, location, block):
        block_size = len(block)
        self.check_access(location, block_size)
        self.mem[location:location + block_size] = block

    def copy_into(self, dest, location, size):
        # Destination must be writable and at least 'size' long
        self.check_access(location, size)
        dest[:size] = self.mem[location:location + size]

    def load_program(self, program):
        if len(program) > MAX_PROGRAM_SIZE:
            raise MemoryFault(PROGRAM_START, len(program))

        self.write_block(PROGRAM_START, program)
