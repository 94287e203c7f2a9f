#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "Chipotto"
APP_VERSION = "0.1.0"
APP_LICENCE = "Licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000       # 4K of addressable RAM
FONT_LOCATION = 0x000   # Glyphs live at the very bottom of the reserved area
PROGRAM_START = 0x200   # Everything below here is reserved for the interpreter
MAX_PROGRAM_SIZE = MEM_SIZE - PROGRAM_START

# CPU
NUM_REGISTERS = 0x10
STACK_SIZE = 16
INSTRUCTION_WIDTH = 2   # Every instruction is one big-endian word
DEFAULT_CLOCK_SPEED = 500

# Timers and display (both fixed, regardless of clock speed)
TIMER_FREQ = 60.0
DISPLAY_FREQ = 60.0

# Display
VID_WIDTH = 64
VID_HEIGHT = 32

# Keypad
NUM_KEYS = 0x10

# Built-in hexadecimal glyphs, 0 to F, 5 rows each
FONT_SPRITES = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))
GLYPH_HEIGHT = 5

# Default mappings for keys 0-F, later populated into a dictionary.  Note that the keyscans (on a UK QWERTY keyboard)
# and ASCII characters for these are the same code
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Pixel colours for off and on
DEFAULT_COLOURS = ((0x00, 0x00, 0x00), (0xFF, 0xFF, 0xFF))
