#!/usr/bin/env python3

"""
Framebuffer Emulator

Pixels are written here, and are only handed over to the actual display (the
host rendering system) at 60Hz, and only when something has changed since the
last refresh.

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method: every set bit in a sprite
toggles the pixel underneath it.  Drawing the same sprite in the same place
twice therefore erases it again, which is how most games animate.

Sprites which run off the right or bottom edge wrap around to the opposite
side.  A collision is reported if any pixel was set before being toggled off.

Each pixel is stored as a byte holding 0 or 1.  What colour those values turn
into is decided by the renderer, not here.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import VID_WIDTH, VID_HEIGHT


class Framebuffer:
    def __init__(self, vid_width=VID_WIDTH, vid_height=VID_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.pixels = bytearray(self.vid_size)
        self.changed = False

    def clear(self):
        self.pixels[:] = bytes(self.vid_size)
        self.changed = True

    def draw(self, x, y, sprite):
        vid_width = self.vid_width
        vid_height = self.vid_height
        pixels = self.pixels
        collided = False

        for row, spr_data in enumerate(sprite):
            scr_y = (y + row) % vid_height

            for col in range(8):
                if spr_data & (0x80 >> col):
                    vram_loc = scr_y * vid_width + (x + col) % vid_width

                    if pixels[vram_loc]:
                        # Don't stop drawing.  Set the flag, and never unset it for this sprite.
                        collided = True

                    pixels[vram_loc] ^= 1

        self.changed = True
        return collided

    def get_pixel(self, x, y):
        return self.pixels[(y % self.vid_height) * self.vid_width + (x % self.vid_width)]

    def get_vid_size(self):
        return self.vid_width, self.vid_height

    def dump(self):
        return bytes(self.pixels)

    def has_changed(self):
        return self.changed

    def set_changed(self, changed):
        self.changed = changed

    def to_text(self, on="#", off="."):
        vid_width = self.vid_width
        return "\n".join(
            "".join(on if pixel else off for pixel in self.pixels[row:row + vid_width])
            for row in range(0, self.vid_size, vid_width)
        )
