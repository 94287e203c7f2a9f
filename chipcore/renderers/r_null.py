#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.  The last frame and title are kept, so the display can still be
inspected without a window.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import DEFAULT_COLOURS


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, colours=None):
        self.scale = 1 if scale is None else scale
        self.colours = DEFAULT_COLOURS if colours is None else tuple(colours)

        if len(self.colours) != 2:
            raise RendererError("Exactly two colours are required (pixel off, pixel on).")

        for colour in self.colours:
            if len(colour) != 3 or any(not 0 <= component <= 0xFF for component in colour):
                raise RendererError("Colours must be RGB triplets with components from 0 to 255.")

        self.frame = None
        self.title = ""
        self.set_resolution(0, 0)

    def set_resolution(self, width, height):
        self.width = width
        self.height = height

    def draw_frame(self, pixels):
        if len(pixels) != self.width * self.height:
            raise RendererError("Frame size does not match the display resolution.")

        self.frame = pixels

    def set_title(self, title):
        self.title = title

    def shutdown(self):
        pass
