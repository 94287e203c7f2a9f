#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws frames onto an SDL window surface via PyGame.  Note that the surface is
allocated at the size which matches the emulated display, and then the
contents are stretched (in the correct aspect ratio using 'Nearest Neighbour'
translation) to fit the window itself.  This means we don't have to draw the
same pixel multiple times.

Unset pixels are drawn in the first colour, set pixels in the second.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME


class Renderer(RendererBase):
    def __init__(self, scale=None, colours=None):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.rgb_map = None
        self.rgb_buffer = None
        self.scaled_size = (scale, scale // 2)
        try:
            self.display_surface = pygame.display.set_mode(self.scaled_size)
        except pygame.error as err:
            raise RendererError("Unable to create the display window: {}".format(err)) from None

        super().__init__(scale, colours)

        # Split RGB values for faster byte-based lookup later
        self.rgb_map = [bytes(colour) for colour in self.colours]
        self.set_title(APP_NAME)

    def set_resolution(self, width, height):
        super().set_resolution(width, height)
        total_pixels = width * height

        # Fill the offscreen RGB buffer with the background colour
        self.rgb_buffer = bytearray(self.rgb_map[0] * total_pixels) if self.rgb_map and total_pixels else None

    def draw_frame(self, pixels):
        super().draw_frame(pixels)

        if not self.rgb_buffer:
            return

        # Update RGB buffer in-place to minimise allocations and PyGame calls
        rgb_buffer = self.rgb_buffer
        rgb_map = self.rgb_map

        for location, pixel in enumerate(pixels):
            rgb_location = location * 3
            rgb_buffer[rgb_location:rgb_location + 3] = rgb_map[pixel]

        # Blit the bytearray straight to the surface
        render_surface = pygame.image.frombuffer(bytes(rgb_buffer), (self.width, self.height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        super().set_title(title)
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
