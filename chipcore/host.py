#!/usr/bin/env python3

"""
Host Loop

Drives a Machine in real time.  Three things happen on their own schedules,
all on the same thread:

    * CPU cycles, at the configured clock speed (500Hz by default)
    * Timer ticks, at a fixed 60Hz
    * Display refreshes, at a fixed 60Hz, and only if the framebuffer changed

Host input events are pumped alongside the display refresh, as pumping the
queue is slow, but the latest key states are copied into the keypad before
every CPU cycle.

The machine never blocks.  An instruction waiting for a key simply runs
again on the next cycle, so the timers and display carry on regardless.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from time import perf_counter
from .constants import APP_NAME, DEFAULT_CLOCK_SPEED, TIMER_FREQ, DISPLAY_FREQ

TIMER_INTERVAL = 1.0 / TIMER_FREQ
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ


class HostLoop:
    def __init__(self, machine, inputs, renderer, clock_speed=DEFAULT_CLOCK_SPEED):
        if clock_speed <= 0:
            raise ValueError("Clock speed must be a positive number of operations per second")

        self.machine = machine
        self.inputs = inputs
        self.renderer = renderer
        self.core_interval = 1.0 / clock_speed

        # Everything is due straight away
        self.next_cycle_time = 0
        self.next_timer_time = 0
        self.next_display_update_time = 0

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.next_perf_report_time = 0

        framebuffer = machine.get_framebuffer()
        self.renderer.set_resolution(*framebuffer.get_vid_size())
        self.refresh_display(force=True)

    def run(self):
        while not self.step(perf_counter()):
            pass

        # Show whatever was drawn last before handing back
        self.refresh_display()

    def step(self, this_time):
        # Performance counters
        if this_time >= self.next_perf_report_time:
            self.next_perf_report_time = int(this_time) + 1.0
            self.report_perf(self.perf_counter_fps, self.perf_counter_ops)
            self.perf_counter_ops = 0
            self.perf_counter_fps = 0

        # Prevent unnecessary display rendering in excess of host frame rate
        if this_time >= self.next_display_update_time:
            if self.inputs.process_messages():  # Process input events at 60Hz too, to avoid slowdown
                return True

            self.next_display_update_time = this_time + DISPLAY_INTERVAL
            self.refresh_display()
            self.perf_counter_fps += 1

        if this_time >= self.next_timer_time:
            self.next_timer_time = this_time + TIMER_INTERVAL
            self.machine.timer_tick()

        if this_time >= self.next_cycle_time:
            self.next_cycle_time = this_time + self.core_interval
            self.machine.set_keys(self.inputs.get_key_states())
            self.machine.cycle()
            self.perf_counter_ops += 1

        return False

    def refresh_display(self, force=False):
        # Only hand over a frame when the framebuffer is stale
        framebuffer = self.machine.get_framebuffer()

        if force or framebuffer.has_changed():
            self.renderer.draw_frame(framebuffer.dump())
            framebuffer.set_changed(False)

    def report_perf(self, fps=0, ops=0):
        self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, fps, ops))
