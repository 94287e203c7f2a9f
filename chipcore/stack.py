#!/usr/bin/env python3

"""
Stack Emulator

There is no specified location for the CPU call stack in system memory, and no
stack pointer register exposed to the running program, so the stack is kept
in host memory as a simple bounded list of return addresses.

Sixteen levels are available.  Nesting calls any deeper than that has no
legitimate cause, so an overflow is fatal.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE


class StackError(Exception):
    report = None  # Machine state, attached by the CPU


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = []
        self.size = size

    def push(self, item):
        # Fetching the stack size with 'len' should be immediate, so no slow loop
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def is_empty(self):
        return not self.items

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return self.items
