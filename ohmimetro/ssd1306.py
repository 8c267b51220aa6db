"""Frame buffer and command set for an SSD1306 OLED display on an I2C bus."""

from __future__ import annotations

from enum import IntEnum
from itertools import product
from typing import Protocol

from ohmimetro.font import glyph

WIDTH = 128
HEIGHT = 64
DEFAULT_ADDRESS = 0x3C

_DATA_PREFIX = 0x40
_COMMAND_PREFIX = 0x80


class Command(IntEnum):
    """SSD1306 command opcodes."""

    SET_CONTRAST = 0x81
    SET_ENTIRE_ON = 0xA4
    SET_NORM_INV = 0xA6
    SET_DISP = 0xAE
    SET_MEM_ADDR = 0x20
    SET_COL_ADDR = 0x21
    SET_PAGE_ADDR = 0x22
    SET_DISP_START_LINE = 0x40
    SET_SEG_REMAP = 0xA0
    SET_MUX_RATIO = 0xA8
    SET_COM_OUT_DIR = 0xC0
    SET_DISP_OFFSET = 0xD3
    SET_COM_PIN_CFG = 0xDA
    SET_DISP_CLK_DIV = 0xD5
    SET_PRECHARGE = 0xD9
    SET_VCOM_DESEL = 0xDB
    SET_CHARGE_PUMP = 0x8D


class I2CBus(Protocol):
    """Anything that can write a block of bytes to an I2C address."""

    def write(self, address: int, data: bytes) -> None:
        ...


class SSD1306:
    """An SSD1306 display with an in-memory frame buffer.

    The buffer starts with the data control byte, followed by the pixels
    laid out for vertical addressing mode.
    """

    def __init__(
        self,
        bus: I2CBus,
        width: int = WIDTH,
        height: int = HEIGHT,
        external_vcc: bool = False,
        address: int = DEFAULT_ADDRESS,
    ) -> None:
        self.bus = bus
        self.width = width
        self.height = height
        self.pages = height // 8
        self.address = address
        self.external_vcc = external_vcc
        self.buffer = bytearray(self.pages * width + 1)
        self.buffer[0] = _DATA_PREFIX

    def config(self) -> None:
        """Send the power-up configuration sequence."""
        sequence = (
            Command.SET_DISP | 0x00,
            Command.SET_MEM_ADDR, 0x01,
            Command.SET_DISP_START_LINE | 0x00,
            Command.SET_SEG_REMAP | 0x01,
            Command.SET_MUX_RATIO, HEIGHT - 1,
            Command.SET_COM_OUT_DIR | 0x08,
            Command.SET_DISP_OFFSET, 0x00,
            Command.SET_COM_PIN_CFG, 0x12,
            Command.SET_DISP_CLK_DIV, 0x80,
            Command.SET_PRECHARGE, 0xF1,
            Command.SET_VCOM_DESEL, 0x30,
            Command.SET_CONTRAST, 0xFF,
            Command.SET_ENTIRE_ON,
            Command.SET_NORM_INV,
            Command.SET_CHARGE_PUMP, 0x14,
            Command.SET_DISP | 0x01,
        )
        for byte in sequence:
            self.command(byte)

    def command(self, command: int) -> None:
        """Write a single command byte to the display."""
        self.bus.write(self.address, bytes((_COMMAND_PREFIX, int(command) & 0xFF)))

    def send_data(self) -> None:
        """Push the whole frame buffer to the display."""
        for byte in (
            Command.SET_COL_ADDR, 0, self.width - 1,
            Command.SET_PAGE_ADDR, 0, self.pages - 1,
        ):
            self.command(byte)
        self.bus.write(self.address, bytes(self.buffer))

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        x &= 0xFF
        y &= 0xFF
        index = ((y >> 3) + (x << 3) + 1) & 0xFFFF
        if index >= len(self.buffer):
            raise IndexError(f"pixel ({x}, {y}) lies outside the frame buffer")
        return index, 1 << (y & 0b111)

    def pixel(self, x: int, y: int, value: bool) -> None:
        """Set or clear one pixel."""
        index, mask = self._locate(x, y)
        if value:
            self.buffer[index] |= mask
        else:
            self.buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether one pixel is lit."""
        index, mask = self._locate(x, y)
        return bool(self.buffer[index] & mask)

    def fill(self, value: bool) -> None:
        """Set every pixel of the display to ``value``."""
        for y, x in product(range(self.height), range(self.width)):
            self.pixel(x, y, value)

    def rect(self, top: int, left: int, width: int, height: int,
             value: bool, fill: bool = False) -> None:
        """Draw a rectangle outline, optionally filling its interior."""
        for x in range(left, left + width):
            self.pixel(x, top, value)
            self.pixel(x, top + height - 1, value)
        for y in range(top, top + height):
            self.pixel(left, y, value)
            self.pixel(left + width - 1, y, value)
        if fill:
            for x, y in product(range(left + 1, left + width - 1),
                                range(top + 1, top + height - 1)):
                self.pixel(x, y, value)

    def line(self, x0: int, y0: int, x1: int, y1: int, value: bool) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.pixel(x0, y0, value)
            if x0 == x1 and y0 == y1:
                break
            e2 = err * 2
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def hline(self, x0: int, x1: int, y: int, value: bool) -> None:
        """Draw a horizontal line from ``x0`` to ``x1`` inclusive."""
        for x in range(x0, x1 + 1):
            self.pixel(x, y, value)

    def vline(self, x: int, y0: int, y1: int, value: bool) -> None:
        """Draw a vertical line from ``y0`` to ``y1`` inclusive."""
        for y in range(y0, y1 + 1):
            self.pixel(x, y, value)

    def draw_char(self, c: str, x: int, y: int) -> None:
        """Draw one 8x8 character with its top-left corner at ``(x, y)``."""
        for i, column in enumerate(glyph(c)):
            for j in range(8):
                self.pixel(x + i, y + j, column & (1 << j))

    def draw_string(self, text: str, x: int, y: int) -> None:
        """Draw text, wrapping at the right edge and stopping at the bottom."""
        for c in text:
            self.draw_char(c, x, y)
            x = (x + 8) & 0xFF
            if x + 8 >= self.width:
                x = 0
                y = (y + 8) & 0xFF
            if y + 8 >= self.height:
                break