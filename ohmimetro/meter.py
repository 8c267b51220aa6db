"""Resistance meter: voltage divider reading, E24 snapping and colour bands."""

from __future__ import annotations

import time
from dataclasses import dataclass
from itertools import count
from typing import Callable

from ohmimetro.ssd1306 import SSD1306

OHM_KNOWN = 10_000
INPUT_VOLT = 3.3
ADC_RESOLUTION = 4095
SAMPLES = 100
NUM_LEDS = 25
MIN_RESISTANCE = 510
MAX_RESISTANCE = 100_000

COLOR_NAMES = (
    "Preto", "Marrom", "Vermelho", "Laranja", "Amarelo",
    "Verde", "Azul", "Violeta", "Cinza", "Branco",
)

E24_VALUES = (
    510, 560, 620, 680, 750, 820, 910,
    1000, 1100, 1200, 1300, 1500, 1600, 1800, 2000, 2200, 2400, 2700, 3000,
    3300, 3600, 3900, 4300, 4700,
    5100, 5600, 6200, 6800, 7500, 8200, 9100,
    10000, 11000, 12000, 13000, 15000, 16000, 18000, 20000, 22000, 24000,
    27000, 30000, 33000, 36000, 39000, 43000, 47000,
    51000, 56000, 62000, 68000, 75000, 82000, 91000,
    100000,
)


def _color_name(band: int) -> str:
    return COLOR_NAMES[band] if 0 <= band < len(COLOR_NAMES) else "?"


@dataclass(frozen=True)
class ColorBands:
    """The two digit bands and the multiplier band of a resistor."""

    first: int
    second: int
    multiplier: int

    @property
    def names(self) -> tuple[str, str, str]:
        """Colour names of the three bands; '?' for a band with no colour."""
        return (_color_name(self.first), _color_name(self.second),
                _color_name(self.multiplier))


def calculate_resistance(adc_volt: float) -> float:
    """Resistance of the unknown divider leg, or 0 for an unusable voltage."""
    if adc_volt >= INPUT_VOLT or adc_volt <= 0:
        return 0.0
    return (OHM_KNOWN * adc_volt) / (INPUT_VOLT - adc_volt)


def find_closest_e24(resistance: float) -> float:
    """Nearest E24 value in range; on a tie the smaller value wins."""
    return float(min(E24_VALUES, key=lambda value: abs(resistance - value)))


def get_color_bands(resistance: float) -> ColorBands:
    """Work out the colour bands for a resistance value."""
    value = int(resistance)
    multiplier = 0
    while value >= 100:
        value //= 10
        multiplier += 1
    bands = ColorBands(value // 10, value % 10, multiplier)
    if resistance < 1000:
        value = int(resistance * 10)
        bands = ColorBands(value // 100, (value // 10) % 10, multiplier - 1)
    return bands


class Ohmmeter:
    """Drives the measurement loop against a display, an ADC and an LED matrix.

    ``adc`` returns one raw reading, ``led_matrix`` accepts one 32-bit word
    per LED, and ``sleep`` takes a delay in seconds.
    """

    def __init__(
        self,
        display: SSD1306,
        adc: Callable[[], int],
        led_matrix: Callable[[int], None],
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.display = display
        self.adc = adc
        self.led_matrix = led_matrix
        self.sleep = sleep
        self.clear_matrix()
        display.config()
        display.fill(False)
        display.send_data()

    def clear_matrix(self) -> None:
        """Switch off every LED in the matrix."""
        for _ in range(NUM_LEDS):
            self.led_matrix(0)

    def read_voltage(self) -> float:
        """Average of several ADC samples, converted to volts."""
        total = 0.0
        for _ in range(SAMPLES):
            total += self.adc()
            self.sleep(0.001)
        return (total / SAMPLES) * INPUT_VOLT / ADC_RESOLUTION

    def show_out_of_range(self) -> None:
        """Show the out-of-range message on the display."""
        self.display.fill(False)
        self.display.draw_string("Fora de faixa", 0, 0)
        self.display.send_data()

    def display_resistance_and_colors(self, resistance: float, bands: ColorBands) -> None:
        """Draw the colour bands and the resistance value."""
        first, second, multiplier = bands.names
        d = self.display
        d.fill(False)
        d.rect(3, 3, 122, 60, True, False)
        d.draw_string("1 ", 8, 6)
        d.draw_string(first, 60, 6)
        d.draw_string("2 ", 8, 16)
        d.draw_string(second, 60, 16)
        d.draw_string("Multi.", 8, 26)
        d.draw_string(multiplier, 60, 26)
        d.line(3, 40, d.width - 3, 40, True)
        d.draw_string("RESIS.", 15, 47)
        d.draw_string(f"{resistance:.0f}", 65, 47)
        d.send_data()

    def step(self) -> float | None:
        """Take one measurement; return the E24 value, or None if out of range."""
        resistance = calculate_resistance(self.read_voltage())
        if resistance < MIN_RESISTANCE or resistance > MAX_RESISTANCE:
            self.show_out_of_range()
            print(f"Resistência fora de faixa: {resistance:.0f} Ω")
            self.sleep(1.0)
            return None

        e24 = find_closest_e24(resistance)
        bands = get_color_bands(e24)
        self.display_resistance_and_colors(e24, bands)
        first, second, multiplier = bands.names
        print(f"Resistência: {e24:.0f} Ω, Cores: {first}, {second}, {multiplier}")
        self.sleep(1.0)
        return e24

    def run(self, iterations: int | None = None) -> None:
        """Measure repeatedly, forever when ``iterations`` is None."""
        for _ in (count() if iterations is None else range(iterations)):
            self.step()