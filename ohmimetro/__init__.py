"""Resistance meter: divider measurement, E24 rounding, colour bands and SSD1306 drawing."""

__version__ = "0.1.0"
__all__ = ["font", "meter", "ssd1306"]