# ohmimetro

A small resistance meter. A resistor under test forms a voltage divider
with a known 10 kΩ resistor fed from 3.3 V. The voltage across it is
averaged over 100 ADC readings, turned into a resistance, rounded to the
nearest E24 value between 510 Ω and 100 kΩ, and shown as its colour bands
on a 128×64 SSD1306 OLED display.

The package has no dependencies beyond the standard library.

## Modules

- `ohmimetro.meter` – the measurement functions, `ColorBands` and the
  `Ohmmeter` loop.
- `ohmimetro.ssd1306` – `SSD1306`, an in-memory frame buffer with pixel,
  line, rectangle and text drawing that sends commands and data to an I²C
  bus object you supply, and `Command`, the display's opcodes.
- `ohmimetro.font` – the 8×8 glyph table used for text. `glyph(c)` returns
  the eight column bytes for a character and `glyph_index(c)` its offset in
  the table. Digits and the letters A–Z and a–z have glyphs; any other
  character draws blank. Both raise `ValueError` for anything but a single
  character.

## Measuring

The pure functions can be used on their own:

```python
from ohmimetro.meter import calculate_resistance, find_closest_e24, get_color_bands

resistance = calculate_resistance(1.65)   # half of 3.3 V across the unknown: about 10 kΩ
nominal = find_closest_e24(9800)          # 10000.0
bands = get_color_bands(nominal)          # ColorBands(first=1, second=0, multiplier=3)
bands.names                               # ('Marrom', 'Preto', 'Laranja')
```

- `calculate_resistance(adc_volt)` returns 0 when the voltage is zero or
  less, or at or above the 3.3 V supply.
- `find_closest_e24(resistance)` returns the nearest E24 value from 510 to
  100 000; on a tie the smaller value wins.
- `get_color_bands(resistance)` returns a frozen `ColorBands` with the two
  digit bands and the multiplier band. Its `names` property gives the
  colour names (in Portuguese: Preto, Marrom, Vermelho, Laranja, Amarelo,
  Verde, Azul, Violeta, Cinza, Branco), with `"?"` for a band that has no
  colour.

## Running the meter

`Ohmmeter(display, adc, led_matrix, sleep=time.sleep)` ties the pieces
together:

- `display` is an `SSD1306`;
- `adc` is a callable returning one raw 12-bit reading;
- `led_matrix` is a callable taking one 32-bit word per LED;
- `sleep` takes a delay in seconds.

Creating it switches off all 25 LEDs of the matrix, sends the display's
configuration sequence and clears the screen.

- `read_voltage()` averages 100 readings (sleeping 1 ms after each) and
  converts them to volts.
- `step()` takes one measurement. Outside 510 Ω – 100 kΩ it shows
  "Fora de faixa" on the display, prints the value and returns `None`.
  Otherwise it draws the band colour names and the E24 value, prints them
  and returns the E24 value. Either way it then sleeps for one second.
- `run(iterations=None)` calls `step()` repeatedly, forever when
  `iterations` is `None`.
- `clear_matrix()`, `show_out_of_range()` and
  `display_resistance_and_colors(resistance, bands)` are the individual
  output steps.

## Display

```python
from ohmimetro.ssd1306 import SSD1306

display = SSD1306(bus, 128, 64, False, 0x3C)
display.config()
display.fill(False)
display.rect(3, 3, 122, 60, True, False)
display.draw_string("RESIS.", 15, 47)
display.send_data()
```

`bus` is any object with a `write(address, data)` method. Drawing only
changes the in-memory `buffer` until `send_data()` is called; `command()`
writes a single command byte. `get_pixel(x, y)` reads a pixel back.
Coordinates that fall outside the frame buffer raise `IndexError`.
`draw_string` wraps at the right edge and stops at the bottom.

## What it does not do

The package does not talk to any hardware itself and has no command-line
program. Reading the ADC, driving the LED matrix and writing to the I²C bus
are left to the callables and the bus object you pass in.