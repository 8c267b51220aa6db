import pytest

from ohmimetro.meter import (
    ADC_RESOLUTION,
    E24_VALUES,
    INPUT_VOLT,
    NUM_LEDS,
    SAMPLES,
    ColorBands,
    Ohmmeter,
    calculate_resistance,
    find_closest_e24,
    get_color_bands,
)
from ohmimetro.ssd1306 import SSD1306


class FakeBus:
    def __init__(self):
        self.writes = []

    def write(self, address, data):
        self.writes.append((address, bytes(data)))


class Recorder:
    """Stands in for the ADC, the LED matrix and the sleep function."""

    def __init__(self, raw):
        self.raw = raw
        self.adc_calls = 0
        self.leds = []
        self.sleeps = []

    def adc(self):
        self.adc_calls += 1
        return self.raw


def test_half_voltage_equals_known_resistor():
    assert calculate_resistance(INPUT_VOLT / 2) == pytest.approx(10000)


@pytest.mark.parametrize("volt", [0, -1.0, INPUT_VOLT, 4.0])
def test_unusable_voltage_gives_zero(volt):
    assert calculate_resistance(volt) == 0


def test_resistance_grows_with_voltage():
    values = [calculate_resistance(v) for v in (0.5, 1.0, 1.5, 2.0, 2.5, 3.0)]
    assert values == sorted(values)


@pytest.mark.parametrize("value", E24_VALUES)
def test_e24_values_map_to_themselves(value):
    assert find_closest_e24(value) == value


def test_e24_clamps_to_series_ends():
    assert find_closest_e24(0) == 510
    assert find_closest_e24(1e9) == 100000


def test_e24_tie_prefers_lower_value():
    assert find_closest_e24(1050) == 1000


def test_e24_picks_nearest():
    assert find_closest_e24(4650) == 4700


def test_color_bands_for_4700():
    bands = get_color_bands(4700)
    assert bands == ColorBands(4, 7, 2)
    assert bands.names == ("Amarelo", "Violeta", "Vermelho")


@pytest.mark.parametrize("value", [v for v in E24_VALUES if v >= 1000])
def test_color_bands_reconstruct_value(value):
    bands = get_color_bands(value)
    assert (bands.first * 10 + bands.second) * 10 ** bands.multiplier == value
    assert "?" not in bands.names


def test_setup_clears_leds_and_blanks_display():
    rec = Recorder(0)
    bus = FakeBus()
    display = SSD1306(bus)
    Ohmmeter(display, rec.adc, rec.leds.append, rec.sleeps.append)
    assert rec.leds == [0] * NUM_LEDS
    assert not any(display.buffer[1:])
    assert bus.writes[-1][1] == bytes(display.buffer)


def test_read_voltage_averages_samples():
    rec = Recorder(ADC_RESOLUTION)
    meter = Ohmmeter(SSD1306(FakeBus()), rec.adc, rec.leds.append, rec.sleeps.append)
    assert meter.read_voltage() == pytest.approx(INPUT_VOLT)
    assert rec.adc_calls == SAMPLES
    assert rec.sleeps == [0.001] * SAMPLES


def test_step_measures_known_resistor(capsys):
    rec = Recorder(2048)
    display = SSD1306(FakeBus())
    meter = Ohmmeter(display, rec.adc, rec.leds.append, rec.sleeps.append)
    assert meter.step() == 10000
    out = capsys.readouterr().out
    assert out == "Resistência: 10000 Ω, Cores: Marrom, Preto, Laranja\n"
    assert rec.sleeps[-1] == 1.0
    assert display.get_pixel(64, 40)
    assert display.get_pixel(10, 3)


def test_step_out_of_range(capsys):
    rec = Recorder(0)
    display = SSD1306(FakeBus())
    meter = Ohmmeter(display, rec.adc, rec.leds.append, rec.sleeps.append)
    assert meter.step() is None
    assert capsys.readouterr().out == "Resistência fora de faixa: 0 Ω\n"
    reference = SSD1306(FakeBus())
    reference.draw_string("Fora de faixa", 0, 0)
    assert display.buffer == reference.buffer
    assert rec.sleeps[-1] == 1.0


def test_display_resistance_draws_frame():
    rec = Recorder(0)
    d = SSD1306(FakeBus())
    meter = Ohmmeter(d, rec.adc, rec.leds.append, rec.sleeps.append)
    meter.display_resistance_and_colors(4700.0, get_color_bands(4700))
    assert all(d.get_pixel(x, 3) for x in range(3, 125))
    assert all(d.get_pixel(x, 62) for x in range(3, 125))
    assert all(d.get_pixel(x, 40) for x in range(3, 126))
    assert not d.get_pixel(0, 0)


def test_run_repeats_steps(capsys):
    rec = Recorder(2048)
    display = SSD1306(FakeBus())
    meter = Ohmmeter(display, rec.adc, rec.leds.append, rec.sleeps.append)
    meter.run(3)
    assert rec.adc_calls == 3 * SAMPLES
    assert capsys.readouterr().out.count("Resistência: 10000") == 3
    assert display.get_pixel(64, 40)