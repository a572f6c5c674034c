from pathlib import Path

import pytest

from ev3robot.ev3.sensors import Color, ColorSensor, UltrasonicSensor
from ev3robot.find import NotFoundError
from ev3robot.percentage import Percentage
from ev3robot.port import IN_1, IN_2


def make_sensor(root: Path, name: str, driver: str, address: str) -> Path:
    node = root / "lego-sensor" / name
    node.mkdir(parents=True)
    (node / "driver_name").write_text(driver + "\n")
    (node / "address").write_text(address + "\n")
    (node / "mode").write_text("")
    (node / "value0").write_text("0\n")
    return node


@pytest.fixture
def root(tmp_path):
    make_sensor(tmp_path, "sensor0", "lego-ev3-color", "ev3-ports:in1")
    make_sensor(tmp_path, "sensor1", "lego-ev3-us", "ev3-ports:in2")
    return tmp_path


def color_node(root: Path) -> Path:
    return root / "lego-sensor" / "sensor0"


def us_node(root: Path) -> Path:
    return root / "lego-sensor" / "sensor1"


def test_find_color_sensor(root):
    with ColorSensor.find(root) as sensor:
        assert sensor.device_node == color_node(root)


def test_find_ultrasonic_sensor_by_port(root):
    with UltrasonicSensor.find_by_port(IN_2, root) as sensor:
        assert sensor.device_node == us_node(root)


def test_color_sensor_not_on_ultrasonic_port(root):
    with pytest.raises(NotFoundError):
        ColorSensor.find_by_port(IN_2, root)
    with pytest.raises(NotFoundError):
        UltrasonicSensor.find_by_port(IN_1, root)


def test_reflected_light(root):
    (color_node(root) / "value0").write_text("42\n")
    with ColorSensor.find(root) as sensor:
        meter = sensor.measure_reflected_light()
        assert meter.reflected_light_intensity() == Percentage(42)
    assert (color_node(root) / "mode").read_text() == "COL-REFLECT"


def test_ambient_light(root):
    (color_node(root) / "value0").write_text("7\n")
    with ColorSensor.find(root) as sensor:
        meter = sensor.measure_ambient_light()
        assert meter.ambient_light_intensity() == Percentage(7)
    assert (color_node(root) / "mode").read_text() == "COL-AMBIENT"


def test_light_out_of_range(root):
    (color_node(root) / "value0").write_text("101\n")
    with ColorSensor.find(root) as sensor:
        with pytest.raises(ValueError):
            sensor.measure_reflected_light().reflected_light_intensity()


@pytest.mark.parametrize(
    "raw, color",
    [
        ("0", Color.NONE),
        ("1", Color.BLACK),
        ("2", Color.BLUE),
        ("3", Color.GREEN),
        ("4", Color.YELLOW),
        ("5", Color.RED),
        ("6", Color.WHITE),
        ("7", Color.BROWN),
    ],
)
def test_color_codes(root, raw, color):
    (color_node(root) / "value0").write_text(raw + "\n")
    with ColorSensor.find(root) as sensor:
        assert sensor.measure_color().color() is color
    assert (color_node(root) / "mode").read_text() == "COL-COLOR"


@pytest.mark.parametrize("raw", ["8", "255", "256", "-1", "red"])
def test_invalid_color_codes(root, raw):
    (color_node(root) / "value0").write_text(raw + "\n")
    with ColorSensor.find(root) as sensor:
        meter = sensor.measure_color()
        with pytest.raises(ValueError):
            meter.color()


def test_distance_in_cm(root):
    (us_node(root) / "value0").write_text("255\n")
    with UltrasonicSensor.find(root) as sensor:
        assert sensor.measure_cm().cm() == pytest.approx(25.5)
    assert (us_node(root) / "mode").read_text() == "US-DIST-CM"


def test_distance_in_inches_matches_tenths(root):
    (us_node(root) / "value0").write_text("100\n")
    with UltrasonicSensor.find(root) as sensor:
        assert sensor.measure_inches().inches() == pytest.approx(10.0)
    assert (us_node(root) / "mode").read_text() == "US-DIST-IN"


def test_negative_distance_rejected(root):
    (us_node(root) / "value0").write_text("-5\n")
    with UltrasonicSensor.find(root) as sensor:
        with pytest.raises(ValueError):
            sensor.measure_cm().cm()


@pytest.mark.parametrize("raw, present", [("1", True), ("0", False)])
def test_listen(root, raw, present):
    (us_node(root) / "value0").write_text(raw + "\n")
    with UltrasonicSensor.find(root) as sensor:
        assert sensor.listen().is_ultrasound_present() is present
    assert (us_node(root) / "mode").read_text() == "US-LISTEN"


def test_listen_rejects_multiple_characters(root):
    (us_node(root) / "value0").write_text("10\n")
    with UltrasonicSensor.find(root) as sensor:
        with pytest.raises(ValueError):
            sensor.listen().is_ultrasound_present()


def test_missing_value_file_fails_to_open(root):
    (color_node(root) / "value0").unlink()
    with pytest.raises(FileNotFoundError):
        ColorSensor.find(root)