# ev3robot

A small Python library for driving LEGO EV3 motors and sensors on a brick
running ev3dev. Devices are found and controlled through the attribute files
that ev3dev exposes under `/sys/class`.

## Installation

```
pip install ev3robot
```

## Finding devices

Every device class can be opened as the single device of its kind, or as
the single device of its kind on a given port:

```python
from ev3robot.port import OUT_A
from ev3robot.ev3.motors import LargeMotor
from ev3robot.ev3.sensors import ColorSensor

motor = LargeMotor.find_by_port(OUT_A)
sensor = ColorSensor.find()
```

`ev3robot.port` defines the brick's ports `IN_1` to `IN_4` and `OUT_A` to
`OUT_D`; `find_by_port` also accepts a port address as a plain string.
If nothing matches, `NotFoundError` is raised; if more than one device
matches, `FoundMultipleError` is raised. Both derive from `FindError` in
`ev3robot.find`.

`find`, `find_by_port` and `find_device_nodes` take an optional `root`
argument to look somewhere other than `/sys/class`. A device can also be
opened directly from its node with `open(device_node)`. Devices keep their
attribute files open; call `close()` or use them in a `with` block.

## Motors

```python
from ev3robot.percentage import SignedPercentage
from ev3robot.tacho import Degrees, StopAction

motor.run(SignedPercentage(50))       # run forever at half of max speed
motor.rotate(SignedPercentage(30), Degrees(90), StopAction.HOLD)
motor.brake()

controller = motor.run_direct(SignedPercentage(20))
controller.set_duty_cycle(SignedPercentage(-40))
motor.coast()
```

Speeds may be given as `TachoCounts`, `Percentage` or `SignedPercentage`
(of the motor's maximum speed), `Degrees`, `Revolutions`, or a plain int
taken as degrees. Positions may be given as `TachoCounts`, `Degrees`,
`Revolutions` or a plain int taken as degrees.

A `TachoMotor` also exposes its attributes as properties: `count_per_rot`,
`max_speed`, `duty_cycle`, `duty_cycle_sp`, `polarity`, `position`,
`position_sp`, `state`, `speed`, `speed_sp` and `stop_action`, the
writable ones with setters. `is_running()` and `is_holding()` read the
`state` flags, and `command()` sends any `Command`.

Several motors can be driven together with `MotorsBunch`:

```python
from ev3robot.motor import MotorsBunch
from ev3robot.ev3.motors import LargeMotor, MediumMotor

bunch = MotorsBunch([LargeMotor.find(), MediumMotor.find()])
bunch.run(SignedPercentage(40))
if bunch.is_running():
    bunch.hold()
```

## Sensors

```python
from ev3robot.ev3.sensors import ColorSensor, UltrasonicSensor

with ColorSensor.find() as sensor:
    color = sensor.measure_color().color()
    light = sensor.measure_reflected_light().reflected_light_intensity()
    ambient = sensor.measure_ambient_light().ambient_light_intensity()

with UltrasonicSensor.find() as sensor:
    distance = sensor.measure_cm().cm()
    heard = sensor.listen().is_ultrasound_present()
```

## What it does not do

The package is a library only; it installs no command. It covers the EV3
large and medium motors and the color and ultrasonic sensors. There is no
support for timed runs or runs to an absolute position beyond sending the
corresponding `Command`, since the time and ramp attributes are not exposed.

## Running the tests

```
pip install -e ".[test]"
pytest
```