import pytest

from ev3robot.motor import DutyCycleController, MotorsBunch, Polarity
from ev3robot.percentage import SignedPercentage


class FakeMotor:
    def __init__(self, name, log, running=False, holding=False, fail=None):
        self.name = name
        self.log = log
        self.running = running
        self.holding = holding
        self.fail = fail

    def _record(self, action, *args):
        if action == self.fail:
            raise RuntimeError(f"{self.name} failed")
        self.log.append((self.name, action, *args))

    def run(self, speed):
        self._record("run", speed)

    def is_running(self):
        self._record("is_running")
        return self.running

    def is_holding(self):
        self._record("is_holding")
        return self.holding

    def coast(self):
        self._record("coast")

    def brake(self):
        self._record("brake")

    def hold(self):
        self._record("hold")

    def rotate(self, speed, shift, stop_action):
        self._record("rotate", speed, shift, stop_action)

    def run_direct(self, duty_cycle):
        self._record("run_direct", duty_cycle)
        return DutyCycleController(
            lambda value: self.log.append((self.name, "set", value))
        )


@pytest.fixture
def log():
    return []


def make_bunch(log, **overrides):
    return MotorsBunch(
        FakeMotor(name, log, **overrides.get(name, {})) for name in ("a", "b")
    )


def test_polarity_parses_and_prints():
    assert Polarity("normal") is Polarity.NORMAL
    assert Polarity("inversed") is Polarity.INVERSED
    assert str(Polarity.INVERSED) == "inversed"


def test_polarity_rejects_unknown_text():
    with pytest.raises(ValueError):
        Polarity("reversed")


def test_duty_cycle_controller_forwards_value():
    received = []
    controller = DutyCycleController(received.append)
    controller.set_duty_cycle(SignedPercentage(-20))
    controller(SignedPercentage(30))
    assert received == [SignedPercentage(-20), SignedPercentage(30)]


def test_sequence_protocol(log):
    bunch = make_bunch(log)
    assert len(bunch) == 2
    assert [motor.name for motor in bunch] == ["a", "b"]
    assert bunch[1].name == "b"
    replacement = FakeMotor("c", log)
    bunch[0] = replacement
    assert bunch[0] is replacement


def test_exec_collects_results_in_order(log):
    bunch = make_bunch(log)
    assert bunch.exec(lambda motor: motor.name) == ["a", "b"]


def test_run_reaches_every_motor(log):
    bunch = make_bunch(log)
    bunch.run(SignedPercentage(50))
    assert log == [
        ("a", "run", SignedPercentage(50)),
        ("b", "run", SignedPercentage(50)),
    ]


@pytest.mark.parametrize("action", ["coast", "brake", "hold"])
def test_stop_actions_reach_every_motor(log, action):
    bunch = make_bunch(log)
    getattr(bunch, action)()
    assert log == [("a", action), ("b", action)]


def test_rotate_passes_all_arguments(log):
    bunch = make_bunch(log)
    bunch.rotate(1, 2, 3)
    assert log == [("a", "rotate", 1, 2, 3), ("b", "rotate", 1, 2, 3)]


def test_is_running_queries_all_motors(log):
    bunch = make_bunch(log, a={"running": True})
    assert bunch.is_running() is True
    assert log == [("a", "is_running"), ("b", "is_running")]


def test_is_running_false_when_none_run(log):
    assert make_bunch(log).is_running() is False


def test_is_holding_any(log):
    assert make_bunch(log, b={"holding": True}).is_holding() is True
    assert make_bunch([]).is_holding() is False


def test_error_stops_remaining_motors(log):
    bunch = make_bunch(log, a={"fail": "brake"})
    with pytest.raises(RuntimeError):
        bunch.brake()
    assert log == []


def test_run_direct_controller_adjusts_all(log):
    bunch = make_bunch(log)
    controller = bunch.run_direct(SignedPercentage(10))
    controller.set_duty_cycle(SignedPercentage(-10))
    assert log == [
        ("a", "run_direct", SignedPercentage(10)),
        ("b", "run_direct", SignedPercentage(10)),
        ("a", "set", SignedPercentage(-10)),
        ("b", "set", SignedPercentage(-10)),
    ]


def test_empty_bunch_is_not_running():
    bunch = MotorsBunch()
    assert len(bunch) == 0
    assert bunch.is_running() is False