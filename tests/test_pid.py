from mcuframe.pid import PID, Direction, Mode, ProportionalOn


class _Clock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def _auto_pid(kp, ki=0.0, kd=0.0, **kwargs):
    clock = _Clock()
    pid = PID(kp, ki, kd, clock=clock, **kwargs)
    return pid, clock


def test_manual_mode_does_not_compute():
    pid, _ = _auto_pid(1.0)
    pid.setpoint = 10.0
    assert pid.compute() is False
    assert pid.output == 0.0
    assert pid.mode == Mode.MANUAL


def test_proportional_output():
    pid, _ = _auto_pid(1.0)
    pid.setpoint = 7.0
    pid.set_mode(Mode.AUTOMATIC)
    assert pid.compute() is True
    assert pid.output == 7.0
    assert pid.mode == Mode.AUTOMATIC


def test_output_saturates_at_default_limit():
    pid, _ = _auto_pid(100.0)
    pid.setpoint = 10.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 255


def test_reverse_direction_clamps_to_minimum():
    pid, _ = _auto_pid(1.0, direction=Direction.REVERSE)
    pid.setpoint = 10.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 0.0
    assert pid.direction == Direction.REVERSE


def test_direction_change_in_auto_negates_gains():
    pid, clock = _auto_pid(1.0)
    pid.setpoint = 10.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 10.0
    pid.set_controller_direction(Direction.REVERSE)
    clock.now += 100
    pid.compute()
    assert pid.output == 0.0


def test_sample_time_gates_compute():
    pid, clock = _auto_pid(1.0)
    pid.set_mode(Mode.AUTOMATIC)
    assert pid.compute() is True
    clock.now += 50
    assert pid.compute() is False
    clock.now += 50
    assert pid.compute() is True


def test_longer_sample_time():
    pid, clock = _auto_pid(1.0)
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    pid.set_sample_time(200)
    clock.now += 100
    assert pid.compute() is False
    clock.now += 100
    assert pid.compute() is True


def test_integral_accumulates():
    pid, clock = _auto_pid(0.0, ki=1.0)
    pid.setpoint = 10.0
    pid.set_mode(Mode.AUTOMATIC)
    outputs = []
    for _ in range(4):
        pid.compute()
        outputs.append(pid.output)
        clock.now += 100
    assert outputs == sorted(outputs)
    assert outputs[0] < outputs[-1]


def test_bumpless_transfer_keeps_output():
    pid, _ = _auto_pid(0.0)
    pid.output = 30.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 30.0


def test_proportional_on_measurement_has_no_setpoint_kick():
    pid, _ = _auto_pid(5.0, p_on=ProportionalOn.MEASUREMENT)
    pid.output = 20.0
    pid.setpoint = 100.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 20.0


def test_set_output_limits_clamps_in_auto():
    pid, _ = _auto_pid(0.0)
    pid.output = 200.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.set_output_limits(0, 100)
    assert pid.output == 100


def test_invalid_output_limits_ignored():
    pid, _ = _auto_pid(100.0)
    pid.set_output_limits(10, 5)
    pid.setpoint = 10.0
    pid.set_mode(Mode.AUTOMATIC)
    pid.compute()
    assert pid.output == 255


def test_negative_tunings_ignored():
    pid, _ = _auto_pid(2.0, ki=0.5, kd=0.25)
    pid.set_tunings(-1.0, 1.0, 1.0)
    assert (pid.kp, pid.ki, pid.kd) == (2.0, 0.5, 0.25)


def test_display_gains_unchanged_by_sample_time():
    pid, _ = _auto_pid(2.0, ki=0.5, kd=0.25)
    pid.set_sample_time(500)
    assert (pid.kp, pid.ki, pid.kd) == (2.0, 0.5, 0.25)


def test_set_mode_manual_stops_compute():
    pid, _ = _auto_pid(1.0)
    pid.set_mode(Mode.AUTOMATIC)
    pid.set_mode(Mode.MANUAL)
    assert pid.compute() is False