import numpy as np
import pytest

from flightgraph.log_view import ArrayFlightLog

SYS_CONFIG = {
    "motorOutputHigh": 2000,
    "motorOutputLow": 1000,
    "gyroScale": 1e-6,
    "acc_1G": 4096,
    "rcRate": 90,
}

FIELD_NAMES = [
    "time",
    "axisP[0]", "axisP[1]", "axisP[2]",
    "axisI[0]", "axisI[1]", "axisI[2]",
    "axisD[0]", "axisD[1]",
    "rcCommand[0]", "rcCommand[1]", "rcCommand[2]", "rcCommand[3]",
    "gyroADC[0]", "gyroADC[1]", "gyroADC[2]",
    "accSmooth[0]", "accSmooth[1]", "accSmooth[2]",
    "motor[0]", "motor[1]", "motor[2]", "motor[3]",
    "vbatLatest",
]


@pytest.fixture
def sys_config():
    return dict(SYS_CONFIG)


@pytest.fixture
def flight_log(sys_config):
    rng = np.random.default_rng(0)
    frames = rng.uniform(-100.0, 100.0, size=(64, len(FIELD_NAMES)))
    # vbatLatest spans exactly [3000, 4200]
    col = FIELD_NAMES.index("vbatLatest")
    frames[:, col] = np.linspace(3000.0, 4200.0, 64)
    return ArrayFlightLog(FIELD_NAMES, frames, sys_config)


@pytest.fixture
def make_log(sys_config):
    def _make(names, frames=None, sys=None):
        return ArrayFlightLog(names, frames, sys_config if sys is None else sys)
    return _make
