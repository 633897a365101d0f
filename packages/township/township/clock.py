"""SimClock - simulation time counter."""


class SimClock:
    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("start must be >= 0")
        self._sim_time = start

    @property
    def sim_time(self) -> int:
        return self._sim_time

    def advance(self, steps: int = 1) -> int:
        if steps < 0:
            raise ValueError("steps must be >= 0")
        self._sim_time += steps
        return self._sim_time

    def reset(self, sim_time: int = 0) -> None:
        self._sim_time = sim_time
