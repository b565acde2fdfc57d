import time
from typing import List, Optional, Sequence

from local_planner.types import State, Command, Circle
from local_planner.planning.planners.tree_search import TreeSearchPlanner
from local_planner.planning.interfaces import IPlannerObserver
from local_planner.simulation.sensor import Sensor
from local_planner.simulation.state_source import SimulatedStateSource


class Navigator:
    """
    Closed control loop around the local planner.

    Each cycle: sense -> plan -> actuate. The planner reads the vehicle state
    from the same state source that the navigator moves, so it sees exactly
    what an estimator would report.
    """
    def __init__(self,
                 planner: TreeSearchPlanner,
                 state_source: SimulatedStateSource,
                 sensor: Sensor,
                 obstacles: Sequence[Circle],
                 observer: Optional[IPlannerObserver] = None):

        self.planner = planner
        self.state_source = state_source
        self.sensor = sensor
        self.obstacles = list(obstacles)  # Ground truth
        self.observer = observer

        if planner.state_source is None:
            planner.state_source = state_source

        self.navigated_path: List[State] = [state_source.get_state()]
        self.commands: List[Command] = []
        self.latencies_ms: List[float] = []
        self.node_counts: List[int] = []
        self.clearances: List[float] = []

        # Statistics
        self.step_count = 0
        self.collided = False

    @property
    def current_state(self) -> State:
        return self.state_source.get_state()

    def navigate(self, max_steps: int = 100) -> bool:
        """
        Main execution loop.
        :return: True if every cycle finished without collision
        """
        dt = self.planner.config.time_step
        motion_model = self.planner.motion_model

        for i in range(max_steps):
            state = self.current_state
            if i % 10 == 0:
                print(f"Step {i}/{max_steps} | Pos: ({state.x:.1f}, {state.y:.1f}) | "
                      f"Steer: {state.steer_rad:.3f} rad")
            self.step_count += 1

            # 1. Sense
            visible = self.sensor.scan(self.obstacles, state)

            # 2. Plan
            t0 = time.perf_counter()
            command = self.planner.find_path(visible, self.observer)
            self.latencies_ms.append((time.perf_counter() - t0) * 1000)
            self.node_counts.append(self.planner.last_node_count)
            self.commands.append(command)

            # 3. Act
            new_state = self.state_source.apply(command, dt)
            self.navigated_path.append(new_state)

            # Ground truth check over the whole executed sweep, not just the end pose
            _, clearance = motion_model.simulate(state, command, dt, self.obstacles, default=float("inf"))
            self.clearances.append(clearance)
            if clearance <= 0:
                print(f"Collision at step {i}! Clearance: {clearance:.3f} m")
                self.collided = True
                return False

        print(f"Finished {self.step_count} steps | Max latency: {self.max_latency_ms:.2f} ms")
        return True

    @property
    def max_latency_ms(self) -> float:
        return max(self.latencies_ms) if self.latencies_ms else 0.0

    @property
    def min_clearance(self) -> float:
        return min(self.clearances) if self.clearances else float("inf")
