import math
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from local_planner.config import PlannerConfig
from local_planner.types import State, Command, Circle
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.collision.checker import CollisionChecker
from local_planner.planning.candidates import SteeringCandidateGenerator
from local_planner.planning.motion_model import MotionModel
from local_planner.planning.interfaces import IPlannerObserver, IStateSource
from local_planner.planning.planners.base import PlannerBase
from local_planner.visualization.observers import EfficientObserver, DebugObserver


class TreeSearchPlanner(PlannerBase):
    """
    Short-horizon obstacle avoidance by exhaustive, depth-bounded tree search.

    Every node expands the steering candidates around the current steering angle,
    simulates one time step for each and scores the branch by its swept clearance.
    Clearances add up along a path; a colliding branch is cut off and scored
    `clearance - collision_penalty`, which keeps colliding branches ordered by
    penetration depth but below any collision-free one.

    The planner holds no state between calls apart from the latest obstacle
    snapshot. It is not reentrant.
    """

    def __init__(self,
                 vehicle_model: AckermannVehicle,
                 config: Optional[PlannerConfig] = None,
                 state_source: Optional[IStateSource] = None,
                 collision_checker: Optional[CollisionChecker] = None,
                 candidate_generator: Optional[SteeringCandidateGenerator] = None):

        self.vehicle = vehicle_model
        self.config = config if config is not None else PlannerConfig()
        self.state_source = state_source
        self.collision_checker = collision_checker if collision_checker is not None else CollisionChecker()

        if candidate_generator is None:
            candidate_generator = SteeringCandidateGenerator(
                step_deg=self.config.steer_step_deg,
                max_steer_deg=self.config.max_candidate_steer_deg,
            )
        self.candidate_generator = candidate_generator

        self.motion_model = MotionModel(self.vehicle, self.collision_checker, self.config.collision_penalty)

        # Used when the caller passes no observer
        if self.config.debug_mode:
            self.default_observer: IPlannerObserver = DebugObserver(log_dir=self.config.debug_log_dir)
        else:
            self.default_observer = EfficientObserver()

        self.obstacles: Tuple[Circle, ...] = ()
        self.last_node_count = 0

    def find_path(self,
                  obstacles: Sequence[Circle],
                  observer: Optional[IPlannerObserver] = None) -> Command:
        if self.state_source is None:
            raise RuntimeError("TreeSearchPlanner needs a state_source to use find_path")

        command, _ = self.plan_from_state(self.state_source.get_state(), obstacles, observer)
        return command

    def plan_from_state(self,
                        state: State,
                        obstacles: Sequence[Circle],
                        observer: Optional[IPlannerObserver] = None) -> Tuple[Command, float]:
        """
        Run the search from an explicit state.
        :return: (best first-level command, value of the best branch)
        """
        if observer is None:
            observer = self.default_observer

        # Search from what the vehicle can actually execute, so every returned
        # command is within the physical steering and speed limits
        limits = self.vehicle.saturate(Command(state.velocity, state.steer_rad))
        state = replace(state, velocity=limits.velocity, steer_rad=limits.steer_rad)

        # Snapshot, the caller may mutate its list after we return
        self.obstacles = tuple(obstacles)
        self.last_node_count = 0
        observer.set_obstacles(self.obstacles)
        observer.log("Start planning", payload={
            "state": state,
            "obstacles": len(self.obstacles),
            "max_depth": self.config.max_depth,
        })

        value, command = self._search(state, 0, observer)

        observer.log("Planning finished", payload={
            "command": command,
            "value": value,
            "nodes": self.last_node_count,
        })
        return command, value

    def _search(self, state: State, depth: int, observer: IPlannerObserver) -> Tuple[float, Command]:
        candidates = self.candidate_generator.generate(state)
        if not candidates:
            raise ValueError(f"Candidate generator returned no commands for steer={state.steer_rad:.4f} rad")

        best_value = -math.inf
        best_command = candidates[0]

        for command in candidates:
            next_state, clearance = self.motion_model.simulate(
                state, command, self.config.time_step, self.obstacles, observer
            )
            self.last_node_count += 1

            if clearance <= 0:
                # Collision: cut the branch, keep ordering by penetration depth
                value = clearance - self.config.collision_penalty
            elif depth < self.config.max_depth:
                value = clearance + self._search(next_state, depth + 1, observer)[0]
            else:
                value = clearance

            observer.record_branch(depth, command, value)

            # Strict comparison keeps the first candidate on ties
            if value > best_value:
                best_value = value
                best_command = command

        return best_value, best_command
