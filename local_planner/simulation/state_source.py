from dataclasses import replace

from local_planner.types import State, Command
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.planning.interfaces import IStateSource


class SimulatedStateSource(IStateSource):
    """
    In-memory stand-in for the state estimator.
    Holds the ground-truth vehicle state and moves it when a command is actuated.
    """
    def __init__(self, vehicle: AckermannVehicle, initial_state: State):
        self.vehicle = vehicle
        self.state = vehicle.settle(initial_state)

    def get_state(self) -> State:
        # Snapshot, callers must not be able to move the vehicle
        return replace(self.state)

    def apply(self, command: Command, dt: float) -> State:
        """Actuate one command for dt seconds."""
        self.state = self.vehicle.kinematic_propagate(self.state, command, dt)
        return self.get_state()
