from dataclasses import replace
from typing import Dict, Iterable, Sequence

import numpy as np
import pandas as pd

from local_planner.config import PlannerConfig
from local_planner.types import State, Circle
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.planning.planners.tree_search import TreeSearchPlanner
from local_planner.simulation.navigator import Navigator
from local_planner.simulation.sensor import Sensor
from local_planner.simulation.state_source import SimulatedStateSource


def run_depth_sweep(vehicle: AckermannVehicle,
                    base_config: PlannerConfig,
                    start: State,
                    scenarios: Dict[str, Sequence[Circle]],
                    depths: Iterable[int],
                    max_steps: int = 40,
                    sensing_radius: float = 20.0) -> pd.DataFrame:
    """
    Closed-loop runs for every (scenario, max_depth) pair.
    The search cost grows as branching^(max_depth+1), so this is the table
    used to pick a depth that fits the control period.

    :return: one row per run with success, latency and clearance statistics
    """
    results = []
    for depth in depths:
        config = replace(base_config, max_depth=depth)
        for name, obstacles in scenarios.items():
            state_source = SimulatedStateSource(vehicle, start)
            planner = TreeSearchPlanner(vehicle, config, state_source=state_source)
            navigator = Navigator(planner, state_source, Sensor(sensing_radius), obstacles)

            success = navigator.navigate(max_steps=max_steps)

            results.append({
                'Scenario': name,
                'MaxDepth': depth,
                'Success': success,
                'Steps': navigator.step_count,
                'LatencyMean': float(np.mean(navigator.latencies_ms)) if navigator.latencies_ms else 0.0,
                'LatencyMax': navigator.max_latency_ms,
                'NodesMean': float(np.mean(navigator.node_counts)) if navigator.node_counts else 0.0,
                'MinClearance': navigator.min_clearance,
            })

    return pd.DataFrame(results)


def summarize_by_depth(df: pd.DataFrame) -> pd.DataFrame:
    """Aggregate a sweep over scenarios: success rate [%] and latency per depth."""
    summary = df.groupby('MaxDepth').agg(
        SuccessRate=('Success', 'mean'),
        LatencyMean=('LatencyMean', 'mean'),
        LatencyMax=('LatencyMax', 'max'),
        NodesMean=('NodesMean', 'mean'),
    ).reset_index()
    summary['SuccessRate'] = summary['SuccessRate'] * 100
    return summary
