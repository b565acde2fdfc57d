import os
import sys
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from local_planner.config import load_config_file
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.planning.planners import TreeSearchPlanner
from local_planner.simulation import Navigator, Sensor, SimulatedStateSource
from local_planner.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver
from experiments.scenario_config import ScenarioConfig as cfg


def ensure_log_dir(log_dir):
    os.makedirs(log_dir, exist_ok=True)


def build_observer(mode):
    if mode == "efficient":
        return EfficientObserver()
    if mode == "experiment":
        return ExperimentObserver()
    if mode == "debug":
        observer = DebugObserver(log_dir=os.path.join(cfg.LOG_DIR, "planning_debug"))
        print(f"Debug Log initialized: {observer.log_file}")
        return observer
    raise ValueError(f"Unknown observer mode: {mode}")


def run_experiment(scenario="single", mode="experiment", config_file=cfg.CONFIG_FILE,
                   max_steps=cfg.MAX_STEPS, save_plot=True):
    print(f"=== Running Avoidance Experiment (Scenario={scenario}, Mode={mode}) ===")

    if scenario not in cfg.SCENARIOS:
        raise ValueError(f"Unknown scenario: {scenario}")

    # 1. Setup
    planner_config, vehicle_config = load_config_file(config_file)
    vehicle = AckermannVehicle(vehicle_config)
    start = vehicle.make_state(cfg.START_X, cfg.START_Y, cfg.START_THETA, velocity=cfg.START_VELOCITY)
    state_source = SimulatedStateSource(vehicle, start)

    planner = TreeSearchPlanner(vehicle, planner_config, state_source=state_source)
    if planner_config.debug_mode:
        # 配置文件打开 debug_mode 时覆盖命令行的 mode
        observer = planner.default_observer
        print(f"Debug Log initialized: {observer.log_file}")
    else:
        observer = build_observer(mode)

    navigator = Navigator(
        planner=planner,
        state_source=state_source,
        sensor=Sensor(sensing_radius=cfg.SENSING_RADIUS),
        obstacles=cfg.SCENARIOS[scenario],
        observer=observer,
    )

    # 2. Run
    success = navigator.navigate(max_steps=max_steps)
    print(f"Navigation Finished. Success: {success}, Steps: {navigator.step_count}")
    print(f"Min clearance: {navigator.min_clearance:.3f} m | Max latency: {navigator.max_latency_ms:.2f} ms")

    if isinstance(observer, DebugObserver):
        observer.close()

    # 3. Visualize
    if save_plot:
        save_viz(navigator, vehicle, observer, scenario, success)

    return success


def save_viz(navigator, vehicle, observer, scenario, success):
    # Imported here so headless runs without a plot do not need a display backend
    from local_planner.visualization.plotter import Visualizer

    ensure_log_dir(cfg.LOG_DIR)
    viz = Visualizer(title=f"Scenario: {scenario} | {'SUCCESS' if success else 'COLLISION'}")
    viz.draw_obstacles(navigator.obstacles)
    if hasattr(observer, 'positions'):
        viz.draw_markers(observer.positions)
    viz.draw_path(navigator.navigated_path)
    viz.draw_vehicle(vehicle, navigator.current_state)

    outfile = os.path.join(cfg.LOG_DIR, f"avoidance_{scenario}_{'succ' if success else 'fail'}.png")
    viz.save(outfile)
    print(f"Visualization saved to: {outfile}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the local obstacle avoidance planner in closed loop")
    parser.add_argument("--scenario", default="single", choices=sorted(cfg.SCENARIOS.keys()))
    parser.add_argument("--mode", default="experiment", choices=["efficient", "experiment", "debug"])
    parser.add_argument("--config", default=cfg.CONFIG_FILE, help="JSON planner configuration")
    parser.add_argument("--steps", type=int, default=cfg.MAX_STEPS)
    parser.add_argument("--no-plot", action="store_true", help="Skip saving the result image")
    args = parser.parse_args()

    ok = run_experiment(args.scenario, args.mode, args.config, args.steps, save_plot=not args.no_plot)
    sys.exit(0 if ok else 1)
