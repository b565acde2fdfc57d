import os
import sys

import matplotlib.pyplot as plt

# --- 路径设置 ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from local_planner.config import load_config_file
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.simulation.benchmark import run_depth_sweep, summarize_by_depth
from experiments.scenario_config import ScenarioConfig as cfg

DEPTHS = [0, 1, 2, 3]


def plot_comparisons(summary):
    """按搜索深度对比: 成功率 / 平均延迟 / 最大延迟 / 节点数"""
    fig, axes = plt.subplots(1, 4, figsize=(24, 5))

    metrics = [
        ('SuccessRate', 'Success Rate (%)', 'Reliability'),
        ('LatencyMean', 'Mean Latency (ms)', 'Time Complexity'),
        ('LatencyMax', 'Max Latency (ms)', 'Worst Case'),
        ('NodesMean', 'Simulated Nodes / Cycle', 'Search Size'),
    ]

    for ax, (metric, ylabel, title) in zip(axes, metrics):
        ax.plot(summary['MaxDepth'], summary[metric], 'o-', color='blue')
        ax.set_xlabel('max_depth')
        ax.set_ylabel(ylabel)
        ax.set_title(title)
        ax.grid(True, linestyle=':', alpha=0.6)

    plt.tight_layout()
    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    outfile = os.path.join(cfg.LOG_DIR, "benchmark_depth.png")
    plt.savefig(outfile)
    plt.close(fig)
    print(f"Plot saved to: {outfile}")


if __name__ == "__main__":
    print("=== max_depth 对比实验 ===")
    planner_config, vehicle_config = load_config_file(cfg.CONFIG_FILE)
    vehicle = AckermannVehicle(vehicle_config)
    start = vehicle.make_state(cfg.START_X, cfg.START_Y, cfg.START_THETA, velocity=cfg.START_VELOCITY)

    df = run_depth_sweep(vehicle, planner_config, start, cfg.SCENARIOS, DEPTHS,
                         max_steps=cfg.MAX_STEPS, sensing_radius=cfg.SENSING_RADIUS)
    summary = summarize_by_depth(df)
    print(summary.to_string(index=False))

    os.makedirs(cfg.LOG_DIR, exist_ok=True)
    df.to_csv(os.path.join(cfg.LOG_DIR, "benchmark_depth.csv"), index=False)
    plot_comparisons(summary)
