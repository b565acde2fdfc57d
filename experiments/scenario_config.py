import os

from local_planner.types import Circle


class ScenarioConfig:
    # --- Experiment Settings ---
    MAX_STEPS = 40                  # Control cycles per run
    SENSING_RADIUS = 20.0           # meters

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "avoidance")
    CONFIG_FILE = os.path.join(_BASE_DIR, "planner_config.json")

    # --- Start State (rear axle) ---
    START_X = 0.0                   # meters
    START_Y = 0.0                   # meters
    START_THETA = 0.0               # rad
    START_VELOCITY = 5.0            # m/s

    # --- Obstacles ---
    SCENARIOS = {
        # A single obstacle right on the heading line
        "single": [
            Circle(15.0, 0.0, 1.0),
        ],
        # A gate that forces a slalom
        "slalom": [
            Circle(12.0, 1.0, 1.0),
            Circle(20.0, -3.0, 1.0),
            Circle(28.0, 2.0, 1.5),
        ],
        # Obstacles on both sides of a corridor
        "corridor": [
            Circle(10.0, 4.0, 1.5),
            Circle(10.0, -4.0, 1.5),
            Circle(18.0, 3.5, 1.5),
            Circle(18.0, -3.5, 1.5),
            Circle(26.0, 0.5, 1.0),
        ],
    }
