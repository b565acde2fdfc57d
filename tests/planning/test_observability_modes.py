import pytest
import os
import glob

from local_planner.config import PlannerConfig
from local_planner.types import Circle
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.vehicles.config import AckermannConfig
from local_planner.visualization.observers import EfficientObserver, ExperimentObserver, DebugObserver
from local_planner.planning.planners.tree_search import TreeSearchPlanner


@pytest.fixture
def planner_setup():
    vehicle = AckermannVehicle(AckermannConfig(wheelbase=2.5, collision_radius=0.3))
    planner = TreeSearchPlanner(vehicle, PlannerConfig(max_depth=1))
    start = vehicle.make_state(0.0, 0.0, 0.0, velocity=5.0)
    obstacles = [Circle(8.0, 0.5, 1.0)]
    return planner, start, obstacles


def test_efficient_mode(planner_setup):
    planner, start, obstacles = planner_setup
    observer = EfficientObserver()

    command, _ = planner.plan_from_state(start, obstacles, observer)

    # EfficientObserver 不记录任何东西
    assert not hasattr(observer, 'positions')
    assert not hasattr(observer, 'branches')


def test_efficient_mode_prints_errors_only(capsys):
    observer = EfficientObserver()
    observer.log("quiet")
    observer.log("loud", level='ERROR')
    out = capsys.readouterr().out
    assert "quiet" not in out
    assert "[ERROR] loud" in out


def test_experiment_mode(planner_setup):
    planner, start, obstacles = planner_setup
    observer = ExperimentObserver()

    planner.plan_from_state(start, obstacles, observer)

    assert len(observer.positions) == planner.last_node_count
    assert observer.positions[0] == (start.x, start.y)
    assert len(observer.branches) == planner.last_node_count
    assert {depth for depth, _, _ in observer.branches} == {0, 1}
    assert observer.obstacles == tuple(obstacles)


def test_debug_mode(planner_setup, tmp_path):
    planner, start, obstacles = planner_setup
    log_dir = str(tmp_path / "planning_debug")

    observer = DebugObserver(log_dir=log_dir)
    planner.plan_from_state(start, obstacles, observer)
    observer.close()

    # 1. 与 Experiment 模式兼容
    assert len(observer.positions) > 0
    assert len(observer.branches) == planner.last_node_count

    # 2. 检查日志文件
    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
    assert "Start planning" in content
    assert "Planning finished" in content
    assert "Depth 0" in content


def test_debug_mode_config_selects_debug_observer(tmp_path):
    vehicle = AckermannVehicle(AckermannConfig(wheelbase=2.5, collision_radius=0.3))
    log_dir = str(tmp_path / "from_config")
    planner = TreeSearchPlanner(vehicle, PlannerConfig(max_depth=0, debug_mode=True, debug_log_dir=log_dir))
    assert isinstance(planner.default_observer, DebugObserver)

    # 不传 observer 时写入配置指定的日志目录
    start = vehicle.make_state(0.0, 0.0, 0.0, velocity=5.0)
    planner.plan_from_state(start, [Circle(8.0, 0.5, 1.0)])
    planner.default_observer.close()

    log_files = glob.glob(os.path.join(log_dir, "*.log"))
    assert len(log_files) == 1
    with open(log_files[0], 'r', encoding='utf-8') as f:
        assert "Depth 0" in f.read()


def test_default_observer_is_efficient(planner_setup):
    planner, _, _ = planner_setup
    assert isinstance(planner.default_observer, EfficientObserver)
