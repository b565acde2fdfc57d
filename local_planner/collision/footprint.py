# local_planner/collision/footprint.py
from typing import List

from local_planner.types import State, Circle


def get_car_circles(state: State, radius: float) -> List[Circle]:
    """
    固定三圆覆盖: [前参考点, 后轴中心, 中点]，三个圆共用同一半径。

    这是一个不随状态自适应的安全包络，只是车身的近似，不是精确外形。
    顺序固定，起止两个状态的圆按下标一一对应。
    """
    mid_x = 0.5 * (state.front_x + state.x)
    mid_y = 0.5 * (state.front_y + state.y)
    return [
        Circle(state.front_x, state.front_y, radius),
        Circle(state.x, state.y, radius),
        Circle(mid_x, mid_y, radius),
    ]
