# local_planner/planning/__init__.py
# 子模块按需导入: candidates, motion_model, interfaces, planners
