import sys
import os

# --- Path Setup (确保未安装时也能导入 local_planner) ---
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
