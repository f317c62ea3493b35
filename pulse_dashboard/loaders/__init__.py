"""API loaders for the Pulse Analytics panels."""

from .learning import load_learning_data, start_learning, stop_learning
from .learning import trigger_learning_retraining, simulate_learning_cycle
from .tactical import load_tactical_analysis, load_recommendations
from .tactical import load_data_integration, load_performance_health, run_load_test
from .ml import load_retraining_data, trigger_manual_retraining
from .ml import load_navigation_status, start_navigation_training
from .marketing import load_ab_testing_summary, load_clickup_analytics
from .marketing import load_cross_platform_demo, analyze_content, run_benchmark
from .marketing import generate_universal_optimizations

__all__ = [
    "load_learning_data",
    "start_learning",
    "stop_learning",
    "trigger_learning_retraining",
    "simulate_learning_cycle",
    "load_tactical_analysis",
    "load_recommendations",
    "load_data_integration",
    "load_performance_health",
    "run_load_test",
    "load_retraining_data",
    "trigger_manual_retraining",
    "load_navigation_status",
    "start_navigation_training",
    "load_ab_testing_summary",
    "load_clickup_analytics",
    "load_cross_platform_demo",
    "analyze_content",
    "run_benchmark",
    "generate_universal_optimizations",
]
