from .utils import as_vector, load_config, readonly, stack_trajectories

__all__ = ["as_vector", "load_config", "readonly", "stack_trajectories"]
