"""REINFORCE policy-gradient agent for a small grid-world environment."""

__version__ = "0.1.0"
__all__ = ["grid_world", "policy_network", "reinforce", "cli"]