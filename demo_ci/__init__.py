"""demo-ci — CI pipeline generator for Godot demo-project repositories."""

__version__ = "0.1.0"
