"""Grid-world simulation of agents that forage, breed and mutate, drawn in the terminal."""

__version__ = "0.1.0"