"""Lazy graph exploration: DFS, parallel DFS and delta-stepping search over implicit nodes, with sample Fibonacci, frog-jump and knapsack graphs."""

__version__ = "0.1.0"