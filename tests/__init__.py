"""
Tests for the smart sweepers simulation.

This package contains tests for:
- Configuration validation
- Neural network topology, weight layout and forward pass
- Genetic algorithm operators and epochs
- Sweeper sensing, motion and mine collection
- The controller's tick/epoch cycle and frame snapshots
- End-of-run charts and the command-line entry point
"""
