"""
CLI Simulator for the Monty Hall problem

This module provides a command-line interface for running repeated
Monty Hall rounds and comparing the stay and switch strategies.
"""

__version__ = "0.1.0"
