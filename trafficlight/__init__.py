"""Simulated two-way traffic light controller: pins, buttons, timers, display and clock."""

__version__ = "0.1.0"