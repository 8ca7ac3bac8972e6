"""
Terminal-facing services: scheduling, rendering and terminal setup.
"""
