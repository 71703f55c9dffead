"""Domain layer — timestamps, intervals, formatting, and tasks.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
Clock inputs (``today``/``now``) are injectable everywhere.
"""
