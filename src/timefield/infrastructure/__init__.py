"""Infrastructure layer — task file persistence and the scheduler state.

This layer depends on stdlib and third-party libs (ruamel.yaml).
The service layer bridges between domain values and infrastructure.
"""
