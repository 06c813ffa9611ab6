"""
uow_coordinator.services

Service layer built on the coordinator.

Responsibilities:
- Express multi-repository operations as single units of work.
"""

# Package marker.
