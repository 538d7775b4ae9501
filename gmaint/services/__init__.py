# SPDX-License-Identifier: MIT
"""Application services for the git-maint CLI.

Services coordinate the domain layer (core/) with the git and platform
helpers, and report progress through the console protocol.
"""

from gmaint.services.maintenance import (
    NO_REPOS_MESSAGE,
    MaintenanceError,
    MaintenanceReport,
    MaintenanceService,
)

__all__ = [
    "NO_REPOS_MESSAGE",
    "MaintenanceError",
    "MaintenanceReport",
    "MaintenanceService",
]
