"""Component identity for the Task service."""

from __future__ import annotations

SERVICE_COMPONENT_ID = "service_task"
