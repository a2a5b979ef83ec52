"""Component identity for the Schedule service."""

from __future__ import annotations

SERVICE_COMPONENT_ID = "service_schedule"
