"""Schedule service native package exports."""

from services.planning.schedule.config import ScheduleServiceSettings
from services.planning.schedule.domain import ScheduleDetail, ScheduleRecord
from services.planning.schedule.implementation import DefaultScheduleService
from services.planning.schedule.service import ScheduleService, build_schedule_service

__all__ = [
    "DefaultScheduleService",
    "ScheduleDetail",
    "ScheduleRecord",
    "ScheduleService",
    "ScheduleServiceSettings",
    "build_schedule_service",
]
