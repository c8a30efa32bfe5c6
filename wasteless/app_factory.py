"""
This module provides a factory for creating and configuring the application's core components.
"""
from datetime import date
from typing import Optional

from schedule_engine.facade import WasteScheduleFacade
from schedule_engine.seed_data import build_seed_schedules
from schedule_engine.services.address_service import AddressService
from schedule_engine.services.reminder_service import ReminderService
from schedule_engine.services.schedule_repository import \
    InMemoryScheduleRepository
from schedule_engine.services.schedule_service import ScheduleService

from .logging_config import setup_logging


def initialize_app() -> None:
    """
    Initializes the application by setting up logging.
    """
    setup_logging()


def create_repository(today: Optional[date] = None) -> InMemoryScheduleRepository:
    """
    Creates the schedule directory, seeded relative to today.
    """
    return InMemoryScheduleRepository(build_seed_schedules(today or date.today()))


def create_facade(
    repository: Optional[InMemoryScheduleRepository] = None,
) -> WasteScheduleFacade:
    """
    Initializes and returns the WasteScheduleFacade with all its dependencies.
    """
    repository = repository or create_repository()
    schedule_service = ScheduleService(repository)
    reminder_service = ReminderService()
    address_service = AddressService(repository)

    facade = WasteScheduleFacade(
        schedule_service=schedule_service,
        reminder_service=reminder_service,
        address_service=address_service,
    )
    return facade
