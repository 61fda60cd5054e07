"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.event_catalog.app.command import (
    cancel_event_use_case,
    category_command_use_case,
    complete_event_use_case,
    create_event_use_case,
    create_section_use_case,
    delete_event_use_case,
    delete_section_use_case,
    update_event_capacity_use_case,
    update_event_use_case,
    update_section_use_case,
)
from src.service.event_catalog.app.query import (
    category_query_use_case,
    get_event_use_case,
    get_section_use_case,
    list_events_use_case,
    list_sections_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    category_command_use_case,
    category_query_use_case,
    create_event_use_case,
    update_event_use_case,
    cancel_event_use_case,
    complete_event_use_case,
    update_event_capacity_use_case,
    delete_event_use_case,
    get_event_use_case,
    list_events_use_case,
    create_section_use_case,
    update_section_use_case,
    delete_section_use_case,
    get_section_use_case,
    list_sections_use_case,
]
