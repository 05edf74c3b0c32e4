"""
Use Cases package for business logic encapsulation.

This package contains use case classes that encapsulate business logic
and orchestrate interactions between repositories and services.
"""

from services.use_cases.accounts import (
    RegisterAccountUseCase,
    LoginUseCase,
)
from services.use_cases.appointments import (
    ReservationView,
    AppointmentView,
    ReserveAppointmentUseCase,
    CancelAppointmentUseCase,
    ListAppointmentsUseCase,
)
from services.use_cases.availability import (
    ScheduleView,
    PublishAvailabilityUseCase,
    SearchScheduleUseCase,
)
from services.use_cases.vaccines import AddDosesUseCase

__all__ = [
    'RegisterAccountUseCase',
    'LoginUseCase',
    'ReservationView',
    'AppointmentView',
    'ReserveAppointmentUseCase',
    'CancelAppointmentUseCase',
    'ListAppointmentsUseCase',
    'ScheduleView',
    'PublishAvailabilityUseCase',
    'SearchScheduleUseCase',
    'AddDosesUseCase',
]
