"""Appointment and schedule messages."""
from dataclasses import dataclass
from typing import List

from core.session import Role
from services.use_cases import AppointmentView, ReservationView, ScheduleView


@dataclass(frozen=True)
class AppointmentMessages:
    """Messages for reservations, cancellations and schedules."""

    CANCELED = "Canceled successfully!"
    NO_APPOINTMENTS = "You have no appointment! Having a good day!"
    NO_CAREGIVER = "No available caregiver!"

    @staticmethod
    def reservation(view: ReservationView) -> List[str]:
        return [
            f"Appointment ID: {view.appointment_id}",
            f"Caregiver username: {view.caregiver}",
        ]

    @staticmethod
    def appointment(view: AppointmentView, role: Role) -> List[str]:
        counterpart = "Patient" if role is Role.CAREGIVER else "Caregiver"
        return [
            f"Appointment ID: {view.appointment_id}",
            f"Vaccine: {view.vaccine_name}",
            f"Date: {view.date.isoformat()}",
            f"{counterpart}: {view.counterpart}",
        ]

    @staticmethod
    def appointments(views: List[AppointmentView], role: Role) -> List[str]:
        if not views:
            return [AppointmentMessages.NO_APPOINTMENTS]
        lines = []
        for view in views:
            lines.extend(AppointmentMessages.appointment(view, role))
        return lines

    @staticmethod
    def schedule(view: ScheduleView) -> List[str]:
        """Caregivers open on the date, then every vaccine; vaccines only if someone is open."""
        if not view.has_caregivers:
            return [AppointmentMessages.NO_CAREGIVER]
        lines = ["Available Caregivers: " + " ".join(view.caregivers)]
        lines.extend(
            f"Vaccines: {name} Available Doses: {doses}"
            for name, doses in view.vaccines
        )
        return lines
