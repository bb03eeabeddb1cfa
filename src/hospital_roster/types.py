from datetime import date, time
from decimal import Decimal
from typing import Literal, TypedDict

Role = Literal["admin", "doctor", "patient"]


class Slot(TypedDict):
    id: str
    date: date
    start_time: time
    end_time: time
    fee: Decimal
    hospital: str


class Booking(TypedDict):
    slot_id: str
    doctor_id: int
    hospital: str
    date: date
    time: time
    amount: Decimal


class AdminUser(TypedDict):
    id: int
    role: Literal["admin"]
    name: str
    gender: str
    dob: date | None
    unique_id: str
    hospital: str
    location: str
    departments: list[str]


class DoctorUser(TypedDict):
    id: int
    role: Literal["doctor"]
    name: str
    gender: str
    dob: date | None
    unique_id: str
    qualifications: str
    specializations: list[str]
    experience: str
    hospital: str
    slots: list[Slot]


class PatientUser(TypedDict):
    id: int
    role: Literal["patient"]
    name: str
    gender: str
    dob: date | None
    unique_id: str
    bookings: list[Booking]


User = AdminUser | DoctorUser | PatientUser


class Hospital(TypedDict):
    name: str
    location: str
    departments: list[str]
    doctors: list[DoctorUser]


class SlotRequest(TypedDict):
    date: date
    start_time: time
    end_time: time
    fee: Decimal


class AdminRegistration(TypedDict):
    role: Literal["admin"]
    name: str
    gender: str
    dob: date | None
    unique_id: str
    hospital: str
    location: str
    departments: list[str]


class DoctorRegistration(TypedDict):
    role: Literal["doctor"]
    name: str
    gender: str
    dob: date | None
    unique_id: str
    qualifications: str
    specializations: list[str]
    experience: str
    hospital: str
    slot: SlotRequest


class PatientRegistration(TypedDict):
    role: Literal["patient"]
    name: str
    gender: str
    dob: date | None
    unique_id: str


Registration = AdminRegistration | DoctorRegistration | PatientRegistration


class AdminView(TypedDict):
    role: Literal["admin"]
    user_id: int
    hospital: str
    total_consultations: int
    total_revenue: Decimal
    revenue_by_doctor: dict[str, Decimal]
    revenue_by_department: dict[str, Decimal]


class DoctorView(TypedDict):
    role: Literal["doctor"]
    user_id: int
    name: str
    total_consultations: int
    total_earnings: Decimal
    earnings_by_hospital: dict[str, Decimal]


class PatientView(TypedDict):
    role: Literal["patient"]
    user_id: int
    name: str
    bookings: list[Booking]


DashboardView = AdminView | DoctorView | PatientView
