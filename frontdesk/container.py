from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .common.rfid_guard import RfidGuard
from .contacts.service import StaffContactService
from .contacts.sql_staff_contact_repository import SqlStaffContactRepository
from .destinations.repository import DestinationRepository
from .destinations.service import DestinationService
from .employees.service import EmployeeService
from .employees.sql_employee_repository import SqlAttendanceLogRepository, SqlEmployeeRepository
from .kiosk.service import KioskService
from .notifications.service import ApprovalService, NotificationService
from .notifications.sms import LoggingSmsGateway, SmsGateway
from .passes.service import GuestPassService
from .passes.sql_guest_pass_repository import SqlGuestPassRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .schedules.service import ScheduledVisitService
from .schedules.sql_scheduled_visit_repository import SqlScheduledVisitRepository
from .settings.repository import SettingRepository
from .settings.service import SettingService
from .uploads.image_store import ImageStore
from .users.service import AuthService, UserService
from .users.sql_user_repository import SqlUserRepository
from .visitors.service import VisitorService
from .visitors.sql_visitor_repository import SqlVisitorRepository


@dataclass(frozen=True)
class Container:
    destinations_repo: DestinationRepository
    contacts_repo: SqlStaffContactRepository
    visitors_repo: SqlVisitorRepository
    employees_repo: SqlEmployeeRepository
    attendance_repo: SqlAttendanceLogRepository
    passes_repo: SqlGuestPassRepository
    schedules_repo: SqlScheduledVisitRepository
    settings_repo: SettingRepository
    users_repo: SqlUserRepository

    image_store: ImageStore
    sms_gateway: SmsGateway

    destination_service: DestinationService
    staff_contact_service: StaffContactService
    guest_pass_service: GuestPassService
    visitor_service: VisitorService
    employee_service: EmployeeService
    kiosk_service: KioskService
    notification_service: NotificationService
    approval_service: ApprovalService
    scheduled_visit_service: ScheduledVisitService
    setting_service: SettingService
    report_service: ReportService
    auth_service: AuthService
    user_service: UserService


def build_container(config: Mapping) -> Container:
    destinations_repo = DestinationRepository()
    contacts_repo = SqlStaffContactRepository()
    visitors_repo = SqlVisitorRepository()
    employees_repo = SqlEmployeeRepository()
    attendance_repo = SqlAttendanceLogRepository()
    passes_repo = SqlGuestPassRepository()
    schedules_repo = SqlScheduledVisitRepository()
    settings_repo = SettingRepository()
    users_repo = SqlUserRepository()

    image_store = ImageStore(str(config["UPLOAD_FOLDER"]))
    sms_gateway = LoggingSmsGateway()
    rfid_guard = RfidGuard(visitors_repo, employees_repo)

    visitor_service = VisitorService(visitors_repo, destinations_repo, passes_repo, rfid_guard, image_store)
    employee_service = EmployeeService(employees_repo, attendance_repo, rfid_guard, image_store)

    return Container(
        destinations_repo=destinations_repo,
        contacts_repo=contacts_repo,
        visitors_repo=visitors_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        passes_repo=passes_repo,
        schedules_repo=schedules_repo,
        settings_repo=settings_repo,
        users_repo=users_repo,
        image_store=image_store,
        sms_gateway=sms_gateway,
        destination_service=DestinationService(destinations_repo),
        staff_contact_service=StaffContactService(contacts_repo),
        guest_pass_service=GuestPassService(passes_repo),
        visitor_service=visitor_service,
        employee_service=employee_service,
        kiosk_service=KioskService(employee_service, visitor_service),
        notification_service=NotificationService(
            contacts_repo,
            visitors_repo,
            sms_gateway,
            public_base_url=str(config["PUBLIC_BASE_URL"]),
        ),
        approval_service=ApprovalService(visitors_repo),
        scheduled_visit_service=ScheduledVisitService(schedules_repo, destinations_repo),
        setting_service=SettingService(settings_repo),
        report_service=ReportService(ReportRepository()),
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
    )
