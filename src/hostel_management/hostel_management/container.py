from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .auth.email_sender import EmailSender
from .auth.service import AuthService
from .auth.store_auth_repository import StoreOTPRepository, StorePendingStudentRepository
from .branches.service import BranchService
from .branches.store_branch_repository import StoreBranchRepository
from .core.constants import OTP_EXPIRY_MINUTES, OTP_MAX_ATTEMPTS
from .database.store import KeyValueStore
from .emergency.service import EmergencyContactService
from .emergency.store_emergency_repository import StoreEmergencyContactRepository
from .fees.service import FeeService, PaymentService
from .fees.store_fee_repository import StoreFeeConfigRepository, StorePaymentRepository
from .food.service import FoodService
from .food.store_food_repository import StoreFoodOrderRepository, StoreMenuRepository
from .late_pass.service import LatePassService
from .late_pass.store_late_pass_repository import StoreLatePassRepository
from .maintenance.service import MaintenanceService
from .maintenance.store_maintenance_repository import StoreMaintenanceRepository
from .rooms.service import RoomService
from .rooms.store_room_repository import StoreRoomRepository
from .statistics.service import StatisticsService
from .students.cleanup_service import StudentCleanupService
from .students.room_assignment import RoomAssignment
from .students.service import StudentService
from .students.store_student_repository import StoreStudentRepository


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    students_repo: StoreStudentRepository
    branches_repo: StoreBranchRepository
    rooms_repo: StoreRoomRepository
    pending_repo: StorePendingStudentRepository
    otp_repo: StoreOTPRepository
    maintenance_repo: StoreMaintenanceRepository
    menu_repo: StoreMenuRepository
    orders_repo: StoreFoodOrderRepository
    contacts_repo: StoreEmergencyContactRepository
    fee_config_repo: StoreFeeConfigRepository
    payments_repo: StorePaymentRepository
    attendance_repo: StoreAttendanceRepository
    late_pass_repo: StoreLatePassRepository

    auth_service: AuthService
    branch_service: BranchService
    room_service: RoomService
    student_service: StudentService
    cleanup_service: StudentCleanupService
    fee_service: FeeService
    payment_service: PaymentService
    maintenance_service: MaintenanceService
    food_service: FoodService
    emergency_service: EmergencyContactService
    late_pass_service: LatePassService
    attendance_service: AttendanceService
    statistics_service: StatisticsService


def build_container(
    *,
    store: KeyValueStore,
    email_sender: EmailSender,
    admin_password: str,
    otp_expiry_minutes: int = OTP_EXPIRY_MINUTES,
    otp_max_attempts: int = OTP_MAX_ATTEMPTS,
) -> Container:
    students_repo = StoreStudentRepository(store)
    branches_repo = StoreBranchRepository(store)
    rooms_repo = StoreRoomRepository(store)
    pending_repo = StorePendingStudentRepository(store)
    otp_repo = StoreOTPRepository(store)
    maintenance_repo = StoreMaintenanceRepository(store)
    menu_repo = StoreMenuRepository(store)
    orders_repo = StoreFoodOrderRepository(store)
    contacts_repo = StoreEmergencyContactRepository(store)
    fee_config_repo = StoreFeeConfigRepository(store)
    payments_repo = StorePaymentRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    late_pass_repo = StoreLatePassRepository(store)

    assignment = RoomAssignment(rooms_repo, branches_repo)

    auth_service = AuthService(
        students_repo,
        pending_repo,
        otp_repo,
        email_sender,
        admin_password=admin_password,
        otp_expiry_minutes=otp_expiry_minutes,
        otp_max_attempts=otp_max_attempts,
    )
    cleanup_service = StudentCleanupService(
        students_repo,
        pending_repo,
        otp_repo,
        maintenance_repo,
        orders_repo,
        payments_repo,
        attendance_repo,
        late_pass_repo,
        assignment,
    )
    statistics_service = StatisticsService(
        students=students_repo,
        rooms=rooms_repo,
        branches=branches_repo,
        maintenance=maintenance_repo,
        food_orders=orders_repo,
        menu=menu_repo,
        attendance=attendance_repo,
    )

    return Container(
        store=store,
        students_repo=students_repo,
        branches_repo=branches_repo,
        rooms_repo=rooms_repo,
        pending_repo=pending_repo,
        otp_repo=otp_repo,
        maintenance_repo=maintenance_repo,
        menu_repo=menu_repo,
        orders_repo=orders_repo,
        contacts_repo=contacts_repo,
        fee_config_repo=fee_config_repo,
        payments_repo=payments_repo,
        attendance_repo=attendance_repo,
        late_pass_repo=late_pass_repo,
        auth_service=auth_service,
        branch_service=BranchService(branches_repo, students_repo),
        room_service=RoomService(rooms_repo),
        student_service=StudentService(students_repo, assignment),
        cleanup_service=cleanup_service,
        fee_service=FeeService(fee_config_repo),
        payment_service=PaymentService(payments_repo, students_repo),
        maintenance_service=MaintenanceService(maintenance_repo, students_repo),
        food_service=FoodService(menu_repo, orders_repo, students_repo),
        emergency_service=EmergencyContactService(contacts_repo),
        late_pass_service=LatePassService(late_pass_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        statistics_service=statistics_service,
    )
