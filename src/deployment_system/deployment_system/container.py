from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .breaks.mysql_break_repository import MySQLBreakRepository
from .breaks.service import BreakSchedulingService
from .core.constants import DEFAULT_MAX_DEPLOYMENTS_PER_SHIFT, SALES_TOLERANCE
from .database.connection import DBConfig, DatabaseConnection
from .deployments.mysql_deployment_repository import MySQLDeploymentRepository
from .deployments.service import AutoAssignmentService
from .sales.mysql_sales_repository import MySQLSalesRepository
from .sales.service import SalesImportService
from .schedules.mysql_schedule_repository import MySQLScheduleRepository
from .schedules.service import ScheduleImportService
from .staff.mysql_staff_repository import MySQLStaffRepository


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    schedule_import_service: ScheduleImportService
    auto_assignment_service: AutoAssignmentService
    break_scheduling_service: BreakSchedulingService
    sales_import_service: SalesImportService


def build_container(
    *,
    db_config: dict,
    max_per_shift: int = DEFAULT_MAX_DEPLOYMENTS_PER_SHIFT,
    sales_tolerance: float = SALES_TOLERANCE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    staff_repo = MySQLStaffRepository(conn)
    schedules_repo = MySQLScheduleRepository(conn)
    deployments_repo = MySQLDeploymentRepository(conn)
    breaks_repo = MySQLBreakRepository(conn)
    sales_repo = MySQLSalesRepository(conn)

    return Container(
        conn=conn,
        schedule_import_service=ScheduleImportService(schedules_repo),
        auto_assignment_service=AutoAssignmentService(
            deployments_repo,
            schedules_repo,
            staff_repo,
            max_per_shift=max_per_shift,
        ),
        break_scheduling_service=BreakSchedulingService(breaks_repo, deployments_repo, staff_repo),
        sales_import_service=SalesImportService(sales_repo, tolerance=sales_tolerance),
    )
