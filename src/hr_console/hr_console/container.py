from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple, Type

from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.model import Employee
from .employees.service import ContractService
from .employees.tables import CONTRACTS, EMPLOYEES
from .jobs.service import JobAssignmentService, JobService
from .jobs.tables import JOB_ASSIGNMENTS, JOBS
from .kpi.service import KPIScoreService
from .organization.model import Department, Faculty, University
from .organization.tables import DEPARTMENTS, FACULTIES, UNIVERSITIES
from .performance.service import AppraisalService, PerformanceCycleService
from .performance.tables import APPRAISALS, KPI_SCORES, PERFORMANCE_CYCLES
from .store.cache import QueryCache
from .store.mysql_table_repository import MySQLTableRepository
from .store.repository import TableRepository
from .store.service import EntityService
from .store.table import TableSpec
from .training.service import TrainingProgramService
from .training.tables import TRAINING_PROGRAMS
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService

ALL_TABLES: Tuple[TableSpec, ...] = (
    UNIVERSITIES,
    FACULTIES,
    DEPARTMENTS,
    EMPLOYEES,
    CONTRACTS,
    JOBS,
    JOB_ASSIGNMENTS,
    TRAINING_PROGRAMS,
    PERFORMANCE_CYCLES,
    APPRAISALS,
    KPI_SCORES,
)

# Tables with extra write rules; the rest use the plain EntityService.
SERVICE_TYPES: Mapping[str, Type[EntityService]] = {
    CONTRACTS.name: ContractService,
    JOBS.name: JobService,
    JOB_ASSIGNMENTS.name: JobAssignmentService,
    TRAINING_PROGRAMS.name: TrainingProgramService,
    PERFORMANCE_CYCLES.name: PerformanceCycleService,
    APPRAISALS.name: AppraisalService,
    KPI_SCORES.name: KPIScoreService,
}


def referencing_tables(name: str) -> Tuple[str, ...]:
    """Tables holding a reference to `name` (their rows change on ON DELETE SET NULL / CASCADE)."""
    return tuple(spec.name for spec in ALL_TABLES if any(c.ref == name for c in spec.columns))


@dataclass(frozen=True)
class Container:
    cache: QueryCache
    users_repo: UserRepository
    auth_service: AuthService

    universities: EntityService[University]
    faculties: EntityService[Faculty]
    departments: EntityService[Department]
    employees: EntityService[Employee]
    contracts: ContractService
    jobs: JobService
    job_assignments: JobAssignmentService
    training_programs: TrainingProgramService
    performance_cycles: PerformanceCycleService
    appraisals: AppraisalService
    kpi_scores: KPIScoreService

    dashboard_service: DashboardService
    conn: Optional[DatabaseConnection] = None

    def service_for(self, table_name: str) -> EntityService:
        return getattr(self, table_name)


def assemble_container(
    *,
    repositories: Mapping[str, TableRepository],
    users: UserRepository,
    cache: QueryCache,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over already-built repositories (one per table name)."""
    services: Dict[str, EntityService] = {}
    for spec in ALL_TABLES:
        service_cls = SERVICE_TYPES.get(spec.name, EntityService)
        service = service_cls(repositories[spec.name], cache)
        service.also_invalidate(referencing_tables(spec.name))
        services[spec.name] = service

    dashboard_service = DashboardService(
        employees=services[EMPLOYEES.name],
        jobs=services[JOBS.name],
        training_programs=services[TRAINING_PROGRAMS.name],
        appraisals=services[APPRAISALS.name],
        departments=services[DEPARTMENTS.name],
        performance_cycles=services[PERFORMANCE_CYCLES.name],
    )

    return Container(
        cache=cache,
        users_repo=users,
        auth_service=AuthService(users),
        dashboard_service=dashboard_service,
        conn=conn,
        **services,
    )


def build_container(*, db_config: dict, cache_ttl: float = 0) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    repositories = {spec.name: MySQLTableRepository(conn, spec) for spec in ALL_TABLES}

    return assemble_container(
        repositories=repositories,
        users=MySQLUserRepository(conn),
        cache=QueryCache(ttl_seconds=cache_ttl),
        conn=conn,
    )
