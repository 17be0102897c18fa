"""
Dashboard Service

Fires the nine dashboard reads concurrently, waits for all of them, then
hands whatever came back to the aggregator. A failed read only zeroes its
own figure; every other figure still renders.
"""

import asyncio
from typing import Any, Callable, Dict

import structlog
from starlette.concurrency import run_in_threadpool

from app.core.errors import FetchFailure
from app.db.store import DataStore
from app.schemas.schemas import DashboardResponse, StatusCountResponse
from app.services import aggregator

logger = structlog.get_logger()


def _reads(store: DataStore) -> Dict[str, Callable[[], Any]]:
    return {
        "students": lambda: store.count("students"),
        "companies": lambda: store.count("companies"),
        "job_profiles": lambda: store.count("job_profiles"),
        "applications": lambda: store.count("applications"),
        "training_programs": lambda: store.count("training_programs"),
        "placed": lambda: store.count("applications", filters={"application_status": "Selected"}),
        "packages": lambda: store.fetch_all("job_profiles", columns=["package"]),
        "branches": lambda: store.fetch_all("students", columns=["branch"]),
        "statuses": lambda: store.fetch_all("applications", columns=["application_status"]),
    }


async def get_dashboard_stats(store: DataStore) -> DashboardResponse:
    reads = _reads(store)
    results = await asyncio.gather(
        *(run_in_threadpool(fn) for fn in reads.values()),
        return_exceptions=True
    )

    data = {}
    failed = []
    for name, result in zip(reads, results):
        if isinstance(result, FetchFailure):
            logger.warning("dashboard_read_failed", read=name, table=result.table, error=str(result.__cause__ or result))
            failed.append(name)
        elif isinstance(result, BaseException):
            raise result
        else:
            data[name] = result

    total_students = data.get("students", 0)
    total_applications = data.get("applications", 0)
    placed = data.get("placed", 0)

    stats = DashboardResponse(
        total_students=total_students,
        total_companies=data.get("companies", 0),
        total_job_profiles=data.get("job_profiles", 0),
        total_applications=total_applications,
        total_training_programs=data.get("training_programs", 0),
        placed_students=placed,
        placement_rate=aggregator.placement_rate(placed, total_students),
        average_package=aggregator.average_package(
            row["package"] for row in data.get("packages", [])
        ),
        top_branch=aggregator.top_branch(row["branch"] for row in data.get("branches", [])),
        failed_reads=failed,
    )

    if "statuses" in data:
        breakdown = aggregator.status_breakdown(
            (row["application_status"] for row in data["statuses"]),
            total=total_applications
        )
        stats.status_breakdown = [StatusCountResponse(**s._asdict()) for s in breakdown]

    return stats
