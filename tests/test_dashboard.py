"""
Dashboard Tests - concurrent reads, aggregation and partial failure.

Run with: pytest tests/test_dashboard.py -v
"""

import asyncio
from datetime import date

import pytest

from app.core.errors import FetchFailure
from app.db.store import SqlDataStore
from app.services.dashboard_service import get_dashboard_stats
from conftest import make_student


@pytest.fixture
def seeded(store, company):
    jobs = [
        store.insert("job_profiles", {"company_id": company["id"], "role": "SDE", "package": 8.0}),
        store.insert("job_profiles", {"company_id": company["id"], "role": "Analyst", "package": 5.0}),
    ]
    students = [
        store.insert("students", make_student(roll_number="R1", branch="ECE")),
        store.insert("students", make_student(roll_number="R2", branch="CSE")),
        store.insert("students", make_student(roll_number="R3", branch="CSE")),
        store.insert("students", make_student(roll_number="R4", branch="MECH")),
    ]
    store.insert("applications", {"student_id": students[0]["id"], "job_id": jobs[0]["id"], "application_status": "Selected"})
    store.insert("applications", {"student_id": students[1]["id"], "job_id": jobs[0]["id"], "application_status": "Applied"})
    store.insert("applications", {"student_id": students[1]["id"], "job_id": jobs[1]["id"], "application_status": "Selected"})
    store.insert("training_programs", {"title": "Aptitude", "trainer_name": "R. Kumar",
                                       "start_date": date(2026, 1, 5),
                                       "end_date": date(2026, 1, 20)})
    return store


class FlakyStore(SqlDataStore):
    """Store whose reads of the listed tables always fail."""

    def __init__(self, engine, failing):
        super().__init__(engine)
        self.failing = set(failing)

    def count(self, table, filters=None):
        if table in self.failing:
            raise FetchFailure(f"Error fetching {table}", action=f"counting {table}", table=table)
        return super().count(table, filters)

    def fetch_all(self, table, order_by=None, filters=None, columns=None):
        if table in self.failing:
            raise FetchFailure(f"Error fetching {table}", action=f"fetching {table}", table=table)
        return super().fetch_all(table, order_by, filters, columns)


class TestDashboardStats:

    def test_empty_database(self, store):
        stats = asyncio.run(get_dashboard_stats(store))

        assert stats.total_students == 0
        assert stats.placement_rate == 0
        assert stats.average_package == 0
        assert stats.top_branch == ""
        assert [(s.status, s.count, s.percentage) for s in stats.status_breakdown] == [
            ("Applied", 0, 0), ("Shortlisted", 0, 0), ("Selected", 0, 0), ("Rejected", 0, 0),
        ]
        assert stats.failed_reads == []

    def test_figures_over_seeded_data(self, seeded):
        stats = asyncio.run(get_dashboard_stats(seeded))

        assert stats.total_students == 4
        assert stats.total_companies == 1
        assert stats.total_job_profiles == 2
        assert stats.total_applications == 3
        assert stats.total_training_programs == 1
        assert stats.placed_students == 2
        assert stats.placement_rate == pytest.approx(50.0)
        assert stats.average_package == pytest.approx(6.5)
        assert stats.top_branch == "CSE"

        breakdown = {s.status: s for s in stats.status_breakdown}
        assert breakdown["Selected"].count == 2
        assert breakdown["Selected"].percentage == pytest.approx(66.67, abs=0.01)
        assert breakdown["Applied"].percentage == pytest.approx(33.33, abs=0.01)
        assert breakdown["Rejected"].count == 0

    def test_failed_read_zeroes_only_its_figures(self, seeded, engine):
        flaky = FlakyStore(engine, failing={"job_profiles"})

        stats = asyncio.run(get_dashboard_stats(flaky))

        assert stats.total_job_profiles == 0
        assert stats.average_package == 0
        assert sorted(stats.failed_reads) == ["job_profiles", "packages"]
        # everything else still renders
        assert stats.total_students == 4
        assert stats.placement_rate == pytest.approx(50.0)
        assert stats.top_branch == "CSE"

    def test_failed_status_read_leaves_breakdown_empty(self, seeded, engine):
        flaky = FlakyStore(engine, failing={"applications"})

        stats = asyncio.run(get_dashboard_stats(flaky))

        assert stats.status_breakdown == []
        assert stats.placed_students == 0
        assert stats.placement_rate == 0
        assert set(stats.failed_reads) == {"applications", "placed", "statuses"}


class TestDashboardRoute:

    def test_get_dashboard(self, client, seeded):
        resp = client.get("/api/dashboard")

        assert resp.status_code == 200
        body = resp.json()
        assert body["total_students"] == 4
        assert body["placement_rate"] == pytest.approx(50.0)
        assert body["top_branch"] == "CSE"
        assert [s["status"] for s in body["status_breakdown"]] == ["Applied", "Shortlisted", "Selected", "Rejected"]

    def test_refetch_after_mutation(self, client, seeded):
        before = client.get("/api/dashboard").json()["total_students"]
        client.post("/api/students", json=make_student(roll_number="NEW1"))

        assert client.get("/api/dashboard").json()["total_students"] == before + 1
