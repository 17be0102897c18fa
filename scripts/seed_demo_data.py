#!/usr/bin/env python3
"""
Seed realistic demo data (companies, job profiles, students, training, applications).

Usage: python scripts/seed_demo_data.py [--students 40] [--seed 42]
"""
import argparse
import random
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from app.core.errors import WriteFailure
from app.db.postgres import create_tables
from app.db.store import DataStore, get_store

COMPANIES = [
    ("Infosys", "Bengaluru", "IT Services"),
    ("Tata Consultancy Services", "Mumbai", "IT Services"),
    ("Larsen & Toubro", "Chennai", "Engineering"),
    ("Zoho", "Chennai", "Product"),
    ("Deloitte", "Hyderabad", "Consulting"),
]
ROLES = [("Software Engineer", 6.5), ("Data Analyst", 5.0), ("Graduate Engineer Trainee", 4.2), ("Consultant", 7.5)]
BRANCHES = ["CSE", "ECE", "EEE", "MECH", "CIVIL", "IT"]
FIRST_NAMES = ["Aarav", "Diya", "Ishaan", "Ananya", "Kabir", "Meera", "Rohan", "Sneha", "Vikram", "Priya"]
LAST_NAMES = ["Sharma", "Iyer", "Reddy", "Patel", "Nair", "Gupta", "Das", "Menon"]
PROGRAMS = [("Aptitude Bootcamp", "R. Kumar"), ("Mock Interviews", "S. Rao"), ("Python for Placements", "A. Singh")]
STATUSES = ["Applied", "Applied", "Shortlisted", "Selected", "Rejected"]


def seed_demo_data(store: DataStore, students: int = 40, seed: int = 42) -> dict:
    """Insert demo rows through the store. Returns how many rows went into each table."""
    rnd = random.Random(seed)
    created = {"companies": 0, "job_profiles": 0, "students": 0,
               "training_programs": 0, "training_enrollments": 0, "applications": 0}

    job_ids = []
    for name, location, industry in COMPANIES:
        company = store.insert("companies", {
            "company_name": name, "location": location, "industry_type": industry,
            "hr_name": f"{rnd.choice(FIRST_NAMES)} {rnd.choice(LAST_NAMES)}",
            "hr_contact": f"+91 9{rnd.randint(100000000, 999999999)}",
        })
        created["companies"] += 1
        for role, base in rnd.sample(ROLES, 2):
            job = store.insert("job_profiles", {
                "company_id": company["id"], "role": role,
                "package": round(base + rnd.uniform(-1, 3), 1),
            })
            job_ids.append(job["id"])
            created["job_profiles"] += 1

    program_ids = []
    start = date.today()
    for title, trainer in PROGRAMS:
        program = store.insert("training_programs", {
            "title": title, "trainer_name": trainer,
            "start_date": start, "end_date": start + timedelta(days=rnd.randint(7, 30)),
            "description": f"{title} for final-year students",
        })
        program_ids.append(program["id"])
        created["training_programs"] += 1

    for i in range(students):
        first, last = rnd.choice(FIRST_NAMES), rnd.choice(LAST_NAMES)
        student = store.insert("students", {
            "name": f"{first} {last}", "roll_number": f"DEMO{i + 1:04d}",
            "branch": rnd.choice(BRANCHES), "year": rnd.randint(3, 4),
            "cgpa": round(rnd.uniform(5.5, 9.8), 2),
            "email": f"{first.lower()}.{last.lower()}{i + 1}@example.edu",
            "phone_number": f"9{rnd.randint(100000000, 999999999)}",
        })
        created["students"] += 1

        for training_id in rnd.sample(program_ids, rnd.randint(0, len(program_ids))):
            store.insert("training_enrollments", {
                "student_id": student["id"], "training_id": training_id,
                "attendance_percentage": round(rnd.uniform(40, 100), 1),
                "completion_status": rnd.choice(["Enrolled", "Completed", "Dropped"]),
            })
            created["training_enrollments"] += 1

        for job_id in rnd.sample(job_ids, rnd.randint(0, 3)):
            store.insert("applications", {
                "student_id": student["id"], "job_id": job_id,
                "application_status": rnd.choice(STATUSES),
            })
            created["applications"] += 1

    return created


def main():
    parser = argparse.ArgumentParser(description="Seed demo placement data")
    parser.add_argument("--students", type=int, default=40)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    create_tables()
    try:
        created = seed_demo_data(get_store(), students=args.students, seed=args.seed)
    except WriteFailure as e:
        print(f"❌ Seeding failed while {e.action}: {e.message} (already seeded?)")
        return 1

    for table, n in created.items():
        print(f"  {table}: {n}")
    print("✅ Demo data seeded")
    return 0


if __name__ == "__main__":
    sys.exit(main())
