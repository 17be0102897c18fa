"""
Table definitions (SQLAlchemy Core).

The schema is owned by the managed database; these definitions mirror it so
the store can validate table/column names and so local runs and tests can
bootstrap an empty database with metadata.create_all().
"""

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, Text, Float, Date, DateTime,
    ForeignKey, UniqueConstraint, CheckConstraint, func
)

metadata = MetaData()


companies = Table(
    "companies", metadata,
    Column("id", Integer, primary_key=True),
    Column("company_name", String(200), nullable=False),
    Column("location", String(200)),
    Column("industry_type", String(100)),
    Column("hr_name", String(100)),
    Column("hr_contact", String(100)),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
    CheckConstraint("length(company_name) > 0", name="ck_companies_name_not_empty"),
)

students = Table(
    "students", metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("roll_number", String(50), nullable=False, unique=True),
    Column("branch", String(50), nullable=False),
    Column("year", Integer, nullable=False),
    Column("cgpa", Float, nullable=False),
    Column("email", String(200), nullable=False),
    Column("phone_number", String(30), nullable=False),
    Column("resume_link", Text),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
    CheckConstraint("year BETWEEN 1 AND 4", name="ck_students_year"),
    CheckConstraint("cgpa >= 0 AND cgpa <= 10", name="ck_students_cgpa"),
)

job_profiles = Table(
    "job_profiles", metadata,
    Column("id", Integer, primary_key=True),
    Column("company_id", Integer, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(200), nullable=False),
    Column("package", Float, nullable=False),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
)

training_programs = Table(
    "training_programs", metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("trainer_name", String(100), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("description", Text),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
)

training_enrollments = Table(
    "training_enrollments", metadata,
    Column("id", Integer, primary_key=True),
    Column("student_id", Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
    Column("training_id", Integer, ForeignKey("training_programs.id", ondelete="CASCADE"), nullable=False),
    Column("attendance_percentage", Float, nullable=False, default=0),
    Column("completion_status", String(20), nullable=False, default="Enrolled"),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
    UniqueConstraint("student_id", "training_id", name="uq_enrollment_student_training"),
)

applications = Table(
    "applications", metadata,
    Column("id", Integer, primary_key=True),
    Column("student_id", Integer, ForeignKey("students.id", ondelete="CASCADE"), nullable=False),
    Column("job_id", Integer, ForeignKey("job_profiles.id", ondelete="CASCADE"), nullable=False),
    Column("application_status", String(20), nullable=False, default="Applied"),
    Column("application_date", DateTime, server_default=func.now(), nullable=False),
    Column("created_at", DateTime, server_default=func.now(), nullable=False),
    UniqueConstraint("student_id", "job_id", name="uq_application_student_job"),
)


TABLES = {t.name: t for t in metadata.sorted_tables}

# Embeddable relations per table: relation name -> (foreign key column, target table)
RELATIONS = {
    "job_profiles": {
        "companies": ("company_id", "companies"),
    },
    "training_enrollments": {
        "students": ("student_id", "students"),
        "training_programs": ("training_id", "training_programs"),
    },
    "applications": {
        "students": ("student_id", "students"),
        "job_profiles": ("job_id", "job_profiles"),
    },
}
