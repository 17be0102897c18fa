"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import ClassVar, List, Optional, Tuple
from datetime import date, datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class ApplicationStatus(str, Enum):
    applied = "Applied"
    shortlisted = "Shortlisted"
    selected = "Selected"
    rejected = "Rejected"


class CompletionStatus(str, Enum):
    enrolled = "Enrolled"
    completed = "Completed"
    dropped = "Dropped"


class WriteModel(BaseModel):
    """Base for request bodies: enums (defaults included) are stored as their plain values."""
    model_config = ConfigDict(use_enum_values=True, validate_default=True, str_strip_whitespace=True)

    # Columns an update may set back to NULL; other nulls in an update are ignored
    nullable_fields: ClassVar[Tuple[str, ...]] = ()

    def to_record(self, partial: bool = False) -> dict:
        """Row values for the store. Partial (update) records keep only the fields sent."""
        record = self.model_dump(exclude_unset=partial)
        if partial:
            record = {k: v for k, v in record.items() if v is not None or k in self.nullable_fields}
        return record


def _blank_to_none(v):
    return v or None


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(WriteModel):
    company_name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200)
    industry_type: str = Field(..., min_length=1, max_length=100)
    hr_name: str = Field(..., min_length=1, max_length=100)
    hr_contact: str = Field(..., min_length=1, max_length=100)

class CompanyUpdate(WriteModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    location: Optional[str] = Field(None, min_length=1, max_length=200)
    industry_type: Optional[str] = Field(None, min_length=1, max_length=100)
    hr_name: Optional[str] = Field(None, min_length=1, max_length=100)
    hr_contact: Optional[str] = Field(None, min_length=1, max_length=100)

class CompanyResponse(BaseModel):
    id: int
    company_name: str
    location: Optional[str] = None
    industry_type: Optional[str] = None
    hr_name: Optional[str] = None
    hr_contact: Optional[str] = None
    created_at: datetime


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(WriteModel):
    name: str = Field(..., min_length=1, max_length=100)
    roll_number: str = Field(..., min_length=1, max_length=50)
    branch: str = Field(..., min_length=1, max_length=50)
    year: int = Field(1, ge=1, le=4)
    cgpa: float = Field(..., ge=0, le=10)
    email: EmailStr
    phone_number: str = Field(..., min_length=1, max_length=30)
    resume_link: Optional[str] = None

    blank_link_is_none = field_validator("resume_link")(_blank_to_none)

class StudentUpdate(WriteModel):
    nullable_fields = ("resume_link",)

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    roll_number: Optional[str] = Field(None, min_length=1, max_length=50)
    branch: Optional[str] = Field(None, min_length=1, max_length=50)
    year: Optional[int] = Field(None, ge=1, le=4)
    cgpa: Optional[float] = Field(None, ge=0, le=10)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, min_length=1, max_length=30)
    resume_link: Optional[str] = None

    blank_link_is_none = field_validator("resume_link")(_blank_to_none)

class StudentResponse(BaseModel):
    id: int
    name: str
    roll_number: str
    branch: str
    year: int
    cgpa: float
    email: str
    phone_number: str
    resume_link: Optional[str] = None
    created_at: datetime


# ============================================================
# JOB PROFILE SCHEMAS
# ============================================================

class JobProfileCreate(WriteModel):
    company_id: int
    role: str = Field(..., min_length=1, max_length=200)
    package: float = Field(..., ge=0, description="Package in LPA")

class JobProfileUpdate(WriteModel):
    company_id: Optional[int] = None
    role: Optional[str] = Field(None, min_length=1, max_length=200)
    package: Optional[float] = Field(None, ge=0)

class JobProfileResponse(BaseModel):
    id: int
    company_id: int
    role: str
    package: float
    created_at: datetime
    companies: Optional[CompanyResponse] = None


# ============================================================
# TRAINING SCHEMAS
# ============================================================

class TrainingProgramCreate(WriteModel):
    title: str = Field(..., min_length=1, max_length=200)
    trainer_name: str = Field(..., min_length=1, max_length=100)
    start_date: date
    end_date: date
    description: Optional[str] = None

class TrainingProgramUpdate(WriteModel):
    nullable_fields = ("description",)

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    trainer_name: Optional[str] = Field(None, min_length=1, max_length=100)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    description: Optional[str] = None

class TrainingProgramResponse(BaseModel):
    id: int
    title: str
    trainer_name: str
    start_date: date
    end_date: date
    description: Optional[str] = None
    created_at: datetime
    enrollment_count: int = 0

class EnrollmentCreate(WriteModel):
    student_id: int
    training_id: int
    attendance_percentage: float = Field(0, ge=0, le=100)
    completion_status: CompletionStatus = CompletionStatus.enrolled

class EnrollmentUpdate(WriteModel):
    attendance_percentage: Optional[float] = Field(None, ge=0, le=100)
    completion_status: Optional[CompletionStatus] = None

class EnrollmentResponse(BaseModel):
    id: int
    student_id: int
    training_id: int
    attendance_percentage: float
    completion_status: str
    created_at: datetime
    students: Optional[StudentResponse] = None


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(WriteModel):
    student_id: int
    job_id: int
    application_status: ApplicationStatus = ApplicationStatus.applied

class ApplicationStatusUpdate(WriteModel):
    application_status: ApplicationStatus

class ApplicationResponse(BaseModel):
    id: int
    student_id: int
    job_id: int
    application_status: str
    application_date: datetime
    created_at: datetime
    students: Optional[StudentResponse] = None
    job_profiles: Optional[JobProfileResponse] = None


# ============================================================
# DASHBOARD SCHEMAS
# ============================================================

class StatusCountResponse(BaseModel):
    status: str
    count: int
    percentage: float

class DashboardResponse(BaseModel):
    total_students: int = 0
    total_companies: int = 0
    total_job_profiles: int = 0
    total_applications: int = 0
    total_training_programs: int = 0
    placed_students: int = 0
    placement_rate: float = 0
    average_package: float = 0
    top_branch: str = ""
    status_breakdown: List[StatusCountResponse] = []
    failed_reads: List[str] = []


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True
    id: Optional[int] = None

class ErrorResponse(BaseModel):
    detail: str
