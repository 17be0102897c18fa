"""
Training Routes

GET /training-programs - List programs (newest first) with enrollment counts
POST /training-programs - Create program
PUT /training-programs/{id} - Update program
DELETE /training-programs/{id} - Delete program (cascades to enrollments)
GET /training-programs/{id}/enrollments - Enrollments of one program, with student

GET /training-enrollments - List all enrollments with student
POST /training-enrollments - Enroll student (one enrollment per student/program)
PUT /training-enrollments/{id} - Update attendance / completion status
DELETE /training-enrollments/{id} - Remove enrollment
"""

from collections import Counter
from fastapi import APIRouter, HTTPException, Depends
from typing import List

from app.db.store import DataStore, get_store
from app.schemas.schemas import (
    TrainingProgramCreate, TrainingProgramUpdate, TrainingProgramResponse,
    EnrollmentCreate, EnrollmentUpdate, EnrollmentResponse, MessageResponse
)

router = APIRouter(prefix="/training-programs", tags=["Training"])
enrollment_router = APIRouter(prefix="/training-enrollments", tags=["Training"])


def _check_dates(start_date, end_date):
    if start_date and end_date and end_date < start_date:
        raise HTTPException(status_code=400, detail="End date cannot be before start date")


# ============================================================
# PROGRAMS
# ============================================================

@router.get("", response_model=List[TrainingProgramResponse])
def list_programs(store: DataStore = Depends(get_store)):
    programs = store.fetch_all("training_programs", order_by="-created_at")
    enrolled = Counter(
        row["training_id"] for row in store.fetch_all("training_enrollments", columns=["training_id"])
    )
    for program in programs:
        program["enrollment_count"] = enrolled.get(program["id"], 0)
    return programs


@router.post("", response_model=MessageResponse, status_code=201)
def create_program(data: TrainingProgramCreate, store: DataStore = Depends(get_store)):
    _check_dates(data.start_date, data.end_date)
    row = store.insert("training_programs", data.to_record(), message="Error creating program")
    return MessageResponse(message="Program created successfully!", id=row["id"])


@router.put("/{program_id}", response_model=MessageResponse)
def update_program(program_id: int, data: TrainingProgramUpdate, store: DataStore = Depends(get_store)):
    record = data.to_record(partial=True)
    if not record:
        raise HTTPException(status_code=400, detail="No fields to update")

    if "start_date" in record or "end_date" in record:
        current = store.fetch_one("training_programs", program_id)
        if not current:
            raise HTTPException(status_code=404, detail="Program not found")
        _check_dates(record.get("start_date", current["start_date"]),
                     record.get("end_date", current["end_date"]))

    if not store.update("training_programs", program_id, record, message="Error updating program"):
        raise HTTPException(status_code=404, detail="Program not found")
    return MessageResponse(message="Program updated successfully!", id=program_id)


@router.delete("/{program_id}", response_model=MessageResponse)
def delete_program(program_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("training_programs", program_id, message="Error deleting program"):
        raise HTTPException(status_code=404, detail="Program not found")
    return MessageResponse(message="Program deleted successfully!", id=program_id)


@router.get("/{program_id}/enrollments", response_model=List[EnrollmentResponse])
def list_program_enrollments(program_id: int, store: DataStore = Depends(get_store)):
    if not store.fetch_one("training_programs", program_id):
        raise HTTPException(status_code=404, detail="Program not found")
    return store.fetch_with_joins(
        "training_enrollments", ["students"],
        order_by="-created_at", filters={"training_id": program_id}
    )


# ============================================================
# ENROLLMENTS
# ============================================================

@enrollment_router.get("", response_model=List[EnrollmentResponse])
def list_enrollments(store: DataStore = Depends(get_store)):
    return store.fetch_with_joins("training_enrollments", ["students"], order_by="-created_at")


@enrollment_router.post("", response_model=MessageResponse, status_code=201)
def enroll_student(data: EnrollmentCreate, store: DataStore = Depends(get_store)):
    row = store.insert(
        "training_enrollments", data.to_record(),
        message="Error enrolling student. Student may already be enrolled."
    )
    return MessageResponse(message="Student enrolled successfully!", id=row["id"])


@enrollment_router.put("/{enrollment_id}", response_model=MessageResponse)
def update_enrollment(enrollment_id: int, data: EnrollmentUpdate, store: DataStore = Depends(get_store)):
    record = data.to_record(partial=True)
    if not record:
        raise HTTPException(status_code=400, detail="No fields to update")

    if not store.update("training_enrollments", enrollment_id, record, message="Error updating enrollment"):
        raise HTTPException(status_code=404, detail="Enrollment not found")
    return MessageResponse(message="Enrollment updated successfully!", id=enrollment_id)


@enrollment_router.delete("/{enrollment_id}", response_model=MessageResponse)
def delete_enrollment(enrollment_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("training_enrollments", enrollment_id, message="Error removing enrollment"):
        raise HTTPException(status_code=404, detail="Enrollment not found")
    return MessageResponse(message="Enrollment removed successfully!", id=enrollment_id)
