"""
Student Routes

GET /students - List students (newest first, optional branch/year filter)
GET /students/{id} - Get one student
POST /students - Create student (roll number must be unique)
PUT /students/{id} - Update student
DELETE /students/{id} - Delete student (cascades to applications and enrollments)
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from app.db.store import DataStore, get_store
from app.schemas.schemas import StudentCreate, StudentUpdate, StudentResponse, MessageResponse

router = APIRouter(prefix="/students", tags=["Students"])


@router.get("", response_model=List[StudentResponse])
def list_students(
    branch: Optional[str] = Query(None),
    year: Optional[int] = Query(None, ge=1, le=4),
    order: str = Query("-created_at", pattern="^-?(created_at|name|roll_number|cgpa)$"),
    store: DataStore = Depends(get_store)
):
    """List students. The application form uses order=name for its picker."""
    filters = {}
    if branch:
        filters["branch"] = branch
    if year:
        filters["year"] = year
    return store.fetch_all("students", order_by=order, filters=filters)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: int, store: DataStore = Depends(get_store)):
    student = store.fetch_one("students", student_id)
    if not student:
        raise HTTPException(status_code=404, detail="Student not found")
    return student


@router.post("", response_model=MessageResponse, status_code=201)
def create_student(data: StudentCreate, store: DataStore = Depends(get_store)):
    """Create a student. A duplicate roll number is rejected by the store."""
    row = store.insert(
        "students", data.to_record(),
        message="Error creating student. Roll number may already exist."
    )
    return MessageResponse(message="Student created successfully!", id=row["id"])


@router.put("/{student_id}", response_model=MessageResponse)
def update_student(student_id: int, data: StudentUpdate, store: DataStore = Depends(get_store)):
    """Update student. Only provided fields are updated."""
    record = data.to_record(partial=True)
    if not record:
        raise HTTPException(status_code=400, detail="No fields to update")

    if not store.update("students", student_id, record, message="Error updating student"):
        raise HTTPException(status_code=404, detail="Student not found")
    return MessageResponse(message="Student updated successfully!", id=student_id)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(student_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("students", student_id, message="Error deleting student"):
        raise HTTPException(status_code=404, detail="Student not found")
    return MessageResponse(message="Student deleted successfully!", id=student_id)
