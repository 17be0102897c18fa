"""
Application Routes

GET /applications - List applications with student and job profile (+ company)
POST /applications - Create application (one per student/job pair)
PUT /applications/{id} - Update application status
DELETE /applications/{id} - Delete application
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from app.db.store import DataStore, get_store
from app.schemas.schemas import (
    ApplicationCreate, ApplicationStatusUpdate, ApplicationResponse,
    ApplicationStatus, MessageResponse
)

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[ApplicationResponse])
def list_applications(
    status: Optional[ApplicationStatus] = Query(None),
    student_id: Optional[int] = Query(None),
    store: DataStore = Depends(get_store)
):
    """All applications, newest first, with the student and job profile embedded."""
    filters = {}
    if status:
        filters["application_status"] = status.value
    if student_id:
        filters["student_id"] = student_id
    return store.fetch_with_joins(
        "applications", ["students", "job_profiles.companies"],
        order_by="-created_at", filters=filters
    )


@router.post("", response_model=MessageResponse, status_code=201)
def create_application(data: ApplicationCreate, store: DataStore = Depends(get_store)):
    """Submit an application. A second one for the same student and job is rejected."""
    row = store.insert(
        "applications", data.to_record(),
        message="Error creating application. Student may have already applied for this job."
    )
    return MessageResponse(message="Application created successfully!", id=row["id"])


@router.put("/{application_id}", response_model=MessageResponse)
def update_application(application_id: int, data: ApplicationStatusUpdate, store: DataStore = Depends(get_store)):
    """Only the status changes; student and job are fixed once submitted."""
    if not store.update("applications", application_id, data.to_record(), message="Error updating application"):
        raise HTTPException(status_code=404, detail="Application not found")
    return MessageResponse(message="Application updated successfully!", id=application_id)


@router.delete("/{application_id}", response_model=MessageResponse)
def delete_application(application_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("applications", application_id, message="Error deleting application"):
        raise HTTPException(status_code=404, detail="Application not found")
    return MessageResponse(message="Application deleted successfully!", id=application_id)
