"""
Job Profile Routes

GET /job-profiles - List job profiles with their company (ordered by role)
POST /job-profiles - Create job profile for a company
PUT /job-profiles/{id} - Update job profile
DELETE /job-profiles/{id} - Delete job profile (cascades to applications)
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from app.db.store import DataStore, get_store
from app.schemas.schemas import JobProfileCreate, JobProfileUpdate, JobProfileResponse, MessageResponse

router = APIRouter(prefix="/job-profiles", tags=["Job Profiles"])


@router.get("", response_model=List[JobProfileResponse])
def list_job_profiles(
    company_id: Optional[int] = Query(None),
    store: DataStore = Depends(get_store)
):
    filters = {"company_id": company_id} if company_id else None
    return store.fetch_with_joins("job_profiles", ["companies"], order_by="role", filters=filters)


@router.post("", response_model=MessageResponse, status_code=201)
def create_job_profile(data: JobProfileCreate, store: DataStore = Depends(get_store)):
    """Create a job profile. The company must exist."""
    row = store.insert(
        "job_profiles", data.to_record(),
        message="Error creating job profile. Company may not exist."
    )
    return MessageResponse(message="Job profile created successfully!", id=row["id"])


@router.put("/{job_id}", response_model=MessageResponse)
def update_job_profile(job_id: int, data: JobProfileUpdate, store: DataStore = Depends(get_store)):
    record = data.to_record(partial=True)
    if not record:
        raise HTTPException(status_code=400, detail="No fields to update")

    if not store.update("job_profiles", job_id, record, message="Error updating job profile"):
        raise HTTPException(status_code=404, detail="Job profile not found")
    return MessageResponse(message="Job profile updated successfully!", id=job_id)


@router.delete("/{job_id}", response_model=MessageResponse)
def delete_job_profile(job_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("job_profiles", job_id, message="Error deleting job profile"):
        raise HTTPException(status_code=404, detail="Job profile not found")
    return MessageResponse(message="Job profile deleted successfully!", id=job_id)
