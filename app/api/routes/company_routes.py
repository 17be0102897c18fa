"""
Company Routes

GET /companies - List companies (newest first)
GET /companies/{id} - Get one company
POST /companies - Create company
PUT /companies/{id} - Update company
DELETE /companies/{id} - Delete company (cascades to its job profiles)
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from app.db.store import DataStore, get_store
from app.schemas.schemas import CompanyCreate, CompanyUpdate, CompanyResponse, MessageResponse

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=List[CompanyResponse])
def list_companies(store: DataStore = Depends(get_store)):
    """All companies, most recently added first."""
    return store.fetch_all("companies", order_by="-created_at")


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: int, store: DataStore = Depends(get_store)):
    company = store.fetch_one("companies", company_id)
    if not company:
        raise HTTPException(status_code=404, detail="Company not found")
    return company


@router.post("", response_model=MessageResponse, status_code=201)
def create_company(data: CompanyCreate, store: DataStore = Depends(get_store)):
    row = store.insert("companies", data.to_record(), message="Error creating company")
    return MessageResponse(message="Company created successfully!", id=row["id"])


@router.put("/{company_id}", response_model=MessageResponse)
def update_company(company_id: int, data: CompanyUpdate, store: DataStore = Depends(get_store)):
    record = data.to_record(partial=True)
    if not record:
        raise HTTPException(status_code=400, detail="No fields to update")

    if not store.update("companies", company_id, record, message="Error updating company"):
        raise HTTPException(status_code=404, detail="Company not found")
    return MessageResponse(message="Company updated successfully!", id=company_id)


@router.delete("/{company_id}", response_model=MessageResponse)
def delete_company(company_id: int, store: DataStore = Depends(get_store)):
    if not store.delete("companies", company_id, message="Error deleting company"):
        raise HTTPException(status_code=404, detail="Company not found")
    return MessageResponse(message="Company deleted successfully!", id=company_id)
