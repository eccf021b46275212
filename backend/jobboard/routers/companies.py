import logging

from fastapi import APIRouter, Depends, Path
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.database import MAX_ID, get_db
from jobboard.dependencies import get_current_user_id, get_user_with_role
from jobboard.errors import Conflict, Forbidden, NotFound, ValidationError, server_errors
from jobboard.models import Company, UserRole
from jobboard.schemas import (
    CompanyCreate,
    CompanyLookup,
    CompanyEnvelope,
    CompanyListResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

# Every company route needs a signed-in caller
router = APIRouter(dependencies=[Depends(get_current_user_id)])

DUPLICATE_COMPANY = "Company Already exists with this name"


@router.post("/create", response_model=CompanyEnvelope)
def create_company(company_data: CompanyCreate, db: Session = Depends(get_db)):
    """Register a company. Names are unique."""
    with server_errors(db, "Server error during creating company"):
        existing = db.query(Company).filter(Company.name == company_data.name).first()
        if existing:
            raise Conflict(DUPLICATE_COMPANY, status_code=400)

        company = Company(name=company_data.name, logo=company_data.logo)
        db.add(company)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise Conflict(DUPLICATE_COMPANY, status_code=400)
        db.refresh(company)

    logger.info("Created company %d (%s)", company.id, company.name)
    return {"success": True, "message": "Company created successfully", "company": company}


@router.get("/bulk", response_model=CompanyListResponse)
def list_companies(db: Session = Depends(get_db)):
    """All companies, alphabetically."""
    with server_errors(db, "Server error during fetching companies"):
        companies = db.query(Company).order_by(Company.name.asc()).all()

    return {"success": True, "message": "Companies fetched successfully", "companies": companies}


@router.post("/find", response_model=CompanyEnvelope)
def find_company(lookup: CompanyLookup, db: Session = Depends(get_db)):
    with server_errors(db, "Server error during fetching company"):
        company = db.query(Company).filter(Company.id == lookup.id).first()
        if not company:
            raise ValidationError("Company not Exists")

    return {"success": True, "message": "Company fetched successfully", "company": company}


@router.delete("/{company_id}", response_model=MessageResponse)
def delete_company(
    company_id: int = Path(ge=1, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Remove a company and every job posted under it. Recruiters only."""
    with server_errors(db, "Server error during deleting company"):
        if not get_user_with_role(db, user_id, UserRole.RECRUITER):
            raise Forbidden("Only Recruiters can delete companies")

        company = db.query(Company).filter(Company.id == company_id).first()
        if not company:
            raise NotFound("Company not found")

        db.delete(company)
        db.commit()

    logger.info("User %d deleted company %d", user_id, company_id)
    return {"success": True, "message": "Company deleted successfully"}
