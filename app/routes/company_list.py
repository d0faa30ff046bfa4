# app/routes/company_list.py
import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends
from pymongo.errors import PyMongoError

from app.routes.employee import get_employee_service
from app.schemas.company_list import CompanyListEntryOut
from app.services.employee_service import EmployeeService
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/company-list", response_model=List[CompanyListEntryOut])
async def get_company_list(service: EmployeeService = Depends(get_employee_service)):
    try:
        return await service.list_company()
    except PyMongoError:
        logger.exception("Error fetching company list")
        raise HTTPException(
            status_code=500,
            detail=create_error_response(message="Failed to retrieve company list data")
        )
