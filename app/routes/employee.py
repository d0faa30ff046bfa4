# app/routes/employee.py
import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.database import get_database
from app.exceptions import EmployeeWriteError
from app.schemas.employee import EmployeeCreate, EmployeeCreated, EmployeeOut
from app.services.employee_service import EmployeeService
from app.utils.responses import create_error_response

logger = logging.getLogger(__name__)

router = APIRouter()

def get_employee_service(db: AsyncIOMotorDatabase = Depends(get_database)) -> EmployeeService:
    return EmployeeService(db)

@router.post(
    "/employees",
    response_model=EmployeeCreated,
    response_model_exclude_none=True,
    status_code=201,
)
async def create_employee(employee: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    try:
        return await service.add_employee(employee)
    except EmployeeWriteError as e:
        logger.error("Failed to add employee: %s", e)
        raise HTTPException(
            status_code=500,
            detail=create_error_response(
                message="Failed to add employee.",
                details="The employee insert was not acknowledged by the database"
            )
        )
    except PyMongoError:
        logger.exception("Error adding employee")
        raise HTTPException(
            status_code=500,
            detail=create_error_response(
                message="Failed to add employee due to server error.",
                example="Please try again or contact support if the problem persists"
            )
        )

@router.get("/employees", response_model=List[EmployeeOut])
async def get_employees(service: EmployeeService = Depends(get_employee_service)):
    try:
        return await service.list_employees()
    except PyMongoError:
        logger.exception("Error fetching employees")
        raise HTTPException(
            status_code=500,
            detail=create_error_response(message="Failed to retrieve employee data")
        )
