# app/services/employee_service.py
import logging
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.database import COMPANY_LIST_COLLECTION, EMPLOYEES_COLLECTION
from app.exceptions import EmployeeWriteError
from app.models.company_list import CompanyListEntryModel
from app.models.employee import EmployeeModel
from app.schemas.company_list import CompanyListEntryOut
from app.schemas.employee import EmployeeCreate, EmployeeCreated, EmployeeOut
from app.utils.object_id import stringify_id

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Employee added successfully and synced to company list."
SYNC_FAILED_MESSAGE = "Employee added successfully but company list sync failed."


class EmployeeService:
    """Employee reads and writes against one MongoDB database."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db

    async def add_employee(self, employee: EmployeeCreate) -> EmployeeCreated:
        """Insert an employee and mirror it into the company list.

        The two inserts are not transactional. If the mirror insert fails
        the employee stays stored and the result carries a ``warning``.
        Raises ``EmployeeWriteError`` if the employee insert is not
        acknowledged; store errors from that insert propagate.
        """
        document = EmployeeModel(**employee.model_dump()).model_dump(by_alias=True)
        result = await self.db[EMPLOYEES_COLLECTION].insert_one(document)
        if not result.acknowledged:
            raise EmployeeWriteError(f"Insert of employee {employee.name!r} was not acknowledged")
        logger.info("Added employee: %s to %s", employee.name, EMPLOYEES_COLLECTION)

        created = EmployeeOut(**stringify_id({**document, "_id": result.inserted_id}))

        entry = CompanyListEntryModel(name=employee.name).model_dump(by_alias=True)
        try:
            await self.db[COMPANY_LIST_COLLECTION].insert_one(entry)
        except PyMongoError as e:
            logger.exception("Failed to add employee: %s to %s", employee.name, COMPANY_LIST_COLLECTION)
            return EmployeeCreated(
                message=SYNC_FAILED_MESSAGE,
                employee=created,
                warning=f"Company list entry was not created: {e}",
            )
        logger.info("Added employee: %s to %s", employee.name, COMPANY_LIST_COLLECTION)

        return EmployeeCreated(message=ADDED_MESSAGE, employee=created)

    async def list_employees(self) -> List[EmployeeOut]:
        employees = await self.db[EMPLOYEES_COLLECTION].find({}).to_list(length=None)
        return [EmployeeOut(**stringify_id(employee)) for employee in employees]

    async def list_company(self) -> List[CompanyListEntryOut]:
        entries = await self.db[COMPANY_LIST_COLLECTION].find({}).to_list(length=None)
        return [CompanyListEntryOut(**stringify_id(entry)) for entry in entries]
