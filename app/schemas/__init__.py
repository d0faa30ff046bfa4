from .employee import EmployeeCreate, EmployeeOut, EmployeeCreated
from .company_list import CompanyListEntryOut
