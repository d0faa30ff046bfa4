from .employee_service import EmployeeService
