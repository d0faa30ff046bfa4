#app/routes/__init__.py

from .health import router as health_router
from .employee import router as employee_router
from .company_list import router as company_list_router
