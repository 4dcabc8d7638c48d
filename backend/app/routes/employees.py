from fastapi import APIRouter, Depends, status

from ..di import DependencyContainer, get_container
from ..models import Employee
from ..schemas import EmployeeCreate, EmployeeResponse

router = APIRouter(prefix="/employees")


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def add_employee(body: EmployeeCreate, container: DependencyContainer = Depends(get_container)):
    employee = Employee(id=body.id, first_name=body.first_name, last_name=body.last_name)
    container.get_employee_service().add(employee)
    return employee
