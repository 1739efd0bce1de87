from fastapi import APIRouter, Depends, HTTPException, Response

from app.api.v1.schemas import StaffCreateSchema, StaffSchema
from app.application.exceptions import NotFoundError
from app.application.use_cases.staff import StaffUseCase
from app.wiring.dependencies import get_staff_use_case, get_tenant_id

router = APIRouter(prefix="/staff")


@router.get("", response_model=list[StaffSchema])
def list_staff(
    tenant_id: str = Depends(get_tenant_id),
    uc: StaffUseCase = Depends(get_staff_use_case),
):
    return [StaffSchema(id=m.id, name=m.name) for m in uc.list_staff(tenant_id)]


@router.post("", response_model=StaffSchema, status_code=201)
def add_staff(
    req: StaffCreateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: StaffUseCase = Depends(get_staff_use_case),
):
    try:
        member = uc.add_staff(tenant_id, req.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StaffSchema(id=member.id, name=member.name)


@router.delete("/{staff_id}", status_code=204)
def delete_staff(
    staff_id: str,
    tenant_id: str = Depends(get_tenant_id),
    uc: StaffUseCase = Depends(get_staff_use_case),
) -> Response:
    try:
        uc.delete_staff(tenant_id, staff_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
