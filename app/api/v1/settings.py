import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.v1.schemas import ClearDataResponseSchema, PreferencesSchema, PreferencesUpdateSchema
from app.application.use_cases.settings import SettingsUseCase
from app.wiring.dependencies import get_settings_use_case, get_tenant_id

router = APIRouter(prefix="/settings")
logger = logging.getLogger(__name__)


@router.get("/preferences", response_model=PreferencesSchema)
def get_preferences(
    tenant_id: str = Depends(get_tenant_id),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    prefs = uc.get_preferences(tenant_id)
    return PreferencesSchema(currency_symbol=prefs.currency_symbol, theme=prefs.theme)


@router.put("/preferences", response_model=PreferencesSchema)
def update_preferences(
    req: PreferencesUpdateSchema,
    tenant_id: str = Depends(get_tenant_id),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    try:
        prefs = uc.update_preferences(tenant_id, currency_symbol=req.currency_symbol, theme=req.theme)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return PreferencesSchema(currency_symbol=prefs.currency_symbol, theme=prefs.theme)


@router.delete("/data", response_model=ClearDataResponseSchema)
def clear_data(
    tenant_id: str = Depends(get_tenant_id),
    uc: SettingsUseCase = Depends(get_settings_use_case),
):
    try:
        deleted = uc.clear_data(tenant_id)
    except Exception as e:
        logger.exception("Failed to clear tenant data", extra={"tenant_id": tenant_id, "reason": str(e)})
        raise HTTPException(status_code=500, detail="Failed to clear data")
    return ClearDataResponseSchema(deleted=deleted)
