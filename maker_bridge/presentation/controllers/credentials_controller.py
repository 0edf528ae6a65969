"""Credential schema endpoint."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from maker_bridge.application.dtos.credential_dto import CredentialSchemaDTO
from maker_bridge.application.use_cases.credential_use_cases import (
    GetCredentialSchemaUseCase,
)

router = APIRouter(prefix="/credentials", tags=["Credentials"])


@router.get(
    "/schema", response_model=CredentialSchemaDTO, response_model_exclude_none=True
)
@inject
async def credential_schema(
    get_credential_schema_use_case: GetCredentialSchemaUseCase = Depends(
        Provide["get_credential_schema_use_case"]
    ),
) -> CredentialSchemaDTO:
    """Describe the fields of a Hubitat Maker API credential."""
    return get_credential_schema_use_case.execute()
