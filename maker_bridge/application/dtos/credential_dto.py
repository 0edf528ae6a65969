"""DTOs describing the credential schema exposed to the workflow host."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialPropertyDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    display_name: str = Field(alias="displayName")
    type: str = Field(default="string")
    default: str = Field(default="")
    placeholder: Optional[str] = Field(default=None)
    description: str = Field(default="")
    required: bool = Field(default=True)
    password: bool = Field(default=False, description="Mask the value in the UI")


class CredentialSchemaDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    display_name: str = Field(alias="displayName")
    documentation_url: str = Field(alias="documentationUrl")
    properties: List[CredentialPropertyDTO] = Field(default_factory=list)
