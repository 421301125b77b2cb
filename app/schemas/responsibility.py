"""Request/response schemas for responsibilities within a position description."""

from pydantic import AliasChoices, BaseModel, Field, field_validator

PERCENTAGE_MIN = 0.0
PERCENTAGE_MAX = 100.0


class ResponsibilityOut(BaseModel):
    """Responsibility row. llm_desc is exposed under its column name LLM_Desc."""

    id: int
    pd_id: int | None = None
    responsibility_name: str
    responsibility_percentage: float
    llm_desc: str | None = Field(
        default=None,
        validation_alias=AliasChoices("llm_desc", "LLM_Desc"),
        serialization_alias="LLM_Desc",
    )
    is_llm_version: bool = False
    ai_automation_score: float | None = None
    ai_automation_percentage: float | None = None
    ai_automation_reason: str | None = None

    class Config:
        from_attributes = True


class ResponsibilityCreate(BaseModel):
    responsibility_name: str = Field(..., min_length=2, max_length=500)

    @field_validator("responsibility_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Responsibility name must be between 2 and 500 characters")
        return v


class ResponsibilityUpdate(BaseModel):
    """
    Partial update. is_llm_version accepts booleans and the strings
    "true"/"false"/"1"/"0".
    """

    model_config = {"populate_by_name": True}

    responsibility_percentage: float | None = Field(
        default=None, ge=PERCENTAGE_MIN, le=PERCENTAGE_MAX
    )
    responsibility_name: str | None = Field(default=None, min_length=2, max_length=500)
    llm_desc: str | None = Field(default=None, alias="LLM_Desc", max_length=2000)
    is_llm_version: bool | None = None

    @field_validator("responsibility_percentage", "responsibility_name", "is_llm_version")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("must not be null")
        return v


class ResponsibilityUpdateResponse(BaseModel):
    message: str = "Responsibility updated successfully"
    data: ResponsibilityOut
    # Set when the requested percentage was lowered to keep the PD total at or below 100.
    clamped_from: float | None = None


class RewriteResponse(BaseModel):
    """Result of an LLM rewrite of a responsibility."""

    message: str = "Responsibility rewritten successfully"
    data: ResponsibilityOut
    model: str
