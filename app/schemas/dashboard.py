"""Response schemas for the dashboard summary, company details and info blocks."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class TopRole(BaseModel):
    role: str
    score: str = Field(..., description="Automation score as a whole percentage, e.g. '42%'.")


class RecentUpload(BaseModel):
    title: str
    date: str = Field(..., description="Upload date as YYYY-MM-DD.")


class DashboardResponse(BaseModel):
    """Aggregate counts for the caller's company. Keys match the web client's camelCase."""

    totalPDs: int
    thisMonthPDs: int
    departmentsCovered: int
    mostActiveDepartment: str
    totalResponsibilities: int
    automatableResponsibilities: str
    highAIPotential: str
    avgAIScore: str
    activeUsers: int
    pendingReview: int
    published: int
    topRoles: list[TopRole]
    recentUploads: list[RecentUpload]


class CompanyDetails(BaseModel):
    name: str | None = None
    industry: str | None = None
    company_size: str | None = None
    website: str | None = None
    address: str | None = None
    phone: str | None = None
    company_information: str | None = None
    company_values: str | None = None
    company_mission: str | None = None

    class Config:
        from_attributes = True


class CompanyDetailsUpdate(CompanyDetails):
    """Full replacement of the editable company fields; name may not be blank."""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Company name must not be blank")
        return v.strip() if v is not None else None


class CompanyInfoBlockOut(BaseModel):
    id: int
    company_id: int
    title: str
    description: str
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: int | None = None
    updated_by: int | None = None

    class Config:
        from_attributes = True


class CompanyInfoBlockCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    is_active: bool = True


class CompanyInfoBlockUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    is_active: bool | None = None

    @field_validator("title", "description", "is_active")
    @classmethod
    def reject_null(cls, v: object) -> object:
        if v is None:
            raise ValueError("must not be null")
        return v


class EditorConfigResponse(BaseModel):
    apiKey: str


class SettingValueResponse(BaseModel):
    value: str
