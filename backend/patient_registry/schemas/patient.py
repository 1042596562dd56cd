from pydantic import BaseModel, field_validator
from typing import Optional


class PatientForm(BaseModel):
    """Raw form submission, every field trimmed, missing fields as ''."""
    name: str = ""
    cpf: str = ""
    birth_date: str = ""
    phone: str = ""
    cellphone: str = ""
    email: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, v):
        return (v or "").strip()


class PatientCreate(BaseModel):
    """Validated record as written to the store; blanks become None."""
    name: Optional[str] = None
    cpf: Optional[str] = None
    birth_date: Optional[str] = None
    phone: Optional[str] = None
    cellphone: Optional[str] = None
    email: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        return v or None

    @classmethod
    def from_form(cls, form: PatientForm) -> "PatientCreate":
        return cls(**form.model_dump())
