# backend/patient_registry/routers/patients.py
from fastapi import APIRouter, Request, Depends, Form
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session
from typing import Any, Dict, Optional
import logging

from ..core.db import get_db
from ..core.template_engine import templates
from ..schemas.patient import PatientForm, PatientCreate
from ..services.validation import validate_patient
from ..services.patient_service import create_patient

router = APIRouter(tags=["Patients"])
logger = logging.getLogger(__name__)


# -------------------------------
# Helper: render the registration page
# -------------------------------
def page_form(request: Request, flash: Optional[Dict[str, Any]] = None, old: Optional[Dict[str, str]] = None):
    """Render the form with an optional flash banner and previously typed values.

    ``flash`` keys: ``kind`` ("success" | "error"), ``title``, ``text``, ``errors``.
    Values are escaped by the template engine.
    """
    return templates.TemplateResponse(
        request,
        "patients/form.html",
        {"flash": flash, "old": old or {}},
    )


# -------------------------------
# Empty form
# -------------------------------
@router.get("/", response_class=HTMLResponse)
def registration_page(request: Request):
    return page_form(request)


# -------------------------------
# Submit registration
# -------------------------------
@router.post("/patients", response_class=HTMLResponse)
def register_patient(
    request: Request,
    name: str = Form(""),
    cpf: str = Form(""),
    birth_date: str = Form(""),
    phone: str = Form(""),
    cellphone: str = Form(""),
    email: str = Form(""),
    db: Session = Depends(get_db),
):
    form = PatientForm(
        name=name, cpf=cpf, birth_date=birth_date,
        phone=phone, cellphone=cellphone, email=email,
    )
    old = form.model_dump()

    errors = validate_patient(form)
    if errors:
        logger.info("[PATIENT] rejected submission with %d error(s)", len(errors))
        return page_form(request, {"kind": "error", "title": "Erro:", "errors": errors}, old)

    patient, error = create_patient(db, PatientCreate.from_form(form))
    if error:
        return page_form(request, {"kind": "error", "title": "Erro ao salvar:", "text": error}, old)

    return page_form(request, {"kind": "success", "text": "Paciente cadastrado com sucesso."})
