from sqlalchemy.orm import Session
from typing import Optional, Tuple
import logging

from ..models.patient import Patient
from ..schemas.patient import PatientCreate

logger = logging.getLogger(__name__)


def create_patient(db: Session, data: PatientCreate) -> Tuple[Optional[Patient], Optional[str]]:
    """Insert one patient row. Returns ``(patient, None)`` or ``(None, error)``."""
    patient = Patient(**data.model_dump())
    try:
        db.add(patient)
        db.commit()
        db.refresh(patient)
    except Exception as e:
        db.rollback()
        logger.error("[PATIENT] insert failed: %s", e)
        return None, str(e)
    logger.info("[PATIENT] registered id=%s", patient.id)
    return patient, None
