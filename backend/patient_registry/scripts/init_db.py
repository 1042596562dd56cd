"""Create the patients table: python -m patient_registry.scripts.init_db"""
from patient_registry.core.logging import setup_logging
from patient_registry.core.db import Base, engine
import patient_registry.models.patient  # noqa: F401
import logging

setup_logging()
logger = logging.getLogger(__name__)

logger.info("⚙️ Creating tables...")
Base.metadata.create_all(bind=engine)
logger.info("✅ Database schema ready.")
