from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from ..core.db import Base


class Patient(Base):
    __tablename__ = "patients"

    # --- Primary identifier ---
    id = Column(Integer, primary_key=True, index=True)

    # --- Registration details (validated by the form, nullable in storage) ---
    name = Column(Text, nullable=True)
    cpf = Column(String(11), nullable=True, index=True)
    birth_date = Column(String(10), nullable=True)  # YYYY-MM-DD

    # --- Contact ---
    phone = Column(String(15), nullable=True)
    cellphone = Column(String(15), nullable=True)
    email = Column(String(254), nullable=True)

    # --- Timestamps ---
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Patient(id={self.id}, name='{self.name}', cpf='{self.cpf}')>"
