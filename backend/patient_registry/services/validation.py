# backend/patient_registry/services/validation.py
"""Registration form rules.

Each rule is a ``(predicate, message)`` pair; the predicate returns True when
the submission violates it. All rules run, so several messages can come back
for one submission, in table order.
"""
from datetime import date, timedelta
from typing import Callable, List, Tuple
import re

from email_validator import validate_email, EmailNotValidError

from ..schemas.patient import PatientForm

NAME_RE = re.compile(r"[A-Za-zÀ-ÿ\s]+")
CPF_RE = re.compile(r"[0-9]{11}")
BIRTH_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
PHONE_RE = re.compile(r"[0-9]{8,15}")


def _invalid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return True
    return False


def _parse_birth_date(value: str):
    """Calendar day for a ``YYYY-MM-DD`` string.

    Out-of-range months and days roll over (``2020-02-31`` is 2 March 2020).
    Returns None when the pattern does not match or the year leaves 1..9999.
    """
    if not BIRTH_DATE_RE.fullmatch(value):
        return None
    year, month, day = (int(part) for part in value.split("-"))
    year, month = year + (month - 1) // 12, (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def _cpf_length(f: PatientForm) -> bool:
    return len(f.cpf) != 11


def _cpf_digits(f: PatientForm) -> bool:
    # only reported when the length is right
    return len(f.cpf) == 11 and not CPF_RE.fullmatch(f.cpf)


def _future_birth_date(f: PatientForm) -> bool:
    parsed = _parse_birth_date(f.birth_date)
    return parsed is not None and parsed > date.today()


Rule = Tuple[Callable[[PatientForm], bool], str]

RULES: List[Rule] = [
    (lambda f: len(f.name) < 3, "Nome deve ter ao menos 3 caracteres."),
    (lambda f: not NAME_RE.fullmatch(f.name), "Nome não deve conter números ou caracteres especiais."),
    (_cpf_length, "CPF deve ter 11 dígitos."),
    (_cpf_digits, "CPF deve conter apenas números."),
    (lambda f: f.email != "" and _invalid_email(f.email), "E-mail inválido."),
    (lambda f: f.birth_date != "" and not BIRTH_DATE_RE.fullmatch(f.birth_date), "Data no formato YYYY-MM-DD."),
    (lambda f: f.birth_date != "" and _future_birth_date(f), "Data de nascimento não pode ser futura."),
    (lambda f: f.phone != "" and not PHONE_RE.fullmatch(f.phone), "Telefone (fixo) deve conter apenas números."),
    (lambda f: f.cellphone != "" and not PHONE_RE.fullmatch(f.cellphone), "Celular deve conter apenas números."),
]


def validate_patient(form: PatientForm) -> List[str]:
    """Return the messages of every violated rule; empty means valid."""
    return [message for check, message in RULES if check(form)]
