import unittest
from datetime import date, timedelta

from patient_registry.schemas.patient import PatientForm, PatientCreate
from patient_registry.services.validation import validate_patient

NAME_LENGTH = "Nome deve ter ao menos 3 caracteres."
NAME_CHARS = "Nome não deve conter números ou caracteres especiais."
CPF_LENGTH = "CPF deve ter 11 dígitos."
CPF_DIGITS = "CPF deve conter apenas números."
EMAIL = "E-mail inválido."
BIRTH_FORMAT = "Data no formato YYYY-MM-DD."
BIRTH_FUTURE = "Data de nascimento não pode ser futura."
PHONE = "Telefone (fixo) deve conter apenas números."
CELLPHONE = "Celular deve conter apenas números."


def make_form(**overrides):
    data = {
        "name": "Maria da Silva",
        "cpf": "12345678901",
        "birth_date": "1990-05-17",
        "phone": "1133334444",
        "cellphone": "11988887777",
        "email": "maria@exemplo.com.br",
    }
    data.update(overrides)
    return PatientForm(**data)


class TestNameRules(unittest.TestCase):
    def test_valid_record(self):
        self.assertEqual(validate_patient(make_form()), [])

    def test_short_name(self):
        errors = validate_patient(make_form(name="Al"))
        self.assertEqual(errors, [NAME_LENGTH])

    def test_empty_name_reports_both(self):
        errors = validate_patient(make_form(name=""))
        self.assertEqual(errors, [NAME_LENGTH, NAME_CHARS])

    def test_name_with_digits_or_symbols(self):
        for name in ("Maria 2", "R2-D2 Silva", "Ana@Souza", "João_Pedro"):
            with self.subTest(name=name):
                self.assertIn(NAME_CHARS, validate_patient(make_form(name=name)))

    def test_accented_name(self):
        self.assertEqual(validate_patient(make_form(name="José Ávila Conceição")), [])

    def test_length_counts_characters(self):
        self.assertNotIn(NAME_LENGTH, validate_patient(make_form(name="Íñé")))


class TestCpfRules(unittest.TestCase):
    def test_wrong_length(self):
        for cpf in ("", "123", "1234567890", "123456789012"):
            with self.subTest(cpf=cpf):
                errors = validate_patient(make_form(cpf=cpf))
                self.assertIn(CPF_LENGTH, errors)
                self.assertNotIn(CPF_DIGITS, errors)

    def test_wrong_length_with_letters_only_reports_length(self):
        errors = validate_patient(make_form(cpf="abc"))
        self.assertEqual(errors, [CPF_LENGTH])

    def test_eleven_chars_with_non_digit(self):
        for cpf in ("1234567890a", "123.456.789", "１２３４５６７８９０１"):
            with self.subTest(cpf=cpf):
                errors = validate_patient(make_form(cpf=cpf))
                self.assertEqual(errors, [CPF_DIGITS])


class TestOptionalFields(unittest.TestCase):
    def test_blank_optionals_are_accepted(self):
        form = make_form(birth_date="", phone="", cellphone="", email="")
        self.assertEqual(validate_patient(form), [])

    def test_email(self):
        self.assertEqual(validate_patient(make_form(email="a@b.com")), [])
        for email in ("not-an-email", "a@", "@b.com", "a b@c.com"):
            with self.subTest(email=email):
                self.assertEqual(validate_patient(make_form(email=email)), [EMAIL])

    def test_non_ascii_mailbox_rejected(self):
        for email in ("josé@exemplo.com", "ñandú@exemplo.com.br"):
            with self.subTest(email=email):
                self.assertEqual(validate_patient(make_form(email=email)), [EMAIL])

    def test_reserved_domains_rejected(self):
        for email in ("a@b.test", "user@host.local", "root@localhost"):
            with self.subTest(email=email):
                self.assertEqual(validate_patient(make_form(email=email)), [EMAIL])

    def test_birth_date_format(self):
        for value in ("17/05/1990", "1990-5-17", "abc"):
            with self.subTest(value=value):
                self.assertEqual(validate_patient(make_form(birth_date=value)), [BIRTH_FORMAT])

    def test_impossible_calendar_day_rolls_over(self):
        for value in ("2020-02-31", "0000-00-00", "1990-13-01"):
            with self.subTest(value=value):
                self.assertEqual(validate_patient(make_form(birth_date=value)), [])
        self.assertEqual(validate_patient(make_form(birth_date="2999-02-31")), [BIRTH_FUTURE])

    def test_day_rollover_into_tomorrow_is_future(self):
        today = date.today()
        value = f"{today.year:04d}-{today.month:02d}-{today.day + 1:02d}"
        self.assertEqual(validate_patient(make_form(birth_date=value)), [BIRTH_FUTURE])

    def test_future_birth_date(self):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        self.assertEqual(validate_patient(make_form(birth_date=tomorrow)), [BIRTH_FUTURE])

    def test_today_and_past_birth_date(self):
        for value in (date.today().isoformat(), "1900-01-01"):
            with self.subTest(value=value):
                self.assertEqual(validate_patient(make_form(birth_date=value)), [])

    def test_phone_numbers(self):
        for good in ("12345678", "123456789012345"):
            with self.subTest(good=good):
                self.assertEqual(validate_patient(make_form(phone=good, cellphone=good)), [])
        for bad in ("1234567", "1234567890123456", "(11) 3333-4444", "+5511988887777"):
            with self.subTest(bad=bad):
                self.assertEqual(validate_patient(make_form(phone=bad)), [PHONE])
                self.assertEqual(validate_patient(make_form(cellphone=bad)), [CELLPHONE])


class TestCombinedErrors(unittest.TestCase):
    def test_multiple_violations_are_all_reported(self):
        errors = validate_patient(make_form(name="Al", cpf="12345"))
        self.assertEqual(errors, [NAME_LENGTH, CPF_LENGTH])

    def test_error_order(self):
        form = make_form(name="1", cpf="12", email="x", birth_date="abc", phone="a", cellphone="b")
        self.assertEqual(
            validate_patient(form),
            [NAME_LENGTH, NAME_CHARS, CPF_LENGTH, EMAIL, BIRTH_FORMAT, PHONE, CELLPHONE],
        )


class TestPatientSchemas(unittest.TestCase):
    def test_form_trims_and_defaults(self):
        form = PatientForm(name="  Maria  ", cpf=None)
        self.assertEqual(form.name, "Maria")
        self.assertEqual(form.cpf, "")
        self.assertEqual(form.email, "")

    def test_blank_fields_become_none(self):
        record = PatientCreate.from_form(make_form(phone="", email=""))
        self.assertIsNone(record.phone)
        self.assertIsNone(record.email)
        self.assertEqual(record.cpf, "12345678901")


if __name__ == "__main__":
    unittest.main()
