"""Shared pytest fixtures."""

import pytest

from healthcare_metrics.database import SQLiteDataSource, get_connection, init_database
from healthcare_metrics.executor import QueryCatalogue


class Records:
    """Inserts test rows through a writable connection."""

    def __init__(self, conn):
        self.conn = conn

    def patient(self, patient_id, name=None, age=40, contact_number=None, gender="Female"):
        self.conn.execute(
            """INSERT INTO patients (patient_id, name, age, gender, address, contact_number)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (patient_id, name or f"Patient {patient_id}", age, gender, "1 Test St",
             contact_number or f"555-{patient_id:04d}"),
        )
        self.conn.commit()
        return patient_id

    def doctor(self, doctor_id, name=None, specialization="General Practice", experience_years=10):
        self.conn.execute(
            """INSERT INTO doctors (doctor_id, name, specialization, experience_years, contact_number)
               VALUES (?, ?, ?, ?, ?)""",
            (doctor_id, name or f"Dr. {doctor_id}", specialization, experience_years,
             f"555-9{doctor_id:03d}"),
        )
        self.conn.commit()
        return doctor_id

    def appointment(self, patient_id, doctor_id, appointment_date="2024-01-15",
                    status="Completed", reason="Checkup", appointment_id=None):
        cursor = self.conn.execute(
            """INSERT INTO appointments (appointment_id, patient_id, doctor_id, appointment_date, reason, status)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (appointment_id, patient_id, doctor_id, appointment_date, reason, status),
        )
        self.conn.commit()
        return cursor.lastrowid

    def diagnosis(self, patient_id, doctor_id, diagnosis="Hypertension",
                  diagnosis_date="2024-01-15", treatment="Medication"):
        cursor = self.conn.execute(
            """INSERT INTO diagnoses (patient_id, doctor_id, diagnosis_date, diagnosis, treatment)
               VALUES (?, ?, ?, ?, ?)""",
            (patient_id, doctor_id, diagnosis_date, diagnosis, treatment),
        )
        self.conn.commit()
        return cursor.lastrowid

    def medication(self, diagnosis_id, medication_name="Lisinopril", start_date="2024-01-01",
                   end_date=None, dosage="10mg"):
        cursor = self.conn.execute(
            """INSERT INTO medications (diagnosis_id, medication_name, dosage, start_date, end_date)
               VALUES (?, ?, ?, ?, ?)""",
            (diagnosis_id, medication_name, dosage, start_date, end_date),
        )
        self.conn.commit()
        return cursor.lastrowid


@pytest.fixture
def db_path(tmp_path):
    """A fresh SQLite database with the schema applied."""
    path = tmp_path / "metrics.db"
    init_database(path)
    return path


@pytest.fixture
def db_connection(db_path):
    """Writable connection for arranging test data."""
    conn = get_connection(db_path)
    yield conn
    conn.close()


@pytest.fixture
def records(db_connection):
    return Records(db_connection)


@pytest.fixture
def data_source(db_path):
    source = SQLiteDataSource(db_path)
    yield source
    source.close()


@pytest.fixture
def catalogue(data_source):
    return QueryCatalogue(data_source)
