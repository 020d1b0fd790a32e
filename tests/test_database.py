"""Tests for the schema contract and the read-only SQLite data source."""

import sqlite3
import threading

import pytest

from healthcare_metrics import config
from healthcare_metrics.database import SQLiteDataSource, get_connection, init_database


class TestSchemaConstraints:
    """Tests for the constraints the schema enforces."""

    def test_tables_created(self, db_connection):
        rows = db_connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name"
        ).fetchall()
        assert [row["name"] for row in rows] == [
            "appointments", "diagnoses", "doctors", "medications", "patients",
        ]

    def test_init_is_idempotent(self, db_path, records):
        records.patient(1)
        init_database(db_path)

        conn = get_connection(db_path)
        count = conn.execute("SELECT COUNT(*) FROM patients").fetchone()[0]
        conn.close()
        assert count == 1

    def test_negative_age_rejected(self, records):
        with pytest.raises(sqlite3.IntegrityError):
            records.patient(1, age=-1)

    def test_negative_experience_rejected(self, records):
        with pytest.raises(sqlite3.IntegrityError):
            records.doctor(1, experience_years=-3)

    def test_doctor_contact_unique(self, db_connection, records):
        records.doctor(1)
        with pytest.raises(sqlite3.IntegrityError):
            db_connection.execute(
                "INSERT INTO doctors (doctor_id, name, contact_number) VALUES (2, 'Dr. Copy', '555-9001')"
            )

    def test_appointment_requires_existing_patient(self, records):
        records.doctor(1)
        with pytest.raises(sqlite3.IntegrityError):
            records.appointment(99, 1)

    def test_medication_end_before_start_rejected(self, records):
        records.patient(1)
        records.doctor(1)
        diagnosis_id = records.diagnosis(1, 1)
        with pytest.raises(sqlite3.IntegrityError):
            records.medication(diagnosis_id, start_date="2024-02-01", end_date="2024-01-01")

    def test_medication_same_day_allowed(self, records):
        records.patient(1)
        records.doctor(1)
        diagnosis_id = records.diagnosis(1, 1)
        assert records.medication(diagnosis_id, start_date="2024-02-01", end_date="2024-02-01")


class TestSQLiteDataSource:
    """Tests for SQLiteDataSource."""

    def test_executes_with_named_params(self, data_source, records):
        records.patient(1, name="John Smith")
        cursor = data_source.execute(
            "SELECT patient_id, name FROM patients WHERE name = :name", {"name": "John Smith"}
        )
        assert cursor.fetchall() == [(1, "John Smith")]
        assert [col[0] for col in cursor.description] == ["patient_id", "name"]

    def test_rejects_writes(self, data_source, records):
        records.patient(1)
        with pytest.raises(sqlite3.OperationalError):
            data_source.execute("DELETE FROM patients", {})

    def test_context_manager_closes(self, db_path):
        with SQLiteDataSource(db_path) as source:
            source.execute("SELECT 1", {})
        with pytest.raises(sqlite3.ProgrammingError):
            source.execute("SELECT 1", {})

    def test_default_path_from_config(self, tmp_path, monkeypatch):
        path = tmp_path / "configured.db"
        monkeypatch.setattr(config, "DB_PATH", path)

        init_database()
        with SQLiteDataSource() as source:
            assert source.execute("SELECT COUNT(*) FROM doctors", {}).fetchall() == [(0,)]
        assert path.exists()

    def test_cursor_close_releases_connection(self, data_source, records):
        records.patient(1)
        cursor = data_source.execute("SELECT patient_id FROM patients", {})
        cursor.close()
        with pytest.raises(sqlite3.ProgrammingError):
            cursor.fetchall()

    def test_execute_from_another_thread(self, data_source, records):
        records.patient(1)
        rows = []
        errors = []

        def worker():
            try:
                rows.extend(data_source.execute("SELECT patient_id FROM patients", {}).fetchall())
            except sqlite3.Error as e:
                errors.append(e)

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert errors == []
        assert rows == [(1,)]
