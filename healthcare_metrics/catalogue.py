"""Named, parameterized analytic queries over the healthcare schema."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from .parameters import (
    CompletedAppointmentsParams,
    ContactSuffixParams,
    DoctorFilterParams,
    MedicationNameParams,
    NoParams,
    QueryParams,
    describe_fields,
)


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: str
    required: bool
    default: Any = None


@dataclass(frozen=True)
class QueryDescriptor:
    """A catalogued read-only statement and its declared inputs and outputs."""
    name: str
    description: str
    statement: str
    columns: tuple[str, ...]
    params_model: type[QueryParams] = NoParams

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        return tuple(
            ParameterSpec(name, type_name, required, default)
            for name, type_name, required, default in describe_fields(self.params_model)
        )


QUERIES = (
    QueryDescriptor(
        name="completed-appointments",
        description="Appointments with a given status, joined with patient and doctor details.",
        statement="""
            SELECT a.appointment_id, a.appointment_date,
                   p.name AS patient_name, d.name AS doctor_name, d.specialization,
                   a.reason, a.status
            FROM appointments a
            JOIN patients p ON p.patient_id = a.patient_id
            JOIN doctors d ON d.doctor_id = a.doctor_id
            WHERE a.status = :status
              AND (:since IS NULL OR a.appointment_date >= :since)
              AND (:until IS NULL OR a.appointment_date <= :until)
            ORDER BY a.appointment_date, a.appointment_id
        """,
        columns=(
            "appointment_id", "appointment_date", "patient_name", "doctor_name",
            "specialization", "reason", "status",
        ),
        params_model=CompletedAppointmentsParams,
    ),
    QueryDescriptor(
        name="patients-without-appointments",
        description="Patients who have never booked an appointment.",
        statement="""
            SELECT p.patient_id, p.name, p.contact_number
            FROM patients p
            LEFT JOIN appointments a ON a.patient_id = p.patient_id
            WHERE a.appointment_id IS NULL
            ORDER BY p.patient_id
        """,
        columns=("patient_id", "name", "contact_number"),
    ),
    QueryDescriptor(
        name="diagnosis-counts-per-doctor",
        description="Number of diagnoses recorded by each doctor, including doctors with none.",
        statement="""
            SELECT d.doctor_id, d.name AS doctor_name, d.specialization,
                   COUNT(dg.diagnosis_id) AS diagnosis_count
            FROM doctors d
            LEFT JOIN diagnoses dg ON dg.doctor_id = d.doctor_id
            WHERE (:specialization IS NULL OR d.specialization = :specialization)
            GROUP BY d.doctor_id, d.name, d.specialization
            ORDER BY diagnosis_count DESC, d.doctor_id
        """,
        columns=("doctor_id", "doctor_name", "specialization", "diagnosis_count"),
        params_model=DoctorFilterParams,
    ),
    QueryDescriptor(
        name="appointment-diagnosis-mismatch",
        description=(
            "Appointments with no diagnosis for the same patient and doctor, "
            "and diagnoses with no matching appointment."
        ),
        # Two anti-joins instead of FULL OUTER JOIN, which SQLite < 3.39 lacks.
        statement="""
            SELECT a.appointment_id, NULL AS diagnosis_id, a.patient_id, a.doctor_id
            FROM appointments a
            LEFT JOIN diagnoses dg
                   ON dg.patient_id = a.patient_id AND dg.doctor_id = a.doctor_id
            WHERE dg.diagnosis_id IS NULL
            UNION ALL
            SELECT NULL AS appointment_id, dg.diagnosis_id, dg.patient_id, dg.doctor_id
            FROM diagnoses dg
            LEFT JOIN appointments a
                   ON a.patient_id = dg.patient_id AND a.doctor_id = dg.doctor_id
            WHERE a.appointment_id IS NULL
            ORDER BY patient_id, doctor_id, appointment_id, diagnosis_id
        """,
        columns=("appointment_id", "diagnosis_id", "patient_id", "doctor_id"),
    ),
    QueryDescriptor(
        name="doctor-appointment-rank",
        description="Doctors ranked by appointment volume; ties share a rank and the next rank is skipped.",
        statement="""
            SELECT d.doctor_id, d.name AS doctor_name,
                   COUNT(a.appointment_id) AS appointment_count,
                   RANK() OVER (ORDER BY COUNT(a.appointment_id) DESC) AS appointment_rank
            FROM doctors d
            LEFT JOIN appointments a ON a.doctor_id = d.doctor_id
            GROUP BY d.doctor_id, d.name
            ORDER BY appointment_rank, d.doctor_id
        """,
        columns=("doctor_id", "doctor_name", "appointment_count", "appointment_rank"),
    ),
    QueryDescriptor(
        name="age-bucket-histogram",
        description="Patient counts per age group: 18-30, 31-50, 51+ and Unknown.",
        statement="""
            SELECT CASE
                       WHEN age BETWEEN 18 AND 30 THEN '18-30'
                       WHEN age BETWEEN 31 AND 50 THEN '31-50'
                       WHEN age >= 51 THEN '51+'
                       ELSE 'Unknown'
                   END AS age_group,
                   COUNT(*) AS patient_count
            FROM patients
            GROUP BY age_group
            ORDER BY age_group
        """,
        columns=("age_group", "patient_count"),
    ),
    QueryDescriptor(
        name="patients-by-contact-suffix",
        description="Patients whose contact number ends with the given digits.",
        statement="""
            SELECT patient_id, name, contact_number
            FROM patients
            WHERE REPLACE(REPLACE(contact_number, '-', ''), ' ', '') LIKE '%' || :suffix
            ORDER BY patient_id
        """,
        columns=("patient_id", "name", "contact_number"),
        params_model=ContactSuffixParams,
    ),
    QueryDescriptor(
        name="patients-only-on-medication",
        description="Patients with no medication other than the given drug.",
        statement="""
            SELECT p.patient_id, p.name
            FROM patients p
            WHERE p.patient_id NOT IN (
                SELECT dg.patient_id
                FROM diagnoses dg
                JOIN medications m ON m.diagnosis_id = dg.diagnosis_id
                WHERE m.medication_name <> :medication_name
            )
            ORDER BY p.patient_id
        """,
        columns=("patient_id", "name"),
        params_model=MedicationNameParams,
    ),
    QueryDescriptor(
        name="avg-medication-duration",
        description="Average medication duration in days per diagnosis; ongoing medications are excluded.",
        statement="""
            SELECT dg.diagnosis,
                   AVG(ABS(julianday(m.end_date) - julianday(m.start_date))) AS avg_duration_days
            FROM diagnoses dg
            JOIN medications m ON m.diagnosis_id = dg.diagnosis_id
            WHERE m.end_date IS NOT NULL
            GROUP BY dg.diagnosis
            ORDER BY dg.diagnosis
        """,
        columns=("diagnosis", "avg_duration_days"),
    ),
    QueryDescriptor(
        name="top-doctor-by-patients",
        description="The doctor who has seen the most distinct patients; ties go to the lowest doctor id.",
        statement="""
            SELECT d.doctor_id, d.name AS doctor_name,
                   COUNT(DISTINCT a.patient_id) AS unique_patients
            FROM doctors d
            JOIN appointments a ON a.doctor_id = d.doctor_id
            GROUP BY d.doctor_id, d.name
            ORDER BY unique_patients DESC, d.doctor_id
            LIMIT 1
        """,
        columns=("doctor_id", "doctor_name", "unique_patients"),
    ),
)

CATALOGUE = MappingProxyType({query.name: query for query in QUERIES})
