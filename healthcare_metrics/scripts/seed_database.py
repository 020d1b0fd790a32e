"""Seed the database with mock patients, doctors, appointments, diagnoses and medications."""

from pathlib import Path

from healthcare_metrics.database import get_connection, init_database


MOCK_PATIENTS = [
    # (patient_id, name, age, gender, address, contact_number)
    (1, "John Smith", 45, "Male", "123 Main St, Springfield", "555-0101"),
    (2, "Sarah Johnson", 29, "Female", "456 Oak Ave, Riverside", "555-0102"),
    (3, "Michael Chen", 62, "Male", "789 Pine Rd, Lakeside", "555-0103"),
    (4, "Emily Davis", 34, "Female", "321 Elm St, Springfield", "555-0234"),
    (5, "Robert Wilson", 71, "Male", "654 Maple Dr, Hillview", "555-0105"),
    (6, "Maria Garcia", 16, "Female", "987 Cedar Ln, Riverside", "555-0106"),
    (7, "David Brown", 38, "Male", "147 Birch Ct, Lakeside", "555-1234"),
    (8, "Linda Martinez", None, "Female", "258 Walnut Way, Hillview", "555-0108"),
]

MOCK_DOCTORS = [
    # (doctor_id, name, specialization, experience_years, contact_number)
    (1, "Dr. Alice Morgan", "Cardiology", 15, "555-9001"),
    (2, "Dr. Brian Lee", "Neurology", 8, "555-9002"),
    (3, "Dr. Carla Ortiz", "Pediatrics", 12, "555-9003"),
    (4, "Dr. Daniel Kim", "Orthopedics", 5, "555-9004"),
    (5, "Dr. Erin Patel", "Dermatology", 3, "555-9005"),
]

MOCK_APPOINTMENTS = [
    # (appointment_id, patient_id, doctor_id, appointment_date, reason, status)
    (1, 1, 1, "2024-01-10", "Chest pain", "Completed"),
    (2, 2, 2, "2024-01-12", "Migraine", "Completed"),
    (3, 3, 1, "2024-01-15", "Follow-up", "Completed"),
    (4, 4, 4, "2024-02-01", "Knee injury", "Scheduled"),
    (5, 5, 1, "2024-02-03", "Palpitations", "Completed"),
    (6, 6, 3, "2024-02-05", "Vaccination", "Cancelled"),
    (7, 1, 2, "2024-02-10", "Dizziness", "Completed"),
    (8, 3, 4, "2024-02-14", "Hip pain", "Scheduled"),
]

MOCK_DIAGNOSES = [
    # (diagnosis_id, patient_id, doctor_id, diagnosis_date, diagnosis, treatment)
    (1, 1, 1, "2024-01-10", "Hypertension", "Medication"),
    (2, 2, 2, "2024-01-12", "Migraine", "Medication"),
    (3, 3, 1, "2024-01-15", "Hypertension", "Lifestyle changes"),
    (4, 5, 1, "2024-02-03", "Arrhythmia", "Medication"),
    (5, 1, 2, "2024-02-10", "Vertigo", "Physical therapy"),
    (6, 7, 5, "2024-02-20", "Eczema", "Topical cream"),
]

MOCK_MEDICATIONS = [
    # (medication_id, diagnosis_id, medication_name, dosage, start_date, end_date)
    (1, 1, "Lisinopril", "10mg", "2024-01-10", "2024-04-10"),
    (2, 2, "Sumatriptan", "50mg", "2024-01-12", "2024-01-26"),
    (3, 3, "Lisinopril", "5mg", "2024-01-15", None),
    (4, 4, "Metoprolol", "25mg", "2024-02-03", "2024-03-04"),
    (5, 5, "Meclizine", "25mg", "2024-02-10", "2024-02-17"),
    (6, 6, "Hydrocortisone", "1%", "2024-02-20", "2024-03-05"),
]


def seed_database(db_path: str | Path | None = None) -> dict[str, int]:
    """Initialize and seed the database with mock data. Returns row counts per table."""
    init_database(db_path)

    conn = get_connection(db_path)
    conn.executemany(
        "INSERT OR IGNORE INTO patients VALUES (?, ?, ?, ?, ?, ?)", MOCK_PATIENTS
    )
    conn.executemany(
        "INSERT OR IGNORE INTO doctors VALUES (?, ?, ?, ?, ?)", MOCK_DOCTORS
    )
    conn.executemany(
        "INSERT OR IGNORE INTO appointments VALUES (?, ?, ?, ?, ?, ?)", MOCK_APPOINTMENTS
    )
    conn.executemany(
        "INSERT OR IGNORE INTO diagnoses VALUES (?, ?, ?, ?, ?, ?)", MOCK_DIAGNOSES
    )
    conn.executemany(
        "INSERT OR IGNORE INTO medications VALUES (?, ?, ?, ?, ?, ?)", MOCK_MEDICATIONS
    )
    conn.commit()
    conn.close()

    return {
        "patients": len(MOCK_PATIENTS),
        "doctors": len(MOCK_DOCTORS),
        "appointments": len(MOCK_APPOINTMENTS),
        "diagnoses": len(MOCK_DIAGNOSES),
        "medications": len(MOCK_MEDICATIONS),
    }


if __name__ == "__main__":
    counts = seed_database()
    print("Database seeded successfully!")
    for table, count in counts.items():
        print(f"  - {count} {table}")
