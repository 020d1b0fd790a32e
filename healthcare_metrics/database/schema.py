"""
Healthcare Metrics Database Schema
Patients, doctors, appointments, diagnoses and prescribed medications.
"""

SCHEMA = """
-- =============================================================================
-- 1. PATIENTS - Demographics and contact details
-- =============================================================================
CREATE TABLE IF NOT EXISTS patients (
    patient_id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    age INTEGER CHECK (age >= 0),
    gender TEXT,
    address TEXT,
    contact_number TEXT
);

CREATE INDEX IF NOT EXISTS idx_patients_contact ON patients(contact_number);


-- =============================================================================
-- 2. DOCTORS - Practitioners and their specialization
-- =============================================================================
CREATE TABLE IF NOT EXISTS doctors (
    doctor_id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    specialization TEXT,
    experience_years INTEGER CHECK (experience_years >= 0),
    contact_number TEXT UNIQUE
);

CREATE INDEX IF NOT EXISTS idx_doctors_specialization ON doctors(specialization);


-- =============================================================================
-- 3. APPOINTMENTS - Patient visits booked with a doctor
-- =============================================================================
-- Status is an open set: Completed, Scheduled, Cancelled, ...
CREATE TABLE IF NOT EXISTS appointments (
    appointment_id INTEGER PRIMARY KEY,
    patient_id INTEGER NOT NULL,
    doctor_id INTEGER NOT NULL,
    appointment_date TEXT NOT NULL,  -- YYYY-MM-DD
    reason TEXT,
    status TEXT,

    FOREIGN KEY (patient_id) REFERENCES patients(patient_id),
    FOREIGN KEY (doctor_id) REFERENCES doctors(doctor_id)
);

CREATE INDEX IF NOT EXISTS idx_appointments_patient ON appointments(patient_id);
CREATE INDEX IF NOT EXISTS idx_appointments_doctor ON appointments(doctor_id);
CREATE INDEX IF NOT EXISTS idx_appointments_status ON appointments(status);


-- =============================================================================
-- 4. DIAGNOSES - Diagnosis and treatment recorded by a doctor
-- =============================================================================
CREATE TABLE IF NOT EXISTS diagnoses (
    diagnosis_id INTEGER PRIMARY KEY,
    patient_id INTEGER NOT NULL,
    doctor_id INTEGER NOT NULL,
    diagnosis_date TEXT NOT NULL,  -- YYYY-MM-DD
    diagnosis TEXT NOT NULL,
    treatment TEXT,

    FOREIGN KEY (patient_id) REFERENCES patients(patient_id),
    FOREIGN KEY (doctor_id) REFERENCES doctors(doctor_id)
);

CREATE INDEX IF NOT EXISTS idx_diagnoses_patient ON diagnoses(patient_id);
CREATE INDEX IF NOT EXISTS idx_diagnoses_doctor ON diagnoses(doctor_id);


-- =============================================================================
-- 5. MEDICATIONS - Prescriptions attached to a diagnosis
-- =============================================================================
-- end_date is NULL while the medication is ongoing
CREATE TABLE IF NOT EXISTS medications (
    medication_id INTEGER PRIMARY KEY,
    diagnosis_id INTEGER NOT NULL,
    medication_name TEXT NOT NULL,
    dosage TEXT,
    start_date TEXT NOT NULL,  -- YYYY-MM-DD
    end_date TEXT,

    FOREIGN KEY (diagnosis_id) REFERENCES diagnoses(diagnosis_id),
    CHECK (end_date IS NULL OR end_date >= start_date)
);

CREATE INDEX IF NOT EXISTS idx_medications_diagnosis ON medications(diagnosis_id);
CREATE INDEX IF NOT EXISTS idx_medications_name ON medications(medication_name);
"""
