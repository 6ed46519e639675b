from __future__ import annotations

from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest
from google.api_core.datetime_helpers import DatetimeWithNanoseconds

from school_manager.common.records import Identifiable, camel_case
from school_manager.common.timestamps import Timestamp, TimestampNormalizer
from school_manager.core.enums import Gender, StudentStatus
from school_manager.core.exceptions import ValidationError
from school_manager.payments.model import Payment
from school_manager.students.model import Grade, Student


def test_camel_case():
    assert camel_case("birth_certificate_id") == "birthCertificateId"
    assert camel_case("uid") == "uid"


def test_student_from_json_reads_camel_case_body():
    student = Student.from_json(
        {
            "name": "Lerato",
            "surname": "Mokoena",
            "gender": "FEMALE",
            "dateOfBirth": "2015-03-02",
            "birthCertificateId": "BC-1",
            "yearOfAdmission": "2024",
            "grades": [{"subject": "Maths", "score": "A", "date": "2025-06-01"}],
            "somethingElse": "ignored",
        }
    )

    assert student.name == "Lerato"
    assert student.gender is Gender.FEMALE
    assert student.date_of_birth == Timestamp(1425254400, 0)
    assert student.year_of_admission == 2024
    assert student.grades == [Grade(subject="Maths", score="A", date=Timestamp(1748736000, 0))]
    # Missing keys keep their defaults.
    assert student.status is StudentStatus.PENDING
    assert student.created_at is None


def test_from_json_uses_the_given_normalizer_for_bare_date_times():
    sast = TimestampNormalizer(ZoneInfo("Africa/Johannesburg"))

    student = Student.from_json({"dateOfBirth": "2015-03-02T02:00"}, timestamps=sast)

    assert student.date_of_birth == Timestamp(1425254400, 0)


def test_bad_enum_value_is_a_validation_error():
    with pytest.raises(ValidationError, match="gender"):
        Student.from_json({"gender": "UNKNOWN"})


def test_bad_amount_is_a_validation_error():
    with pytest.raises(ValidationError, match="amount"):
        Payment.from_json({"amount": "lots"})


def test_non_object_body_is_rejected():
    with pytest.raises(ValidationError):
        Student.from_json(["not", "an", "object"])


def test_to_document_uses_store_types():
    payment = Payment(
        payment_id="p1",
        amount=Decimal("150.50"),
        created_at=Timestamp(1760183400, 5),
    )

    doc = payment.to_document()

    assert doc["paymentId"] == "p1"
    assert doc["amount"] == 150.5
    assert doc["status"] == "PENDING"
    assert isinstance(doc["createdAt"], DatetimeWithNanoseconds)
    assert doc["createdAt"].nanosecond == 5
    assert doc["paidAt"] is None


def test_to_json_renders_iso_timestamps_and_nested_records():
    student = Student(
        student_id="s1",
        grades=[Grade(subject="Art", date=Timestamp(1760183400, 0))],
        created_at=Timestamp(1760183400, 0),
    )

    body = student.to_json()

    assert body["createdAt"] == "2025-10-11T11:50:00Z"
    assert body["grades"] == [
        {"subject": "Art", "score": None, "term": None, "date": "2025-10-11T11:50:00Z", "comments": None}
    ]


def test_from_document_reads_store_datetimes():
    stored = DatetimeWithNanoseconds(2025, 10, 11, 11, 50, nanosecond=7, tzinfo=ZoneInfo("UTC"))

    payment = Payment.from_document({"paymentId": "p1", "amount": 12.5, "createdAt": stored, "status": "COMPLETED"})

    assert payment.amount == Decimal("12.5")
    assert payment.created_at == Timestamp(1760183400, 7)


def test_entities_in_mapped_collections_accept_generated_ids():
    student = Student()

    assert isinstance(student, Identifiable)
    student.assign_id("abc")
    assert student.student_id == "abc"
