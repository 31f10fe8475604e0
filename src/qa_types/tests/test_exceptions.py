import pytest
from sqlalchemy.exc import IntegrityError

from qa_types.exceptions import (
    DuplicateError,
    InvalidInputError,
    NotFoundError,
    QAError,
    RepositoryError,
    ScanError,
    ScanTimeoutError,
    ThresholdExceededError,
)
from qa_types.exceptions.mapper import db_error_handler, raise_mapped_integrity_error


def integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, Exception(message))


def test_payload_and_status():
    err = NotFoundError("User 42 not found", fields=["user_id"])
    assert err.to_payload() == {"detail": "User 42 not found", "code": "not_found", "fields": ["user_id"]}
    assert err.http_status() == 404
    assert str(err) == "User 42 not found (fields: user_id; code: not_found)"


def test_unknown_code_maps_to_400():
    assert QAError("boom").http_status() == 400
    assert ThresholdExceededError(0.7, 0.5).http_status() == 400


def test_threshold_message_names_operation():
    err = ThresholdExceededError(0.75, 0.5, operation="simulated_workload")
    assert "simulated_workload took 0.750s" in err.message
    assert err.elapsed == 0.75
    assert err.threshold == 0.5


def test_scan_timeout_is_a_scan_error():
    err = ScanTimeoutError("spider", 60, 40)
    assert isinstance(err, ScanError)
    assert err.error_code == "scan_timeout"
    assert "last progress 40%" in err.message


@pytest.mark.parametrize(
    "message, fields",
    [
        ("UNIQUE constraint failed: users.name", ["name"]),
        ('duplicate key value violates unique constraint "uq_users_name"\nDETAIL:  Key (name)=(John Doe) already exists.', ["name"]),
    ],
)
def test_unique_violation_becomes_duplicate(message, fields):
    with pytest.raises(DuplicateError) as exc_info:
        raise_mapped_integrity_error(integrity_error(message), "User")
    assert exc_info.value.fields == fields
    assert exc_info.value.http_status() == 409


def test_other_integrity_error_becomes_repository_error():
    with pytest.raises(RepositoryError) as exc_info:
        raise_mapped_integrity_error(integrity_error("NOT NULL constraint failed: users.name"), "User")
    assert isinstance(exc_info.value.__cause__, IntegrityError)


async def test_db_error_handler_passes_app_errors_through(db_session):
    with pytest.raises(InvalidInputError):
        async with db_error_handler(db_session, "User"):
            raise InvalidInputError("bad", fields=["name"])


async def test_db_error_handler_wraps_unexpected_errors(db_session):
    with pytest.raises(RepositoryError) as exc_info:
        async with db_error_handler(db_session, "User"):
            raise RuntimeError("connection reset")
    assert isinstance(exc_info.value.__cause__, RuntimeError)
