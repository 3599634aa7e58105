"""Tests for gateway error behavior."""

from storage_gateway.core.exceptions import (
    BucketNotFoundError,
    ContentStoreError,
    FileTooSmallError,
    InternalServerError,
    RegistryError,
    create_error_response,
)


class TestExtendError:
    """Test contextual error wrapping."""

    def test_message_is_prefixed_and_kind_preserved(self):
        error = FileTooSmallError("a.txt", 0, 1)

        extended = error.extend_error("problem uploading")

        assert isinstance(extended, FileTooSmallError)
        assert extended.message == "problem uploading: file a.txt too small: 0 < 1"
        assert str(extended) == extended.message
        assert extended.status_code == 400
        assert extended.error_code == "FILE_TOO_SMALL"
        assert extended.details == error.details
        assert extended.__cause__ is error

    def test_original_is_untouched(self):
        error = ContentStoreError("write failed")

        error.extend_error("context")

        assert error.message == "write failed"

    def test_internal_cause_survives_extension(self):
        cause = OSError("disk full")
        error = InternalServerError("problem writing", cause)

        extended = error.extend_error("problem uploading file to storage")

        assert extended.__cause__ is cause
        assert extended.message == "problem uploading file to storage: problem writing: disk full"


class TestPublicResponse:
    """Test what callers get to see."""

    def test_internal_details_are_hidden(self):
        error = InternalServerError("problem with /var/secret", OSError("x"))

        assert error.public_response() == {"message": "an internal server error occurred"}

    def test_details_are_exposed_as_data(self):
        assert BucketNotFoundError("b1").public_response() == {
            "message": "bucket b1 not found",
            "data": {"bucket_id": "b1"},
        }

    def test_registry_codes_map_to_status(self):
        assert RegistryError("no", registry_code="permission-error").status_code == 403
        assert RegistryError("dup", registry_code="constraint-violation").status_code == 409
        assert RegistryError("?", registry_code="something-else").status_code == 500

    def test_unmapped_registry_error_is_generic(self):
        assert RegistryError("db exploded").public_message == "an internal server error occurred"
        assert RegistryError("denied", registry_code="access-denied").public_message == "denied"

    def test_error_envelope(self):
        assert create_error_response(BucketNotFoundError("b1")) == {
            "processedFiles": [],
            "error": {"message": "bucket b1 not found", "data": {"bucket_id": "b1"}},
        }
