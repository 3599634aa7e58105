"""Tests for multipart upload parsing."""

import json
from io import BytesIO

import pytest
from starlette.datastructures import FormData, Headers, UploadFile

from storage_gateway.api.parsers.upload_request_parser import (
    UploadRequestParser,
    detect_protocol,
)
from storage_gateway.core.exceptions import (
    MetadataLengthMismatchError,
    MultipartFileNotFoundError,
    WrongMetadataFormatError,
)
from storage_gateway.core.value_objects.upload_protocol import UploadProtocol


def upload(content: bytes, filename: str = "file.txt", content_type: str = "text/plain") -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def parser():
    return UploadRequestParser(default_bucket_id="default")


class TestDetectProtocol:
    """Test protocol detection from form parts."""

    def test_file_array_is_multi_file(self):
        assert detect_protocol(FormData([("file[]", upload(b"a"))])) == UploadProtocol.MULTI_FILE

    def test_single_file_part_is_legacy(self):
        assert detect_protocol(FormData([("file", upload(b"a"))])) == UploadProtocol.LEGACY

    def test_file_array_wins_over_legacy_part(self):
        form = FormData([("file", upload(b"a")), ("file[]", upload(b"b"))])

        assert detect_protocol(form) == UploadProtocol.MULTI_FILE

    def test_no_file_part_fails(self):
        with pytest.raises(MultipartFileNotFoundError) as exc_info:
            detect_protocol(FormData([("bucket-id", "default")]))

        assert exc_info.value.status_code == 400

    def test_plain_value_under_file_name_is_not_a_file(self):
        with pytest.raises(MultipartFileNotFoundError):
            detect_protocol(FormData([("file[]", "not a file")]))


class TestMultiFileParsing:
    """Test the file[] / metadata[] protocol."""

    def test_defaults_without_metadata(self, parser):
        form = FormData([
            ("file[]", upload(b"first", filename="a.txt")),
            ("file[]", upload(b"second!", filename="b.txt", content_type="application/json")),
        ])

        request = parser.parse(form, {})

        assert request.protocol == UploadProtocol.MULTI_FILE
        assert request.bucket_id == "default"
        assert [file.name for file in request.files] == ["a.txt", "b.txt"]
        assert [file.size for file in request.files] == [5, 7]
        assert request.files[1].declared_content_type == "application/json"
        assert request.files[0].id != request.files[1].id
        assert all(len(file.id) == 36 for file in request.files)

    def test_metadata_overrides_name_and_id(self, parser):
        form = FormData([
            ("file[]", upload(b"first", filename="a.txt")),
            ("file[]", upload(b"second", filename="b.txt")),
            ("metadata[]", json.dumps({"name": "renamed.txt", "id": "fixed-id"})),
            ("metadata[]", json.dumps({})),
        ])

        request = parser.parse(form, {})

        assert request.files[0].name == "renamed.txt"
        assert request.files[0].id == "fixed-id"
        assert request.files[1].name == "b.txt"
        assert request.files[1].id != "fixed-id"

    def test_bucket_id_form_value(self, parser):
        form = FormData([("file[]", upload(b"a")), ("bucket-id", "avatars")])

        assert parser.parse(form, {}).bucket_id == "avatars"

    def test_empty_bucket_id_uses_default(self, parser):
        form = FormData([("file[]", upload(b"a")), ("bucket-id", "")])

        assert parser.parse(form, {}).bucket_id == "default"

    def test_metadata_count_mismatch(self, parser):
        form = FormData([
            ("file[]", upload(b"a")),
            ("file[]", upload(b"b")),
            ("metadata[]", json.dumps({"name": "only-one"})),
        ])

        with pytest.raises(MetadataLengthMismatchError) as exc_info:
            parser.parse(form, {})

        assert exc_info.value.details == {"files": 2, "metadata": 1}
        assert exc_info.value.status_code == 400

    def test_malformed_metadata(self, parser):
        form = FormData([("file[]", upload(b"a")), ("metadata[]", "{not json")])

        with pytest.raises(WrongMetadataFormatError):
            parser.parse(form, {})

    def test_metadata_with_wrong_types(self, parser):
        form = FormData([("file[]", upload(b"a")), ("metadata[]", json.dumps({"name": 42}))])

        with pytest.raises(WrongMetadataFormatError):
            parser.parse(form, {})

    def test_null_metadata_entry_uses_defaults(self, parser):
        form = FormData([
            ("file[]", upload(b"a", filename="a.txt")),
            ("metadata[]", "null"),
        ])

        file = parser.parse(form, {}).files[0]

        assert file.name == "a.txt"
        assert len(file.id) == 36

    def test_unknown_metadata_keys_are_ignored(self, parser):
        form = FormData([
            ("file[]", upload(b"a", filename="a.txt")),
            ("metadata[]", json.dumps({"name": "x.txt", "tags": ["t"]})),
        ])

        assert parser.parse(form, {}).files[0].name == "x.txt"


class TestLegacyParsing:
    """Test the single file protocol."""

    def test_headers_provide_bucket_name_and_id(self, parser):
        form = FormData([("file", upload(b"legacy", filename="upload.txt"))])
        headers = {
            "x-nhost-bucket-id": "avatars",
            "x-nhost-file-name": "me.txt",
            "x-nhost-file-id": "legacy-id",
        }

        request = parser.parse(form, headers)

        assert request.protocol == UploadProtocol.LEGACY
        assert request.bucket_id == "avatars"
        assert len(request.files) == 1
        assert request.files[0].name == "me.txt"
        assert request.files[0].id == "legacy-id"
        assert request.files[0].size == 6

    def test_defaults_without_headers(self, parser):
        form = FormData([("file", upload(b"legacy", filename="upload.txt"))])

        request = parser.parse(form, {})

        assert request.bucket_id == "default"
        assert request.files[0].name == "upload.txt"
        assert request.files[0].id

    def test_only_first_file_part_is_used(self, parser):
        form = FormData([
            ("file", upload(b"one", filename="one.txt")),
            ("file", upload(b"two", filename="two.txt")),
        ])

        request = parser.parse(form, {})

        assert [file.name for file in request.files] == ["one.txt"]
