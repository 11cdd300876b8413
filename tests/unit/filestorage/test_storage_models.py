"""Unit tests for filestorage/models.py: XML shapes and round trips."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from azrest.core.exceptions import DeserializationError
from azrest.core.serialization import from_xml, to_xml
from azrest.filestorage.models import (
    ListSharesResponse,
    ShareFileRangeList,
    ShareItem,
    ShareProperties,
    StorageError,
)


class TestShareListing:
    def test_round_trip_with_unset_fields(self) -> None:
        page = ListSharesResponse(
            service_endpoint="https://acct.example/",
            share_items=[
                ShareItem(
                    name="logs",
                    properties=ShareProperties(
                        last_modified=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc), quota=5
                    ),
                    metadata={"owner": "ops"},
                ),
                ShareItem(name="data"),
            ],
        )
        decoded = from_xml(ListSharesResponse, to_xml(page))
        assert decoded == page
        assert decoded.next_marker is None
        assert decoded.share_items[1].metadata == {}

    def test_envelope_shape(self) -> None:
        page = ListSharesResponse(service_endpoint="https://acct.example/", share_items=[ShareItem(name="logs")])
        root = ET.fromstring(to_xml(page))
        assert root.tag == "EnumerationResults"
        assert root.get("ServiceEndpoint") == "https://acct.example/"
        assert root.find("Shares/Share/Name").text == "logs"

    def test_last_modified_uses_rfc1123(self) -> None:
        props = ShareItem(properties=ShareProperties(last_modified=datetime(2024, 1, 2, tzinfo=timezone.utc)))
        root = ET.fromstring(to_xml(ListSharesResponse(share_items=[props])))
        assert root.find("Shares/Share/Properties/Last-Modified").text == "Tue, 02 Jan 2024 00:00:00 GMT"


class TestRanges:
    def test_empty_range_list(self) -> None:
        assert from_xml(ShareFileRangeList, b"<Ranges />") == ShareFileRangeList()

    def test_wrong_root_is_rejected(self) -> None:
        with pytest.raises(DeserializationError):
            from_xml(ShareFileRangeList, b"<RangeList />")


class TestStorageError:
    def test_decodes_error_body(self) -> None:
        error = from_xml(
            StorageError,
            b'<?xml version="1.0" encoding="utf-8"?><Error><Code>ShareNotFound</Code>'
            b"<Message>The specified share does not exist.</Message></Error>",
        )
        assert error.code == "ShareNotFound"
        assert error.message.startswith("The specified share")
