"""Tests for typed lookups: slide id, zoom, account, brand, key message."""

import asyncio
import logging

import pytest

from clmbridge.config import config
from clmbridge.errors import HostCallFailure
from clmbridge.lookups import (
    get_account,
    get_brand,
    get_brand_info_data,
    get_clm_slide_id,
    get_current_account,
    get_key_message_data,
    is_zoom_disabled,
)

BRAND_DOMAIN_FIELDS = ("product", "product_id", "record_id", "key_messages", "key_message_codes")


@pytest.fixture
def brand_host(host):
    """Host with one product and one account key message for CUST-1."""
    host.add_rows("Product_vod__c", [{"Id": "prod-1", "External_ID_vod__c": "EXT-9"}])
    host.add_rows(
        "Account_Key_Message__c",
        [{"Id": "akm-1", "KeyMessage__c": "KM_A;KM_B", "KeyMessageCodes__c": "A;B"}],
    )
    return host


class TestCurrentKeyMessage:
    """Tests for get_clm_slide_id() and is_zoom_disabled()."""

    def test_clm_slide_id(self, host):
        host.set_current_object("KeyMessage", {"CLM_ID_vod__c": "CLM-0042"})

        assert asyncio.run(get_clm_slide_id(host)) == "CLM-0042"
        assert host.calls_for("get_data_for_current_object") == [
            {"object_kind": "KeyMessage", "field": "CLM_ID_vod__c"}
        ]

    def test_clm_slide_id_failure(self, host):
        """Without a current key message the lookup rejects."""
        host.fail("get_data_for_current_object")

        with pytest.raises(HostCallFailure, match="Failed to get CLM ID"):
            asyncio.run(get_clm_slide_id(host))

    @pytest.mark.parametrize(
        "actions,expected",
        [
            ("Zoom_vod;Swipe_vod", True),
            ("Zoom_vod", True),
            ("Swipe_vod", False),
            ("", False),
            (None, False),
        ],
    )
    def test_zoom_disabled(self, host, actions, expected):
        host.set_current_object("KeyMessage", {"Disable_Actions_vod__c": actions})

        assert asyncio.run(is_zoom_disabled(host)) is expected

    def test_zoom_disabled_failure(self, host):
        host.respond_with("get_data_for_current_object", None)

        with pytest.raises(HostCallFailure, match="Failed to get disabled actions"):
            asyncio.run(is_zoom_disabled(host))


class TestAccount:
    """Tests for get_current_account() and get_account()."""

    def test_current_account(self, host):
        host.set_current_object("Account", {"Id": "001A"})

        assert asyncio.run(get_current_account(host)) == {"Id": "001A"}

    def test_current_account_failure_is_none(self, host, info_logs):
        host.fail("get_data_for_current_object", message="No account in call")

        assert asyncio.run(get_current_account(host)) is None
        assert "No account in call" in info_logs.text

    def test_get_account(self, host):
        host.set_current_object("Account", {"Id": "001A"})
        host.add_rows("Account", [{"Id": "001A", "Name": "Dr. Jane Doe"}])

        account = asyncio.run(get_account(host))

        assert account == {"Id": "001A", "Name": "Dr. Jane Doe"}
        call = host.calls_for("query_record")[0]
        assert call["filter"] == "WHERE Id = '001A'"
        assert call["fields"] == config.account_fields
        assert call["sort"] == ["Name, ASC"]

    def test_get_account_uses_configured_fields(self, host, monkeypatch):
        monkeypatch.setattr(config, "account_fields", ["Id", "Specialty__c"])
        host.set_current_object("Account", {"Id": "001A"})

        asyncio.run(get_account(host))

        assert host.calls_for("query_record")[0]["fields"] == ["Id", "Specialty__c"]

    def test_get_account_without_current_account(self, host):
        """No current account: no query is issued."""
        assert asyncio.run(get_account(host)) is None
        assert not host.was_called("query_record")

    def test_get_account_not_found(self, host, info_logs):
        host.set_current_object("Account", {"Id": "001A"})

        assert asyncio.run(get_account(host)) is None
        assert "No account record found for '001A'" in info_logs.text


class TestGetBrand:
    """Tests for get_brand() and get_brand_info_data()."""

    def test_success(self, brand_host):
        brand = asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1"))

        assert brand.success is True
        assert brand.message == "Success"
        assert brand.product == "Brandix"
        assert brand.product_id == "prod-1"
        assert brand.record_id == "akm-1"
        assert brand.key_messages == "KM_A;KM_B"
        assert brand.key_message_codes == "A;B"

    def test_queries_product_then_composite_key(self, brand_host):
        asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1"))

        product_query, brand_query = brand_host.calls_for("query_record")
        assert product_query["collection"] == "Product_vod__c"
        assert product_query["filter"] == "WHERE Name = 'Brandix'"
        assert brand_query["collection"] == "Account_Key_Message__c"
        assert brand_query["filter"] == "WHERE External_Id__c = 'CUST-1:EXT-9'"

    def test_product_not_found(self, brand_host):
        """Unknown product: failure envelope, every domain field ''."""
        brand_host.add_rows("Product_vod__c", [])

        brand = asyncio.run(get_brand(brand_host, "Unknown", ["x"], "CUST-1"))

        assert brand.success is False
        for name in BRAND_DOMAIN_FIELDS:
            assert getattr(brand, name) == ""
        assert brand.message
        assert brand_host.call_count("query_record") == 1

    def test_product_not_found_dict_shape(self, brand_host):
        brand_host.add_rows("Product_vod__c", [])

        data = asyncio.run(get_brand(brand_host, "Unknown", ["x"], "CUST-1")).to_dict()

        assert data == {
            "success": False,
            "message": "No product record found for 'Unknown'",
            "product": "",
            "productId": "",
            "recordId": "",
            "keyMessages": "",
            "keyMessageCodes": "",
        }

    def test_brand_record_not_found(self, brand_host):
        brand_host.add_rows("Account_Key_Message__c", [])

        brand = asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1"))

        assert brand.success is False
        assert brand.product == ""
        assert "account key message" in brand.message

    def test_query_failure_is_failure_envelope(self, brand_host):
        brand_host.fail("query_record")

        brand = asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1"))

        assert brand.success is False
        assert brand.message

    def test_null_values_become_empty_strings(self, brand_host):
        brand_host.add_rows(
            "Account_Key_Message__c",
            [{"Id": "akm-1", "KeyMessage__c": None, "KeyMessageCodes__c": None}],
        )

        brand = asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1"))

        assert brand.success is True
        assert brand.key_messages == ""
        assert brand.key_message_codes == ""

    def test_missing_product_ids_is_logged_but_continues(self, brand_host, info_logs):
        brand = asyncio.run(get_brand(brand_host, "Brandix", None, "CUST-1"))

        assert brand.success is True
        errors = [r for r in info_logs.records if r.levelno == logging.ERROR]
        assert any("Product id is missing" in r.getMessage() for r in errors)

    @pytest.mark.parametrize("product_name,customer_id", [("", "CUST-1"), ("Brandix", "")])
    def test_missing_input_issues_no_query(self, brand_host, product_name, customer_id):
        brand = asyncio.run(get_brand(brand_host, product_name, ["prod-1"], customer_id))

        assert brand.success is False
        assert "missing" in brand.message
        assert brand_host.call_count() == 0

    def test_to_dict_uses_camel_case(self, brand_host):
        data = asyncio.run(get_brand(brand_host, "Brandix", ["prod-1"], "CUST-1")).to_dict()

        assert data["productId"] == "prod-1"
        assert data["recordId"] == "akm-1"
        assert data["keyMessages"] == "KM_A;KM_B"
        assert data["keyMessageCodes"] == "A;B"

    def test_brand_info_data_with_products(self, brand_host):
        products = [{"Id": "prod-7", "External_ID_vod__c": "EXT-7"}]

        brand = asyncio.run(get_brand_info_data(brand_host, "Other", products, "CUST-2"))

        assert brand.success is True
        assert brand.product_id == "prod-7"
        assert brand_host.calls_for("query_record")[0]["filter"] == (
            "WHERE External_Id__c = 'CUST-2:EXT-7'"
        )

    def test_brand_info_data_without_products(self, host):
        brand = asyncio.run(get_brand_info_data(host, "Other", [], "CUST-2"))

        assert brand.success is False
        assert host.call_count() == 0


class TestGetKeyMessageData:
    """Tests for get_key_message_data()."""

    @pytest.mark.parametrize("missing", [None, "", "   "])
    def test_missing_id_issues_no_query(self, host, missing):
        data = asyncio.run(get_key_message_data(host, missing))

        assert data.success is False
        assert data.message == "External_Id__c is missing"
        assert host.call_count() == 0

    def test_found(self, host):
        host.add_rows(
            "Account_Key_Message_Fact__c",
            [{"Id": "f-1", "Type__c": "Dose", "Value__c": "10mg", "External_Id__c": "EXT-F1"}],
        )

        data = asyncio.run(get_key_message_data(host, "EXT-F1"))

        assert data.to_dict() == {
            "success": True,
            "message": "Success",
            "Id": "f-1",
            "Type__c": "Dose",
            "Value__c": "10mg",
            "External_Id__c": "EXT-F1",
        }

    def test_matches_internal_or_external_id(self, host):
        asyncio.run(get_key_message_data(host, "EXT-F1"))

        call = host.calls_for("query_record")[0]
        assert call["filter"] == "WHERE Id = 'EXT-F1' or External_Id__c = 'EXT-F1'"
        assert call["sort"] == ["Type__c, ASC"]

    def test_not_found(self, host):
        data = asyncio.run(get_key_message_data(host, "EXT-404"))

        assert data.success is False
        assert data.record_id == ""
        assert "EXT-404" in data.message
