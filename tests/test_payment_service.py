import hashlib
import json

import pytest
import requests

from firstdata import Address, Config, GatewayClient, RequestBuildError, TransactionType, create_client

APPROVED = json.dumps({
    "transaction_approved": 1,
    "transaction_tag": "901975484",
    "authorization_num": "ET1234",
    "transarmor_token": "8291732229991111",
    "bank_resp_code": "100",
    "bank_message": "Approved",
    "exact_resp_code": "00",
    "exact_message": "Transaction Normal",
    "avs": "X",
    "cavv": "2",
    "ctr": "=========== TRANSACTION RECORD ==========",
})


def _fill(client):
    return (client.set_amount("10.00")
                  .set_credit_card_number(4111111111111111)
                  .set_credit_card_expiration("1230")
                  .set_credit_card_name("Jane Doe"))


def test_successful_purchase(client, gateway):
    gateway.reply(201, APPROVED)
    body = _fill(client).process()

    assert body == APPROVED
    assert client.is_success()
    assert not client.is_error()
    assert client.error_code == 0
    assert client.error_message == ""
    assert client.is_approved() == 1
    assert client.get_transaction_tag() == 901975484
    assert client.get_auth_number() == "ET1234"
    assert client.get_transarmor_token() == "8291732229991111"
    assert client.get_bank_response_code() == 100
    assert client.get_bank_response_message() == "Approved"
    assert client.get_exact_response_code() == 0
    assert client.get_exact_response_message() == "Transaction Normal"
    assert client.get_avs() == "X"
    assert client.get_cavv_response() == "2"
    assert client.get_transaction_record().startswith("=====")
    assert client.get_bank_response_type() == "S"
    assert client.get_bank_response_comments() == "Successfully approved"


def test_request_goes_to_demo_endpoint_with_signed_headers(client, gateway):
    gateway.reply(201, APPROVED)
    _fill(client).process()

    call = gateway.last
    assert call["url"] == "https://api.demo.globalgatewaye4.firstdata.com/transaction/v12"
    assert call["allow_redirects"] is False
    assert call["timeout"] == (30, 60)

    body = json.loads(call["data"])
    assert body["cc_number"] == "4111111111111111"
    assert body["gateway_id"] == "AD1234-01"
    assert body["password"] == "s3cret"
    assert body["transaction_type"] == "00"

    headers = call["headers"]
    assert headers["Content-Type"] == "application/json; charset=UTF-8;"
    assert headers["Accept"] == "application/json"
    assert headers["X-GGe4-Content-SHA1"] == hashlib.sha1(call["data"]).hexdigest()
    assert headers["Authorization"].startswith("GGE4_API 98765:")
    assert headers["Content-Length"] == str(len(call["data"]))


def test_live_endpoint_and_unsigned_old_version(settings, gateway):
    client = GatewayClient(settings=settings, test_mode=False).set_api_version("v11")
    gateway.reply(201, APPROVED)
    client.set_amount("1.00").process()

    call = gateway.last
    assert call["url"] == "https://api.globalgatewaye4.firstdata.com/transaction/v11"
    assert "Authorization" not in call["headers"]
    assert "X-GGe4-Date" not in call["headers"]


def test_test_mode_is_per_client(settings):
    demo = GatewayClient(settings=settings, test_mode=True)
    live = GatewayClient(settings=settings, test_mode=False)
    assert "demo" in demo.url
    assert "demo" not in live.url
    live.set_test_mode(True)
    assert "demo" in live.url


def test_decline_is_reported_not_raised(client, gateway):
    gateway.reply(201, json.dumps({"transaction_approved": 0, "bank_resp_code": "303"}))
    client.set_amount("10.00").process()

    assert client.is_error()
    assert client.error_code == 42
    assert client.error_message == "Processor Decline"
    assert client.is_approved() == 0
    assert client.get_bank_response_type() == "D"


def test_plain_text_gateway_error(client, gateway):
    gateway.reply(400, "Invalid signature received 'abc'.")
    client.set_amount("10.00").process()

    assert client.is_error()
    assert client.error_code == 400
    assert client.error_message == "Invalid signature received 'abc'."
    assert client.get_array_response() == {}


def test_timeout_is_a_transport_error(client, gateway):
    gateway.fail(requests.exceptions.ConnectTimeout("connect timed out"))
    body = client.set_amount("10.00").process()

    assert body == ""
    assert client.is_error()
    assert client.error_code == 28
    assert "timed out" in client.error_message
    assert len(gateway.calls) == 1


def test_fields_are_cleared_after_each_submission(client, gateway):
    gateway.reply(201, json.dumps({"bank_resp_code": "303"}))
    _fill(client).process()
    assert client.get_post_data() == {}

    gateway.reply(201, APPROVED)
    client.set_amount("2.00").process()
    assert json.loads(gateway.last["data"]) == {
        "amount": "2.00",
        "gateway_id": "AD1234-01",
        "password": "s3cret",
        "transaction_type": "00",
    }


def test_fields_are_cleared_after_transport_failure(client, gateway):
    gateway.fail(requests.exceptions.ConnectionError("refused"))
    client.set_amount("1.00").process()
    assert client.error_code == 7
    assert client.get_post_data() == {}


def test_response_is_replaced_not_merged(client, gateway):
    gateway.reply(201, APPROVED)
    client.process()
    gateway.reply(201, json.dumps({"bank_resp_code": "303"}))
    client.process()
    assert client.get_auth_number() is None
    assert client.get_transaction_tag() is None


def test_build_error_aborts_before_sending(client, gateway):
    client.set_post_data("amount", object())
    with pytest.raises(RequestBuildError):
        client.process()
    assert gateway.calls == []
    assert client.get_post_data() == {}


def test_tagged_refund_fields(client, gateway):
    gateway.reply(201, APPROVED)
    (client.set_transaction_type(TransactionType.TAGGED_REFUND)
           .set_transaction_tag(901975484)
           .set_auth_number("ET1234")
           .set_amount("10.00")
           .process())
    body = json.loads(gateway.last["data"])
    assert body["transaction_type"] == "34"
    assert body["transaction_tag"] == 901975484
    assert body["authorization_num"] == "ET1234"


def test_verification_setters(client):
    client.set_credit_card_verification("123")
    client.set_credit_card_address("1 Main St|G7H2B1|Chicoutimi|QC|CA")
    client.set_credit_card_address_new(Address(city="Chicoutimi"))
    client.set_credit_card_zip_code("G7H2B1")
    client.set_credit_card_cavv("AAABBJg0VhI0VniQEjRWAAAAAAA=")
    data = client.get_post_data()
    assert data["cc_verification_str2"] == "123"
    assert data["cvd_presence_ind"] == 1
    assert data["cc_verification_str1"] == "1 Main St|G7H2B1|Chicoutimi|QC|CA"
    assert data["address"] == Address(city="Chicoutimi")
    assert data["zip_code"] == "G7H2B1"
    assert data["cavv"].startswith("AAAB")


def test_other_setters(client):
    (client.set_credit_card_type("Visa")
           .set_track1("%B4111111111111111^DOE/JANE^3012?")
           .set_track2(";4111111111111111=3012?")
           .set_transarmor_token("8291732229991111")
           .set_currency("CAD")
           .set_client_ip("10.0.0.1")
           .set_client_email("jane@example.com")
           .set_reference_number("ORDER-1")
           .set_customer_reference_number("CUST-9")
           .set_post_data({"ecommerce_flag": 7}))
    assert set(client.get_post_data()) == {
        "credit_card_type", "track1", "track2", "transarmor_token", "currency_code",
        "client_ip", "client_email", "reference_no", "customer_ref", "ecommerce_flag",
    }


def test_credential_setters(client, gateway):
    gateway.reply(201, APPROVED)
    client.set_username("XY0000-01").set_password("other").set_api_id("1").set_api_key("k")
    client.set_api_version("v14").process()
    assert gateway.last["url"].endswith("/transaction/v14")
    assert json.loads(gateway.last["data"])["gateway_id"] == "XY0000-01"
    assert gateway.last["headers"]["Authorization"].startswith("GGE4_API 1:")


def test_unused_client_is_in_error():
    client = GatewayClient(settings=Config())
    assert client.is_error()
    assert client.get_response() == ""
    assert client.get_transaction_type() == "00"


def test_create_client_overrides(settings):
    client = create_client(settings, test_mode=False, api_version="v14")
    assert client.url == "https://api.globalgatewaye4.firstdata.com/transaction/v14"
    assert client.username == "AD1234-01"


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("FIRSTDATA_GATEWAY_ID", "ENV-01")
    monkeypatch.setenv("FIRSTDATA_TEST_MODE", "yes")
    monkeypatch.setenv("FIRSTDATA_TIMEOUT", "15")
    settings = Config.from_env()
    assert settings.GATEWAY_ID == "ENV-01"
    assert settings.TEST_MODE is True
    assert settings.TIMEOUT == 15.0


def test_config_rejects_unknown_options():
    with pytest.raises(TypeError):
        Config(gateway="x")


def test_overflowing_numbers_in_response(client, gateway):
    gateway.reply(201, '{"bank_resp_code":"100","transaction_tag":1e400}')
    client.process()
    assert client.is_success()
    assert client.get_transaction_tag() is None


def test_build_error_discards_previous_response(client, gateway):
    gateway.reply(201, APPROVED)
    client.process()
    client.set_post_data("amount", object())
    with pytest.raises(RequestBuildError):
        client.process()
    assert client.get_response() == ""
    assert client.get_auth_number() is None


def test_set_test_mode_chains(settings):
    client = GatewayClient(settings=settings, test_mode=False)
    assert client.set_test_mode(True).set_amount("1.00") is client
    assert "demo" in client.url


def test_config_ignores_malformed_timeouts(monkeypatch, caplog):
    monkeypatch.setenv("FIRSTDATA_TIMEOUT", "60s")
    monkeypatch.setenv("FIRSTDATA_CONNECT_TIMEOUT", "soon")
    settings = Config.from_env()
    assert settings.TIMEOUT == 60
    assert settings.CONNECT_TIMEOUT == 30
    assert "FIRSTDATA_TIMEOUT" in caplog.text
