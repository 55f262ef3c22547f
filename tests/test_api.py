# tests/test_api.py

"""
HTTP contract of the encryption endpoints:
request validation, envelope shape and uniform, non-revealing error bodies.
"""

import base64

from fastapi.testclient import TestClient

import config
from api.endpoints import DECRYPT_FAILED, DECRYPT_INVALID_BODY, ENCRYPT_FAILED, ENCRYPT_INVALID_BODY
from security.message_cipher import decrypt_message, encrypt_message

ENCRYPT_URL = f"{config.API_PREFIX}/encrypt"
DECRYPT_URL = f"{config.API_PREFIX}/decrypt"


def test_read_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_health_check_ready(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "encryption_ready": True, "decryption_ready": True}


def test_health_check_without_keys(unconfigured_client: TestClient):
    response = unconfigured_client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "degraded"


def test_encrypt_returns_envelope(client: TestClient, private_key):
    response = client.post(ENCRYPT_URL, json={"message": "Hello, world!"})
    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"encryptedKey", "iv", "authTag", "data"}
    assert len(base64.b64decode(body["iv"])) == 12
    assert decrypt_message(body, private_key) == "Hello, world!"


def test_encrypt_then_decrypt_round_trip(client: TestClient):
    envelope = client.post(ENCRYPT_URL, json={"message": "Envío confirmado 📦"}).json()
    response = client.post(DECRYPT_URL, json=envelope)
    assert response.status_code == 200
    assert response.json() == {"decrypted": "Envío confirmado 📦"}


def test_decrypt_envelope_built_outside_the_api(client: TestClient, public_key):
    envelope = encrypt_message("Hello, world!", public_key).to_dict()
    response = client.post(DECRYPT_URL, json=envelope)
    assert response.json() == {"decrypted": "Hello, world!"}


def test_encrypt_rejects_invalid_bodies(client: TestClient):
    for body in ({}, {"message": ""}, {"message": 42}, {"text": "Hello"}):
        response = client.post(ENCRYPT_URL, json=body)
        assert response.status_code == 400
        assert response.json() == {"error": ENCRYPT_INVALID_BODY}


def test_encrypt_rejects_non_json_body(client: TestClient):
    response = client.post(ENCRYPT_URL, content=b"not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": ENCRYPT_INVALID_BODY}


def test_decrypt_rejects_missing_or_empty_fields(client: TestClient):
    envelope = client.post(ENCRYPT_URL, json={"message": "Hello, world!"}).json()
    for field in envelope:
        missing = {k: v for k, v in envelope.items() if k != field}
        response = client.post(DECRYPT_URL, json=missing)
        assert response.status_code == 400
        assert response.json() == {"error": DECRYPT_INVALID_BODY}

        response = client.post(DECRYPT_URL, json={**envelope, field: ""})
        assert response.status_code == 400
        assert response.json() == {"error": DECRYPT_INVALID_BODY}


def test_decrypt_failures_are_indistinguishable(client: TestClient, other_key_pair):
    envelope = client.post(ENCRYPT_URL, json={"message": "Hello, world!"}).json()
    foreign = encrypt_message("Hello, world!", other_key_pair[0]).to_dict()
    random_tag = base64.b64encode(b"\x00" * 16).decode("ascii")
    bad_envelopes = [
        {**envelope, "authTag": random_tag},           # tag mismatch
        {**envelope, "data": foreign["data"]},         # ciphertext swap
        {**envelope, "iv": "!!!not base64!!!"},        # format
        foreign,                                       # wrong recipient key
        {**envelope, "iv": envelope["authTag"], "authTag": envelope["iv"]},
    ]
    bodies = set()
    for bad in bad_envelopes:
        response = client.post(DECRYPT_URL, json=bad)
        assert response.status_code == 400
        assert response.json() == {"error": DECRYPT_FAILED}
        bodies.add(response.text)
    assert len(bodies) == 1


def test_endpoints_without_keys_return_generic_errors(unconfigured_client: TestClient, public_key):
    response = unconfigured_client.post(ENCRYPT_URL, json={"message": "Hello, world!"})
    assert response.status_code == 500
    assert response.json() == {"error": ENCRYPT_FAILED}

    envelope = encrypt_message("Hello, world!", public_key).to_dict()
    response = unconfigured_client.post(DECRYPT_URL, json=envelope)
    assert response.status_code == 500
    assert response.json() == {"error": DECRYPT_FAILED}


def test_openapi_docs_are_served_under_api_prefix(client: TestClient):
    response = client.get(f"{config.API_PREFIX}/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert ENCRYPT_URL in paths and DECRYPT_URL in paths
