"""비밀번호 해싱 테스트.

Password hasher tests.
"""

from safebox.utils.password import (
    BCRYPT_ROUNDS,
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)


def test_hash_and_verify():
    hashed = hash_password("secret1")
    assert hashed != "secret1"
    assert verify_password("secret1", hashed) is True


def test_wrong_password():
    assert verify_password("secret2", hash_password("secret1")) is False


def test_cost_factor():
    assert hash_password("secret1").startswith(f"$2b${BCRYPT_ROUNDS}$")


def test_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_malformed_hash_is_mismatch():
    assert verify_password("secret1", "not-a-bcrypt-hash") is False


def test_dummy_hash_rejects_everything():
    assert verify_password("secret1", DUMMY_PASSWORD_HASH) is False
