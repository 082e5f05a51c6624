from __future__ import annotations

from argon2 import PasswordHasher

from invoicing.core.security import hash_password, is_bcrypt_hash, needs_rehash, verify_password


def test_hash_is_salted_bcrypt_cost_10_and_verifiable():
    first = hash_password("secret")
    second = hash_password("secret")

    assert first != "secret"
    assert first != second
    assert first.startswith("$2b$10$")
    assert is_bcrypt_hash(first)
    assert verify_password("secret", first) is True
    assert verify_password("Secret", first) is False
    assert needs_rehash(first) is False


def test_other_work_factors_and_argon2_hashes_are_flagged_for_rehash():
    cheap = hash_password("secret", rounds=4)
    argon = "argon2$" + PasswordHasher().hash("secret")

    assert verify_password("secret", cheap) is True
    assert needs_rehash(cheap) is True
    assert verify_password("secret", argon) is True
    assert verify_password("other", argon) is False
    assert needs_rehash(argon) is True


def test_unknown_or_empty_hash_never_matches():
    assert verify_password("secret", None) is False
    assert verify_password("secret", "") is False
    assert verify_password("secret", "secret") is False
    assert verify_password("secret", "argon2$not-a-hash") is False
    assert verify_password("secret", "$2b$10$broken") is False
