import pytest

from algozoo.rsa import KeyPair, generate_keypair, modpow, private_exponent


@pytest.mark.parametrize(
    "base,exponent,modulus",
    [(2, 10, 1000), (123, 5, 7919 * 1009), (7, 0, 13), (99, 12345, 97), (5, 3, 1)],
)
def test_modpow_matches_builtin(base, exponent, modulus):
    assert modpow(base, exponent, modulus) == pow(base, exponent, modulus)


def test_modpow_zero_exponent_is_one():
    assert modpow(123, 0, 7919) == 1


def test_modpow_rejects_negative_exponent():
    with pytest.raises(ValueError):
        modpow(2, -1, 7)


def test_modpow_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        modpow(2, 3, 0)


def test_private_exponent_is_inverse():
    phi = (7919 - 1) * (1009 - 1)
    d = private_exponent(5, phi)
    assert (5 * d) % phi == 1
    assert 1 <= d < phi


def test_private_exponent_is_smallest():
    phi = 40
    d = private_exponent(3, phi)
    assert all((3 * k) % phi != 1 for k in range(1, d))
    assert (3 * d) % phi == 1


def test_private_exponent_requires_coprime():
    with pytest.raises(ValueError):
        private_exponent(4, 12)


def test_private_exponent_rejects_small_phi():
    with pytest.raises(ValueError):
        private_exponent(5, 1)


def test_keypair_round_trip_source_values():
    keys = generate_keypair(7919, 1009, 5)
    assert keys.n == 7919 * 1009
    ciphertext = keys.encrypt(123)
    assert ciphertext == pow(123, 5, keys.n)
    assert keys.decrypt(ciphertext) == 123


@pytest.mark.parametrize("message", [0, 1, 2, 42, 5000, 7919 * 1009 - 1])
def test_keypair_round_trip_many(message):
    keys = generate_keypair(7919, 1009, 5)
    assert keys.decrypt(keys.encrypt(message)) == message


def test_keypair_direct_construction():
    keys = generate_keypair(61, 53, 17)
    rebuilt = KeyPair(n=keys.n, e=keys.e, d=keys.d)
    assert rebuilt == keys
    assert rebuilt.decrypt(rebuilt.encrypt(65)) == 65


def test_generate_keypair_rejects_bad_exponent():
    with pytest.raises(ValueError):
        generate_keypair(7, 11, 3)