import pytest

from rcli import (
    process_decrypt,
    process_encrypt,
    process_generate_key,
    process_text_sign,
    process_text_verify,
)
from rcli.core.crypto import codec
from rcli.core.errors import (
    AuthenticationFailedError,
    InputNotFoundError,
    InvalidEncodingError,
    InvalidKeyLengthError,
    UnsupportedAlgorithmError,
)
from rcli.utils.keystore import write_key_files


@pytest.fixture
def message(tmp_path):
    path = tmp_path / "message.txt"
    path.write_bytes(b"Hello World")
    return path


@pytest.fixture
def blake3_key(tmp_path):
    (path,) = write_key_files("blake3", process_generate_key("blake3"), tmp_path)
    return path


@pytest.fixture
def ed25519_keys(tmp_path):
    sk, pk = write_key_files("ed25519", process_generate_key("ed25519"), tmp_path)
    return sk, pk


def test_blake3_sign_and_verify_files(message, blake3_key, tmp_path):
    sig = process_text_sign(message, blake3_key, "blake3")

    assert len(codec.decode(sig)) == 32
    assert process_text_verify(message, blake3_key, "blake3", sig) is True

    changed = tmp_path / "changed.txt"
    changed.write_bytes(b"Hello World!")
    assert process_text_verify(changed, blake3_key, "blake3", sig) is False


def test_ed25519_sign_with_private_verify_with_public(message, ed25519_keys):
    sk, pk = ed25519_keys
    sig = process_text_sign(message, sk, "ed25519")

    assert len(codec.decode(sig)) == 64
    assert process_text_verify(message, pk, "ed25519", sig) is True


def test_sign_from_stdin(stdin_bytes, blake3_key, message):
    stdin_bytes(b"Hello World")
    sig = process_text_sign("-", blake3_key, "blake3")

    assert process_text_verify(message, blake3_key, "blake3", sig) is True


def test_verify_accepts_signature_with_trailing_newline(message, blake3_key):
    sig = process_text_sign(message, blake3_key)
    assert process_text_verify(message, blake3_key, "blake3", sig + "\n") is True


def test_verify_rejects_bad_signature_encoding(message, blake3_key):
    with pytest.raises(InvalidEncodingError):
        process_text_verify(message, blake3_key, "blake3", "abc=")


def test_missing_input(tmp_path, blake3_key):
    with pytest.raises(InputNotFoundError):
        process_text_sign(tmp_path / "nope.txt", blake3_key, "blake3")


def test_missing_key(tmp_path, message):
    with pytest.raises(InputNotFoundError):
        process_text_sign(message, tmp_path / "nope.key", "blake3")


def test_short_key_file(tmp_path, message):
    key = tmp_path / "short.txt"
    key.write_bytes(b"too short")

    with pytest.raises(InvalidKeyLengthError):
        process_text_sign(message, key, "blake3")


def test_unsupported_format(message, blake3_key):
    with pytest.raises(UnsupportedAlgorithmError):
        process_text_sign(message, blake3_key, "hmac-sha256")


def test_encrypt_then_decrypt(tmp_path, stdin_bytes):
    stdin_bytes(b"secret message")
    token = process_encrypt("-", "0123456789abcdef0123456789abcdef", "nonce-000001")

    encrypted = tmp_path / "encrypted.txt"
    encrypted.write_text(token + "\n")

    plaintext = process_decrypt(encrypted, "0123456789abcdef0123456789abcdef", "nonce-000001")
    assert plaintext == b"secret message"


def test_decrypt_with_other_nonce_fails(tmp_path, message):
    token = process_encrypt(message, "key", "nonce-a")
    encrypted = tmp_path / "encrypted.txt"
    encrypted.write_text(token)

    with pytest.raises(AuthenticationFailedError):
        process_decrypt(encrypted, "key", "nonce-b")


def test_default_nonce_is_used_when_omitted(tmp_path, message):
    token = process_encrypt(message, "key")
    encrypted = tmp_path / "encrypted.txt"
    encrypted.write_text(token)

    assert process_decrypt(encrypted, "key", "000000000000") == b"Hello World"


def test_decrypt_returns_raw_bytes(tmp_path):
    binary = tmp_path / "binary.bin"
    binary.write_bytes(bytes(range(256)))
    token = process_encrypt(binary, "key", "n")

    encrypted = tmp_path / "encrypted.txt"
    encrypted.write_text(token)
    assert process_decrypt(encrypted, "key", "n") == bytes(range(256))


def test_decrypt_rejects_garbage(tmp_path):
    garbage = tmp_path / "garbage.txt"
    garbage.write_text("this is not ciphertext!")

    with pytest.raises(InvalidEncodingError):
        process_decrypt(garbage, "key", "n")


def test_encrypt_unsupported_format(message):
    with pytest.raises(UnsupportedAlgorithmError):
        process_encrypt(message, "key", "n", format="aes-256-gcm")


def test_verify_rejects_signature_with_altered_trailing_bits(message, blake3_key):
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
    sig = process_text_sign(message, blake3_key, "blake3")
    variant = sig[:-1] + alphabet[alphabet.index(sig[-1]) + 1]

    with pytest.raises(InvalidEncodingError):
        process_text_verify(message, blake3_key, "blake3", variant)
