import os
import platform

import pytest

from rcli.core.crypto.formats import SignFormat
from rcli.utils.keystore import key_file_names, write_key_files
from rcli.utils.validators import ValidationError


def test_key_file_names():
    assert key_file_names(SignFormat.BLAKE3) == ["blake3.txt"]
    assert key_file_names("ed25519") == ["ed25519.sk", "ed25519.pk"]


def test_write_ed25519_files(tmp_path):
    paths = write_key_files("ed25519", [b"s" * 32, b"p" * 32], tmp_path)

    assert [p.name for p in paths] == ["ed25519.sk", "ed25519.pk"]
    assert paths[0].read_bytes() == b"s" * 32
    assert paths[1].read_bytes() == b"p" * 32


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permissions")
def test_key_files_are_owner_only(tmp_path):
    (path,) = write_key_files(SignFormat.BLAKE3, [b"k" * 32], tmp_path)
    assert os.stat(path).st_mode & 0o777 == 0o600


def test_output_dir_must_exist(tmp_path):
    with pytest.raises(ValidationError):
        write_key_files("blake3", [b"k" * 32], tmp_path / "missing")


def test_output_dir_must_be_directory(tmp_path):
    not_a_dir = tmp_path / "file"
    not_a_dir.write_text("x")

    with pytest.raises(ValidationError):
        write_key_files("blake3", [b"k" * 32], not_a_dir)


def test_blob_count_must_match_family(tmp_path):
    with pytest.raises(ValidationError):
        write_key_files("ed25519", [b"s" * 32], tmp_path)


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permissions")
def test_key_files_ignore_permissive_umask(tmp_path):
    old_umask = os.umask(0)
    try:
        (path,) = write_key_files(SignFormat.BLAKE3, [b"k" * 32], tmp_path)
    finally:
        os.umask(old_umask)

    assert os.stat(path).st_mode & 0o777 == 0o600


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX permissions")
def test_existing_key_file_is_tightened_and_overwritten(tmp_path):
    existing = tmp_path / "blake3.txt"
    existing.write_bytes(b"old key material that is longer")
    os.chmod(existing, 0o644)

    (path,) = write_key_files(SignFormat.BLAKE3, [b"k" * 32], tmp_path)

    assert path.read_bytes() == b"k" * 32
    assert os.stat(path).st_mode & 0o777 == 0o600
