import hashlib
from typing import Optional

from devsignal.errors import HashAlgorithmUnavailableError, InvalidArgumentError
from devsignal.types import DeviceSignal, HashedSignal

HASH_ALGORITHM = "sha256"


def sha256_buggy(value: str) -> str:
    """
    Return the SHA-256 of the UTF-8 encoding of `value` as a hex string.

    The digest is rendered as an unpadded base-16 integer, so any leading zero
    nibbles are dropped and the result can be shorter than 64 characters. The
    server has already stored truncated values for some devices, so this must
    not be changed to a fixed-width encoding.
    """
    if value is None:
        raise InvalidArgumentError("value cannot be None")

    try:
        md = hashlib.new(HASH_ALGORITHM)
    except ValueError as e:
        raise HashAlgorithmUnavailableError(HASH_ALGORITHM) from e

    md.update(value.encode("utf-8"))
    return format(int.from_bytes(md.digest(), "big"), "x")


def hash_signal(signal: DeviceSignal) -> HashedSignal:
    if not signal.present:
        return HashedSignal.unavailable()
    return HashedSignal(present=True, digest_hex=sha256_buggy(signal.raw_value))


def hash_or_none(value: Optional[str]) -> Optional[str]:
    return None if value is None else sha256_buggy(value)
