# integrity.py
# Handles data integrity checks (hex digests and HMAC tags) by algorithm name

import hmac

from hashcore import backends
from hashcore.fmt import DigestFmt
from hashcore.hmac import HmacKey


class Integrity:
    @staticmethod
    def hexdigest(algorithm: str, data: bytes) -> str:
        return str(DigestFmt(backends.new(algorithm, data).result()))

    @staticmethod
    def hmac_hexdigest(algorithm: str, key: bytes, data: bytes) -> str:
        return str(DigestFmt(HmacKey(key, algorithm).sign(data)))

    @staticmethod
    def verify_hmac(algorithm: str, key: bytes, data: bytes, expected_hex: str) -> bool:
        actual = Integrity.hmac_hexdigest(algorithm, key, data)
        return hmac.compare_digest(actual.encode('ascii'), expected_hex.strip().lower().encode('utf-8'))

    @staticmethod
    def sha256_digest(data: bytes) -> str:
        return Integrity.hexdigest('sha256', data)

    @staticmethod
    def hmac_sha256(key: bytes, data: bytes) -> str:
        return Integrity.hmac_hexdigest('sha256', key, data)
