"""Built-in taxonomy of known cryptographic algorithms.

The registry below is built (and integrity-checked) once, at import time.
"""

from domain.algorithms.models import AlgorithmCategory
from domain.algorithms.registry import TaxonomyRegistry, build_registry

BUILTIN_TABLE: dict[AlgorithmCategory, dict[str, tuple[str, ...]]] = {
    AlgorithmCategory.HASHING: {
        "strong": (
            "DSA",
            "ED25519",
            "ES256",
            "ECDSA256",
            "ES384",
            "ECDSA384",
            "ES512",
            "ECDSA512",
            "SHA2",
            "SHA224",
            "SHA256",
            "SHA384",
            "SHA512",
            "SHA3",
            "SHA3224",
            "SHA3256",
            "SHA3384",
            "SHA3512",
        ),
        "weak": (
            "HAVEL128",
            "MD2",
            "MD4",
            "MD5",
            "PANAMA",
            "RIPEMD",
            "RIPEMD128",
            "RIPEMD256",
            "RIPEMD160",
            "RIPEMD320",
            "SHA0",
            "SHA1",
        ),
    },
    AlgorithmCategory.ENCRYPTION: {
        "strong": ("AES", "AES128", "AES192", "AES256", "AES512", "RSA", "RABBIT", "BLOWFISH"),
        "weak": (
            "DES",
            "3DES",
            "TRIPLEDES",
            "TDEA",
            "TRIPLEDEA",
            "ARC2",
            "RC2",
            "ARC4",
            "RC4",
            "ARCFOUR",
            "ARC5",
            "RC5",
        ),
    },
    AlgorithmCategory.PASSWORD_HASHING: {
        "strong": ("ARGON2", "PBKDF2", "BCRYPT", "SCRYPT"),
        "weak": ("EVPKDF",),
    },
}

DEFAULT_REGISTRY: TaxonomyRegistry = build_registry(BUILTIN_TABLE)
