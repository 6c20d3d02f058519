from cryptography.hazmat.primitives import hashes

BLOCK_SIZE = 64
DIGEST_SIZE = 32


def sha256(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()
