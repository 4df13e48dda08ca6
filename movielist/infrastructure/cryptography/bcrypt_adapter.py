"""
Bcrypt Adapter
==============

Encrypter implementation backed by the bcrypt library.
"""
import asyncio

import bcrypt

from movielist.domain.protocols.encrypter import Encrypter

# bcrypt only uses the first 72 bytes of a secret; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


class BcryptAdapter(Encrypter):
    """Hashes secrets with bcrypt using a fixed cost factor."""
    
    def __init__(self, salt_rounds: int = 12):
        self._salt_rounds = salt_rounds
    
    async def encrypt(self, value: str) -> str:
        # bcrypt is CPU bound; keep it off the event loop
        return await asyncio.to_thread(self._hash, value)
    
    def _hash(self, value: str) -> str:
        salt = bcrypt.gensalt(rounds=self._salt_rounds)
        secret = value.encode("utf-8")[:BCRYPT_MAX_BYTES]
        return bcrypt.hashpw(secret, salt).decode("utf-8")
