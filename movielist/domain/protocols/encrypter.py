"""
Encrypter Protocol
==================

Abstract capability for one-way hashing of secrets.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod


class Encrypter(ABC):
    """One-way hash of a plaintext secret."""
    
    @abstractmethod
    async def encrypt(self, value: str) -> str:
        """
        Hash a plaintext value.
        
        Args:
            value: Plaintext secret
            
        Returns:
            Hashed value
            
        Raises:
            Any error from the hashing backend; callers decide how to handle it.
        """
        pass
