"""
Controller Protocol
===================

Contract shared by all presentation controllers.
"""
from abc import ABC, abstractmethod

from movielist.presentation.protocols.http import HttpRequest, HttpResponse


class Controller(ABC):
    """Boundary component translating an HttpRequest into an HttpResponse."""
    
    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        """
        Handle a request.
        
        Args:
            request: Inbound request envelope
            
        Returns:
            Exactly one response envelope. Implementations never raise.
        """
        pass
