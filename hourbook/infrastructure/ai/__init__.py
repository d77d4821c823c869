"""
AI text-generation client.
"""

from .description_service import AiDescriptionService, AiDescriptionResult, AiErrorCode

__all__ = [
    "AiDescriptionService",
    "AiDescriptionResult",
    "AiErrorCode",
]
