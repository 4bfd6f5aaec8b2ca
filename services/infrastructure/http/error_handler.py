"""LLM Error Types.

Exceptions raised by the content-generation client. Mind map imports are
never retried automatically; callers translate these into user-facing
import failures.

@author lycosa9527
@made_by MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Optional


class LLMServiceError(Exception):
    """Base exception for LLM service errors."""


class LLMTimeoutError(LLMServiceError):
    """Raised when LLM call times out."""


class LLMValidationError(LLMServiceError):
    """Raised when response doesn't match expected format."""


class LLMRateLimitError(LLMServiceError):
    """Raised when API rate limit is exceeded."""


class LLMProviderError(LLMServiceError):
    """Raised for provider-specific errors with error code."""
    def __init__(self, message: str, provider: Optional[str] = None, error_code: Optional[str] = None):
        super().__init__(message)
        self.provider = provider
        self.error_code = error_code
        self.user_message: Optional[str] = None  # User-friendly error message


class LLMAccessDeniedError(LLMProviderError):
    """Raised when access is denied (missing/invalid key) - DO NOT RETRY."""
