#!/usr/bin/env python3
"""
Exception hierarchy for the HMMER web service client.
All custom exceptions should inherit from HmmerWSError.
"""
from typing import Dict, Any, Optional


class HmmerWSError(Exception):
    """Base exception for all hmmerws errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(HmmerWSError):
    """Error related to configuration issues"""
    pass


class ValidationError(HmmerWSError):
    """Data validation error"""
    pass


class ServiceError(HmmerWSError):
    """Error talking to the remote HMMER service"""
    pass


class FileOperationError(HmmerWSError):
    """Error during file operations"""
    pass
