"""Core infrastructure for hmmerws"""
from .logging_config import LoggingManager

__all__ = ['LoggingManager']
