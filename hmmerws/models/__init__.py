#!/usr/bin/env python3
"""
Data models for hmmerws
"""
from .base import XmlSerializable
from .hmmer import HmmerDomain, HmmerResult, HmmerScanReport
from .validation import Clash

__all__ = [
    'XmlSerializable',
    'HmmerDomain',
    'HmmerResult',
    'HmmerScanReport',
    'Clash',
]
