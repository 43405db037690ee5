#!/usr/bin/env python3
"""
hmmerws -- clients for bioinformatics web services

Remote Pfam domain annotation through the EBI HMMER hmmscan service, and
clash records from wwPDB structure validation reports.
"""

__version__ = '0.1.0'
__author__ = 'hmmerws Team'
__license__ = 'MIT'

from .exceptions import HmmerWSError
from .error_handlers import handle_exceptions
from .models import HmmerDomain, HmmerResult, Clash
from .services import RemoteHmmerScan

__all__ = ['HmmerWSError', 'handle_exceptions', 'HmmerDomain', 'HmmerResult',
           'Clash', 'RemoteHmmerScan']
