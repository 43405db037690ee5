"""
Command-line interface for hmmerws.

scan    -- Pfam domain annotation through the EBI HMMER service
clashes -- clash summary of a wwPDB validation report
"""
from .main import main, build_parser

__all__ = ['main', 'build_parser']
