"""
Services for hmmerws

hmmer_scan -- remote hmmscan searches against the EBI web service
validation_report -- clash records from wwPDB validation reports
"""
from .hmmer_scan import HmmerScan, RemoteHmmerScan, parse_response, HMMER_SERVICE
from .validation_report import ResidueKey, read_clashes, clashes_by_residue, group_by_cid

__all__ = [
    'HmmerScan',
    'RemoteHmmerScan',
    'parse_response',
    'HMMER_SERVICE',
    'ResidueKey',
    'read_clashes',
    'clashes_by_residue',
    'group_by_cid',
]
