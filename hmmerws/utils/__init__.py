"""
Utility modules for hmmerws

xml_core -- XML parsing and formatting helpers
sequence -- protein sequence helpers
"""
