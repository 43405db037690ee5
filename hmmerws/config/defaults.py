#!/usr/bin/env python3
"""
Default configuration values for hmmerws
"""

DEFAULT_CONFIG = {
    'service': {
        'hmmscan_url': 'https://www.ebi.ac.uk/Tools/hmmer/search/hmmscan',
        'database': 'pfam',
        'cut_ga': True,
        'connect_timeout': 15,
    },
    'logging': {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    },
}
