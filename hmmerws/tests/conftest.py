#!/usr/bin/env python3
"""
Shared fixtures for hmmerws tests
"""

import json
from pathlib import Path
from unittest.mock import Mock

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Short kinase fragment
TEST_SEQUENCE = "MGSNKSKPKDASQRRRSLEPAENVHGAGGGAFPASQTPSKPASADGHRGPSAAFAPAAAEPKLFGGFNSSDTVTSPQRAGPLAGG"


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def hmmscan_json():
    """Parsed hmmscan JSON document with three hits"""
    with open(FIXTURES_DIR / "hmmscan_response.json") as f:
        return json.load(f)


@pytest.fixture
def validation_report_path():
    return str(FIXTURES_DIR / "validation_report.xml")


@pytest.fixture
def test_sequence():
    return TEST_SEQUENCE


@pytest.fixture
def mock_session(hmmscan_json):
    """requests session answering the POST with a redirect and the GET with the fixture"""
    session = Mock()

    post_response = Mock()
    post_response.status_code = 303
    post_response.reason = "See Other"
    post_response.headers = {'Location': '/Tools/hmmer/results/ABC-123/score'}
    session.post.return_value = post_response

    get_response = Mock()
    get_response.status_code = 200
    get_response.json.return_value = hmmscan_json
    session.get.return_value = get_response

    return session


@pytest.fixture
def nmr_report_path():
    """Report with the same residue clashing in two models"""
    return str(FIXTURES_DIR / "validation_report_nmr.xml")
