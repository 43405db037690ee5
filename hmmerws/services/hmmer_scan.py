#!/usr/bin/env python3
"""
Remote HMMER scanning against the EBI web service.

The service is driven in two steps: the sequence is POSTed to the hmmscan
endpoint, which answers with a redirect whose Location holds the results;
those are then fetched as JSON and turned into HmmerResult records.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

from hmmerws.config import ConfigManager, DEFAULT_CONFIG
from hmmerws.error_handlers import log_exception
from hmmerws.exceptions import ServiceError
from hmmerws.models.hmmer import HmmerDomain, HmmerResult, to_int
from hmmerws.utils.sequence import SequenceLike, sequence_to_string, validate_sequence

logger = logging.getLogger("hmmerws.services.hmmer_scan")

HMMER_SERVICE = DEFAULT_CONFIG['service']['hmmscan_url']

# The gathering threshold makes HMMER use the per-family cutoff stored in the
# HMM file, so no false positives are reported.
DEFAULT_SEARCH_CUT_GA = True

DEFAULT_CONNECT_TIMEOUT = 15


class HmmerScan(ABC):
    """Scans a protein sequence for profile HMM matches"""

    @abstractmethod
    def scan(self, sequence: SequenceLike) -> List[HmmerResult]:
        """Return the sorted, duplicate-free hits for a sequence"""
        pass


def _is_reported(flag: Any) -> bool:
    # JSON true, 1 or "1"
    return flag is True or to_int(flag) == 1


def parse_response(json_data: Dict[str, Any]) -> List[HmmerResult]:
    """Convert an hmmscan JSON document into sorted HmmerResult records

    Only domains flagged ``is_reported`` are kept. Parsing stops at the first
    malformed hit; the error is logged and the hits read so far are returned.
    """
    results = set()
    try:
        hits = json_data["results"]["hits"]
        for hit in hits:
            domains = []
            for d in hit["domains"]:
                if not _is_reported(d.get("is_reported")):
                    logger.debug(f"Excluding unreported domain of {hit.get('acc')}")
                    continue
                domains.append(HmmerDomain.from_json(d))
                logger.debug(d.get("alicsline"))

            results.add(HmmerResult.from_json(hit, domains))
    except Exception as e:
        logger.error(f"Error parsing HMMER response after {len(results)} hits: {str(e)}",
                     exc_info=True)

    return sorted(results)


class RemoteHmmerScan(HmmerScan):
    """Makes remote calls to the EBI HMMER web service and returns Pfam
    domain annotations for an input protein sequence.
    """

    def __init__(self,
                 service_url: str = HMMER_SERVICE,
                 cut_ga: bool = DEFAULT_SEARCH_CUT_GA,
                 connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
                 database: str = "pfam",
                 session: Optional[requests.Session] = None):
        """Initialize the client

        Args:
            service_url: hmmscan endpoint
            cut_ga: Search with the Pfam gathering threshold
            connect_timeout: Connect timeout in seconds; reads are not timed out
            database: HMM database to search
            session: Optional requests session to send requests through
        """
        self.service_url = service_url
        self.cut_ga = cut_ga
        self.connect_timeout = connect_timeout
        self.database = database
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config_manager: ConfigManager, **kwargs) -> 'RemoteHmmerScan':
        """Create a client from the ``service`` configuration section"""
        service = config_manager.get_service_config()
        options = {
            'service_url': service.get('hmmscan_url', HMMER_SERVICE),
            'cut_ga': service.get('cut_ga', DEFAULT_SEARCH_CUT_GA),
            'connect_timeout': service.get('connect_timeout', DEFAULT_CONNECT_TIMEOUT),
            'database': service.get('database', 'pfam'),
        }
        options.update(kwargs)
        return cls(**options)

    def build_query(self, sequence: str) -> str:
        """Form-encoded POST body, e.g. hmmdb=pfam&cut_ga=1&seq=MKV..."""
        parts = [f"hmmdb={self.database}"]
        if self.cut_ga:
            parts.append("cut_ga=1")
        parts.append(f"seq={sequence}")
        return "&".join(parts)

    def scan(self, sequence: SequenceLike,
             service_url: Optional[str] = None) -> List[HmmerResult]:
        """Scan a protein sequence for Pfam profile matches

        Args:
            sequence: Protein sequence as str, Bio.Seq.Seq or Bio.SeqRecord.SeqRecord
            service_url: Endpoint overriding the configured one

        Returns:
            Sorted list of HmmerResult, possibly partial if the response was malformed

        Raises:
            ValidationError: If the sequence contains invalid residues
            ServiceError: If the service cannot be reached or gives no result location
        """
        service_url = service_url or self.service_url
        sequence = sequence_to_string(sequence)
        validate_sequence(sequence)

        location = self._submit(sequence, service_url)
        json_data = self._fetch(location)

        results = parse_response(json_data)
        logger.info(f"Found {len(results)} hits for sequence of length {len(sequence)}")
        return results

    def _submit(self, sequence: str, service_url: str) -> str:
        """POST the search and return the absolute result URL"""
        headers = {
            'Content-Type': 'application/x-www-form-urlencoded',
            'Accept': 'application/json',
        }

        logger.debug(f"Submitting {len(sequence)} residues to {service_url}")
        try:
            response = self.session.post(
                service_url,
                data=self.build_query(sequence),
                headers=headers,
                allow_redirects=False,
                timeout=(self.connect_timeout, None),
            )
        except requests.RequestException as e:
            error = ServiceError(f"Could not submit search to {service_url}: {str(e)}", {'url': service_url})
            log_exception(logger, error, context={'step': 'submit'})
            raise error from e

        try:
            if response.status_code == 500:
                logger.error(f"something went wrong! {service_url}")
                logger.error(response.reason)

            location = response.headers.get('Location')
        finally:
            response.close()

        if not location:
            error = ServiceError(f"No result location returned by {service_url}",
                                 {'url': service_url, 'status': response.status_code})
            log_exception(logger, error, exc_info=False)
            raise error

        return urljoin(service_url, location)

    def _fetch(self, location: str) -> Any:
        """GET the result document; an undecodable body yields an empty dict"""
        logger.debug(f"Fetching results from {location}")
        try:
            response = self.session.get(
                location,
                headers={'Accept': 'application/json'},
                timeout=(self.connect_timeout, None),
            )
        except requests.RequestException as e:
            error = ServiceError(f"Could not fetch results from {location}: {str(e)}", {'url': location})
            log_exception(logger, error, context={'step': 'fetch'})
            raise error from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Error decoding HMMER response from {location}: {str(e)}")
            return {}
        finally:
            response.close()
