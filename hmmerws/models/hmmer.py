#!/usr/bin/env python3
"""
Result models for HMMER hmmscan searches.

HmmerResult is one Pfam family hit for the query sequence, HmmerDomain is one
reported alignment of that family against the query. Both are immutable and
hashable so that collections of them behave as sorted sets.
"""

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, ClassVar, Dict, Iterable, Optional, Tuple
import xml.etree.ElementTree as ET

from hmmerws.models.base import XmlSerializable


def to_int(value: Any) -> Optional[int]:
    """Coerce an int or numeric string to int, None otherwise"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def to_float(value: Any) -> Optional[float]:
    """Coerce a number or numeric string to float, None if missing"""
    if value is None:
        return None
    return float(value)


def _key(value):
    # None sorts after any value
    return (value is None, value if value is not None else 0)


def _str_key(value):
    return (value is None, value or "")


def _set_attr(element: ET.Element, name: str, value: Any) -> None:
    if value is not None:
        element.set(name, str(value))


@total_ordering
@dataclass(frozen=True)
class HmmerDomain(XmlSerializable):
    """A reported domain alignment within a HMMER hit"""
    hmm_acc: Optional[str] = None
    hmm_name: Optional[str] = None
    hmm_desc: Optional[str] = None
    hmm_from: Optional[int] = None
    hmm_to: Optional[int] = None
    sq_from: Optional[int] = None
    sq_to: Optional[int] = None
    ali_length: Optional[int] = None
    sim_count: Optional[int] = None

    xml_element_path: ClassVar[str] = "./domain"

    @property
    def sort_key(self) -> Tuple:
        return (_key(self.sq_from), _key(self.sq_to),
                _key(self.hmm_from), _key(self.hmm_to),
                _str_key(self.hmm_acc), _str_key(self.hmm_name))

    def __lt__(self, other: 'HmmerDomain') -> bool:
        if not isinstance(other, HmmerDomain):
            return NotImplemented
        return self.sort_key < other.sort_key

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'HmmerDomain':
        """Create a domain from one entry of a hit's "domains" array"""
        return cls(
            hmm_acc=data.get("alihmmacc"),
            hmm_name=data.get("alihmmname"),
            hmm_desc=data.get("alihmmdesc"),
            hmm_from=to_int(data.get("alihmmfrom")),
            hmm_to=to_int(data.get("alihmmto")),
            sq_from=to_int(data.get("alisqfrom")),
            sq_to=to_int(data.get("alisqto")),
            ali_length=to_int(data.get("aliL")),
            sim_count=to_int(data.get("aliSimCount")),
        )

    def overlap_length(self, other: 'HmmerDomain') -> int:
        """Number of residues shared by the two query ranges"""
        if None in (self.sq_from, self.sq_to, other.sq_from, other.sq_to):
            return 0
        return max(0, min(self.sq_to, other.sq_to) - max(self.sq_from, other.sq_from))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hmm_acc": self.hmm_acc,
            "hmm_name": self.hmm_name,
            "hmm_desc": self.hmm_desc,
            "hmm_from": self.hmm_from,
            "hmm_to": self.hmm_to,
            "sq_from": self.sq_from,
            "sq_to": self.sq_to,
            "ali_length": self.ali_length,
            "sim_count": self.sim_count,
        }

    @classmethod
    def from_xml(cls, element: ET.Element) -> 'HmmerDomain':
        return cls(
            hmm_acc=element.get("hmm_acc"),
            hmm_name=element.get("hmm_name"),
            hmm_desc=element.get("hmm_desc"),
            hmm_from=to_int(element.get("hmm_from")),
            hmm_to=to_int(element.get("hmm_to")),
            sq_from=to_int(element.get("sq_from")),
            sq_to=to_int(element.get("sq_to")),
            ali_length=to_int(element.get("ali_length")),
            sim_count=to_int(element.get("sim_count")),
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("domain")
        for name, value in self.to_dict().items():
            _set_attr(element, name, value)
        return element


@total_ordering
@dataclass(frozen=True)
class HmmerResult(XmlSerializable):
    """A Pfam family hit returned by hmmscan"""
    acc: Optional[str] = None
    name: Optional[str] = None
    desc: Optional[str] = None
    score: Optional[float] = None
    evalue: Optional[float] = None
    pvalue: Optional[float] = None
    dcl: int = -1
    ndom: Optional[int] = None
    nreported: Optional[int] = None
    domains: Tuple[HmmerDomain, ...] = field(default_factory=tuple)

    xml_element_path: ClassVar[str] = ".//hmmer_result"

    def __post_init__(self):
        # Keep domains as a sorted, duplicate-free tuple whatever was passed in
        object.__setattr__(self, "domains", tuple(sorted(set(self.domains))))

    @property
    def start(self) -> Optional[int]:
        """Query start of the first domain"""
        return self.domains[0].sq_from if self.domains else None

    @property
    def end(self) -> Optional[int]:
        """Query end of the last domain"""
        return self.domains[-1].sq_to if self.domains else None

    @property
    def sort_key(self) -> Tuple:
        # Hits without domains sort first
        return (bool(self.domains), _key(self.start),
                _str_key(self.acc), _str_key(self.name), _key(self.evalue))

    def __lt__(self, other: 'HmmerResult') -> bool:
        if not isinstance(other, HmmerResult):
            return NotImplemented
        return self.sort_key < other.sort_key

    @classmethod
    def from_json(cls, hit: Dict[str, Any],
                  domains: Iterable[HmmerDomain] = ()) -> 'HmmerResult':
        """Create a result from one entry of the "hits" array

        Domains are parsed separately so the caller decides which are reported.
        """
        dcl = to_int(hit.get("dcl"))
        return cls(
            acc=hit.get("acc"),
            name=hit.get("name"),
            desc=hit.get("desc"),
            score=to_float(hit.get("score")),
            evalue=to_float(hit.get("evalue")),
            pvalue=to_float(hit.get("pvalue")),
            dcl=dcl if dcl is not None else -1,
            ndom=to_int(hit.get("ndom")),
            nreported=to_int(hit.get("nreported")),
            domains=tuple(domains),
        )

    def overlap_length(self, other: 'HmmerResult') -> int:
        """Total residue overlap between the domains of two results"""
        return sum(d1.overlap_length(d2)
                   for d1 in self.domains
                   for d2 in other.domains)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acc": self.acc,
            "name": self.name,
            "desc": self.desc,
            "score": self.score,
            "evalue": self.evalue,
            "pvalue": self.pvalue,
            "dcl": self.dcl,
            "ndom": self.ndom,
            "nreported": self.nreported,
            "domains": [d.to_dict() for d in self.domains],
        }

    @classmethod
    def from_xml(cls, element: ET.Element) -> 'HmmerResult':
        dcl = to_int(element.get("dcl"))
        return cls(
            acc=element.get("acc"),
            name=element.get("name"),
            desc=element.get("desc"),
            score=to_float(element.get("score")),
            evalue=to_float(element.get("evalue")),
            pvalue=to_float(element.get("pvalue")),
            dcl=dcl if dcl is not None else -1,
            ndom=to_int(element.get("ndom")),
            nreported=to_int(element.get("nreported")),
            domains=tuple(HmmerDomain.from_xml(d)
                          for d in element.iterfind(HmmerDomain.xml_element_path)),
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("hmmer_result")
        for name, value in self.to_dict().items():
            if name != "domains":
                _set_attr(element, name, value)
        for domain in self.domains:
            element.append(domain.to_xml())
        return element


@dataclass(frozen=True)
class HmmerScanReport(XmlSerializable):
    """Results of one hmmscan query, saved as a <hmmer_scan> document"""
    query_id: Optional[str] = None
    database: Optional[str] = None
    results: Tuple[HmmerResult, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "results", tuple(sorted(set(self.results))))

    @classmethod
    def from_xml(cls, element: ET.Element) -> 'HmmerScanReport':
        return cls(
            query_id=element.get("query"),
            database=element.get("database"),
            results=tuple(HmmerResult.from_xml(e)
                          for e in element.iterfind(HmmerResult.xml_element_path)),
        )

    def to_xml(self) -> ET.Element:
        root = ET.Element("hmmer_scan")
        _set_attr(root, "query", self.query_id)
        _set_attr(root, "database", self.database)
        for result in self.results:
            root.append(result.to_xml())
        return root
