#!/usr/bin/env python3
"""
Reading clash records out of wwPDB validation report XML files.

Clashes are listed as <clash> children of the <ModelledSubgroup> element of
the residue they belong to; the two atoms of one clash share a ``cid``.
"""
import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from hmmerws.models.validation import Clash
from hmmerws.utils.xml_core import parse_xml_file, process_xml_with_model

logger = logging.getLogger("hmmerws.services.validation_report")


@dataclass(frozen=True)
class ResidueKey:
    """Identifies the residue (ModelledSubgroup) a clash belongs to"""
    chain: Optional[str]
    resname: Optional[str]
    resnum: Optional[str]
    icode: Optional[str] = None
    model: Optional[str] = None

    def __str__(self) -> str:
        # model/chain:residue, e.g. 1/A:LEU12 (model omitted when absent)
        icode = (self.icode or "").strip()
        model = f"{self.model}/" if self.model else ""
        return f"{model}{self.chain}:{self.resname}{self.resnum}{icode}"


def read_clashes(report_path: str) -> List[Clash]:
    """Return every clash in a validation report, in document order"""
    clashes = process_xml_with_model(report_path, Clash.xml_element_path, Clash)
    logger.info(f"Read {len(clashes)} clashes from {report_path}")
    return clashes


def clashes_by_residue(report_path: str) -> Dict[ResidueKey, List[Clash]]:
    """Group the clashes of a report by their enclosing ModelledSubgroup"""
    root = parse_xml_file(report_path).getroot()

    grouped: Dict[ResidueKey, List[Clash]] = OrderedDict()
    for subgroup in root.iter("ModelledSubgroup"):
        clashes = [Clash.from_xml(e) for e in subgroup.findall("clash")]
        if not clashes:
            continue

        key = ResidueKey(
            chain=subgroup.get("chain"),
            resname=subgroup.get("resname"),
            resnum=subgroup.get("resnum"),
            icode=subgroup.get("icode"),
            model=subgroup.get("model"),
        )
        grouped.setdefault(key, []).extend(clashes)

    logger.debug(f"{len(grouped)} residues with clashes in {report_path}")
    return grouped


def group_by_cid(clashes: Iterable[Clash]) -> Dict[int, List[Clash]]:
    """Pair up clash atoms by clash id"""
    pairs: Dict[int, List[Clash]] = {}
    for clash in clashes:
        pairs.setdefault(clash.cid, []).append(clash)

    unpaired = [cid for cid, members in pairs.items() if len(members) != 2]
    if unpaired:
        logger.debug(f"Clash ids without exactly two atoms: {unpaired}")

    return dict(sorted(pairs.items()))
