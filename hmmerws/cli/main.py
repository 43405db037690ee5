# hmmerws/cli/main.py
import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import ConfigManager
from ..core.logging_config import LoggingManager
from ..error_handlers import handle_exceptions
from ..exceptions import ValidationError
from ..models.hmmer import HmmerResult, HmmerScanReport
from ..services.hmmer_scan import RemoteHmmerScan
from ..services.validation_report import clashes_by_residue
from ..utils.sequence import read_fasta_sequences


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hmmerws',
        description='Pfam domain annotation via EBI HMMER and validation report clashes')

    # Global options
    parser.add_argument('--config', type=str, help='Path to configuration file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase verbosity (can be used multiple times)')
    parser.add_argument('--log-file', type=str,
                        help='Log to file in addition to stderr')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    scan_parser = subparsers.add_parser('scan', help='Scan protein sequences against Pfam')
    source = scan_parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--sequence', type=str, help='Protein sequence')
    source.add_argument('--fasta', type=str, help='FASTA file with one or more sequences')
    scan_parser.add_argument('--url', type=str, help='hmmscan service URL')
    scan_parser.add_argument('--no-cut-ga', action='store_true',
                             help='Do not use the Pfam gathering threshold')
    output = scan_parser.add_mutually_exclusive_group()
    output.add_argument('--json', action='store_true', help='Output results as JSON')
    output.add_argument('--xml', type=str, metavar='FILE', help='Write results to an XML file')

    clash_parser = subparsers.add_parser('clashes', help='Summarize clashes in a validation report')
    clash_parser.add_argument('report', type=str, help='wwPDB validation report XML')
    clash_parser.add_argument('--json', action='store_true', help='Output results as JSON')

    return parser


def format_result(result: HmmerResult) -> List[str]:
    """Human readable lines for one hit and its domains"""
    lines = [f"{result.acc or '-'}\t{result.name or '-'}\t"
             f"score={result.score}\tevalue={result.evalue}\t{result.desc or ''}"]
    for domain in result.domains:
        lines.append(f"  {domain.sq_from}-{domain.sq_to}\t"
                     f"hmm {domain.hmm_from}-{domain.hmm_to}\t{domain.hmm_name or ''}")
    return lines


def run_scan(args: argparse.Namespace, config_manager: ConfigManager) -> int:
    logger = logging.getLogger("hmmerws.cli.scan")

    overrides = {}
    if args.url:
        overrides['service_url'] = args.url
    if args.no_cut_ga:
        overrides['cut_ga'] = False
    client = RemoteHmmerScan.from_config(config_manager, **overrides)

    if args.fasta:
        queries = read_fasta_sequences(args.fasta)
    else:
        queries = [('query', args.sequence)]

    scans = []
    for query_id, sequence in queries:
        logger.info(f"Scanning {query_id}")
        scans.append((query_id, client.scan(sequence)))

    if args.json:
        print(json.dumps({query_id: [r.to_dict() for r in results]
                          for query_id, results in scans}, indent=2))
    elif args.xml:
        if len(scans) != 1:
            raise ValidationError("--xml writes a single query; use --json for multiple sequences")
        query_id, results = scans[0]
        report = HmmerScanReport(query_id=query_id, database=client.database, results=results)
        report.to_xml_file(args.xml)
        print(f"Wrote {len(results)} results to {args.xml}")
    else:
        for query_id, results in scans:
            print(f"# {query_id}: {len(results)} hits")
            for result in results:
                print("\n".join(format_result(result)))

    return 0


def run_clashes(args: argparse.Namespace) -> int:
    grouped = clashes_by_residue(args.report)

    if args.json:
        print(json.dumps({str(key): [c.to_dict() for c in clashes]
                          for key, clashes in grouped.items()}, indent=2))
        return 0

    total = sum(len(clashes) for clashes in grouped.values())
    print(f"{total} clash atoms in {len(grouped)} residues")
    for key, clashes in grouped.items():
        worst = max(clashes, key=lambda c: c.clashmag)
        print(f"{key}\t{len(clashes)}\tmax clashmag={worst.clashmag} ({worst.atom})")

    return 0


@handle_exceptions
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config_manager = ConfigManager(args.config)

    LoggingManager.configure(
        verbose=args.verbose > 0,
        log_file=args.log_file,
        component="hmmerws",
        config=config_manager.config
    )

    if args.command == 'scan':
        return run_scan(args, config_manager)
    elif args.command == 'clashes':
        return run_clashes(args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
