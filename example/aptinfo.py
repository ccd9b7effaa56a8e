#!/usr/bin/env python3

import sys
import argparse
import logging
from pathlib import Path
from typing import Dict, List

from tabulate import tabulate

from xplane_apt.models.enums import RowCode
from xplane_apt.parsers import AirportParser
from xplane_apt.export import airport_to_dataframes, export_csv
from xplane_apt.utils.runway_geometry import get_runway_polygon, get_runway_shoulder_polygon

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

HEADER_PREFIXES = tuple(f"{code.value} " for code in (RowCode.AIRPORT_HEADER, RowCode.SEAPLANE_HEADER, RowCode.HELIPORT_HEADER))


def split_airports(text: str) -> Dict[str, str]:
    """Cut an apt.dat file into one block of text per airport, keyed by ICAO id."""
    blocks: Dict[str, List[str]] = {}
    current = None
    for line in text.splitlines():
        if line.startswith(HEADER_PREFIXES):
            tokens = line.split()
            current = tokens[4] if len(tokens) > 4 else None
            if current:
                blocks[current] = []
        if current:
            blocks[current].append(line)
    return {ident: '\n'.join(lines) for ident, lines in blocks.items()}


class Command:
    """Command-line interface for xplane_apt."""

    def __init__(self, args):
        self.args = args

    def run(self):
        text = Path(self.args.file).read_text(encoding='utf-8', errors='replace')
        airports = split_airports(text)
        logger.info(f"Found {len(airports)} airports in {self.args.file}")

        idents = self.args.airports or list(airports.keys())
        for ident in idents:
            block = airports.get(ident)
            if block is None:
                logger.error(f"Airport {ident} not found")
                continue
            self.show(block)

    def show(self, block: str):
        result = AirportParser(block, bezier_resolution=self.args.resolution).parse()
        airport = result.data
        print(f"{airport.id} {airport.name} (elevation {airport.elevation:.0f} ft, {airport.airport_type.value})")
        print(result)

        for runway in airport.runways:
            print(runway)
            if self.args.verbose:
                print(f"  surface: {get_runway_polygon(runway)}")
                shoulder = get_runway_shoulder_polygon(runway)
                if shoulder:
                    print(f"  shoulder: {shoulder}")

        for name, df in airport_to_dataframes(airport).items():
            if df.empty or name == 'runways':
                continue
            print(f"\n{name}")
            print(tabulate(df, headers='keys', tablefmt='grid', showindex=False))

        for error in result.get_error_messages():
            logger.warning(error)

        if self.args.output:
            export_csv(airport, self.args.output)


def main():
    parser = argparse.ArgumentParser(description='X-Plane apt.dat airport inspection tool')
    parser.add_argument('file', help='apt.dat file')
    parser.add_argument('airports', help='List of ICAO airport codes', nargs='*')
    parser.add_argument('-r', '--resolution', help='Bezier sampling resolution', type=int, default=60)
    parser.add_argument('-o', '--output', help='Directory for CSV export')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not Path(args.file).exists():
        logger.error(f"File not found: {args.file}")
        sys.exit(1)

    cmd = Command(args)
    cmd.run()

if __name__ == '__main__':
    main()
