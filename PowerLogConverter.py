#!/usr/bin/env python3
"""Convert a DC power monitor log (powerlog-YYYYMMDD-HHMMSS.dat) to CSV.

The CSV goes to stdout unless --output is given. When the input file name
carries the logger's start time, the timestamp column holds epoch
milliseconds in the given timezone; otherwise it counts from zero.
"""
import argparse
import logging
import sys

from powerlogtocsvlibrary import __version__
from powerlogtocsvlibrary import settings
from powerlogtocsvlibrary.anchor import resolve_anchor
from powerlogtocsvlibrary.csvemitter import convert
from powerlogtocsvlibrary.errors import PowerLogError
from powerlogtocsvlibrary.logsetup import setup_logging

general_log = logging.getLogger("GENERAL")


class PowerLogConvertor:
    def __init__(self, input_file, output_file=None, timezone=None, anchor_resolver=resolve_anchor):
        self.input_file = input_file
        self.output_file = output_file
        self.timezone = timezone or settings.default_timezone()
        self.anchor_resolver = anchor_resolver

    def process(self):
        """Run one conversion and return the number of rows written.

        The output file is created fresh (an existing file is truncated).
        Errors propagate to the caller; both streams are released first.
        """
        anchor = self.anchor_resolver(self.input_file, self.timezone)
        general_log.info(f"[*] Processing {self.input_file}...")

        with open(self.input_file, "rb") as infile:
            if self.output_file is None:
                try:
                    rows = convert(infile, sys.stdout.buffer, anchor)
                finally:
                    try:
                        sys.stdout.buffer.flush()
                    except OSError as e:
                        general_log.error(f"Failed to flush stdout: {e}")
            else:
                with open(self.output_file, "wb") as outfile:
                    rows = convert(infile, outfile, anchor)

        destination = self.output_file or "<stdout>"
        general_log.info(f"[+] Wrote {destination} with {rows} records.")
        return rows


def build_parser():
    parser = argparse.ArgumentParser(
        prog="powerlog-converter",
        description="Converter for DC power logger",
    )
    parser.add_argument("input_file", help="input file name")
    parser.add_argument("-o", "--output", dest="output_file", metavar="FILE",
                        help="Set output file name")
    parser.add_argument("-t", "--timezone", metavar="ZONE-NAME",
                        default=settings.default_timezone(),
                        help="Set applicable time zone")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        setup_logging()
    except (ValueError, OSError) as e:
        general_log.error(f"Error: invalid logging configuration: {e}")
        sys.exit(1)

    convertor = PowerLogConvertor(args.input_file, args.output_file, args.timezone)
    try:
        convertor.process()
    except (PowerLogError, OSError) as e:
        general_log.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    _main()
