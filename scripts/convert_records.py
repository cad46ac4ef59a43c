#!/usr/bin/env python3
"""Convert a CORSIKA record dump (.npz) into a GrIsu photon list."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from CorsikaGrisu import GrisuConverter, ConverterConfig
from CorsikaGrisu.utils import ConversionError, OutputFileError, setup_logger


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('input', help="record dump (.npz)")
    parser.add_argument('-c', '--config', help="YAML configuration file")
    parser.add_argument('-o', '--output', help="output file, or 'stdout'")
    parser.add_argument('--atmosphere-id', type=int, help="CORSIKA atmosphere id (negative: none)")
    parser.add_argument('--atmosphere-dir', help="directory with atmprof<id>.dat tables")
    parser.add_argument('--more-info', action='store_true',
                        help="write 'C' lines with first interaction depth")
    parser.add_argument('--version-label', help="label for the header banner")
    parser.add_argument('--input-card', help="CORSIKA input card copied into the header")
    parser.add_argument('--log-file', help="log file")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug output")
    return parser.parse_args(argv)


def build_config(args) -> ConverterConfig:
    config = ConverterConfig.from_yaml(args.config) if args.config else ConverterConfig()

    overrides = {
        'output_file': args.output,
        'atmosphere_id': args.atmosphere_id,
        'atmosphere_dir': args.atmosphere_dir,
        'version_label': args.version_label,
        'run_header_info_path': args.input_card,
        'log_file': args.log_file,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if args.more_info:
        overrides['print_more_info'] = True
    if args.verbose:
        overrides['log_level'] = 'DEBUG'

    return replace(config, **overrides)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = build_config(args)
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    try:
        GrisuConverter(config).run(args.input)
    except OutputFileError as e:
        logger.error(f"error opening outputfile: {e.path}")
        return 1
    except ConversionError as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
