#!/usr/bin/env python3
"""
ncu-config
Reads and writes ncu settings in the local (.ncu/config) or global (~/.ncurc) layer.
"""

import os
import sys
import json
import logging
import argparse
from dotenv import load_dotenv

from ncu.config import ConfigStore, ConfigParseError

# Configure logging (can be overridden by LOG_LEVEL environment variable)
log_level = os.environ.get('LOG_LEVEL', 'WARNING').upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.WARNING),
    format='%(asctime)s %(levelname)s: %(message)s',
    datefmt='%m/%d/%Y %I:%M:%S %p'
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='ncu-config', description='Configure ncu')
    parser.add_argument('--global', dest='is_global', action='store_true',
                        help='Use the global config (~/.ncurc)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    set_parser = subparsers.add_parser('set', help='Set a config variable')
    set_parser.add_argument('key')
    set_parser.add_argument('value')

    get_parser = subparsers.add_parser('get', help='Get a config variable')
    get_parser.add_argument('key')

    subparsers.add_parser('list', help='List the configurations')
    return parser


def main(argv=None, store: ConfigStore = None) -> int:
    """Main entry point for the script."""
    load_dotenv()

    args = build_parser().parse_args(argv)
    store = store or ConfigStore()
    # Reads without --global see the merged view
    layer = True if args.is_global else None

    try:
        if args.command == 'set':
            store.update_config(args.is_global, {args.key: args.value})
        elif args.command == 'get':
            value = store.get_value(args.key, is_global=layer)
            print(value if value is not None else '')
        else:
            config = store.get_config(True) if args.is_global else store.get_merged_config()
            for key, value in config.items():
                print(f"{key}: {json.dumps(value) if not isinstance(value, str) else value}")
    except ConfigParseError as e:
        logging.error(str(e))
        return 1
    except OSError as e:
        logging.error(f"Could not write config: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
