#!/usr/bin/env python3
"""
entrypoint.py
- Command-line entrypoint for the app-meta init step.
- Usage:
    app-meta-init [--kubeconfig PATH] [--config PATH] [--dry-run]

- Exits 0 on success and 1 on any validation, lookup or write failure.
"""

import argparse
import sys

from loguru import logger

from appmeta.core.config import load_settings
from appmeta.core.exceptions import AppMetaError
from appmeta.core.kube_client import default_kubeconfig_path
from appmeta.runner import collect


def build_parser():
    parser = argparse.ArgumentParser(
        prog="app-meta-init",
        description="Collect workload metadata and store it in the app meta cache.",
    )
    default_kubeconfig = default_kubeconfig_path()
    parser.add_argument(
        "--kubeconfig",
        default=default_kubeconfig,
        help="(optional) absolute path to the kubeconfig file" if default_kubeconfig
        else "absolute path to the kubeconfig file",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML settings file (default: $APP_META_CONFIG or /etc/app-meta/config.yml)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=None,
        help="collect and log metadata without writing it to the cache",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(config_path=args.config, dry_run=args.dry_run)
        collect.run(settings, args.kubeconfig)
    except AppMetaError as e:
        logger.error(f"[app-meta] ❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
