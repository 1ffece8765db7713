#!/usr/bin/env python3
"""
main.py
- Process entrypoint for the app-meta init container.
- Sets up logging and optional Sentry reporting, then runs the one-shot collection.
"""
import os
import sys

import sentry_sdk

from appmeta.cli.entrypoint import main as run_cli
from appmeta.core.config import DEBUG, configure_logging


def main():
    # OPTIONAL: Only if you have a Sentry DSN
    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(dsn=sentry_dsn, traces_sample_rate=1.0)

    configure_logging(DEBUG)
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
