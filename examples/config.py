#!/usr/bin/python3
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later

# Read the config file for a git repository.
#
# Example usage:
#  python examples/config.py [path/to/.git/config]

import sys

from gitconf import ParseError, load
from gitconf.log_utils import default_logging_config

default_logging_config()

path = sys.argv[1] if len(sys.argv) > 1 else ".git/config"

with open(path, "rb") as f:
    try:
        config = load(f)
    except ParseError as e:
        sys.exit(f"{path}: {e}")

print(config.get("core.filemode"))
print(config.get("remote.origin.url"))
