# blobsync Default Configuration
# Default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "verbose": False,
        "colored": True,
        "format": "table",
    },
    "transfer": {
        "max_concurrency": 1,
        "timeout": None,
    },
    "defaults": {
        "path": None,
    },
}


def get_default_config() -> dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# blobsync Configuration
#
# output:
#   verbose:  print a line per blob while syncing
#   colored:  colored terminal output
#   format:   table or json
#
# transfer:
#   max_concurrency:  parallel range requests within one blob download
#   timeout:          server timeout per request in seconds (null = SDK default)
#
# defaults:
#   path:  destination directory used when --path is not given
#
# The SAS token is never read from this file. Pass it with --sas-token
# or the BLOBSYNC_SAS_TOKEN environment variable.

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
