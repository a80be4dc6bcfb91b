"""
CLI-specific formatting functions.

Documents are rendered as JSON (the default) or YAML. Key order is kept as
read so output diffs cleanly between reads.
"""
import json
from typing import Any

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return json.dumps(data, indent=2, default=str)
