"""Core output dispatchers."""

import json


def pretty_print(data):
    print(json.dumps(data, indent=2, ensure_ascii=False))


def output(data, formatter=None, fmt="markdown", pretty=False):
    """Output data in requested format."""
    if fmt == "markdown" and formatter:
        print(formatter(data))
    elif pretty:
        pretty_print(data)
    else:
        print(json.dumps(data, ensure_ascii=False))
