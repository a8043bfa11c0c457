"""Spec-driven client for any REST API.

A declarative JSON spec describes an API's root URL and its resources
(paths, allowed verbs, required params). Requests are dispatched by
resource name or path instead of hand-built URLs.

Features:
  - Resources addressed by name ("search") or path ("users/:id", "users/42")
  - Required param validation before any network call
  - ``/:param`` path segments filled from the request params
  - HTTP Basic and OAuth 1.0a authentication
  - Bundled specs in restspec/specs, or any directory of *.json specs
  - ``restspec`` command for one-off requests from a config file
"""

__version__ = "1.0.0"

import argparse
import json
import sys

import singer
from singer import utils

from restspec.client import SpecClient
from restspec.errors import (
    AuthError,
    BindError,
    DuplicateSpecName,
    HttpStatusError,
    MissingPathParam,
    MissingRequiredParam,
    NoActiveSpec,
    ResourceNotSupported,
    ResponseDecodeError,
    RestSpecError,
    SpecError,
    SpecNotFound,
    TransportError,
    UnsupportedVerb,
)
from restspec.spec import ApiSpec, ResourceDef
from restspec.store import SpecStore
from restspec.verbs import Verb

REQUIRED_CONFIG_KEYS = [
    "spec",
]

LOGGER = singer.get_logger()


def parse_param(text):
    """Parse a ``key=value`` command-line param."""
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"params must look like key=value, got '{text}'")
    return key, value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="restspec",
        description="Send one request to a REST API described by a JSON spec",
    )
    parser.add_argument(
        "-c", "--config",
        required=True,
        help="Path to configuration JSON file",
    )
    parser.add_argument(
        "verb",
        type=str.lower,
        help="HTTP verb: " + ", ".join(v.value for v in Verb),
    )
    parser.add_argument("resource", help="Resource name or path, e.g. search or users/:id")
    parser.add_argument(
        "-p", "--param",
        action="append",
        type=parse_param,
        default=[],
        dest="params",
        metavar="KEY=VALUE",
        help="Request param; repeat for more than one",
    )
    return parser.parse_args(argv)


def build_client(config):
    """Build a SpecClient with the spec and auth named in ``config``."""
    client = SpecClient(config)
    client.use_spec(config["spec"])
    if config.get("auth"):
        client.set_auth(config["auth"])
    if config.get("oauth"):
        client.set_oauth(config["oauth"])
    return client


@utils.handle_top_exception(LOGGER)
def main(argv=None):
    """Entry point for restspec."""
    args = parse_args(argv)
    config = utils.load_json(args.config)
    utils.check_config(config, REQUIRED_CONFIG_KEYS)

    client = build_client(config)
    response = client.request(args.verb, args.resource, dict(args.params))

    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
