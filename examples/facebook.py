#!/usr/bin/env python3
"""Search the Facebook Graph API with the bundled ``fb`` spec.

Usage:
    FB_APP_ID=... FB_APP_SECRET=... python examples/facebook.py coffee
"""

import json
import os
import sys

import requests
import singer

from restspec import SpecClient

LOGGER = singer.get_logger()

TOKEN_URL = "https://graph.facebook.com/oauth/access_token"


def fetch_app_token(app_id, app_secret):
    """Get an app access token with the client credentials grant."""
    resp = requests.get(
        TOKEN_URL,
        params={
            "client_id": app_id,
            "client_secret": app_secret,
            "grant_type": "client_credentials",
        },
        timeout=30,
    )
    resp.raise_for_status()
    return resp.json()["access_token"]


def print_response(response):
    print("Response")
    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write("\n")


def main():
    query = sys.argv[1] if len(sys.argv) > 1 else "coffee"
    token = fetch_app_token(os.environ["FB_APP_ID"], os.environ["FB_APP_SECRET"])

    LOGGER.info("Searching for '%s'", query)
    SpecClient().use_spec("fb").get(
        "search", {"q": query, "access_token": token}, print_response
    )


if __name__ == "__main__":
    main()
