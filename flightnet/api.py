"""HTTP session with retry / rate-limit logic for dataset downloads."""

import logging
import time

import requests

from flightnet.config import HEADERS, MAX_RETRIES, REQUEST_DELAY, RETRY_BACKOFF

log = logging.getLogger("flightnet")

session = requests.Session()
session.headers.update(HEADERS)


def fetch_text(url, params=None):
    """GET a text resource with retries and rate-limit backoff.

    Raises the last ``requests`` error once every attempt has failed, since a
    dataset cannot be built from a partial download.
    """
    last_exc = None
    for attempt in range(1, MAX_RETRIES + 1):
        try:
            time.sleep(REQUEST_DELAY)
            resp = session.get(url, params=params, timeout=60)
            if resp.status_code == 200:
                resp.encoding = resp.encoding or "utf-8"
                return resp.text
            if resp.status_code == 429:
                wait = RETRY_BACKOFF * attempt
                log.warning("Rate limited (429). Waiting %ds ...", wait)
                time.sleep(wait)
                last_exc = requests.HTTPError("429 Too Many Requests", response=resp)
                continue
            if resp.status_code == 404:
                log.error("404 for %s", url)
                resp.raise_for_status()
            log.warning("HTTP %d for %s (attempt %d)", resp.status_code, url, attempt)
            last_exc = requests.HTTPError(f"HTTP {resp.status_code}", response=resp)
        except requests.HTTPError:
            raise
        except requests.RequestException as exc:
            log.warning("Request error: %s (attempt %d)", exc, attempt)
            last_exc = exc
        if attempt < MAX_RETRIES:
            time.sleep(RETRY_BACKOFF * attempt)
    log.error("Failed after %d attempts: %s", MAX_RETRIES, url)
    raise last_exc
