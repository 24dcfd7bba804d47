import logging
import requests
from factboard.errors import FetchFailure, ParseFailure

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class FactsAPIClient:
    """Fetches raw fact strings from a public ``{"data": [...]}`` endpoint."""

    def __init__(self, request_uri, timeout=DEFAULT_TIMEOUT, session=None):
        self.request_uri = request_uri
        self.timeout = timeout
        self.session = session or requests

    def fetch_payload(self):
        """
        GET the configured URI. Raises FetchFailure on transport errors,
        timeouts and non-2xx responses; ParseFailure if the body is not JSON.
        """
        try:
            resp = self.session.get(self.request_uri, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            raise FetchFailure(f"GET {self.request_uri} failed: {e}") from e

        try:
            return resp.json()
        except ValueError as e:
            raise ParseFailure(f"Response from {self.request_uri} is not JSON") from e

    def fetch_facts(self):
        payload = self.fetch_payload()
        facts = parse_facts(payload)
        logger.info(f"Fetched {len(facts)} raw facts from {self.request_uri}")
        return facts


def parse_facts(payload):
    """Extract the ``data`` list. Every item must be a string."""
    if not isinstance(payload, dict):
        raise ParseFailure(f"Expected a JSON object, got {type(payload).__name__}")

    data = payload.get('data')
    if data is None:
        # tolerate "Data"/"DATA" keys
        data = next((v for k, v in payload.items() if k.lower() == 'data'), None)
    if not isinstance(data, list):
        raise ParseFailure('Payload has no "data" list')

    if not all(isinstance(item, str) for item in data):
        raise ParseFailure('"data" must contain only strings')
    return data
