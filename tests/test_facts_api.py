from unittest.mock import MagicMock

import pytest
import requests

from factboard.errors import FetchFailure, ParseFailure
from factboard.integrations.facts_api import FactsAPIClient, parse_facts


class TestParseFacts:
    def test_data_list(self):
        assert parse_facts({'data': ['a', 'b']}) == ['a', 'b']

    def test_capitalised_key(self):
        assert parse_facts({'Data': ['a']}) == ['a']

    def test_empty_list(self):
        assert parse_facts({'data': []}) == []

    @pytest.mark.parametrize('payload', [None, [], 'data', {'data': None}, {'data': [1]}])
    def test_rejects_bad_shapes(self, payload):
        with pytest.raises(ParseFailure):
            parse_facts(payload)


class TestFactsAPIClient:
    def test_fetch_uses_timeout(self, api_response):
        session = MagicMock()
        session.get.return_value = api_response({'data': ['Cats purr.']})

        client = FactsAPIClient('https://facts.test/api', timeout=2.5, session=session)

        assert client.fetch_facts() == ['Cats purr.']
        session.get.assert_called_once_with('https://facts.test/api', timeout=2.5)

    def test_non_success_status(self, api_response):
        session = MagicMock()
        session.get.return_value = api_response(status_code=404)

        with pytest.raises(FetchFailure):
            FactsAPIClient('https://facts.test/api', session=session).fetch_facts()

    def test_connection_error(self):
        session = MagicMock()
        session.get.side_effect = requests.ConnectionError('refused')

        with pytest.raises(FetchFailure):
            FactsAPIClient('https://facts.test/api', session=session).fetch_payload()

    def test_invalid_json(self, api_response):
        session = MagicMock()
        session.get.return_value = api_response(json_error=ValueError('Expecting value'))

        with pytest.raises(ParseFailure):
            FactsAPIClient('https://facts.test/api', session=session).fetch_payload()
