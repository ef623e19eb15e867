import pytest
from pydantic import ValidationError

from meetshare.constants import default_subject
from meetshare.env import share_default_sender
from meetshare.modules.sharing.v1.models import ShareRequest


class TestShareRequest:
    def test_deduplicates_recipients_in_order(self):
        request = ShareRequest(
            summary='Summary:', recipients=['bob@example.com', ' alice@example.com', 'bob@example.com', '']
        )

        assert request.recipients == ['bob@example.com', 'alice@example.com']

    def test_defaults_blank_subject_and_sender(self):
        request = ShareRequest(summary='Summary:', recipients=['bob@example.com'], subject='  ', sender='')

        assert request.subject == default_subject
        assert request.sender == share_default_sender

    def test_keeps_given_subject_and_sender(self):
        request = ShareRequest(
            summary='Summary:', recipients=['bob@example.com'], subject='Retro', sender='me@example.com'
        )

        assert request.subject == 'Retro'
        assert request.sender == 'me@example.com'

    @pytest.mark.parametrize(
        'data',
        [
            {'recipients': ['bob@example.com']},
            {'summary': '', 'recipients': ['bob@example.com']},
            {'summary': 'Summary:'},
            {'summary': 'Summary:', 'recipients': []},
            {'summary': 'Summary:', 'recipients': ['  ']},
            {'summary': 'Summary:', 'recipients': 'bob@example.com'},
            {'summary': 'Summary:', 'recipients': [{'email': 'bob@example.com'}]},
        ],
    )
    def test_rejects_invalid_data(self, data):
        with pytest.raises(ValidationError):
            ShareRequest.model_validate(data)
