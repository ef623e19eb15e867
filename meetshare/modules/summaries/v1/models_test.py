import pytest

from meetshare.modules.summaries.v1.models import SummaryPayload


class TestSummaryPayload:
    def test_reads_camel_case_custom_prompt(self):
        payload = SummaryPayload.model_validate({'transcript': 'Notes', 'customPrompt': 'Be brief'})

        assert payload.custom_prompt == 'Be brief'

    @pytest.mark.parametrize('transcript', [42, ['Notes'], {'text': 'Notes'}, False])
    def test_non_text_transcript_is_missing(self, transcript):
        assert SummaryPayload.model_validate({'transcript': transcript}).transcript is None

    @pytest.mark.parametrize(
        'custom_prompt, expected',
        [(7, '7'), (1.5, '1.5'), (True, 'true'), (False, None), (0, None), (['a'], None), ({'a': 1}, None)],
    )
    def test_coerces_custom_prompt(self, custom_prompt, expected):
        payload = SummaryPayload.model_validate({'transcript': 'Notes', 'customPrompt': custom_prompt})

        assert payload.custom_prompt == expected
