import pytest
from fastapi.testclient import TestClient

from meetshare.modules.summaries.app import app
from meetshare.modules.summaries.providers import FallbackSummaryProvider

client = TestClient(app)

transcript = (
    'We discussed the budget. It was long. Nothing else matters here really. '
    'This is fragment four. This is the fifth one.'
)
expected_summary = (
    'Summary:\n'
    '• We discussed the budget\n'
    '• It was long\n'
    '• Nothing else matters here really\n'
    '• This is fragment four\n'
    '• This is the fifth one'
)


@pytest.fixture(autouse=True)
def fallback_provider(mocker):
    provider = FallbackSummaryProvider()
    mocker.spy(provider, 'summarize')
    mocker.patch('meetshare.modules.summaries.processor.provider', provider)

    return provider


class TestCreateSummary:
    def test_summarizes_json_payload(self):
        response = client.post('/v1/summarize', json={'transcript': transcript})

        assert response.status_code == 200
        assert response.json() == {'success': True, 'summary': expected_summary, 'originalText': transcript}

    def test_summarizes_uploaded_file(self):
        '''Test that an uploaded text file is used as the transcript.'''

        response = client.post(
            '/v1/summarize',
            files={'transcript': ('notes.md', transcript.encode('utf-8'), 'text/markdown')},
            data={'customPrompt': 'Focus on decisions'},
        )

        assert response.status_code == 200
        assert response.json()['summary'] == f'Custom Instructions: Focus on decisions\n\n{expected_summary}'
        assert response.json()['originalText'] == transcript

    def test_summarizes_form_field(self):
        response = client.post('/v1/summarize', data={'transcript': transcript})

        assert response.status_code == 200
        assert response.json()['summary'] == expected_summary

    def test_rejects_non_text_files(self, fallback_provider):
        response = client.post('/v1/summarize', files={'transcript': ('notes.pdf', b'%PDF-1.4', 'application/pdf')})

        assert response.status_code == 400
        assert response.json() == {'error': 'Only text files are allowed'}
        fallback_provider.summarize.assert_not_called()

    @pytest.mark.parametrize('body', [{}, {'transcript': ''}, {'customPrompt': 'Be brief'}, {'transcript': 42}])
    def test_rejects_missing_transcript(self, body, fallback_provider):
        response = client.post('/v1/summarize', json=body)

        assert response.status_code == 400
        assert response.json() == {'error': 'No transcript provided'}
        fallback_provider.summarize.assert_not_called()

    def test_rejects_blank_transcript(self, fallback_provider):
        '''Test that a whitespace only transcript is rejected before any summarization.'''

        response = client.post('/v1/summarize', json={'transcript': ' \n\t '})

        assert response.status_code == 400
        assert response.json() == {'error': 'Transcript is empty'}
        fallback_provider.summarize.assert_not_called()

    def test_rejects_empty_upload(self):
        response = client.post('/v1/summarize', files={'transcript': ('empty.txt', b'', 'text/plain')})

        assert response.status_code == 400
        assert response.json() == {'error': 'Transcript is empty'}

    def test_hides_unexpected_errors(self, mocker):
        mocker.patch('meetshare.modules.summaries.v1.router.summarize', side_effect=RuntimeError('secret detail'))

        response = client.post('/v1/summarize', json={'transcript': transcript})

        assert response.status_code == 500
        assert response.json() == {'error': 'Failed to generate summary'}

    def test_upstream_errors_fall_back(self, mocker):
        '''Test that a failing completion provider still yields a local summary.'''

        provider = mocker.Mock()
        provider.name.value = 'COMPLETION'
        provider.summarize = mocker.AsyncMock(side_effect=TimeoutError())
        mocker.patch('meetshare.modules.summaries.processor.provider', provider)

        response = client.post('/v1/summarize', json={'transcript': transcript})

        assert response.status_code == 200
        assert response.json()['summary'] == expected_summary

    @pytest.mark.parametrize(
        'custom_prompt, expected_prefix',
        [(5, 'Custom Instructions: 5\n\n'), (True, 'Custom Instructions: true\n\n'), (0, ''), ({'x': 1}, '')],
    )
    def test_tolerates_non_text_custom_prompt(self, custom_prompt, expected_prefix):
        '''Test that an odd customPrompt does not hide a valid transcript.'''

        response = client.post('/v1/summarize', json={'transcript': transcript, 'customPrompt': custom_prompt})

        assert response.status_code == 200
        assert response.json()['summary'] == f'{expected_prefix}{expected_summary}'

    def test_accepts_content_type_parameters(self):
        '''Test that the upload media type is checked without its charset parameter.'''

        response = client.post(
            '/v1/summarize',
            files={'transcript': ('notes.txt', transcript.encode('utf-8'), 'text/plain; charset=utf-8')},
        )

        assert response.status_code == 200
        assert response.json()['summary'] == expected_summary

    def test_accepts_large_form_fields(self):
        '''Test that a pasted transcript over 1MB sent as a multipart field is summarized.'''

        large_transcript = 'This sentence is long enough. ' * 50000
        boundary = 'meetshare-boundary'
        body = (
            f'--{boundary}\r\n'
            'Content-Disposition: form-data; name="transcript"\r\n\r\n'
            f'{large_transcript}\r\n'
            f'--{boundary}--\r\n'
        ).encode('utf-8')

        response = client.post(
            '/v1/summarize', content=body, headers={'Content-Type': f'multipart/form-data; boundary={boundary}'}
        )

        assert response.status_code == 200
        assert len(response.json()['originalText']) == len(large_transcript)
        assert response.json()['summary'].count('• This sentence is long enough') == 5

    def test_rejects_byte_order_mark_only_upload(self, fallback_provider):
        response = client.post('/v1/summarize', files={'transcript': ('bom.txt', '\ufeff \n'.encode('utf-8'), 'text/plain')})

        assert response.status_code == 400
        assert response.json() == {'error': 'Transcript is empty'}
        fallback_provider.summarize.assert_not_called()
