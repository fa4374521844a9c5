import datetime
import io

import pandas as pd
import pytest
import requests

from wordchain_app.modules.dictionary.services.lookup_service import DictionaryLookupService

PAGE = """
<div class="pronunciation">[ ih-<b>fem</b>-er-uhl ]</div>
<span class="luna-part-of-speech">adjective</span>
<ol><li>lasting a very short time; short-lived; transitory.</li></ol>
"""


@pytest.fixture
def stub_lookup(http_app, fake_session_factory, fake_response_factory):
    """Install a lookup service that never leaves the process."""

    def install(response=None, error=None):
        session = fake_session_factory(response=response, error=error)
        http_app.extensions['dictionary_lookup_service'] = DictionaryLookupService(session=session)
        return session

    return install


def add_word(client, headers, word='ephemeral', definition='lasting a very short time; short-lived', **extra):
    body = {'word': word, 'definition': definition}
    body.update(extra)
    return client.post('/api/vocabulary', json=body, headers=headers)


class TestHealth:

    def test_api_test(self, client):
        response = client.get('/api/test')
        assert response.status_code == 200
        body = response.get_json()
        assert body['success'] is True
        assert body['message'] == 'API is working!'
        assert body['timestamp']

    def test_unknown_api_path_is_json(self, client):
        response = client.get('/api/nope')
        assert response.status_code == 404
        assert response.get_json()['success'] is False


class TestScrapeDictionary:

    def test_success(self, client, stub_lookup, fake_response_factory):
        session = stub_lookup(response=fake_response_factory(PAGE))
        response = client.post('/api/scrape-dictionary', json={'word': 'ephemeral'})

        assert response.status_code == 200
        assert response.get_json() == {
            'success': True,
            'data': {
                'pronunciation': '[ ih-<b>FEM</b>-er-uhl ]',
                'partOfSpeech': 'adjective',
                'definition': 'lasting a very short time; short-lived; transitory.',
                'source': 'Dictionary.com',
            },
        }
        assert session.calls[0][0].endswith('/browse/ephemeral')

    def test_identity_is_optional(self, client, stub_lookup, fake_response_factory, device_headers):
        stub_lookup(response=fake_response_factory(PAGE))
        response = client.post('/api/scrape-dictionary', json={'word': 'ephemeral'}, headers=device_headers)
        assert response.status_code == 200

    @pytest.mark.parametrize('body', [{}, {'word': ''}, {'word': '   '}, {'word': 42}])
    def test_word_required(self, client, stub_lookup, body):
        session = stub_lookup()
        response = client.post('/api/scrape-dictionary', json=body)

        assert response.status_code == 400
        assert response.get_json() == {'success': False, 'error': 'Word is required'}
        assert session.calls == []

    def test_non_json_body(self, client, stub_lookup):
        stub_lookup()
        response = client.post('/api/scrape-dictionary', data='word=ephemeral')
        assert response.status_code == 400

    def test_upstream_failure(self, client, stub_lookup):
        stub_lookup(error=requests.ConnectionError('Name or service not known'))
        response = client.post('/api/scrape-dictionary', json={'word': 'ephemeral'})

        assert response.status_code == 500
        assert response.get_json() == {
            'success': False,
            'error': 'Failed to scrape dictionary',
            'details': 'Name or service not known',
        }

    def test_unencodable_word(self, client, stub_lookup, fake_response_factory):
        session = stub_lookup(response=fake_response_factory(PAGE))
        response = client.post('/api/scrape-dictionary', json={'word': '\ud800'})

        assert response.status_code == 500
        body = response.get_json()
        assert body['success'] is False
        assert body['error'] == 'Failed to scrape dictionary'
        assert body['details']
        assert session.calls == []

    def test_wrong_method(self, client):
        response = client.get('/api/scrape-dictionary')
        assert response.status_code == 405
        assert response.get_json()['error'] == 'Method not allowed'


class TestIdentity:

    def test_vocabulary_requires_device_id(self, client):
        response = client.get('/api/vocabulary')
        assert response.status_code == 401
        assert response.get_json()['code'] == 'UNAUTHORIZED'

    @pytest.mark.parametrize('device_id', ['', 'has space', 'x' * 65, '../etc'])
    def test_malformed_device_id(self, client, device_id):
        response = client.get('/api/vocabulary', headers={'X-Device-Id': device_id})
        assert response.status_code == 401

    def test_devices_are_isolated(self, client, device_headers):
        entry_id = add_word(client, device_headers).get_json()['data']['id']
        other = {'X-Device-Id': 'someone-else'}

        assert client.get('/api/vocabulary', headers=other).get_json()['data'] == []
        assert client.get(f'/api/vocabulary/{entry_id}', headers=other).status_code == 404
        assert len(client.get('/api/vocabulary', headers=device_headers).get_json()['data']) == 1


class TestVocabularyApi:

    def test_add_and_list(self, client, device_headers):
        response = add_word(client, device_headers, partOfSpeech='adjective', pronunciation='[ ih-<b>FEM</b> ]')
        assert response.status_code == 201
        created = response.get_json()['data']
        assert created['stage'] == 0
        assert created['status'] == 'new'
        assert created['shortDefinition'] == 'lasting a very short time'
        assert created['nextDue'] == (datetime.date.today() + datetime.timedelta(days=7)).isoformat()

        listed = client.get('/api/vocabulary', headers=device_headers).get_json()['data']
        assert [e['id'] for e in listed] == [created['id']]

    def test_duplicate_word(self, client, device_headers):
        add_word(client, device_headers)
        response = add_word(client, device_headers, word='EPHEMERAL')
        assert response.status_code == 409
        assert response.get_json()['code'] == 'CONFLICT'

    def test_missing_definition(self, client, device_headers):
        response = add_word(client, device_headers, definition='')
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    @pytest.mark.parametrize('body', [
        {'word': 5, 'definition': 'a number'},
        {'word': 'five', 'definition': ['a', 'number']},
        {'word': 'five', 'definition': 'a number', 'partOfSpeech': 0},
    ])
    def test_wrong_field_types(self, client, device_headers, body):
        response = client.post('/api/vocabulary', json=body, headers=device_headers)
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    def test_patch_wrong_field_type(self, client, device_headers):
        entry_id = add_word(client, device_headers).get_json()['data']['id']
        response = client.patch(f'/api/vocabulary/{entry_id}', json={'definition': 7}, headers=device_headers)
        assert response.status_code == 400

    def test_filters(self, client, device_headers):
        add_word(client, device_headers, word='apple', definition='a fruit')
        add_word(client, device_headers, word='ephemeral')

        found = client.get('/api/vocabulary?q=fruit', headers=device_headers).get_json()['data']
        assert [e['word'] for e in found] == ['apple']
        assert client.get('/api/vocabulary?status=due', headers=device_headers).get_json()['data'] == []
        assert client.get('/api/vocabulary?status=bogus', headers=device_headers).status_code == 400

    def test_get_update_delete(self, client, device_headers):
        entry_id = add_word(client, device_headers).get_json()['data']['id']
        url = f'/api/vocabulary/{entry_id}'

        assert client.get(url, headers=device_headers).get_json()['data']['word'] == 'ephemeral'

        patched = client.patch(url, json={'definition': 'fleeting'}, headers=device_headers)
        assert patched.status_code == 200
        assert patched.get_json()['data']['definition'] == 'fleeting'

        assert client.patch(url, json={'stage': 2}, headers=device_headers).status_code == 400

        assert client.delete(url, headers=device_headers).status_code == 200
        missing = client.get(url, headers=device_headers)
        assert missing.status_code == 404
        assert missing.get_json()['code'] == 'NOT_FOUND'

    def test_stats_and_clear(self, client, device_headers):
        add_word(client, device_headers, word='apple', definition='a fruit')
        add_word(client, device_headers)

        stats = client.get('/api/vocabulary/stats', headers=device_headers).get_json()['data']
        assert stats == {'total': 2, 'dueToday': 0, 'new': 2, 'consolidating': 0, 'longTerm': 0}

        cleared = client.delete('/api/vocabulary', headers=device_headers)
        assert cleared.get_json()['data'] == {'deleted': 2}
        assert client.get('/api/vocabulary', headers=device_headers).get_json()['data'] == []


class TestSettingsApi:

    def test_defaults_use_header_name(self, client, device_headers):
        data = client.get('/api/settings', headers=device_headers).get_json()['data']
        assert data == {'settings': {'hideMeaningsByDefault': True}, 'userName': 'Tester'}

    def test_update(self, client, device_headers):
        response = client.put(
            '/api/settings',
            json={'settings': {'hideMeaningsByDefault': False}, 'userName': 'Mai'},
            headers=device_headers,
        )
        assert response.get_json()['data'] == {'settings': {'hideMeaningsByDefault': False}, 'userName': 'Mai'}
        again = client.get('/api/settings', headers=device_headers).get_json()['data']
        assert again['settings']['hideMeaningsByDefault'] is False

    @pytest.mark.parametrize('body', [{'userName': 5}, {'settings': 5}])
    def test_wrong_field_types(self, client, device_headers, body):
        response = client.put('/api/settings', json=body, headers=device_headers)
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'

    def test_body_must_be_object(self, client, device_headers):
        response = client.put('/api/settings', json=['x'], headers=device_headers)
        assert response.status_code == 400


def restore_due_word(client, headers):
    document = {
        'version': 1,
        'items': [{
            'id': 'due1', 'word': 'ephemeral', 'definition': 'short-lived',
            'stage': 0, 'nextDue': '2000-01-01', 'addedDate': '1999-12-25',
        }],
        'settings': {},
    }
    return client.post('/api/backup/restore', json=document, headers=headers)


class TestReviewApi:

    def test_queue_and_grade(self, client, device_headers):
        assert restore_due_word(client, device_headers).get_json()['data'] == {'restored': 1}
        today = datetime.date.today()

        queue = client.get('/api/review/queue', headers=device_headers).get_json()['data']
        assert [e['id'] for e in queue] == ['due1']
        assert queue[0]['preview']['pass'] == {
            'stage': 1,
            'nextDue': (today + datetime.timedelta(days=28)).isoformat(),
            'intervalDays': 28,
        }
        assert queue[0]['preview']['fail']['intervalDays'] == 2

        graded = client.post('/api/review/due1', json={'passed': True}, headers=device_headers)
        assert graded.status_code == 200
        data = graded.get_json()['data']
        assert data['stage'] == 1
        assert data['status'] == 'consolidating'
        assert data['lastTested'] == today.isoformat()

        assert client.get('/api/review/queue', headers=device_headers).get_json()['data'] == []

    def test_grade_needs_boolean(self, client, device_headers):
        restore_due_word(client, device_headers)
        response = client.post('/api/review/due1', json={'passed': 'yes'}, headers=device_headers)
        assert response.status_code == 400

    def test_grade_unknown_entry(self, client, device_headers):
        response = client.post('/api/review/nope', json={'passed': False}, headers=device_headers)
        assert response.status_code == 404

    def test_postpone(self, client, device_headers):
        restore_due_word(client, device_headers)
        response = client.post('/api/review/due1/postpone', json={'days': 3}, headers=device_headers)
        assert response.get_json()['data']['nextDue'] == (
            datetime.date.today() + datetime.timedelta(days=3)
        ).isoformat()
        assert client.post('/api/review/due1/postpone', json={'days': 0}, headers=device_headers).status_code == 400
        assert client.post('/api/review/due1/postpone', json={'days': 10 ** 9}, headers=device_headers).status_code == 400


class TestBackupApi:

    def test_export(self, client, device_headers):
        add_word(client, device_headers)
        document = client.get('/api/backup', headers=device_headers).get_json()
        assert document['version'] == 1
        assert [item['word'] for item in document['items']] == ['ephemeral']
        assert document['userName'] == 'Tester'

    def test_restore_rejects_bad_document(self, client, device_headers):
        response = client.post('/api/backup/restore', json={'items': 'x'}, headers=device_headers)
        assert response.status_code == 400

    def test_restore_rejects_duplicate_ids(self, client, device_headers):
        item = {'id': 'same', 'word': 'apple', 'definition': 'a fruit', 'nextDue': '2024-01-02'}
        document = {'items': [item, dict(item, word='banana')]}

        response = client.post('/api/backup/restore', json=document, headers=device_headers)

        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'
        assert client.get('/api/vocabulary', headers=device_headers).get_json()['data'] == []

    def test_csv(self, client, device_headers):
        add_word(client, device_headers)
        response = client.get('/api/backup/csv', headers=device_headers)

        assert response.status_code == 200
        assert response.mimetype == 'text/csv'
        assert 'attachment' in response.headers['Content-Disposition']
        frame = pd.read_csv(io.StringIO(response.get_data(as_text=True)))
        assert list(frame['word']) == ['ephemeral']
