"""Tests for file registration (content write + catalog insert)."""

import os

import pytest

from archive_api.core.exceptions import ValidationError
from archive_api.models import File
from archive_api.services.registration import IncomingFile, register_upload


def test_register_upload_success(db, store, folder):
    """Bytes land in the content area and one catalog row is added per file."""
    result = register_upload(db, store, folder.id, [IncomingFile('report.pdf', b'%PDF-1.4')])

    assert result.failed == []
    assert [f.name for f in result.files] == ['report.pdf']
    assert result.files[0].size == 8

    record = db.query(File).one()
    assert record.name == 'report.pdf'
    assert record.src == os.path.join('files', 'report.pdf')
    assert record.folder_id == folder.id
    assert record.created_at == record.updated_at

    with open(os.path.join(store.directory, 'report.pdf'), 'rb') as stored:
        assert stored.read() == b'%PDF-1.4'


def test_register_upload_empty_batch(db, store, folder):
    with pytest.raises(ValidationError):
        register_upload(db, store, folder.id, [])

    assert not os.path.exists(store.directory)


def test_register_upload_too_many_files(db, store, folder):
    files = [IncomingFile(f'{i}.txt', b'x') for i in range(3)]

    with pytest.raises(ValidationError):
        register_upload(db, store, folder.id, files, max_files=2)

    assert db.query(File).count() == 0


def test_register_upload_one_bad_file_does_not_block_batch(db, store, folder):
    """An unnamed file fails on its own; its sibling is still stored and listed."""
    files = [IncomingFile('', b'nameless'), IncomingFile('minutes.docx', b'content')]

    result = register_upload(db, store, folder.id, files)

    assert len(result.files) == 2
    assert result.failed == ['']
    assert [f.name for f in db.query(File).all()] == ['minutes.docx']


def test_register_upload_same_name_overwrites(db, store, folder):
    """Storage is keyed by filename only: the last write wins."""
    register_upload(db, store, folder.id, [IncomingFile('scan.png', b'first')])
    register_upload(db, store, folder.id, [IncomingFile('scan.png', b'second')])

    with open(os.path.join(store.directory, 'scan.png'), 'rb') as stored:
        assert stored.read() == b'second'
    assert db.query(File).filter(File.name == 'scan.png').count() == 2


def test_upload_endpoint(client, folder, store):
    response = client.post(
        '/upload',
        data={'folder_id': str(folder.id)},
        files=[
            ('files', ('a.txt', b'alpha', 'text/plain')),
            ('files', ('b.txt', b'beta', 'text/plain')),
        ],
    )

    assert response.status_code == 200
    body = response.json()
    assert [f['name'] for f in body['files']] == ['a.txt', 'b.txt']
    assert body['files'][1]['size'] == 4
    assert body['failed'] == []
    assert [f['name'] for f in client.get(f'/files/{folder.id}').json()] == ['a.txt', 'b.txt']


def test_upload_endpoint_no_files(client, folder):
    response = client.post('/upload', data={'folder_id': str(folder.id)})

    assert response.status_code == 400
    assert 'error' in response.json()


def test_upload_endpoint_unknown_folder_still_succeeds(client, store):
    """Failed catalog inserts are reported, not raised."""
    response = client.post(
        '/upload',
        data={'folder_id': '999'},
        files=[('files', ('orphan.txt', b'data', 'text/plain'))],
    )

    assert response.status_code == 200
    body = response.json()
    assert [f['name'] for f in body['files']] == ['orphan.txt']
    assert body['failed'] == ['orphan.txt']


def test_upload_endpoint_unnamed_part_does_not_block_batch(client, folder):
    """A part with filename="" is reported as failed; its sibling is stored."""
    boundary = 'archive-boundary'
    body = (
        f'--{boundary}\r\n'
        'Content-Disposition: form-data; name="folder_id"\r\n\r\n'
        f'{folder.id}\r\n'
        f'--{boundary}\r\n'
        'Content-Disposition: form-data; name="files"; filename=""\r\n'
        'Content-Type: text/plain\r\n\r\n'
        'nameless\r\n'
        f'--{boundary}\r\n'
        'Content-Disposition: form-data; name="files"; filename="minutes.txt"\r\n'
        'Content-Type: text/plain\r\n\r\n'
        'content\r\n'
        f'--{boundary}--\r\n'
    ).encode()

    response = client.post(
        '/upload',
        content=body,
        headers={'Content-Type': f'multipart/form-data; boundary={boundary}'},
    )

    assert response.status_code == 200
    payload = response.json()
    assert [f['name'] for f in payload['files']] == ['', 'minutes.txt']
    assert payload['failed'] == ['']
    assert [f['name'] for f in client.get(f'/files/{folder.id}').json()] == ['minutes.txt']


def test_uploaded_file_is_served_back(client, folder):
    client.post(
        '/upload',
        data={'folder_id': str(folder.id)},
        files=[('files', ('hello.txt', b'hello archive', 'text/plain'))],
    )

    response = client.get('/files/hello.txt')

    assert response.status_code == 200
    assert response.content == b'hello archive'


def test_serve_missing_file(client):
    response = client.get('/files/absent.txt')

    assert response.status_code == 404
    assert response.json() == {'error': 'File not found'}
