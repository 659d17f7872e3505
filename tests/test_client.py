#!/usr/bin/env python3
"""
Tests for the public client operations against a stubbed session
"""
import pytest

from lesswrong_client import (
    LessWrongClient, MalformedCommentError, MalformedResponseError,
    NotFoundError, ServerError
)

from conftest import StubSession, comments_body, make_comment, make_response, post_body


def test_get_post(client_for):
    client, session = client_for(make_response(200, post_body()))
    
    post = client.get_post('7ZqGiPHTpiDMwqMN2')
    
    assert post.id == '7ZqGiPHTpiDMwqMN2'
    assert post.author == 'Eliezer Yudkowsky'
    assert session.calls[0]['json']['variables'] == {'id': '7ZqGiPHTpiDMwqMN2'}


def test_get_post_not_found(client_for):
    body = {'data': {'post': None}, 'errors': [{'message': 'app.missing_document'}]}
    client, _ = client_for(make_response(200, body))
    
    with pytest.raises(NotFoundError):
        client.get_post('123456')


def test_get_post_is_idempotent(client_for):
    client, session = client_for(make_response(200, post_body()), make_response(200, post_body()))
    
    first = client.get_post('7ZqGiPHTpiDMwqMN2')
    second = client.get_post('7ZqGiPHTpiDMwqMN2')
    
    assert first == second
    assert len(session.calls) == 2


def test_get_post_rejects_empty_id(client_for):
    client, session = client_for()
    with pytest.raises(ValueError):
        client.get_post('')
    assert session.calls == []


def test_server_errors_propagate(client_for):
    client, _ = client_for(make_response(502, raw=b'bad gateway'))
    with pytest.raises(ServerError):
        client.get_post('abc')


def test_get_comments(client_for):
    results = [make_comment('a'), make_comment('b', parent='a'), make_comment('c', deleted=True)]
    client, session = client_for(make_response(200, comments_body(results)))
    
    comments = client.get_comments('7ZqGiPHTpiDMwqMN2', 10)
    
    assert set(comments) == {'a', 'b'}
    assert any(c.parent_comment_id is not None for c in comments.values())
    assert session.calls[0]['json']['variables']['terms'] == {
        'view': 'postCommentsTop', 'postId': '7ZqGiPHTpiDMwqMN2', 'limit': 10
    }


def test_get_comments_uses_configured_limit(client_for, config):
    client, session = client_for(make_response(200, comments_body([])))
    
    assert client.get_comments('abc') == {}
    assert session.calls[0]['json']['variables']['terms']['limit'] == config.comment_limit


def test_get_comments_rejects_bad_limit(client_for):
    client, session = client_for()
    with pytest.raises(ValueError):
        client.get_comments('abc', 0)
    assert session.calls == []


def test_get_comments_malformed_batch(client_for):
    results = [make_comment('a'), make_comment('b', postedAt=None)]
    client, _ = client_for(make_response(200, comments_body(results)))
    
    with pytest.raises(MalformedCommentError) as excinfo:
        client.get_comments('abc', 10)
    assert isinstance(excinfo.value, MalformedResponseError)
    assert excinfo.value.field == 'comment.posted_at'


def test_get_comments_can_skip_malformed(client_for):
    results = [make_comment('a'), make_comment('b', postedAt=None)]
    client, _ = client_for(make_response(200, comments_body(results)))
    
    comments = client.get_comments('abc', 10, skip_malformed=True)
    assert set(comments) == {'a'}


def test_debug_output(config, capsys):
    config.debug = True
    session = StubSession(make_response(200, post_body()))
    client = LessWrongClient(config, session=session)
    
    client.get_post('7ZqGiPHTpiDMwqMN2')
    
    out = capsys.readouterr().out
    assert 'POST https://www.lesswrong.com/graphql' in out
    assert 'Twelve Virtues' in out


def test_context_manager_leaves_injected_session_open(config):
    session = StubSession()
    with LessWrongClient(config, session=session) as client:
        assert client.config is config
    assert not session.closed
