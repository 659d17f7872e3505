"""Shared fixtures: canned GraphQL payloads and a stub HTTP session."""

import copy
import json

import pytest
import requests

from lesswrong_client import LessWrongClient, LessWrongConfig


POST_RESULT = {
    '_id': '7ZqGiPHTpiDMwqMN2',
    'title': 'Twelve Virtues of Rationality',
    'slug': 'twelve-virtues-of-rationality',
    'pageUrl': 'https://www.lesswrong.com/posts/7ZqGiPHTpiDMwqMN2/twelve-virtues-of-rationality',
    'postedAt': '2006-01-01T08:00:05.370Z',
    'baseScore': 412.0,
    'wordCount': 2228,
    'htmlBody': '<p>The first virtue is curiosity.</p>',
    'author': 'Eliezer Yudkowsky',
    'user': {'displayName': 'Eliezer_Yudkowsky'},
    'contents': {'markdown': 'The first virtue is curiosity.'}
}


def make_comment(comment_id, parent=None, **overrides):
    """Build a raw comment entry as the comments query returns it."""
    raw = {
        '_id': comment_id,
        'parentCommentId': parent,
        'author': None,
        'user': {'displayName': f'user-{comment_id}'},
        'postedAt': '2010-05-04T12:30:00.000Z',
        'pageUrl': f'https://www.lesswrong.com/posts/7ZqGiPHTpiDMwqMN2?commentId={comment_id}',
        'baseScore': 5,
        'voteCount': 3,
        'htmlBody': f'<p>comment {comment_id}</p>',
        'deleted': False,
        'contents': {'markdown': f'comment {comment_id}'}
    }
    raw.update(overrides)
    return raw


def post_body(result=None):
    return {'data': {'post': {'result': copy.deepcopy(POST_RESULT) if result is None else result}}}


def comments_body(results):
    return {'data': {'comments': {'results': results}}}


def make_response(status_code=200, body=None, raw=None):
    """Build a real requests.Response carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response.url = 'https://www.lesswrong.com/graphql'
    if raw is None:
        raw = json.dumps(body).encode('utf-8')
    response._content = raw
    response.encoding = 'utf-8'
    return response


class StubSession:
    """Stand-in for requests.Session that replays queued outcomes."""
    
    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []
        self.closed = False
    
    def post(self, url, json=None, timeout=None):
        self.calls.append({'url': url, 'json': json, 'timeout': timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome
    
    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return LessWrongConfig(
        endpoint='https://www.lesswrong.com/graphql',
        timeout=5.0,
        user_agent='lesswrong-client-tests',
        comment_limit=50,
        debug=False
    )


@pytest.fixture
def client_for(config):
    """Factory returning a client wired to a StubSession replaying ``outcomes``."""
    def build(*outcomes):
        session = StubSession(*outcomes)
        return LessWrongClient(config, session=session), session
    return build
