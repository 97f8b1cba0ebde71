import pytest

from exceptions import InvalidTopicError
from magnet.topic import Topic, TopicKind

BTIH = '99ab87be389e5487ff626162a5a5988ce696574a'


@pytest.mark.parametrize('namespace,kind', [
    ('aich', TopicKind.AICH),
    ('bitprint', TopicKind.BITPRINT),
    ('btih', TopicKind.BITTORRENT),
    ('ed2k', TopicKind.ED2K),
    ('kzhash', TopicKind.KAZAA),
    ('md5', TopicKind.MD5),
    ('sha1', TopicKind.SHA1),
])
def test_known_namespaces(namespace, kind):
    assert Topic.parse(f'urn:{namespace}:ABC123') == Topic(kind, 'ABC123')


def test_btih():
    topic = Topic.parse(f'urn:btih:{BTIH}')
    assert topic.kind is TopicKind.BITTORRENT
    assert topic.value == BTIH
    assert str(topic) == f'urn:btih:{BTIH}'


def test_tree_tiger():
    assert Topic.parse('urn:tree:tiger:ABCDEF') == Topic(TopicKind.TTHASH, 'ABCDEF')
    assert str(Topic(TopicKind.TTHASH, 'ABCDEF')) == 'urn:tree:tiger:ABCDEF'


def test_three_segments_other_than_tree_tiger():
    with pytest.raises(InvalidTopicError) as exc:
        Topic.parse('urn:tree:other:ABCDEF')
    assert exc.value.diagnostic == 'urn:tree:other:ABCDEF'


def test_missing_urn_prefix_reports_whole_value():
    with pytest.raises(InvalidTopicError) as exc:
        Topic.parse('notaurn')
    assert exc.value.diagnostic == 'notaurn'
    assert exc.value.topic == 'notaurn'


def test_unknown_namespace_reports_namespace_only():
    with pytest.raises(InvalidTopicError) as exc:
        Topic.parse('urn:foo:bar')
    assert exc.value.diagnostic == 'foo'
    assert exc.value.topic == 'urn:foo:bar'


def test_namespace_match_is_case_sensitive():
    with pytest.raises(InvalidTopicError) as exc:
        Topic.parse('urn:BTIH:abc')
    assert exc.value.diagnostic == 'BTIH'


@pytest.mark.parametrize('value', [
    'urn:',
    'urn:btih',
    'urn:a:b:c:d',
    'urn:tree:tiger:a:b',
    'URN:btih:abc',
])
def test_bad_segment_counts(value):
    with pytest.raises(InvalidTopicError) as exc:
        Topic.parse(value)
    assert exc.value.diagnostic == value


def test_empty_hash_is_accepted():
    assert Topic.parse('urn:sha1:') == Topic(TopicKind.SHA1, '')


def test_lenient_unknown_namespace():
    topic = Topic.parse('urn:foo:bar', strict=False)
    assert topic == Topic(TopicKind.UNKNOWN, 'urn:foo:bar')
    assert str(topic) == 'urn:foo:bar'


def test_lenient_mode_still_rejects_bad_grammar():
    with pytest.raises(InvalidTopicError):
        Topic.parse('notaurn', strict=False)
    with pytest.raises(InvalidTopicError):
        Topic.parse('urn:tree:other:x', strict=False)


def test_to_dict():
    assert Topic(TopicKind.TTHASH, 'X').to_dict() == {
        'kind': 'TTHASH',
        'namespace': 'tree:tiger',
        'value': 'X'
    }
