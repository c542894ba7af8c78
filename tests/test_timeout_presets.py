from datetime import timedelta

import ollama
import pytest

from ollama_timeouts.domain.errors import NullClientError, TransportUnavailableError
from ollama_timeouts.domain.timeouts import TimeoutPreset
from ollama_timeouts.infrastructure.ollama.facade import (
    apply_preset,
    get_timeout,
    set_timeout,
    with_extended_timeout,
    with_long_timeout,
    with_quick_timeout,
    with_standard_timeout,
)


@pytest.mark.parametrize('helper, expected', [
    (with_quick_timeout, timedelta(minutes=2)),
    (with_standard_timeout, timedelta(minutes=5)),
    (with_long_timeout, timedelta(minutes=10)),
    (with_extended_timeout, timedelta(minutes=30)),
])
def test_preset_sets_fixed_duration_and_returns_client(raw_client, helper, expected):
    result = helper(raw_client)
    assert result is raw_client
    assert get_timeout(raw_client) == expected


def test_presets_are_strictly_ordered():
    helpers = [with_quick_timeout, with_standard_timeout, with_long_timeout, with_extended_timeout]
    timeouts = [get_timeout(helper(ollama.Client(host='http://localhost:11434'))) for helper in helpers]
    assert timeouts == sorted(timeouts)
    assert len(set(timeouts)) == 4


def test_preset_overrides_previous_timeout(raw_client):
    set_timeout(raw_client, timedelta(seconds=30))
    with_long_timeout(raw_client)
    assert get_timeout(raw_client) == timedelta(minutes=10)


def test_later_call_overrides_preset(raw_client):
    set_timeout(with_quick_timeout(raw_client), timedelta(minutes=3))
    assert get_timeout(raw_client) == timedelta(minutes=3)


def test_presets_reject_none_client():
    for helper in (with_quick_timeout, with_standard_timeout, with_long_timeout, with_extended_timeout):
        with pytest.raises(NullClientError):
            helper(None)


def test_presets_raise_when_transport_unavailable(detached_client):
    for helper in (with_quick_timeout, with_standard_timeout, with_long_timeout, with_extended_timeout):
        with pytest.raises(TransportUnavailableError):
            helper(detached_client)


def test_preset_enum_matches_helpers():
    assert TimeoutPreset.QUICK.duration == timedelta(minutes=2)
    assert TimeoutPreset.STANDARD.duration == timedelta(minutes=5)
    assert TimeoutPreset.LONG.duration == timedelta(minutes=10)
    assert TimeoutPreset.EXTENDED.duration == timedelta(minutes=30)


def test_preset_from_name_is_case_insensitive():
    assert TimeoutPreset.from_name(' Extended ') is TimeoutPreset.EXTENDED
    assert TimeoutPreset.from_name('quick') is TimeoutPreset.QUICK


def test_preset_from_name_rejects_unknown():
    with pytest.raises(ValueError, match='forever'):
        TimeoutPreset.from_name('forever')


def test_apply_preset_by_enum_and_name(raw_client):
    assert apply_preset(raw_client, TimeoutPreset.LONG) is raw_client
    assert get_timeout(raw_client) == timedelta(minutes=10)
    apply_preset(raw_client, 'quick')
    assert get_timeout(raw_client) == timedelta(minutes=2)


def test_apply_unknown_preset_leaves_timeout_unchanged(raw_client):
    with_standard_timeout(raw_client)
    with pytest.raises(ValueError):
        apply_preset(raw_client, 'forever')
    assert get_timeout(raw_client) == timedelta(minutes=5)
